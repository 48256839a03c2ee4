"""Server status shapes.

Source: https://api.artifactsmmo.com/docs/#/operations/get_status__get
"""

from datetime import datetime

from pydantic import BaseModel


class AnnouncementSchema(BaseModel):
    message: str
    created_at: datetime


class StatusSchema(BaseModel):
    status: str
    version: str
    characters_online: int
    announcements: list[AnnouncementSchema] = []
    # The upstream docs do not specify a format for these two, keep them opaque.
    last_wipe: str
    next_wipe: str
