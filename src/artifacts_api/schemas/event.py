from datetime import datetime

from pydantic import BaseModel

from artifacts_api.schemas.map import MapSchema


class ActiveEventSchema(BaseModel):
    """A temporary event that changed the content of a map tile."""

    name: str
    map: MapSchema
    previous_skin: str
    duration: int
    expiration: datetime
    created_at: datetime
