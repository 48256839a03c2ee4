"""Map tile shapes."""

from enum import Enum

from pydantic import BaseModel


class MapContentTypeSchema(str, Enum):
    MONSTER = "monster"
    RESOURCE = "resource"
    WORKSHOP = "workshop"
    BANK = "bank"
    GRAND_EXCHANGE = "grand_exchange"
    TASKS_MASTER = "tasks_master"


class MapContentSchema(BaseModel):
    type: MapContentTypeSchema
    code: str


class MapSchema(BaseModel):
    name: str
    skin: str
    x: int
    y: int
    content: MapContentSchema | None = None
