"""Response shapes decoded from Artifacts API JSON bodies."""

from artifacts_api.schemas.character import CharacterSchema, InventorySlot
from artifacts_api.schemas.drop import DropRateSchema
from artifacts_api.schemas.event import ActiveEventSchema
from artifacts_api.schemas.ge_item import GEItemSchema
from artifacts_api.schemas.item import (
    CraftSchema,
    ItemEffectSchema,
    ItemSchema,
    SimpleItemSchema,
    SingleItemSchema,
)
from artifacts_api.schemas.map import MapContentSchema, MapContentTypeSchema, MapSchema
from artifacts_api.schemas.monster import MonsterSchema
from artifacts_api.schemas.resource import ResourceSchema
from artifacts_api.schemas.response import MessageSchema, PaginatedResponseSchema, ResponseSchema
from artifacts_api.schemas.skill import CraftSkillSchema, SkillSchema
from artifacts_api.schemas.status import AnnouncementSchema, StatusSchema
from artifacts_api.schemas.token import TokenSchema

__all__ = [
    "ActiveEventSchema",
    "AnnouncementSchema",
    "CharacterSchema",
    "CraftSchema",
    "CraftSkillSchema",
    "DropRateSchema",
    "GEItemSchema",
    "InventorySlot",
    "ItemEffectSchema",
    "ItemSchema",
    "MapContentSchema",
    "MapContentTypeSchema",
    "MapSchema",
    "MessageSchema",
    "MonsterSchema",
    "PaginatedResponseSchema",
    "ResourceSchema",
    "ResponseSchema",
    "SimpleItemSchema",
    "SingleItemSchema",
    "SkillSchema",
    "StatusSchema",
    "TokenSchema",
]
