"""Item and craft shapes.

Source: https://api.artifactsmmo.com/docs/#/operations/get_item_items__code__get
"""

from pydantic import BaseModel, Field

from artifacts_api.schemas.ge_item import GEItemSchema
from artifacts_api.schemas.skill import CraftSkillSchema


class SimpleItemSchema(BaseModel):
    code: str
    quantity: int = Field(ge=0)


class ItemEffectSchema(BaseModel):
    name: str
    value: int


class CraftSchema(BaseModel):
    skill: CraftSkillSchema
    level: int
    items: list[SimpleItemSchema] = []
    quantity: int = Field(ge=0)


class ItemSchema(BaseModel):
    name: str
    code: str
    level: int
    type: str
    subtype: str = ""
    description: str = ""
    effects: list[ItemEffectSchema] = []
    craft: CraftSchema | None = None


class SingleItemSchema(BaseModel):
    """An item together with its Grand Exchange listing, if it is tradeable."""

    item: ItemSchema
    ge: GEItemSchema | None = None
