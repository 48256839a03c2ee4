"""Character shape.

Source: https://api.artifactsmmo.com/docs/#/operations/get_character_characters__name__get
"""

from datetime import datetime

from pydantic import BaseModel, Field


class InventorySlot(BaseModel):
    slot: int = Field(ge=1)
    code: str
    quantity: int = Field(ge=0)


class CharacterSchema(BaseModel):
    name: str
    skin: str
    level: int
    xp: int
    max_xp: int
    total_xp: int = 0
    gold: int
    speed: int = 0
    hp: int
    haste: int = 0
    x: int
    y: int

    mining_level: int = 1
    mining_xp: int = 0
    woodcutting_level: int = 1
    woodcutting_xp: int = 0
    fishing_level: int = 1
    fishing_xp: int = 0
    weaponcrafting_level: int = 1
    weaponcrafting_xp: int = 0
    gearcrafting_level: int = 1
    gearcrafting_xp: int = 0
    jewelrycrafting_level: int = 1
    jewelrycrafting_xp: int = 0
    cooking_level: int = 1
    cooking_xp: int = 0

    cooldown: int = 0
    cooldown_expiration: datetime | None = None

    weapon_slot: str = ""
    shield_slot: str = ""
    helmet_slot: str = ""
    body_armor_slot: str = ""
    leg_armor_slot: str = ""
    boots_slot: str = ""
    ring1_slot: str = ""
    ring2_slot: str = ""
    amulet_slot: str = ""

    task: str = ""
    task_type: str = ""
    task_progress: int = 0
    task_total: int = 0

    inventory_max_items: int = 0
    inventory: list[InventorySlot] = []
