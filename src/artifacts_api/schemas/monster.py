"""Monster shape.

Source: https://api.artifactsmmo.com/docs/#/operations/get_monster_monsters__code__get
"""

from pydantic import BaseModel

from artifacts_api.schemas.drop import DropRateSchema


class MonsterSchema(BaseModel):
    name: str
    code: str
    level: int
    hp: int
    attack_fire: int = 0
    attack_earth: int = 0
    attack_water: int = 0
    attack_air: int = 0
    res_fire: int = 0
    res_earth: int = 0
    res_water: int = 0
    res_air: int = 0
    min_gold: int = 0
    max_gold: int = 0
    drops: list[DropRateSchema] = []
