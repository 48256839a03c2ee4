"""Resource shape.

Source: https://api.artifactsmmo.com/docs/#/operations/get_resources_resources__code__get
"""

from pydantic import BaseModel

from artifacts_api.schemas.drop import DropRateSchema
from artifacts_api.schemas.skill import SkillSchema


class ResourceSchema(BaseModel):
    name: str
    code: str
    skill: SkillSchema
    level: int
    drops: list[DropRateSchema] = []
