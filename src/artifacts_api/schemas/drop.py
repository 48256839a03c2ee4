from pydantic import BaseModel, Field


class DropRateSchema(BaseModel):
    """Chance (1 in ``rate``) of dropping ``code`` in the given quantity range."""

    code: str
    rate: int = Field(ge=1)
    min_quantity: int = Field(ge=0)
    max_quantity: int = Field(ge=0)
