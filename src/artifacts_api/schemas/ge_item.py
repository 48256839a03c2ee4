"""Grand Exchange listing."""

from pydantic import BaseModel, Field


class GEItemSchema(BaseModel):
    code: str
    stock: int = Field(ge=0)
    sell_price: int | None = None
    buy_price: int | None = None
