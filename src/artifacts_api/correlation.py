"""Which response shape belongs to which operation.

Every Operation maps to exactly one model. The mapping is keyed by the
operation tag the builder stamps on its descriptor, so callers decode a
response without restating the expected shape.
"""

from types import MappingProxyType
from typing import TypeVar

from pydantic import BaseModel

from artifacts_api.operations import Operation
from artifacts_api.request import RequestDescriptor
from artifacts_api.schemas import (
    ActiveEventSchema,
    CharacterSchema,
    GEItemSchema,
    ItemSchema,
    MapSchema,
    MessageSchema,
    MonsterSchema,
    PaginatedResponseSchema,
    ResourceSchema,
    ResponseSchema,
    SingleItemSchema,
    StatusSchema,
    TokenSchema,
)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

RESPONSE_SCHEMAS: MappingProxyType[Operation, type[BaseModel]] = MappingProxyType({
    Operation.CREATE_ACCOUNT: MessageSchema,
    Operation.CREATE_CHARACTER: ResponseSchema[CharacterSchema],
    Operation.GET_ALL_CHARACTERS: PaginatedResponseSchema[CharacterSchema],
    Operation.GET_CHARACTER: ResponseSchema[CharacterSchema],
    Operation.GET_ALL_EVENTS: PaginatedResponseSchema[ActiveEventSchema],
    Operation.GET_ALL_GE_ITEMS: PaginatedResponseSchema[GEItemSchema],
    Operation.GET_GE_ITEM: ResponseSchema[GEItemSchema],
    Operation.GET_ALL_ITEMS: PaginatedResponseSchema[ItemSchema],
    Operation.GET_ITEM: ResponseSchema[SingleItemSchema],
    Operation.GET_ALL_MAPS: PaginatedResponseSchema[MapSchema],
    Operation.GET_MAP: ResponseSchema[MapSchema],
    Operation.GET_ALL_MONSTERS: PaginatedResponseSchema[MonsterSchema],
    Operation.GET_MONSTER: ResponseSchema[MonsterSchema],
    Operation.GET_ALL_RESOURCES: PaginatedResponseSchema[ResourceSchema],
    Operation.GET_RESOURCE: ResponseSchema[ResourceSchema],
    Operation.GET_STATUS: ResponseSchema[StatusSchema],
    Operation.GENERATE_TOKEN: TokenSchema,
})


def response_schema(operation: Operation) -> type[BaseModel]:
    """Return the model a successful response to ``operation`` decodes into."""
    return RESPONSE_SCHEMAS[operation]


def decode_response(request: RequestDescriptor[ResponseT], raw: bytes | str) -> ResponseT:
    """Decode a response body with the shape associated to ``request``.

    Raises pydantic.ValidationError when the body does not fit the shape.
    """
    return response_schema(request.operation).model_validate_json(raw)
