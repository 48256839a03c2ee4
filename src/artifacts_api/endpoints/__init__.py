"""Endpoint builders, one per API operation.

Every builder validates its input, assembles path and query, picks the fixed
rate limit category of the operation and returns a RequestDescriptor.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import NamedTuple

from artifacts_api.endpoints.accounts import create_account
from artifacts_api.endpoints.characters import (
    GetAllCharactersRequest,
    create_character,
    get_all_characters,
    get_character,
)
from artifacts_api.endpoints.events import get_all_events
from artifacts_api.endpoints.grand_exchange import get_all_ge_items, get_ge_item
from artifacts_api.endpoints.items import GetAllItemsRequest, get_all_items, get_item
from artifacts_api.endpoints.maps import GetAllMapsRequest, get_all_maps, get_map
from artifacts_api.endpoints.monsters import GetAllMonstersRequest, get_all_monsters, get_monster
from artifacts_api.endpoints.pagination import DEFAULT_PAGE, DEFAULT_SIZE, PageRequest
from artifacts_api.endpoints.resources import GetAllResourcesRequest, get_all_resources, get_resource
from artifacts_api.endpoints.server import get_status
from artifacts_api.endpoints.token import generate_token
from artifacts_api.operations import Operation
from artifacts_api.request import RequestDescriptor


class Endpoint(NamedTuple):
    """A builder and, for list operations, the record type it takes."""

    builder: Callable[..., RequestDescriptor]
    request_type: type[PageRequest] | None = None

    def build(self, **params) -> RequestDescriptor:
        """Call the builder with keyword parameters, wrapping them in the record if it takes one."""
        if self.request_type is not None:
            return self.builder(self.request_type(**params))
        return self.builder(**params)


ENDPOINTS = MappingProxyType({
    Operation.CREATE_ACCOUNT: Endpoint(create_account),
    Operation.CREATE_CHARACTER: Endpoint(create_character),
    Operation.GET_ALL_CHARACTERS: Endpoint(get_all_characters, GetAllCharactersRequest),
    Operation.GET_CHARACTER: Endpoint(get_character),
    Operation.GET_ALL_EVENTS: Endpoint(get_all_events, PageRequest),
    Operation.GET_ALL_GE_ITEMS: Endpoint(get_all_ge_items, PageRequest),
    Operation.GET_GE_ITEM: Endpoint(get_ge_item),
    Operation.GET_ALL_ITEMS: Endpoint(get_all_items, GetAllItemsRequest),
    Operation.GET_ITEM: Endpoint(get_item),
    Operation.GET_ALL_MAPS: Endpoint(get_all_maps, GetAllMapsRequest),
    Operation.GET_MAP: Endpoint(get_map),
    Operation.GET_ALL_MONSTERS: Endpoint(get_all_monsters, GetAllMonstersRequest),
    Operation.GET_MONSTER: Endpoint(get_monster),
    Operation.GET_ALL_RESOURCES: Endpoint(get_all_resources, GetAllResourcesRequest),
    Operation.GET_RESOURCE: Endpoint(get_resource),
    Operation.GET_STATUS: Endpoint(get_status),
    Operation.GENERATE_TOKEN: Endpoint(generate_token),
})

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_SIZE",
    "ENDPOINTS",
    "Endpoint",
    "GetAllCharactersRequest",
    "GetAllItemsRequest",
    "GetAllMapsRequest",
    "GetAllMonstersRequest",
    "GetAllResourcesRequest",
    "PageRequest",
    "create_account",
    "create_character",
    "generate_token",
    "get_all_characters",
    "get_all_events",
    "get_all_ge_items",
    "get_all_items",
    "get_all_maps",
    "get_all_monsters",
    "get_all_resources",
    "get_character",
    "get_ge_item",
    "get_item",
    "get_map",
    "get_monster",
    "get_resource",
    "get_status",
]
