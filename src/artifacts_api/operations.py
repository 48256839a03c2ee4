"""The closed set of API operations, one per endpoint builder."""

from enum import Enum


class Operation(str, Enum):
    CREATE_ACCOUNT = "create_account"
    CREATE_CHARACTER = "create_character"
    GET_ALL_CHARACTERS = "get_all_characters"
    GET_CHARACTER = "get_character"
    GET_ALL_EVENTS = "get_all_events"
    GET_ALL_GE_ITEMS = "get_all_ge_items"
    GET_GE_ITEM = "get_ge_item"
    GET_ALL_ITEMS = "get_all_items"
    GET_ITEM = "get_item"
    GET_ALL_MAPS = "get_all_maps"
    GET_MAP = "get_map"
    GET_ALL_MONSTERS = "get_all_monsters"
    GET_MONSTER = "get_monster"
    GET_ALL_RESOURCES = "get_all_resources"
    GET_RESOURCE = "get_resource"
    GET_STATUS = "get_status"
    GENERATE_TOKEN = "generate_token"
