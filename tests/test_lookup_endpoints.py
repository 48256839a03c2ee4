import pytest

from artifacts_api.endpoints import (
    create_account,
    create_character,
    generate_token,
    get_character,
    get_ge_item,
    get_item,
    get_map,
    get_monster,
    get_resource,
    get_status,
)
from artifacts_api.errors import InvalidInput
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method


class TestGetByCode:
    @pytest.mark.parametrize("builder, path, operation", [
        (get_item, "/items/copper_ore", Operation.GET_ITEM),
        (get_monster, "/monsters/copper_ore", Operation.GET_MONSTER),
        (get_resource, "/resources/copper_ore", Operation.GET_RESOURCE),
        (get_ge_item, "/ge/copper_ore", Operation.GET_GE_ITEM),
    ])
    def test_path_and_metadata(self, builder, path, operation):
        request = builder("copper_ore")
        assert request.method is Method.GET
        assert request.path == path
        assert request.headers == (("Accept", "application/json"),)
        assert request.rate_limit is DATA_RATE_LIMIT
        assert request.operation is operation

    @pytest.mark.parametrize("builder", [get_item, get_monster, get_resource, get_ge_item, get_character])
    @pytest.mark.parametrize("code", ["", "../accounts", "a/b", "a?b", "a b", "a%2Fb", None])
    def test_rejects_invalid_codes(self, builder, code):
        with pytest.raises(InvalidInput):
            builder(code)


class TestCharacters:
    def test_get_character(self):
        request = get_character("Hero-1")
        assert request.path == "/characters/Hero-1"
        assert request.operation is Operation.GET_CHARACTER

    def test_create_character(self):
        request = create_character("my.token-123", "Hero", "men1")
        assert request.method is Method.POST
        assert request.path == "/characters/create"
        assert request.header("Authorization") == "Bearer my.token-123"
        assert request.header("Content-Type") == "application/json"
        assert request.body == b'{"name":"Hero","skin":"men1"}'
        assert request.rate_limit is DATA_RATE_LIMIT

    @pytest.mark.parametrize("token, name, skin", [
        ("", "Hero", "men1"),
        ("tok\r\nX-Evil: 1", "Hero", "men1"),
        ("token", "bad name", "men1"),
        ("token", "Hero", ""),
    ])
    def test_create_character_rejects(self, token, name, skin):
        with pytest.raises(InvalidInput):
            create_character(token, name, skin)


class TestMaps:
    @pytest.mark.parametrize("x, y, path", [(0, 0, "/maps/0/0"), (-1, 5, "/maps/-1/5"), (12, -3, "/maps/12/-3")])
    def test_coordinates(self, x, y, path):
        assert get_map(x, y).path == path

    @pytest.mark.parametrize("x, y", [("1", 2), (1, 2.5), (None, 0)])
    def test_rejects_non_integers(self, x, y):
        with pytest.raises(InvalidInput):
            get_map(x, y)


class TestStatus:
    def test_status(self):
        request = get_status()
        assert request.method is Method.GET
        assert request.path == "/"
        assert request.body == b""
        assert request.operation is Operation.GET_STATUS


class TestIdempotence:
    @pytest.mark.parametrize("build", [
        lambda: get_status(),
        lambda: get_item("copper_ore"),
        lambda: get_map(-1, 2),
        lambda: create_character("token", "Hero", "men1"),
        lambda: create_account("player_one", "s3cr3t!", "player@example.com"),
        lambda: generate_token("user.name", "secret pass"),
    ])
    def test_same_input_same_descriptor(self, build):
        first, second = build(), build()
        assert first == second
        assert first.model_dump() == second.model_dump()
