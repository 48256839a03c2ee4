import pytest
from pydantic import ValidationError

from artifacts_api.schemas import (
    ActiveEventSchema,
    MapContentTypeSchema,
    MapSchema,
    MonsterSchema,
    PaginatedResponseSchema,
    ResourceSchema,
    ResponseSchema,
    SingleItemSchema,
    SkillSchema,
)


class TestItemShapes:
    def test_single_item_with_craft_and_ge(self):
        item = SingleItemSchema.model_validate({
            "item": {
                "name": "Copper Dagger",
                "code": "copper_dagger",
                "level": 1,
                "type": "weapon",
                "subtype": "",
                "description": "",
                "effects": [{"name": "attack_air", "value": 6}],
                "craft": {
                    "skill": "weaponcrafting",
                    "level": 1,
                    "items": [{"code": "copper", "quantity": 6}],
                    "quantity": 1,
                },
            },
            "ge": {"code": "copper_dagger", "stock": 100, "sell_price": 3, "buy_price": 5},
        })
        assert item.item.craft.items[0].quantity == 6
        assert item.ge.buy_price == 5

    def test_unknown_fields_ignored(self):
        monster = MonsterSchema.model_validate({
            "name": "Chicken", "code": "chicken", "level": 1, "hp": 60, "brand_new_field": True,
        })
        assert monster.drops == []


class TestGatheringShapes:
    def test_resource(self):
        resource = ResourceSchema.model_validate({
            "name": "Ash Tree",
            "code": "ash_tree",
            "skill": "woodcutting",
            "level": 1,
            "drops": [{"code": "ash_wood", "rate": 1, "min_quantity": 1, "max_quantity": 1}],
        })
        assert resource.skill is SkillSchema.WOODCUTTING

    def test_resource_unknown_skill(self):
        with pytest.raises(ValidationError):
            ResourceSchema.model_validate({"name": "x", "code": "x", "skill": "cooking", "level": 1})


class TestMapShapes:
    def test_map_content(self):
        tile = MapSchema.model_validate({
            "name": "Forest", "skin": "forest_1", "x": -1, "y": 0,
            "content": {"type": "resource", "code": "ash_tree"},
        })
        assert tile.content.type is MapContentTypeSchema.RESOURCE

    def test_event(self):
        event = ActiveEventSchema.model_validate({
            "name": "Portal",
            "map": {"name": "Portal", "skin": "portal", "x": 5, "y": 5},
            "previous_skin": "forest_1",
            "duration": 60,
            "expiration": "2024-05-01T11:00:00Z",
            "created_at": "2024-05-01T10:00:00Z",
        })
        assert event.map.content is None
        assert event.expiration > event.created_at


class TestEnvelopes:
    def test_paginated_requires_page_and_size(self):
        with pytest.raises(ValidationError):
            PaginatedResponseSchema[MapSchema].model_validate({"data": []})

    def test_paginated_total_and_pages_optional(self):
        page = PaginatedResponseSchema[MapSchema].model_validate({"data": [], "page": 1, "size": 50})
        assert page.total is None
        assert page.pages is None

    def test_single_envelope(self):
        with pytest.raises(ValidationError):
            ResponseSchema[MapSchema].model_validate({"data": {"name": "x"}})
