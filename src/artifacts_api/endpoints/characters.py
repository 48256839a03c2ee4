"""Character endpoints."""

from dataclasses import dataclass

from artifacts_api.endpoints.pagination import PageRequest, page_query
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, bearer_auth, build_request
from artifacts_api.schemas import (
    CharacterSchema,
    CraftSkillSchema,
    PaginatedResponseSchema,
    ResponseSchema,
)
from artifacts_api.values import BearerToken, Name, Skin, enum_value


@dataclass(frozen=True)
class GetAllCharactersRequest(PageRequest):
    """Paging plus an optional skill to sort the leaderboard by."""

    sort: CraftSkillSchema | str | None = None


def create_character(token: str, name: str, skin: str) -> RequestDescriptor[ResponseSchema[CharacterSchema]]:
    """Create a character on the account that owns ``token``.

    Source: https://api.artifactsmmo.com/docs/#/operations/create_character_characters_create_post
    """
    token = BearerToken.of(token)
    name = Name.of(name)
    skin = Skin.of(skin)

    return build_request(
        Operation.CREATE_CHARACTER,
        Method.POST,
        "/characters/create",
        headers=[bearer_auth(token)],
        body={"name": name.value, "skin": skin.value},
        rate_limit=DATA_RATE_LIMIT,
    )


def get_all_characters(
    request: GetAllCharactersRequest = GetAllCharactersRequest(),
) -> RequestDescriptor[PaginatedResponseSchema[CharacterSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_all_characters_characters__get"""
    query = page_query(request)
    if request.sort is not None:
        query.append(("sort", enum_value(CraftSkillSchema, request.sort)))

    return build_request(
        Operation.GET_ALL_CHARACTERS,
        Method.GET,
        "/characters/",
        query_params=query,
        rate_limit=DATA_RATE_LIMIT,
    )


def get_character(name: str) -> RequestDescriptor[ResponseSchema[CharacterSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_character_characters__name__get"""
    return build_request(
        Operation.GET_CHARACTER,
        Method.GET,
        "/characters/{name}",
        path_params={"name": Name.of(name)},
        rate_limit=DATA_RATE_LIMIT,
    )
