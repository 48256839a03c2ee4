"""Grand Exchange endpoints."""

from artifacts_api.endpoints.pagination import PageRequest, page_query
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, build_request
from artifacts_api.schemas import GEItemSchema, PaginatedResponseSchema, ResponseSchema
from artifacts_api.values import Code


def get_all_ge_items(
    request: PageRequest = PageRequest(),
) -> RequestDescriptor[PaginatedResponseSchema[GEItemSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_all_ge_items_ge__get"""
    return build_request(
        Operation.GET_ALL_GE_ITEMS,
        Method.GET,
        "/ge/",
        query_params=page_query(request),
        rate_limit=DATA_RATE_LIMIT,
    )


def get_ge_item(code: str) -> RequestDescriptor[ResponseSchema[GEItemSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_ge_item_ge__code__get"""
    return build_request(
        Operation.GET_GE_ITEM,
        Method.GET,
        "/ge/{code}",
        path_params={"code": Code.of(code)},
        rate_limit=DATA_RATE_LIMIT,
    )
