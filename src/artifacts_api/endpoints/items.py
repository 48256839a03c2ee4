"""Item endpoints."""

from dataclasses import dataclass

from artifacts_api.endpoints.pagination import PageRequest, page_query
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, build_request
from artifacts_api.schemas import ItemSchema, PaginatedResponseSchema, ResponseSchema, SingleItemSchema
from artifacts_api.values import Code, Level, optional


@dataclass(frozen=True)
class GetAllItemsRequest(PageRequest):
    drop: str | None = None
    max_level: int | None = None
    min_level: int | None = None


def get_all_items(
    request: GetAllItemsRequest = GetAllItemsRequest(),
) -> RequestDescriptor[PaginatedResponseSchema[ItemSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_all_items_items__get"""
    query = page_query(request)
    query.append(("drop", optional(Code, request.drop)))
    query.append(("max_level", optional(Level, request.max_level)))
    query.append(("min_level", optional(Level, request.min_level)))

    return build_request(
        Operation.GET_ALL_ITEMS,
        Method.GET,
        "/items/",
        query_params=query,
        rate_limit=DATA_RATE_LIMIT,
    )


def get_item(code: str) -> RequestDescriptor[ResponseSchema[SingleItemSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_item_items__code__get"""
    return build_request(
        Operation.GET_ITEM,
        Method.GET,
        "/items/{code}",
        path_params={"code": Code.of(code)},
        rate_limit=DATA_RATE_LIMIT,
    )
