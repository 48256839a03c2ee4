"""Map endpoints."""

from dataclasses import dataclass

from artifacts_api.endpoints.pagination import PageRequest, page_query
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, build_request
from artifacts_api.schemas import MapContentTypeSchema, MapSchema, PaginatedResponseSchema, ResponseSchema
from artifacts_api.values import Code, Coordinate, enum_value, optional


@dataclass(frozen=True)
class GetAllMapsRequest(PageRequest):
    content_code: str | None = None
    content_type: MapContentTypeSchema | str | None = None


def get_all_maps(
    request: GetAllMapsRequest = GetAllMapsRequest(),
) -> RequestDescriptor[PaginatedResponseSchema[MapSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_all_maps_maps__get"""
    query = page_query(request)
    query.append(("content_code", optional(Code, request.content_code)))
    if request.content_type is not None:
        query.append(("content_type", enum_value(MapContentTypeSchema, request.content_type)))

    return build_request(
        Operation.GET_ALL_MAPS,
        Method.GET,
        "/maps/",
        query_params=query,
        rate_limit=DATA_RATE_LIMIT,
    )


def get_map(x: int, y: int) -> RequestDescriptor[ResponseSchema[MapSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_map_maps__x___y__get"""
    return build_request(
        Operation.GET_MAP,
        Method.GET,
        "/maps/{x}/{y}",
        path_params={"x": Coordinate.of(x), "y": Coordinate.of(y)},
        rate_limit=DATA_RATE_LIMIT,
    )
