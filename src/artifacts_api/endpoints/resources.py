"""Resource endpoints."""

from dataclasses import dataclass

from artifacts_api.endpoints.pagination import PageRequest, page_query
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, build_request
from artifacts_api.schemas import PaginatedResponseSchema, ResourceSchema, ResponseSchema, SkillSchema
from artifacts_api.values import Code, Level, enum_value, optional


@dataclass(frozen=True)
class GetAllResourcesRequest(PageRequest):
    skill: SkillSchema | str | None = None
    max_level: int | None = None
    min_level: int | None = None


def get_all_resources(
    request: GetAllResourcesRequest = GetAllResourcesRequest(),
) -> RequestDescriptor[PaginatedResponseSchema[ResourceSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_all_resources_resources__get"""
    query = page_query(request)
    if request.skill is not None:
        query.append(("skill", enum_value(SkillSchema, request.skill)))
    query.append(("max_level", optional(Level, request.max_level)))
    query.append(("min_level", optional(Level, request.min_level)))

    return build_request(
        Operation.GET_ALL_RESOURCES,
        Method.GET,
        "/resources/",
        query_params=query,
        rate_limit=DATA_RATE_LIMIT,
    )


def get_resource(code: str) -> RequestDescriptor[ResponseSchema[ResourceSchema]]:
    """Source: https://api.artifactsmmo.com/docs/#/operations/get_resources_resources__code__get"""
    return build_request(
        Operation.GET_RESOURCE,
        Method.GET,
        "/resources/{code}",
        path_params={"code": Code.of(code)},
        rate_limit=DATA_RATE_LIMIT,
    )
