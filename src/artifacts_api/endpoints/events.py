"""Source: https://api.artifactsmmo.com/docs/#/operations/get_all_events_events__get"""

from artifacts_api.endpoints.pagination import PageRequest, page_query
from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, build_request
from artifacts_api.schemas import ActiveEventSchema, PaginatedResponseSchema


def get_all_events(
    request: PageRequest = PageRequest(),
) -> RequestDescriptor[PaginatedResponseSchema[ActiveEventSchema]]:
    """Events currently active on the map."""
    return build_request(
        Operation.GET_ALL_EVENTS,
        Method.GET,
        "/events/",
        query_params=page_query(request),
        rate_limit=DATA_RATE_LIMIT,
    )
