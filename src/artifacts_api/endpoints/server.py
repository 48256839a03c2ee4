"""Source: https://api.artifactsmmo.com/docs/#/operations/get_status__get"""

from artifacts_api.operations import Operation
from artifacts_api.rate_limits import DATA_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, build_request
from artifacts_api.schemas import ResponseSchema, StatusSchema


def get_status() -> RequestDescriptor[ResponseSchema[StatusSchema]]:
    """Server status, also usable as a liveness probe."""
    return build_request(Operation.GET_STATUS, Method.GET, "/", rate_limit=DATA_RATE_LIMIT)
