"""Sans-I/O request builders for the Artifacts MMO API.

Builders in ``artifacts_api.endpoints`` validate caller input and return a
RequestDescriptor; ``artifacts_api.transport`` hands it to ``requests`` and
``artifacts_api.correlation`` decodes the response body into the shape the
operation promises.
"""

from artifacts_api.correlation import RESPONSE_SCHEMAS, decode_response, response_schema
from artifacts_api.errors import ArtifactsApiError, EncodingError, InvalidInput
from artifacts_api.operations import Operation
from artifacts_api.request import API_BASE_URL, API_VERSION, Method, RequestDescriptor

__version__ = "0.1.0"

__all__ = [
    "API_BASE_URL",
    "API_VERSION",
    "ArtifactsApiError",
    "EncodingError",
    "InvalidInput",
    "Method",
    "Operation",
    "RESPONSE_SCHEMAS",
    "RequestDescriptor",
    "decode_response",
    "response_schema",
]
