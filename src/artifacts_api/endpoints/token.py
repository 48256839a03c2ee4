"""Source: https://api.artifactsmmo.com/docs/#/operations/generate_token_token__post"""

from artifacts_api.operations import Operation
from artifacts_api.rate_limits import TOKEN_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, basic_auth, build_request
from artifacts_api.schemas import TokenSchema
from artifacts_api.values import LoginName, LoginPassword


def generate_token(username: str, password: str) -> RequestDescriptor[TokenSchema]:
    """Exchange account credentials for a bearer token (HTTP Basic, no body)."""
    username = LoginName.of(username)
    password = LoginPassword.of(password)

    return build_request(
        Operation.GENERATE_TOKEN,
        Method.POST,
        "/token/",
        headers=[basic_auth(username, password)],
        rate_limit=TOKEN_RATE_LIMIT,
    )
