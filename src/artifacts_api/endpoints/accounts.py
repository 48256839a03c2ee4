"""Source: https://api.artifactsmmo.com/docs/#/operations/create_account_accounts_create_post"""

from artifacts_api.operations import Operation
from artifacts_api.rate_limits import ACCOUNT_CREATION_RATE_LIMIT
from artifacts_api.request import Method, RequestDescriptor, build_request
from artifacts_api.schemas import MessageSchema
from artifacts_api.values import Email, Password, Username


def create_account(username: str, password: str, email: str) -> RequestDescriptor[MessageSchema]:
    """Register a new account."""
    username = Username.of(username)
    password = Password.of(password)
    email = Email.of(email)

    return build_request(
        Operation.CREATE_ACCOUNT,
        Method.POST,
        "/accounts/create",
        body={
            "username": username.value,
            "password": password.value,
            "email": email.value,
        },
        rate_limit=ACCOUNT_CREATION_RATE_LIMIT,
    )
