"""Source: https://api.artifactsmmo.com/docs/#/operations/generate_token_token__post"""

from pydantic import BaseModel


class TokenSchema(BaseModel):
    token: str
