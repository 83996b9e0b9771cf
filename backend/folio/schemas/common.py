"""Common schemas used across the API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model for payloads exchanged with the holdings and ledger services.

    Upstream services speak camelCase JSON; fields are declared in snake_case
    and accept either spelling on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests.

    Attributes:
        detail: Human-readable error message
    """

    detail: str = Field(..., description="Human-readable error message")
