"""Public exceptions for the ProductBoard SDK."""

from typing import Any


class ProductBoardError(Exception):
    """Base exception for all ProductBoard SDK errors."""


class ConfigurationError(ProductBoardError, ValueError):
    """Configuration error (unknown option, unsupported auth type, missing env vars)."""


class MissingRelationError(ProductBoardError, ValueError):
    """A declared belongs_to relation was not supplied when building a resource."""

    def __init__(self, relation: str, resource: str) -> None:
        super().__init__(f"Required option {relation!r} missing for {resource}")
        self.relation = relation
        self.resource = resource


class HTTPError(ProductBoardError):
    """Non-2xx response from the ProductBoard API.

    The raw response is kept on the error so callers can inspect the body.
    """

    def __init__(self, response: Any) -> None:
        self.response = response
        self.status_code: int | None = getattr(response, "status_code", None)
        self.message: str = getattr(response, "reason_phrase", "") or getattr(
            response, "text", ""
        )
        super().__init__(self.message)

    @property
    def code(self) -> int | None:
        """Alias for status_code."""
        return self.status_code
