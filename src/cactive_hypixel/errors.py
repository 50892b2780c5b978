"""
Cactive Hypixel API error types.

Every failure carries the full list of normalized errors; the scalar
attributes mirror the first entry for convenience.
"""

from cactive_hypixel.models.envelope import NormalizedError


class HypixelAPIError(Exception):
    def __init__(self, errors: list[NormalizedError]):
        if not errors:
            raise ValueError("HypixelAPIError requires at least one error")
        super().__init__(errors[0].message)
        self.errors = errors

    @property
    def type(self) -> str:
        return self.errors[0].type

    @property
    def code(self) -> int:
        return self.errors[0].code

    @property
    def internal(self) -> bool:
        return self.errors[0].internal


class TransportError(HypixelAPIError):
    """Connection, DNS or timeout failure before a response body was read."""

    def __init__(self, message: str):
        super().__init__([NormalizedError.failed_request(message)])


class DecodeError(HypixelAPIError):
    """Response body is not a well-formed envelope."""

    def __init__(self, message: str):
        super().__init__([NormalizedError.failed_request(message)])


class APIResponseError(HypixelAPIError):
    """The service answered with success=false."""
