"""
Envelope decoding: raw response body in, typed payload out.
"""

from typing import Any, TypeVar, Union

from pydantic import ValidationError

from cactive_hypixel.errors import APIResponseError, DecodeError
from cactive_hypixel.models.envelope import Envelope, NormalizedError

T = TypeVar("T")


def parse_envelope(body: Union[bytes, str], payload_type: Any) -> Envelope[Any]:
    """Parse the body as Envelope[payload_type]. Raises DecodeError on mismatch."""
    try:
        return Envelope[payload_type].model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


def unwrap_envelope(envelope: Envelope[T]) -> T:
    """Return the payload of a successful envelope or raise its errors."""
    if envelope.success:
        if envelope.data is None:
            raise DecodeError(f"Envelope {envelope.id} reported success without data")
        return envelope.data
    if not envelope.errors:
        raise DecodeError(f"Envelope {envelope.id} reported failure without errors")
    raise APIResponseError([NormalizedError.from_api_error(e) for e in envelope.errors])


def decode_envelope(body: Union[bytes, str], payload_type: Any) -> Any:
    return unwrap_envelope(parse_envelope(body, payload_type))
