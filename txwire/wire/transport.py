"""
Byte-level transport encoding for wire messages (JSON, base64 byte fields).
"""

from __future__ import annotations

from typing import TypeVar

from pydantic import ValidationError

from txwire.core.exceptions import WireFormatError
from txwire.txwire_logging import get_logger
from txwire.wire.models import WireModel

logger = get_logger(__name__)

M = TypeVar("M", bound=WireModel)


def encode_wire(message: WireModel) -> bytes:
    """Serialize a wire message to UTF-8 JSON bytes."""
    return message.model_dump_json().encode("utf-8")


def decode_wire(model_cls: type[M], data: bytes | str) -> M:
    """Parse bytes produced by encode_wire back into ``model_cls``."""
    try:
        return model_cls.model_validate_json(data)
    except ValidationError as e:
        logger.debug(
            "wire_payload_invalid",
            model=model_cls.__name__,
            error_count=e.error_count(),
        )
        raise WireFormatError(f"invalid {model_cls.__name__} payload: {e}") from e
