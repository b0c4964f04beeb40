"""
JSON codec for eth_signTypedData documents:
``{"types": ..., "primaryType": ..., "domain": ..., "message": ...}``.
"""

from __future__ import annotations

import logging
from typing import Any

import msgspec

from ..eip712._model import TypedData, as_typed_data
from ..errors import InvalidSchema

logger = logging.getLogger(__name__)

_decoder = msgspec.json.Decoder(TypedData)
_encoder = msgspec.json.Encoder()


def decode_typed_data(raw: bytes | str) -> TypedData:
    """
    Parse and validate a typed-data JSON document.

    Raises:
        InvalidSchema: not valid JSON or not shaped like typed data.
    """
    try:
        td = _decoder.decode(raw)
    except msgspec.DecodeError as exc:
        raise InvalidSchema(f"Invalid typed data document: {exc}") from exc
    logger.debug(f"Decoded typed data, primaryType={td.primary_type}")
    return td


def to_typed_data(obj: Any) -> TypedData:
    """Validate an already-parsed mapping (or pass a TypedData through)."""
    return as_typed_data(obj)


def encode_typed_data(typed_data: TypedData) -> bytes:
    """Serialize to JSON using the wire names (``primaryType``)."""
    return _encoder.encode(typed_data)


__all__: tuple[str, ...] = ("decode_typed_data", "encode_typed_data", "to_typed_data")
