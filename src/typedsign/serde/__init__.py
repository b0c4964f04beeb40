"""Serialization / deserialization (serde): eth_signTypedData JSON documents."""

from .typed_data_json import decode_typed_data, encode_typed_data, to_typed_data

__all__: tuple[str, ...] = ("decode_typed_data", "encode_typed_data", "to_typed_data")
