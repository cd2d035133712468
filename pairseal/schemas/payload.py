"""
Encrypted payload wire format.

Version 1 on the wire (compact JSON, sorted keys):

    {"ciphertext":"<base64>","nonce":"<base64>","v":1}

- nonce: 24 raw bytes, standard base64 with padding
- ciphertext: same length as the UTF-8 plaintext (no padding, no tag)

Parsing reads "v" first and only then validates the fields that version
requires. Unknown extra fields are ignored. A version with no registered
field set is returned as a bare PayloadHeader, without looking at any other
field, and rejected by the cipher engine.

No cryptography happens here.
"""

import base64
import binascii
import json
from typing import Any, Dict, Literal, Type, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_serializer, field_validator

from pairseal.constants import NONCE_BYTES
from pairseal.crypto.exceptions import MalformedPayloadError, UnsupportedVersionError


def decode_base64_field(value: Any) -> bytes:
    """Strictly decode a base64 string. Bytes pass through unchanged."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise ValueError("Must be a base64 string")
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error:
        raise ValueError("Must be valid base64")


def encode_base64_field(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


class PayloadHeader(BaseModel):
    """Version tag shared by every payload version."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    v: StrictInt = Field(..., ge=0, description="Algorithm version")


class PayloadV1(PayloadHeader):
    """
    Version 1 payload: XChaCha20 over an ECDH-derived key.

    Fields hold decoded bytes; they are base64 only on the wire.
    """

    v: Literal[1] = 1
    nonce: bytes = Field(..., description="XChaCha20 nonce (24 bytes)")
    ciphertext: bytes = Field(..., description="Keystream-XORed plaintext (variable length)")

    @field_validator("nonce", "ciphertext", mode="before")
    @classmethod
    def decode_base64(cls, v: Any) -> bytes:
        return decode_base64_field(v)

    @field_validator("nonce")
    @classmethod
    def validate_nonce_length(cls, v: bytes) -> bytes:
        if len(v) != NONCE_BYTES:
            raise ValueError("Nonce must be 24 bytes")
        return v

    @field_serializer("nonce", "ciphertext")
    def serialize_base64(self, v: bytes) -> str:
        return encode_base64_field(v)


# Field sets per version. Adding a version here does not touch existing ones.
PAYLOAD_MODELS: Dict[int, Type[PayloadHeader]] = {
    1: PayloadV1,
}

Payload = Union[PayloadHeader, PayloadV1]


def _describe(exc: ValidationError) -> str:
    """Summarize validation errors by field name only, never by value."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or 'payload'}: {error['msg']}"
        for error in exc.errors()
    )


def build_payload(version: int, **fields: Any) -> PayloadHeader:
    """
    Construct the payload model for a version from raw field values.

    Raises:
        UnsupportedVersionError: If no field set is registered for the version
        MalformedPayloadError: If the fields do not satisfy the version's model
    """
    if isinstance(version, bool) or not isinstance(version, int):
        raise UnsupportedVersionError(version)
    model = PAYLOAD_MODELS.get(version)
    if model is None:
        raise UnsupportedVersionError(version)

    try:
        return model(v=version, **fields)
    except ValidationError as exc:
        raise MalformedPayloadError(f"Invalid version {version} payload: {_describe(exc)}") from exc


def dump_payload(payload: PayloadHeader) -> str:
    """Serialize a payload model to compact JSON with a stable key order."""
    return json.dumps(payload.model_dump(), sort_keys=True, separators=(",", ":"))


def serialize(version: int, nonce: bytes, ciphertext: bytes) -> str:
    """
    Serialize (version, nonce, ciphertext) to the wire format.

    Example:
        >>> serialize(1, bytes(24), b"hi")
        '{"ciphertext":"aGk=","nonce":"AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA","v":1}'
    """
    return dump_payload(build_payload(version, nonce=nonce, ciphertext=ciphertext))


def parse(text: Union[str, bytes]) -> Payload:
    """
    Parse a serialized payload.

    Returns:
        The version's payload model, or a bare PayloadHeader when the
        version has no registered field set (e.g. reserved 0 or unknown 7)

    Raises:
        MalformedPayloadError: If the text is not a JSON object, the version
            tag is missing or not a non-negative integer, or fields required
            by a known version are absent or not decodable

    A negative or non-integer "v" (such as -1, 1.0, "1" or true) is not a
    version tag at all, so it raises MalformedPayloadError rather than
    UnsupportedVersionError.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise MalformedPayloadError("Payload must be a JSON string")

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise MalformedPayloadError("Payload is not valid JSON") from exc

    if not isinstance(data, dict):
        raise MalformedPayloadError("Payload must be a JSON object")
    if "v" not in data:
        raise MalformedPayloadError("Payload is missing version field 'v'")

    try:
        header = PayloadHeader.model_validate({"v": data["v"]})
    except ValidationError as exc:
        raise MalformedPayloadError("Payload version must be a non-negative integer") from exc

    model = PAYLOAD_MODELS.get(header.v)
    if model is None:
        return header

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MalformedPayloadError(f"Invalid version {header.v} payload: {_describe(exc)}") from exc
