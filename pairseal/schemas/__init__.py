from .payload import (
    PayloadHeader,
    PayloadV1,
    PAYLOAD_MODELS,
    build_payload,
    dump_payload,
    serialize,
    parse,
)

__all__ = [
    "PayloadHeader",
    "PayloadV1",
    "PAYLOAD_MODELS",
    "build_payload",
    "dump_payload",
    "serialize",
    "parse",
]
