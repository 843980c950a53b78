# --------------------------------------------------------------
# File: __init__.py
# Description: API pública del sobre de cifrado autocontenido.
# --------------------------------------------------------------
"""Inicializa el paquete `keyrotation` y expone sus operaciones principales."""

from keyrotation.envelope import (
    decode_envelope,
    decode_self_contained,
    encode_envelope,
    unwrap_self_contained,
)
from keyrotation.errors import (
    ConfigLoadError,
    EnvelopeEncodingError,
    EnvelopeError,
    EnvelopeParseError,
    KeyRotationError,
)
from keyrotation.models import CipherEnvelope, CipherMetaData, KeyRotationConfig

__all__ = [
    "CipherEnvelope",
    "CipherMetaData",
    "ConfigLoadError",
    "EnvelopeEncodingError",
    "EnvelopeError",
    "EnvelopeParseError",
    "KeyRotationConfig",
    "KeyRotationError",
    "decode_envelope",
    "decode_self_contained",
    "encode_envelope",
    "unwrap_self_contained",
]
