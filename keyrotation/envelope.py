# --------------------------------------------------------------
# File: envelope.py
# Description: Empaquetado de texto cifrado y vector de inicialización en un único sobre.
# --------------------------------------------------------------
"""Codificador y decodificador del texto cifrado autocontenido.

El sobre final es `Base64(UTF8(JSON))`, donde el JSON tiene exactamente los
campos `cipher` e `initializationVector`, ambos en Base64. El decodificador
recibe los bytes del JSON, no la cadena Base64 exterior.
"""

from __future__ import annotations

import base64
import binascii
from typing import Tuple, Union

from pydantic import ValidationError

from keyrotation.errors import EnvelopeEncodingError, EnvelopeParseError
from keyrotation.models import CipherMetaData

__all__ = [
    "decode_envelope",
    "decode_self_contained",
    "encode_envelope",
    "unwrap_self_contained",
]


def _b64(data: bytes) -> str:
    """Codifica datos binarios en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def _unb64(value: Union[str, bytes], what: str) -> bytes:
    """Decodifica Base64 estándar rechazando caracteres fuera del alfabeto."""

    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EnvelopeParseError(f"{what} is not valid Base64") from exc


def encode_envelope(ciphertext: bytes, iv: bytes) -> str:
    """Crea un texto cifrado autocontenido que incluye su vector de inicialización.

    Args:
        ciphertext (bytes): Texto cifrado producido por el algoritmo simétrico.
        iv (bytes): Vector de inicialización utilizado durante el cifrado.

    Returns:
        str: Sobre en Base64 listo para almacenarse como texto.

    Raises:
        EnvelopeEncodingError: Si alguna de las entradas no es de tipo bytes.

    """

    try:
        envelope = CipherMetaData(cipher=_b64(ciphertext), initializationVector=_b64(iv))
    except TypeError as exc:
        raise EnvelopeEncodingError(
            "ciphertext and iv must be bytes-like objects"
        ) from exc

    # JSON compacto sin escapado HTML: {"cipher":"...","initializationVector":"..."}
    serialized = envelope.model_dump_json(by_alias=True)
    return _b64(serialized.encode("utf-8"))


def decode_envelope(envelope_bytes: bytes) -> CipherMetaData:
    """Extrae el texto cifrado y el IV de los bytes JSON de un sobre.

    Los campos devueltos siguen codificados en Base64: el llamante debe
    decodificarlos antes de invocar la primitiva de descifrado.

    Args:
        envelope_bytes (bytes): JSON del sobre, ya sin la capa Base64 exterior.

    Returns:
        CipherMetaData: Texto cifrado e IV en Base64. Un campo ausente en el
        JSON se devuelve como `None`.

    Raises:
        EnvelopeParseError: Si los bytes no son JSON válido con el esquema esperado.

    """

    if isinstance(envelope_bytes, str):
        text = envelope_bytes
    else:
        try:
            text = bytes(envelope_bytes).decode("utf-8")
        except (TypeError, UnicodeDecodeError) as exc:
            raise EnvelopeParseError("envelope is not UTF-8 text") from exc

    try:
        return CipherMetaData.model_validate_json(text)
    except ValidationError as exc:
        raise EnvelopeParseError(f"malformed envelope: {exc}") from exc


def decode_self_contained(value: Union[str, bytes]) -> CipherMetaData:
    """Retira la capa Base64 exterior y decodifica el sobre resultante."""

    return decode_envelope(_unb64(value, "envelope"))


def unwrap_self_contained(value: Union[str, bytes]) -> Tuple[bytes, bytes]:
    """Recupera los bytes originales del texto cifrado y del IV.

    Args:
        value (Union[str, bytes]): Sobre tal y como lo devuelve `encode_envelope`.

    Returns:
        Tuple[bytes, bytes]: Texto cifrado e IV en binario.

    Raises:
        EnvelopeParseError: Si falta algún campo o no contiene Base64 válido.

    """

    metadata = decode_self_contained(value)
    if metadata.cipher_text is None:
        raise EnvelopeParseError("envelope has no 'cipher' field")
    if metadata.iv is None:
        raise EnvelopeParseError("envelope has no 'initializationVector' field")
    return _unb64(metadata.cipher_text, "cipher"), _unb64(metadata.iv, "initializationVector")
