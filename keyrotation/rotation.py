# --------------------------------------------------------------
# File: rotation.py
# Description: Recifrado de sobres autocontenidos con la nueva clave secreta.
# --------------------------------------------------------------
"""Operaciones de rotación de claves sobre valores individuales."""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from keyrotation.crypto_sym import decrypt_self_contained, encrypt_self_contained
from keyrotation.errors import ConfigLoadError
from keyrotation.models import KeyRotationConfig

__all__ = ["keys_from_config", "reencrypt_self_contained"]

log = logging.getLogger(__name__)


def keys_from_config(config: KeyRotationConfig) -> Tuple[bytes, bytes]:
    """Obtiene las claves antigua y nueva a partir de su representación hexadecimal.

    Args:
        config (KeyRotationConfig): Configuración con `oldSecretKey` y `newSecretKey`.

    Returns:
        Tuple[bytes, bytes]: Clave antigua y clave nueva en binario.

    Raises:
        ConfigLoadError: Si falta alguna clave o no es hexadecimal válido.

    """

    keys = []
    for name, secret in (
        ("oldSecretKey", config.old_secret_key),
        ("newSecretKey", config.new_secret_key),
    ):
        if secret is None:
            raise ConfigLoadError(f"{name} is not configured")
        try:
            keys.append(bytes.fromhex(secret.get_secret_value()))
        except ValueError as exc:
            raise ConfigLoadError(f"{name} is not a hexadecimal key") from exc
    return keys[0], keys[1]


def reencrypt_self_contained(
    value: Union[str, bytes],
    old_key: bytes,
    new_key: bytes,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Descifra un sobre con la clave antigua y lo vuelve a cifrar con la nueva.

    Args:
        value (Union[str, bytes]): Sobre autocontenido cifrado con `old_key`.
        old_key (bytes): Clave con la que se cifró el valor.
        new_key (bytes): Clave que protegerá el nuevo sobre.
        logger (Optional[logging.Logger]): Logger para las trazas de depuración.

    Returns:
        str: Nuevo sobre con un IV recién generado.

    Raises:
        EnvelopeParseError: Si el valor no es un sobre válido.
        cryptography.exceptions.InvalidTag: Si `old_key` no descifra el valor.

    """

    logger = logger or log
    plaintext = decrypt_self_contained(old_key, value)
    rotated = encrypt_self_contained(new_key, plaintext)
    logger.debug("Re-encrypted value of %d bytes with the new key", len(plaintext))
    return rotated
