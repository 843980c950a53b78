# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM que producen y consumen sobres autocontenidos.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para proteger datos sensibles."""

import os
from typing import Optional, Tuple, Union

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from keyrotation.envelope import encode_envelope, unwrap_self_contained

__all__ = [
    "IV_SIZE",
    "aes_gcm_decrypt_with_key",
    "aes_gcm_encrypt_with_key",
    "decrypt_self_contained",
    "encrypt_self_contained",
]

IV_SIZE = 12


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, aad: Optional[bytes] = None
) -> Tuple[bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        Tuple[bytes, bytes]: Ciphertext con la etiqueta de 128 bits al final e IV.

    """

    iv = os.urandom(IV_SIZE)
    ciphertext = AESGCM(key).encrypt(iv, plaintext, aad)
    return ciphertext, iv


def aes_gcm_decrypt_with_key(
    key: bytes, iv: bytes, ciphertext: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra datos con AES-GCM utilizando la clave simétrica proporcionada.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        iv (bytes): Vector de inicialización usado al cifrar.
        ciphertext (bytes): Datos cifrados con la etiqueta al final.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si los datos han sido alterados.

    """

    return AESGCM(key).decrypt(iv, ciphertext, aad)


def encrypt_self_contained(key: bytes, plaintext: bytes) -> str:
    """Cifra `plaintext` y devuelve el sobre con el IV incluido."""

    ciphertext, iv = aes_gcm_encrypt_with_key(key, plaintext)
    return encode_envelope(ciphertext, iv)


def decrypt_self_contained(key: bytes, value: Union[str, bytes]) -> bytes:
    """Descifra un sobre producido por `encrypt_self_contained`."""

    ciphertext, iv = unwrap_self_contained(value)
    return aes_gcm_decrypt_with_key(key, iv, ciphertext)
