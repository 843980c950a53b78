# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del cifrado AES-GCM y de los sobres autocontenidos.
# --------------------------------------------------------------

import os

import pytest
from cryptography.exceptions import InvalidTag

from keyrotation.crypto_sym import (
    IV_SIZE,
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
    decrypt_self_contained,
    encrypt_self_contained,
)
from keyrotation.envelope import encode_envelope, unwrap_self_contained


def test_aes_gcm_roundtrip_ok(aes_key):
    """Comprueba que un cifrado con AES-GCM pueda revertirse correctamente.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    plaintext = os.urandom(128)
    ct, iv = aes_gcm_encrypt_with_key(aes_key, plaintext)
    assert len(iv) == IV_SIZE
    assert len(ct) == len(plaintext) + 16
    assert aes_gcm_decrypt_with_key(aes_key, iv, ct) == plaintext


def test_aes_gcm_detects_tampering_ciphertext(aes_key):
    """Verifica que cualquier alteración del ciphertext sea detectada.

    Returns:
        None: La expectativa es una excepción al descifrar.
    """
    ct, iv = aes_gcm_encrypt_with_key(aes_key, b"hola mundo")
    tampered = bytes([ct[0] ^ 1]) + ct[1:]
    with pytest.raises(InvalidTag):
        aes_gcm_decrypt_with_key(aes_key, iv, tampered)


def test_aes_gcm_detects_tampering_iv(aes_key):
    """Comprueba que modificar el IV provoque fallo en la autenticación."""
    ct, iv = aes_gcm_encrypt_with_key(aes_key, b"msg")
    bad_iv = bytes([iv[0] ^ 1]) + iv[1:]
    with pytest.raises(InvalidTag):
        aes_gcm_decrypt_with_key(aes_key, bad_iv, ct)


def test_aes_gcm_iv_uniqueness(aes_key):
    """Evalúa que los IV aleatorios generados no se repitan.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    ivs = set()
    for _ in range(200):
        _, iv = aes_gcm_encrypt_with_key(aes_key, b"x")
        assert iv not in ivs
        ivs.add(iv)


def test_self_contained_roundtrip(aes_key):
    """El sobre incluye el IV, por lo que basta con la clave para descifrar."""
    plaintext = b"secreto de base de datos"
    value = encrypt_self_contained(aes_key, plaintext)
    assert isinstance(value, str)
    assert decrypt_self_contained(aes_key, value) == plaintext


def test_self_contained_embeds_the_iv(aes_key):
    """Comprueba que el sobre contenga el IV usado realmente en el cifrado."""
    ct, iv = aes_gcm_encrypt_with_key(aes_key, b"payload")
    value = encode_envelope(ct, iv)
    assert unwrap_self_contained(value) == (ct, iv)
    assert decrypt_self_contained(aes_key, value) == b"payload"


def test_self_contained_wrong_key(aes_key):
    """Descifrar con otra clave debe fallar la verificación de la etiqueta."""
    value = encrypt_self_contained(aes_key, b"msg")
    with pytest.raises(InvalidTag):
        decrypt_self_contained(os.urandom(32), value)
