# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del paquete keyrotation.
# --------------------------------------------------------------
"""Excepciones tipadas para el sobre de cifrado y la carga de configuración."""

__all__ = [
    "ConfigLoadError",
    "EnvelopeEncodingError",
    "EnvelopeError",
    "EnvelopeParseError",
    "KeyRotationError",
]


class KeyRotationError(Exception):
    """Error base de todas las operaciones del paquete."""


class EnvelopeError(KeyRotationError):
    """Fallo al empaquetar o desempaquetar un texto cifrado autocontenido."""


class EnvelopeEncodingError(EnvelopeError, ValueError):
    """Las entradas del codificador no pueden convertirse a texto Base64."""


class EnvelopeParseError(EnvelopeError, ValueError):
    """El sobre recibido no es JSON válido o no respeta el esquema esperado."""


class ConfigLoadError(KeyRotationError):
    """No se ha podido cargar el fichero YAML de configuración."""
