# --------------------------------------------------------------
# File: config.py
# Description: Variables de entorno y carga del fichero YAML de rotación de claves.
# --------------------------------------------------------------
"""Configuración del proceso y lectura de `properties.yaml`."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from keyrotation.errors import ConfigLoadError
from keyrotation.models import KeyRotationConfig

load_dotenv()

KEY_ROTATION_CONFIG = os.getenv("KEY_ROTATION_CONFIG", "properties.yaml")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(message)s"

log = logging.getLogger(__name__)

__all__ = [
    "KEY_ROTATION_CONFIG",
    "LOG_LEVEL",
    "configure_logging",
    "load_key_rotation_config",
    "require_key_rotation_config",
]


def configure_logging(level: str | int = LOG_LEVEL) -> logging.Logger:
    """Instala un handler de consola en el logger raíz del paquete.

    Args:
        level (str | int): Nivel por nombre (`"DEBUG"`, `"INFO"`, ...) o número.

    Returns:
        logging.Logger: Logger `keyrotation` ya configurado.

    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("keyrotation")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def _read_config(path: str) -> KeyRotationConfig:
    if not os.path.exists(path):
        raise ConfigLoadError(f"File does not exist at: {path}")
    try:
        with open(path, "r", encoding="utf-8") as handler:
            data = yaml.safe_load(handler)
        # Un YAML vacío equivale a una configuración sin valores.
        return KeyRotationConfig.model_validate(data or {})
    except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as exc:
        raise ConfigLoadError(f"Error occurred while loading the yaml file: {exc}") from exc


def load_key_rotation_config(
    path: Optional[str] = None, logger: Optional[logging.Logger] = None
) -> Optional[KeyRotationConfig]:
    """Carga el fichero YAML de configuración de la rotación de claves.

    Los errores no se propagan: se registran y la función devuelve `None`, por
    lo que el llamante debe comprobar el resultado antes de usarlo.

    Args:
        path (Optional[str]): Ruta del YAML; por defecto `KEY_ROTATION_CONFIG`.
        logger (Optional[logging.Logger]): Logger donde registrar los fallos.

    Returns:
        Optional[KeyRotationConfig]: Configuración cargada o `None`.

    """

    logger = logger or log
    try:
        return _read_config(path or KEY_ROTATION_CONFIG)
    except ConfigLoadError as exc:
        logger.error(str(exc))
        return None


def require_key_rotation_config(path: Optional[str] = None) -> KeyRotationConfig:
    """Igual que `load_key_rotation_config`, pero lanza `ConfigLoadError` si falla.

    No registra nada: el llamante decide cómo informar del error.
    """

    return _read_config(path or KEY_ROTATION_CONFIG)
