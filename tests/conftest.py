# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y generar claves.
# --------------------------------------------------------------

import importlib
import os
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch) -> Iterator[None]:
    """Apunta KEY_ROTATION_CONFIG a una carpeta temporal y recarga keyrotation.config.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("KEY_ROTATION_CONFIG", str(tmp_path / "properties.yaml"))

    import keyrotation.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def aes_key() -> bytes:
    """Clave AES-256 aleatoria para cada prueba."""
    return os.urandom(32)


@pytest.fixture
def write_properties(tmp_path):
    """Devuelve una función que escribe un `properties.yaml` y retorna su ruta."""

    def _write(content: str, name: str = "properties.yaml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
