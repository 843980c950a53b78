# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del sobre de cifrado y de la configuración YAML.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

__all__ = ["CipherEnvelope", "CipherMetaData", "KeyRotationConfig"]


class CipherMetaData(BaseModel):
    """Texto cifrado y vector de inicialización de un sobre autocontenido.

    Los atributos exponen los nombres que usa el llamante; los alias son los
    nombres fijos del formato JSON (`cipher` e `initializationVector`), por lo
    que el mismo modelo sirve para serializar el sobre y para devolverlo ya
    decodificado.

    Attributes:
        cipher_text (Optional[str]): Texto cifrado codificado en Base64.
        iv (Optional[str]): Vector de inicialización codificado en Base64.

    """

    # Solo los nombres del JSON: `cipher_text` o `iv` como claves se ignoran.
    model_config = ConfigDict(frozen=True, extra="ignore")

    cipher_text: Optional[str] = Field(default=None, alias="cipher")
    iv: Optional[str] = Field(default=None, alias="initializationVector")


# Forma serializada del sobre: mismo registro, nombres de campo del JSON.
CipherEnvelope = CipherMetaData


class KeyRotationConfig(BaseModel):
    """Contenido del fichero `properties.yaml` de la herramienta de rotación.

    Todos los campos son opcionales; las claves desconocidas se ignoran.

    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    old_secret_key: Optional[SecretStr] = Field(default=None, alias="oldSecretKey")
    new_secret_key: Optional[SecretStr] = Field(default=None, alias="newSecretKey")
    new_is_home: Optional[str] = Field(default=None, alias="newISHome")

    old_idn_db_url: Optional[str] = Field(default=None, alias="oldIdnDBUrl")
    old_idn_username: Optional[str] = Field(default=None, alias="oldIdnUsername")
    old_idn_password: Optional[SecretStr] = Field(default=None, alias="oldIdnPassword")
    new_idn_db_url: Optional[str] = Field(default=None, alias="newIdnDBUrl")
    new_idn_username: Optional[str] = Field(default=None, alias="newIdnUsername")
    new_idn_password: Optional[SecretStr] = Field(default=None, alias="newIdnPassword")

    old_reg_db_url: Optional[str] = Field(default=None, alias="oldRegDBUrl")
    old_reg_username: Optional[str] = Field(default=None, alias="oldRegUsername")
    old_reg_password: Optional[SecretStr] = Field(default=None, alias="oldRegPassword")
    new_reg_db_url: Optional[str] = Field(default=None, alias="newRegDBUrl")
    new_reg_username: Optional[str] = Field(default=None, alias="newRegUsername")
    new_reg_password: Optional[SecretStr] = Field(default=None, alias="newRegPassword")

    enable_db_migrator: bool = Field(default=False, alias="enableDBMigrator")
    enable_config_migrator: bool = Field(default=False, alias="enableConfigMigrator")
    enable_workflow_migrator: bool = Field(default=False, alias="enableWorkflowMigrator")
    enable_sync_migrator: bool = Field(default=False, alias="enableSyncMigrator")
    chunk_size: Optional[int] = Field(default=None, gt=0, alias="chunkSize")
