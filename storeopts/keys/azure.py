"""Azure Blob Storage configuration keys."""

from __future__ import annotations

from enum import Enum

from ..capabilities import Provider
from .base import KeySchema


class AzureConfigKey(Enum):
    ACCOUNT_NAME = "account_name"
    ACCESS_KEY = "access_key"
    CLIENT_ID = "client_id"
    CLIENT_SECRET = "client_secret"
    AUTHORITY_ID = "authority_id"
    AUTHORITY_HOST = "authority_host"
    SAS_KEY = "sas_key"
    TOKEN = "token"
    USE_EMULATOR = "use_emulator"
    ENDPOINT = "endpoint"
    MSI_ENDPOINT = "msi_endpoint"
    OBJECT_ID = "object_id"
    MSI_RESOURCE_ID = "msi_resource_id"
    FEDERATED_TOKEN_FILE = "federated_token_file"
    USE_AZURE_CLI = "use_azure_cli"
    USE_FABRIC_ENDPOINT = "use_fabric_endpoint"
    SKIP_SIGNATURE = "skip_signature"
    CONTAINER_NAME = "container_name"
    DISABLE_TAGGING = "disable_tagging"


AZURE_SCHEMA = KeySchema(Provider.AZURE, AzureConfigKey)
