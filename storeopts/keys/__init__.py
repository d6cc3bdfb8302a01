"""Per-provider configuration key schemas."""

from ..capabilities import Provider
from ..errors import ProviderNotEnabledError
from .azure import AZURE_SCHEMA, AzureConfigKey
from .base import KeySchema, ascii_lower
from .gcs import GCS_SCHEMA, GoogleConfigKey
from .s3 import S3_SCHEMA, AmazonS3ConfigKey

SCHEMAS: dict[Provider, KeySchema] = {
    Provider.AZURE: AZURE_SCHEMA,
    Provider.S3: S3_SCHEMA,
    Provider.GCS: GCS_SCHEMA,
}


def schema_for(provider: str | Provider) -> KeySchema:
    """Return the key schema for a provider that has one."""
    resolved = Provider.parse(provider)
    schema = SCHEMAS.get(resolved)
    if schema is None:
        raise ProviderNotEnabledError(
            resolved.value, f"Storage provider '{resolved.value}' has no configuration key schema"
        )
    return schema


__all__ = [
    "AZURE_SCHEMA",
    "GCS_SCHEMA",
    "S3_SCHEMA",
    "SCHEMAS",
    "AmazonS3ConfigKey",
    "AzureConfigKey",
    "GoogleConfigKey",
    "KeySchema",
    "ascii_lower",
    "schema_for",
]
