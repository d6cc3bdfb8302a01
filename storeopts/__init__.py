"""Normalization and per-provider validation of object-store options."""

from .capabilities import Capabilities, Provider
from .errors import (
    ConfigurationError,
    OptionsFileError,
    ProviderNotEnabledError,
    SchemaDefinitionError,
    StoreOptionsError,
    UnknownConfigurationKey,
    UnknownProviderError,
)
from .keys import AmazonS3ConfigKey, AzureConfigKey, GoogleConfigKey, KeySchema
from .options import RawOptionStore, StoreOptions, validate_options
from .transport import RetryConfig, TransportConfig

__all__ = [
    "AmazonS3ConfigKey",
    "AzureConfigKey",
    "Capabilities",
    "ConfigurationError",
    "GoogleConfigKey",
    "KeySchema",
    "OptionsFileError",
    "Provider",
    "ProviderNotEnabledError",
    "RawOptionStore",
    "RetryConfig",
    "SchemaDefinitionError",
    "StoreOptions",
    "StoreOptionsError",
    "TransportConfig",
    "UnknownConfigurationKey",
    "UnknownProviderError",
    "validate_options",
]
