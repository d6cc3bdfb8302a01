"""Error types raised while normalizing and validating store options."""

from __future__ import annotations


class StoreOptionsError(Exception):
    """Base class for every error raised by storeopts."""


class UnknownConfigurationKey(StoreOptionsError, ValueError):
    """A raw option key is not part of the provider's key schema."""

    def __init__(self, key: str, provider: str) -> None:
        self.key = key
        self.provider = provider
        super().__init__(f"Configuration key '{key}' is not valid for store '{provider}'")


class UnknownProviderError(StoreOptionsError, ValueError):
    """A provider name does not match any known provider."""

    def __init__(self, name: str, known: list[str] | tuple[str, ...] = ()) -> None:
        self.name = name
        message = f"Unknown storage provider '{name}'"
        if known:
            message += f". Expected one of: {', '.join(known)}"
        super().__init__(message)


class ProviderNotEnabledError(StoreOptionsError):
    """The provider is not part of the enabled capability set."""

    def __init__(self, provider: str, reason: str | None = None) -> None:
        self.provider = provider
        super().__init__(reason or f"Storage provider '{provider}' is not enabled")


class SchemaDefinitionError(StoreOptionsError, TypeError):
    """A provider key enum violates the canonical-name rules."""


class ConfigurationError(StoreOptionsError, ValueError):
    """An environment setting could not be interpreted."""


class OptionsFileError(StoreOptionsError):
    """An options file failed to load or validate."""

    def __init__(self, path: str, errors: list[str]) -> None:
        self.path = path
        self.errors = list(errors)
        detail = "; ".join(self.errors) if self.errors else "unknown error"
        super().__init__(f"Invalid options file {path}: {detail}")
