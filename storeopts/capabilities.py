"""Provider identities and the set of providers enabled by an integrator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .errors import ProviderNotEnabledError, UnknownProviderError


class Provider(Enum):
    AZURE = "azure"
    S3 = "s3"
    GCS = "gcs"
    HTTP = "http"

    @classmethod
    def parse(cls, text: str | Provider) -> Provider:
        """Resolve a provider from its name or one of its feature aliases."""
        if isinstance(text, Provider):
            return text
        name = str(text).strip().lower()
        provider = _ALIASES.get(name)
        if provider is None:
            raise UnknownProviderError(str(text), tuple(p.value for p in cls))
        return provider


_ALIASES: dict[str, Provider] = {p.value: p for p in Provider}
_ALIASES.update({"aws": Provider.S3, "gcp": Provider.GCS, "google": Provider.GCS})


@dataclass(frozen=True)
class Capabilities:
    """Providers whose validators and transport settings are available."""

    providers: frozenset[Provider] = frozenset(Provider)

    @classmethod
    def all(cls) -> Capabilities:
        return cls(frozenset(Provider))

    @classmethod
    def of(cls, *names: str | Provider) -> Capabilities:
        return cls(frozenset(Provider.parse(name) for name in names))

    @classmethod
    def from_names(cls, names: Iterable[str | Provider]) -> Capabilities:
        return cls.of(*names)

    def enabled(self, provider: str | Provider) -> bool:
        return Provider.parse(provider) in self.providers

    @property
    def has_transport(self) -> bool:
        # Every provider, HTTP included, is driven by the shared transport client.
        return bool(self.providers)

    def require(self, provider: str | Provider) -> Provider:
        resolved = Provider.parse(provider)
        if resolved not in self.providers:
            raise ProviderNotEnabledError(resolved.value)
        return resolved

    def names(self) -> list[str]:
        return [p.value for p in Provider if p in self.providers]
