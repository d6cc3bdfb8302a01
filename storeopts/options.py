"""Raw option snapshots and their conversion into provider-typed options."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, Iterable, Tuple, Union

from .capabilities import Capabilities, Provider
from .errors import UnknownConfigurationKey
from .keys import (
    AZURE_SCHEMA,
    GCS_SCHEMA,
    S3_SCHEMA,
    AmazonS3ConfigKey,
    AzureConfigKey,
    GoogleConfigKey,
    KeySchema,
    ascii_lower,
    schema_for,
)
from .transport import TransportConfig

logger = logging.getLogger(__name__)

RawPairs = Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]


def _iter_pairs(pairs: RawPairs) -> Iterable[tuple[Any, Any]]:
    if isinstance(pairs, Mapping):
        return pairs.items()
    return pairs


class RawOptionStore(Mapping):
    """Immutable mapping of ASCII-lowercased option keys to string values.

    Later pairs overwrite earlier ones that fold to the same key, following
    the iteration order of the input.
    """

    __slots__ = ("_data",)

    def __init__(self, pairs: RawPairs = ()) -> None:
        data: dict[str, str] = {}
        for key, value in _iter_pairs(pairs):
            data[ascii_lower(str(key))] = str(value)
        self._data = data

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RawOptionStore({self._data!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)


def validate_options(store: Mapping[str, str], schema: KeySchema) -> dict[Enum, str]:
    """Convert every raw option into the schema's typed key.

    The first key the schema does not recognize raises
    :class:`UnknownConfigurationKey`; nothing converted before it is returned.
    """
    opts: dict[Enum, str] = {}
    for key, value in store.items():
        try:
            conf_key = schema.parse(ascii_lower(key))
        except UnknownConfigurationKey:
            logger.debug("Rejecting option '%s' for %s store", key, schema.provider.value)
            raise
        opts[conf_key] = value
    logger.debug("Validated %d option(s) for %s store", len(opts), schema.provider.value)
    return opts


class StoreOptions:
    """Options used for configuring a backend store.

    Holds the raw store-specific options (keys, secrets, region, ...) and the
    settings for the internal HTTP client. Provider validators are only
    available for providers enabled in ``capabilities``; when no provider is
    enabled the transport settings are omitted altogether.
    """

    def __init__(
        self,
        pairs: RawPairs = (),
        transport: TransportConfig | None = None,
        *,
        capabilities: Capabilities | None = None,
    ) -> None:
        self._capabilities = capabilities if capabilities is not None else Capabilities.all()
        self._store_options = RawOptionStore(pairs)
        self._transport: TransportConfig | None = None
        if self._capabilities.has_transport:
            self._transport = transport.copy() if transport is not None else TransportConfig()

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        *,
        capabilities: Capabilities | None = None,
    ) -> StoreOptions:
        return cls(mapping, TransportConfig(), capabilities=capabilities)

    def __repr__(self) -> str:
        return (
            f"StoreOptions(keys={list(self._store_options)!r}, "
            f"providers={self._capabilities.names()!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StoreOptions):
            return NotImplemented
        return (
            self._store_options == other._store_options
            and self._transport == other._transport
            and self._capabilities == other._capabilities
        )

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> StoreOptions:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> StoreOptions:
        return self.copy()

    def copy(self) -> StoreOptions:
        """Return an independent clone; the raw snapshot is immutable and shared."""
        clone = StoreOptions.__new__(StoreOptions)
        clone._capabilities = self._capabilities
        clone._store_options = self._store_options
        clone._transport = copy.deepcopy(self._transport)
        return clone

    @property
    def capabilities(self) -> Capabilities:
        return self._capabilities

    @property
    def raw_options(self) -> RawOptionStore:
        return self._store_options

    def get_transport_config(self) -> TransportConfig | None:
        """Return a copy of the client settings, or ``None`` when omitted."""
        if self._transport is None:
            return None
        return self._transport.copy()

    def get_options(self, provider: str | Provider) -> dict[Enum, str]:
        """Validate the raw options against an enabled provider's key schema."""
        resolved = self._capabilities.require(provider)
        return validate_options(self._store_options, schema_for(resolved))

    def get_azure_options(self) -> dict[AzureConfigKey, str]:
        """Ensures that provided options are compatible with Azure."""
        self._capabilities.require(Provider.AZURE)
        return validate_options(self._store_options, AZURE_SCHEMA)

    def get_s3_options(self) -> dict[AmazonS3ConfigKey, str]:
        """Ensures that provided options are compatible with S3."""
        self._capabilities.require(Provider.S3)
        return validate_options(self._store_options, S3_SCHEMA)

    def get_gcs_options(self) -> dict[GoogleConfigKey, str]:
        """Ensures that provided options are compatible with GCS."""
        self._capabilities.require(Provider.GCS)
        return validate_options(self._store_options, GCS_SCHEMA)
