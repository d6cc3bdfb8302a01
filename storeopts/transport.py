"""Provider-agnostic HTTP client settings handed through to the network layer."""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class RetryConfig:
    """Retry budget for the network client; seconds unless stated."""

    max_retries: int = 10
    retry_timeout: float = 180.0
    init_backoff: float = 0.1
    max_backoff: float = 15.0
    backoff_base: float = 2.0


@dataclass
class TransportConfig:
    """HTTP client settings shared by every storage provider.

    storeopts does not interpret these values; they are copied in and out so
    callers never share mutable state with a ``StoreOptions`` instance.
    """

    user_agent: str | None = None
    default_content_type: str | None = None
    content_type_map: dict[str, str] = field(default_factory=dict)
    default_headers: dict[str, str] = field(default_factory=dict)
    proxy_url: str | None = None
    proxy_excludes: list[str] = field(default_factory=list)
    allow_http: bool = False
    allow_invalid_certificates: bool = False
    timeout: float | None = 30.0
    connect_timeout: float | None = 5.0
    pool_idle_timeout: float | None = None
    pool_max_idle_per_host: int | None = None
    http1_only: bool = True
    http2_only: bool = False
    retry: RetryConfig = field(default_factory=RetryConfig)

    def copy(self) -> TransportConfig:
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransportConfig:
        values = copy.deepcopy(dict(data))
        retry = values.pop("retry", None)
        config = cls(**values)
        if retry is not None:
            config.retry = RetryConfig(**retry)
        return config
