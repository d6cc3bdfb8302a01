"""Configuration helpers for environment-backed store options."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Mapping

from .capabilities import Capabilities, Provider
from .errors import ConfigurationError
from .keys import schema_for
from .options import RawPairs, StoreOptions
from .sources import SOURCES_ENV, collect_source_options
from .transport import TransportConfig

logger = logging.getLogger(__name__)

ENV_PREFIXES: dict[Provider, str] = {
    Provider.AZURE: "AZURE_",
    Provider.S3: "AWS_",
    Provider.GCS: "GOOGLE_",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _get_env(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    raw = (os.environ if environ is None else environ).get(name)
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def _get_bool(name: str, environ: Mapping[str, str] | None = None) -> bool | None:
    raw = _get_env(name, environ)
    if raw is None:
        return None
    lowered = raw.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got {raw!r}")


def _get_float(name: str, environ: Mapping[str, str] | None = None) -> float | None:
    raw = _get_env(name, environ)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {raw!r}") from None


def _get_int(name: str, environ: Mapping[str, str] | None = None) -> int | None:
    raw = _get_env(name, environ)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class SourceSettings:
    """Where raw option pairs are gathered from."""

    providers: str | None
    option_sources: str | None


def load_source_settings(environ: Mapping[str, str] | None = None) -> SourceSettings:
    """Load option-source settings from environment variables."""

    return SourceSettings(
        providers=_get_env("STOREOPTS_PROVIDERS", environ),
        option_sources=_get_env(SOURCES_ENV, environ),
    )


def load_capabilities(environ: Mapping[str, str] | None = None) -> Capabilities:
    """Enabled providers from ``STOREOPTS_PROVIDERS``; all of them when unset."""
    raw = load_source_settings(environ).providers
    if raw is None:
        return Capabilities.all()
    names = [name.strip() for name in raw.split(",") if name.strip()]
    if not names:
        return Capabilities.all()
    return Capabilities.of(*names)


def collect_env_options(
    provider: str | Provider,
    environ: Mapping[str, str] | None = None,
) -> list[tuple[str, str]]:
    """Pairs for prefixed variables whose stripped name is a provider key.

    ``AWS_REGION=us-east-1`` becomes ``("REGION", "us-east-1")``; the raw
    option store folds the case afterwards. Other prefixed variables such as
    ``AWS_PROFILE`` belong to other tools and are skipped.
    """
    resolved = Provider.parse(provider)
    prefix = ENV_PREFIXES.get(resolved)
    if prefix is None:
        return []
    schema = schema_for(resolved)
    source = os.environ if environ is None else environ
    pairs: list[tuple[str, str]] = []
    for name, value in source.items():
        if not name.upper().startswith(prefix) or len(name) == len(prefix):
            continue
        if not value:
            continue
        key = name[len(prefix):]
        if key not in schema:
            logger.debug("Skipping %s: not a %s option", name, resolved.value)
            continue
        pairs.append((key, value))
    logger.debug("Read %d %s option(s) from the environment", len(pairs), resolved.value)
    return pairs


def load_transport_config(environ: Mapping[str, str] | None = None) -> TransportConfig:
    """Default client settings overlaid with any ``STOREOPTS_*`` overrides."""
    config = TransportConfig()

    user_agent = _get_env("STOREOPTS_USER_AGENT", environ)
    if user_agent is not None:
        config.user_agent = user_agent
    proxy_url = _get_env("STOREOPTS_PROXY_URL", environ)
    if proxy_url is not None:
        config.proxy_url = proxy_url
    allow_http = _get_bool("STOREOPTS_ALLOW_HTTP", environ)
    if allow_http is not None:
        config.allow_http = allow_http
    timeout = _get_float("STOREOPTS_TIMEOUT", environ)
    if timeout is not None:
        config.timeout = timeout
    connect_timeout = _get_float("STOREOPTS_CONNECT_TIMEOUT", environ)
    if connect_timeout is not None:
        config.connect_timeout = connect_timeout
    max_retries = _get_int("STOREOPTS_MAX_RETRIES", environ)
    if max_retries is not None:
        config.retry.max_retries = max_retries

    return config


def load_store_options(
    provider: str | Provider,
    extra: RawPairs | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    transport: TransportConfig | None = None,
    include_env: bool = True,
) -> StoreOptions:
    """Gather raw options for ``provider`` and build a :class:`StoreOptions`.

    Sources are applied in order (environment, integrator option sources,
    ``extra``), so later sources win on duplicate keys.
    """
    resolved = Provider.parse(provider)
    settings = load_source_settings(environ)
    pairs: list[tuple[str, str]] = []
    if include_env:
        pairs.extend(collect_env_options(resolved, environ))
    if settings.option_sources:
        pairs.extend(collect_source_options(settings.option_sources, resolved.value))
    if extra is not None:
        pairs.extend(_pairs_from(extra))
    return StoreOptions(
        pairs,
        transport if transport is not None else load_transport_config(environ),
        capabilities=load_capabilities(environ),
    )


def _pairs_from(extra: RawPairs) -> Iterable[tuple[str, str]]:
    items = extra.items() if isinstance(extra, Mapping) else extra
    return [(str(key), str(value)) for key, value in items]
