"""Integrator-supplied option sources named in ``STOREOPTS_OPTION_SOURCES``.

Each entry is ``module.submodule:function``. The function is called with
``provider=<name>`` and returns a mapping or an iterable of ``(key, value)``
pairs; ``None`` contributes nothing.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SOURCES_ENV = "STOREOPTS_OPTION_SOURCES"


@dataclass(frozen=True)
class OptionSource:
    """One resolved source: its entry text and the callable it names."""

    entry: str
    module: str
    function: str
    fn: Callable[..., Any]

    def pairs(self, provider: str) -> list[tuple[str, str]]:
        out = self.fn(provider=provider)
        if out is None:
            return []
        items = out.items() if hasattr(out, "items") else out
        try:
            pairs = [(str(key), str(value)) for key, value in items]
        except (TypeError, ValueError) as err:
            raise ConfigurationError(
                f"{SOURCES_ENV} entry '{self.entry}' must return a mapping or (key, value) pairs"
            ) from err
        logger.debug("Option source %s gave %d %s option(s)", self.entry, len(pairs), provider)
        return pairs


def split_entries(text: str) -> list[str]:
    return [entry.strip() for entry in text.split(",") if entry.strip()]


@lru_cache(maxsize=64)
def resolve_source(entry: str) -> OptionSource:
    """Import the module named by ``entry`` and look up its function."""
    module_name, sep, fn_name = entry.strip().partition(":")
    module_name, fn_name = module_name.strip(), fn_name.strip()
    if not sep or not module_name or not fn_name:
        raise ConfigurationError(f"{SOURCES_ENV} entry '{entry}' must look like module:function")
    try:
        module = importlib.import_module(module_name)
    except ImportError as err:
        raise ConfigurationError(
            f"{SOURCES_ENV} entry '{entry}': cannot import '{module_name}': {err}"
        ) from err
    fn = getattr(module, fn_name, None)
    if not callable(fn):
        raise ConfigurationError(
            f"{SOURCES_ENV} entry '{entry}': '{module_name}' has no callable '{fn_name}'"
        )
    return OptionSource(entry=entry.strip(), module=module_name, function=fn_name, fn=fn)


def collect_source_options(text: str, provider: str) -> list[tuple[str, str]]:
    """Pairs from every listed source, in listing order."""
    pairs: list[tuple[str, str]] = []
    for entry in split_entries(text):
        pairs.extend(resolve_source(entry).pairs(provider))
    return pairs
