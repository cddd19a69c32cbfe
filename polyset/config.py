"""Dispatch configuration.

The defaults are what callers want in production. Tests flip
``native_fast_path`` off to force every binary operation through the generic
algorithms and compare against the native results.

The active config lives in a :class:`contextvars.ContextVar`, so a change made
by one thread or asyncio task is never seen by another. A new thread starts
from the defaults.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, Iterator


@dataclass(frozen=True)
class PolysetConfig:
    """Dispatcher switches.

    Attributes:
        native_fast_path: Delegate same-representation binary operations to
            the representation's native implementation.
        equal_size_shortcut: Let the generic equality check return ``False``
            on a size mismatch before folding.
    """

    native_fast_path: bool = True
    equal_size_shortcut: bool = True


_DEFAULT_CONFIG = PolysetConfig()

_config: ContextVar[PolysetConfig] = ContextVar(
    "polyset_config", default=_DEFAULT_CONFIG
)


def current_config() -> PolysetConfig:
    return _config.get()


def configure(**changes: Any) -> PolysetConfig:
    """Replace fields of the config for the current context and return it.

    Raises:
        TypeError: If a field name is unknown.
    """
    config = replace(_config.get(), **changes)
    _config.set(config)
    return config


@contextmanager
def configured(**changes: Any) -> Iterator[PolysetConfig]:
    """Apply ``changes`` for the duration of a ``with`` block."""
    config = replace(_config.get(), **changes)
    token = _config.set(config)
    try:
        yield config
    finally:
        _config.reset(token)
