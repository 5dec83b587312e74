from __future__ import annotations

from .context import Context
from .errors import (
    ContextCancelledError,
    MalformedURLError,
    MissingURLError,
    SchemeAlreadyRegisteredError,
    UnknownSchemeError,
    URLConfigError,
)
from .registry import Factory, Registry
from .rwlock import ReadWriteLock
from .url import parse_url

__all__ = [
    "Registry",
    "Factory",
    "Context",
    "ReadWriteLock",
    "parse_url",
    "URLConfigError",
    "MalformedURLError",
    "SchemeAlreadyRegisteredError",
    "UnknownSchemeError",
    "MissingURLError",
    "ContextCancelledError",
]
