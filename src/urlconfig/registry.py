from __future__ import annotations

import logging
import os
from typing import Callable, Generic, Optional, TypeVar

import httpx

from .context import Context
from .errors import MissingURLError, SchemeAlreadyRegisteredError, UnknownSchemeError
from .rwlock import ReadWriteLock
from .url import parse_url

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A factory receives the caller's context and the parsed URL and returns a
# configured value, raising on failure.
Factory = Callable[[Context, httpx.URL], T]


class Registry(Generic[T]):
    """Maps URL schemes to factories producing values of type `T`.

    `register()` binds a factory to a scheme once; `configure()` parses a URL,
    picks the factory bound to its scheme and returns whatever it builds.

    Thread safety:
    - `configure()` calls share a read lock and run in parallel. The lock is
      held while the factory runs, so a factory must not call `register()` or
      `configure()` on the registry that is calling it. Either call can block
      forever behind the caller's read lock.
    - `register()` holds the write lock across the duplicate check and the
      insert, so two concurrent registrations of one scheme cannot both win.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._factories: dict[str, Factory[T]] = {}

    def register(self, scheme: str, factory: Factory[T]) -> None:
        """Bind `factory` to `scheme`.

        Raises `SchemeAlreadyRegisteredError` if the scheme is already bound; the
        existing factory stays in place.
        """

        if not callable(factory):
            raise TypeError(f"factory for scheme {scheme!r} must be callable")

        with self._lock.write():
            if scheme in self._factories:
                raise SchemeAlreadyRegisteredError(scheme)
            self._factories[scheme] = factory

        logger.debug("registered factory %r for scheme %r", factory, scheme)

    def factory(self, scheme: str) -> Callable[[Factory[T]], Factory[T]]:
        """Decorator form of `register()`; returns the function unchanged."""

        def decorator(fn: Factory[T]) -> Factory[T]:
            self.register(scheme, fn)
            return fn

        return decorator

    def configure(self, ctx: Context, url: str) -> T:
        """Build a value for `url` using the factory bound to its scheme.

        Raises:
        - `MalformedURLError` if `url` does not parse (checked before locking).
        - `UnknownSchemeError` if nothing is bound to the URL's scheme.
        - Anything the factory raises, unchanged.
        """

        parsed = parse_url(url)

        with self._lock.read():
            factory = self._factories.get(parsed.scheme)
            if factory is None:
                raise UnknownSchemeError(parsed.scheme)

            logger.debug("configuring %r with factory for scheme %r", url, parsed.scheme)
            return factory(ctx, parsed)

    def configure_from_env(self, ctx: Context, name: str, default: Optional[str] = None) -> T:
        """Like `configure()`, reading the URL from the environment variable `name`.

        Falls back to `default`; raises `MissingURLError` when neither is set.
        Both values are stripped, and a blank value counts as unset.
        """

        raw = os.getenv(name, "").strip()
        if not raw:
            raw = (default or "").strip()
        if not raw:
            raise MissingURLError(name)
        return self.configure(ctx, raw)

    def schemes(self) -> list[str]:
        with self._lock.read():
            return sorted(self._factories)

    def __contains__(self, scheme: object) -> bool:
        with self._lock.read():
            return scheme in self._factories

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._factories)

    def __repr__(self) -> str:
        return f"Registry(schemes={self.schemes()!r})"
