from __future__ import annotations


class URLConfigError(Exception):
    """Base class for errors raised by urlconfig itself.

    Errors raised by factories are never wrapped in this type; they reach the
    caller of `Registry.configure` exactly as the factory raised them.
    """


class MalformedURLError(URLConfigError, ValueError):
    """The URL string could not be parsed.

    The parser's own exception is available as `__cause__`.
    """

    def __init__(self, url: str, reason: str = "malformed URL") -> None:
        super().__init__(f"{url!r}: {reason}")
        self.url = url
        self.reason = reason


class SchemeAlreadyRegisteredError(URLConfigError, ValueError):
    def __init__(self, scheme: str) -> None:
        super().__init__(f"{scheme}: already registered")
        self.scheme = scheme


class UnknownSchemeError(URLConfigError, LookupError):
    def __init__(self, scheme: str) -> None:
        super().__init__(f"unknown scheme: {scheme}")
        self.scheme = scheme


class MissingURLError(URLConfigError, LookupError):
    """No URL was found in the environment and no default was given."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: environment variable is not set")
        self.name = name


class ContextCancelledError(URLConfigError):
    def __init__(self, reason: str = "context cancelled") -> None:
        super().__init__(reason)
        self.reason = reason
