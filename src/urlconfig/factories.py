from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx

from .context import Context
from .registry import Registry


def _parse_timeout(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"timeout must be a number of seconds, got {value!r}") from None
    if timeout != timeout or timeout <= 0 or timeout == float("inf"):
        raise ValueError(f"timeout must be a finite positive number, got {value!r}")
    return timeout


def httpx_client(ctx: Context, url: httpx.URL) -> httpx.Client:
    """Build an `httpx.Client` whose base URL is `url`.

    The `timeout` query parameter (seconds) sets the client timeout and is
    stripped from the base URL. Without it the context's remaining time is
    used, if the context has a deadline.

        registry.configure(ctx, "https://api.example.com/v1?timeout=2.5")
    """

    ctx.raise_if_cancelled()
    if url.scheme not in ("http", "https"):
        raise ValueError(f"httpx_client only handles http/https URLs, got {url.scheme!r}")
    if not url.host:
        raise ValueError(f"{url}: missing host")

    kwargs: dict[str, Any] = {}
    raw_timeout = url.params.get("timeout")
    if raw_timeout is not None:
        kwargs["timeout"] = _parse_timeout(raw_timeout)
        url = url.copy_remove_param("timeout")
    else:
        remaining = ctx.remaining()
        if remaining is not None:
            kwargs["timeout"] = remaining

    return httpx.Client(base_url=url, **kwargs)


def local_path(ctx: Context, url: httpx.URL) -> Path:
    """Resolve a `file://` URL to a `Path`. Only local hosts are accepted."""

    ctx.raise_if_cancelled()
    if url.scheme != "file":
        raise ValueError(f"local_path only handles file URLs, got {url.scheme!r}")
    if url.host not in ("", "localhost"):
        raise ValueError(f"{url}: file URLs must not name a remote host ({url.host!r})")
    return Path(url.path)


def register_defaults(registry: Registry[httpx.Client]) -> None:
    """Bind `httpx_client` to http and https on `registry`."""

    registry.register("http", httpx_client)
    registry.register("https", httpx_client)
