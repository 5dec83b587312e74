import logging
import sqlite3
from pathlib import Path

import httpx

from urlconfig import Context, Registry
from urlconfig.factories import local_path, register_defaults


def _sqlite(ctx: Context, url: httpx.URL) -> sqlite3.Connection:
    ctx.raise_if_cancelled()
    path = local_path(ctx, url.copy_with(scheme="file"))
    return sqlite3.connect(path, timeout=ctx.remaining() or 5.0)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    clients: Registry[httpx.Client] = Registry()
    register_defaults(clients)
    with clients.configure(Context.with_timeout(3.0), "https://example.com/?timeout=3") as client:
        print(client.base_url, client.timeout)

    dbs: Registry[sqlite3.Connection] = Registry()
    dbs.register("sqlite", _sqlite)
    db_file = Path("hello_urlconfig.db").resolve()
    conn = dbs.configure_from_env(Context.background(), "HELLO_DB_URL", default=db_file.as_uri().replace("file:", "sqlite:", 1))
    print(conn.execute("select sqlite_version()").fetchone())
    conn.close()


if __name__ == "__main__":
    main()
