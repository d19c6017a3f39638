SQLITE_PRAGMAS = (
    ("journal_mode", "WAL"),
    ("busy_timeout", "5000"),
    ("foreign_keys", "ON"),
)


def is_sqlite_url(url: str) -> bool:
    return url.startswith("sqlite")


def is_memory_sqlite_url(url: str) -> bool:
    if not is_sqlite_url(url):
        return False
    return ":memory:" in url or url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:")


def sqlite_connect_args(url: str) -> dict:
    if not is_sqlite_url(url):
        return {}
    return {"check_same_thread": False, "timeout": 30}


def apply_sqlite_pragmas(connection, pragmas=SQLITE_PRAGMAS) -> None:
    """Apply connection pragmas. Foreign keys must be on for wishlist cascades."""
    cursor = connection.cursor()
    try:
        for name, value in pragmas:
            cursor.execute(f"PRAGMA {name}={value}")
    finally:
        cursor.close()
