"""Connection string parsing: ADO.NET-style strings to SQLAlchemy URLs.

ConnectionStrings:DefaultConnection may hold either a SQLAlchemy URL
(used unchanged) or a semicolon-separated Key=Value string as written for
SQL Server or SQLite providers.
"""

from urllib.parse import quote_plus

DEFAULT_ODBC_DRIVER = "ODBC Driver 18 for SQL Server"

_SQLITE_KEYS = {"data source", "datasource", "filename"}
_SQLITE_EXTRA_KEYS = {"mode", "cache", "foreign keys", "pooling"}

# SqlClient keyword (lowercased) -> ODBC keyword
_ODBC_KEYWORDS: dict[str, str] = {
    "server": "Server",
    "data source": "Server",
    "address": "Server",
    "addr": "Server",
    "database": "Database",
    "initial catalog": "Database",
    "user id": "UID",
    "uid": "UID",
    "user": "UID",
    "password": "PWD",
    "pwd": "PWD",
    "integrated security": "Trusted_Connection",
    "trusted_connection": "Trusted_Connection",
    "trustservercertificate": "TrustServerCertificate",
    "trust server certificate": "TrustServerCertificate",
    "encrypt": "Encrypt",
    "multipleactiveresultsets": "MARS_Connection",
    "multiple active result sets": "MARS_Connection",
}
_ODBC_FLAGS = {"Trusted_Connection", "TrustServerCertificate", "Encrypt", "MARS_Connection"}
_ODBC_FLAG_VALUES = {"true": "yes", "false": "no", "sspi": "yes"}


def parse_connection_string(value: str) -> dict[str, str]:
    """Split 'Key=Value;Key2=Value2' into a dict with lowercased keys.

    Braced values ({...}) may contain ';'. Empty segments are ignored.

    Raises:
        ValueError: When a segment has no '='.
    """
    pairs: dict[str, str] = {}
    segment: list[str] = []
    depth = 0
    for ch in value + ";":
        if ch == "{":
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
        if ch == ";" and depth == 0:
            part = "".join(segment).strip()
            segment = []
            if not part:
                continue
            if "=" not in part:
                raise ValueError(f"Invalid connection string segment: {part!r}")
            key, _, val = part.partition("=")
            pairs[key.strip().lower()] = val.strip()
            continue
        segment.append(ch)
    return pairs


def _is_sqlite(pairs: dict[str, str]) -> bool:
    keys = set(pairs)
    return bool(keys & _SQLITE_KEYS) and keys <= _SQLITE_KEYS | _SQLITE_EXTRA_KEYS


def to_odbc_connection_string(pairs: dict[str, str]) -> str:
    """Rewrite SqlClient keywords as ODBC Driver for SQL Server keywords.

    User Id/Password become UID/PWD, Data Source/Initial Catalog become
    Server/Database and True/False flags become yes/no. Unknown keywords
    pass through. The driver comes first; DEFAULT_ODBC_DRIVER when unset.
    """
    driver = pairs.get("driver", f"{{{DEFAULT_ODBC_DRIVER}}}")
    parts = [f"Driver={driver}"]
    for key, value in pairs.items():
        if key == "driver":
            continue
        odbc_key = _ODBC_KEYWORDS.get(key, key)
        if odbc_key in _ODBC_FLAGS:
            value = _ODBC_FLAG_VALUES.get(value.lower(), value)
        parts.append(f"{odbc_key}={value}")
    return ";".join(parts)


def to_sqlalchemy_url(value: str) -> str:
    """Return a SQLAlchemy async URL for a connection string ('' when unset)."""
    value = (value or "").strip()
    if not value:
        return ""
    if "://" in value:
        return value
    pairs = parse_connection_string(value)
    if _is_sqlite(pairs):
        path = next(pairs[k] for k in ("data source", "datasource", "filename") if k in pairs)
        return f"sqlite+aiosqlite:///{path}"
    odbc = to_odbc_connection_string(pairs)
    return f"mssql+aioodbc:///?odbc_connect={quote_plus(odbc)}"
