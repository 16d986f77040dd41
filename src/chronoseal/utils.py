from __future__ import annotations

import time
from typing import Mapping

DEFAULT_HOST = "localhost:3000"
DEFAULT_PROTOCOL = "http"


def unix_now() -> int:
    return int(time.time())


def base_url_from_headers(headers: Mapping[str, str]) -> str:
    host = headers.get("host") or DEFAULT_HOST
    protocol = headers.get("x-forwarded-proto") or DEFAULT_PROTOCOL
    # Proxies may append a chain of protocols ("https,http"); the first hop wins.
    protocol = protocol.split(",")[0].strip().lower()
    return f"{protocol}://{host}"
