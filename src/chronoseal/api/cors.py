from __future__ import annotations

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"

BASE_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ALLOW_METHODS,
}

EXECUTE_HEADERS = {
    **BASE_HEADERS,
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

PREFLIGHT_HEADERS = {
    **BASE_HEADERS,
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-CSRF-Token, X-Requested-With, Accept",
}
