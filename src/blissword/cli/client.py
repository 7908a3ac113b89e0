"""
HTTP client for the Blissword API.
"""

import httpx

from blissword.config import get_settings


def _url(path: str) -> str:
    return f"{get_settings().api_url}{path}"


def _post(path: str, payload: dict | None = None) -> dict:
    r = httpx.post(_url(path), json=payload or {}, timeout=60)
    r.raise_for_status()
    return r.json()


# === Buffer ===

def get_buffer() -> dict:
    r = httpx.get(_url("/buffer"))
    r.raise_for_status()
    return r.json()


def append(payload_id: str, gloss: str, symbol, decompose: bool = True) -> dict:
    return _post("/buffer/append", {"id": payload_id, "gloss": gloss, "symbol": symbol, "decompose": decompose})


def caret_backward() -> dict:
    return _post("/buffer/caret/backward")


def caret_forward() -> dict:
    return _post("/buffer/caret/forward")


def delete() -> dict:
    return _post("/buffer/delete")


def clear() -> dict:
    return _post("/buffer/clear")


def add_indicator(indicator_id: int, source_id: str = "") -> dict:
    return _post("/buffer/indicator", {"indicator_id": indicator_id, "source_id": source_id})


def remove_indicator() -> dict:
    return _post("/buffer/indicator/remove")


def add_modifier(symbol, gloss: str, prepend: bool = False, source_id: str = "") -> dict:
    payload = {"symbol": symbol, "gloss": gloss, "prepend": prepend, "source_id": source_id}
    return _post("/buffer/modifier", payload)


def remove_modifier() -> dict:
    return _post("/buffer/modifier/remove")
