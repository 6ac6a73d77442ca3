"""
One-shot notifications carried in the session from a redirect to the next rendered page.
"""
from typing import Any, MutableMapping

FLASH_KEY = "_flashes"


def flash(store: MutableMapping[str, Any], title: str, message: str, variant: str = "default") -> None:
    """Queue a notification. variant is "default" or "destructive"."""
    queued = list(store.get(FLASH_KEY) or [])
    queued.append({"title": title, "message": message, "variant": variant})
    store[FLASH_KEY] = queued


def consume_flashes(store: MutableMapping[str, Any]) -> list[dict[str, str]]:
    return list(store.pop(FLASH_KEY, None) or [])
