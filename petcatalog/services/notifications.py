"""Change notifications keyed by content URI."""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, List, Protocol
from urllib.parse import urlsplit

from loguru import logger

from petcatalog.domain.contract import content_authority

ChangeCallback = Callable[[str], None]


class ChangePublisher(Protocol):
    """What the provider needs from a notification channel."""

    def notify_change(self, uri: str) -> None:
        ...


def _key(uri: str) -> tuple[str, ...]:
    """(authority, *segments); bare paths belong to the configured authority."""
    value = (uri or "").strip()
    if "://" in value:
        parts = urlsplit(value)
        authority, path = parts.netloc, parts.path
    else:
        authority, path = content_authority(), value.split("?", 1)[0].split("#", 1)[0]
    return (authority, *[segment for segment in path.split("/") if segment])


@dataclass
class _Observer:
    key: tuple[str, ...]
    callback: ChangeCallback
    notify_for_descendants: bool


class ChangeNotifier:
    """
    Fire-and-forget publish/subscribe bus.

    An observer on U is called when U itself changes, when a descendant of U
    changes and it registered with notify_for_descendants, and when an
    ancestor of U changes (a collection change invalidates its items).
    """

    def __init__(self) -> None:
        self._observers: List[_Observer] = []
        self._lock = threading.Lock()

    def register_observer(self, uri: str, callback: ChangeCallback, notify_for_descendants: bool = False) -> None:
        with self._lock:
            self._observers.append(_Observer(_key(uri), callback, notify_for_descendants))

    def unregister_observer(self, callback: ChangeCallback) -> None:
        with self._lock:
            self._observers = [obs for obs in self._observers if obs.callback != callback]

    def notify_change(self, uri: str) -> None:
        changed = _key(uri)
        with self._lock:
            observers = list(self._observers)
        for obs in observers:
            if not self._wants(obs, changed):
                continue
            try:
                obs.callback(uri)
            except Exception:
                logger.exception("Observer {!r} failed for {}", obs.callback, uri)

    @staticmethod
    def _wants(obs: _Observer, changed: tuple[str, ...]) -> bool:
        if obs.key == changed:
            return True
        # observer sits below the changed URI
        if obs.key[: len(changed)] == changed:
            return True
        # observer sits above the changed URI
        return obs.notify_for_descendants and changed[: len(obs.key)] == obs.key
