from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from clickerengine.runtime import GameRuntime

Observer = Callable[["GameRuntime"], None]


class Notification(Enum):
    TICK = auto()
    BUY_BUILDING = auto()
    BUY_UPGRADE = auto()


class Observers:
    """Callback lists keyed by notification kind."""

    def __init__(self) -> None:
        self._callbacks: dict[Notification, list[Observer]] = {
            kind: [] for kind in Notification
        }

    def subscribe(self, kind: Notification, callback: Observer) -> None:
        self._callbacks[kind].append(callback)

    def unsubscribe(self, kind: Notification, callback: Observer) -> None:
        callbacks = self._callbacks[kind]
        if callback in callbacks:
            callbacks.remove(callback)

    def fire(self, kind: Notification, runtime: GameRuntime) -> None:
        # Copy so a callback may unsubscribe itself while firing
        for callback in list(self._callbacks[kind]):
            callback(runtime)
