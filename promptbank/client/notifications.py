"""Dismissable user notifications recorded by the client controllers.

The display surface is external; controllers only append here.
"""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class Level(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    id: int
    level: Level
    message: str


class Notifier:
    def __init__(self):
        self._items: list[Notification] = []
        self._next_id = 1

    def _push(self, level: Level, message: str) -> Notification:
        item = Notification(id=self._next_id, level=level, message=message)
        self._next_id += 1
        self._items.append(item)
        logger.debug("Notification %s: %s", level.value, message)
        return item

    def success(self, message: str) -> Notification:
        return self._push(Level.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._push(Level.ERROR, message)

    def dismiss(self, notification_id: int) -> None:
        self._items = [n for n in self._items if n.id != notification_id]

    @property
    def items(self) -> list[Notification]:
        return list(self._items)

    @property
    def last(self):
        return self._items[-1] if self._items else None

    def messages(self) -> list[str]:
        return [n.message for n in self._items]
