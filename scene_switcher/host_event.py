from enum import Enum
from logging import getLogger
from typing import Awaitable, Callable

logger = getLogger(__name__)


class HostEvent(Enum):
    TICK = "tick"
    FOCUS_GAINED = "focus_gained"
    BUILD_LIST_CHANGED = "build_list_changed"
    SCENE_OPENED = "scene_opened"


HostEventHandler = Callable[[], Awaitable[None]]


class HostEventHub:
    """
    ホストのライフサイクルイベントを購読するためのハブ。
    ハンドラは登録順に逐次 await される。
    """

    def __init__(self) -> None:
        self.__handlers: dict[HostEvent, list[HostEventHandler]] = {
            event: [] for event in HostEvent
        }

    def subscribe(self, event: HostEvent, handler: HostEventHandler) -> None:
        self.__handlers[event].append(handler)

    def unsubscribe(self, event: HostEvent, handler: HostEventHandler) -> None:
        handlers = self.__handlers[event]
        if handler in handlers:
            handlers.remove(handler)

    async def emit(self, event: HostEvent) -> None:
        # ハンドラ内で購読解除されてもよいようにコピーを回す
        for handler in list(self.__handlers[event]):
            await handler()
