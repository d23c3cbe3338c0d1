from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from ..host_event import HostEventHub
from ..scene import BuildSceneEntry


class OpenSceneMode(Enum):
    SINGLE = "single"
    ADDITIVE = "additive"


@dataclass
class ActiveScene:
    path: str
    """
    未保存の新規シーンの場合は空文字列
    """
    is_dirty: bool

    @property
    def is_untitled(self) -> bool:
        return len(self.path) == 0


class EditorHost(ABC):
    events: HostEventHub

    @abstractmethod
    async def find_scene_paths(self) -> list[str]: ...

    @abstractmethod
    async def get_build_scenes(self) -> list[BuildSceneEntry]: ...

    @abstractmethod
    async def set_build_scenes(self, build_scenes: list[BuildSceneEntry]) -> None: ...

    @abstractmethod
    async def get_active_scene(self) -> ActiveScene: ...

    @abstractmethod
    async def open_scene(self, path: str, mode: OpenSceneMode) -> None: ...

    @abstractmethod
    async def save_open_scenes(self) -> None: ...

    @abstractmethod
    async def mark_active_scene_dirty(self) -> None: ...

    @abstractmethod
    def scene_exists(self, path: str) -> bool: ...
