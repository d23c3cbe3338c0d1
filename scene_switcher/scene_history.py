from logging import getLogger
from typing import Callable

from pydantic import BaseModel, Field, ValidationError

from .preference_store import PreferenceStore

logger = getLogger(__name__)

FAVORITES_KEY = "favorites"
RECENT_KEY = "recent"


class ScenePathList(BaseModel):
    paths: list[str] = Field(default_factory=list)


class SceneHistory:
    """
    お気に入りシーンと最近開いたシーンの記録
    """

    def __init__(
        self,
        preference_store: PreferenceStore,
        scene_exists: Callable[[str], bool],
        max_recent_scenes: int = 10,
    ):
        self.preference_store = preference_store
        self.scene_exists = scene_exists
        self.max_recent_scenes = max_recent_scenes

        self.__favorite_paths: list[str] = []
        self.__recent_paths: list[str] = []

    def favorites(self) -> list[str]:
        return list(self.__favorite_paths)

    def recents(self) -> list[str]:
        return list(self.__recent_paths)

    def is_favorite(self, path: str) -> bool:
        return path in self.__favorite_paths

    async def toggle_favorite(self, path: str) -> bool:
        favorite_paths = self.__favorite_paths

        if path in favorite_paths:
            favorite_paths.remove(path)
            is_favorite = False
        else:
            favorite_paths.append(path)
            is_favorite = True

        await self.save_favorites()
        return is_favorite

    async def add_recent(self, path: str) -> None:
        recent_paths = self.__recent_paths

        if path in recent_paths:
            recent_paths.remove(path)

        recent_paths.insert(0, path)
        del recent_paths[self.max_recent_scenes :]

        await self.save_recents()

    async def save(self) -> None:
        await self.save_favorites()
        await self.save_recents()

    async def load(self) -> None:
        self.__favorite_paths = await self.__load_paths(key=FAVORITES_KEY)

        recent_paths = await self.__load_paths(key=RECENT_KEY)
        self.__recent_paths = recent_paths[: self.max_recent_scenes]

    async def save_favorites(self) -> None:
        await self.__save_paths(key=FAVORITES_KEY, paths=self.__favorite_paths)

    async def save_recents(self) -> None:
        await self.__save_paths(key=RECENT_KEY, paths=self.__recent_paths)

    async def __save_paths(self, key: str, paths: list[str]) -> None:
        payload = ScenePathList(paths=list(paths)).model_dump_json()
        await self.preference_store.set_string(key=key, value=payload)

    async def __load_paths(self, key: str) -> list[str]:
        payload = await self.preference_store.get_string(key=key, default="")
        if len(payload) == 0:
            return []

        try:
            path_list = ScenePathList.model_validate_json(payload)
        except ValidationError:
            # 壊れた設定値は無視して空にする
            logger.warning(f"ignored corrupted preference: key={key}")
            return []

        paths: list[str] = []
        for path in path_list.paths:
            if path in paths:
                continue

            if not self.scene_exists(path):
                continue

            paths.append(path)

        return paths
