import time
from logging import getLogger
from typing import Callable

from .editor_host import EditorHost
from .scene import BuildSceneEntry, SceneRecord

logger = getLogger(__name__)


class SceneCatalog:
    """
    プロジェクト内のシーン一覧とビルドリストへの登録状況を保持する。

    refresh() はシーン数に比例してコストがかかるため、
    refresh_interval 秒以内の再スキャンは force=True でない限りスキップする。
    """

    def __init__(
        self,
        editor_host: EditorHost,
        refresh_interval: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.editor_host = editor_host
        self.refresh_interval = refresh_interval
        self.clock = clock

        self.__scenes: list[SceneRecord] = []
        self.__last_refreshed_at: float | None = None

    @property
    def last_refreshed_at(self) -> float | None:
        return self.__last_refreshed_at

    def is_refresh_due(self) -> bool:
        last_refreshed_at = self.__last_refreshed_at
        if last_refreshed_at is None:
            return True

        return self.clock() - last_refreshed_at >= self.refresh_interval

    async def refresh(self, force: bool = False) -> bool:
        if not force and not self.is_refresh_due():
            return False

        editor_host = self.editor_host

        self.__last_refreshed_at = self.clock()

        scene_paths = await editor_host.find_scene_paths()
        build_scenes = await editor_host.get_build_scenes()

        scenes: list[SceneRecord] = []
        for scene_path in scene_paths:
            if len(scene_path) == 0:
                continue

            scenes.append(
                SceneRecord.from_path(path=scene_path, build_scenes=build_scenes)
            )

        scenes.sort(key=lambda scene: (scene.name.casefold(), scene.name, scene.path))
        self.__scenes = scenes

        logger.debug(f"refreshed scene catalog: {len(scenes)} scenes")
        return True

    def all_scenes(self) -> list[SceneRecord]:
        return list(self.__scenes)

    def build_scenes(self) -> list[SceneRecord]:
        scenes = [scene for scene in self.__scenes if scene.in_build_list]
        scenes.sort(key=lambda scene: scene.build_index)
        return scenes

    def toolbar_scenes(self) -> list[SceneRecord]:
        """
        ビルドリストのシーンをビルド番号順に先頭へ並べ、残りを名前順に続ける
        """
        other_scenes = [scene for scene in self.__scenes if not scene.in_build_list]
        return self.build_scenes() + other_scenes

    def find_scene(self, path: str) -> SceneRecord | None:
        for scene in self.__scenes:
            if scene.path == path:
                return scene

        return None

    def display_name(self, scene: SceneRecord, show_build_index: bool = True) -> str:
        if show_build_index and scene.in_build_list:
            return f"[{scene.build_index}] {scene.name}"

        return scene.name

    async def update_build_info(self) -> None:
        build_scenes = await self.editor_host.get_build_scenes()

        for scene in self.__scenes:
            scene.update_build_info(build_scenes=build_scenes)

    async def add_to_build_list(self, path: str) -> None:
        editor_host = self.editor_host

        build_scenes = await editor_host.get_build_scenes()
        build_scenes.append(BuildSceneEntry(path=path, enabled=True))
        await editor_host.set_build_scenes(build_scenes=build_scenes)

        await self.update_build_info()
        logger.info(f"added to build list: {path}")

    async def remove_from_build_list(self, path: str) -> None:
        editor_host = self.editor_host

        build_scenes = await editor_host.get_build_scenes()
        next_build_scenes = [
            build_scene for build_scene in build_scenes if build_scene.path != path
        ]
        await editor_host.set_build_scenes(build_scenes=next_build_scenes)

        await self.update_build_info()
        logger.info(f"removed from build list: {path}")
