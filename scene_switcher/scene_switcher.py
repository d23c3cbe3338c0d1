from enum import Enum
from logging import getLogger
from typing import Awaitable, Callable

from .editor_host import EditorHost, OpenSceneMode
from .host_event import HostEvent
from .scene import SceneRecord
from .scene_catalog import SceneCatalog
from .scene_filter import filter_scenes
from .scene_history import SceneHistory

logger = getLogger(__name__)

NUMBER_SHORTCUT_COUNT = 9


class SaveChoice(Enum):
    SAVE = "save"
    DONT_SAVE = "dont_save"
    CANCEL = "cancel"


class SceneTab(Enum):
    ALL = "all"
    BUILD = "build"
    FAVORITES = "favorites"
    RECENT = "recent"


AskSaveChanges = Callable[[], Awaitable[SaveChoice]]
AskReload = Callable[[], Awaitable[bool]]


class SceneSwitcher:
    def __init__(
        self,
        editor_host: EditorHost,
        scene_catalog: SceneCatalog,
        scene_history: SceneHistory,
        ask_save_changes: AskSaveChanges,
        ask_reload: AskReload,
    ):
        self.editor_host = editor_host
        self.scene_catalog = scene_catalog
        self.scene_history = scene_history
        self.ask_save_changes = ask_save_changes
        self.ask_reload = ask_reload

        self.current_scene_path = ""
        self.is_attached = False

    async def initialize(self) -> None:
        await self.scene_catalog.refresh(force=True)
        await self.scene_history.load()
        await self.update_current_scene()

    def attach(self) -> None:
        if self.is_attached:
            return

        events = self.editor_host.events
        events.subscribe(HostEvent.TICK, self.on_tick)
        events.subscribe(HostEvent.FOCUS_GAINED, self.on_focus_gained)
        events.subscribe(HostEvent.BUILD_LIST_CHANGED, self.on_build_list_changed)
        events.subscribe(HostEvent.SCENE_OPENED, self.on_scene_opened)

        self.is_attached = True

    def detach(self) -> None:
        if not self.is_attached:
            return

        events = self.editor_host.events
        events.unsubscribe(HostEvent.TICK, self.on_tick)
        events.unsubscribe(HostEvent.FOCUS_GAINED, self.on_focus_gained)
        events.unsubscribe(HostEvent.BUILD_LIST_CHANGED, self.on_build_list_changed)
        events.unsubscribe(HostEvent.SCENE_OPENED, self.on_scene_opened)

        self.is_attached = False

    async def on_tick(self) -> None:
        refreshed = await self.scene_catalog.refresh()
        if refreshed:
            await self.update_current_scene()

    async def on_focus_gained(self) -> None:
        await self.scene_catalog.refresh(force=True)
        await self.update_current_scene()

    async def on_build_list_changed(self) -> None:
        await self.scene_catalog.update_build_info()

    async def on_scene_opened(self) -> None:
        await self.update_current_scene()

    async def update_current_scene(self) -> None:
        active_scene = await self.editor_host.get_active_scene()
        self.current_scene_path = active_scene.path

    def current_scene_index(self) -> int:
        current_scene_path = self.current_scene_path

        for index, scene in enumerate(self.scene_catalog.toolbar_scenes()):
            if scene.path == current_scene_path:
                return index

        return -1

    async def confirm_switch(self) -> bool:
        """
        未保存の変更がある場合は保存するかどうかを確認する。
        切り替えを続行してよい場合に True を返す。
        """
        editor_host = self.editor_host

        active_scene = await editor_host.get_active_scene()
        if not active_scene.is_dirty:
            return True

        choice = await self.ask_save_changes()
        if choice == SaveChoice.SAVE:
            await editor_host.save_open_scenes()
            return True

        if choice == SaveChoice.DONT_SAVE:
            return True

        logger.info("scene switch cancelled")
        return False

    async def load_scene(
        self,
        path: str,
        mode: OpenSceneMode = OpenSceneMode.SINGLE,
    ) -> bool:
        if len(path) == 0:
            return False

        if not self.editor_host.scene_exists(path):
            logger.warning(f"Scene not found: {path}")
            return False

        if mode == OpenSceneMode.ADDITIVE:
            await self.open_scene_additive(path=path)
            return True

        if not await self.confirm_switch():
            return False

        await self.editor_host.open_scene(path=path, mode=OpenSceneMode.SINGLE)
        await self.scene_history.add_recent(path=path)

        return True

    async def open_scene_additive(self, path: str) -> None:
        await self.editor_host.open_scene(path=path, mode=OpenSceneMode.ADDITIVE)

    async def validate_build_scene_at_index(self, index: int) -> bool:
        build_scenes = await self.editor_host.get_build_scenes()
        return 0 <= index < len(build_scenes) and build_scenes[index].enabled

    async def load_build_scene_at_index(self, index: int) -> bool:
        build_scenes = await self.editor_host.get_build_scenes()

        if index < 0 or index >= len(build_scenes):
            logger.warning(f"No scene at build index {index}")
            return False

        build_scene = build_scenes[index]
        if not build_scene.enabled:
            logger.warning(f"Scene at index {index} is disabled in build settings")
            return False

        loaded = await self.load_scene(path=build_scene.path)
        if loaded:
            scene = SceneRecord.from_path(path=build_scene.path)
            logger.info(f"Loaded scene: {scene.name} (Build Index: {index})")

        return loaded

    async def save_current_scene(self) -> None:
        await self.editor_host.save_open_scenes()

    async def reload_current_scene(self) -> bool:
        editor_host = self.editor_host

        active_scene = await editor_host.get_active_scene()
        if active_scene.is_untitled:
            logger.warning("Cannot reload untitled scene")
            return False

        if active_scene.is_dirty and not await self.ask_reload():
            return False

        await editor_host.open_scene(path=active_scene.path, mode=OpenSceneMode.SINGLE)
        logger.info("Reloaded current scene")

        return True

    def scene_records_for_paths(self, paths: list[str]) -> list[SceneRecord]:
        scene_catalog = self.scene_catalog

        scenes: list[SceneRecord] = []
        for path in paths:
            scene = scene_catalog.find_scene(path)
            if scene is None:
                scene = SceneRecord.from_path(path=path)

            scenes.append(scene)

        return scenes

    def scenes_for_tab(self, tab: SceneTab, query: str = "") -> list[SceneRecord]:
        scene_catalog = self.scene_catalog
        scene_history = self.scene_history

        if tab == SceneTab.ALL:
            scenes = scene_catalog.all_scenes()
        elif tab == SceneTab.BUILD:
            scenes = scene_catalog.build_scenes()
        elif tab == SceneTab.FAVORITES:
            scenes = self.scene_records_for_paths(scene_history.favorites())
        elif tab == SceneTab.RECENT:
            scenes = self.scene_records_for_paths(scene_history.recents())
        else:
            raise Exception(f"Unexpected tab: {tab}")

        return filter_scenes(scenes=scenes, query=query)

    def empty_message(self, tab: SceneTab, query: str = "") -> str:
        if tab == SceneTab.ALL:
            if len(query.strip()) == 0:
                return "プロジェクトにシーンがありません"

            return f"'{query}' に一致するシーンがありません"

        if tab == SceneTab.BUILD:
            return "ビルドリストにシーンが登録されていません"

        if tab == SceneTab.FAVORITES:
            return "お気に入りのシーンがありません。星アイコンで追加できます"

        if tab == SceneTab.RECENT:
            return "最近開いたシーンがありません"

        return "表示するシーンがありません"
