from logging import getLogger
from pathlib import Path

from pydantic import BaseModel, Field

from ..host_event import HostEvent, HostEventHub
from ..json_file import load_json_file, save_json_file
from ..scene import BuildSceneEntry
from .base import ActiveScene, EditorHost, OpenSceneMode

logger = getLogger(__name__)

STATE_DIR_NAME = ".scene_switcher"
STATE_FILE_NAME = "editor_state.json"


class _EditorState(BaseModel):
    struct_version: int = 1
    build_scenes: list[BuildSceneEntry] = Field(default_factory=list)
    active_scene_path: str = ""
    active_scene_dirty: bool = False
    additive_scene_paths: list[str] = Field(default_factory=list)


class EditorHostFilesystem(EditorHost):
    """
    プロジェクトディレクトリ上のシーンファイルを扱うホスト。
    ビルドリストと開いているシーンの状態は
    <project>/.scene_switcher/editor_state.json に保存する。
    """

    def __init__(
        self,
        project_dir: Path,
        scene_extensions: list[str],
        events: HostEventHub | None = None,
    ):
        self.project_dir = project_dir
        self.scene_extensions = [extension.lower() for extension in scene_extensions]
        self.events = events if events is not None else HostEventHub()

        self.state_path = project_dir / STATE_DIR_NAME / STATE_FILE_NAME

    async def __load_state(self) -> _EditorState:
        state_path = self.state_path
        if not state_path.exists():
            return _EditorState()

        state_dict = load_json_file(path=state_path)

        return _EditorState.model_validate(state_dict)

    async def __save_state(self, state: _EditorState) -> None:
        save_json_file(data=state.model_dump(), path=self.state_path)

    def resolve_path(self, path: str) -> Path:
        return self.project_dir / path

    def scene_exists(self, path: str) -> bool:
        if len(path) == 0:
            return False

        return self.resolve_path(path).is_file()

    async def find_scene_paths(self) -> list[str]:
        project_dir = self.project_dir
        scene_extensions = self.scene_extensions

        scene_paths: list[str] = []
        for file_path in project_dir.rglob("*"):
            relative_path = file_path.relative_to(project_dir)
            if STATE_DIR_NAME in relative_path.parts:
                continue

            if not file_path.is_file():
                continue

            if file_path.suffix.lower() not in scene_extensions:
                continue

            scene_paths.append(relative_path.as_posix())

        return scene_paths

    async def get_build_scenes(self) -> list[BuildSceneEntry]:
        state = await self.__load_state()
        return state.build_scenes

    async def set_build_scenes(self, build_scenes: list[BuildSceneEntry]) -> None:
        state = await self.__load_state()
        state.build_scenes = list(build_scenes)

        await self.__save_state(state=state)
        logger.info(f"build list updated: {len(build_scenes)} scenes")

        await self.events.emit(HostEvent.BUILD_LIST_CHANGED)

    async def get_active_scene(self) -> ActiveScene:
        state = await self.__load_state()

        return ActiveScene(
            path=state.active_scene_path,
            is_dirty=state.active_scene_dirty,
        )

    async def mark_active_scene_dirty(self) -> None:
        state = await self.__load_state()
        state.active_scene_dirty = True

        await self.__save_state(state=state)

    async def open_scene(self, path: str, mode: OpenSceneMode) -> None:
        if not self.scene_exists(path):
            raise FileNotFoundError(f"Scene not found: {path}")

        state = await self.__load_state()

        if mode == OpenSceneMode.SINGLE:
            state.active_scene_path = path
            state.active_scene_dirty = False
            state.additive_scene_paths = []
        else:
            if path != state.active_scene_path and path not in state.additive_scene_paths:
                state.additive_scene_paths.append(path)

        await self.__save_state(state=state)
        logger.info(f"opened scene: {path} (mode={mode.value})")

        await self.events.emit(HostEvent.SCENE_OPENED)

    async def save_open_scenes(self) -> None:
        state = await self.__load_state()
        state.active_scene_dirty = False

        await self.__save_state(state=state)
        logger.info("saved open scenes")
