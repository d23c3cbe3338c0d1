from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import pytest

from scene_switcher.editor_host import EditorHostFilesystem, OpenSceneMode
from scene_switcher.host_event import HostEvent
from scene_switcher.scene import BuildSceneEntry
from scene_switcher.scene_catalog import SceneCatalog
from scene_switcher.scene_history import SceneHistory
from scene_switcher.scene_switcher import SaveChoice, SceneSwitcher, SceneTab

from .conftest import SCENE_A, SCENE_B, SCENE_C, FakeClock


class FakePrompt:
    def __init__(self, choice: SaveChoice = SaveChoice.CANCEL, reload: bool = False):
        self.choice = choice
        self.reload = reload
        self.save_changes_count = 0
        self.reload_count = 0

    async def ask_save_changes(self) -> SaveChoice:
        self.save_changes_count += 1
        return self.choice

    async def ask_reload(self) -> bool:
        self.reload_count += 1
        return self.reload


@pytest.fixture
def prompt() -> FakePrompt:
    return FakePrompt()


@pytest.fixture
def scene_switcher(
    editor_host: EditorHostFilesystem,
    scene_history: SceneHistory,
    clock: FakeClock,
    prompt: FakePrompt,
) -> SceneSwitcher:
    asyncio.run(
        editor_host.set_build_scenes(
            [
                BuildSceneEntry(path=SCENE_A),
                BuildSceneEntry(path=SCENE_B, enabled=False),
            ]
        )
    )
    scene_catalog = SceneCatalog(editor_host=editor_host, clock=clock)
    scene_switcher = SceneSwitcher(
        editor_host=editor_host,
        scene_catalog=scene_catalog,
        scene_history=scene_history,
        ask_save_changes=prompt.ask_save_changes,
        ask_reload=prompt.ask_reload,
    )
    asyncio.run(scene_switcher.initialize())
    return scene_switcher


def test_load_clean_scene_skips_prompt(
    scene_switcher: SceneSwitcher, editor_host: EditorHostFilesystem, prompt: FakePrompt
) -> None:
    assert asyncio.run(scene_switcher.load_scene(SCENE_C)) is True

    active_scene = asyncio.run(editor_host.get_active_scene())
    assert active_scene.path == SCENE_C
    assert prompt.save_changes_count == 0
    assert scene_switcher.scene_history.recents() == [SCENE_C]


@pytest.mark.parametrize(
    ("choice", "expected_path", "expected_loaded"),
    [
        (SaveChoice.SAVE, SCENE_B, True),
        (SaveChoice.DONT_SAVE, SCENE_B, True),
        (SaveChoice.CANCEL, SCENE_A, False),
    ],
)
def test_dirty_scene_asks_before_switching(
    choice: SaveChoice,
    expected_path: str,
    expected_loaded: bool,
    scene_switcher: SceneSwitcher,
    editor_host: EditorHostFilesystem,
    prompt: FakePrompt,
) -> None:
    asyncio.run(scene_switcher.load_scene(SCENE_A))
    asyncio.run(editor_host.mark_active_scene_dirty())
    prompt.choice = choice

    assert asyncio.run(scene_switcher.load_scene(SCENE_B)) is expected_loaded

    active_scene = asyncio.run(editor_host.get_active_scene())
    assert prompt.save_changes_count == 1
    assert active_scene.path == expected_path
    if choice == SaveChoice.CANCEL:
        assert active_scene.is_dirty is True
        assert scene_switcher.scene_history.recents() == [SCENE_A]
    else:
        assert scene_switcher.scene_history.recents() == [SCENE_B, SCENE_A]


def test_additive_open_keeps_active_scene(
    scene_switcher: SceneSwitcher, editor_host: EditorHostFilesystem, prompt: FakePrompt
) -> None:
    asyncio.run(scene_switcher.load_scene(SCENE_A))
    asyncio.run(editor_host.mark_active_scene_dirty())

    assert asyncio.run(scene_switcher.load_scene(SCENE_C, mode=OpenSceneMode.ADDITIVE))

    active_scene = asyncio.run(editor_host.get_active_scene())
    assert active_scene.path == SCENE_A
    assert prompt.save_changes_count == 0
    assert scene_switcher.scene_history.recents() == [SCENE_A]


def test_load_build_scene_at_index(
    scene_switcher: SceneSwitcher, editor_host: EditorHostFilesystem
) -> None:
    assert asyncio.run(scene_switcher.load_build_scene_at_index(0)) is True
    assert asyncio.run(editor_host.get_active_scene()).path == SCENE_A


@pytest.mark.parametrize(
    ("index", "message"),
    [
        (5, "No scene at build index 5"),
        (-1, "No scene at build index -1"),
        (1, "Scene at index 1 is disabled in build settings"),
    ],
)
def test_load_build_scene_at_invalid_index_logs_warning(
    index: int,
    message: str,
    scene_switcher: SceneSwitcher,
    editor_host: EditorHostFilesystem,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING):
        assert asyncio.run(scene_switcher.load_build_scene_at_index(index)) is False

    assert message in caplog.text
    assert asyncio.run(editor_host.get_active_scene()).path == ""


def test_validate_build_scene_at_index(scene_switcher: SceneSwitcher) -> None:
    assert asyncio.run(scene_switcher.validate_build_scene_at_index(0)) is True
    assert asyncio.run(scene_switcher.validate_build_scene_at_index(1)) is False
    assert asyncio.run(scene_switcher.validate_build_scene_at_index(2)) is False


def test_reload_untitled_scene_is_refused(
    scene_switcher: SceneSwitcher, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        assert asyncio.run(scene_switcher.reload_current_scene()) is False

    assert "Cannot reload untitled scene" in caplog.text


def test_reload_dirty_scene_requires_confirmation(
    scene_switcher: SceneSwitcher, editor_host: EditorHostFilesystem, prompt: FakePrompt
) -> None:
    asyncio.run(scene_switcher.load_scene(SCENE_A))
    asyncio.run(editor_host.mark_active_scene_dirty())

    assert asyncio.run(scene_switcher.reload_current_scene()) is False
    assert asyncio.run(editor_host.get_active_scene()).is_dirty is True

    prompt.reload = True
    assert asyncio.run(scene_switcher.reload_current_scene()) is True
    assert asyncio.run(editor_host.get_active_scene()).is_dirty is False
    assert prompt.reload_count == 2


def test_scenes_for_tab(scene_switcher: SceneSwitcher) -> None:
    asyncio.run(scene_switcher.scene_history.toggle_favorite(SCENE_C))
    asyncio.run(scene_switcher.load_scene(SCENE_B))
    asyncio.run(scene_switcher.load_scene(SCENE_A))

    def names(tab: SceneTab, query: str = "") -> list[str]:
        return [scene.name for scene in scene_switcher.scenes_for_tab(tab, query)]

    assert names(SceneTab.ALL) == ["A", "B", "C"]
    assert names(SceneTab.ALL, "levels") == ["C"]
    assert names(SceneTab.BUILD) == ["A", "B"]
    assert names(SceneTab.FAVORITES) == ["C"]
    assert names(SceneTab.RECENT) == ["A", "B"]
    assert names(SceneTab.RECENT, "b") == ["B"]


def test_empty_message_mentions_query(scene_switcher: SceneSwitcher) -> None:
    assert "zzz" in scene_switcher.empty_message(SceneTab.ALL, "zzz")
    assert scene_switcher.empty_message(SceneTab.ALL) != scene_switcher.empty_message(
        SceneTab.RECENT
    )


def test_attached_events_keep_snapshot_current(
    scene_switcher: SceneSwitcher,
    editor_host: EditorHostFilesystem,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    scene_catalog = scene_switcher.scene_catalog
    update_build_info = scene_catalog.update_build_info
    update_count = 0

    async def counting_update_build_info() -> None:
        nonlocal update_count
        update_count += 1
        await update_build_info()

    monkeypatch.setattr(scene_catalog, "update_build_info", counting_update_build_info)

    scene_switcher.attach()
    scene_switcher.attach()

    asyncio.run(editor_host.open_scene(SCENE_C, OpenSceneMode.SINGLE))
    assert scene_switcher.current_scene_path == SCENE_C
    assert scene_switcher.current_scene_index() == 2

    asyncio.run(editor_host.set_build_scenes([BuildSceneEntry(path=SCENE_C)]))
    assert update_count == 1
    scene_c = scene_catalog.find_scene(SCENE_C)
    assert scene_c is not None and scene_c.build_index == 0
    assert scene_switcher.current_scene_index() == 0

    scene_switcher.detach()
    asyncio.run(editor_host.open_scene(SCENE_A, OpenSceneMode.SINGLE))
    asyncio.run(editor_host.set_build_scenes([]))

    assert scene_switcher.current_scene_path == SCENE_C
    assert update_count == 1


def test_tick_refresh_respects_interval(
    scene_switcher: SceneSwitcher,
    editor_host: EditorHostFilesystem,
    clock: FakeClock,
    project_dir: Path,
) -> None:
    scene_switcher.attach()
    (project_dir / SCENE_C).unlink()

    asyncio.run(editor_host.events.emit(HostEvent.TICK))
    assert len(scene_switcher.scene_catalog.all_scenes()) == 3

    clock.advance(5.0)
    asyncio.run(editor_host.events.emit(HostEvent.TICK))
    assert len(scene_switcher.scene_catalog.all_scenes()) == 2


def test_focus_gained_forces_refresh(
    scene_switcher: SceneSwitcher,
    editor_host: EditorHostFilesystem,
    project_dir: Path,
) -> None:
    scene_switcher.attach()
    (project_dir / SCENE_C).unlink()

    asyncio.run(editor_host.events.emit(HostEvent.FOCUS_GAINED))

    assert len(scene_switcher.scene_catalog.all_scenes()) == 2


def test_save_current_scene_clears_dirty_flag(
    scene_switcher: SceneSwitcher, editor_host: EditorHostFilesystem
) -> None:
    asyncio.run(scene_switcher.load_scene(SCENE_A))
    asyncio.run(editor_host.mark_active_scene_dirty())

    asyncio.run(scene_switcher.save_current_scene())

    assert asyncio.run(editor_host.get_active_scene()).is_dirty is False


def test_load_build_scene_with_missing_file_logs_warning(
    scene_switcher: SceneSwitcher,
    editor_host: EditorHostFilesystem,
    caplog: pytest.LogCaptureFixture,
) -> None:
    asyncio.run(editor_host.set_build_scenes([BuildSceneEntry(path="Assets/Gone.unity")]))

    with caplog.at_level(logging.WARNING):
        assert asyncio.run(scene_switcher.load_build_scene_at_index(0)) is False

    assert "Scene not found: Assets/Gone.unity" in caplog.text
    assert asyncio.run(editor_host.get_active_scene()).path == ""


@pytest.mark.parametrize("mode", [OpenSceneMode.SINGLE, OpenSceneMode.ADDITIVE])
def test_load_deleted_favorite_keeps_active_scene(
    mode: OpenSceneMode,
    scene_switcher: SceneSwitcher,
    editor_host: EditorHostFilesystem,
    project_dir: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    asyncio.run(scene_switcher.load_scene(SCENE_A))
    asyncio.run(scene_switcher.scene_history.toggle_favorite(SCENE_C))
    (project_dir / SCENE_C).unlink()

    with caplog.at_level(logging.WARNING):
        assert asyncio.run(scene_switcher.load_scene(SCENE_C, mode)) is False

    assert "Scene not found" in caplog.text
    assert asyncio.run(editor_host.get_active_scene()).path == SCENE_A
    assert scene_switcher.scene_history.recents() == [SCENE_A]
