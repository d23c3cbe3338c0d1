from __future__ import annotations

from pathlib import Path

import pytest

from scene_switcher.editor_host import EditorHostFilesystem
from scene_switcher.preference_store import PreferenceStoreMemory
from scene_switcher.scene_history import SceneHistory

SCENE_A = "Assets/Scenes/A.unity"
SCENE_B = "Assets/Scenes/B.unity"
SCENE_C = "Assets/Levels/C.unity"


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def create_scene_file(project_dir: Path, path: str) -> None:
    file_path = project_dir / path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text("%YAML 1.1\n", encoding="utf-8")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project_dir = tmp_path / "project"
    for path in (SCENE_A, SCENE_B, SCENE_C):
        create_scene_file(project_dir, path)

    (project_dir / "Assets" / "Scripts").mkdir(parents=True)
    (project_dir / "Assets" / "Scripts" / "Player.cs").write_text("", encoding="utf-8")
    return project_dir


@pytest.fixture
def editor_host(project_dir: Path) -> EditorHostFilesystem:
    return EditorHostFilesystem(project_dir=project_dir, scene_extensions=[".unity"])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def preference_store() -> PreferenceStoreMemory:
    return PreferenceStoreMemory(namespace="scene_switcher")


@pytest.fixture
def scene_history(
    preference_store: PreferenceStoreMemory, editor_host: EditorHostFilesystem
) -> SceneHistory:
    return SceneHistory(
        preference_store=preference_store,
        scene_exists=editor_host.scene_exists,
        max_recent_scenes=10,
    )
