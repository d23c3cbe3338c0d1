from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from scene_switcher.settings import Settings, load_or_create_settings


def test_load_or_create_writes_defaults(tmp_path: Path) -> None:
    settings_path = tmp_path / "config" / "settings.json"

    settings = load_or_create_settings(settings_path)

    assert settings == Settings()
    assert settings.max_recent_scenes == 10
    assert settings.refresh_interval == 5.0
    assert json.loads(settings_path.read_text(encoding="utf-8"))["max_recent_scenes"] == 10


def test_load_or_create_reads_existing_file(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"max_recent_scenes": 15, "scene_extensions": [".scene"]}),
        encoding="utf-8",
    )

    settings = load_or_create_settings(settings_path)

    assert settings.max_recent_scenes == 15
    assert settings.scene_extensions == [".scene"]
    assert settings.enable_number_shortcuts is True


@pytest.mark.parametrize("max_recent_scenes", [4, 21])
def test_max_recent_scenes_range(max_recent_scenes: int) -> None:
    with pytest.raises(ValidationError):
        Settings(max_recent_scenes=max_recent_scenes)
