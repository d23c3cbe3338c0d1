from __future__ import annotations

import json
from pathlib import Path

from scene_switcher.json_file import load_json_file, save_json_file


def test_save_creates_parent_directory(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config" / "state.json"

    save_json_file(data={"name": "タイトル", "paths": ["a", "b"]}, path=path)

    text = path.read_text(encoding="utf-8")
    assert "タイトル" in text
    assert json.loads(text) == {"name": "タイトル", "paths": ["a", "b"]}
    assert load_json_file(path=path) == {"name": "タイトル", "paths": ["a", "b"]}


def test_save_overwrites_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "state.json"
    path.write_text("{broken", encoding="utf-8")

    save_json_file(data=[1, 2], path=path)

    assert load_json_file(path=path) == [1, 2]
