from collections.abc import Sequence
from pathlib import PurePosixPath

from .scene import SceneRecord


def filter_scenes(scenes: Sequence[SceneRecord], query: str | None) -> list[SceneRecord]:
    """
    名前またはパスに query を含むシーンを返す（大文字小文字は区別しない）。
    query が空（空白のみを含む）の場合は入力をそのままの順序で返す。
    """
    if query is None or len(query.strip()) == 0:
        return list(scenes)

    lowered_query = query.lower()
    return [
        scene
        for scene in scenes
        if lowered_query in scene.name.lower() or lowered_query in scene.path.lower()
    ]


def group_scenes_by_folder(
    scenes: Sequence[SceneRecord],
) -> list[tuple[str, list[SceneRecord]]]:
    """
    フォルダごとにまとめる。フォルダは最初に現れた順、フォルダ内は入力の順を保つ。
    """
    groups: dict[str, list[SceneRecord]] = {}
    for scene in scenes:
        folder = str(PurePosixPath(scene.path).parent)
        groups.setdefault(folder, []).append(scene)

    return list(groups.items())
