from logging import getLogger
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field

from .json_file import load_json_file, save_json_file

logger = getLogger(__name__)


class Settings(BaseModel):
    struct_version: int = 1

    max_recent_scenes: Annotated[int, Field(ge=5, le=20)] = 10
    refresh_interval: Annotated[float, Field(ge=0)] = 5.0
    """
    シーン一覧の再スキャンの最小間隔（秒）
    """

    show_build_index: bool = True
    show_path_in_tooltip: bool = True
    group_by_folder: bool = False
    enable_number_shortcuts: bool = True
    """
    Ctrl+1 から Ctrl+9 でビルドリストの先頭 9 シーンを開く
    """

    scene_extensions: list[str] = Field(default_factory=lambda: [".unity"])
    preference_namespace: str = "scene_switcher"


def load_settings_file(path: Path) -> Settings:
    settings_dict = load_json_file(path=path)

    return Settings.model_validate(settings_dict)


def save_settings_file(settings: Settings, path: Path) -> None:
    save_json_file(data=settings.model_dump(), path=path)


def load_or_create_settings(path: Path) -> Settings:
    if path.exists():
        return load_settings_file(path=path)

    # 初回起動
    settings = Settings()
    save_settings_file(settings=settings, path=path)
    logger.info(f"created default settings: {path}")

    return settings
