from dataclasses import dataclass
from logging import getLogger
from pathlib import Path

import platformdirs

from .editor_host import EditorHost, EditorHostFilesystem
from .preference_store import PreferenceStore, PreferenceStoreFile
from .scene_catalog import SceneCatalog
from .scene_history import SceneHistory
from .scene_switcher import AskReload, AskSaveChanges, SceneSwitcher
from .settings import Settings, load_or_create_settings

logger = getLogger(__name__)

SETTINGS_FILE_NAME = "settings.json"
PREFERENCES_FILE_NAME = "preferences.json"


@dataclass
class AppContext:
    settings: Settings
    editor_host: EditorHost
    preference_store: PreferenceStore
    scene_catalog: SceneCatalog
    scene_history: SceneHistory
    scene_switcher: SceneSwitcher


def get_default_config_dir() -> Path:
    return platformdirs.user_config_path(
        appauthor="scene_switcher",
        appname="SceneSwitcher",
    )


async def create_app_context(
    project_dir: Path,
    config_dir: Path | None,
    ask_save_changes: AskSaveChanges,
    ask_reload: AskReload,
) -> AppContext:
    if config_dir is None:
        config_dir = get_default_config_dir()

    settings = load_or_create_settings(path=config_dir / SETTINGS_FILE_NAME)

    editor_host = EditorHostFilesystem(
        project_dir=project_dir,
        scene_extensions=settings.scene_extensions,
    )
    preference_store = PreferenceStoreFile(
        path=config_dir / PREFERENCES_FILE_NAME,
        namespace=settings.preference_namespace,
    )
    scene_catalog = SceneCatalog(
        editor_host=editor_host,
        refresh_interval=settings.refresh_interval,
    )
    scene_history = SceneHistory(
        preference_store=preference_store,
        scene_exists=editor_host.scene_exists,
        max_recent_scenes=settings.max_recent_scenes,
    )
    scene_switcher = SceneSwitcher(
        editor_host=editor_host,
        scene_catalog=scene_catalog,
        scene_history=scene_history,
        ask_save_changes=ask_save_changes,
        ask_reload=ask_reload,
    )

    await scene_switcher.initialize()
    logger.info(
        f"project loaded: {project_dir} "
        f"({len(scene_catalog.all_scenes())} scenes)"
    )

    return AppContext(
        settings=settings,
        editor_host=editor_host,
        preference_store=preference_store,
        scene_catalog=scene_catalog,
        scene_history=scene_history,
        scene_switcher=scene_switcher,
    )
