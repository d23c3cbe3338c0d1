from argparse import ArgumentParser, Namespace
from logging import getLogger
from pathlib import Path

from pydantic import BaseModel

from ..scene_switcher import SceneTab
from .common import create_cli_app_context, get_config_dir, get_project_dir

logger = getLogger(__name__)


class SubcommandListSceneArguments(BaseModel):
    project_dir: Path
    config_dir: Path | None
    tab: SceneTab
    query: str


async def subcommand_list_scene(args: SubcommandListSceneArguments) -> None:
    app_context = await create_cli_app_context(
        project_dir=args.project_dir,
        config_dir=args.config_dir,
    )
    settings = app_context.settings
    scene_catalog = app_context.scene_catalog
    scene_history = app_context.scene_history
    scene_switcher = app_context.scene_switcher

    scenes = scene_switcher.scenes_for_tab(tab=args.tab, query=args.query)
    if len(scenes) == 0:
        print(scene_switcher.empty_message(tab=args.tab, query=args.query))
        return

    current_scene_path = scene_switcher.current_scene_path
    for scene in scenes:
        current_mark = ">" if scene.path == current_scene_path else " "
        favorite_mark = "★" if scene_history.is_favorite(scene.path) else "☆"
        display_name = scene_catalog.display_name(
            scene=scene,
            show_build_index=settings.show_build_index,
        )

        print(f"{current_mark} {favorite_mark} {display_name: <32} {scene.path}")

    print(f"Total: {len(scene_catalog.all_scenes())} scenes")


async def execute_subcommand_list_scene(
    args: Namespace,
) -> None:
    await subcommand_list_scene(
        args=SubcommandListSceneArguments(
            project_dir=get_project_dir(args),
            config_dir=get_config_dir(args),
            tab=SceneTab(args.tab),
            query=args.query,
        ),
    )


async def add_arguments_subcommand_list_scene(
    parser: ArgumentParser,
) -> None:
    parser.add_argument(
        "--tab",
        type=str,
        choices=[tab.value for tab in SceneTab],
        default=SceneTab.ALL.value,
    )
    parser.add_argument(
        "-q",
        "--query",
        type=str,
        default="",
    )
    parser.set_defaults(handler=execute_subcommand_list_scene)
