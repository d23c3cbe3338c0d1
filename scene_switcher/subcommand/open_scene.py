from argparse import ArgumentParser, Namespace
from logging import getLogger
from pathlib import Path

from pydantic import BaseModel

from ..editor_host import OpenSceneMode
from .common import (
    create_cli_app_context,
    exit_with_error,
    get_config_dir,
    get_project_dir,
)

logger = getLogger(__name__)


class SubcommandOpenSceneArguments(BaseModel):
    project_dir: Path
    config_dir: Path | None
    scene_path: str
    additive: bool


async def subcommand_open_scene(args: SubcommandOpenSceneArguments) -> None:
    app_context = await create_cli_app_context(
        project_dir=args.project_dir,
        config_dir=args.config_dir,
    )
    editor_host = app_context.editor_host
    scene_switcher = app_context.scene_switcher

    scene_path = args.scene_path
    if not editor_host.scene_exists(scene_path):
        exit_with_error(f"Scene not found: {scene_path}")
        return

    mode = OpenSceneMode.ADDITIVE if args.additive else OpenSceneMode.SINGLE
    loaded = await scene_switcher.load_scene(path=scene_path, mode=mode)
    if not loaded:
        print("Cancelled")
        return

    print(f"Opened: {scene_path}")


async def execute_subcommand_open_scene(
    args: Namespace,
) -> None:
    await subcommand_open_scene(
        args=SubcommandOpenSceneArguments(
            project_dir=get_project_dir(args),
            config_dir=get_config_dir(args),
            scene_path=args.scene_path,
            additive=args.additive,
        ),
    )


async def add_arguments_subcommand_open_scene(
    parser: ArgumentParser,
) -> None:
    parser.add_argument(
        "scene_path",
        type=str,
    )
    parser.add_argument(
        "--additive",
        action="store_true",
    )
    parser.set_defaults(handler=execute_subcommand_open_scene)
