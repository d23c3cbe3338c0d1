from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from .common import (
    create_cli_app_context,
    exit_with_error,
    get_config_dir,
    get_project_dir,
)


class SubcommandBuildListArguments(BaseModel):
    project_dir: Path
    config_dir: Path | None
    action: Literal["add", "remove"]
    scene_path: str


async def subcommand_build_list(args: SubcommandBuildListArguments) -> None:
    app_context = await create_cli_app_context(
        project_dir=args.project_dir,
        config_dir=args.config_dir,
    )
    scene_catalog = app_context.scene_catalog

    scene_path = args.scene_path
    scene = scene_catalog.find_scene(scene_path)

    if args.action == "add":
        if scene is None:
            exit_with_error(f"Scene not found: {scene_path}")
            return

        if scene.in_build_list:
            print(f"Already in build list: [{scene.build_index}] {scene.name}")
            return

        await scene_catalog.add_to_build_list(path=scene_path)
        print(f"Added to build list: [{scene.build_index}] {scene.name}")
    else:
        if scene is not None and not scene.in_build_list:
            print(f"Not in build list: {scene.name}")
            return

        await scene_catalog.remove_from_build_list(path=scene_path)
        print(f"Removed from build list: {scene_path}")


async def execute_subcommand_build_list(
    args: Namespace,
) -> None:
    await subcommand_build_list(
        args=SubcommandBuildListArguments(
            project_dir=get_project_dir(args),
            config_dir=get_config_dir(args),
            action=args.action,
            scene_path=args.scene_path,
        ),
    )


async def add_arguments_subcommand_build_list(
    parser: ArgumentParser,
) -> None:
    parser.add_argument(
        "action",
        type=str,
        choices=["add", "remove"],
    )
    parser.add_argument(
        "scene_path",
        type=str,
    )
    parser.set_defaults(handler=execute_subcommand_build_list)
