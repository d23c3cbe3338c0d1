from argparse import ArgumentParser, Namespace
from pathlib import Path

from pydantic import BaseModel

from .common import (
    create_cli_app_context,
    exit_with_error,
    get_config_dir,
    get_project_dir,
)


class SubcommandFavoriteArguments(BaseModel):
    project_dir: Path
    config_dir: Path | None
    scene_path: str


async def subcommand_favorite(args: SubcommandFavoriteArguments) -> None:
    app_context = await create_cli_app_context(
        project_dir=args.project_dir,
        config_dir=args.config_dir,
    )
    scene_catalog = app_context.scene_catalog
    scene_history = app_context.scene_history

    scene_path = args.scene_path
    # 削除済みシーンのお気に入り解除は許可する
    is_known_scene = scene_catalog.find_scene(scene_path) is not None
    if not scene_history.is_favorite(scene_path) and not is_known_scene:
        exit_with_error(f"Scene not found: {scene_path}")
        return

    is_favorite = await scene_history.toggle_favorite(path=scene_path)
    if is_favorite:
        print(f"Added to favorites: {scene_path}")
    else:
        print(f"Removed from favorites: {scene_path}")


async def execute_subcommand_favorite(
    args: Namespace,
) -> None:
    await subcommand_favorite(
        args=SubcommandFavoriteArguments(
            project_dir=get_project_dir(args),
            config_dir=get_config_dir(args),
            scene_path=args.scene_path,
        ),
    )


async def add_arguments_subcommand_favorite(
    parser: ArgumentParser,
) -> None:
    parser.add_argument(
        "scene_path",
        type=str,
    )
    parser.set_defaults(handler=execute_subcommand_favorite)
