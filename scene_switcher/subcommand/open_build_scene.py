from argparse import ArgumentParser, Namespace
from pathlib import Path

from pydantic import BaseModel

from .common import create_cli_app_context, get_config_dir, get_project_dir


class SubcommandOpenBuildSceneArguments(BaseModel):
    project_dir: Path
    config_dir: Path | None
    build_index: int


async def subcommand_open_build_scene(args: SubcommandOpenBuildSceneArguments) -> None:
    app_context = await create_cli_app_context(
        project_dir=args.project_dir,
        config_dir=args.config_dir,
    )
    scene_switcher = app_context.scene_switcher

    # 範囲外や無効なシーンは警告ログのみ
    await scene_switcher.load_build_scene_at_index(index=args.build_index)


async def execute_subcommand_open_build_scene(
    args: Namespace,
) -> None:
    await subcommand_open_build_scene(
        args=SubcommandOpenBuildSceneArguments(
            project_dir=get_project_dir(args),
            config_dir=get_config_dir(args),
            build_index=args.build_index,
        ),
    )


async def add_arguments_subcommand_open_build_scene(
    parser: ArgumentParser,
) -> None:
    parser.add_argument(
        "build_index",
        type=int,
    )
    parser.set_defaults(handler=execute_subcommand_open_build_scene)
