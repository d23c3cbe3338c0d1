from argparse import ArgumentParser, Namespace
from pathlib import Path

from pydantic import BaseModel

from .common import (
    create_cli_app_context,
    exit_with_error,
    get_config_dir,
    get_project_dir,
)


class SubcommandMarkDirtyArguments(BaseModel):
    project_dir: Path
    config_dir: Path | None


async def subcommand_mark_dirty(args: SubcommandMarkDirtyArguments) -> None:
    """
    外部エディタでの編集後などに、アクティブシーンを未保存状態にする
    """
    app_context = await create_cli_app_context(
        project_dir=args.project_dir,
        config_dir=args.config_dir,
    )
    editor_host = app_context.editor_host

    active_scene = await editor_host.get_active_scene()
    if active_scene.is_untitled:
        exit_with_error("No active scene")
        return

    await editor_host.mark_active_scene_dirty()
    print(f"Marked as modified: {active_scene.path}")


async def execute_subcommand_mark_dirty(
    args: Namespace,
) -> None:
    await subcommand_mark_dirty(
        args=SubcommandMarkDirtyArguments(
            project_dir=get_project_dir(args),
            config_dir=get_config_dir(args),
        ),
    )


async def add_arguments_subcommand_mark_dirty(
    parser: ArgumentParser,
) -> None:
    parser.set_defaults(handler=execute_subcommand_mark_dirty)
