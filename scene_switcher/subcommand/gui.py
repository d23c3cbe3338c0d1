from argparse import ArgumentParser, Namespace
from pathlib import Path

from pydantic import BaseModel

from .common import get_config_dir, get_project_dir


class SubcommandGuiArguments(BaseModel):
    project_dir: Path
    config_dir: Path | None


async def subcommand_gui(args: SubcommandGuiArguments) -> None:
    # flet は GUI を起動するときだけ読み込む
    from ..gui.run_app import run_app

    await run_app(
        project_dir=args.project_dir,
        config_dir=args.config_dir,
    )


async def execute_subcommand_gui(
    args: Namespace,
) -> None:
    await subcommand_gui(
        args=SubcommandGuiArguments(
            project_dir=get_project_dir(args),
            config_dir=get_config_dir(args),
        ),
    )


async def add_arguments_subcommand_gui(
    parser: ArgumentParser,
) -> None:
    parser.set_defaults(handler=execute_subcommand_gui)
