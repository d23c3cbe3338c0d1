import asyncio
import sys
from argparse import Namespace
from pathlib import Path

from ..app_context import AppContext, create_app_context
from ..scene_switcher import SaveChoice


async def ask_save_changes_stdin() -> SaveChoice:
    print("Scene has been modified.", file=sys.stderr)

    while True:
        answer = await asyncio.to_thread(
            input,
            "Save before switching? [s]ave / [d]on't save / [c]ancel: ",
        )
        answer = answer.strip().lower()

        if answer in ("s", "save"):
            return SaveChoice.SAVE
        if answer in ("d", "dont_save", "don't save"):
            return SaveChoice.DONT_SAVE
        if answer in ("c", "cancel", ""):
            return SaveChoice.CANCEL


async def ask_reload_stdin() -> bool:
    answer = await asyncio.to_thread(
        input,
        "You have unsaved changes. Reload anyway? [y/N]: ",
    )
    return answer.strip().lower() in ("y", "yes")


def get_project_dir(args: Namespace) -> Path:
    project_dir: str | None = args.project_dir
    if project_dir is None:
        return Path.cwd()

    return Path(project_dir)


def get_config_dir(args: Namespace) -> Path | None:
    config_dir: str | None = args.config_dir
    if config_dir is None:
        return None

    return Path(config_dir)


async def create_cli_app_context(project_dir: Path, config_dir: Path | None) -> AppContext:
    return await create_app_context(
        project_dir=project_dir,
        config_dir=config_dir,
        ask_save_changes=ask_save_changes_stdin,
        ask_reload=ask_reload_stdin,
    )


def exit_with_error(message: str) -> None:
    print(message, file=sys.stderr)
    sys.exit(1)
