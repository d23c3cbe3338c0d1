import asyncio
import logging
from argparse import ArgumentParser
from logging import getLogger

from . import __version__ as APP_VERSION
from .subcommand.build_list import add_arguments_subcommand_build_list
from .subcommand.favorite import add_arguments_subcommand_favorite
from .subcommand.gui import add_arguments_subcommand_gui
from .subcommand.list_scene import add_arguments_subcommand_list_scene
from .subcommand.mark_dirty import add_arguments_subcommand_mark_dirty
from .subcommand.open_build_scene import add_arguments_subcommand_open_build_scene
from .subcommand.open_scene import add_arguments_subcommand_open_scene

logger = getLogger(__name__)


async def main() -> None:
    parser = ArgumentParser(
        prog="SceneSwitcher",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    parser.add_argument(
        "--project-dir",
        type=str,
        default=None,
        help="Project directory (default: current directory)",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory for settings.json and preferences.json",
    )

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s : %(message)s",
    )

    subparsers = parser.add_subparsers()

    subparser_list = subparsers.add_parser("list")
    await add_arguments_subcommand_list_scene(parser=subparser_list)

    subparser_open = subparsers.add_parser("open")
    await add_arguments_subcommand_open_scene(parser=subparser_open)

    subparser_open_build = subparsers.add_parser("open-build")
    await add_arguments_subcommand_open_build_scene(parser=subparser_open_build)

    subparser_favorite = subparsers.add_parser("favorite")
    await add_arguments_subcommand_favorite(parser=subparser_favorite)

    subparser_build = subparsers.add_parser("build")
    await add_arguments_subcommand_build_list(parser=subparser_build)

    subparser_dirty = subparsers.add_parser("dirty")
    await add_arguments_subcommand_mark_dirty(parser=subparser_dirty)

    subparser_gui = subparsers.add_parser("gui")
    await add_arguments_subcommand_gui(parser=subparser_gui)

    args = parser.parse_args()
    if hasattr(args, "handler"):
        handler = args.handler
        assert callable(args.handler)

        if asyncio.iscoroutinefunction(handler):
            await handler(args)
        else:
            handler(args)
    else:
        parser.print_help()


def run() -> None:
    asyncio.run(main())
