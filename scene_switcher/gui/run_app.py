from logging import getLogger
from pathlib import Path

import flet as ft

from .. import __version__ as APP_VERSION
from ..app_context import create_app_context
from ..host_event import HostEvent
from ..scene_switcher import SaveChoice, SceneTab
from .app_state import AppState
from .controls.dialogs import show_reload_dialog, show_save_changes_dialog
from .views import Home

logger = getLogger(__name__)


async def flet_app_main(
    page: ft.Page,
    project_dir: Path,
    config_dir: Path | None,
) -> None:
    page.title = f"Scene Switcher v{APP_VERSION}"
    page.window.width = 360
    page.window.height = 600

    async def ask_save_changes() -> SaveChoice:
        return await show_save_changes_dialog(page=page)

    async def ask_reload() -> bool:
        return await show_reload_dialog(page=page)

    app_context = await create_app_context(
        project_dir=project_dir,
        config_dir=config_dir,
        ask_save_changes=ask_save_changes,
        ask_reload=ask_reload,
    )
    app_context.scene_switcher.attach()

    app_state = AppState(
        selected_tab=SceneTab.ALL,
        search_query="",
    )

    home = Home(
        route="/",
        app_state=app_state,
        app_context=app_context,
    )

    async def on_route_change(event: ft.RouteChangeEvent) -> None:
        if page.route == "/":
            page.views.clear()
            page.views.append(home)
            logger.info(
                f"on_route_change: route={page.route}, view_count={len(page.views)}"
            )

        page.update()

    async def on_window_event(event: ft.WindowEvent) -> None:
        if event.data == "focus":
            await app_context.editor_host.events.emit(HostEvent.FOCUS_GAINED)

    async def on_keyboard_event(event: ft.KeyboardEvent) -> None:
        await home.on_keyboard_event(event)

    async def on_disconnect(event: ft.ControlEvent) -> None:
        app_context.scene_switcher.detach()

    page.on_route_change = on_route_change
    page.on_keyboard_event = on_keyboard_event
    page.window.on_event = on_window_event
    page.on_disconnect = on_disconnect
    page.go("/")


async def run_app(project_dir: Path, config_dir: Path | None) -> None:
    async def target(page: ft.Page) -> None:
        await flet_app_main(
            page=page,
            project_dir=project_dir,
            config_dir=config_dir,
        )

    await ft.app_async(target=target)
