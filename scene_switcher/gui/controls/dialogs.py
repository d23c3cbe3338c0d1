import asyncio
from logging import getLogger
from typing import Awaitable, Callable

import flet as ft

from ...scene_switcher import SaveChoice

logger = getLogger(__name__)


async def show_save_changes_dialog(page: ft.Page) -> SaveChoice:
    future: asyncio.Future[SaveChoice] = asyncio.get_running_loop().create_future()

    def make_on_click(
        choice: SaveChoice,
    ) -> Callable[[ft.ControlEvent], Awaitable[None]]:
        async def on_click(event: ft.ControlEvent) -> None:
            page.close(dialog)
            if not future.done():
                future.set_result(choice)

        return on_click

    async def on_dismiss(event: ft.ControlEvent) -> None:
        if not future.done():
            future.set_result(SaveChoice.CANCEL)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("シーンが変更されています"),
        content=ft.Text("切り替える前に現在のシーンを保存しますか？"),
        actions=[
            ft.TextButton(text="保存", on_click=make_on_click(SaveChoice.SAVE)),
            ft.TextButton(
                text="保存しない", on_click=make_on_click(SaveChoice.DONT_SAVE)
            ),
            ft.TextButton(text="キャンセル", on_click=make_on_click(SaveChoice.CANCEL)),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        on_dismiss=on_dismiss,
    )
    page.open(dialog)

    choice = await future
    logger.info(f"save changes dialog: {choice.value}")

    return choice


async def show_reload_dialog(page: ft.Page) -> bool:
    future: asyncio.Future[bool] = asyncio.get_running_loop().create_future()

    async def on_reload_clicked(event: ft.ControlEvent) -> None:
        page.close(dialog)
        if not future.done():
            future.set_result(True)

    async def on_cancel_clicked(event: ft.ControlEvent) -> None:
        page.close(dialog)
        if not future.done():
            future.set_result(False)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("シーンを再読み込み"),
        content=ft.Text("未保存の変更があります。再読み込みしますか？"),
        actions=[
            ft.TextButton(text="再読み込み", on_click=on_reload_clicked),
            ft.TextButton(text="キャンセル", on_click=on_cancel_clicked),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.open(dialog)

    return await future
