from logging import getLogger
from typing import Awaitable, Callable

import flet as ft

from ...app_context import AppContext

logger = getLogger(__name__)


class SceneDropdown(ft.Container):  # type:ignore[misc]
    """
    ビルドリストのシーンを先頭に並べたツールバー用のシーン選択
    """

    scene_dropdown: ft.Dropdown | None

    def __init__(
        self,
        app_context: AppContext,
        on_scenes_changed: Callable[[], Awaitable[None]],
    ):
        super().__init__()

        self.scene_dropdown = None

        self.app_context = app_context

        self.on_scenes_changed_callback = on_scenes_changed

    def build(self) -> None:
        scene_dropdown = ft.Dropdown(
            width=220,
            dense=True,
            hint_text="シーンを選択",
            on_change=self.on_scene_dropdown_change,
        )
        self.scene_dropdown = scene_dropdown

        self.content = scene_dropdown

    def render_scenes(self) -> None:
        app_context = self.app_context
        settings = app_context.settings
        scene_catalog = app_context.scene_catalog
        scene_switcher = app_context.scene_switcher

        scene_dropdown = self.scene_dropdown
        assert scene_dropdown is not None

        scene_options: list[ft.dropdown.Option] = []
        for scene_index, scene in enumerate(scene_catalog.toolbar_scenes()):
            scene_options.append(
                ft.dropdown.Option(
                    key=str(scene_index),
                    text=scene_catalog.display_name(
                        scene=scene,
                        show_build_index=settings.show_build_index,
                    ),
                ),
            )

        current_scene_index = scene_switcher.current_scene_index()

        scene_dropdown.options = scene_options
        scene_dropdown.value = (
            str(current_scene_index) if current_scene_index >= 0 else None
        )

    async def on_scene_dropdown_change(
        self,
        event: ft.ControlEvent,
    ) -> None:
        app_context = self.app_context

        scene_dropdown = self.scene_dropdown
        assert scene_dropdown is not None

        selected_index_string = scene_dropdown.value
        assert selected_index_string is not None

        selected_index = int(selected_index_string)
        if selected_index == app_context.scene_switcher.current_scene_index():
            return

        toolbar_scenes = app_context.scene_catalog.toolbar_scenes()
        if selected_index >= len(toolbar_scenes):
            return

        scene = toolbar_scenes[selected_index]
        await app_context.scene_switcher.load_scene(path=scene.path)

        # キャンセルされた場合も選択を現在のシーンに戻す
        await self.on_scenes_changed_callback()
