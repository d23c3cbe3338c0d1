from logging import getLogger
from typing import Awaitable, Callable

import flet as ft

from ...app_context import AppContext
from ...editor_host import OpenSceneMode
from ...scene import SceneRecord
from ...scene_filter import group_scenes_by_folder
from ..app_state import AppState

logger = getLogger(__name__)

CURRENT_SCENE_BGCOLOR = "#4d994d"


class SceneListPanel(ft.Column):  # type:ignore[misc]
    scene_list_view: ft.ListView | None
    empty_message_text: ft.Text | None

    def __init__(
        self,
        app_state: AppState,
        app_context: AppContext,
        on_scenes_changed: Callable[[], Awaitable[None]],
        expand: bool | int | None = None,
    ):
        super().__init__(expand=expand)

        self.scene_list_view = None
        self.empty_message_text = None

        self.app_state = app_state
        self.app_context = app_context

        self.on_scenes_changed_callback = on_scenes_changed

    def build(self) -> None:
        scene_list_view = ft.ListView(
            expand=1,
            spacing=2,
        )
        self.scene_list_view = scene_list_view

        empty_message_text = ft.Text(
            value="",
            visible=False,
            color=ft.colors.ON_SURFACE_VARIANT,
        )
        self.empty_message_text = empty_message_text

        self.controls = [
            empty_message_text,
            scene_list_view,
        ]

    def render_scenes(self) -> None:
        app_state = self.app_state
        scene_switcher = self.app_context.scene_switcher

        scene_list_view = self.scene_list_view
        assert scene_list_view is not None

        empty_message_text = self.empty_message_text
        assert empty_message_text is not None

        scenes = scene_switcher.scenes_for_tab(
            tab=app_state.selected_tab,
            query=app_state.search_query,
        )

        scene_list_view.controls.clear()
        if self.app_context.settings.group_by_folder:
            for folder, folder_scenes in group_scenes_by_folder(scenes=scenes):
                scene_list_view.controls.append(
                    ft.Text(
                        value=folder,
                        size=12,
                        color=ft.colors.ON_SURFACE_VARIANT,
                    ),
                )
                for scene in folder_scenes:
                    scene_list_view.controls.append(
                        self.create_scene_entry(scene=scene)
                    )
        else:
            for scene in scenes:
                scene_list_view.controls.append(self.create_scene_entry(scene=scene))

        empty_message_text.visible = len(scenes) == 0
        empty_message_text.value = scene_switcher.empty_message(
            tab=app_state.selected_tab,
            query=app_state.search_query,
        )

    def create_scene_entry(self, scene: SceneRecord) -> ft.Control:
        app_context = self.app_context
        settings = app_context.settings
        scene_catalog = app_context.scene_catalog
        scene_history = app_context.scene_history
        scene_switcher = app_context.scene_switcher

        is_current_scene = scene.path == scene_switcher.current_scene_path
        is_favorite = scene_history.is_favorite(scene.path)

        async def on_favorite_clicked(event: ft.ControlEvent) -> None:
            await self.toggle_favorite(scene=scene)

        async def on_scene_clicked(event: ft.ControlEvent) -> None:
            await self.load_scene(scene=scene, mode=OpenSceneMode.SINGLE)

        async def on_open_additive_clicked(event: ft.ControlEvent) -> None:
            await self.load_scene(scene=scene, mode=OpenSceneMode.ADDITIVE)

        async def on_build_list_clicked(event: ft.ControlEvent) -> None:
            if scene.in_build_list:
                await scene_catalog.remove_from_build_list(path=scene.path)
            else:
                await scene_catalog.add_to_build_list(path=scene.path)

            await self.on_scenes_changed_callback()

        async def on_copy_path_clicked(event: ft.ControlEvent) -> None:
            page = self.page

            page.set_clipboard(scene.path)
            page.open(ft.SnackBar(content=ft.Text(f"コピーしました: {scene.path}")))

        scene_label = scene_catalog.display_name(
            scene=scene,
            show_build_index=settings.show_build_index,
        )

        return ft.Container(
            content=ft.Row(
                controls=[
                    ft.IconButton(
                        icon=ft.icons.STAR if is_favorite else ft.icons.STAR_BORDER,
                        icon_size=18,
                        on_click=on_favorite_clicked,
                    ),
                    ft.TextButton(
                        content=ft.Text(
                            value=scene_label,
                            weight=(
                                ft.FontWeight.BOLD
                                if is_current_scene
                                else ft.FontWeight.NORMAL
                            ),
                            overflow=ft.TextOverflow.FADE,
                            no_wrap=True,
                        ),
                        tooltip=scene.path if settings.show_path_in_tooltip else None,
                        on_click=on_scene_clicked,
                        expand=True,
                    ),
                    ft.PopupMenuButton(
                        icon=ft.icons.MORE_VERT,
                        items=[
                            ft.PopupMenuItem(
                                text="開く",
                                on_click=on_scene_clicked,
                            ),
                            ft.PopupMenuItem(
                                text="追加で開く",
                                on_click=on_open_additive_clicked,
                            ),
                            ft.PopupMenuItem(),
                            ft.PopupMenuItem(
                                text=(
                                    "お気に入りから削除"
                                    if is_favorite
                                    else "お気に入りに追加"
                                ),
                                checked=is_favorite,
                                on_click=on_favorite_clicked,
                            ),
                            ft.PopupMenuItem(),
                            ft.PopupMenuItem(
                                text=(
                                    "ビルドリストから削除"
                                    if scene.in_build_list
                                    else "ビルドリストに追加"
                                ),
                                on_click=on_build_list_clicked,
                            ),
                            ft.PopupMenuItem(),
                            ft.PopupMenuItem(
                                text="パスをコピー",
                                on_click=on_copy_path_clicked,
                            ),
                        ],
                    ),
                ],
                spacing=4,
            ),
            bgcolor=CURRENT_SCENE_BGCOLOR if is_current_scene else None,
            padding=ft.padding.symmetric(horizontal=4),
            border_radius=4,
        )

    async def toggle_favorite(self, scene: SceneRecord) -> None:
        scene_history = self.app_context.scene_history

        is_favorite = await scene_history.toggle_favorite(path=scene.path)
        logger.info(f"favorite toggled: {scene.path} -> {is_favorite}")

        await self.on_scenes_changed_callback()

    async def load_scene(self, scene: SceneRecord, mode: OpenSceneMode) -> None:
        scene_switcher = self.app_context.scene_switcher

        loaded = await scene_switcher.load_scene(path=scene.path, mode=mode)
        if loaded:
            await self.on_scenes_changed_callback()
