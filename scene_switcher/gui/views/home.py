import asyncio
import traceback
from logging import getLogger

import flet as ft

from ...app_context import AppContext
from ...host_event import HostEvent
from ...scene import SceneRecord
from ...scene_switcher import NUMBER_SHORTCUT_COUNT, SceneTab
from ..app_state import AppState
from ..controls.scene_dropdown import SceneDropdown
from ..controls.scene_list_panel import SceneListPanel

logger = getLogger(__name__)

TICK_INTERVAL = 1.0

TAB_NAMES: dict[SceneTab, str] = {
    SceneTab.ALL: "すべて",
    SceneTab.BUILD: "ビルド",
    SceneTab.FAVORITES: "お気に入り",
    SceneTab.RECENT: "最近",
}


class Home(ft.View):  # type:ignore[misc]
    tick_task_future: asyncio.Future | None

    scene_list_panel: SceneListPanel | None
    scene_dropdown: SceneDropdown | None
    current_scene_text: ft.Text | None
    total_scene_count_text: ft.Text | None
    search_text_field: ft.TextField | None

    def __init__(
        self,
        route: str,
        app_state: AppState,
        app_context: AppContext,
    ):
        super().__init__(
            route=route,
        )

        self.tick_task_future = None

        self.scene_list_panel = None
        self.scene_dropdown = None
        self.current_scene_text = None
        self.total_scene_count_text = None
        self.search_text_field = None

        self.app_state = app_state
        self.app_context = app_context

        self.rendered_refreshed_at: float | None = None

    def build(self) -> None:
        app_state = self.app_state
        app_context = self.app_context

        scene_list_panel = SceneListPanel(
            app_state=app_state,
            app_context=app_context,
            on_scenes_changed=self.on_scenes_changed,
            expand=True,
        )
        self.scene_list_panel = scene_list_panel

        scene_dropdown = SceneDropdown(
            app_context=app_context,
            on_scenes_changed=self.on_scenes_changed,
        )
        self.scene_dropdown = scene_dropdown

        current_scene_text = ft.Text(value="")
        self.current_scene_text = current_scene_text

        total_scene_count_text = ft.Text(value="", size=12)
        self.total_scene_count_text = total_scene_count_text

        search_text_field = ft.TextField(
            value=app_state.search_query,
            prefix_icon=ft.icons.SEARCH,
            hint_text="シーンを検索",
            dense=True,
            expand=True,
            on_change=self.on_search_text_changed,
        )
        self.search_text_field = search_text_field

        tab_values = list(TAB_NAMES.keys())
        tabs = ft.Tabs(
            selected_index=tab_values.index(app_state.selected_tab),
            tabs=[ft.Tab(text=TAB_NAMES[tab]) for tab in tab_values],
            on_change=self.on_tab_changed,
        )

        self.controls = [
            ft.Row(
                controls=[
                    ft.IconButton(
                        icon=ft.icons.REFRESH,
                        icon_size=20,
                        tooltip="シーン一覧を更新",
                        on_click=self.on_refresh_button_clicked,
                    ),
                    scene_dropdown,
                    ft.Container(expand=True),
                    current_scene_text,
                ],
            ),
            tabs,
            ft.Row(
                controls=[
                    search_text_field,
                    ft.IconButton(
                        icon=ft.icons.CLEAR,
                        icon_size=18,
                        on_click=self.on_clear_search_button_clicked,
                    ),
                ],
            ),
            scene_list_panel,
            ft.Row(
                controls=[
                    total_scene_count_text,
                ],
            ),
        ]

    def did_mount(self) -> None:
        page = self.page
        events = self.app_context.editor_host.events

        events.subscribe(HostEvent.TICK, self.on_host_tick)
        events.subscribe(HostEvent.FOCUS_GAINED, self.on_scenes_changed)
        events.subscribe(HostEvent.BUILD_LIST_CHANGED, self.on_scenes_changed)
        events.subscribe(HostEvent.SCENE_OPENED, self.on_scenes_changed)

        self.render()
        page.update()

        tick_task_future = page.run_task(self.tick_task)
        self.tick_task_future = tick_task_future

    def will_unmount(self) -> None:
        events = self.app_context.editor_host.events

        events.unsubscribe(HostEvent.TICK, self.on_host_tick)
        events.unsubscribe(HostEvent.FOCUS_GAINED, self.on_scenes_changed)
        events.unsubscribe(HostEvent.BUILD_LIST_CHANGED, self.on_scenes_changed)
        events.unsubscribe(HostEvent.SCENE_OPENED, self.on_scenes_changed)

        tick_task_future = self.tick_task_future
        if tick_task_future is not None:
            tick_task_future.cancel()

    def render(self) -> None:
        app_context = self.app_context
        scene_catalog = app_context.scene_catalog
        scene_switcher = app_context.scene_switcher

        scene_list_panel = self.scene_list_panel
        assert scene_list_panel is not None

        scene_dropdown = self.scene_dropdown
        assert scene_dropdown is not None

        current_scene_text = self.current_scene_text
        assert current_scene_text is not None

        total_scene_count_text = self.total_scene_count_text
        assert total_scene_count_text is not None

        current_scene_path = scene_switcher.current_scene_path
        if len(current_scene_path) == 0:
            current_scene_name = "Untitled"
        else:
            current_scene_name = SceneRecord.from_path(path=current_scene_path).name

        current_scene_text.value = f"現在のシーン: {current_scene_name}"
        total_scene_count_text.value = f"合計: {len(scene_catalog.all_scenes())} シーン"

        scene_dropdown.render_scenes()
        scene_list_panel.render_scenes()

        self.rendered_refreshed_at = scene_catalog.last_refreshed_at

    async def on_scenes_changed(self) -> None:
        self.render()
        self.page.update()

    async def on_host_tick(self) -> None:
        last_refreshed_at = self.app_context.scene_catalog.last_refreshed_at
        if last_refreshed_at == self.rendered_refreshed_at:
            return

        await self.on_scenes_changed()

    async def tick_task(self) -> None:
        try:
            events = self.app_context.editor_host.events

            while True:
                await events.emit(HostEvent.TICK)
                await asyncio.sleep(TICK_INTERVAL)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.error(traceback.format_exc())
            raise

    async def on_refresh_button_clicked(self, event: ft.ControlEvent) -> None:
        app_context = self.app_context

        await app_context.scene_catalog.refresh(force=True)
        await app_context.scene_switcher.update_current_scene()
        await self.on_scenes_changed()

    async def on_tab_changed(self, event: ft.ControlEvent) -> None:
        tab_values = list(TAB_NAMES.keys())
        selected_index = int(event.data)

        self.app_state.selected_tab = tab_values[selected_index]
        await self.on_scenes_changed()

    async def on_search_text_changed(self, event: ft.ControlEvent) -> None:
        search_text_field = self.search_text_field
        assert search_text_field is not None

        self.app_state.search_query = search_text_field.value or ""
        await self.on_scenes_changed()

    async def on_clear_search_button_clicked(self, event: ft.ControlEvent) -> None:
        search_text_field = self.search_text_field
        assert search_text_field is not None

        search_text_field.value = ""
        self.app_state.search_query = ""
        await self.on_scenes_changed()

    async def on_keyboard_event(self, event: ft.KeyboardEvent) -> None:
        app_context = self.app_context
        scene_switcher = app_context.scene_switcher

        if not event.ctrl or event.shift:
            return

        if event.alt:
            # Ctrl+Alt+S: 保存, Ctrl+Alt+R: 再読み込み
            if event.key == "S":
                await scene_switcher.save_current_scene()
            elif event.key == "R":
                await scene_switcher.reload_current_scene()
            return

        if not app_context.settings.enable_number_shortcuts:
            return

        number_keys = [str(number) for number in range(1, NUMBER_SHORTCUT_COUNT + 1)]
        if event.key not in number_keys:
            return

        build_index = int(event.key) - 1
        if not await scene_switcher.validate_build_scene_at_index(index=build_index):
            return

        await scene_switcher.load_build_scene_at_index(index=build_index)
