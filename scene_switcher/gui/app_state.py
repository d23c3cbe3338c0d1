from dataclasses import dataclass

from ..scene_switcher import SceneTab


@dataclass
class AppState:
    selected_tab: SceneTab
    search_query: str
