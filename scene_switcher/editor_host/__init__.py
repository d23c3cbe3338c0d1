from ._filesystem import EditorHostFilesystem
from .base import ActiveScene, EditorHost, OpenSceneMode

__all__ = [
    "ActiveScene",
    "EditorHost",
    "EditorHostFilesystem",
    "OpenSceneMode",
]
