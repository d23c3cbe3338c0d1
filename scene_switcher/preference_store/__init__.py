from .base import PreferenceStore
from .file import PreferenceStoreFile
from .memory import PreferenceStoreMemory

__all__ = [
    "PreferenceStore",
    "PreferenceStoreFile",
    "PreferenceStoreMemory",
]
