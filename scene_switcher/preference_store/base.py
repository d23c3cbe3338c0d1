from abc import ABC, abstractmethod


class PreferenceStore(ABC):
    """
    名前空間付きの文字列キーバリューストア
    """

    def __init__(self, namespace: str):
        self.namespace = namespace

    def make_key(self, key: str) -> str:
        return f"{self.namespace}/{key}"

    @abstractmethod
    async def get_string(self, key: str, default: str = "") -> str: ...

    @abstractmethod
    async def set_string(self, key: str, value: str) -> None: ...
