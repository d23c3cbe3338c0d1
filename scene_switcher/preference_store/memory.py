from .base import PreferenceStore


class PreferenceStoreMemory(PreferenceStore):
    def __init__(self, namespace: str, values: dict[str, str] | None = None):
        super().__init__(namespace=namespace)

        self.values: dict[str, str] = dict(values) if values is not None else {}

    async def get_string(self, key: str, default: str = "") -> str:
        return self.values.get(self.make_key(key), default)

    async def set_string(self, key: str, value: str) -> None:
        self.values[self.make_key(key)] = value
