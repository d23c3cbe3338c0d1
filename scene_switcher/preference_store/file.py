import json
from logging import getLogger
from pathlib import Path

from pydantic import RootModel, ValidationError

from ..json_file import load_json_file, save_json_file
from .base import PreferenceStore

logger = getLogger(__name__)


class _PreferenceFile(RootModel[dict[str, str]]):
    root: dict[str, str]


class PreferenceStoreFile(PreferenceStore):
    """
    プロセス全体で共有される JSON ファイルへの保存
    """

    def __init__(self, path: Path, namespace: str):
        super().__init__(namespace=namespace)

        self.path = path

    async def __read_values(self) -> dict[str, str]:
        path = self.path
        if not path.exists():
            return {}

        try:
            values_dict = load_json_file(path=path)
            return _PreferenceFile.model_validate(values_dict).root
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError):
            # 壊れたファイルは空として扱い、次の保存で上書きする
            logger.warning(f"ignored corrupted preference file: {path}")
            return {}

    async def get_string(self, key: str, default: str = "") -> str:
        values = await self.__read_values()
        return values.get(self.make_key(key), default)

    async def set_string(self, key: str, value: str) -> None:
        values = await self.__read_values()
        values[self.make_key(key)] = value

        save_json_file(data=values, path=self.path)
