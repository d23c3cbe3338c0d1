import json
import shutil
import tempfile
from pathlib import Path
from typing import Any


def load_json_file(path: Path) -> Any:
    with path.open(mode="r", encoding="utf-8") as fp:
        return json.load(fp)


def save_json_file(data: Any, path: Path) -> None:
    with tempfile.NamedTemporaryFile(mode="w", encoding="utf-8") as fp:
        json.dump(data, fp, ensure_ascii=False, indent=2)
        fp.flush()

        path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(fp.name, path)
