import json
from pathlib import Path
from typing import List, Union

from menu_translation.dictionary.schemas import DictionaryEntry

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def resolve_seed_path(path: Union[str, Path]) -> Path:
    """Relative paths are resolved from the project root"""
    path = Path(path)
    return path if path.is_absolute() else PROJECT_ROOT / path


def load_seed_entries(path: Union[str, Path]) -> List[DictionaryEntry]:
    """Read a JSON array of dictionary entries, validating every record."""
    with open(resolve_seed_path(path), "r", encoding="utf-8") as file:
        records = json.load(file)
    return [DictionaryEntry.model_validate(record) for record in records]
