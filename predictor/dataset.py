# dataset.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, List, Union

from .prefix_index import symptom_key

PACKAGE_DIR = Path(__file__).resolve().parent


class DatasetError(ValueError):
    pass


@dataclass(frozen=True)
class Disease:
    name: str
    symptoms: FrozenSet[str]
    description: str = ""
    keys: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "symptoms", frozenset(self.symptoms))
        object.__setattr__(self, "keys", frozenset(symptom_key(s) for s in self.symptoms))

    @classmethod
    def from_record(cls, name: str, symptoms: Iterable[str], description: str = "") -> "Disease":
        return cls(name=name, symptoms=frozenset(symptoms), description=description or "")


def default_dataset_path() -> Path:
    return PACKAGE_DIR / "data" / "diseases.jsonl"


# ---------- Loader ----------
def load_diseases(path: Union[str, Path, None] = None) -> List[Disease]:
    """Read one disease per JSON line: {"name", "symptoms": [...], "description"}."""
    fpath = Path(path) if path else default_dataset_path()
    out: List[Disease] = []
    with fpath.open("r", encoding="utf-8") as f:
        for lineno, ln in enumerate(f, start=1):
            ln = ln.strip()
            if not ln:
                continue
            try:
                obj = json.loads(ln)
            except json.JSONDecodeError as e:
                raise DatasetError(f"{fpath}:{lineno}: invalid JSON ({e.msg})") from e
            if not isinstance(obj, dict):
                raise DatasetError(f"{fpath}:{lineno}: expected a JSON object")
            name = obj.get("name")
            if not isinstance(name, str) or not name.strip():
                raise DatasetError(f"{fpath}:{lineno}: missing disease name")
            symptoms = obj.get("symptoms")
            if not isinstance(symptoms, list) or not all(isinstance(s, str) for s in symptoms):
                raise DatasetError(f"{fpath}:{lineno}: 'symptoms' must be a list of strings")
            description = obj.get("description")
            if description is not None and not isinstance(description, str):
                raise DatasetError(f"{fpath}:{lineno}: 'description' must be a string")
            out.append(Disease.from_record(name.strip(), symptoms, description or ""))
    print(f"[DATA] loaded {len(out)} diseases from {fpath.name}")
    return out
