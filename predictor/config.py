# config.py
# -*- coding: utf-8 -*-
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# =========================
# Paths, .env
# =========================
BASE_DIR = Path(__file__).resolve().parent      # .../predictor
ROOT_DIR = BASE_DIR.parent                      # project root
ENV_PATH = ROOT_DIR / ".env"

load_dotenv(ENV_PATH, override=True)


def resolve_path(p: Optional[str], default: Path) -> str:
    # Expand ~ and $VARS, relative paths are anchored at ROOT_DIR.
    if not p:
        path = default
    else:
        p = os.path.expandvars(os.path.expanduser(p.strip()))
        path = Path(p)
        if not path.is_absolute():
            path = (ROOT_DIR / path).resolve()
    return str(path)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}")


DATA_DIR = resolve_path(os.getenv("DATA_DIR"), ROOT_DIR / "data")
# bundled with the package; DATA_DIR only holds generated output
DATASET_PATH = resolve_path(os.getenv("DATASET_PATH"), BASE_DIR / "data" / "diseases.jsonl")
GRAPH_EXPORT_PATH = resolve_path(os.getenv("GRAPH_EXPORT_PATH"), Path(DATA_DIR) / "graph.json")

# PageRank parameters, fixed once per engine
RANK_ITERATIONS = _env_int("RANK_ITERATIONS", 20)
DAMPING_FACTOR = _env_float("DAMPING_FACTOR", 0.85)

DEFAULT_TOP_N = _env_int("DEFAULT_TOP_N", 5)
MAX_TOP_N = _env_int("MAX_TOP_N", 50)
