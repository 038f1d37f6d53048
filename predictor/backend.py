# backend.py — FastAPI service: symptom autocomplete + hybrid (match + PageRank) disease prediction
import time
from typing import Optional, List

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .config import DATASET_PATH, RANK_ITERATIONS, DAMPING_FACTOR, DEFAULT_TOP_N, MAX_TOP_N
from .engine import PredictionEngine
from .prefix_index import symptom_key

print("[API] DATASET_PATH   =", DATASET_PATH)
print("[API] RANK_ITERATIONS=", RANK_ITERATIONS, "| DAMPING_FACTOR=", DAMPING_FACTOR)

# =========================
# Engine (built once, read-only afterwards)
# =========================
ENGINE: Optional[PredictionEngine] = None
try:
    ENGINE = PredictionEngine.from_jsonl(
        DATASET_PATH, iterations=RANK_ITERATIONS, damping_factor=DAMPING_FACTOR
    )
except Exception as e:
    print("[API] engine init failed:", e)
    ENGINE = None


def get_engine() -> PredictionEngine:
    if ENGINE is None:
        raise HTTPException(503, "Prediction engine is not available")
    return ENGINE


# =========================
# Schemas
# =========================
class PredictIn(BaseModel):
    symptoms: List[str] = Field(default_factory=list, description="Selected symptoms")
    top_n: int = Field(DEFAULT_TOP_N, ge=1, le=MAX_TOP_N, description="How many predictions to return")


class PredictionOut(BaseModel):
    disease: str
    confidence: float
    percent: float
    matched_symptoms: int
    total_symptoms: int
    description: str = ""


class PredictOut(BaseModel):
    predictions: List[PredictionOut]
    elapsed_ms: float


class AutocompleteOut(BaseModel):
    prefix: str
    suggestions: List[str]


class LookupOut(BaseModel):
    symptom: str
    exists: bool
    has_prefix: bool


class NeighborOut(BaseModel):
    disease: str
    shared_symptoms: int


class DiseaseOut(BaseModel):
    name: str
    symptoms: List[str]
    description: str
    rank: float
    neighbors: List[NeighborOut]


# =========================
# FastAPI app
# =========================
TAGS = [
    {"name": "Symptoms", "description": "Autocomplete / exact lookup over known symptoms"},
    {"name": "Predict", "description": "Disease prediction from selected symptoms"},
    {"name": "Graph", "description": "Shared-symptom graph and PageRank importance"},
]

app = FastAPI(
    title="Disease Predictor API",
    description="Symptom trie + shared-symptom graph + PageRank hybrid ranking.",
    version="1.0.0",
    openapi_tags=TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    if ENGINE is None:
        return {"ok": False, "diseases": 0, "symptoms": 0}
    return {"ok": True, "diseases": len(ENGINE.diseases), "symptoms": ENGINE.symptom_count()}


# =========================
# Symptoms
# =========================
@app.get("/symptoms/autocomplete", response_model=AutocompleteOut, tags=["Symptoms"])
def autocomplete(prefix: str = Query(..., min_length=1), limit: Optional[int] = Query(None, ge=1)):
    eng = get_engine()
    prefix = prefix.strip()
    if not symptom_key(prefix):
        raise HTTPException(400, "prefix must contain at least one letter")
    hits = eng.autocomplete(prefix)
    if limit is not None:
        hits = hits[:limit]
    return {"prefix": prefix, "suggestions": hits}


@app.get("/symptoms/lookup", response_model=LookupOut, tags=["Symptoms"])
def lookup(symptom: str = Query(..., min_length=1)):
    eng = get_engine()
    return {
        "symptom": symptom,
        "exists": eng.index.contains_exact(symptom),
        "has_prefix": eng.index.has_prefix(symptom),
    }


# =========================
# Predict
# =========================
@app.post("/predict", response_model=PredictOut, tags=["Predict"])
def predict(body: PredictIn):
    eng = get_engine()
    t0 = time.perf_counter()
    symptoms = [s.strip() for s in body.symptoms if s and s.strip()]
    preds = eng.predict(set(symptoms) if symptoms else None, body.top_n)
    elapsed_ms = round((time.perf_counter() - t0) * 1000.0, 3)
    return {"predictions": [p.to_dict() for p in preds], "elapsed_ms": elapsed_ms}


# =========================
# Graph / rank
# =========================
@app.get("/diseases/{name}", response_model=DiseaseOut, tags=["Graph"])
def disease_detail(name: str):
    eng = get_engine()
    d = eng.get_disease(name)
    if d is None:
        raise HTTPException(404, f"Unknown disease: {name}")
    return {
        "name": d.name,
        "symptoms": sorted(d.symptoms),
        "description": d.description,
        "rank": eng.rank_table.get(d.name, 0.0),
        "neighbors": [
            {"disease": e.dst, "shared_symptoms": e.weight} for e in eng.related_diseases(d.name)
        ],
    }


@app.get("/rank", tags=["Graph"])
def rank(limit: int = Query(10, ge=1)):
    eng = get_engine()
    ordered = sorted(eng.rank_table.items(), key=lambda kv: -kv[1])[:limit]
    return [
        {"rank": i, "disease": name, "score": score, "raw": eng.raw_rank_table.get(name, 0.0)}
        for i, (name, score) in enumerate(ordered, start=1)
    ]
