# engine.py
# -*- coding: utf-8 -*-
# PredictionEngine: trie + shared-symptom graph + PageRank, blended at query time.
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .dataset import Disease, load_diseases
from .importance_ranker import ImportanceRanker, normalize_scores
from .prefix_index import PrefixIndex, symptom_key
from .relation_graph import Edge, RelationGraph

SYMPTOM_WEIGHT = 0.7
RANK_WEIGHT = 0.3


@dataclass(frozen=True)
class Prediction:
    disease: str
    confidence: float
    matched_symptoms: int
    total_symptoms: int
    description: str = ""

    @property
    def percent(self) -> float:
        return self.confidence * 100

    def to_dict(self) -> Dict[str, object]:
        return {
            "disease": self.disease,
            "confidence": self.confidence,
            "percent": self.percent,
            "matched_symptoms": self.matched_symptoms,
            "total_symptoms": self.total_symptoms,
            "description": self.description,
        }


def format_prediction(p: Prediction) -> str:
    return (
        f"{p.disease} ({p.percent:.1f}% confidence) - "
        f"{p.matched_symptoms}/{p.total_symptoms} symptoms matched\n{p.description}"
    )


class PredictionEngine:
    """
    Built once from an ordered disease sequence; afterwards every query is a
    pure read of the frozen index, graph and rank table.

    Duplicate disease names: the first record wins, later ones are ignored.
    """

    def __init__(
        self,
        diseases: Iterable[Disease],
        iterations: int = 20,
        damping_factor: float = 0.85,
    ):
        ranker = ImportanceRanker(iterations, damping_factor)

        table: Dict[str, Disease] = {}
        for d in diseases:
            if d.name in table:
                print(f"[ENGINE] duplicate disease ignored: {d.name}")
                continue
            table[d.name] = d
        self._diseases: Mapping[str, Disease] = MappingProxyType(table)

        # unique symptoms -> trie
        self._index = PrefixIndex()
        seen = set()
        for d in table.values():
            for s in sorted(d.symptoms):
                if s not in seen:
                    seen.add(s)
                    self._index.insert(s)
        print(f"[TRIE] built with {len(seen)} unique symptoms")

        self._graph = RelationGraph()
        for d in table.values():
            self._graph.add_vertex(d.name, d.keys)
        self._graph.build_edges()

        # shared read-only from here on
        self._index.freeze()
        self._graph.freeze()

        raw = ranker.run(self._graph)
        self._raw_ranks: Mapping[str, float] = MappingProxyType(dict(raw))
        self._ranks: Mapping[str, float] = MappingProxyType(normalize_scores(raw))
        self.iterations = ranker.iterations
        self.damping_factor = ranker.damping_factor
        print(f"[ENGINE] ready | diseases={len(table)} | edges={self._graph.edge_count()}")

    @classmethod
    def from_jsonl(cls, path=None, iterations: int = 20, damping_factor: float = 0.85) -> "PredictionEngine":
        return cls(load_diseases(path), iterations=iterations, damping_factor=damping_factor)

    # ---------- Read-only state ----------
    @property
    def diseases(self) -> Tuple[Disease, ...]:
        return tuple(self._diseases.values())

    @property
    def rank_table(self) -> Mapping[str, float]:
        return self._ranks

    @property
    def raw_rank_table(self) -> Mapping[str, float]:
        return self._raw_ranks

    @property
    def graph(self) -> RelationGraph:
        return self._graph

    @property
    def index(self) -> PrefixIndex:
        return self._index

    def symptom_count(self) -> int:
        return self._index.size()

    def get_disease(self, name: str) -> Optional[Disease]:
        return self._diseases.get(name)

    def related_diseases(self, name: str) -> List[Edge]:
        return sorted(self._graph.neighbors(name), key=lambda e: -e.weight)

    # ---------- Queries ----------
    def autocomplete(self, prefix: str) -> List[str]:
        return self._index.suggestions(prefix)

    def predict(self, symptoms: Optional[Iterable[str]], top_n: int = 5) -> List[Prediction]:
        """
        Rank diseases for the queried symptoms:
            confidence = 0.7 * matched / queried + 0.3 * normalized_rank
        Diseases matching none of the symptoms are left out. Equal confidences
        keep dataset order.
        """
        if not symptoms or top_n <= 0:
            return []
        query = list(dict.fromkeys(symptoms))  # set semantics, order kept
        if not query:
            return []
        keys = [symptom_key(s) for s in query]
        total = len(query)

        predictions: List[Prediction] = []
        for d in self._diseases.values():
            matched = sum(1 for k in keys if k in d.keys)
            if matched == 0:
                continue
            symptom_score = matched / total
            confidence = SYMPTOM_WEIGHT * symptom_score + RANK_WEIGHT * self._ranks.get(d.name, 0.0)
            predictions.append(Prediction(d.name, confidence, matched, total, d.description))

        predictions.sort(key=lambda p: p.confidence, reverse=True)
        return predictions[:top_n]
