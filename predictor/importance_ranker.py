# importance_ranker.py
# -*- coding: utf-8 -*-
# Weighted PageRank over the shared-symptom graph + min-max normalization.
from __future__ import annotations
from enum import Enum
from typing import Dict, List, Tuple, Mapping

import numpy as np

from .relation_graph import RelationGraph


class RankerState(str, Enum):
    UNINITIALIZED = "uninitialized"
    CONVERGING = "converging"
    DONE = "done"


class ImportanceRanker:
    """
    Fixed-budget PageRank. Every iteration computes all new scores from the
    previous table and swaps the table at the end; there is no convergence test,
    the loop always runs `iterations` times.

    Invalid parameters are rejected with ValueError (never clamped).
    """

    def __init__(self, iterations: int = 20, damping_factor: float = 0.85):
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
            raise ValueError(f"iterations must be a positive integer, got {iterations!r}")
        if not 0.0 < float(damping_factor) < 1.0:
            raise ValueError(f"damping_factor must be in (0, 1), got {damping_factor!r}")
        self.iterations = iterations
        self.damping_factor = float(damping_factor)
        self.state = RankerState.UNINITIALIZED
        self.iteration = 0

    @staticmethod
    def _incoming(graph: RelationGraph) -> Dict[str, List[Tuple[str, float]]]:
        """dst -> [(src, weight / total_outgoing_weight(src))], sources in vertex order."""
        incoming: Dict[str, List[Tuple[str, float]]] = {v: [] for v in graph.all_vertices()}
        for src in graph.all_vertices():
            total = graph.total_outgoing_weight(src)
            for e in graph.neighbors(src):
                if e.dst == src:
                    continue
                incoming[e.dst].append((src, e.weight / total))
        return incoming

    def run(self, graph: RelationGraph) -> Dict[str, float]:
        vertices = graph.all_vertices()
        n = len(vertices)
        self.iteration = 0
        if n == 0:
            self.state = RankerState.DONE
            return {}

        d = self.damping_factor
        base = (1.0 - d) / n
        incoming = self._incoming(graph)
        ranks = {v: 1.0 / n for v in vertices}

        self.state = RankerState.CONVERGING
        for k in range(self.iterations):
            self.iteration = k + 1
            new_ranks = {}
            for v in vertices:
                rank = base
                for src, share in incoming[v]:
                    rank += d * ranks[src] * share
                new_ranks[v] = rank
            ranks = new_ranks

        self.state = RankerState.DONE
        print(f"[RANK] pagerank done | vertices={n} | iterations={self.iterations} | damping={d}")
        return ranks


def normalize_scores(raw: Mapping[str, float]) -> Dict[str, float]:
    """
    Linear min-max scaling into [0, 1]. When every score is equal the table is
    returned unchanged (copied), not forced to 0 or 1.
    """
    if not raw:
        return {}
    names = list(raw)
    vals = np.fromiter((raw[k] for k in names), dtype="float64", count=len(names))
    lo, hi = float(vals.min()), float(vals.max())
    span = hi - lo
    if span == 0:
        return dict(raw)
    scaled = (vals - lo) / span
    out = {name: float(s) for name, s in zip(names, scaled)}
    # exact endpoints regardless of float rounding
    for name in names:
        if raw[name] == hi:
            out[name] = 1.0
        elif raw[name] == lo:
            out[name] = 0.0
    return out
