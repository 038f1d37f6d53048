# relation_graph.py
# -*- coding: utf-8 -*-
# Undirected weighted graph: diseases are vertices, weight = number of shared symptoms.
from __future__ import annotations
from typing import Dict, FrozenSet, Iterable, List, NamedTuple, Any


class Edge(NamedTuple):
    dst: str
    weight: int


class RelationGraph:
    def __init__(self):
        # insertion-ordered: vertex order == dataset order
        self._adj: Dict[str, List[Edge]] = {}
        self._symptoms: Dict[str, FrozenSet[str]] = {}
        self._frozen = False

    def freeze(self) -> None:
        """Reject further add_vertex / build_edges calls."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("RelationGraph is frozen")

    # ---------- Vertices ----------
    def add_vertex(self, name: str, symptoms: Iterable[str]) -> bool:
        """First insertion wins; returns False when `name` was already present."""
        self._check_mutable()
        if name in self._adj:
            return False
        self._adj[name] = []
        self._symptoms[name] = frozenset(symptoms)
        return True

    # ---------- Edges ----------
    def build_edges(self) -> int:
        """
        Link every pair of vertices sharing at least one symptom, one adjacency
        entry per endpoint with the same weight.
        Precondition: called exactly once, after all vertices are added; a second
        call duplicates every edge. Returns the number of undirected edges added.
        """
        self._check_mutable()
        names = list(self._adj)
        added = 0
        for i, a in enumerate(names):
            sa = self._symptoms[a]
            for b in names[i + 1:]:
                shared = len(sa & self._symptoms[b])
                if shared > 0:
                    self._adj[a].append(Edge(b, shared))
                    self._adj[b].append(Edge(a, shared))
                    added += 1
        print(f"[GRAPH] built | vertices={len(names)} | edges={added}")
        return added

    def total_outgoing_weight(self, name: str) -> int:
        total = sum(e.weight for e in self._adj[name])
        return total if total else 1  # isolated vertex floors to 1

    def edge_weight(self, a: str, b: str) -> int:
        for e in self._adj.get(a, ()):
            if e.dst == b:
                return e.weight
        return 0

    # ---------- Accessors ----------
    def neighbors(self, name: str) -> List[Edge]:
        return list(self._adj.get(name, ()))

    def symptoms_of(self, name: str) -> FrozenSet[str]:
        return self._symptoms.get(name, frozenset())

    def all_vertices(self) -> List[str]:
        return list(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, name: object) -> bool:
        return name in self._adj

    def edge_count(self) -> int:
        return sum(len(v) for v in self._adj.values()) // 2

    # ---------- Export ----------
    def to_dict(self) -> Dict[str, Any]:
        """Serializable {"nodes", "adj"} view; each edge carries its shared symptoms."""
        nodes = {
            name: {"type": "Disease", "symptoms": sorted(syms)}
            for name, syms in self._symptoms.items()
        }
        adj = {}
        for name, edges in self._adj.items():
            adj[name] = [
                {
                    "dst": e.dst,
                    "weight": e.weight,
                    "shared": sorted(self._symptoms[name] & self._symptoms[e.dst]),
                }
                for e in edges
            ]
        return {"nodes": nodes, "adj": adj}
