# build_graph.py — dump the shared-symptom disease graph + PageRank table to JSON
import json
from pathlib import Path

from predictor.config import DATASET_PATH, GRAPH_EXPORT_PATH, RANK_ITERATIONS, DAMPING_FACTOR
from predictor.engine import PredictionEngine


def build_export(engine: PredictionEngine) -> dict:
    graph = engine.graph.to_dict()
    for name, node in graph["nodes"].items():
        node["rank"] = engine.rank_table.get(name, 0.0)
        node["raw_rank"] = engine.raw_rank_table.get(name, 0.0)
    graph["params"] = {"iterations": engine.iterations, "damping_factor": engine.damping_factor}
    return graph


def main():
    engine = PredictionEngine.from_jsonl(
        DATASET_PATH, iterations=RANK_ITERATIONS, damping_factor=DAMPING_FACTOR
    )
    graph = build_export(engine)

    out = Path(GRAPH_EXPORT_PATH)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as f:
        json.dump(graph, f, ensure_ascii=False, indent=2)
    print(f"Graph saved -> {out} | nodes={len(graph['nodes'])} | edges={engine.graph.edge_count()}")


if __name__ == "__main__":
    main()
