#!/usr/bin/env python
# predict_cli.py
# Console driver: symptom autocomplete + top-N disease prediction.
#   python scripts/predict_cli.py --prefix fev
#   python scripts/predict_cli.py "fever, cough, fatigue" --top 5
#   python scripts/predict_cli.py            (demo run)

import argparse
from typing import List, Optional

from predictor.config import DATASET_PATH, RANK_ITERATIONS, DAMPING_FACTOR, DEFAULT_TOP_N
from predictor.engine import PredictionEngine, format_prediction


def parse_symptoms(text: str) -> List[str]:
    return [s.strip() for s in (text or "").split(",") if s.strip()]


def show_suggestions(engine: PredictionEngine, prefix: str) -> None:
    print(f"Suggestions for '{prefix}': {engine.autocomplete(prefix)}")


def show_predictions(engine: PredictionEngine, symptoms: List[str], top_n: int) -> None:
    print(f"Selected symptoms: {symptoms}")
    preds = engine.predict(set(symptoms), top_n)
    if not preds:
        print("No disease matches these symptoms.")
        return
    print(f"\nTop {top_n} Predictions:")
    for i, p in enumerate(preds, start=1):
        print(f"\n{i}. {format_prediction(p)}")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Predict diseases from symptoms.")
    ap.add_argument("symptoms", nargs="?", default="", help="comma-separated symptoms")
    ap.add_argument("--prefix", help="print autocomplete suggestions for this prefix")
    ap.add_argument("--top", type=int, default=DEFAULT_TOP_N, help="number of predictions")
    ap.add_argument("--dataset", default=DATASET_PATH, help="diseases.jsonl path")
    args = ap.parse_args(argv)

    print("=== Disease Prediction Engine ===\n")
    engine = PredictionEngine.from_jsonl(
        args.dataset, iterations=RANK_ITERATIONS, damping_factor=DAMPING_FACTOR
    )

    if not args.prefix and not args.symptoms:
        print("\n--- Testing Autocomplete ---")
        show_suggestions(engine, "fev")
        print("\n--- Testing Disease Prediction ---")
        show_predictions(engine, ["fever", "cough", "fatigue"], 5)
        return 0

    if args.prefix:
        show_suggestions(engine, args.prefix)
    if args.symptoms:
        show_predictions(engine, parse_symptoms(args.symptoms), args.top)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
