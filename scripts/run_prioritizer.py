"""Prioritize tasks or analyze completions from a CSV/JSON dataset."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mindful_tasks.adapters import csv_adapter, json_adapter
from mindful_tasks.analyzer import analyze_productivity, productivity_summary
from mindful_tasks.explain import explain_ranking


def _adapter_for(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter
    if suffix == ".json":
        return json_adapter
    raise ValueError("Unsupported input format, expected .csv or .json")


def cmd_prioritize(args: argparse.Namespace) -> dict:
    tasks = _adapter_for(Path(args.data)).parse_tasks(args.data)
    now = datetime.fromisoformat(args.now) if args.now else None
    ranking = explain_ranking(tasks, mood=args.mood, energy_level=args.energy, now=now)
    return {"mood": args.mood, "energy_level": args.energy, "ranking": ranking}


def cmd_analyze(args: argparse.Namespace) -> dict:
    completions = _adapter_for(Path(args.data)).parse_completions(args.data)
    return productivity_summary(analyze_productivity(completions))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the mindful-tasks engine")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_prioritize = sub.add_parser("prioritize", help="Rank tasks for the current mood and energy")
    p_prioritize.add_argument("--data", required=True, help="Path to CSV/JSON tasks file")
    p_prioritize.add_argument("--mood", default=None, help="Current mood, e.g. happy or stressed")
    p_prioritize.add_argument("--energy", default=None, help="Current energy: low, medium or high")
    p_prioritize.add_argument("--now", default=None, help="ISO timestamp to score against")
    p_prioritize.set_defaults(func=cmd_prioritize)

    p_analyze = sub.add_parser("analyze", help="Find the most productive time and day")
    p_analyze.add_argument("--data", required=True, help="Path to CSV/JSON completions file")
    p_analyze.set_defaults(func=cmd_analyze)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        report = args.func(args)
    except ValueError as exc:
        raise SystemExit(f"[{args.command}] {exc}") from exc

    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
