"""Demo script for mindful-tasks."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mindful_tasks.adapters.csv_adapter import parse_completions, parse_tasks
from mindful_tasks.analyzer import analyze_productivity
from mindful_tasks.prioritizer import prioritize_tasks


def main() -> None:
    tasks = parse_tasks("examples/sample_tasks.csv")
    for mood, energy in (("stressed", "low"), ("happy", "high")):
        ranked = prioritize_tasks(tasks, mood=mood, energy_level=energy)
        print(f"{mood}/{energy}:", [task.title for task in ranked])

    result = analyze_productivity(parse_completions("examples/sample_completions.csv"))
    print("Best time of day:", result.best_time_of_day)
    print("Best day of week:", result.best_day_of_week)
    print("Time scores:", result.time_scores)


if __name__ == "__main__":
    main()
