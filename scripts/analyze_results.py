#!/usr/bin/env python3
"""
Analyze saved pattern results and generate visualizations.

Usage:
    python scripts/analyze_results.py --results results/
    python scripts/analyze_results.py --results results/ --compare --plot
"""

import argparse
import json
from pathlib import Path
from typing import Dict, List

from counter_sim.reporting import markdown_table, plot_accuracy
from counter_sim.simulation import SimulationResult


def load_results(results_dir: Path) -> List[Dict]:
    """Load all result files from directory."""
    results = []

    for result_file in sorted(results_dir.glob("*.json")):
        with open(result_file) as f:
            data = json.load(f)
            data['_filename'] = result_file.name
            results.append(data)

    return results


def to_simulation_results(data: Dict) -> List[SimulationResult]:
    """Rebuild SimulationResult objects from a saved experiment."""
    return [
        SimulationResult(
            pattern_name=r['pattern_name'],
            predictor_name=r['predictor_name'],
            total=r['total'],
            correct=r['correct'],
            warmup=r.get('warmup', 0),
        )
        for r in data.get('results', [])
    ]


def print_summary(experiments: List[Dict]) -> None:
    """Print summary of results."""
    print("\n" + "=" * 70)
    print("RESULTS SUMMARY")
    print("=" * 70)

    for data in experiments:
        print(f"\n{data['_filename']} ({data.get('timestamp', 'unknown time')}):")
        for result in to_simulation_results(data):
            print(f"  {result.pattern_name:<18} {result.predictor_name:<18} "
                  f"{result.accuracy * 100:8.2f}%  MPKI {result.mpki:8.2f}")


def main():
    parser = argparse.ArgumentParser(description="Analyze simulation results")
    parser.add_argument('--results', '-r', type=str, required=True,
                        help='Results directory')
    parser.add_argument('--output', '-o', type=str, default='results/analysis',
                        help='Output directory for analysis')
    parser.add_argument('--compare', '-c', action='store_true',
                        help='Generate comparison table')
    parser.add_argument('--plot', '-p', action='store_true',
                        help='Generate plots')

    args = parser.parse_args()

    experiments = load_results(Path(args.results))
    if not experiments:
        print("No results found")
        return

    print(f"Loaded {len(experiments)} result file(s)")
    print_summary(experiments)

    latest = to_simulation_results(experiments[-1])

    if args.compare:
        print("\n" + "=" * 70)
        print("COMPARISON TABLE (Markdown)")
        print("=" * 70)
        print(markdown_table(latest))

    if args.plot:
        plot_accuracy(latest, Path(args.output))


if __name__ == "__main__":
    main()
