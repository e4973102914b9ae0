#!/usr/bin/env python3
"""
Pattern benchmark runner for the 2-bit counter simulator.

Runs every configured predictor over every configured pattern and
prints a comparison report.

Usage:
    python scripts/run_patterns.py
    python scripts/run_patterns.py --config config/default.yaml -j 4
"""

import argparse
import sys
from pathlib import Path

from counter_sim.errors import CounterSimError
from counter_sim.reporting import comparison_table, format_result, plot_accuracy
from counter_sim.runner import output_settings, run_experiment
from counter_sim.utils import load_config, save_results, setup_logging


DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / 'config' / 'default.yaml'


def print_summary(experiment) -> None:
    """Print summary of all pattern results."""
    print("\n" + "=" * 80)
    print("PATTERN SUMMARY")
    print("=" * 80)

    for result in experiment.results:
        if result.predictor_name == 'two_bit':
            print(format_result(result))

    print()
    print(comparison_table(experiment.results))

    if experiment.trials:
        print("\n" + "=" * 80)
        print("RANDOM TRIALS")
        print("=" * 80)
        for pred_name, summary in experiment.trials.items():
            print(f"{pred_name:18}: mean {summary['mean_accuracy'] * 100:.2f}% "
                  f"+/- {summary['ci95'] * 100:.2f} over {summary['runs']} runs")

    if experiment.errors:
        print("\n" + "=" * 80)
        print("FAILED PATTERNS")
        print("=" * 80)
        for error in experiment.errors:
            print(f"{error['pattern']} ({error['predictor']}): Error - {error['error']}")


def main():
    parser = argparse.ArgumentParser(description='Run predictor pattern benchmarks')
    parser.add_argument('--config', '-c', type=str, default=str(DEFAULT_CONFIG),
                        help='Experiment YAML config')
    parser.add_argument('--workers', '-j', type=int, default=1,
                        help='Number of parallel workers (0 for CPU count - 1)')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='Override the config seed')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Output directory (overrides config)')
    parser.add_argument('--plot', '-p', action='store_true',
                        help='Save an accuracy bar chart')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Logging level')

    args = parser.parse_args()
    setup_logging(args.log_level)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, CounterSimError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.seed is not None:
        config['seed'] = args.seed

    workers = None if args.workers == 0 else args.workers

    try:
        experiment = run_experiment(config, num_workers=workers)
    except (CounterSimError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print_summary(experiment)

    output_dir, formats = output_settings(config)
    if args.output:
        output_dir = Path(args.output)
    paths = save_results(experiment.to_dict(), output_dir, name='patterns',
                         formats=formats)
    for fmt, path in paths.items():
        print(f"Results saved to: {path} ({fmt})")

    if args.plot:
        plot_accuracy(experiment.results, output_dir)


if __name__ == '__main__':
    main()
