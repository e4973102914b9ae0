"""
Reporting

Text and chart presentation of simulation results. Nothing here
computes accuracy; it only formats SimulationResult values.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .simulation.metrics import SimulationResult
from .utils.helpers import format_number


logger = logging.getLogger(__name__)


def format_result(result: SimulationResult) -> str:
    """One-line summary, e.g. 'Pattern: loop_5 | Accuracy: 83.32%'."""
    return f"Pattern: {result.pattern_name} | Accuracy: {result.accuracy * 100:.2f}%"


def _by_pattern(results: Sequence[SimulationResult]) -> Dict[str, Dict[str, SimulationResult]]:
    grouped: Dict[str, Dict[str, SimulationResult]] = {}
    for result in results:
        grouped.setdefault(result.pattern_name, {})[result.predictor_name] = result
    return grouped


def _predictor_names(results: Sequence[SimulationResult]) -> List[str]:
    names: List[str] = []
    for result in results:
        if result.predictor_name not in names:
            names.append(result.predictor_name)
    return names


def comparison_table(results: Sequence[SimulationResult]) -> str:
    """Fixed-width table: one row per pattern, accuracy per predictor."""
    if not results:
        return "No results"

    predictors = _predictor_names(results)
    width = 20 + 14 * len(predictors) + 12
    lines = [
        "Predictor Comparison (accuracy):",
        "-" * width,
        f"{'Pattern':<20}" + "".join(f"{p:>14}" for p in predictors) + f"{'Branches':>12}",
        "-" * width,
    ]

    for pattern_name, row in _by_pattern(results).items():
        cells = []
        for p in predictors:
            result = row.get(p)
            cells.append(f"{result.accuracy * 100:>13.2f}%" if result else f"{'-':>14}")
        total = next(iter(row.values())).total
        lines.append(f"{pattern_name:<20}" + "".join(cells) + f"{format_number(total, 1):>12}")

    lines.append("-" * width)
    return "\n".join(lines)


def markdown_table(results: Sequence[SimulationResult]) -> str:
    """Comparison table in markdown format."""
    if not results:
        return "No results to compare"

    predictors = _predictor_names(results)
    lines = [
        "| Pattern | " + " | ".join(predictors) + " |",
        "|" + "---|" * (len(predictors) + 1),
    ]
    for pattern_name, row in _by_pattern(results).items():
        cells = [f"{row[p].accuracy * 100:.2f}%" if p in row else "-" for p in predictors]
        lines.append(f"| {pattern_name} | " + " | ".join(cells) + " |")
    return "\n".join(lines)


def plot_accuracy(results: Sequence[SimulationResult],
                  output_dir: Union[str, Path],
                  filename: str = 'accuracy_comparison.png') -> Optional[Path]:
    """
    Grouped bar chart of accuracy per pattern and predictor.

    Returns:
        Path of the saved figure, or None when matplotlib is unavailable
        or there is nothing to plot
    """
    try:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
        import numpy as np
    except ImportError:
        logger.warning("matplotlib not installed, skipping plots")
        return None

    if not results:
        return None

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    grouped = _by_pattern(results)
    predictors = _predictor_names(results)
    patterns = list(grouped)

    fig, ax = plt.subplots(figsize=(12, 6))
    x = np.arange(len(patterns))
    width = 0.8 / len(predictors)

    for i, pred in enumerate(predictors):
        acc_values = [
            grouped[p][pred].accuracy * 100 if pred in grouped[p] else 0.0
            for p in patterns
        ]
        offset = (i - len(predictors) / 2 + 0.5) * width
        ax.bar(x + offset, acc_values, width, label=pred)

    ax.set_xlabel('Pattern')
    ax.set_ylabel('Accuracy (%)')
    ax.set_title('Branch Prediction Accuracy Comparison')
    ax.set_xticks(x)
    ax.set_xticklabels(patterns, rotation=45, ha='right')
    ax.set_ylim(0, 100)
    ax.legend()
    ax.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    output_path = output_dir / filename
    plt.savefig(output_path, dpi=150)
    plt.close(fig)

    logger.info("Plot saved to %s", output_path)
    return output_path
