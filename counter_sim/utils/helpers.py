"""
Utility Functions

Helper functions for configuration, logging, and I/O.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union
import yaml

from ..errors import ConfigError


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary (empty for an empty file)
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Top level of {config_path} must be a mapping")
    return config


def save_config(config: Dict[str, Any],
                config_path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        yaml.safe_dump(config, f, default_flow_style=False)


def save_results(results: Dict[str, Any],
                 output_dir: Union[str, Path],
                 name: str = "results",
                 formats: Sequence[str] = ('json', 'csv'),
                 timestamp: bool = True) -> Dict[str, Path]:
    """
    Save results to multiple formats.

    Args:
        results: Results dictionary
        output_dir: Output directory
        name: Base filename
        formats: Output formats ('json', 'csv', 'yaml')
        timestamp: Append a timestamp to the base filename

    Returns:
        Dictionary of format -> output path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    base_name = name
    if timestamp:
        base_name = f"{name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    output_paths = {}

    if 'json' in formats:
        json_path = output_dir / f"{base_name}.json"
        with open(json_path, 'w') as f:
            json.dump(results, f, indent=2, default=str)
        output_paths['json'] = json_path

    if 'yaml' in formats:
        yaml_path = output_dir / f"{base_name}.yaml"
        with open(yaml_path, 'w') as f:
            yaml.safe_dump(results, f, default_flow_style=False)
        output_paths['yaml'] = yaml_path

    if 'csv' in formats:
        csv_path = output_dir / f"{base_name}.csv"
        _save_results_csv(results, csv_path)
        output_paths['csv'] = csv_path

    return output_paths


def _save_results_csv(results: Dict[str, Any], filepath: Path) -> None:
    """Save results to CSV format."""
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        # Flatten one level for CSV; result lists become one row per run
        for key, value in results.items():
            if isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    writer.writerow([f"{key}.{sub_key}", sub_value])
            elif isinstance(value, list) and value and isinstance(value[0], dict):
                columns = list(value[0].keys())
                writer.writerow([key] + columns)
                for row in value:
                    writer.writerow([''] + [row.get(c, '') for c in columns])
            else:
                writer.writerow([key, value])


def setup_logging(level: str = "INFO",
                  log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        level: Logging level
        log_file: Optional log file path

    Returns:
        Logger instance for the package
    """
    logger = logging.getLogger("counter_sim")
    logger.setLevel(getattr(logging, level.upper()))

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def format_number(n: Union[int, float], precision: int = 2) -> str:
    """Format large numbers with K/M/B suffixes."""
    if abs(n) >= 1e9:
        return f"{n/1e9:.{precision}f}B"
    elif abs(n) >= 1e6:
        return f"{n/1e6:.{precision}f}M"
    elif abs(n) >= 1e3:
        return f"{n/1e3:.{precision}f}K"
    else:
        return f"{n:.{precision}f}"
