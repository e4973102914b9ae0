"""
Batch Runner

Independent simulation runs, optionally spread over worker processes.
Runs share no state, so ordering and worker count never change results.
"""

import logging
import multiprocessing
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
import numpy as np

from ..errors import CounterSimError
from ..patterns.generators import Pattern, random_pattern
from .metrics import SimulationResult
from .simulator import simulate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationJob:
    """One (pattern, predictor type) pair to evaluate."""
    pattern: Pattern
    predictor_type: str = 'two_bit'
    warmup: int = 0


def _run_job(job: SimulationJob) -> SimulationResult:
    return simulate(job.pattern, job.predictor_type, warmup=job.warmup)


def _run_job_captured(job: SimulationJob) -> Dict[str, Any]:
    """Run a job, turning simulator errors into a failure record."""
    try:
        return {'success': True, 'result': _run_job(job)}
    except CounterSimError as e:
        return {
            'success': False,
            'pattern': job.pattern.name,
            'predictor': job.predictor_type,
            'error': str(e),
        }


def default_workers() -> int:
    return max(1, multiprocessing.cpu_count() - 1)


def _map_jobs(worker: Callable[[SimulationJob], Any],
              jobs: Sequence[SimulationJob],
              num_workers: Optional[int]) -> List[Any]:
    if num_workers is None:
        num_workers = default_workers()

    if num_workers <= 1 or len(jobs) <= 1:
        return [worker(job) for job in jobs]

    logger.info("Running %d jobs with %d parallel workers", len(jobs), num_workers)
    with ProcessPoolExecutor(max_workers=num_workers) as executor:
        return list(executor.map(worker, jobs))


def run_batch(jobs: Sequence[SimulationJob],
              num_workers: Optional[int] = 1) -> List[SimulationResult]:
    """
    Run jobs and return their results in job order.

    Args:
        jobs: Jobs to run
        num_workers: Worker processes (None for CPU count - 1, <= 1 for serial)

    Returns:
        One SimulationResult per job. The first failing job's exception
        propagates.
    """
    return _map_jobs(_run_job, jobs, num_workers)


def run_batch_with_errors(jobs: Sequence[SimulationJob],
                          num_workers: Optional[int] = 1
                          ) -> Tuple[List[SimulationResult], List[Dict[str, Any]]]:
    """
    Run jobs, keeping going past jobs the simulator rejects.

    Returns:
        (results of the successful jobs in job order,
         failure records with pattern, predictor and error message)
    """
    results = []
    errors = []
    for record in _map_jobs(_run_job_captured, jobs, num_workers):
        if record['success']:
            results.append(record['result'])
        else:
            logger.warning("Pattern '%s' with %s failed: %s",
                           record['pattern'], record['predictor'], record['error'])
            errors.append({k: v for k, v in record.items() if k != 'success'})
    return results, errors


def run_random_trials(length: int,
                      trials: int,
                      seed: Optional[int] = None,
                      predictor_type: str = 'two_bit',
                      num_workers: Optional[int] = 1) -> List[SimulationResult]:
    """
    Repeat a predictor over independent uniform random patterns.

    Each trial gets its own child seed spawned from `seed`, so the set
    of results is reproducible whatever the worker count.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    child_seeds = np.random.SeedSequence(seed).spawn(trials)
    jobs = [
        SimulationJob(
            pattern=random_pattern(length, rng=child, name=f"random_trial_{i}"),
            predictor_type=predictor_type,
        )
        for i, child in enumerate(child_seeds)
    ]
    return run_batch(jobs, num_workers=num_workers)
