# Simulation Package
from .simulator import BranchSimulator, SimulationConfig, simulate
from .metrics import SimulationResult, summarize
from .batch import SimulationJob, run_batch, run_batch_with_errors, run_random_trials

__all__ = [
    'BranchSimulator',
    'SimulationConfig',
    'simulate',
    'SimulationResult',
    'summarize',
    'SimulationJob',
    'run_batch',
    'run_batch_with_errors',
    'run_random_trials',
]
