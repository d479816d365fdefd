"""
Synthetic workload generation for batch job simulation.

Generates jobs with:
- Poisson arrivals (specified arrival rate), rounded down to whole time units
- Durations of at least one unit, Poisson distributed around the mean
- Core and memory demands drawn from discrete distributions

Supports Common Random Numbers (CRN) via configurable seed for low-variance
cross-policy comparisons.
"""
import numpy as np
from jobs import build_jobs

DEFAULT_CORE_DISTRIBUTION = {1: 0.2, 2: 0.25, 4: 0.25, 8: 0.15, 16: 0.1, 24: 0.05}
DEFAULT_MEMORY_DISTRIBUTION = {2: 0.2, 4: 0.25, 8: 0.25, 16: 0.15, 32: 0.1, 64: 0.05}


def generate_jobs(
    num_jobs=100,
    arrival_rate=2.0,        # jobs per time unit
    mean_duration=5.0,       # mean execution time (time units)
    core_distribution=None,  # {cores: probability}
    memory_distribution=None,  # {GB: probability}
    seed=42
):
    """
    Generate a synthetic workload of jobs for simulation.
    Returns a list of Job objects with ids 1..num_jobs.

    Demands are drawn independently, so keep both distributions within the
    node capacity (24 cores / 64 GB by default) or the run will reject them.
    """
    if core_distribution is None:
        core_distribution = DEFAULT_CORE_DISTRIBUTION
    if memory_distribution is None:
        memory_distribution = DEFAULT_MEMORY_DISTRIBUTION

    rng = np.random.default_rng(seed)

    interarrivals = rng.exponential(1.0 / arrival_rate, size=num_jobs)
    arrivals = np.floor(np.cumsum(interarrivals)).astype(int)
    durations = 1 + rng.poisson(max(mean_duration - 1.0, 0.0), size=num_jobs)
    cores = rng.choice(list(core_distribution.keys()), size=num_jobs,
                       p=list(core_distribution.values()))
    memory = rng.choice(list(memory_distribution.keys()), size=num_jobs,
                        p=list(memory_distribution.values()))

    # numpy scalars are not ints as far as Job validation is concerned
    rows = [(int(a), int(c), int(m), int(d)) for a, c, m, d in zip(arrivals, cores, memory, durations)]
    return build_jobs(rows)
