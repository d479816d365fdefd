"""
Performance metrics for policy evaluation.

Snapshot metrics are utilization figures of the final snapshot, i.e. only the
jobs still running when the queue emptied (not a run-average utilization):
1. Core utilization: fraction of all cores held by running jobs (0-1)
2. Memory utilization: fraction of all memory held by running jobs (0-1)

Timeline metrics are computed from the assignment events:
3. Wait time: assignment time - arrival time per job (lower is better)
4. Makespan: time the last placed job finishes (lower is better)
5. Throughput: jobs completed per time unit over the makespan
"""
import numpy as np


def core_utilization(nodes):
    """Cores in use / total cores across the pool. Returns a value in [0, 1]."""
    total = sum(node.total_cores for node in nodes)
    if total <= 0:
        return 0.0
    used = sum(node.total_cores - node.available_cores for node in nodes)
    return used / total


def memory_utilization(nodes):
    """Memory in use / total memory across the pool. Returns a value in [0, 1]."""
    total = sum(node.total_memory for node in nodes)
    if total <= 0:
        return 0.0
    used = sum(node.total_memory - node.available_memory for node in nodes)
    return used / total


def wait_times(events):
    return np.array([event.wait for event in events], dtype=float)


def mean_wait(events):
    if not events:
        return 0.0
    return float(np.mean(wait_times(events)))


def p95_wait(events):
    """95th percentile of wait time; more informative than the mean under bursty load."""
    if not events:
        return 0.0
    return float(np.percentile(wait_times(events), 95))


def makespan(events):
    """
    Time from the first arrival until the last placed job finishes.

    Args:
        events: AssignmentEvent list from Simulator.run()

    Returns:
        Makespan in simulated time units, or 0 if nothing was placed
    """
    if not events:
        return 0
    first_arrival = min(event.job.arrival for event in events)
    last_finish = max(event.end_time for event in events)
    return last_finish - first_arrival


def throughput(events):
    span = makespan(events)
    if span <= 0:
        return 0.0
    return len(events) / span
