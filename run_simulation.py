#!/usr/bin/env python3
"""
Run one batch scheduling simulation and save the worker node report.

Jobs are entered interactively (or piped in), or generated synthetically.

Usage:
    python run_simulation.py                          # prompt for jobs and policies
    python run_simulation.py --nodes 4 --debug        # small pool, trace every step
    python run_simulation.py --synthetic 200 --seed 7 --ordering sjf --placement best-fit
    python run_simulation.py --help                   # Show options
"""
import argparse
import sys

from cluster import Cluster, CORES_PER_NODE, MEMORY_PER_NODE
from jobs import InvalidJobError, build_jobs
from policies.selection import (
    create_ordering_policy,
    create_placement_policy,
    is_known_ordering,
    is_known_placement,
)
from report import write_node_report
from simulator import Simulator, UnsatisfiableJobError, SimulationBudgetExceeded
from workload import generate_jobs
import metrics

DEBUG = False
DEFAULT_NUM_NODES = 128
REPORT_FILENAME = "worker_node_utilization.csv"

ORDERING_PROMPT = "\nSelect Job Queue Policy:\n1. FCFS\n2. Smallest Job First\n3. Short Duration First\nChoice: "
PLACEMENT_PROMPT = "\nSelect Worker Node Selection Policy:\n1. First Fit\n2. Best Fit\n3. Worst Fit\nChoice: "


class TokenReader:
    """Reads whitespace separated tokens, pulling more lines from input_fn as needed."""

    def __init__(self, input_fn=input):
        self.input_fn = input_fn
        self.tokens = []

    def next(self, prompt=""):
        while not self.tokens:
            try:
                self.tokens = self.input_fn(prompt).split()
            except EOFError:
                raise InvalidJobError("unexpected end of input") from None
            prompt = ""
        return self.tokens.pop(0)

    def next_int(self, prompt, what):
        token = self.next(prompt)
        try:
            return int(token)
        except ValueError:
            raise InvalidJobError(f"{what}: expected an integer, got {token!r}") from None


def prompt_workload(input_fn=input):
    """
    Ask for the job count, each job's parameters and both policy choices.

    Returns:
        (jobs, ordering_choice, placement_choice); choices are the raw tokens.

    Raises:
        InvalidJobError: on non-numeric or out-of-range job values.
    """
    reader = TokenReader(input_fn)
    num_jobs = reader.next_int("Enter the number of jobs: ", "number of jobs")
    if num_jobs < 0:
        raise InvalidJobError(f"number of jobs must be >= 0, got {num_jobs}")

    rows = []
    for i in range(num_jobs):
        jid = i + 1
        prompt = (f"Enter arrival time, cores required, memory required (GB), "
                  f"and execution time (hours) for job {jid}:\n")
        row = [reader.next_int(prompt, f"job {jid}")]
        for _ in range(3):
            row.append(reader.next_int("", f"job {jid}"))
        rows.append(tuple(row))
    jobs = build_jobs(rows)

    ordering_choice = reader.next(ORDERING_PROMPT)
    placement_choice = reader.next(PLACEMENT_PROMPT)
    return jobs, ordering_choice, placement_choice


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Batch job scheduler simulation over a fixed pool of worker nodes")
    parser.add_argument('--nodes', type=int, default=DEFAULT_NUM_NODES,
                        help=f'Number of worker nodes (default: {DEFAULT_NUM_NODES})')
    parser.add_argument('--cores', type=int, default=CORES_PER_NODE,
                        help=f'Cores per node (default: {CORES_PER_NODE})')
    parser.add_argument('--memory', type=int, default=MEMORY_PER_NODE,
                        help=f'Memory per node in GB (default: {MEMORY_PER_NODE})')
    parser.add_argument('--exclusive', action='store_true',
                        help='Run at most one job per node at a time')
    parser.add_argument('--output', default=REPORT_FILENAME,
                        help=f'Report file (default: {REPORT_FILENAME})')
    parser.add_argument('--synthetic', type=int, default=None, metavar='N',
                        help='Generate N jobs instead of prompting for them')
    parser.add_argument('--seed', type=int, default=42,
                        help='Seed for --synthetic (default: 42)')
    parser.add_argument('--ordering', default=None,
                        help='Queue policy for --synthetic: fcfs, sjf, sdf or 1-3 (default: fcfs)')
    parser.add_argument('--placement', default=None,
                        help='Node policy for --synthetic: first-fit, best-fit, worst-fit or 1-3 (default: first-fit)')
    parser.add_argument('--debug', action='store_true', default=DEBUG,
                        help='Print a trace of every simulation step')
    return parser.parse_args(argv)


def main(argv=None, input_fn=input):
    args = parse_args(argv)

    try:
        if args.synthetic is not None:
            jobs = generate_jobs(num_jobs=args.synthetic, seed=args.seed)
            ordering_choice = args.ordering if args.ordering is not None else 1
            placement_choice = args.placement if args.placement is not None else 1
        else:
            jobs, ordering_choice, placement_choice = prompt_workload(input_fn)
    except InvalidJobError as exc:
        print(f"✗ Invalid input: {exc}", file=sys.stderr)
        return 1

    if not is_known_ordering(ordering_choice):
        print(f"⚠ Unknown queue policy {ordering_choice!r}, using FCFS")
    if not is_known_placement(placement_choice):
        print(f"⚠ Unknown node selection policy {placement_choice!r}, using First Fit")
    ordering = create_ordering_policy(ordering_choice)
    placement = create_placement_policy(placement_choice)

    cluster = Cluster(args.nodes, args.cores, args.memory, exclusive=args.exclusive)
    sim = Simulator(cluster, jobs, ordering, placement, debug=args.debug)
    try:
        events = sim.run()
    except (UnsatisfiableJobError, SimulationBudgetExceeded) as exc:
        print(f"✗ Simulation aborted: {exc}", file=sys.stderr)
        return 1

    for event in events:
        print(event)

    write_node_report(cluster.nodes, args.output)
    print(f"\nWorker node utilization data has been saved to '{args.output}'.")
    print(f"  Policies: {ordering.name} / {placement.name}")
    print(f"  Core utilization: {metrics.core_utilization(cluster.nodes):.3f}, "
          f"memory utilization: {metrics.memory_utilization(cluster.nodes):.3f}")
    print(f"  Mean wait: {metrics.mean_wait(events):.2f}, makespan: {metrics.makespan(events)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
