#!/usr/bin/env python3
"""
Multi-seed comparison of ordering x placement policy combinations.

Uses Common Random Numbers (CRN): every combination sees the same generated
workload for a given seed. Reports mean, standard error and 95% confidence
intervals per metric and exports them to CSV for plot_results.py.

Usage:
    python compare_policies.py                    # Default: 20 seeds, base seed 42
    python compare_policies.py --seeds 50         # Run 50 seeds
    python compare_policies.py --nodes 8 --jobs 300 --arrival-rate 4
    python compare_policies.py --help             # Show options
"""
import argparse
import csv
import sys

import numpy as np

from cluster import Cluster
from policies.selection import ORDERING_MENU, PLACEMENT_MENU
from simulator import Simulator
from workload import generate_jobs
import metrics

DEBUG = False
STATS_FILENAME = "policy_comparison_stats.csv"
METRIC_NAMES = ["mean_wait", "p95_wait", "makespan", "core_util"]


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Multi-seed comparison of queue and node selection policies with CRN")
    parser.add_argument('--seeds', type=int, default=20,
                        help='Number of seeds to run (default: 20)')
    parser.add_argument('--base-seed', type=int, default=42,
                        help='Base seed; seeds run from base_seed to base_seed+N-1 (default: 42)')
    parser.add_argument('--nodes', type=int, default=4,
                        help='Number of worker nodes (default: 4)')
    parser.add_argument('--jobs', type=int, default=100,
                        help='Jobs per workload (default: 100)')
    parser.add_argument('--arrival-rate', type=float, default=2.0,
                        help='Job arrivals per time unit (default: 2.0)')
    parser.add_argument('--mean-duration', type=float, default=5.0,
                        help='Mean job duration (default: 5.0)')
    parser.add_argument('--output', default=STATS_FILENAME,
                        help=f'Stats CSV file (default: {STATS_FILENAME})')
    return parser.parse_args(argv)


def policy_combinations():
    """All (label, ordering, placement) combinations, ordering-major."""
    combos = []
    for ordering_cls in ORDERING_MENU.values():
        for placement_cls in PLACEMENT_MENU.values():
            ordering = ordering_cls()
            placement = placement_cls()
            combos.append((f"{ordering.name} / {placement.name}", ordering, placement))
    return combos


def run_single_trial(seed, num_nodes, num_jobs, arrival_rate, mean_duration):
    """Run all combinations on the same workload (CRN). Returns {label: {metric: value}}."""
    jobs = generate_jobs(
        num_jobs=num_jobs,
        arrival_rate=arrival_rate,
        mean_duration=mean_duration,
        seed=seed
    )

    results = {}
    for label, ordering, placement in policy_combinations():
        cluster = Cluster(num_nodes)
        sim = Simulator(cluster, jobs, ordering, placement, debug=DEBUG)
        events = sim.run()

        results[label] = {
            'mean_wait': metrics.mean_wait(events),
            'p95_wait': metrics.p95_wait(events),
            'makespan': float(metrics.makespan(events)),
            'core_util': metrics.core_utilization(cluster.nodes),
        }
    return results


def summarize(values):
    """Mean, standard error, 95% CI bounds and median of a sample."""
    values = np.asarray(values, dtype=float)
    mean = float(np.mean(values))
    if len(values) > 1:
        std_err = float(np.std(values, ddof=1) / np.sqrt(len(values)))
    else:
        std_err = 0.0
    return {
        'mean': mean,
        'std_err': std_err,
        'ci_lower': mean - 1.96 * std_err,
        'ci_upper': mean + 1.96 * std_err,
        'median': float(np.median(values)),
    }


def collect(seeds, num_nodes, num_jobs, arrival_rate, mean_duration):
    """Run every seed and return {(label, metric): summary}."""
    labels = [label for label, _, _ in policy_combinations()]
    samples = {label: {name: [] for name in METRIC_NAMES} for label in labels}

    for seed in seeds:
        trial = run_single_trial(seed, num_nodes, num_jobs, arrival_rate, mean_duration)
        for label in labels:
            for name in METRIC_NAMES:
                samples[label][name].append(trial[label][name])

    return {(label, name): summarize(samples[label][name])
            for label in labels for name in METRIC_NAMES}


def write_stats(stats, filename):
    with open(filename, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Policy', 'Metric', 'Mean', 'StdErr', 'CILower', 'CIUpper', 'Median'])
        for (label, metric), stat in stats.items():
            writer.writerow([
                label, metric,
                f"{stat['mean']:.6f}",
                f"{stat['std_err']:.6f}",
                f"{stat['ci_lower']:.6f}",
                f"{stat['ci_upper']:.6f}",
                f"{stat['median']:.6f}",
            ])


def main(argv=None):
    args = parse_args(argv)
    seeds = list(range(args.base_seed, args.base_seed + args.seeds))

    print("=" * 100)
    print(f"Policy comparison: {args.seeds} seeds with Common Random Numbers (CRN)")
    print(f"  Nodes: {args.nodes}, Jobs: {args.jobs}, Arrival: {args.arrival_rate:.2f}/unit, "
          f"Mean duration: {args.mean_duration:.1f}")
    print(f"  Seed range: {seeds[0] if seeds else '-'} to {seeds[-1] if seeds else '-'}")
    print("=" * 100)

    stats = collect(seeds, args.nodes, args.jobs, args.arrival_rate, args.mean_duration)

    print(f"{'Policy':<40}  {'Mean Wait':>16}  {'P95 Wait':>16}  {'Makespan':>16}  {'Core Util':>10}")
    print("-" * 100)
    for label, _, _ in policy_combinations():
        mw = stats[(label, 'mean_wait')]
        pw = stats[(label, 'p95_wait')]
        ms = stats[(label, 'makespan')]
        cu = stats[(label, 'core_util')]
        print(f"{label:<40}  "
              f"{mw['mean']:8.2f}±{1.96 * mw['std_err']:<7.2f}  "
              f"{pw['mean']:8.2f}±{1.96 * pw['std_err']:<7.2f}  "
              f"{ms['mean']:8.1f}±{1.96 * ms['std_err']:<7.1f}  "
              f"{cu['mean']:>10.3f}")

    write_stats(stats, args.output)
    print(f"\n✓ Stats saved to {args.output}")
    print("  Run: python plot_results.py")
    return 0


if __name__ == "__main__":
    sys.exit(main())
