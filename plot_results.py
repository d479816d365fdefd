#!/usr/bin/env python3
"""
Load policy comparison stats from CSV and generate tables and figures.

Figures:
1. Mean wait time per policy combination (95% CI error bars)
2. Makespan per policy combination (95% CI error bars)
"""
import argparse
import csv
import os
import sys

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from compare_policies import STATS_FILENAME

# One color per placement policy, shared across figures
COLORS = {
    'First Fit': '#808080',  # gray
    'Best Fit': '#1f77b4',   # blue
    'Worst Fit': '#d62728',  # red
}


def load_stats(csv_file=STATS_FILENAME):
    """Load pre-computed stats: {(policy label, metric): {mean, std_err, ...}}."""
    if not os.path.exists(csv_file):
        raise FileNotFoundError(f"{csv_file} not found (run: python compare_policies.py)")

    stats = {}
    with open(csv_file, 'r', newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            stats[(row['Policy'], row['Metric'])] = {
                'mean': float(row['Mean']),
                'std_err': float(row['StdErr']),
                'ci_lower': float(row['CILower']),
                'ci_upper': float(row['CIUpper']),
                'median': float(row['Median']),
            }
    return stats


def split_label(label):
    """'FCFS / Best Fit' -> ('FCFS', 'Best Fit')"""
    ordering, _, placement = label.partition(" / ")
    return ordering, placement


def policy_labels(stats):
    """Policy labels in first-seen (file) order."""
    labels = []
    for label, _ in stats:
        if label not in labels:
            labels.append(label)
    return labels


def print_table(stats):
    print("\n" + "=" * 100)
    print("POLICY COMPARISON (mean, 95% CI)")
    print("=" * 100)
    metrics = sorted({metric for _, metric in stats})
    print("Policy".ljust(40) + "".join(m.rjust(22) for m in metrics))
    print("-" * 100)
    for label in policy_labels(stats):
        row = label.ljust(40)
        for metric in metrics:
            stat = stats.get((label, metric))
            if stat is None:
                row += "-".rjust(22)
            else:
                row += f"{stat['mean']:.2f}({stat['ci_lower']:.2f}-{stat['ci_upper']:.2f})".rjust(22)
        print(row)


def grouped_bar_figure(stats, metric, ylabel, filename):
    """Bars grouped by ordering policy, one bar per placement policy."""
    labels = policy_labels(stats)
    orderings = []
    for label in labels:
        ordering, _ = split_label(label)
        if ordering not in orderings:
            orderings.append(ordering)

    x = np.arange(len(orderings))
    width = 0.8 / max(len(COLORS), 1)

    fig, ax = plt.subplots(figsize=(10, 6))
    for i, (placement, color) in enumerate(COLORS.items()):
        means, errors = [], []
        for ordering in orderings:
            stat = stats.get((f"{ordering} / {placement}", metric))
            means.append(stat['mean'] if stat else 0.0)
            errors.append(1.96 * stat['std_err'] if stat else 0.0)
        ax.bar(x + (i - 1) * width, means, width, yerr=errors, capsize=4,
               color=color, edgecolor='black', label=placement)

    ax.set_xticks(x)
    ax.set_xticklabels(orderings)
    ax.set_xlabel("Queue Policy", fontsize=12, fontweight='bold')
    ax.set_ylabel(ylabel, fontsize=12, fontweight='bold')
    ax.legend(title="Node Selection")
    ax.grid(True, axis='y', alpha=0.3, linestyle='--')
    plt.tight_layout()
    plt.savefig(filename, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"✓ Generated {filename}")
    return filename


def generate_figures(stats, out_dir="."):
    return [
        grouped_bar_figure(stats, 'mean_wait', "Mean Wait (Lower is Better)",
                           os.path.join(out_dir, 'fig1_mean_wait.png')),
        grouped_bar_figure(stats, 'makespan', "Makespan (Lower is Better)",
                           os.path.join(out_dir, 'fig2_makespan.png')),
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Tables and figures for policy comparison stats")
    parser.add_argument('--input', default=STATS_FILENAME, help=f'Stats CSV (default: {STATS_FILENAME})')
    parser.add_argument('--out-dir', default='.', help='Directory for figures (default: .)')
    args = parser.parse_args(argv)

    try:
        stats = load_stats(args.input)
    except FileNotFoundError as exc:
        print(f"✗ {exc}")
        return 1
    print(f"✓ Loaded pre-computed stats from {args.input}")

    print_table(stats)
    generate_figures(stats, args.out_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
