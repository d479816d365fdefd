"""
CSV report of the final worker node state.
"""
import csv

REPORT_HEADER = ["Node ID", "Available Cores", "Available Memory", "Job End Time"]


def write_node_report(nodes, filename):
    """Write one row per node, in pool order."""
    with open(filename, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(REPORT_HEADER)
        for node in nodes:
            writer.writerow([node.nid, node.available_cores, node.available_memory, node.job_end_time])


def read_node_report(filename):
    """Load a report written by write_node_report as a list of int tuples."""
    with open(filename, 'r', newline='') as f:
        reader = csv.DictReader(f)
        if reader.fieldnames != REPORT_HEADER:
            raise ValueError(f"{filename}: unexpected header {reader.fieldnames}")
        return [tuple(int(row[col]) for col in REPORT_HEADER) for row in reader]
