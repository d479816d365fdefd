"""
Pytest configuration and shared fixtures for simulator tests.
"""
import pytest
from test_utils import create_test_job, create_test_cluster


@pytest.fixture
def basic_cluster():
    """Create a basic test cluster with 2 default-sized nodes (24 cores, 64 GB)."""
    return create_test_cluster(2)


@pytest.fixture
def single_node_cluster():
    """Create a cluster with a single node."""
    return create_test_cluster(1)


@pytest.fixture
def mixed_jobs():
    """Jobs whose arrival, footprint and duration orders all differ."""
    return [
        create_test_job(1, 0, 8, 16, 6),   # gross 768
        create_test_job(2, 1, 2, 4, 9),    # gross 72
        create_test_job(3, 2, 4, 8, 1),    # gross 32
        create_test_job(4, 0, 1, 2, 6),    # gross 12, ties job 1 on duration
    ]


@pytest.fixture
def uneven_nodes():
    """Three nodes with 10, 4 and 10 free cores respectively."""
    cluster = create_test_cluster(3)
    cluster.nodes[0].assign(create_test_job(101, 0, 14, 8, 10), 0)
    cluster.nodes[1].assign(create_test_job(102, 0, 20, 8, 10), 0)
    cluster.nodes[2].assign(create_test_job(103, 0, 14, 8, 10), 0)
    return cluster.nodes
