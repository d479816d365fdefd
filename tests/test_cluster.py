"""
Tests for worker node resource accounting.
"""
import pytest
from test_utils import create_test_job, create_test_cluster, assert_resources_conserved
from cluster import WorkerNode, OvercommitError, NotOccupantError, CORES_PER_NODE, MEMORY_PER_NODE


def test_new_node_is_idle_with_full_capacity():
    node = WorkerNode(1)
    assert (node.available_cores, node.available_memory, node.job_end_time) == (CORES_PER_NODE, MEMORY_PER_NODE, 0)
    assert node.is_idle()


def test_can_accommodate_checks_cores_and_memory():
    node = WorkerNode(1, total_cores=8, total_memory=16)
    assert node.can_accommodate(create_test_job(1, 0, 8, 16, 1))
    assert not node.can_accommodate(create_test_job(2, 0, 9, 1, 1))
    assert not node.can_accommodate(create_test_job(3, 0, 1, 17, 1))


def test_assign_debits_and_sets_end_time():
    node = WorkerNode(1)
    job = create_test_job(1, 0, 4, 8, 5)
    assert node.assign(job, 3) == 8
    assert (node.available_cores, node.available_memory, node.job_end_time) == (20, 56, 8)
    assert node.occupants == [(job, 8)]
    assert_resources_conserved(node)


def test_assign_rejects_overcommit():
    node = WorkerNode(1)
    node.assign(create_test_job(1, 0, 20, 8, 5), 0)
    with pytest.raises(OvercommitError):
        node.assign(create_test_job(2, 0, 5, 8, 5), 0)
    assert node.available_cores == 4


def test_release_restores_exactly_the_occupant():
    node = WorkerNode(1)
    small = create_test_job(1, 0, 2, 4, 3)
    large = create_test_job(2, 0, 16, 32, 7)
    node.assign(small, 0)
    node.assign(large, 0)
    node.release(small)
    assert (node.available_cores, node.available_memory) == (8, 32)
    assert [job for job, _ in node.occupants] == [large]
    assert_resources_conserved(node)


def test_release_unknown_job_raises():
    node = WorkerNode(1)
    with pytest.raises(NotOccupantError):
        node.release(create_test_job(1, 0, 1, 1, 1))


def test_release_then_reassign_is_idempotent():
    node = WorkerNode(1)
    job = create_test_job(1, 0, 6, 12, 4)
    node.assign(job, 2)
    before = (node.available_cores, node.available_memory, node.job_end_time, list(node.occupants))
    node.release(job)
    node.assign(job, 2)
    after = (node.available_cores, node.available_memory, node.job_end_time, list(node.occupants))
    assert before == after


def test_release_finished_uses_end_time():
    node = WorkerNode(1)
    short = create_test_job(1, 0, 2, 2, 2)
    long = create_test_job(2, 0, 3, 3, 6)
    node.assign(long, 0)
    node.assign(short, 0)
    assert node.release_finished(1) == []
    assert node.release_finished(2) == [short]
    assert node.release_finished(10) == [long]
    assert node.is_idle()
    # the last placed job's end time is kept for the report
    assert node.job_end_time == 2


def test_exclusive_node_hosts_one_job():
    node = WorkerNode(1, exclusive=True)
    node.assign(create_test_job(1, 0, 1, 1, 5), 0)
    assert not node.can_accommodate(create_test_job(2, 0, 1, 1, 1))


def test_cluster_snapshot_and_reset():
    cluster = create_test_cluster(2)
    cluster.nodes[1].assign(create_test_job(1, 0, 4, 8, 5), 1)
    assert cluster.snapshot() == [(1, 24, 64, 0), (2, 20, 56, 6)]
    cluster.reset()
    assert cluster.snapshot() == [(1, 24, 64, 0), (2, 24, 64, 0)]


def test_cluster_fits_when_idle_ignores_current_load():
    cluster = create_test_cluster(1)
    cluster.nodes[0].assign(create_test_job(1, 0, 24, 64, 5), 0)
    assert cluster.fits_when_idle(create_test_job(2, 0, 24, 64, 1))
    assert not cluster.fits_when_idle(create_test_job(3, 0, 25, 1, 1))
    assert not cluster.fits_when_idle(create_test_job(4, 0, 1, 65, 1))
