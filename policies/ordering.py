from .base import OrderingPolicy


class ArrivalOrder(OrderingPolicy):
    """
    First-Come, First-Served (FCFS) ordering.

    Jobs are attempted in ascending arrival time; jobs arriving at the same
    time keep their input order.
    """
    name = "FCFS"

    def key(self, job):
        return job.arrival


class SmallestFootprintFirst(OrderingPolicy):
    """
    Smallest Job First ordering.

    Jobs are attempted in ascending gross value (duration x cores x memory),
    so small, short jobs get through before large ones.
    """
    name = "Smallest Job First"

    def key(self, job):
        return job.gross_value


class ShortestDurationFirst(OrderingPolicy):
    """Short Duration First ordering: ascending execution duration."""
    name = "Short Duration First"

    def key(self, job):
        return job.duration
