"""
Abstract base classes for the two interchangeable scheduling decisions.

1. OrderingPolicy: linearizes the pending jobs once, at the start of a run
2. PlacementPolicy: picks a feasible node for one job, or None

Subclasses implement concrete policies (FCFS, smallest job first, first fit,
best fit, ...). The simulator only talks to these interfaces.
"""
from abc import ABC, abstractmethod


class OrderingPolicy(ABC):
    name = None

    @abstractmethod
    def key(self, job):
        """
        Sort key for a job. Lower keys are admitted first.

        Args:
            job: Job instance
        """
        pass

    def order(self, jobs):
        """Return a new list of jobs in admission order. Ties keep input order."""
        return sorted(jobs, key=self.key)

    def __repr__(self):
        return f"{type(self).__name__}()"


class PlacementPolicy(ABC):
    name = None

    @abstractmethod
    def select(self, nodes, job):
        """
        Choose a node for the job without modifying any node.

        Args:
            nodes: WorkerNode list in pool order
            job: Job instance to place

        Returns:
            A WorkerNode that can accommodate the job, or None if none can.
        """
        pass

    def __repr__(self):
        return f"{type(self).__name__}()"
