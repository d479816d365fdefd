from .base import PlacementPolicy


class FirstFit(PlacementPolicy):
    """Place the job on the first node (pool order) that can accommodate it."""
    name = "First Fit"

    def select(self, nodes, job):
        for node in nodes:
            if node.can_accommodate(job):
                return node
        return None


class BestFit(PlacementPolicy):
    """
    Place the job on the feasible node with the fewest available cores.

    Packs jobs tightly and keeps large idle nodes free for large jobs.
    The first node encountered wins ties.
    """
    name = "Best Fit"

    def select(self, nodes, job):
        best = None
        for node in nodes:
            if node.can_accommodate(job) and (best is None or node.available_cores < best.available_cores):
                best = node
        return best


class WorstFit(PlacementPolicy):
    """
    Place the job on the feasible node with the most available cores.

    Spreads load across the pool. The first node encountered wins ties.
    """
    name = "Worst Fit"

    def select(self, nodes, job):
        worst = None
        for node in nodes:
            if node.can_accommodate(job) and (worst is None or node.available_cores > worst.available_cores):
                worst = node
        return worst
