"""
Worker node pool with fixed per-node capacity.

Every node starts with CORES_PER_NODE cores and MEMORY_PER_NODE GB of memory.
The cluster tracks resource allocation and provides methods for:
- Checking whether a node can accommodate a job (feasibility)
- Assigning a job to a node (debit resources, record the occupant)
- Releasing jobs whose end time has been reached
- Reporting the final per-node state

Occupants are tracked explicitly per node so that a release credits back
exactly what the finished job consumed.
"""

CORES_PER_NODE = 24
MEMORY_PER_NODE = 64


class OvercommitError(RuntimeError):
    """Raised when a job is assigned to a node that cannot accommodate it."""


class NotOccupantError(KeyError):
    """Raised when releasing a job that is not running on the node."""


class WorkerNode:
    def __init__(self, nid, total_cores=CORES_PER_NODE, total_memory=MEMORY_PER_NODE, exclusive=False):
        self.nid = nid
        self.total_cores = total_cores
        self.total_memory = total_memory
        self.exclusive = exclusive  # at most one occupant at a time
        self.available_cores = total_cores
        self.available_memory = total_memory
        self.job_end_time = 0  # end time of the most recently placed job
        self.occupants = []  # (job, end_time), in assignment order

    def reset(self):
        self.available_cores = self.total_cores
        self.available_memory = self.total_memory
        self.job_end_time = 0
        self.occupants = []

    def can_accommodate(self, job):
        if self.exclusive and self.occupants:
            return False
        return self.available_cores >= job.cores and self.available_memory >= job.memory

    def fits_when_idle(self, job):
        """Whether the job could ever run here, i.e. on a completely idle node."""
        return self.total_cores >= job.cores and self.total_memory >= job.memory

    def is_idle(self):
        return not self.occupants

    def assign(self, job, time):
        """
        Debit the job's demand and record it as an occupant until time + duration.

        Raises:
            OvercommitError: if the node cannot accommodate the job right now.
        """
        if not self.can_accommodate(job):
            raise OvercommitError(
                f"Node {self.nid} cannot accommodate job {job.jid} "
                f"(needs {job.cores} cores/{job.memory} GB, "
                f"has {self.available_cores} cores/{self.available_memory} GB)")
        end_time = time + job.duration
        self.available_cores -= job.cores
        self.available_memory -= job.memory
        self.occupants.append((job, end_time))
        self.job_end_time = end_time
        return end_time

    def release(self, job):
        """Credit back exactly the resources held by `job`."""
        for i, (occupant, _) in enumerate(self.occupants):
            if occupant is job:
                del self.occupants[i]
                self.available_cores += job.cores
                self.available_memory += job.memory
                return
        raise NotOccupantError(f"Job {job.jid} is not running on node {self.nid}")

    def release_finished(self, time):
        """Release every occupant whose end time is <= time. Returns the released jobs."""
        finished = [job for job, end_time in self.occupants if end_time <= time]
        for job in finished:
            self.release(job)
        return finished

    def cores_in_use(self):
        return sum(job.cores for job, _ in self.occupants)

    def memory_in_use(self):
        return sum(job.memory for job, _ in self.occupants)

    def __repr__(self):
        return (f"WorkerNode(nid={self.nid}, cores={self.available_cores}/{self.total_cores}, "
                f"memory={self.available_memory}/{self.total_memory}, end={self.job_end_time})")


class Cluster:
    def __init__(self, num_nodes, cores_per_node=CORES_PER_NODE, memory_per_node=MEMORY_PER_NODE,
                 exclusive=False):
        self.nodes = [WorkerNode(i + 1, cores_per_node, memory_per_node, exclusive=exclusive)
                      for i in range(num_nodes)]
        self.cores_per_node = cores_per_node
        self.memory_per_node = memory_per_node
        self.exclusive = exclusive

    def reset(self):
        for node in self.nodes:
            node.reset()

    def fits_when_idle(self, job):
        return any(node.fits_when_idle(job) for node in self.nodes)

    def release_finished(self, time):
        """Release finished jobs on every node. Returns [(node, job), ...]."""
        released = []
        for node in self.nodes:
            for job in node.release_finished(time):
                released.append((node, job))
        return released

    @property
    def total_cores(self):
        return sum(node.total_cores for node in self.nodes)

    @property
    def total_memory(self):
        return sum(node.total_memory for node in self.nodes)

    def snapshot(self):
        """Final per-node state as (node id, available cores, available memory, job end time) rows."""
        return [(node.nid, node.available_cores, node.available_memory, node.job_end_time)
                for node in self.nodes]
