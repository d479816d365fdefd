"""
Time-stepping simulation kernel for batch job scheduling.

Each step of the engine:
1. Syncs the clock to the arrival time of the first job in the ordered queue
2. Releases resources of jobs whose end time has been reached
3. Scans the pending queue in order and places every arrived job the
   placement policy finds a node for
4. Advances the clock by one time unit if nothing was placed

The run ends when the pending queue is empty. Jobs that can never fit a node
are rejected before the first step, and a step budget guards the loop.
"""


class UnsatisfiableJobError(RuntimeError):
    """Raised when a job's demand exceeds the capacity of every node."""

    def __init__(self, jobs):
        self.jobs = list(jobs)
        details = ", ".join(f"job {j.jid} ({j.cores} cores, {j.memory} GB)" for j in self.jobs)
        super().__init__(f"No node can ever accommodate: {details}")


class SimulationBudgetExceeded(RuntimeError):
    """Raised when the engine runs out of steps with jobs still pending."""


class AssignmentEvent:
    def __init__(self, job, node, time):
        self.job = job
        self.node = node
        self.time = time

    @property
    def end_time(self):
        return self.time + self.job.duration

    @property
    def wait(self):
        return self.time - self.job.arrival

    def __str__(self):
        return f"Job ID {self.job.jid} assigned to Node ID {self.node.nid} at time {self.time}"

    def __repr__(self):
        return f"AssignmentEvent(job={self.job.jid}, node={self.node.nid}, time={self.time})"


class Simulator:
    def __init__(self, cluster, jobs, ordering, placement, debug=False, max_steps=None):
        self.cluster = cluster
        self.jobs = jobs
        self.ordering = ordering
        self.placement = placement
        self.debug = debug
        self.max_steps = max_steps
        self.time = 0
        self.pending = []
        self.events = []
        self.steps = 0

    def log(self, msg):
        if self.debug:
            print(f"[t={self.time}] {msg}")

    def step_budget(self):
        """
        Upper bound on the steps a satisfiable workload needs.

        Once the clock passes the last arrival plus the sum of all durations,
        every node is idle and every pending job fits somewhere.
        """
        if self.max_steps is not None:
            return self.max_steps
        if not self.jobs:
            return 0
        return max(j.arrival for j in self.jobs) + sum(j.duration for j in self.jobs) + len(self.jobs) + 1

    def reset(self):
        # Restore all nodes to idle so one simulator can be run repeatedly
        self.cluster.reset()
        self.time = 0
        self.pending = []
        self.events = []
        self.steps = 0

    def step(self):
        """Run one sync/release/admit cycle. Returns True if any job was placed."""
        if self.pending:
            self.time = max(self.time, self.pending[0].arrival)

        for node, job in self.cluster.release_finished(self.time):
            self.log(f"Job {job.jid} FINISHED on node {node.nid} "
                     f"(released {job.cores} cores, {job.memory} GB)")

        placed_any = False
        still_pending = []
        for job in self.pending:
            if job.arrival > self.time:
                still_pending.append(job)
                continue
            node = self.placement.select(self.cluster.nodes, job)
            if node is None:
                still_pending.append(job)
                continue
            node.assign(job, self.time)
            event = AssignmentEvent(job, node, self.time)
            self.events.append(event)
            self.log(f"Job {job.jid} STARTED on node {node.nid} "
                     f"(cores={job.cores}, memory={job.memory}, ends={event.end_time})")
            placed_any = True
        self.pending = still_pending

        if not placed_any:
            self.time += 1
        self.steps += 1
        return placed_any

    def run(self):
        """
        Simulate until every job is placed.

        Returns:
            list of AssignmentEvent in the order the assignments were made.

        Raises:
            UnsatisfiableJobError: a job does not fit any node even when idle.
            SimulationBudgetExceeded: the step budget ran out.
        """
        self.reset()

        unsatisfiable = [job for job in self.jobs if not self.cluster.fits_when_idle(job)]
        if unsatisfiable:
            raise UnsatisfiableJobError(unsatisfiable)

        self.pending = self.ordering.order(self.jobs)
        self.log(f"Queue order ({self.ordering.name}): {[j.jid for j in self.pending]}")

        budget = self.step_budget()
        while self.pending:
            if self.steps >= budget:
                raise SimulationBudgetExceeded(
                    f"{len(self.pending)} job(s) still pending after {self.steps} steps "
                    f"(t={self.time}): {[j.jid for j in self.pending]}")
            self.step()

        return self.events
