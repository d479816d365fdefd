"""
Batch job model.

A job is an immutable resource demand:
- arrival time (simulated time units, >= 0)
- cores and memory (GB) required while it runs
- execution duration (simulated time units)

Jobs are validated when they are created, so the simulation engine can rely on
well-formed input.
"""


class InvalidJobError(ValueError):
    """Raised when job parameters are malformed."""


def _check_int(name, value, minimum):
    # bool is an int subclass, but "True cores" is never meant
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidJobError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidJobError(f"{name} must be >= {minimum}, got {value}")
    return value


class Job:
    def __init__(self, jid, arrival, cores, memory, duration):
        self._jid = jid
        self._arrival = _check_int("arrival", arrival, 0)
        self._cores = _check_int("cores", cores, 1)
        self._memory = _check_int("memory", memory, 1)
        self._duration = _check_int("duration", duration, 1)

    @property
    def jid(self):
        return self._jid

    @property
    def arrival(self):
        return self._arrival

    @property
    def cores(self):
        return self._cores

    @property
    def memory(self):
        return self._memory

    @property
    def duration(self):
        return self._duration

    @property
    def gross_value(self):
        """Duration x cores x memory. Only meaningful as an ordering key."""
        return self._duration * self._cores * self._memory

    def __repr__(self):
        return (f"Job(jid={self._jid}, arrival={self._arrival}, cores={self._cores}, "
                f"memory={self._memory}, duration={self._duration})")


def build_jobs(rows):
    """
    Create jobs from (arrival, cores, memory, duration) rows.

    Ids are assigned 1..n in input order.

    Raises:
        InvalidJobError: if any row is malformed (the message names the job id).
    """
    jobs = []
    for index, row in enumerate(rows):
        jid = index + 1
        try:
            arrival, cores, memory, duration = row
        except (TypeError, ValueError):
            raise InvalidJobError(f"job {jid}: expected 4 values, got {row!r}") from None
        try:
            jobs.append(Job(jid, arrival, cores, memory, duration))
        except InvalidJobError as exc:
            raise InvalidJobError(f"job {jid}: {exc}") from None
    return jobs
