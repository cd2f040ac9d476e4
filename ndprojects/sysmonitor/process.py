"""A snapshot of one process."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Process:
    """Statistics of a single process, ordered by CPU utilization."""

    pid: int
    user: str
    command: str
    cpu_utilization: float
    ram: int
    uptime: int

    @classmethod
    def load(cls, parser, pid: int) -> "Process":
        """Read the statistics of ``pid`` through ``parser``."""
        command = parser.command(pid)
        ram = int(parser.ram(pid))
        uptime = parser.process_uptime(pid)
        user = parser.user(pid)

        seconds = parser.uptime() - uptime
        total_time = parser.process_active_jiffies(pid)
        utilization = total_time / seconds if seconds else 0.0

        return cls(
            pid=pid,
            user=user,
            command=command,
            cpu_utilization=utilization,
            ram=ram,
            uptime=uptime,
        )

    def __lt__(self, other):
        if not isinstance(other, Process):
            return NotImplemented
        return self.cpu_utilization < other.cpu_utilization