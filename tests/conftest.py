"""Shared fixtures for the scheduler tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from heapsched.schedulers import TaskQueue
from heapsched.task_generator import Task


class ScriptedGenerator:
    """Arrival source that answers arrival checks from a fixed script."""

    def __init__(self, arrivals=(), tasks=()):
        self.arrivals = list(arrivals)
        self.tasks = list(tasks)
        self.checks = 0

    def arrival_check(self):
        result = self.checks < len(self.arrivals) and self.arrivals[self.checks]
        self.checks += 1
        return bool(result)

    def next(self):
        return self.tasks.pop(0)


@pytest.fixture
def scripted_generator():
    return ScriptedGenerator


@pytest.fixture
def abc_queue():
    """Queue loaded with the A/B/C scenario tasks."""
    return TaskQueue.from_tasks([
        Task.create("A", 5, 3),
        Task.create("B", 9, 2),
        Task.create("C", 1, 1),
    ])


@pytest.fixture
def task_file(tmp_path):
    path = tmp_path / "tasks.txt"
    path.write_text("A 5 3\nB 9 2\nC 1 1\n")
    return path
