"""Tests for the Task record."""

import numpy as np
import pytest

from heapsched.exceptions import InvalidInput
from heapsched.task_generator import Task


def test_task_creation():
    """Test basic task creation."""
    task = Task.create("A", 5, 3)
    assert task.name == "A"
    assert task.priority == 5
    assert task.duration == 3
    assert task.remaining_duration == 3
    assert task.arrival_time == 0
    assert task.start_time is None
    assert task.completion_time is None
    assert not task.is_complete


def test_task_accepts_numpy_integers():
    """Test that numpy integers are stored as plain ints."""
    task = Task.create("W3", np.int64(4), np.int64(7))
    assert type(task.priority) is int
    assert type(task.duration) is int


def test_task_name_too_long():
    """Test that names longer than the maximum are rejected, not truncated."""
    with pytest.raises(InvalidInput, match="longer than"):
        Task.create("LONG", 1, 1)


@pytest.mark.parametrize("name", ["", "a b", None, 7])
def test_task_invalid_name(name):
    """Test that empty, whitespace or non-string names are rejected."""
    with pytest.raises(InvalidInput):
        Task.create(name, 1, 1)


@pytest.mark.parametrize("priority, duration", [("5", 1), (1, 2.5), (True, 1), (1, None)])
def test_task_non_integer_fields(priority, duration):
    """Test that priority and duration must be integers."""
    with pytest.raises(InvalidInput):
        Task.create("A", priority, duration)


def test_task_zero_and_negative_priority():
    """Test that any integer priority is accepted."""
    assert Task.create("A", 0, 1).priority == 0
    assert Task.create("B", -4, 1).priority == -4


def test_task_negative_duration_is_complete():
    """Test that a negative duration leaves nothing to service."""
    task = Task.create("A", 1, -3)
    assert task.duration == -3
    assert task.remaining_duration == 0
    assert task.is_complete


def test_task_run_for():
    """Test servicing never drives the remaining duration below zero."""
    task = Task.create("A", 1, 3)
    assert task.run_for(1) == 1
    assert task.remaining_duration == 2
    assert task.run_for(5) == 2
    assert task.remaining_duration == 0
    assert task.is_complete
    assert task.run_for(1) == 0
    assert task.remaining_duration == 0


def test_task_timing_properties():
    """Test waiting and turnaround times."""
    task = Task.create("A", 1, 3)
    assert task.waiting_time is None
    assert task.turnaround_time is None

    task.arrival_time = 2
    task.start_time = 5
    task.completion_time = 8
    assert task.waiting_time == 3
    assert task.turnaround_time == 6


def test_task_string_representation():
    """Test task string representation."""
    task = Task.create("B", 9, 2)
    assert str(task) == "B  9  2"
    assert "priority=9" in repr(task)


def test_task_to_dict():
    """Test task serialisation."""
    data = Task.create("C", 1, 1).to_dict()
    assert data["name"] == "C"
    assert data["priority"] == 1
    assert data["duration"] == 1
    assert data["remaining_duration"] == 1
    assert data["waiting_time"] is None
