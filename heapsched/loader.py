"""
Task Loader

Reads the initial task list from a text file. Each record is one line of the
form "<name> <priority> <duration>", whitespace delimited.
"""

import logging

from heapsched.config.params import SCHEDULER
from heapsched.exceptions import InvalidInput
from heapsched.schedulers.priority_queue import TaskQueue
from heapsched.task_generator import Task

logger = logging.getLogger(__name__)


def parse_task_line(line, line_number=None, source='<input>'):
    """
    Parse a single input record into a Task

    Args:
        line: Raw text of the record
        line_number: 1-based line number, used in error messages
        source: Name of the input, used in error messages

    Returns:
        Task

    Raises:
        InvalidInput: if the record does not hold a name and two integers
    """
    where = f"{source}:{line_number}" if line_number is not None else source
    fields = line.split()
    if len(fields) != 3:
        raise InvalidInput(f"{where}: expected '<name> <priority> <duration>', got {line.strip()!r}")

    name, priority, duration = fields
    try:
        priority = int(priority)
        duration = int(duration)
    except ValueError as e:
        raise InvalidInput(f"{where}: priority and duration must be integers, got {line.strip()!r}") from e

    try:
        return Task.create(name, priority, duration)
    except InvalidInput as e:
        raise InvalidInput(f"{where}: {e}") from e


def load_tasks(filepath):
    """
    Load tasks from a text file

    Blank lines and lines starting with '#' are skipped.

    Args:
        filepath: Path to the input file

    Returns:
        List of Task objects in file order
    """
    tasks = []
    with open(filepath, 'r', encoding='utf-8') as f:
        for line_number, line in enumerate(f, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith('#'):
                continue
            tasks.append(parse_task_line(stripped, line_number, source=str(filepath)))

    logger.info(f"Loaded {len(tasks)} tasks from {filepath}")
    return tasks


def load_task_queue(filepath, capacity=SCHEDULER['max_tasks']):
    """
    Load a task queue from a text file

    Raises:
        CapacityExceeded: if the file holds more tasks than the queue capacity
    """
    return TaskQueue.from_tasks(load_tasks(filepath), capacity=capacity)
