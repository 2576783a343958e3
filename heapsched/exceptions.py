"""
Scheduler Exceptions

Errors raised by the task queue, the task constructor and the input loader.
"""


class SchedulerError(Exception):
    """Base class for all scheduler errors"""


class CapacityExceeded(SchedulerError):
    """Raised when inserting into a task queue that is already full"""

    def __init__(self, capacity):
        super().__init__(f"Task queue is full (capacity {capacity})")
        self.capacity = capacity


class EmptyQueue(SchedulerError):
    """Raised when reading from a task queue that holds no tasks"""

    def __init__(self, message="Task queue is empty"):
        super().__init__(message)


class InvalidInput(SchedulerError):
    """Raised for an invalid task definition or a malformed input record"""
