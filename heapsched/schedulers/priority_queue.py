"""
Task Queue

Array-backed binary max-heap of tasks keyed by priority. The task with the
highest priority is always at index 0.
"""

import logging

from heapsched.config.params import SCHEDULER
from heapsched.exceptions import CapacityExceeded, EmptyQueue


def left_child(i):
    return 2 * i + 1


def right_child(i):
    return 2 * i + 2


def parent(i):
    return (i - 1) // 2


class TaskQueue:
    """
    Max-heap priority queue of tasks

    Every parent's priority is >= both of its children's priorities. The
    order of tasks with equal priority is unspecified.
    """

    def __init__(self, capacity=SCHEDULER['max_tasks']):
        """
        Initialise an empty task queue

        Args:
            capacity: Maximum number of queued tasks, None for no limit
        """
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._tasks = []
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_tasks(cls, tasks, capacity=SCHEDULER['max_tasks']):
        """Build a queue by inserting each task in turn"""
        queue = cls(capacity=capacity)
        for task in tasks:
            queue.insert(task)
        return queue

    @property
    def count(self):
        return len(self._tasks)

    @property
    def tasks(self):
        """Snapshot of the queued tasks in heap order"""
        return tuple(self._tasks)

    def __len__(self):
        return len(self._tasks)

    def size(self):
        return len(self._tasks)

    def is_empty(self):
        return not self._tasks

    def is_full(self):
        return self.capacity is not None and len(self._tasks) >= self.capacity

    def insert(self, task):
        """
        Add a task as a new leaf and move it up while it outranks its parent

        Raises:
            CapacityExceeded: if the queue already holds `capacity` tasks
        """
        if self.is_full():
            raise CapacityExceeded(self.capacity)

        self._tasks.append(task)
        self._sift_up(len(self._tasks) - 1)
        self.logger.debug(f"Task {task.name} inserted with priority {task.priority} "
                          f"({len(self._tasks)} queued)")

    def peek_max(self):
        """Return the highest-priority task without removing it"""
        if not self._tasks:
            raise EmptyQueue()
        return self._tasks[0]

    def extract_max(self):
        """
        Remove and return the highest-priority task

        The last leaf replaces the root, then the heap is repaired downward.

        Raises:
            EmptyQueue: if there are no queued tasks
        """
        if not self._tasks:
            raise EmptyQueue()

        max_task = self._tasks[0]
        last = self._tasks.pop()
        if self._tasks:
            self._tasks[0] = last
            self._sift_down(0)
        return max_task

    def _swap(self, i, j):
        self._tasks[i], self._tasks[j] = self._tasks[j], self._tasks[i]

    def _sift_up(self, i):
        """
        Move the node at i up until its parent has a priority >= its own

        Returns:
            Number of swaps performed
        """
        swaps = 0
        tasks = self._tasks
        while i > 0 and tasks[i].priority > tasks[parent(i)].priority:
            self._swap(i, parent(i))
            i = parent(i)
            swaps += 1
        return swaps

    def _sift_down(self, i):
        """
        Move the node at i down until both children have priority <= its own

        Assumes the subtrees below i are already valid heaps. Ties keep the
        node in place, so a valid heap is left untouched.

        Returns:
            Number of swaps performed
        """
        swaps = 0
        tasks = self._tasks
        count = len(tasks)
        while True:
            left = left_child(i)
            right = right_child(i)
            largest = i

            if left < count and tasks[left].priority > tasks[largest].priority:
                largest = left
            if right < count and tasks[right].priority > tasks[largest].priority:
                largest = right

            if largest == i:
                return swaps

            self._swap(i, largest)
            i = largest
            swaps += 1

    def is_valid_heap(self):
        """Check the max-heap property for every non-root node"""
        tasks = self._tasks
        return all(tasks[parent(i)].priority >= tasks[i].priority
                   for i in range(1, len(tasks)))

    def levels(self):
        """
        Priorities grouped by heap level

        Returns:
            List of lists, one per level, root level first
        """
        rows = []
        start = 0
        width = 1
        while start < len(self._tasks):
            rows.append([t.priority for t in self._tasks[start:start + width]])
            start += width
            width *= 2
        return rows
