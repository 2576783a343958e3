"""
Non-Preemptive Priority Scheduler

Simulates a single server that always dispatches the highest-priority task
and runs it to completion, one time unit at a time. On every time unit a new
random task may arrive and is inserted into the task queue.
"""

import logging
from enum import Enum

from heapsched.exceptions import CapacityExceeded, EmptyQueue


class SchedulerState(Enum):
    """Scheduler lifecycle states"""
    IDLE = "IDLE"
    DISPATCHING = "DISPATCHING"
    DRAINING = "DRAINING"


class PriorityScheduler:
    """
    Non-Preemptive Priority Scheduler

    Tasks are executed in priority order. A dispatched task is never
    preempted, even when a higher-priority task arrives during its service.
    """

    def __init__(self, generator=None):
        """
        Args:
            generator: RandomTaskGenerator for arrivals, None disables arrivals
        """
        self.generator = generator
        self.logger = logging.getLogger(__name__)
        self._reset()

    def _reset(self):
        self.state = SchedulerState.IDLE
        self.current_task = None
        self.completed_tasks = []
        self.events = []
        self.total_time = 0
        self.dispatch_count = 0
        self.metrics = {
            'queue_length': [],
            'timestamp': [],
            'random_arrivals': 0,
            'rejected_arrivals': 0,
        }

    def run(self, queue):
        """
        Drain the task queue

        Args:
            queue: TaskQueue holding the initial tasks

        Returns:
            Total elapsed time units
        """
        self._reset()
        self.logger.info(f"Started running with {queue.size()} queued tasks")

        while not queue.is_empty():
            self.metrics['queue_length'].append(queue.size())
            self.metrics['timestamp'].append(self.total_time)

            try:
                task = queue.extract_max()
            except EmptyQueue as e:
                self.logger.critical("Task queue reported tasks but extraction failed")
                raise RuntimeError("Task queue invariant violated during dispatch") from e

            self._dispatch(task)
            self._service(task, queue)

        if self.dispatch_count:
            self.state = SchedulerState.DRAINING
        self.logger.info(f"Task pool is now empty! Process took {self.total_time} time units")
        return self.total_time

    def _dispatch(self, task):
        self.state = SchedulerState.DISPATCHING
        self.current_task = task
        self.dispatch_count += 1
        task.start_time = self.total_time

        self.events.append({
            'type': 'dispatch',
            'sequence': self.dispatch_count,
            'name': task.name,
            'priority': task.priority,
            'duration': task.duration,
            'time': self.total_time,
        })
        self.logger.debug(f"Dispatch {self.dispatch_count}: {task.name} (priority {task.priority}, "
                          f"duration {task.duration}) at time {self.total_time}")

    def _service(self, task, queue):
        """Run the task one time unit at a time until it completes"""
        while not task.is_complete:
            if self.generator is not None and self.generator.arrival_check():
                self._accept_arrival(self.generator.next(), queue)
            task.run_for(1)
            self.total_time += 1

        task.completion_time = self.total_time
        self.completed_tasks.append(task)
        self.current_task = None

    def _accept_arrival(self, new_task, queue):
        new_task.arrival_time = self.total_time
        event = {
            'type': 'arrival',
            'sequence': self.dispatch_count,
            'name': new_task.name,
            'priority': new_task.priority,
            'duration': new_task.duration,
            'time': self.total_time,
        }

        try:
            queue.insert(new_task)
        except CapacityExceeded:
            event['type'] = 'rejected'
            self.metrics['rejected_arrivals'] += 1
            self.logger.warning(f"Random task {new_task.name} rejected: task queue is full "
                                f"({queue.capacity} tasks)")
        else:
            self.metrics['random_arrivals'] += 1
            self.logger.info(f"Detected random task {new_task.name} with priority "
                             f"{new_task.priority} duration {new_task.duration}")

        self.events.append(event)

    def get_metrics(self):
        """Get execution metrics"""
        waiting_times = [t.waiting_time for t in self.completed_tasks]
        turnaround_times = [t.turnaround_time for t in self.completed_tasks]

        waiting_by_priority = {}
        for task in self.completed_tasks:
            waiting_by_priority.setdefault(task.priority, []).append(task.waiting_time)

        queue_history = self.metrics['queue_length']

        return {
            'completed_tasks': len(self.completed_tasks),
            'total_time': self.total_time,
            'dispatch_count': self.dispatch_count,
            'random_arrivals': self.metrics['random_arrivals'],
            'rejected_arrivals': self.metrics['rejected_arrivals'],
            'avg_waiting_time': round(sum(waiting_times) / len(waiting_times), 3) if waiting_times else 0,
            'avg_turnaround_time': (round(sum(turnaround_times) / len(turnaround_times), 3)
                                    if turnaround_times else 0),
            'avg_waiting_by_priority': {
                priority: round(sum(times) / len(times), 3)
                for priority, times in sorted(waiting_by_priority.items(), reverse=True)
            },
            'queue_length_history': list(queue_history),
            'timestamp_history': list(self.metrics['timestamp']),
            'max_queue_length': max(queue_history) if queue_history else 0,
        }
