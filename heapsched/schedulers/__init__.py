# Import the task queue and scheduler for easier access
from .priority_queue import TaskQueue
from .priority_based import PriorityScheduler, SchedulerState
