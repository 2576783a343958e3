"""
Task Generator Module

This module defines the Task record and the generator that produces random
tasks arriving while another task is being serviced.
"""

import logging

import numpy as np

from heapsched.config.params import TASK, ARRIVAL
from heapsched.exceptions import InvalidInput

logger = logging.getLogger(__name__)


def _is_integer(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Task:
    """Task class representing a unit of work with a priority and a duration"""

    def __init__(self, name, priority, duration, arrival_time=0):
        """
        Initialise task with validation

        Args:
            name: Short textual identifier for the task
            priority: Integer priority, higher values are more urgent
            duration: Number of time units the task needs
            arrival_time: Simulated time unit at which the task entered the queue
        """
        if not isinstance(name, str) or not name or any(c.isspace() for c in name):
            raise InvalidInput(f"Invalid task name: {name!r}")

        max_length = TASK['max_name_length']
        if len(name) > max_length:
            raise InvalidInput(
                f"Task name {name!r} is longer than {max_length} characters"
            )

        if not _is_integer(priority):
            raise InvalidInput(f"Priority for Task {name} must be an integer, got {priority!r}")
        if not _is_integer(duration):
            raise InvalidInput(f"Duration for Task {name} must be an integer, got {duration!r}")

        self.name = name
        self.priority = int(priority)
        self.duration = int(duration)

        # Remaining duration must never be negative
        if self.duration < 0:
            logger.warning(f"Negative duration for Task {name}: {duration}. Treating as 0.")
            self.remaining_duration = 0
        else:
            self.remaining_duration = self.duration

        self.arrival_time = arrival_time
        self.start_time = None
        self.completion_time = None

    @classmethod
    def create(cls, name, priority, duration):
        """Create a new task from the given parameters"""
        return cls(name, priority, duration)

    def __str__(self):
        return f"{self.name}  {self.priority}  {self.duration}"

    def __repr__(self):
        return (f"Task(name={self.name!r}, priority={self.priority}, "
                f"duration={self.duration}, remaining={self.remaining_duration})")

    @property
    def is_complete(self):
        return self.remaining_duration == 0

    def run_for(self, units=1):
        """
        Service the task for a number of time units

        Args:
            units: Time units to consume

        Returns:
            Number of units actually consumed (never more than remaining)
        """
        consumed = min(units, self.remaining_duration)
        self.remaining_duration -= consumed
        return consumed

    @property
    def waiting_time(self):
        """Time between arrival and dispatch, None until dispatched"""
        if self.start_time is None:
            return None
        return self.start_time - self.arrival_time

    @property
    def turnaround_time(self):
        """Time between arrival and completion, None until completed"""
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time

    def to_dict(self):
        """Convert task to dictionary for serialisation"""
        return {
            'name': self.name,
            'priority': self.priority,
            'duration': self.duration,
            'remaining_duration': self.remaining_duration,
            'arrival_time': self.arrival_time,
            'start_time': self.start_time,
            'completion_time': self.completion_time,
            'waiting_time': self.waiting_time,
            'turnaround_time': self.turnaround_time,
        }


def make_rng(seed=None):
    """
    Create the random source shared by one simulation run

    Args:
        seed: Integer seed, or None to seed from OS entropy

    Returns:
        numpy.random.Generator
    """
    return np.random.default_rng(seed)


class RandomTaskGenerator:
    """Generates random tasks and decides, per time unit, whether one arrives"""

    def __init__(self, rng, config=None):
        """
        Initialise the generator

        Args:
            rng: numpy.random.Generator used for every draw
            config: Dictionary of arrival parameters (defaults to ARRIVAL)
        """
        self.rng = rng
        self.config = dict(ARRIVAL)
        if config:
            self.config.update(config)
        self._validate_config()

    def _validate_config(self):
        """Validate arrival configuration"""
        for low, high in (('priority_min', 'priority_max'),
                          ('duration_min', 'duration_max'),
                          ('name_min', 'name_max')):
            if self.config[low] > self.config[high]:
                raise ValueError(
                    f"Invalid range: {low}={self.config[low]} > {high}={self.config[high]}"
                )

        if self.config['mode'] not in ('sentinel', 'bernoulli'):
            raise ValueError(f"Unknown arrival mode: {self.config['mode']!r}")

        # An arrival on every unit keeps the queue from ever emptying
        probability = self.config['probability']
        if not 0 <= probability < 1:
            raise ValueError(f"Arrival probability must be within [0, 1), got {probability}")

        upper = self.config['check_upper']
        if upper < 0:
            raise ValueError(f"check_upper must be non-negative, got {upper}")
        if upper == 0 and self.config['check_value'] == 0:
            raise ValueError("Sentinel check over [0, 0] with value 0 arrives on every unit")

    def _draw(self, lower, upper):
        """Uniform integer in the closed range [lower, upper]"""
        return int(self.rng.integers(lower, upper, endpoint=True))

    def next(self):
        """
        Generate a random task

        Returns:
            A new Task with random priority, duration and name
        """
        cfg = self.config
        priority = self._draw(cfg['priority_min'], cfg['priority_max'])
        duration = self._draw(cfg['duration_min'], cfg['duration_max'])
        name = f"{cfg['name_prefix']}{self._draw(cfg['name_min'], cfg['name_max'])}"

        task = Task(name, priority, duration)
        logger.debug(f"Generated random task {name}: priority={priority}, duration={duration}")
        return task

    def arrival_check(self, probability_numerator=None, probability_denominator=None):
        """
        Decide whether a new task arrives during the current time unit

        In 'sentinel' mode one integer is drawn from [0, probability_denominator]
        and a task arrives when it equals probability_numerator, so the chance
        per check is 1 / (probability_denominator + 1). In 'bernoulli' mode a
        task arrives with the configured probability.

        Args:
            probability_numerator: Sentinel value (defaults to config 'check_value')
            probability_denominator: Upper bound of the draw (defaults to config 'check_upper')

        Returns:
            True if a task arrives
        """
        if not self.config['enabled']:
            return False

        if self.config['mode'] == 'bernoulli':
            return bool(self.rng.random() < self.config['probability'])

        if probability_numerator is None:
            probability_numerator = self.config['check_value']
        if probability_denominator is None:
            probability_denominator = self.config['check_upper']

        return self._draw(0, probability_denominator) == probability_numerator
