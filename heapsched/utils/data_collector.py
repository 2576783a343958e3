"""
Data Collection Utilities

This module saves the results of a simulation run: the dispatch/arrival
event log and the completed tasks to CSV, and the run metrics and platform
information to JSON.
"""

import os
import logging
from datetime import datetime
from typing import Dict, List, Any, Optional

import pandas as pd

from heapsched.utils.json_utils import save_json
from heapsched.utils.platform_utils import get_platform_info, get_process_memory

logger = logging.getLogger(__name__)

EVENT_COLUMNS = ['type', 'sequence', 'name', 'priority', 'duration', 'time']
TASK_COLUMNS = ['name', 'priority', 'duration', 'arrival_time', 'start_time',
                'completion_time', 'waiting_time', 'turnaround_time']


def ensure_output_dir(base_path='results', experiment_id=None):
    """
    Ensure the output directory for one run exists

    Args:
        base_path: Base path for results directory
        experiment_id: Optional custom experiment ID (if None, timestamp is used)

    Returns:
        Tuple of (experiment id, directory path)
    """
    experiment_id = experiment_id or datetime.now().strftime('%Y%m%d_%H%M%S')
    data_dir = os.path.join(base_path, experiment_id)
    os.makedirs(data_dir, exist_ok=True)
    logger.info(f"Created output directory for experiment: {experiment_id}")
    return experiment_id, data_dir


def events_to_dataframe(events: List[Dict[str, Any]]) -> pd.DataFrame:
    """Event log as a DataFrame, one row per dispatch, arrival or rejection"""
    return pd.DataFrame(events, columns=EVENT_COLUMNS)


def tasks_to_dataframe(tasks) -> pd.DataFrame:
    """Completed tasks as a DataFrame in completion order"""
    return pd.DataFrame([task.to_dict() for task in tasks], columns=TASK_COLUMNS)


def summarise_by_priority(tasks_df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-priority summary of completed tasks

    Returns:
        DataFrame indexed by priority (highest first) with task count,
        mean waiting time and mean turnaround time
    """
    if tasks_df.empty:
        return pd.DataFrame(columns=['tasks', 'avg_waiting_time', 'avg_turnaround_time'])

    summary = tasks_df.groupby('priority').agg(
        tasks=('name', 'count'),
        avg_waiting_time=('waiting_time', 'mean'),
        avg_turnaround_time=('turnaround_time', 'mean'),
    )
    return summary.sort_index(ascending=False).round(3)


def save_run_results(scheduler, output_dir: str,
                     platform_info: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """
    Save the results of a finished simulation run

    Args:
        scheduler: PriorityScheduler after run()
        output_dir: Directory to write into (created if missing)
        platform_info: Platform details, gathered with psutil if None

    Returns:
        Dictionary mapping result kind to written file path
    """
    os.makedirs(output_dir, exist_ok=True)
    paths = {
        'events': os.path.join(output_dir, 'dispatch_log.csv'),
        'tasks': os.path.join(output_dir, 'tasks.csv'),
        'summary': os.path.join(output_dir, 'priority_summary.csv'),
        'metrics': os.path.join(output_dir, 'metrics.json'),
        'system_info': os.path.join(output_dir, 'system_info.json'),
    }

    events_to_dataframe(scheduler.events).to_csv(paths['events'], index=False)

    tasks_df = tasks_to_dataframe(scheduler.completed_tasks)
    tasks_df.to_csv(paths['tasks'], index=False)
    summarise_by_priority(tasks_df).to_csv(paths['summary'])

    metrics = scheduler.get_metrics()
    metrics['avg_waiting_by_priority'] = {
        str(priority): wait for priority, wait in metrics['avg_waiting_by_priority'].items()
    }
    save_json(metrics, paths['metrics'])

    if platform_info is None:
        platform_info = get_platform_info()
        platform_info['process_memory_mb'] = round(get_process_memory(), 2)
    save_json(platform_info, paths['system_info'])

    logger.info(f"Saved results of {metrics['completed_tasks']} tasks to {output_dir}")
    return paths
