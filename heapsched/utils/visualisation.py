"""
Visualisation Utilities

Text rendering of the task queue and the run report, plus
matplotlib/seaborn charts of a finished simulation run.
"""

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from heapsched.config.params import VISUALISATION


def format_task_queue(queue):
    """
    Render the heap level by level, one line of priorities per level

    Args:
        queue: TaskQueue to render

    Returns:
        Multi-line string
    """
    lines = [f"Printing a task queue with {queue.size()} tasks!"]
    for row in queue.levels():
        lines.append(' '.join(str(priority) for priority in row))
    return '\n'.join(lines)


def format_event(event):
    """Single line for a dispatch, arrival or rejected arrival event"""
    if event['type'] == 'dispatch':
        return (f"{event['sequence']} {event['name']}  {event['priority']}  "
                f"{event['duration']} {event['time']}")
    if event['type'] == 'arrival':
        return (f"Detected random task! ({event['name']} with priority {event['priority']} "
                f"duration {event['duration']})")
    if event['type'] == 'rejected':
        return (f"Rejected random task! ({event['name']} with priority {event['priority']} "
                f"duration {event['duration']}): task queue is full")
    raise ValueError(f"Unknown event type: {event['type']!r}")


def format_report(scheduler):
    """Full run report in event order, ending with the total elapsed time"""
    lines = ["Started running!"]
    lines.extend(format_event(event) for event in scheduler.events)
    lines.append(f"Task pool is now empty! Process took {scheduler.total_time} time units")
    return '\n'.join(lines)


def priority_band(priority):
    """Map a numeric priority to the HIGH / MEDIUM / LOW colour band"""
    if priority >= VISUALISATION['high_threshold']:
        return 'HIGH'
    if priority >= VISUALISATION['medium_threshold']:
        return 'MEDIUM'
    return 'LOW'


def plot_gantt_chart(completed_tasks, title="Priority Scheduler"):
    """
    Timeline of task service, one bar per dispatched task

    Returns:
        matplotlib Figure
    """
    fig, ax = plt.subplots(figsize=(12, 6))
    colors = VISUALISATION['colors']

    tasks = [t for t in completed_tasks if t.start_time is not None and t.completion_time is not None]
    for i, task in enumerate(tasks):
        width = task.completion_time - task.start_time
        ax.barh(i, width, left=task.start_time, height=0.8,
                color=colors[priority_band(task.priority)])
        if width > 0:
            ax.text(task.start_time + width / 2, i, task.name,
                    ha='center', va='center', fontsize=8, color='black')

    legend_handles = [plt.Rectangle((0, 0), 1, 1, color=colors[band], label=band)
                      for band in ('HIGH', 'MEDIUM', 'LOW')]
    ax.set_xlabel('Time (units)')
    ax.set_ylabel('Tasks (dispatch order)')
    ax.set_yticks([])
    ax.set_title(f'Gantt Chart - {title}')
    ax.legend(handles=legend_handles, title="Priority")
    fig.tight_layout()
    return fig


def plot_queue_length(timestamps, queue_lengths):
    """Queue length sampled at each dispatch"""
    fig, ax = plt.subplots(figsize=(10, 5))
    if timestamps and queue_lengths:
        ax.step(timestamps, queue_lengths, where='post', color=VISUALISATION['colors']['QUEUE'])
    ax.set_xlabel('Time (units)')
    ax.set_ylabel('Queue Length')
    ax.set_title('Queue Length Over Time')
    ax.grid(True)
    fig.tight_layout()
    return fig


def plot_waiting_by_priority(completed_tasks):
    """Mean waiting time per priority value"""
    fig, ax = plt.subplots(figsize=(10, 5))
    df = pd.DataFrame({
        'priority': [t.priority for t in completed_tasks],
        'waiting_time': [t.waiting_time for t in completed_tasks],
    })
    if not df.empty:
        sns.barplot(data=df, x='priority', y='waiting_time', ax=ax, color=VISUALISATION['colors']['QUEUE'])
    ax.set_xlabel('Priority')
    ax.set_ylabel('Average Waiting Time (units)')
    ax.set_title('Average Waiting Time by Priority')
    ax.grid(True, axis='y')
    fig.tight_layout()
    return fig
