#!/usr/bin/env python3
"""
Heap Task Scheduler Simulation

Loads the initial tasks from a text file, then runs the non-preemptive
priority scheduler until the task pool is empty, printing every dispatch
and every random arrival.
"""

import argparse
import logging
import os
import sys

import matplotlib.pyplot as plt

from heapsched.config.params import ARRIVAL, SCHEDULER, SIMULATION, VISUALISATION
from heapsched.exceptions import CapacityExceeded, InvalidInput
from heapsched.loader import load_task_queue
from heapsched.schedulers import PriorityScheduler
from heapsched.task_generator import RandomTaskGenerator, make_rng
from heapsched.utils.data_collector import ensure_output_dir, save_run_results
from heapsched.utils.visualisation import (
    format_report, format_task_queue, plot_gantt_chart, plot_queue_length, plot_waiting_by_priority,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="Heap-based priority task scheduler simulation")
    parser.add_argument('--input', default=SIMULATION['input_file'],
                        help=f"Task file, one '<name> <priority> <duration>' per line "
                             f"(default: {SIMULATION['input_file']})")
    parser.add_argument('--seed', type=int, default=SIMULATION['seed'],
                        help='Random seed (default: seeded from OS entropy)')
    parser.add_argument('--capacity', type=int, default=SCHEDULER['max_tasks'],
                        help=f"Task queue capacity (default: {SCHEDULER['max_tasks']})")
    parser.add_argument('--grow', action='store_true', default=SCHEDULER['grow_on_overflow'],
                        help='Let the task queue grow without a capacity limit')
    parser.add_argument('--arrival-mode', choices=['sentinel', 'bernoulli'], default=ARRIVAL['mode'],
                        help='sentinel: arrive on one value of [0, 100] (1/101); '
                             'bernoulli: arrive with --arrival-probability')
    parser.add_argument('--arrival-probability', type=float, default=ARRIVAL['probability'],
                        help=f"Per time unit arrival probability in bernoulli mode "
                             f"(default: {ARRIVAL['probability']})")
    parser.add_argument('--no-arrivals', action='store_true', help='Disable random task arrivals')
    parser.add_argument('--show-heap', action='store_true', help='Print the loaded heap level by level')
    parser.add_argument('--export', metavar='DIR', default=None,
                        help='Save the event log, tasks and metrics under DIR')
    parser.add_argument('--generate-plots', action='store_true', default=False,
                        help='Save timeline and queue length charts (default: False)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    return parser


def build_generator(args, rng):
    """Random task generator configured from command line arguments"""
    if args.no_arrivals:
        return None
    return RandomTaskGenerator(rng, {
        'mode': args.arrival_mode,
        'probability': args.arrival_probability,
    })


def save_plots(scheduler, output_dir):
    """Save the charts of a finished run into output_dir"""
    metrics = scheduler.get_metrics()
    figures = {
        'gantt.png': plot_gantt_chart(scheduler.completed_tasks),
        'queue_length.png': plot_queue_length(metrics['timestamp_history'], metrics['queue_length_history']),
        'waiting_by_priority.png': plot_waiting_by_priority(scheduler.completed_tasks),
    }
    for filename, fig in figures.items():
        fig.savefig(os.path.join(output_dir, filename))
        plt.close(fig)
    logger.info(f"Saved {len(figures)} plots to {output_dir}")


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    capacity = None if args.grow else args.capacity

    if not os.path.exists(args.input):
        logger.error(f"Failed opening task file: {args.input}")
        return 1

    try:
        queue = load_task_queue(args.input, capacity=capacity)
    except InvalidInput as e:
        logger.error(f"Invalid task file: {e}")
        return 1
    except CapacityExceeded as e:
        logger.error(f"Too many tasks in {args.input}: {e}")
        return 1

    if args.show_heap:
        print(format_task_queue(queue))

    rng = make_rng(args.seed)
    try:
        generator = build_generator(args, rng)
    except ValueError as e:
        logger.error(f"Invalid arrival configuration: {e}")
        return 1

    scheduler = PriorityScheduler(generator)
    scheduler.run(queue)
    print(format_report(scheduler))

    if args.export or args.generate_plots:
        if args.export:
            output_dir = args.export
        else:
            _, output_dir = ensure_output_dir(VISUALISATION['save_path'])
        save_run_results(scheduler, output_dir)
        if args.generate_plots:
            save_plots(scheduler, output_dir)

    return 0


if __name__ == "__main__":
    sys.exit(main())
