"""
Configuration Parameters

Defines parameters for task creation, random arrivals and scheduling.
"""

# Task Parameters
TASK = {
    'max_name_length': 3,  # Fits the generated names W1..W10
}

# Scheduler Parameters
SCHEDULER = {
    'max_tasks': 20,            # Fixed heap capacity
    'grow_on_overflow': False,  # True = unbounded heap, capacity is ignored
}

# Random Arrival Parameters
ARRIVAL = {
    'enabled': True,
    'priority_min': 0,
    'priority_max': 10,
    'duration_min': 0,
    'duration_max': 50,
    'name_prefix': 'W',
    'name_min': 1,
    'name_max': 10,
    # 'sentinel': draw an integer in [0, check_upper] and arrive on check_value (1/101)
    # 'bernoulli': arrive when a uniform float falls below probability
    'mode': 'sentinel',
    'check_value': 2,
    'check_upper': 100,
    'probability': 0.02,
}

# Simulation Parameters
SIMULATION = {
    'input_file': 'tasks.txt',
    'seed': None,  # None = seeded from OS entropy on every run
}

# Visualisation Parameters
VISUALISATION = {
    'colors': {
        'HIGH': '#FF5252',    # Red, priority >= 7
        'MEDIUM': '#FFD740',  # Amber, priority 4..6
        'LOW': '#69F0AE',     # Green, priority <= 3
        'QUEUE': '#2196F3',   # Blue
    },
    'high_threshold': 7,
    'medium_threshold': 4,
    'save_path': 'results/',
}
