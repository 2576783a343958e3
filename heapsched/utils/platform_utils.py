"""
Platform Utilities

Gathers information about the machine a simulation ran on, stored alongside
exported results.
"""

import platform
import psutil
from typing import Dict, Any


def get_platform_info() -> Dict[str, Any]:
    """
    Get information about the current platform

    Returns:
        Dictionary containing system information including:
        - system: Operating system name
        - node: Network hostname
        - release: Operating system release
        - machine: Hardware architecture
        - python_version: Interpreter version
        - cpu_count: Number of physical CPUs
        - cpu_count_logical: Number of logical CPUs
        - memory_total: Total physical memory in bytes
        - memory_available: Available physical memory in bytes
    """
    memory = psutil.virtual_memory()
    return {
        'system': platform.system(),
        'node': platform.node(),
        'release': platform.release(),
        'machine': platform.machine(),
        'python_version': platform.python_version(),
        'cpu_count': psutil.cpu_count(logical=False),
        'cpu_count_logical': psutil.cpu_count(logical=True),
        'memory_total': memory.total,
        'memory_available': memory.available,
    }


def get_process_memory() -> float:
    """Resident memory of the current process in MB"""
    return psutil.Process().memory_info().rss / (1024 * 1024)
