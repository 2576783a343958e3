"""
JSON Utilities

This module provides utilities for JSON serialisation, including a custom
JSON encoder that can handle NumPy data types and Task objects.
"""

import json
import numpy as np
from typing import Any


class NumpyJSONEncoder(json.JSONEncoder):
    """
    Custom JSON encoder that handles NumPy types.

    Converts NumPy scalars and arrays to their standard Python equivalents,
    and objects exposing to_dict() (such as Task) to dictionaries.

    Example usage:
        data = {'array': np.array([1, 2, 3]), 'bool': np.bool_(True)}
        json_str = json.dumps(data, cls=NumpyJSONEncoder)
    """
    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, np.bool_):
            return bool(obj)
        elif hasattr(obj, 'to_dict'):
            return obj.to_dict()
        return super().default(obj)


def save_json(data: Any, filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file with NumPy type handling

    Args:
        data: Data to save
        filepath: Path to the output file
        pretty: Whether to format with indentation (default: True)
    """
    indent = 4 if pretty else None
    with open(filepath, 'w') as f:
        json.dump(data, f, indent=indent, cls=NumpyJSONEncoder)


def load_json(filepath: str) -> Any:
    """Load data from a JSON file"""
    with open(filepath, 'r') as f:
        return json.load(f)
