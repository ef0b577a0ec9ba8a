"""
Utility functions for the cluster controller
"""
from .labels import filter_labels, reserved_keys_in, selector_string

__all__ = [
    'filter_labels',
    'reserved_keys_in',
    'selector_string'
]
