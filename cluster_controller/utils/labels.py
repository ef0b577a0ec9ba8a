"""
Label mapping utilities
"""


def filter_labels(labels, prefixes, keep=False):
    """
    Filter labels by key prefix

    Args:
        labels: Dictionary of labels
        prefixes: Iterable of key prefixes
        keep: If True, keep only the matching labels. If False, drop them

    Returns:
        New dictionary with the filtered labels
    """
    if not labels:
        return {}

    prefixes = tuple(prefixes)
    return {
        k: v for k, v in labels.items()
        if k.startswith(prefixes) == keep
    }


def reserved_keys_in(labels, reserved):
    """
    Find the keys of a label dictionary that are reserved

    Args:
        labels: Dictionary of labels
        reserved: Set of reserved keys

    Returns:
        Sorted list of colliding keys (empty if none)
    """
    if not labels:
        return []
    return sorted(k for k in labels if k in reserved)


def selector_string(labels):
    """Build a `k=v,k2=v2` label selector, sorted by key"""
    if not labels:
        return ''
    return ','.join(f"{k}={v}" for k, v in sorted(labels.items()))
