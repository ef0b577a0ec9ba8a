"""
Cluster Controller - labels used to tag and select managed resources
"""
from cluster_controller.resources import (
    Labels,
    ReservedLabelError,
    MissingMetadataError
)

__all__ = [
    'Labels',
    'ReservedLabelError',
    'MissingMetadataError'
]
