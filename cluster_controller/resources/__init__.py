"""
Resource labelling for the cluster controller
"""
from .labels import (
    Labels,
    ReservedLabelError,
    STRIMZI_DOMAIN,
    STRIMZI_KIND_LABEL,
    STRIMZI_TYPE_LABEL,
    STRIMZI_CLUSTER_LABEL,
    STRIMZI_NAME_LABEL,
    STRIMZI_LABELS,
    cluster_label,
    type_label,
    name_label,
    kind_label
)
from .metadata import MissingMetadataError, resource_labels

__all__ = [
    'Labels',
    'ReservedLabelError',
    'MissingMetadataError',
    'STRIMZI_DOMAIN',
    'STRIMZI_KIND_LABEL',
    'STRIMZI_TYPE_LABEL',
    'STRIMZI_CLUSTER_LABEL',
    'STRIMZI_NAME_LABEL',
    'STRIMZI_LABELS',
    'cluster_label',
    'type_label',
    'name_label',
    'kind_label',
    'resource_labels'
]
