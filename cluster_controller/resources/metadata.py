"""
Resource metadata access

Resources reach the controller in two shapes: Kubernetes client models
(``V1Pod``, ``V1StatefulSet``, ...) with attribute access, and the plain
dicts returned by ``CustomObjectsApi``. Both are read the same way here.
"""
import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)


class MissingMetadataError(LookupError):
    """A resource has no metadata label mapping at all"""

    def __init__(self, resource_name, missing='labels'):
        self.resource_name = resource_name
        self.missing = missing
        if missing == 'resource':
            message = "No resource given, expected one with metadata labels"
        else:
            message = f"Resource {resource_name} has no metadata {missing}"
        super().__init__(message)


def _field(obj, name):
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def resource_name(resource):
    """Best-effort ``namespace/name`` of a resource, for messages"""
    metadata = _field(resource, 'metadata')
    name = _field(metadata, 'name') or '<unnamed>'
    namespace = _field(metadata, 'namespace')
    kind = _field(resource, 'kind')
    qualified = f"{namespace}/{name}" if namespace else name
    return f"{kind} {qualified}" if kind else qualified


def resource_labels(resource, required=True):
    """
    Get the label mapping of a resource

    Args:
        resource: Kubernetes model object or dict-shaped custom object
        required: If True, raise when the resource carries no label mapping.
            If False, return an empty dict instead

    Returns:
        The resource's own label mapping (not a copy)

    Raises:
        MissingMetadataError: If required and the metadata or labels are absent
    """
    if resource is None:
        if required:
            raise MissingMetadataError('<none>', missing='resource')
        return {}

    metadata = _field(resource, 'metadata')
    if metadata is None:
        if required:
            logger.debug(f"✗ No metadata on {resource_name(resource)}")
            raise MissingMetadataError(resource_name(resource), missing='section')
        return {}

    labels = _field(metadata, 'labels')
    if labels is None:
        if required:
            logger.debug(f"✗ No labels on {resource_name(resource)}")
            raise MissingMetadataError(resource_name(resource))
        return {}

    return labels
