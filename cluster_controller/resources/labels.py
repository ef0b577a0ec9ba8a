"""
Labels - the immutable label set the controller puts on its resources
"""
import logging
from types import MappingProxyType

from kubernetes import client

from config import Config
from cluster_controller.resources.metadata import resource_labels
from cluster_controller.utils.labels import filter_labels, reserved_keys_in, selector_string

logger = logging.getLogger(__name__)

STRIMZI_DOMAIN = 'strimzi.io'
STRIMZI_KIND_LABEL = STRIMZI_DOMAIN + '/kind'
STRIMZI_TYPE_LABEL = STRIMZI_DOMAIN + '/type'
STRIMZI_CLUSTER_LABEL = STRIMZI_DOMAIN + '/cluster'
STRIMZI_NAME_LABEL = STRIMZI_DOMAIN + '/name'

STRIMZI_LABELS = frozenset([
    STRIMZI_KIND_LABEL,
    STRIMZI_TYPE_LABEL,
    STRIMZI_CLUSTER_LABEL,
    STRIMZI_NAME_LABEL
])


class ReservedLabelError(ValueError):
    """User supplied labels use a key owned by the controller"""

    def __init__(self, keys):
        self.keys = list(keys)
        super().__init__(f"User labels include reserved Strimzi labels: {', '.join(self.keys)}")


def cluster_label(resource):
    """Value of the ``strimzi.io/cluster`` label of ``resource``, or None"""
    return resource_labels(resource).get(STRIMZI_CLUSTER_LABEL)


def type_label(resource):
    """Value of the ``strimzi.io/type`` label of ``resource``, or None"""
    return resource_labels(resource).get(STRIMZI_TYPE_LABEL)


def name_label(resource):
    """Value of the ``strimzi.io/name`` label of ``resource``, or None"""
    return resource_labels(resource).get(STRIMZI_NAME_LABEL)


def kind_label(resource):
    """Value of the ``strimzi.io/kind`` label of ``resource``, or None"""
    return resource_labels(resource).get(STRIMZI_KIND_LABEL)


class Labels:
    """
    An immutable set of labels

    Every ``with_*``/``without_*`` call returns a new instance. Equality and
    hashing depend only on the label content, so instances can be shared
    between reconciliation threads and used as dict keys.
    """

    __slots__ = ('_labels',)

    EMPTY = None  # set below the class body

    def __init__(self, labels=None):
        if isinstance(labels, Labels):
            labels = labels._labels
        self._labels = MappingProxyType(dict(labels or {}))

    @classmethod
    def from_resource(cls, resource):
        """
        Labels of the given resource

        A copy is taken, so later changes to the resource are not seen. A
        resource without metadata or labels gives an empty set.
        """
        return cls(resource_labels(resource, required=False))

    @classmethod
    def from_user_labels(cls, labels, strict=None):
        """
        Labels supplied by the user, e.g. from the cluster configuration

        Args:
            labels: Dictionary of user labels (None is treated as empty)
            strict: Reject reserved keys. Defaults to Config.STRICT_USER_LABELS

        Returns:
            Labels with a copy of the user labels

        Raises:
            ReservedLabelError: If strict and a reserved key is present
        """
        if strict is None:
            strict = Config.STRICT_USER_LABELS

        collisions = reserved_keys_in(labels, STRIMZI_LABELS)
        if collisions:
            if strict:
                raise ReservedLabelError(collisions)
            logger.warning(f"⚠ User labels override reserved Strimzi labels: {', '.join(collisions)}")
        return cls(labels)

    @classmethod
    def for_cluster(cls, cluster):
        """A singleton set with ``strimzi.io/cluster`` = ``cluster``"""
        return cls({STRIMZI_CLUSTER_LABEL: cluster})

    @classmethod
    def for_type(cls, type_):
        """A singleton set with ``strimzi.io/type`` = ``type_``"""
        return cls({STRIMZI_TYPE_LABEL: type_})

    @classmethod
    def for_kind(cls, kind):
        """A singleton set with ``strimzi.io/kind`` = ``kind``"""
        return cls({STRIMZI_KIND_LABEL: kind})

    @classmethod
    def for_name(cls, name):
        """A singleton set with ``strimzi.io/name`` = ``name``"""
        return cls({STRIMZI_NAME_LABEL: name})

    def _with(self, label, value):
        labels = dict(self._labels)
        labels[label] = value
        return Labels(labels)

    def _without(self, label):
        if label not in self._labels:
            return self
        labels = dict(self._labels)
        del labels[label]
        return Labels(labels)

    def with_type(self, type_):
        """The same labels, but with ``type_`` for ``strimzi.io/type``"""
        return self._with(STRIMZI_TYPE_LABEL, type_)

    def without_type(self):
        """The same labels, but without any ``strimzi.io/type`` key"""
        return self._without(STRIMZI_TYPE_LABEL)

    def with_kind(self, kind):
        """The same labels, but with ``kind`` for ``strimzi.io/kind``"""
        return self._with(STRIMZI_KIND_LABEL, kind)

    def with_cluster(self, cluster):
        """The same labels, but with ``cluster`` for ``strimzi.io/cluster``"""
        return self._with(STRIMZI_CLUSTER_LABEL, cluster)

    def with_name(self, name):
        """The same labels, but with ``name`` for ``strimzi.io/name``"""
        return self._with(STRIMZI_NAME_LABEL, name)

    @property
    def type(self):
        return self._labels.get(STRIMZI_TYPE_LABEL)

    @property
    def kind(self):
        return self._labels.get(STRIMZI_KIND_LABEL)

    @property
    def cluster(self):
        return self._labels.get(STRIMZI_CLUSTER_LABEL)

    @property
    def name(self):
        return self._labels.get(STRIMZI_NAME_LABEL)

    def to_map(self):
        """A read-only view of the labels"""
        return self._labels

    def strimzi_labels(self):
        """Only the labels under the ``strimzi.io/`` prefix"""
        return Labels(filter_labels(self._labels, [STRIMZI_DOMAIN + '/'], keep=True))

    def user_labels(self):
        """The labels without any ``strimzi.io/`` key"""
        return Labels(filter_labels(self._labels, [STRIMZI_DOMAIN + '/']))

    def to_selector_string(self):
        """
        Selector string for the ``label_selector`` argument of list calls

        Usage:
            k8s_core_api.list_namespaced_pod(
                namespace, label_selector=Labels.for_cluster('my-cluster').to_selector_string())
        """
        return selector_string(self._labels)

    def to_label_selector(self):
        """The labels as a ``V1LabelSelector`` with ``match_labels``"""
        return client.V1LabelSelector(match_labels=dict(self._labels))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Labels):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self):
        return hash(frozenset(self._labels.items()))

    def __len__(self):
        return len(self._labels)

    def __contains__(self, key):
        return key in self._labels

    def __iter__(self):
        return iter(self._labels)

    def __reduce__(self):
        return (Labels, (dict(self._labels),))

    def __repr__(self):
        return f"Labels{dict(self._labels)}"


Labels.EMPTY = Labels()
