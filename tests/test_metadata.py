"""Tests for reading labels out of resource metadata."""

import pytest
from kubernetes import client

from cluster_controller.resources import (
    MissingMetadataError,
    cluster_label,
    kind_label,
    name_label,
    resource_labels,
    type_label,
)
from cluster_controller.resources.metadata import resource_name


def test_single_key_accessors_on_model(pod):
    assert cluster_label(pod) == 'my-cluster'
    assert type_label(pod) == 'kafka'
    assert kind_label(pod) == 'cluster'
    assert name_label(pod) == 'my-cluster-kafka'


def test_single_key_accessors_on_custom_object(custom_object):
    assert cluster_label(custom_object) == 'my-cluster'
    assert kind_label(custom_object) == 'cluster'


def test_missing_key_is_none(custom_object):
    assert type_label(custom_object) is None
    assert name_label(custom_object) is None


def test_empty_labels_are_not_missing_metadata():
    pod = client.V1Pod(metadata=client.V1ObjectMeta(name='p', labels={}))

    assert cluster_label(pod) is None


@pytest.mark.parametrize('accessor', [cluster_label, type_label, name_label, kind_label])
def test_accessor_without_labels_fails(accessor):
    pod = client.V1Pod(kind='Pod', metadata=client.V1ObjectMeta(name='p', namespace='kafka'))

    with pytest.raises(MissingMetadataError) as excinfo:
        accessor(pod)

    assert excinfo.value.resource_name == 'Pod kafka/p'
    assert excinfo.value.missing == 'labels'


def test_accessor_without_metadata_fails():
    with pytest.raises(MissingMetadataError) as excinfo:
        cluster_label({'kind': 'Kafka'})

    assert excinfo.value.missing == 'section'


def test_accessor_on_none_fails():
    with pytest.raises(MissingMetadataError) as excinfo:
        kind_label(None)

    assert excinfo.value.missing == 'resource'


def test_missing_metadata_is_lookup_error():
    with pytest.raises(LookupError):
        type_label(client.V1Pod())


def test_resource_labels_returns_own_mapping(pod):
    assert resource_labels(pod) is pod.metadata.labels


def test_resource_labels_optional():
    assert resource_labels(None, required=False) == {}
    assert resource_labels(client.V1Pod(), required=False) == {}
    assert resource_labels({'metadata': {}}, required=False) == {}


def test_mixed_shapes():
    # Model object holding dict metadata, as after a partial deserialization
    resource = client.V1Pod(metadata=None)
    resource.metadata = {'name': 'p', 'labels': {'strimzi.io/cluster': 'c'}}

    assert cluster_label(resource) == 'c'


def test_resource_name(pod, custom_object):
    assert resource_name(pod) == 'Pod kafka/my-cluster-kafka-0'
    assert resource_name(custom_object) == 'Kafka kafka/my-cluster'
    assert resource_name({'metadata': {'name': 'x'}}) == 'x'
    assert resource_name({}) == '<unnamed>'
