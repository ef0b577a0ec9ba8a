import pytest
from kubernetes import client

from cluster_controller.resources import labels as labels_module


@pytest.fixture
def pod():
    return client.V1Pod(
        api_version='v1',
        kind='Pod',
        metadata=client.V1ObjectMeta(
            name='my-cluster-kafka-0',
            namespace='kafka',
            labels={
                'app': 'kafka',
                'strimzi.io/cluster': 'my-cluster',
                'strimzi.io/type': 'kafka',
                'strimzi.io/kind': 'cluster',
                'strimzi.io/name': 'my-cluster-kafka'
            }
        )
    )


@pytest.fixture
def custom_object():
    # Shape returned by CustomObjectsApi
    return {
        'apiVersion': 'kafka.strimzi.io/v1alpha1',
        'kind': 'Kafka',
        'metadata': {
            'name': 'my-cluster',
            'namespace': 'kafka',
            'labels': {
                'strimzi.io/cluster': 'my-cluster',
                'strimzi.io/kind': 'cluster'
            }
        },
        'spec': {}
    }


@pytest.fixture
def strict_labels(monkeypatch):
    monkeypatch.setattr(labels_module.Config, 'STRICT_USER_LABELS', True)


@pytest.fixture
def permissive_labels(monkeypatch):
    monkeypatch.setattr(labels_module.Config, 'STRICT_USER_LABELS', False)
