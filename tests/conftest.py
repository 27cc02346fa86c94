"""Shared fixtures: a representative v1alpha1 RisingWave manifest."""

from __future__ import annotations

import copy
from typing import Any

import pytest

_MANIFEST: dict[str, Any] = {
    "apiVersion": "risingwave.risingwavelabs.com/v1alpha1",
    "kind": "RisingWave",
    "metadata": {
        "name": "example",
        "namespace": "default",
        "labels": {"app": "risingwave"},
    },
    "spec": {
        "enableOpenKruise": True,
        "enableDefaultServiceMonitor": False,
        "global": {
            "image": "risingwavelabs/risingwave:v1.0.0",
            "imagePullPolicy": "IfNotPresent",
            "imagePullSecrets": ["registry"],
            "replicas": {"meta": 1, "frontend": 2, "compute": 2, "compactor": 1},
            "serviceType": "NodePort",
            "serviceMeta": {"labels": {"svc": "fe"}, "annotations": {"a": "b"}},
        },
        "storages": {
            "meta": {"etcd": {"endpoint": "etcd:2388", "secret": "etcd-auth"}},
            "object": {
                "s3": {
                    "secret": "s3-auth",
                    "bucket": "hummock",
                    "region": "us-west-2",
                    "endpoint": "https://s3.example.com",
                    "virtualHostedStyle": True,
                }
            },
            "pvcTemplates": [
                {
                    "metadata": {"name": "data", "labels": {"tier": "ssd"}},
                    "spec": {"accessModes": ["ReadWriteOnce"]},
                }
            ],
        },
        "configuration": {
            "configmap": {"name": "rw-config", "key": "risingwave.toml"}
        },
        "components": {
            "meta": {
                "restartAt": "2023-05-01T10:00:00Z",
                "groups": [{"name": "m1", "replicas": 3}],
            },
            "frontend": {"groups": []},
            "compute": {
                "groups": [
                    {
                        "name": "c1",
                        "replicas": 3,
                        "upgradeStrategy": {
                            "type": "RollingUpdate",
                            "rollingUpdate": {"maxUnavailable": "25%"},
                        },
                        "image": "risingwavelabs/risingwave:v1.0.1",
                        "volumeMounts": [{"name": "data", "mountPath": "/data"}],
                    },
                    {"name": "c2", "replicas": 5},
                ]
            },
            "compactor": {},
        },
    },
    "status": {
        "observedGeneration": 4,
        "version": "v1.0.0",
        "conditions": [
            {
                "type": "Running",
                "status": "True",
                "lastTransitionTime": "2023-05-01T10:05:00Z",
                "reason": "AllRunning",
                "message": "all components are running",
            }
        ],
        "storages": {"meta": {"type": "Etcd"}, "object": {"type": "S3"}},
        "componentReplicas": {
            "compute": {
                "target": 5,
                "running": 3,
                "groups": [
                    {"name": "c1", "target": 3, "running": 2, "exists": True},
                    {"name": "c2", "target": 2, "running": 1, "exists": True},
                ],
            }
        },
        "scaleViews": [
            {
                "name": "sv",
                "uid": "8d1f",
                "generation": 2,
                "component": "compute",
                "groupLocks": [
                    {"name": "c1", "replicas": 3},
                    {"name": "c2", "replicas": 5},
                ],
            }
        ],
    },
}


@pytest.fixture
def v1alpha1_manifest() -> dict[str, Any]:
    """A fresh copy of a complete v1alpha1 manifest."""
    return copy.deepcopy(_MANIFEST)
