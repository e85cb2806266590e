"""Shared fixtures for guard.auth unit tests."""

import copy

import pytest
from kubernetes import client


def _build_guard_deployment(containers=None) -> client.V1Deployment:
    """Build a minimal guard Deployment with pre-existing mounts, volumes and args."""
    if containers is None:
        containers = [
            client.V1Container(
                name="guard",
                image="appscode/guard:latest",
                args=["run", "--v=3"],
                volume_mounts=[
                    client.V1VolumeMount(name="guard-pki", mount_path="/etc/guard/pki")
                ],
            )
        ]
    return client.V1Deployment(
        api_version="apps/v1",
        kind="Deployment",
        metadata=client.V1ObjectMeta(
            name="guard",
            namespace="kube-system",
            labels={"app": "guard"},
        ),
        spec=client.V1DeploymentSpec(
            selector=client.V1LabelSelector(match_labels={"app": "guard"}),
            template=client.V1PodTemplateSpec(
                metadata=client.V1ObjectMeta(labels={"app": "guard"}),
                spec=client.V1PodSpec(
                    containers=containers,
                    volumes=[
                        client.V1Volume(
                            name="guard-pki",
                            secret=client.V1SecretVolumeSource(
                                secret_name="guard-pki"
                            ),
                        )
                    ],
                ),
            ),
        ),
    )


@pytest.fixture
def deployment():
    """A guard Deployment with one container."""
    return _build_guard_deployment()


@pytest.fixture
def snapshot():
    """Returns a deep copy of a Deployment for before/after comparisons."""
    return copy.deepcopy


@pytest.fixture
def sa_json_file(tmp_path):
    """A Google service account json file."""
    path = tmp_path / "sa.json"
    path.write_bytes(b'{"type":"service_account"}')
    return path


@pytest.fixture
def token_file(tmp_path):
    """A static token CSV file."""
    path = tmp_path / "token.csv"
    path.write_bytes(b"token1,alice,1001,group1\n")
    return path


@pytest.fixture
def make_deployment():
    """Factory for guard Deployments with custom containers."""
    return _build_guard_deployment
