"""
guard.auth.options

Abstract base class for guard auth provider options.
"""

import argparse
import base64
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from kubernetes import client

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# r-x for owner, group and other
SECRET_DEFAULT_MODE = 0o555


class AuthOptions(ABC):
    """Options of a single auth provider and their projection onto a Deployment."""

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Returns the provider name.

        Returns:
            str: Provider name (e.g., 'google', 'token-auth')
        """
        pass

    @property
    @abstractmethod
    def secret_name(self) -> str:
        """Name of the Secret (and pod volume) this provider generates."""
        pass

    @abstractmethod
    def add_flags(self, parser: argparse.ArgumentParser) -> None:
        """
        Registers the provider's command-line flags.

        Args:
            parser: Parser to add the flags to. Defaults are the current values.
        """
        pass

    @abstractmethod
    def load_args(self, args: argparse.Namespace) -> None:
        """Copies parsed flag values back onto the options."""
        pass

    @abstractmethod
    def validate(self) -> List[Exception]:
        """
        Validates the options.

        Returns:
            List[Exception]: Validation errors, empty when the options are valid
        """
        pass

    @abstractmethod
    def is_set(self) -> bool:
        """Returns True when the provider is configured and should be applied."""
        pass

    @abstractmethod
    def apply(self, deployment: client.V1Deployment) -> List[object]:
        """
        Injects the provider's credentials and flags into a Deployment.

        The first container of the pod template is patched in place. Volume
        mounts, volumes and args are only ever appended to.

        Args:
            deployment: Deployment to patch

        Returns:
            List[object]: Extra objects (e.g. Secrets) the caller must persist.
                          Empty when the provider is not set.

        Raises:
            ConfigurationError: If the Deployment has no container to patch
            OSError: If a credential file cannot be read
        """
        pass


def get_target_container(deployment: client.V1Deployment) -> client.V1Container:
    """Return the first container of the Deployment's pod template."""
    spec = deployment.spec
    template = spec.template if spec is not None else None
    pod_spec = template.spec if template is not None else None
    if pod_spec is None or not pod_spec.containers:
        name = deployment.metadata.name if deployment.metadata else None
        raise ConfigurationError(
            f"Deployment {name!r} has no containers in its pod template; "
            "cannot inject auth provider configuration"
        )
    return pod_spec.containers[0]


def read_credential_file(path: str) -> bytes:
    """Read a credential file as raw bytes. I/O errors propagate unchanged."""
    with open(path, "rb") as f:
        return f.read()


def build_secret(
    deployment: client.V1Deployment, name: str, data: Dict[str, bytes]
) -> client.V1Secret:
    """
    Build a Secret in the Deployment's namespace carrying its labels.

    Values are base64 encoded, which is how the Kubernetes client represents
    Secret data.
    """
    metadata = deployment.metadata
    namespace: Optional[str] = None
    labels: Optional[Dict[str, str]] = None
    if metadata is not None:
        namespace = metadata.namespace
        if metadata.labels is not None:
            labels = dict(metadata.labels)

    return client.V1Secret(
        api_version="v1",
        kind="Secret",
        metadata=client.V1ObjectMeta(name=name, namespace=namespace, labels=labels),
        data={
            key: base64.b64encode(value).decode("ascii") for key, value in data.items()
        },
    )


def mount_secret(
    deployment: client.V1Deployment,
    container: client.V1Container,
    secret: client.V1Secret,
    mount_path: str,
) -> None:
    """Append a volume backed by the Secret and mount it into the container."""
    secret_name = secret.metadata.name

    if container.volume_mounts is None:
        container.volume_mounts = []
    container.volume_mounts.append(
        client.V1VolumeMount(name=secret_name, mount_path=mount_path)
    )

    pod_spec = deployment.spec.template.spec
    if pod_spec.volumes is None:
        pod_spec.volumes = []
    pod_spec.volumes.append(
        client.V1Volume(
            name=secret_name,
            secret=client.V1SecretVolumeSource(
                secret_name=secret_name, default_mode=SECRET_DEFAULT_MODE
            ),
        )
    )
    logger.debug(
        "Mounted secret %s at %s in container %s",
        secret_name,
        mount_path,
        container.name,
    )


def append_args(container: client.V1Container, args: List[str]) -> None:
    """Append args after any the container already has."""
    if container.args is None:
        container.args = []
    container.args.extend(args)
