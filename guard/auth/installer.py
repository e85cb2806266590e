"""
guard.auth.installer

Applies several auth providers to the same guard Deployment.
"""

import argparse
import logging
from typing import Dict, List, Sequence

from kubernetes import client

from .options import AuthOptions
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def add_flags(parser: argparse.ArgumentParser, options: Sequence[AuthOptions]) -> None:
    """Register the flags of every provider on one parser."""
    for opts in options:
        opts.add_flags(parser)


def load_args(args: argparse.Namespace, options: Sequence[AuthOptions]) -> None:
    """Bind parsed flag values back onto every provider."""
    for opts in options:
        opts.load_args(args)


def validate_options(options: Sequence[AuthOptions]) -> List[Exception]:
    """
    Validate each provider, then check that active providers can be composed.

    Returns:
        List[Exception]: All validation errors, in provider order
    """
    errs: List[Exception] = []
    for opts in options:
        errs.extend(opts.validate())

    owners: Dict[str, str] = {}
    for opts in options:
        if not opts.is_set():
            continue
        owner = owners.get(opts.secret_name)
        if owner is not None:
            errs.append(
                ConfigurationError(
                    f"auth providers '{owner}' and '{opts.name}' both "
                    f"generate secret '{opts.secret_name}'"
                )
            )
        else:
            owners[opts.secret_name] = opts.name
    return errs


def apply_options(
    deployment: client.V1Deployment, options: Sequence[AuthOptions]
) -> List[object]:
    """
    Apply providers to the Deployment one after another.

    Returns:
        List[object]: Extra objects from all providers, in provider order

    Raises:
        ConfigurationError: If the Deployment has no container to patch
        OSError: If a provider's credential file cannot be read
    """
    extra_objs: List[object] = []
    for opts in options:
        objs = opts.apply(deployment)
        if objs:
            logger.info(
                "Auth provider %s contributed %d object(s)", opts.name, len(objs)
            )
        extra_objs.extend(objs)
    return extra_objs
