"""
guard.auth.google_provider

Google (G Suite) auth provider options.
"""

import argparse
import logging
import posixpath
from typing import List

from kubernetes import client

from .options import (
    AuthOptions,
    append_args,
    build_secret,
    get_target_container,
    mount_secret,
    read_credential_file,
)

logger = logging.getLogger(__name__)

GOOGLE_SECRET_NAME = "guard-google-auth"
GOOGLE_MOUNT_PATH = "/etc/guard/auth/google"
GOOGLE_SA_JSON_KEY = "sa.json"


class GoogleOptions(AuthOptions):
    """Google service account credentials for the guard server."""

    def __init__(self, sa_json_file: str = "", admin_email: str = ""):
        """
        Initialize Google options.

        Args:
            sa_json_file: Path to a Google service account json file
            admin_email: Email of the G Suite administrator
        """
        self.sa_json_file = sa_json_file
        self.admin_email = admin_email

    @property
    def name(self) -> str:
        return "google"

    @property
    def secret_name(self) -> str:
        return GOOGLE_SECRET_NAME

    def add_flags(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--google.sa-json-file",
            dest="google_sa_json_file",
            default=self.sa_json_file,
            help="Path to Google service account json file",
        )
        parser.add_argument(
            "--google.admin-email",
            dest="google_admin_email",
            default=self.admin_email,
            help="Email of G Suite administrator",
        )

    def load_args(self, args: argparse.Namespace) -> None:
        self.sa_json_file = args.google_sa_json_file
        self.admin_email = args.google_admin_email

    def validate(self) -> List[Exception]:
        return []

    def is_set(self) -> bool:
        return self.sa_json_file != ""

    def apply(self, deployment: client.V1Deployment) -> List[object]:
        if not self.is_set():
            logger.debug("Google auth provider not set, nothing to apply")
            return []

        container = get_target_container(deployment)

        # must happen before the deployment is patched
        sa = read_credential_file(self.sa_json_file)
        auth_secret = build_secret(
            deployment, GOOGLE_SECRET_NAME, {GOOGLE_SA_JSON_KEY: sa}
        )
        logger.info(
            "Generated secret %s from %s", GOOGLE_SECRET_NAME, self.sa_json_file
        )

        mount_secret(deployment, container, auth_secret, GOOGLE_MOUNT_PATH)

        args = [
            "--google.sa-json-file="
            + posixpath.join(GOOGLE_MOUNT_PATH, GOOGLE_SA_JSON_KEY)
        ]
        if self.admin_email:
            args.append(f"--google.admin-email={self.admin_email}")
        append_args(container, args)

        return [auth_secret]
