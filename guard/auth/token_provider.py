"""
guard.auth.token_provider

Static token file auth provider options.
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

TOKEN_AUTH_SECRET_NAME = "guard-token-auth"
TOKEN_AUTH_MOUNT_PATH = "/etc/guard/auth/token"
TOKEN_AUTH_FILE_KEY = "token.csv"


class TokenAuthOptions(AuthOptions):
    """CSV file of static bearer tokens accepted by the guard server."""

    def __init__(self, token_auth_file: str = ""):
        self.token_auth_file = token_auth_file

    @property
    def name(self) -> str:
        return "token-auth"

    @property
    def secret_name(self) -> str:
        return TOKEN_AUTH_SECRET_NAME

    def add_flags(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--token-auth-file",
            dest="token_auth_file",
            default=self.token_auth_file,
            help="Path to the token file",
        )

    def load_args(self, args: argparse.Namespace) -> None:
        self.token_auth_file = args.token_auth_file

    def validate(self) -> List[Exception]:
        return []

    def is_set(self) -> bool:
        return self.token_auth_file != ""

    def apply(self, deployment: client.V1Deployment) -> List[object]:
        if not self.is_set():
            logger.debug("Token auth provider not set, nothing to apply")
            return []

        container = get_target_container(deployment)

        tokens = read_credential_file(self.token_auth_file)
        auth_secret = build_secret(
            deployment, TOKEN_AUTH_SECRET_NAME, {TOKEN_AUTH_FILE_KEY: tokens}
        )
        logger.info(
            "Generated secret %s from %s", TOKEN_AUTH_SECRET_NAME, self.token_auth_file
        )

        mount_secret(deployment, container, auth_secret, TOKEN_AUTH_MOUNT_PATH)
        append_args(
            container,
            [
                "--token-auth-file="
                + posixpath.join(TOKEN_AUTH_MOUNT_PATH, TOKEN_AUTH_FILE_KEY)
            ],
        )

        return [auth_secret]
