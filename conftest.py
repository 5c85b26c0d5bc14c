"""Global test configuration.

Isolates every test from the developer's real AWS configuration: shared
config/credentials files point at empty temp files and AWS_* variables that
would change profile or region resolution are removed.
"""

import logging
import os

import pytest

_AWS_ENV_VARS = (
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_ROLE_ARN",
    "AWS_WEB_IDENTITY_TOKEN_FILE",
)


@pytest.fixture(autouse=True)
def isolated_aws_env(tmp_path, monkeypatch):
    for name in _AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for key in list(os.environ):
        if key.startswith("EC2TARGET_"):
            monkeypatch.delenv(key, raising=False)

    config_file = tmp_path / "aws_config"
    credentials_file = tmp_path / "aws_credentials"
    config_file.write_text("")
    credentials_file.write_text("")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(config_file))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(credentials_file))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    return config_file, credentials_file


@pytest.fixture(autouse=True)
def reset_ec2target_logger():
    """Drop handlers installed by configure_logging during a test."""
    yield
    logger = logging.getLogger("ec2target")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
