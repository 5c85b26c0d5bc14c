"""
AWS Session Builder

Architectural Intent:
- Builds the boto3 session every EC2 call goes through
- Credential discovery is left to botocore (env, shared config, metadata);
  this module only selects a profile, a region and the MFA token source
- Role assumption configured in the shared config asks the injected token
  provider for its one-time code instead of botocore's getpass prompt

Design Decisions:
- Construction failures raise SessionBuildError; terminating the process is
  the caller's decision
- Empty strings are treated as "not set" so CLI defaults pass through cleanly
- No network traffic happens here; credentials are resolved on first use
"""

import logging
from typing import Optional

import boto3
import botocore.session
from botocore.exceptions import BotoCoreError

from ec2target.domain.errors import SessionBuildError
from ec2target.domain.ports.token_provider_port import TokenProviderPort
from ec2target.infrastructure.adapters.token_providers import token_provider_for

logger = logging.getLogger(__name__)


def _install_token_provider(
    botocore_session: botocore.session.Session,
    token_provider: TokenProviderPort,
) -> None:
    resolver = botocore_session.get_component("credential_provider")
    assume_role = resolver.get_provider("assume-role")
    # botocore exposes no public hook for the MFA prompter.
    assume_role._prompter = token_provider


def build_session(
    region: Optional[str] = None,
    profile: Optional[str] = None,
    token_provider: Optional[TokenProviderPort] = None,
) -> boto3.session.Session:
    """Build a boto3 session bound to ``region`` and ``profile``.

    Args:
        region: Overrides the region implied by the profile or environment.
        profile: Named profile from the shared config/credentials files.
        token_provider: Supplies MFA codes when the profile assumes a role.

    Raises:
        SessionBuildError: The profile is unknown, the config is malformed,
            or botocore failed to set up its credential chain.
    """
    region = region or None
    profile = profile or None
    logger.debug("Starting AWS session (region=%s, profile=%s)", region, profile)

    try:
        botocore_session = botocore.session.Session(profile=profile)
        # Forces the shared config to be read so a bad profile fails here.
        botocore_session.get_scoped_config()
        if token_provider is not None:
            _install_token_provider(botocore_session, token_provider)
        session = boto3.session.Session(
            botocore_session=botocore_session,
            region_name=region,
        )
    except BotoCoreError as e:
        raise SessionBuildError(f"Unable to start AWS session: {e}") from e

    logger.info(
        "AWS session ready (region=%s, profile=%s)",
        session.region_name,
        session.profile_name,
    )
    return session


def start_session(
    region: Optional[str] = None,
    profile: Optional[str] = None,
    mfa_token: Optional[str] = None,
) -> boto3.session.Session:
    """Build a session, using ``mfa_token`` verbatim or prompting on stdin."""
    return build_session(
        region=region,
        profile=profile,
        token_provider=token_provider_for(mfa_token),
    )
