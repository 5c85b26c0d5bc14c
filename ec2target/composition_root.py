"""
Composition Root

Architectural Intent:
- Dependency injection composition root for ec2target
- Single place where the session, EC2 adapter and use case are wired together
- No adapter instantiation should occur outside this module (except tests)

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Explicit arguments win over configuration values
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import boto3

from ec2target.application.use_cases.resolve_instance import ResolveInstance
from ec2target.domain.value_objects.target_spec import TargetType
from ec2target.infrastructure.adapters.aws_session import start_session
from ec2target.infrastructure.adapters.ec2_adapter import EC2InstanceQuery
from ec2target.infrastructure.config import Ec2TargetConfig


@dataclass
class Ec2TargetContainer:
    """DI container holding all wired dependencies."""

    session: boto3.session.Session
    instance_query: EC2InstanceQuery
    resolve_instance: ResolveInstance


def create_container(
    config: Optional[Ec2TargetConfig] = None,
    region: Optional[str] = None,
    profile: Optional[str] = None,
    mfa_token: Optional[str] = None,
) -> Ec2TargetContainer:
    """Create and wire all dependencies.

    Raises:
        SessionBuildError: The AWS session could not be built.
    """
    config = config or Ec2TargetConfig()
    session = start_session(
        region=region or config.aws.region,
        profile=profile or config.aws.profile,
        mfa_token=mfa_token,
    )
    instance_query = EC2InstanceQuery(session, page_size=config.resolver.page_size)
    resolve = ResolveInstance(instance_query)

    return Ec2TargetContainer(
        session=session,
        instance_query=instance_query,
        resolve_instance=resolve,
    )


def resolve_instance(
    session: boto3.session.Session,
    target_type: str | TargetType,
    target: Optional[str],
    logger: Optional[logging.Logger] = None,
) -> dict[str, Any]:
    """Resolve ``target`` to the first matching EC2 instance in ``session``."""
    return ResolveInstance(EC2InstanceQuery(session), logger).execute(
        target_type, target
    )
