"""
Resolve Instance Use Case

Architectural Intent:
- Turns a (target type, target) pair into exactly one instance record
- Validation and filter construction are delegated to the domain
- Listing is delegated to an InstanceQueryPort; the first instance wins

Design Decisions:
- The logger is injected so callers and tests choose where diagnostics go
- Iteration stops at the first instance, so later pages are never requested
- Errors from the query port are not caught or wrapped
"""

import logging
from typing import Any, Optional

from ec2target.domain.errors import EmptyTargetError, InstanceNotFoundError
from ec2target.domain.ports.instance_query_port import InstanceQueryPort
from ec2target.domain.services.filter_builder import build_filters
from ec2target.domain.value_objects.target_spec import TargetSpec, TargetType

_NOT_FOUND_MESSAGES = {
    TargetType.INSTANCE_ID: "no instance with an instance id: {}",
    TargetType.PRIVATE_DNS: "no instance with a private dns name: {}",
    TargetType.NAME_TAG: "no instance with name tag: {}",
    TargetType.TAGS: "no instance with tags: {}",
}


class ResolveInstance:
    def __init__(
        self,
        query: InstanceQueryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self.query = query
        self.logger = logger or logging.getLogger(__name__)

    def execute(
        self, target_type: str | TargetType, target: Optional[str]
    ) -> dict[str, Any]:
        if not target:
            self.logger.error("Specify the target (target=%r)", target)
            raise EmptyTargetError(target)

        spec = TargetSpec(TargetType.parse(target_type), target)
        filters = build_filters(spec)
        self.logger.debug(
            "Resolving %s with filters %s", spec, [str(f) for f in filters]
        )

        for instance in self.query.iter_instances(filters):
            self.logger.info(
                "Resolved %s to %s", spec, instance.get("InstanceId", "<unknown>")
            )
            return instance

        message = _NOT_FOUND_MESSAGES[spec.target_type].format(spec.value)
        raise InstanceNotFoundError(message, str(spec.target_type), spec.value)
