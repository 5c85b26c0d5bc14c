"""
Filter Builder Service

Architectural Intent:
- Pure translation from a TargetSpec to the DescribeInstances filter set
- No I/O; the same spec always yields the same filters
- Every type except instance-id is narrowed to running instances

Filter table:
    instance-id  -> instance-id=<value>
    private-dns  -> private-dns-name=<value>, instance-state-name=running
    name-tag     -> tag:Name=<value>, instance-state-name=running
    tags         -> instance-state-name=running, tag:<k>=<v> per pair
"""

from ec2target.domain.errors import TagParseError, UnsupportedTargetTypeError
from ec2target.domain.value_objects.instance_filter import InstanceFilter
from ec2target.domain.value_objects.target_spec import TargetSpec, TargetType

RUNNING_STATE_FILTER = InstanceFilter.of("instance-state-name", "running")


def parse_tag_pairs(value: str) -> list[tuple[str, str]]:
    """Parse ``key:value,key:value`` into ordered (key, value) pairs.

    Each comma-separated segment must contain exactly one colon and a
    non-empty key. Anything else raises TagParseError naming the segment.
    """
    pairs: list[tuple[str, str]] = []
    for segment in value.split(","):
        if segment.count(":") != 1:
            raise TagParseError(segment)
        key, tag_value = segment.split(":", 1)
        if not key:
            raise TagParseError(segment, "tag key cannot be empty")
        pairs.append((key, tag_value))
    return pairs


def build_filters(spec: TargetSpec) -> list[InstanceFilter]:
    target_type = spec.target_type
    if target_type is TargetType.INSTANCE_ID:
        return [InstanceFilter.of("instance-id", spec.value)]
    if target_type is TargetType.PRIVATE_DNS:
        return [InstanceFilter.of("private-dns-name", spec.value), RUNNING_STATE_FILTER]
    if target_type is TargetType.NAME_TAG:
        return [InstanceFilter.of("tag:Name", spec.value), RUNNING_STATE_FILTER]
    if target_type is TargetType.TAGS:
        filters = [RUNNING_STATE_FILTER]
        filters.extend(
            InstanceFilter.of(f"tag:{key}", tag_value)
            for key, tag_value in parse_tag_pairs(spec.value)
        )
        return filters
    raise UnsupportedTargetTypeError(str(target_type))
