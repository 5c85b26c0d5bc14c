"""
Instance Query Port

Architectural Intent:
- Port interface for listing compute instances with server-side filters
- Implemented by EC2InstanceQuery; tests substitute in-memory fakes

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- Returns an iterator so callers can stop before later pages are fetched
"""

from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

from ec2target.domain.value_objects.instance_filter import InstanceFilter


@runtime_checkable
class InstanceQueryPort(Protocol):
    """Port for filtered, paginated instance listing."""

    def iter_instances(
        self, filters: Sequence[InstanceFilter]
    ) -> Iterator[dict[str, Any]]:
        """Yield instance records matching all filters, in server order."""
        ...
