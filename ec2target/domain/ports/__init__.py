"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from ec2target.domain.ports.instance_query_port import InstanceQueryPort
from ec2target.domain.ports.token_provider_port import TokenProviderPort

__all__ = [
    "InstanceQueryPort",
    "TokenProviderPort",
]
