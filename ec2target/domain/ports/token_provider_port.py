"""
Token Provider Port

Architectural Intent:
- Capability that supplies a one-time MFA code when a role is assumed
- botocore calls it with a prompt string at the moment the code is needed
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class TokenProviderPort(Protocol):
    def __call__(self, prompt: str) -> str:
        """Return the current MFA token code."""
        ...
