"""
Domain Errors

Architectural Intent:
- Single exception hierarchy for everything ec2target raises itself
- Input errors, not-found and session errors are distinct so callers can
  decide which ones to recover from
- Upstream botocore errors are never wrapped here; they propagate as raised
"""

from typing import Optional


class Ec2TargetError(Exception):
    """Base class for all ec2target errors."""


class InvalidTargetError(Ec2TargetError):
    """The target specification could not be used to build a query."""


class EmptyTargetError(InvalidTargetError):
    def __init__(self, target: Optional[str] = None) -> None:
        super().__init__("Specify the target")
        self.target = target


class UnsupportedTargetTypeError(InvalidTargetError):
    def __init__(self, target_type: str) -> None:
        super().__init__(f"Unsupported target type: {target_type}")
        self.target_type = target_type


class TagParseError(InvalidTargetError):
    def __init__(self, segment: str, reason: str = "expected key:value") -> None:
        super().__init__(f"Invalid tag segment {segment!r}: {reason}")
        self.segment = segment


class InstanceNotFoundError(Ec2TargetError):
    def __init__(self, message: str, target_type: str, target: str) -> None:
        super().__init__(message)
        self.target_type = target_type
        self.target = target


class SessionBuildError(Ec2TargetError):
    """Raised when an AWS session cannot be constructed."""


class TokenProviderError(Ec2TargetError):
    """Raised when an MFA token code cannot be obtained."""
