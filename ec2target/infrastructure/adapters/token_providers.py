"""
MFA Token Providers

Architectural Intent:
- Implements TokenProviderPort for the two supported sources of MFA codes
- FixedTokenProvider returns a code supplied up front (flags, tests)
- StdinTokenProvider reads the code interactively when botocore asks for it

Design Decisions:
- Streams are injectable so the interactive path can be tested without a TTY
- The token itself is never logged
"""

import logging
import sys
from typing import Optional, TextIO

from ec2target.domain.errors import TokenProviderError
from ec2target.domain.ports.token_provider_port import TokenProviderPort

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "Assume Role MFA token code: "


class FixedTokenProvider:
    """Returns the same MFA code for every assume-role request."""

    def __init__(self, token: str) -> None:
        if not token:
            raise ValueError("MFA token cannot be empty")
        self._token = token

    def __call__(self, prompt: str = DEFAULT_PROMPT) -> str:
        logger.debug("Supplying fixed MFA token code")
        return self._token

    def __repr__(self) -> str:
        return "FixedTokenProvider(token=***)"


class StdinTokenProvider:
    """Prompts on ``out`` and reads one line from ``stream``."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self._stream = stream
        self._out = out

    def __call__(self, prompt: str = DEFAULT_PROMPT) -> str:
        stream = self._stream or sys.stdin
        out = self._out or sys.stderr
        out.write(prompt)
        out.flush()
        line = stream.readline()
        code = line.strip()
        if not code:
            raise TokenProviderError("No MFA token code read from stdin")
        return code

    def __repr__(self) -> str:
        return "StdinTokenProvider()"


def token_provider_for(mfa_token: Optional[str]) -> TokenProviderPort:
    """Fixed provider when a code is given, interactive otherwise."""
    if mfa_token:
        provider: TokenProviderPort = FixedTokenProvider(mfa_token)
    else:
        provider = StdinTokenProvider()
    logger.debug("Get MFA token provider: %r", provider)
    return provider
