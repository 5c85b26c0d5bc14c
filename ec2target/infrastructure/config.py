"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to ec2target settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Unset region/profile stay None so botocore's own discovery applies
"""

from __future__ import annotations
from dataclasses import dataclass, field
import dataclasses
from pathlib import Path
from typing import Optional
import json
import logging
import os

from ec2target.infrastructure.adapters.ec2_adapter import MAX_PAGE_SIZE, MIN_PAGE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "ec2target.json"
DEFAULT_ENV_PREFIX = "EC2TARGET"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class AWSConfig:
    """AWS session configuration."""
    region: Optional[str] = None
    profile: Optional[str] = None


@dataclass(frozen=True)
class ResolverConfig:
    """Instance resolution defaults."""
    target_type: str = "instance-id"
    page_size: Optional[int] = None


@dataclass(frozen=True)
class Ec2TargetConfig:
    """Root configuration for ec2target."""
    aws: AWSConfig = field(default_factory=AWSConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    log_level: str = "WARNING"


def _env_override(data: dict, prefix: str = DEFAULT_ENV_PREFIX) -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern EC2TARGET_SECTION_KEY.
    For example: EC2TARGET_AWS_REGION=eu-west-1, EC2TARGET_LOG_LEVEL=DEBUG
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name == "log_level":
            data["log_level"] = value
            continue
        parts = name.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must contain a JSON object", path)
        return {}
    return data


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    for f in dataclasses.fields(cls):
        if f.name not in filtered:
            continue
        val = filtered[f.name]
        # Empty strings mean "not set"
        if val == "" and f.type.startswith("Optional"):
            filtered[f.name] = None
        elif isinstance(val, str) and f.type == "Optional[int]":
            try:
                filtered[f.name] = int(val)
            except ValueError:
                logger.warning(
                    "Ignoring %s.%s=%r: not an integer", cls.__name__, f.name, val
                )
                del filtered[f.name]

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> Ec2TargetConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (EC2TARGET_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to ec2target.json in CWD.
        env_prefix: Environment variable prefix. Defaults to EC2TARGET.
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    resolver = _build_sub_config(ResolverConfig, data.get("resolver", {}))
    page_size = resolver.page_size
    if page_size is not None and (
        not isinstance(page_size, int)
        or not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE
    ):
        logger.warning(
            "Ignoring resolver.page_size=%r: must be an integer from %d to %d",
            page_size,
            MIN_PAGE_SIZE,
            MAX_PAGE_SIZE,
        )
        resolver = dataclasses.replace(resolver, page_size=None)

    log_level = str(data.get("log_level", "WARNING"))
    if log_level.upper() not in LOG_LEVELS:
        logger.warning("Ignoring unknown log_level %r", log_level)
        log_level = "WARNING"

    return Ec2TargetConfig(
        aws=_build_sub_config(AWSConfig, data.get("aws", {})),
        resolver=resolver,
        log_level=log_level,
    )
