"""
CLI Module

Architectural Intent:
- Command-line interface for ec2target
- Entry point for all user interactions
- Delegates to the resolve use case via the composition root
- Supports --verbose/--debug flags for log level control
- Owns the decision to exit non-zero when a session or lookup fails
"""

import argparse
import datetime
import json
import logging
import sys
import traceback
from typing import Any, Optional, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from ec2target.domain.errors import Ec2TargetError, SessionBuildError
from ec2target.domain.value_objects.target_spec import TargetType
from ec2target.infrastructure.config import load_config
from ec2target.infrastructure.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ec2target",
        description="ec2target: resolve EC2 instances from human-friendly targets",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output with tracebacks"
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Emit logs as JSON lines"
    )
    parser.add_argument(
        "--config", "-c", default=None, help="Path to JSON config file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve a target to a single EC2 instance"
    )
    resolve_parser.add_argument("--region", "-r", help="AWS region")
    resolve_parser.add_argument("--profile", "-p", help="AWS shared config profile")
    resolve_parser.add_argument(
        "--mfa-token",
        help="MFA token code for role assumption (prompted on stdin if omitted)",
    )
    resolve_parser.add_argument(
        "--target-type",
        "-t",
        choices=TargetType.choices(),
        default=None,
        help="How to interpret TARGET (default: from config, else instance-id)",
    )
    resolve_parser.add_argument(
        "--field",
        "-f",
        help="Print only this top-level instance field (e.g. PrivateIpAddress)",
    )
    resolve_parser.add_argument(
        "target",
        help="Instance ID, private DNS name, Name tag, or key:value[,key:value]",
    )
    return parser


def _json_default(value: Any) -> str:
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    return str(value)


def _render(instance: dict[str, Any], field: Optional[str]) -> str:
    if field is None:
        return json.dumps(instance, indent=2, default=_json_default)
    if field not in instance:
        raise KeyError(field)
    value = instance[field]
    if isinstance(value, (dict, list)):
        return json.dumps(value, indent=2, default=_json_default)
    return _json_default(value)


def _fail(message: str, verbose: bool) -> None:
    print(f"[-] {message}", file=sys.stderr)
    if verbose:
        traceback.print_exc()
    sys.exit(1)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)

    # Configure logging based on flags
    if args.debug:
        configure_logging(level=logging.DEBUG, json_format=args.json_logs)
    elif args.verbose:
        configure_logging(level=logging.INFO, json_format=args.json_logs)
    else:
        configure_logging(level=config.log_level, json_format=args.json_logs)

    verbose = args.verbose or args.debug

    if args.command == "resolve":
        from ec2target.composition_root import create_container

        target_type = args.target_type or config.resolver.target_type
        try:
            container = create_container(
                config,
                region=args.region,
                profile=args.profile,
                mfa_token=args.mfa_token,
            )
            instance = container.resolve_instance.execute(target_type, args.target)
        except SessionBuildError as e:
            _fail(str(e), verbose)
        except Ec2TargetError as e:
            _fail(f"Resolution failed: {e}", verbose)
        except (ClientError, BotoCoreError) as e:
            _fail(f"AWS request failed: {e}", verbose)

        try:
            print(_render(instance, args.field))
        except KeyError:
            _fail(f"Instance has no field {args.field!r}", verbose)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
