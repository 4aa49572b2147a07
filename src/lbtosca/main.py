"""
Command-line interface for inspecting load balancer listener settings.

Resolves protocol/port defaults, validates network protocols, extracts load
balancer names from ARNs and renders attribute/tag files.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Final

from ruamel.yaml import YAML

from lbtosca.enums import ApplicationProtocol, Protocol
from lbtosca.exceptions import (
    ArnFormatError,
    InputFileError,
    InvalidNetworkProtocolError,
    LoadBalancerConfigError,
    MissingResourceNameError,
    UnknownPortDefaultError,
    UnrecognizedProtocolError,
)
from lbtosca.shared.util import (
    determine_protocol_and_port,
    map_tag_map_to_cxschema,
    parse_load_balancer_full_name,
    render_attributes,
    validate_network_protocol,
)

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml = YAML(typ="safe")
_yaml.default_flow_style = False


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable verbose logging from the helpers if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    # stdout carries the YAML result
    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,
    )


def load_input_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML / JSON attribute file and return its top-level mapping."""
    file_path = Path(path)

    if not file_path.exists():
        raise InputFileError(f"File not found: {file_path}", file_path=str(file_path))

    suffix = file_path.suffix.lower()
    if suffix not in _YAML_EXTS | _JSON_EXTS:
        raise InputFileError(
            f"Unsupported extension '{file_path.suffix}'. "
            f"Supported: {', '.join(sorted(_YAML_EXTS | _JSON_EXTS))}",
            file_path=str(file_path),
        )

    raw_text = file_path.read_text(encoding="utf-8")
    try:
        if suffix in _YAML_EXTS:
            data = _yaml.load(raw_text)
        else:
            data = json.loads(raw_text)
    except Exception as exc:
        raise InputFileError(
            f"Cannot parse {file_path.name}: {exc}", file_path=str(file_path)
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InputFileError(
            "Top-level object must be a mapping", file_path=str(file_path)
        )

    logger.debug("Input file loaded (%d root keys)", len(data))
    return data


def _stringify(value: Any) -> str | None:
    """Render a scalar from YAML/JSON the way the load balancer API expects."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_enum(enum_cls: type, value: str | None) -> Any:
    """Return the enum member for value, or the raw value if there is none."""
    if value is None:
        return None
    try:
        return enum_cls(value.upper())
    except ValueError:
        return value


def _emit(data: Any) -> None:
    _yaml.dump(data, sys.stdout)


def cmd_resolve(args: argparse.Namespace) -> None:
    protocol, port = determine_protocol_and_port(
        _as_enum(ApplicationProtocol, args.protocol), args.port
    )
    _emit({"protocol": getattr(protocol, "value", protocol), "port": port})


def cmd_validate_protocol(args: argparse.Namespace) -> None:
    protocol = _as_enum(Protocol, args.protocol)
    validate_network_protocol(protocol)
    logger.info("Protocol %s is valid for network load balancers", args.protocol)
    _emit({"protocol": protocol.value, "valid": True})


def cmd_parse_arn(args: argparse.Namespace) -> None:
    _emit({"load_balancer_full_name": parse_load_balancer_full_name(args.arn)})


def cmd_render(args: argparse.Namespace) -> None:
    data = load_input_file(args.file)

    attributes = data.get("attributes")
    tags = data.get("tags")
    if attributes is None:
        attributes = {}
    if tags is None:
        tags = {}
    for section, value in (("attributes", attributes), ("tags", tags)):
        if not isinstance(value, dict):
            raise InputFileError(
                f"'{section}' must be a mapping", file_path=str(args.file)
            )

    rendered_attributes = render_attributes(
        {str(k): _stringify(v) for k, v in attributes.items()}
    )
    rendered_tags = map_tag_map_to_cxschema(
        {str(k): _stringify(v) or "" for k, v in tags.items()}
    )
    logger.info(
        "Rendered %d of %d attribute(s) and %d tag(s)",
        len(rendered_attributes),
        len(attributes),
        len(rendered_tags),
    )
    _emit(
        {
            "attributes": [a.model_dump() for a in rendered_attributes],
            "tags": [t.model_dump() for t in rendered_tags],
        }
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per helper."""
    parser = argparse.ArgumentParser(
        prog="lbtosca",
        description="Inspect load balancer listener and attribute settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Infer the protocol for a well-known port
  python -m lbtosca.main resolve --port 8080

  # Check a network load balancer listener protocol
  python -m lbtosca.main validate-protocol TCP_UDP

  # Extract the full name used in CloudWatch dimensions
  python -m lbtosca.main parse-arn \\
    arn:aws:elasticloadbalancing:us-east-1:123:loadbalancer/app/my-lb/50dc6c495c0c9188

  # Render attributes and tags from a file
  python -m lbtosca.main render lb.yaml
        """,
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser(
        "resolve", help="Fill in a missing application protocol or port"
    )
    resolve.add_argument("--protocol", help="Application protocol (HTTP, HTTPS)")
    resolve.add_argument("--port", type=int, help="Listener port")
    resolve.set_defaults(handler=cmd_resolve)

    validate = subparsers.add_parser(
        "validate-protocol", help="Check a network load balancer protocol"
    )
    validate.add_argument("protocol", help="Protocol (TCP, TLS, UDP, TCP_UDP)")
    validate.set_defaults(handler=cmd_validate_protocol)

    parse_arn = subparsers.add_parser(
        "parse-arn", help="Print the full name of a load balancer ARN"
    )
    parse_arn.add_argument("arn", help="Load balancer ARN")
    parse_arn.set_defaults(handler=cmd_parse_arn)

    render = subparsers.add_parser(
        "render", help="Render 'attributes' and 'tags' from a YAML/JSON file"
    )
    render.add_argument("file", type=Path, help="YAML or JSON input file")
    render.set_defaults(handler=cmd_render)

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute the selected sub-command and return the process exit code."""
    configure_logging(args.debug, args.verbose)

    try:
        args.handler(args)
        return 0
    except (
        UnrecognizedProtocolError,
        UnknownPortDefaultError,
        InvalidNetworkProtocolError,
    ) as e:
        logger.error("Protocol/port error: %s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        return 1
    except (ArnFormatError, MissingResourceNameError) as e:
        logger.error("ARN error: %s", e)
        logger.info("Suggestion: %s", e.get_recovery_hint())
        return 2
    except InputFileError as e:
        logger.error("Input file error: %s", e)
        return 3
    except LoadBalancerConfigError as e:
        logger.error("Configuration error: %s", e)
        return 4
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        if args.debug:
            logger.exception("Full traceback:")
        return 9


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
