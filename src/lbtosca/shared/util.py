"""Shared helpers for load balancer listeners, target groups and attributes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TypeVar

from lbtosca.enums import ApplicationProtocol, ArnFormat, Protocol
from lbtosca.exceptions import (
    InvalidNetworkProtocolError,
    MissingResourceNameError,
    UnknownPortDefaultError,
    UnrecognizedProtocolError,
)
from lbtosca.models import Attribute, Tag
from lbtosca.shared.arn import split_arn

logger = logging.getLogger(__name__)

T = TypeVar("T")

Attributes = Mapping[str, str | None]

_DEFAULT_PORTS: dict[ApplicationProtocol, int] = {
    ApplicationProtocol.HTTP: 80,
    ApplicationProtocol.HTTPS: 443,
}

_DEFAULT_PROTOCOLS: dict[int, ApplicationProtocol] = {
    80: ApplicationProtocol.HTTP,
    8000: ApplicationProtocol.HTTP,
    8008: ApplicationProtocol.HTTP,
    8080: ApplicationProtocol.HTTP,
    443: ApplicationProtocol.HTTPS,
    8443: ApplicationProtocol.HTTPS,
}

NLB_PROTOCOLS: tuple[Protocol, ...] = (
    Protocol.TCP,
    Protocol.TLS,
    Protocol.UDP,
    Protocol.TCP_UDP,
)


def _value(member: object) -> object:
    return getattr(member, "value", member)


def render_attributes(attributes: Attributes) -> list[Attribute]:
    """Render an attribute dict to a list of key/value records.

    Entries whose value is None are left out; empty strings are kept.
    """
    return [
        Attribute(key=key, value=value)
        for key, value in attributes.items()
        if value is not None
    ]


def default_port_for_protocol(protocol: ApplicationProtocol) -> int:
    """Return the default port for an application protocol.

    Raises:
        UnrecognizedProtocolError: If the protocol has no default port
    """
    try:
        return _DEFAULT_PORTS[protocol]
    except (KeyError, TypeError):
        raise UnrecognizedProtocolError(
            f"Unrecognized protocol: {_value(protocol)}", protocol=protocol
        ) from None


def default_protocol_for_port(port: int) -> ApplicationProtocol:
    """Return the default application protocol for a port.

    Raises:
        UnknownPortDefaultError: If the port is not a well-known HTTP(S) port
    """
    if isinstance(port, int) and not isinstance(port, bool):
        protocol = _DEFAULT_PROTOCOLS.get(port)
        if protocol is not None:
            return protocol
    raise UnknownPortDefaultError(
        f"Don't know default protocol for port: {port}; please supply a protocol",
        port=port,
    )


def determine_protocol_and_port(
    protocol: ApplicationProtocol | None, port: int | None
) -> tuple[ApplicationProtocol | None, int | None]:
    """Given a protocol and a port, guess the other one if it is missing.

    Both missing is not an error: (None, None) is returned unchanged. A
    protocol and port that are both given are not checked against each other.
    """
    if protocol is None and port is None:
        return None, None

    if protocol is None:
        protocol = default_protocol_for_port(port)  # type: ignore[arg-type]
        logger.debug("Inferred protocol %s from port %s", protocol.value, port)
    if port is None:
        port = default_port_for_protocol(protocol)
        logger.debug("Inferred port %s from protocol %s", port, _value(protocol))

    return protocol, port


def if_undefined(value: T | None, default: T) -> T:
    """Return ``default`` when ``value`` is None, otherwise ``value``."""
    return default if value is None else value


def validate_network_protocol(protocol: Protocol) -> None:
    """Ensure network listeners and target groups only accept valid protocols.

    Raises:
        InvalidNetworkProtocolError: If the protocol is not TCP, TLS, UDP or TCP_UDP
    """
    if protocol not in NLB_PROTOCOLS:
        valid = [p.value for p in NLB_PROTOCOLS]
        raise InvalidNetworkProtocolError(
            f"The protocol must be one of {', '.join(valid)}. "
            f"Found {_value(protocol)}",
            protocol=protocol,
            valid_protocols=valid,
        )


def map_tag_map_to_cxschema(tag_map: Mapping[str, str]) -> list[Tag]:
    """Map a dict of tags to the cloud assembly schema tag format."""
    return [Tag(key=key, value=value) for key, value in tag_map.items()]


def parse_load_balancer_full_name(load_balancer_arn: str) -> str:
    """Return the full name of a load balancer (e.g. 'app/my-lb/50dc6c495c0c9188').

    Raises:
        ArnFormatError: If the string is not an ARN
        MissingResourceNameError: If the ARN has no resource name
    """
    arn_components = split_arn(load_balancer_arn, ArnFormat.SLASH_RESOURCE_NAME)
    if not arn_components.resource_name:
        raise MissingResourceNameError(
            f"Provided ARN does not belong to a load balancer: {load_balancer_arn}",
            arn=load_balancer_arn,
        )
    return arn_components.resource_name
