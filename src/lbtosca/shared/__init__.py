"""Helpers shared by load balancer listeners, target groups and load balancers."""

from __future__ import annotations

from lbtosca.enums import ApplicationProtocol, ArnFormat, Protocol

from .arn import split_arn
from .util import (
    default_port_for_protocol,
    default_protocol_for_port,
    determine_protocol_and_port,
    if_undefined,
    map_tag_map_to_cxschema,
    parse_load_balancer_full_name,
    render_attributes,
    validate_network_protocol,
)

__all__ = [
    "ApplicationProtocol",
    "ArnFormat",
    "Protocol",
    "default_port_for_protocol",
    "default_protocol_for_port",
    "determine_protocol_and_port",
    "if_undefined",
    "map_tag_map_to_cxschema",
    "parse_load_balancer_full_name",
    "render_attributes",
    "split_arn",
    "validate_network_protocol",
]
