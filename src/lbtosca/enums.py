"""Closed enumerations for load balancer protocols and ARN formats."""

from __future__ import annotations

from enum import Enum


class ApplicationProtocol(str, Enum):
    """Protocols understood by application load balancers."""

    HTTP = "HTTP"
    HTTPS = "HTTPS"


class Protocol(str, Enum):
    """Listener and target group protocols accepted by the load balancer API."""

    HTTP = "HTTP"
    HTTPS = "HTTPS"
    TCP = "TCP"
    TLS = "TLS"
    UDP = "UDP"
    TCP_UDP = "TCP_UDP"


class ArnFormat(str, Enum):
    """How the resource part of an ARN separates the resource from its name."""

    # arn:aws:service:region:account:resource
    NO_RESOURCE_NAME = "arn:aws:service:region:account:resource"
    # arn:aws:service:region:account:resource:resourceName
    COLON_RESOURCE_NAME = "arn:aws:service:region:account:resource:resourceName"
    # arn:aws:service:region:account:resource/resourceName
    SLASH_RESOURCE_NAME = "arn:aws:service:region:account:resource/resourceName"
    # arn:aws:service:region:account:resource/resource/resourceName
    SLASH_RESOURCE_SLASH_RESOURCE_NAME = (
        "arn:aws:service:region:account:resource/resource/resourceName"
    )
