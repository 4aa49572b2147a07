"""Splitting of ARNs into their components."""

from __future__ import annotations

import logging

from lbtosca.enums import ArnFormat
from lbtosca.exceptions import ArnFormatError
from lbtosca.models import ArnComponents

logger = logging.getLogger(__name__)

MIN_ARN_COMPONENTS = 6


def split_arn(arn: str, arn_format: ArnFormat) -> ArnComponents:
    """Split an ARN into its components.

    Args:
        arn: ARN string (e.g. 'arn:aws:elasticloadbalancing:...:loadbalancer/app/x/1')
        arn_format: How the resource part separates resource and resource name

    Returns:
        ArnComponents for the given ARN

    Raises:
        ArnFormatError: If the string is not a structurally valid ARN
    """
    components = arn.split(":")
    if len(components) < MIN_ARN_COMPONENTS:
        raise ArnFormatError(
            f"ARNs must have at least {MIN_ARN_COMPONENTS} components: {arn}", arn=arn
        )

    arn_literal, partition, service, region, account, resource_part, *rest = components

    if arn_literal != "arn":
        raise ArnFormatError(f'ARNs must start with "arn:": {arn}', arn=arn)
    if not service:
        raise ArnFormatError(
            f"The 'service' component (3rd component) of an ARN is required: {arn}",
            arn=arn,
        )
    if not resource_part:
        raise ArnFormatError(
            f"The 'resource' component (6th component) of an ARN is required: {arn}",
            arn=arn,
        )

    resource, resource_name, sep = _split_resource(resource_part, rest, arn_format)
    if not resource:
        raise ArnFormatError(
            f"The resource type of an ARN must not be empty: {arn}", arn=arn
        )
    logger.debug(
        "Split ARN '%s' (%s): resource=%s, resource_name=%s",
        arn,
        arn_format.name,
        resource,
        resource_name,
    )

    return ArnComponents(
        partition=partition,
        service=service,
        region=region,
        account=account,
        resource=resource,
        resource_name=resource_name,
        sep=sep,
        arn_format=arn_format,
    )


def _split_resource(
    resource_part: str, rest: list[str], arn_format: ArnFormat
) -> tuple[str, str | None, str | None]:
    """Separate the resource from the resource name for the given format."""
    if arn_format == ArnFormat.NO_RESOURCE_NAME:
        return resource_part, None, None

    if arn_format == ArnFormat.COLON_RESOURCE_NAME:
        resource_name = ":".join(rest) if rest else None
        return resource_part, resource_name, ":"

    if arn_format == ArnFormat.SLASH_RESOURCE_NAME:
        resource, slash, resource_name = resource_part.partition("/")
        name: str | None = resource_name if slash else None
        # Anything after the 6th colon still belongs to the resource name
        if rest:
            name = (f"{name}:" if name else "") + ":".join(rest)
        return resource, name, "/"

    # SLASH_RESOURCE_SLASH_RESOURCE_NAME
    parts = resource_part.split("/")
    resource = "/".join(parts[:2])
    remainder = "/".join(parts[2:])
    if rest:
        remainder = (f"{remainder}:" if remainder else "") + ":".join(rest)
    return resource, remainder or None, "/"
