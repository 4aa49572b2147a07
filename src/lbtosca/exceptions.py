"""
Load Balancer Helper Exception Classes

Custom exceptions raised while resolving listener protocols/ports and
parsing load balancer ARNs.
"""

from __future__ import annotations

from typing import Any


class LoadBalancerConfigError(Exception):
    """Base exception for all load balancer configuration errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the configuration."""
        return "Check the load balancer configuration for invalid values"


class UnrecognizedProtocolError(LoadBalancerConfigError):
    """Raised when no default port is known for an application protocol."""

    def __init__(self, message: str, protocol: Any = None) -> None:
        context = {}
        if protocol is not None:
            context["protocol"] = str(getattr(protocol, "value", protocol))
        super().__init__(message, "UNRECOGNIZED_PROTOCOL", context)


class UnknownPortDefaultError(LoadBalancerConfigError):
    """Raised when a port has no default application protocol."""

    def __init__(self, message: str, port: int | None = None) -> None:
        context = {}
        if port is not None:
            context["port"] = port
        super().__init__(message, "UNKNOWN_PORT_DEFAULT", context)

    def get_recovery_hint(self) -> str:
        return "Supply the protocol explicitly for non-standard ports"


class InvalidNetworkProtocolError(LoadBalancerConfigError):
    """Raised when a protocol is not accepted by network listeners."""

    def __init__(
        self,
        message: str,
        protocol: Any = None,
        valid_protocols: list[str] | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if protocol is not None:
            context["protocol"] = str(getattr(protocol, "value", protocol))
        if valid_protocols:
            context["valid_protocols"] = "|".join(valid_protocols)
        super().__init__(message, "INVALID_NETWORK_PROTOCOL", context)

    def get_recovery_hint(self) -> str:
        if "valid_protocols" in self.context:
            valid = self.context["valid_protocols"].replace("|", ", ")
            return f"Use one of {valid} for network listeners and target groups"
        return "Use a network-layer protocol for network listeners"


class ArnFormatError(LoadBalancerConfigError):
    """Raised when a string cannot be split into ARN components."""

    def __init__(self, message: str, arn: str | None = None) -> None:
        context = {}
        if arn is not None:
            context["arn"] = arn
        super().__init__(message, "ARN_FORMAT_ERROR", context)

    def get_recovery_hint(self) -> str:
        return (
            "ARNs must look like "
            "'arn:partition:service:region:account:resource'"
        )


class MissingResourceNameError(LoadBalancerConfigError):
    """Raised when an ARN carries no resource name component."""

    def __init__(self, message: str, arn: str | None = None) -> None:
        context = {}
        if arn is not None:
            context["arn"] = arn
        super().__init__(message, "MISSING_RESOURCE_NAME", context)

    def get_recovery_hint(self) -> str:
        return "Pass the ARN of a load balancer, e.g. '...:loadbalancer/app/name/id'"


class InputFileError(LoadBalancerConfigError):
    """Raised when an attribute/tag input file cannot be loaded."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        context = {}
        if file_path is not None:
            context["file_path"] = file_path
        super().__init__(message, "INPUT_FILE_ERROR", context)
