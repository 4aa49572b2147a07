"""Protocol, port, attribute and ARN helpers for load balancer definitions."""

__version__ = "0.1.0"
