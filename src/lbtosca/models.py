"""Record types produced by the load balancer helpers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lbtosca.enums import ArnFormat


class Attribute(BaseModel):
    """A single load balancer / target group attribute."""

    key: str = Field(
        ..., description="Attribute key (e.g. 'idle_timeout.timeout_seconds')."
    )
    value: str = Field(..., description="Attribute value, rendered as a string.")

    model_config = ConfigDict(frozen=True, extra="forbid")


class Tag(BaseModel):
    """Tag record in the cloud assembly schema format."""

    key: str = Field(..., description="Tag key.")
    value: str = Field(..., description="Tag value.")

    model_config = ConfigDict(frozen=True, extra="forbid")


class ArnComponents(BaseModel):
    """The parts of a split ARN."""

    partition: str = Field(..., description="Partition (e.g. 'aws', 'aws-cn').")
    service: str = Field(..., description="Service namespace.")
    region: str = Field("", description="Region; empty for global services.")
    account: str = Field("", description="Account ID; empty for some services.")
    resource: str = Field(..., description="Resource type or resource.")
    resource_name: str | None = Field(
        None, description="Resource name, when the ARN format carries one."
    )
    sep: str | None = Field(
        None, description="Separator between resource and resource_name."
    )
    arn_format: ArnFormat = Field(..., description="Format used to split the ARN.")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("service", "resource")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("ARN service and resource components must not be empty")
        return v
