"""Pydantic models for the parts of the Tessa config file read here."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GatewaySettings(BaseModel):
    """The ``gateway`` section of the config file."""

    model_config = ConfigDict(extra="allow")

    # Stored as written; resolve_gateway_port decides whether it is usable
    port: Any = Field(None, description="Port the gateway listens on")


class TessaConfig(BaseModel):
    """Top-level config document.

    Only the fields this package consumes are typed; every other key is kept
    as an extra so the model can round-trip a full config file.
    """

    model_config = ConfigDict(extra="allow")

    gateway: GatewaySettings | None = None
