"""Pydantic schemas for the status endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Literal["ok"] = Field(default="ok", description="Service health indicator.")
    app: Literal["backend"] = Field(default="backend", description="Name of the reporting application.")


class HelloResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    message: Literal["Hola desde Spring Boot"] = Field(
        default="Hola desde Spring Boot", description="Greeting returned to the caller."
    )
    status: Literal["ok"] = Field(default="ok", description="Service health indicator.")


# Shared across requests; frozen models cannot be mutated in place.
HEALTH = HealthResponse()
HELLO = HelloResponse()
