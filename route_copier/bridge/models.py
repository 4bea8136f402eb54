"""Pydantic request/response models for the route bridge.

WHY: The bridge replaces a browser-extension message listener with an
explicit, typed request → response exchange. Pydantic enforces the
message shape at runtime and FastAPI turns the models into OpenAPI docs.

HOW: RouteRequest carries the fixed ``action`` plus the page source
(an HTML snapshot or a URL to fetch) and optional classification
overrides. RouteResponse carries a single ``data`` string: the route
text or a user-facing outcome message.

RULES:
- action is always "getRoute"; anything else is a 422
- Exactly one of html / url must be set
- Override lists replace the matching default set when non-empty
- RouteResponse.data is the ONLY field a client needs to display
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from route_copier.locators.base import SelectionPolicy


class RouteOptionsPayload(BaseModel):
    """Optional overrides for the default marker and mode sets."""

    start_markers: Optional[List[str]] = Field(
        default=None,
        description="Substrings of the header just above the first step.",
    )
    end_markers: Optional[List[str]] = Field(
        default=None,
        description="Substrings of the header just below the last step.",
    )
    mode_words: Optional[List[str]] = Field(
        default=None,
        description="Lines rendered as bracketed transport-mode tags.",
    )
    currency_markers: Optional[List[str]] = Field(
        default=None,
        description="Substrings marking a fare line (bracketed).",
    )
    arrival_markers: Optional[List[str]] = Field(
        default=None,
        description="Substrings marking an arrival line (bracketed).",
    )


class RouteRequest(BaseModel):
    """A single fire-and-forget request for the current route text."""

    action: Literal["getRoute"] = Field(
        default="getRoute",
        description="Request kind. Only 'getRoute' is supported.",
    )
    html: Optional[str] = Field(
        default=None,
        description="Snapshot of the map page's markup.",
    )
    url: Optional[str] = Field(
        default=None,
        description="Map page URL to fetch instead of sending a snapshot.",
    )
    policy: Optional[SelectionPolicy] = Field(
        default=None,
        description="Tie-break when several lists contain a time (longest or first).",
    )
    options: Optional[RouteOptionsPayload] = Field(
        default=None,
        description="Overrides for the default markers and mode words.",
    )

    @model_validator(mode="after")
    def _one_source(self) -> RouteRequest:
        if (self.html is None) == (self.url is None):
            raise ValueError("Provide exactly one of 'html' or 'url'.")
        return self

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "action": "getRoute",
                "html": "<div role='list'>...</div>",
            }
        ]
    }}


class RouteResponse(BaseModel):
    """The route text, or a user-facing outcome message."""

    data: str = Field(description="Copy-ready route text or an explanatory message.")

    model_config = {"json_schema_extra": {
        "examples": [
            {"data": "6:40 Station A [Walk]\n6:52 Station B [Train] [JPY 210]\n"}
        ]
    }}


class HealthResponse(BaseModel):
    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
