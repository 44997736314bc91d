"""Shared types."""

from dataclasses import dataclass


@dataclass
class RequestContext:
    """Per-request context attached by middleware for logging and tracing."""
    request_id: str
