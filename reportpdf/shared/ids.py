"""ID generation helpers."""

import uuid


def generate_id(prefix: str) -> str:
    """Generate a prefixed random ID, e.g. ``req_3f2a...``."""
    return f"{prefix}_{uuid.uuid4().hex}"


def generate_request_id() -> str:
    """Generate a request ID for tracing."""
    return generate_id("req")
