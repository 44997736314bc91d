"""Feature modules: each exposes a router plus its service and schemas."""
