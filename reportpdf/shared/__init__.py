"""Shared utilities used across modules."""
