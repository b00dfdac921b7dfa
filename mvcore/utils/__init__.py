"""Shared helpers that are not part of the actor model (logging levels)."""

from .logging import apply_env_overrides, enable_dispatch_tracing, set_framework_level

__all__ = ["apply_env_overrides", "enable_dispatch_tracing", "set_framework_level"]
