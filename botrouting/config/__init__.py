"""Configuration."""

from .settings import Settings, cfg, reset_cfg

__all__ = ["Settings", "cfg", "reset_cfg"]
