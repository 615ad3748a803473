"""Configuration utilities."""

from galaxy_gen.utils.config import load_config, Config

__all__ = ["load_config", "Config"]
