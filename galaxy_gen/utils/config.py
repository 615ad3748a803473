"""Configuration management."""

import json
import warnings
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from galaxy_gen.params import GalaxyParameters


@dataclass
class Config:
    """Viewer configuration: initial galaxy plus view settings."""
    # Initial galaxy parameters (GalaxyParameters field names)
    galaxy: Dict[str, Any] = field(default_factory=dict)

    # Reproducibility
    seed: Optional[int] = None

    # View parameters
    elevation: float = 38.0
    azimuth: float = -101.0
    rotation_speed: float = 0.3

    # Export parameters
    fps: int = 30
    frames: int = 120

    def parameters(self) -> GalaxyParameters:
        """Build the initial parameters, checked against the panel bounds.

        Raises:
            InvalidParameter: If a value is unknown or out of bounds
        """
        return GalaxyParameters().replace(**self.galaxy).check_bounds()


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Unknown top-level keys are ignored with a warning.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()
    if suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    with open(config_path, 'r') as f:
        if suffix in ('.yaml', '.yml'):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        warnings.warn(f"Ignoring unknown config keys: {', '.join(unknown)}", UserWarning)
    return Config(**{k: v for k, v in data.items() if k in known})
