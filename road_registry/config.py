from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


def _load_yaml(yaml_path: Path) -> Dict[str, Any]:
    if not yaml_path or not yaml_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {yaml_path}: {e}")


@dataclass
class RegistryConfig:
    """
    Configuration for the road registry.

    Loads all configuration values from config.yaml in the package directory.
    """
    # Storage
    data_dir: str = field(init=False)
    person_file: str = field(init=False)
    offense_file: str = field(init=False)

    # Suspension rules
    window_years: int = field(init=False)
    young_driver_age: int = field(init=False)
    young_driver_threshold: int = field(init=False)
    full_licence_threshold: int = field(init=False)

    # Personal detail rules
    minor_age: int = field(init=False)

    # Demerit point range
    min_points: int = field(init=False)
    max_points: int = field(init=False)

    def __post_init__(self):
        """Load configuration from the bundled YAML file."""
        if not DEFAULT_CONFIG_PATH.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {DEFAULT_CONFIG_PATH}. "
                "Please ensure config.yaml exists in the road_registry directory."
            )
        config_dict = _load_yaml(DEFAULT_CONFIG_PATH)
        for key in self.__dataclass_fields__.keys():
            if key in config_dict:
                object.__setattr__(self, key, config_dict[key])
            else:
                raise ValueError(f"Required configuration field '{key}' not found in config.yaml")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> RegistryConfig:
        """
        Load configuration from a specific YAML file.

        Keys missing from the file fall back to the bundled config.yaml.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            RegistryConfig: Configuration instance loaded from YAML.
        """
        return cls.from_dict(_load_yaml(Path(yaml_path)))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> RegistryConfig:
        """
        Create configuration from a dictionary.

        Args:
            config_dict (Dict[str, Any]): Dictionary with configuration values.
        Returns:
            RegistryConfig: Configuration instance.
        """
        instance = object.__new__(cls)
        defaults: Optional[Dict[str, Any]] = None

        for key in cls.__dataclass_fields__.keys():
            if key in config_dict:
                object.__setattr__(instance, key, config_dict[key])
                continue
            if defaults is None:
                defaults = _load_yaml(DEFAULT_CONFIG_PATH) if DEFAULT_CONFIG_PATH.exists() else {}
            if key not in defaults:
                raise ValueError(f"Required configuration field '{key}' not found")
            object.__setattr__(instance, key, defaults[key])

        return instance

    @property
    def person_path(self) -> Path:
        return Path(self.data_dir) / self.person_file

    @property
    def offense_path(self) -> Path:
        return Path(self.data_dir) / self.offense_file
