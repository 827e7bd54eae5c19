"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files, validates them and exposes animation presets,
stagger defaults, driver and logging settings.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import ValidationError

from animations.curves import get_curve
from animations.driver import AnimationDriver
from animations.stagger import StaggeredAnimationController
from models.animation_config import AnimationConfig
from models.enums import LogCategory, LogLevel
from models.schemas import ConfigSchema, StaggerSchema
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    The merged data is validated against ConfigSchema; any failure falls back
    to factory_defaults.yaml.

    Example:
        config = ConfigManager()
        config.load()

        fade = config.get_preset("fade_in")          # AnimationConfig
        driver = config.create_driver("fade_in")     # AnimationDriver at configured fps
        group = config.create_stagger(item_count=5)  # StaggeredAnimationController
    """

    def __init__(
        self,
        config_path="config/config.yaml",
        defaults_path="config/factory_defaults.yaml",
        base_dir: Optional[Path] = None
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to base_dir)
            defaults_path: Path to factory defaults fallback
            base_dir: Directory paths are resolved against (defaults to src/)
        """
        self.base_dir = Path(base_dir) if base_dir is not None else Path(__file__).parent.parent
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict = {}

        # Populated by load()
        self.schema: ConfigSchema = ConfigSchema()
        self._presets: Dict[str, AnimationConfig] = {}

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Validate merged data
        5. Fallback to factory defaults on any failure
        6. Apply logging settings and build presets

        Returns:
            Merged config data dict
        """
        try:
            full_path = self.base_dir / self.config_path
            with open(full_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], full_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

            self.schema = ConfigSchema(**self.data)

        except (OSError, yaml.YAMLError, ValidationError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            defaults_path = self.base_dir / self.factory_defaults_path
            with open(defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}
            self.schema = ConfigSchema(**self.data)

        configure_logger(
            min_level=LogLevel[self.schema.logging.level],
            use_colors=self.schema.logging.use_colors,
        )
        self._presets = self._build_presets()

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["animations.yaml", "logging.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files override earlier top-level keys)
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    def _build_presets(self) -> Dict[str, AnimationConfig]:
        presets = {
            name: AnimationConfig.from_dict(entry.model_dump())
            for name, entry in self.schema.animations.items()
        }
        log.info(f"Loaded {len(presets)} animation presets", names=", ".join(presets) or "-")
        return presets

    # ===== Preset Access API =====

    @property
    def preset_names(self) -> List[str]:
        return list(self._presets)

    def get_preset(self, name: str) -> Optional[AnimationConfig]:
        """
        Get a named animation preset

        Returns:
            AnimationConfig, or None (with a warning) if no preset has that name
        """
        preset = self._presets.get(name)
        if preset is None:
            log.warn(f"Unknown animation preset '{name}'", available=", ".join(self._presets) or "-")
        return preset

    @property
    def stagger_defaults(self) -> StaggerSchema:
        return self.schema.stagger

    @property
    def fps(self) -> int:
        return self.schema.driver.fps

    @property
    def log_level(self) -> LogLevel:
        return LogLevel[self.schema.logging.level]

    # ===== Factories =====

    def create_driver(self, preset_name: Optional[str] = None, label: str = "driver") -> AnimationDriver:
        """
        Create a driver at the configured fps

        Args:
            preset_name: Preset whose duration the driver takes (default 300 ms)
            label: Driver name for logs
        """
        config = self.get_preset(preset_name) if preset_name else None
        duration_ms = config.duration_ms if config else AnimationConfig().duration_ms
        return AnimationDriver(duration_ms=duration_ms, fps=self.fps, label=label)

    def create_stagger(self, item_count: int, **overrides) -> StaggeredAnimationController:
        """
        Create a staggered controller from the stagger defaults

        Keyword overrides (duration_ms, stagger_delay_ms, curve, on_complete)
        take precedence over the configured defaults.
        """
        defaults = self.stagger_defaults
        kwargs = {
            "duration_ms": defaults.duration_ms,
            "stagger_delay_ms": defaults.stagger_delay_ms,
            "curve": get_curve(defaults.curve),
            "fps": self.fps,
        }
        kwargs.update(overrides)
        return StaggeredAnimationController(item_count, **kwargs)
