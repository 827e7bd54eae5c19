"""
Config schemas - Pydantic models validating raw YAML sections
Includes: animation presets, stagger defaults, driver and logging settings
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Dict, Optional

from animations.curves import get_curve
from models.enums import LogLevel


class AnimationPresetSchema(BaseModel):
    """One named entry under `animations:` in animations.yaml"""
    duration_ms: int = Field(300, gt=0, description="Duration of one run in milliseconds")
    curve: str = Field("ease_in_out", description="Curve registry name (e.g. 'ease_out', 'elasticOut')")
    delay_ms: int = Field(0, ge=0, description="Delay before starting")
    auto_play: bool = Field(True, description="Start automatically")
    auto_reverse: bool = Field(False, description="Play backwards after each forward run")
    repeat: bool = Field(False, description="Repeat the animation")
    repeat_count: Optional[int] = Field(
        None,
        ge=0,
        description="Number of repeats, omit or 0 for infinite"
    )

    @field_validator("curve")
    @classmethod
    def validate_curve(cls, value: str) -> str:
        get_curve(value)
        return value

    @model_validator(mode="after")
    def validate_repeat(self):
        if self.repeat_count and not self.repeat:
            raise ValueError("repeat_count requires repeat: true")
        return self


class StaggerSchema(BaseModel):
    """Defaults for staggered groups"""
    duration_ms: int = Field(1000, gt=0, description="Master timeline duration")
    stagger_delay_ms: int = Field(100, ge=0, description="Delay between item starts")
    curve: str = Field("ease_in_out", description="Curve registry name")

    @field_validator("curve")
    @classmethod
    def validate_curve(cls, value: str) -> str:
        get_curve(value)
        return value


class DriverSchema(BaseModel):
    """Driver tick settings"""
    fps: int = Field(60, ge=1, le=240, description="Ticks per second")


class LoggingSchema(BaseModel):
    """Logger settings"""
    level: str = Field("INFO", description="Minimum level: DEBUG, INFO, WARN or ERROR")
    use_colors: bool = Field(True, description="ANSI colours in console output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LogLevel.__members__:
            raise ValueError(f"unknown log level '{value}'")
        return value


class ConfigSchema(BaseModel):
    """Merged configuration after includes are resolved"""
    animations: Dict[str, AnimationPresetSchema] = Field(default_factory=dict)
    stagger: StaggerSchema = Field(default_factory=StaggerSchema)
    driver: DriverSchema = Field(default_factory=DriverSchema)
    logging: LoggingSchema = Field(default_factory=LoggingSchema)
