"""
Pongish game configuration with Pydantic validation
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

Color = tuple[int, int, int]

DEFAULT_BALL_COLORS: list[Color] = [
    (255, 255, 255),
    (230, 166, 227),
    (230, 181, 128),
    (191, 232, 161),
    (186, 227, 230),
]


class GameConfig(BaseModel):
    """Court geometry, speeds and display settings, immutable once built"""

    model_config = {"frozen": True}

    # Court
    COURT_WIDTH: int = Field(default=900, gt=0, description="Court width in pixels")
    COURT_HEIGHT: int = Field(default=700, gt=0, description="Court height in pixels")

    # Bat
    BAT_WIDTH: float = Field(default=130.0, gt=0, description="Bat face width in pixels")
    BAT_THICKNESS: float = Field(default=19.0, gt=0, description="Bat thickness in pixels")
    BAT_OFFSET: float = Field(
        default=50.0, gt=0, description="Distance from the court bottom up to the bat face"
    )

    # Ball physics
    BALL_RADIUS: float = Field(default=10.0, gt=0, description="Ball radius in pixels")
    Y_VEL: float = Field(default=300.0, gt=0, description="Base vertical ball speed")
    X_VEL_STEEP_FACTOR: float = Field(default=0.5, gt=0, description="Steep speed / Y_VEL")
    X_VEL_NORMAL_FACTOR: float = Field(default=1.0, gt=0, description="Normal speed / Y_VEL")
    X_VEL_SHALLOW_FACTOR: float = Field(default=1.5, gt=0, description="Shallow speed / Y_VEL")
    STEEP_ZONE: float = Field(default=0.3, gt=0, lt=1, description="Steep bat zone fraction")
    SHALLOW_ZONE: float = Field(default=0.7, gt=0, lt=1, description="Shallow bat zone fraction")

    # Gameplay
    MAX_BALLS: int = Field(default=5, gt=0, description="Number of ball slots")
    NEW_BALL_INTERVAL: int = Field(default=5, gt=0, description="Points per extra ball")
    SPEEDUP_PERIOD: float = Field(
        default=200.0, gt=0, description="Seconds of play per +1.0 speed-up"
    )

    # Timing
    UPDATES_PER_SECOND: int = Field(default=60, gt=0, description="Fixed simulation rate")
    FPS: int = Field(default=60, gt=0, description="Frames per second")

    # Audio
    SOUND_ENABLED: bool = Field(default=True, description="Play table and bat sounds")

    # Display
    BACKGROUND_COLOR: Color = Field(default=(0, 0, 0), description="RGB color")
    TEXT_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    SCORE_COLOR: Color = Field(default=(77, 77, 77), description="RGB color")
    BAT_COLOR: Color = Field(default=(200, 200, 200), description="RGB color")
    BALL_COLORS: list[Color] = Field(
        default_factory=lambda: list(DEFAULT_BALL_COLORS), description="One color per ball slot"
    )

    @field_validator("BACKGROUND_COLOR", "TEXT_COLOR", "SCORE_COLOR", "BAT_COLOR")
    @classmethod
    def validate_color(cls, v: Color, info: ValidationInfo) -> Color:
        """Validate that every channel is a byte"""
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"{info.field_name} channels must be in 0..255, got {v}")
        return v

    @field_validator("BALL_COLORS")
    @classmethod
    def validate_ball_colors(cls, v: list[Color]) -> list[Color]:
        for color in v:
            if any(not 0 <= channel <= 255 for channel in color):
                raise ValueError(f"Ball color channels must be in 0..255, got {color}")
        return v

    @model_validator(mode="after")
    def validate_geometry(self) -> "GameConfig":
        """Validate that the bat, the zones and the serve area fit in the court"""
        if self.STEEP_ZONE >= self.SHALLOW_ZONE:
            raise ValueError(
                f"STEEP_ZONE ({self.STEEP_ZONE}) must be below SHALLOW_ZONE ({self.SHALLOW_ZONE})"
            )

        if len(self.BALL_COLORS) != self.MAX_BALLS:
            raise ValueError(
                f"BALL_COLORS has {len(self.BALL_COLORS)} entries, expected MAX_BALLS "
                f"({self.MAX_BALLS})"
            )

        if self.BAT_WIDTH >= self.COURT_WIDTH:
            raise ValueError(f"BAT_WIDTH must be below COURT_WIDTH ({self.COURT_WIDTH})")

        if self.BAT_OFFSET + self.BAT_THICKNESS > self.COURT_HEIGHT:
            raise ValueError("Bat does not fit in the court height")

        low, high = self.serve_y_range
        if low >= high:
            raise ValueError(f"COURT_HEIGHT too small to serve a ball of radius {self.BALL_RADIUS}")

        low, high = self.serve_x_range
        if low >= high:
            raise ValueError(f"COURT_WIDTH too small to serve a ball of radius {self.BALL_RADIUS}")

        return self

    @property
    def bat_y(self) -> float:
        """Vertical position of the bat face"""
        return self.COURT_HEIGHT - self.BAT_OFFSET

    @property
    def x_vel_steep(self) -> float:
        return self.Y_VEL * self.X_VEL_STEEP_FACTOR

    @property
    def x_vel_normal(self) -> float:
        return self.Y_VEL * self.X_VEL_NORMAL_FACTOR

    @property
    def x_vel_shallow(self) -> float:
        return self.Y_VEL * self.X_VEL_SHALLOW_FACTOR

    @property
    def serve_x_range(self) -> tuple[float, float]:
        """Horizontal serve range, kept one radius away from the walls"""
        return (self.BALL_RADIUS + 1, self.COURT_WIDTH - self.BALL_RADIUS)

    @property
    def serve_y_range(self) -> tuple[float, float]:
        """Vertical serve range, the upper third of the court"""
        return (self.BALL_RADIUS + 1, self.COURT_HEIGHT / 3)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "pongish_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.debug("Configuration saved to %s", config_path)

    @classmethod
    def load_from_file(cls, filepath: str = "pongish_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def with_overrides(self, **kwargs: Any) -> "GameConfig":
        """Return a validated copy with some fields replaced"""
        return type(self)(**{**self.to_dict(), **kwargs})


# Default configuration used when none is passed explicitly
game_config = GameConfig()
