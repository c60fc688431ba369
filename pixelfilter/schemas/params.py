"""
Operation parameter models.

Only operations with tunable behavior have a params model; the rest
take no parameters.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pixelfilter.core.constants import FilterDefaults, PixelConstants
from pixelfilter.core.enums import ColorChannel, FilterOperation


class BaseFilterParams(BaseModel):
    """Base class for operation parameters (unknown keys are rejected)."""

    model_config = ConfigDict(extra="forbid")


class ColorMaskParams(BaseFilterParams):
    """Channels to strip from every pixel."""

    mask: int = Field(
        default=int(ColorChannel.NONE),
        ge=0,
        le=int(ColorChannel.ALL),
        description="ColorChannel flags to strip; all three gives grayscale",
    )

    @field_validator("mask", mode="before")
    @classmethod
    def parse_channels(cls, value: Any) -> Any:
        """Accept a flag value, a channel name or a list of channel names."""
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set)):
            mask = ColorChannel.NONE
            for name in value:
                try:
                    mask |= ColorChannel[str(name).strip().upper()]
                except KeyError:
                    raise ValueError(f"Unknown color channel: {name}")
            return int(mask)
        if isinstance(value, ColorChannel):
            return int(value)
        return value

    @property
    def channels(self) -> ColorChannel:
        return ColorChannel(self.mask)


class ThresholdParams(BaseFilterParams):
    """Binarization level."""

    level: int = Field(
        default=FilterDefaults.THRESHOLD_LEVEL,
        ge=PixelConstants.MIN_LEVEL,
        le=PixelConstants.MAX_LEVEL,
        description="Gray level at or above which pixels turn white",
    )


class MorphologyParams(BaseFilterParams):
    """Erosion/dilation repeat count."""

    iterations: int = Field(
        default=FilterDefaults.MORPHOLOGY_ITERATIONS,
        ge=0,
        description="Number of passes",
    )


class EdgeParams(BaseFilterParams):
    """Sobel/Laplacian output handling."""

    clamp: Optional[bool] = Field(
        default=None,
        description="Clamp responses to 0-255; None uses the configured default",
    )


class FilterStep(BaseModel):
    """One step of a filter pipeline."""

    operation: FilterOperation
    params: Optional[Dict[str, Any]] = None

    @field_validator("operation", mode="before")
    @classmethod
    def normalize_operation(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class FilterResult(BaseModel):
    """Outcome of applying one operation to a surface."""

    operation: FilterOperation
    params: Dict[str, Any] = Field(default_factory=dict)
    width: int
    height: int
    processing_time_ms: float = Field(..., ge=0)


ParamsInput = Optional[Union[BaseFilterParams, Dict[str, Any]]]
