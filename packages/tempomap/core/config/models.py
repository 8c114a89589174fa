"""Configuration models for tempomap.

Beat positions are authored in exact form (whole beat plus a sub-beat
fraction) so that no floating-point error enters at the boundary. Plain
numbers are accepted too and are rationalized at the configured resolution.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from tempomap.core.collections.timetable import Timetable
from tempomap.core.mathematics.rational import Rational
from tempomap.core.units.beat_duration import INT32_MAX, INT32_MIN, BeatDuration
from tempomap.core.units.beat_point import BeatPoint
from tempomap.core.units.tempo import Tempo

logger = logging.getLogger(__name__)


def _check_denominator(value: int) -> int:
    if value == 0:
        raise ValueError("denominator must be non-zero")
    return value


class RationalModel(BaseModel):
    """Serialized form of a Rational.

    Example:
        >>> RationalModel(numerator=2, denominator=4).to_rational()
        Rational(1, 2)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    numerator: int = Field(description="Signed numerator")
    denominator: int = Field(default=1, description="Non-zero denominator")

    @field_validator("denominator")
    @classmethod
    def _validate_denominator(cls, value: int) -> int:
        return _check_denominator(value)

    def to_rational(self) -> Rational:
        """Build the reduced Rational."""
        return Rational(self.numerator, self.denominator)

    @classmethod
    def from_rational(cls, value: Rational) -> RationalModel:
        """Serialize a Rational."""
        return cls(numerator=value.numerator, denominator=value.denominator)


class BeatDurationModel(BaseModel):
    """Serialized form of an exact beat value: ``beat + numerator / denominator``.

    The same layout is used for durations and for positions (as the
    duration from the origin).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    beat: int = Field(default=0, ge=INT32_MIN, le=INT32_MAX, description="Whole beats")
    sub_beat_numerator: int = Field(default=0, description="Sub-beat numerator")
    sub_beat_denominator: int = Field(default=1, description="Sub-beat resolution")

    @field_validator("sub_beat_denominator")
    @classmethod
    def _validate_denominator(cls, value: int) -> int:
        return _check_denominator(value)

    def to_duration(self) -> BeatDuration:
        """Build the normalized BeatDuration."""
        return BeatDuration.of(self.beat, self.sub_beat_numerator, self.sub_beat_denominator)

    def to_point(self) -> BeatPoint:
        """Build the BeatPoint this far from the origin."""
        return BeatPoint(self.to_duration())

    @classmethod
    def from_duration(cls, duration: BeatDuration) -> BeatDurationModel:
        """Serialize a BeatDuration."""
        return cls(
            beat=duration.beat,
            sub_beat_numerator=duration.sub_beat.numerator,
            sub_beat_denominator=duration.sub_beat.denominator,
        )

    @classmethod
    def from_point(cls, point: BeatPoint) -> BeatDurationModel:
        """Serialize a BeatPoint."""
        return cls.from_duration(point.duration_from_zero)


BeatValue = BeatDurationModel | float


def _to_duration(value: BeatValue, resolution: int) -> BeatDuration:
    if isinstance(value, BeatDurationModel):
        return value.to_duration()
    return BeatDuration.from_float(value, resolution)


class ControlPointConfig(BaseModel):
    """A tempo change and/or stop at a beat position."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    at: BeatValue = Field(description="Beat position (exact form or plain number)")

    tempo_bpm: float | None = Field(
        default=None, allow_inf_nan=False, description="New tempo; omit to keep the current one"
    )

    stop: BeatValue | None = Field(
        default=None, description="Stop length in beats of the tempo in effect at this point"
    )

    @model_validator(mode="after")
    def _validate_point(self) -> Self:
        if self.tempo_bpm is None and self.stop is None:
            raise ValueError("A control point needs a tempo_bpm, a stop, or both")
        if _is_negative(self.at):
            raise ValueError("Control points must be at or after beat 0")
        if self.stop is not None and _is_negative(self.stop):
            raise ValueError("Stop duration must not be negative")
        return self


def _is_negative(value: BeatValue) -> bool:
    if isinstance(value, BeatDurationModel):
        return value.to_duration() < BeatDuration.ZERO
    return value < 0


class ConfigBase(BaseModel):
    """Base class for file-backed tempomap configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path or use default path.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from tempomap.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class TimetableConfig(ConfigBase):
    """A tempo map as authored in a config file.

    Example:
        >>> config = TimetableConfig(
        ...     default_tempo_bpm=120,
        ...     control_points=[{"at": {"beat": 4}, "tempo_bpm": 60}],
        ... )
        >>> config.build().get_time_at(BeatPoint.at(5)).seconds
        3.0
    """

    default_tempo_bpm: float = Field(
        default=130.0, allow_inf_nan=False, description="Tempo at beat 0"
    )

    resolution: int = Field(
        default=960, gt=0, description="Subdivisions per beat for plain-number beat values"
    )

    control_points: list[ControlPointConfig] = Field(default_factory=list)

    @field_validator("default_tempo_bpm")
    @classmethod
    def _validate_default_tempo(cls, value: float) -> float:
        if value == 0:
            raise ValueError("The starting tempo must not be zero")
        return value

    @model_validator(mode="after")
    def _validate_origin(self) -> Self:
        for point in self.control_points:
            at_origin = _to_duration(point.at, self.resolution) == BeatDuration.ZERO
            if at_origin and point.tempo_bpm == 0:
                raise ValueError("The tempo at beat 0 must not be zero")
        return self

    @classmethod
    def default_path(cls) -> Path:
        """Default path for a timetable config."""
        return Path("timetable.yaml")

    def build(self) -> Timetable:
        """Create the Timetable described by this config.

        Later control points at the same position replace earlier ones.
        """
        timetable = Timetable(Tempo.from_bpm(self.default_tempo_bpm))
        for point in self.control_points:
            time = BeatPoint(_to_duration(point.at, self.resolution))
            stop = BeatDuration.ZERO
            if point.stop is not None:
                stop = _to_duration(point.stop, self.resolution)
            if point.tempo_bpm is None:
                timetable.add_stop(time, stop)
            else:
                timetable.add(time, Tempo.from_bpm(point.tempo_bpm), stop)
        logger.debug("Built timetable with %d control points", len(timetable))
        return timetable

    @classmethod
    def from_timetable(cls, timetable: Timetable, resolution: int = 960) -> TimetableConfig:
        """Describe an existing Timetable, keeping every position exact.

        Args:
            timetable: Timetable to serialize
            resolution: Stored for plain-number values added later

        Returns:
            Config whose build() reproduces the timetable's raw entries
        """
        points: list[ControlPointConfig] = []
        for entry in timetable.raw_entries():
            tempo = entry.value.tempo
            stop_duration = entry.value.stop_duration
            if entry.time == BeatPoint.ZERO and stop_duration == BeatDuration.ZERO:
                continue
            points.append(
                ControlPointConfig(
                    at=BeatDurationModel.from_point(entry.time),
                    tempo_bpm=tempo.beats_per_minute if tempo is not None else None,
                    stop=(
                        BeatDurationModel.from_duration(stop_duration)
                        if stop_duration != BeatDuration.ZERO
                        else None
                    ),
                )
            )
        return cls(
            default_tempo_bpm=timetable.default_tempo.beats_per_minute,
            resolution=resolution,
            control_points=points,
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    structured: bool = Field(default=False, description="Emit one JSON object per record")
    filename: str | None = Field(default=None, description="Log file; stdout when omitted")
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(ConfigBase):
    """Application-level configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    timetable: TimetableConfig = Field(default_factory=TimetableConfig)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("tempomap.yaml")
