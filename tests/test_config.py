"""
Tests for configuration validation.
"""

import math

import pytest
from track_mobility import (
    DEFAULT_POSITION_UPDATER_CONFIG,
    PositionUpdaterConfiguration,
    TrackMobilityConfiguration,
)


class TestPositionUpdaterConfiguration:
    """Test the updater limits."""

    def test_shipped_defaults(self):
        assert DEFAULT_POSITION_UPDATER_CONFIG == PositionUpdaterConfiguration(
            max_speed=4.0, acceleration=2.0, deceleration=2.0, min_distance=0.001
        )

    def test_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_POSITION_UPDATER_CONFIG.max_speed = 10.0

    @pytest.mark.parametrize("field", ["max_speed", "acceleration", "deceleration"])
    @pytest.mark.parametrize("value", [0.0, -1.0, math.nan, math.inf])
    def test_positive_limits_required(self, field, value):
        params = dict(max_speed=4.0, acceleration=2.0, deceleration=2.0, min_distance=0.001)
        params[field] = value
        with pytest.raises(ValueError):
            PositionUpdaterConfiguration(**params)

    def test_zero_min_distance_allowed(self):
        config = PositionUpdaterConfiguration(max_speed=1.0, acceleration=1.0, deceleration=1.0, min_distance=0.0)
        assert config.min_distance == 0.0

    def test_negative_min_distance_rejected(self):
        with pytest.raises(ValueError):
            PositionUpdaterConfiguration(max_speed=1.0, acceleration=1.0, deceleration=1.0, min_distance=-0.1)


class TestTrackMobilityConfiguration:
    """Test the handler configuration."""

    def test_axis_normalized(self):
        config = TrackMobilityConfiguration(update_rate=0.01, track_axis=(0.0, 3.0, 4.0))
        assert config.track_axis == pytest.approx((0.0, 0.6, 0.8))

    def test_defaults(self):
        config = TrackMobilityConfiguration(update_rate=0.01)
        assert config.updater == DEFAULT_POSITION_UPDATER_CONFIG
        assert config.send_telemetry is True
        assert config.telemetry_decimation == 1

    @pytest.mark.parametrize(
        "overrides",
        [
            dict(update_rate=0.0),
            dict(update_rate=-0.1),
            dict(track_half_length=0.0),
            dict(track_axis=(0.0, 0.0, 0.0)),
            dict(telemetry_decimation=0),
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        params = dict(update_rate=0.01)
        params.update(overrides)
        with pytest.raises(ValueError):
            TrackMobilityConfiguration(**params)
