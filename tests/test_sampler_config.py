"""Tests for SamplerConfig validation."""

from __future__ import annotations

import math

import pytest

from BlueNoise import InvalidParameterError, SamplerConfig


def test_defaults() -> None:
	config = SamplerConfig(10, 20, 1).validate()
	assert config.max_samples == SamplerConfig.DEFAULT_MAX_SAMPLES == 4
	assert config.seed is None
	assert config.extent == (10.0, 20.0)
	assert isinstance(config.width, float)


@pytest.mark.parametrize(
	"kwargs",
	[
		{"width": 0},
		{"width": -1.0},
		{"height": 0.0},
		{"min_radius": 0},
		{"min_radius": -2.0},
		{"width": math.inf},
		{"height": math.nan},
		{"width": "10"},
		{"max_samples": 0},
		{"max_samples": 2.5},
		{"seed": -3},
	],
)
def test_invalid_values(kwargs) -> None:
	fields = {"width": 10.0, "height": 10.0, "min_radius": 1.0}
	fields.update(kwargs)
	with pytest.raises(InvalidParameterError):
		SamplerConfig(**fields).validate()


def test_replace_keeps_config_immutable() -> None:
	config = SamplerConfig(10.0, 10.0, 1.0).validate()
	changed = config._replace(max_samples=8).validate()
	assert config.max_samples == 4
	assert changed.max_samples == 8
	with pytest.raises(AttributeError):
		config.width = 5.0
