"""
Tests for MBRConfig.
"""

import os
from unittest.mock import patch

import pytest

from oriented_mbr.config import MBRConfig, get_config


class TestMBRConfig:
    """Test configuration handling."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = MBRConfig()

        assert config.dedup_tolerance == 1e-6
        assert config.angle_tolerance == 1e-10
        assert config.direction_tolerance == 1e-10

    def test_custom_values(self) -> None:
        """Test custom configuration values."""
        config = MBRConfig(
            dedup_tolerance=1e-3,
            angle_tolerance=1e-8,
            direction_tolerance=0.0,
        )

        assert config.dedup_tolerance == 1e-3
        assert config.angle_tolerance == 1e-8
        assert config.direction_tolerance == 0.0

    def test_env_variables(self) -> None:
        """Test configuration from environment variables."""
        with patch.dict(
            os.environ,
            {
                "ORIENTED_MBR_DEDUP_TOLERANCE": "0.001",
                "ORIENTED_MBR_DIRECTION_TOLERANCE": "1e-9",
            },
        ):
            get_config.cache_clear()
            config = get_config()

            assert config.dedup_tolerance == 0.001
            assert config.direction_tolerance == 1e-9
            assert config.angle_tolerance == 1e-10

    def test_dedup_tolerance_validation(self) -> None:
        """Test dedup tolerance validation."""
        # Zero would divide by zero when quantizing
        with pytest.raises(ValueError):
            MBRConfig(dedup_tolerance=0.0)

        # Too high
        with pytest.raises(ValueError):
            MBRConfig(dedup_tolerance=5.0)

    def test_angle_tolerance_validation(self) -> None:
        """Test comparison tolerance validation."""
        with pytest.raises(ValueError):
            MBRConfig(angle_tolerance=-1e-10)

        with pytest.raises(ValueError):
            MBRConfig(direction_tolerance=0.5)

    def test_get_config_cached(self) -> None:
        """Test that get_config returns the same instance."""
        assert get_config() is get_config()
