"""
Tests for scanner configuration.
"""

import pytest

from boundary_scan.config import ScanMode, ScannerConfig
from boundary_scan.connectivity import ConnectivityType
from boundary_scan.errors import InvalidArgumentError
from boundary_scan.matrix import OutsidePolicy
from boundary_scan.scanning.contour import ContourLineType


class TestScannerConfig:
    """Tests for ScannerConfig dataclass."""

    def test_defaults(self):
        """Test default configuration values."""
        config = ScannerConfig()
        assert config.connectivity is ConnectivityType.STRAIGHT_AND_DIAGONAL
        assert config.mode is ScanMode.ALL
        assert config.outside_policy is OutsidePolicy.BACKGROUND
        assert config.contour_line_type is ContourLineType.STRICT_BOUNDARY
        assert config.check_interval == 1

    def test_string_values_converted_to_enums(self):
        """Test that YAML-style strings are accepted."""
        config = ScannerConfig(
            connectivity="straight_only",
            mode="MAIN",
            outside_policy="strict",
            contour_line_type="pixel_centers_polyline",
        )
        assert config.connectivity is ConnectivityType.STRAIGHT_ONLY
        assert config.mode is ScanMode.MAIN
        assert config.outside_policy is OutsidePolicy.STRICT
        assert config.contour_line_type is ContourLineType.PIXEL_CENTERS_POLYLINE

    def test_invalid_mode_raises_error(self):
        """Test that unknown modes are rejected."""
        with pytest.raises(InvalidArgumentError, match="Invalid mode"):
            ScannerConfig(mode="everything")

    def test_invalid_connectivity_raises_error(self):
        """Test that unknown connectivity is rejected."""
        with pytest.raises(ValueError):
            ScannerConfig(connectivity="hexagonal")

    def test_invalid_contour_line_type_raises_error(self):
        """Test that unknown contour styles are rejected."""
        with pytest.raises(InvalidArgumentError):
            ScannerConfig(contour_line_type="spline")
        with pytest.raises(InvalidArgumentError):
            ScannerConfig(contour_line_type=3)

    @pytest.mark.parametrize("check_interval", [0, -5, 1.5, True])
    def test_invalid_check_interval_raises_error(self, check_interval):
        """Test that check_interval must be a positive integer."""
        with pytest.raises(InvalidArgumentError):
            ScannerConfig(check_interval=check_interval)

    def test_to_dict_and_from_dict_roundtrip(self):
        """Test serialization roundtrip."""
        original = ScannerConfig(
            connectivity=ConnectivityType.STRAIGHT_ONLY,
            mode=ScanMode.SINGLE,
            contour_line_type=ContourLineType.SEGMENT_CENTERS_POLYLINE,
            check_interval=64,
        )
        data = original.to_dict()
        assert data == {
            "connectivity": "straight_only",
            "mode": "single",
            "outside_policy": "background",
            "contour_line_type": "segment_centers_polyline",
            "check_interval": 64,
        }
        assert ScannerConfig.from_dict(data) == original

    def test_from_dict_uses_defaults_for_missing_keys(self):
        """Test partial dictionaries."""
        config = ScannerConfig.from_dict({"mode": "main"})
        assert config.mode is ScanMode.MAIN
        assert config.connectivity is ConnectivityType.STRAIGHT_AND_DIAGONAL

    def test_from_yaml(self, tmp_path):
        """Test loading a scanner section from a YAML file."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            "scanner:\n"
            "  connectivity: straight_only\n"
            "  mode: all\n"
            "  check_interval: 16\n"
        )
        config = ScannerConfig.from_yaml(str(config_path))
        assert config.connectivity is ConnectivityType.STRAIGHT_ONLY
        assert config.mode is ScanMode.ALL
        assert config.check_interval == 16
