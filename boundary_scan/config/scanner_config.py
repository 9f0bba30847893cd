"""
Scanner configuration.

Groups the choices needed to build and drive a boundary scanner so they can
be loaded from YAML / JSON together with the rest of an application's
settings.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from ..connectivity import ConnectivityType
from ..errors import InvalidArgumentError
from ..matrix import OutsidePolicy
from ..scanning.context import validate_check_interval
from ..scanning.contour import ContourLineType


class ScanMode(Enum):
    """Which boundaries next_boundary() visits."""
    SINGLE = "single"  # every run edge, no memory
    ALL = "all"  # every external and internal boundary once
    MAIN = "main"  # external boundaries of outermost objects only


@dataclass
class ScannerConfig:
    """
    Configuration for create_scanner() and the scan loop.

    Attributes:
        connectivity: Object connectivity
        mode: Boundary discovery mode
        outside_policy: Matrix reads outside the bounds
        contour_line_type: Default contour style for measurements
        check_interval: Steps between interruption checks in scan_boundary()
    """
    connectivity: ConnectivityType = ConnectivityType.STRAIGHT_AND_DIAGONAL
    mode: ScanMode = ScanMode.ALL
    outside_policy: OutsidePolicy = OutsidePolicy.BACKGROUND
    contour_line_type: ContourLineType = field(default=ContourLineType.STRICT_BOUNDARY)
    check_interval: int = 1

    def __post_init__(self):
        """Convert string values to enums and validate."""
        self._validate()

    def _validate(self):
        self.connectivity = _to_enum(ConnectivityType, self.connectivity, "connectivity")
        self.mode = _to_enum(ScanMode, self.mode, "mode")
        self.outside_policy = _to_enum(OutsidePolicy, self.outside_policy, "outside_policy")
        if isinstance(self.contour_line_type, str):
            self.contour_line_type = ContourLineType.from_name(self.contour_line_type)
        elif not isinstance(self.contour_line_type, ContourLineType):
            raise InvalidArgumentError(
                f"contour_line_type must be a ContourLineType, got {self.contour_line_type!r}"
            )

        validate_check_interval(self.check_interval)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "connectivity": self.connectivity.value,
            "mode": self.mode.value,
            "outside_policy": self.outside_policy.value,
            "contour_line_type": self.contour_line_type.name.lower(),
            "check_interval": self.check_interval,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScannerConfig":
        """Create from dictionary (e.g., from YAML config)."""
        return cls(
            connectivity=data.get("connectivity", ConnectivityType.STRAIGHT_AND_DIAGONAL),
            mode=data.get("mode", ScanMode.ALL),
            outside_policy=data.get("outside_policy", OutsidePolicy.BACKGROUND),
            contour_line_type=data.get("contour_line_type", ContourLineType.STRICT_BOUNDARY),
            check_interval=data.get("check_interval", 1),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ScannerConfig":
        """Load configuration from a YAML file, optionally under a "scanner" key."""
        import yaml

        with open(yaml_path, "r") as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data.get("scanner", data))


def _to_enum(enum_type, value, name: str):
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value.lower() if isinstance(value, str) else value)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid {name}: {value!r}") from e
