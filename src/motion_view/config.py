import os
from dataclasses import dataclass
from typing import Optional

from motion_view.manager import ReferenceFrame

__doc__ = """Runtime configuration from MOTION_VIEW_* environment variables."""

ENV_PREFIX = "MOTION_VIEW_"

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class MotionConfig:
    interval: float = 0.1  # seconds between samples
    reference_frame: ReferenceFrame = ReferenceFrame.X_MAGNETIC_NORTH_Z_VERTICAL
    simulator: bool = False  # show placeholders instead of sensor values
    device_name: Optional[str] = None  # peripheral name filter
    scan_timeout: float = 5.0
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "MotionConfig":
        """Build a config from the environment, falling back to defaults.

        Raises ValueError for values that cannot be parsed."""
        environ = os.environ if environ is None else environ
        config = cls()

        def get(name):
            return environ.get(ENV_PREFIX + name)

        if (value := get("INTERVAL")) is not None:
            config.interval = _parse_float("INTERVAL", value)
            if config.interval <= 0:
                raise ValueError(f"{ENV_PREFIX}INTERVAL must be positive, got {value}")

        if (value := get("REFERENCE_FRAME")) is not None:
            config.reference_frame = parse_reference_frame(value)

        if (value := get("SIMULATOR")) is not None:
            config.simulator = _parse_bool("SIMULATOR", value)

        if value := get("DEVICE_NAME"):
            config.device_name = value

        if (value := get("SCAN_TIMEOUT")) is not None:
            config.scan_timeout = _parse_float("SCAN_TIMEOUT", value)
            if config.scan_timeout <= 0:
                raise ValueError(f"{ENV_PREFIX}SCAN_TIMEOUT must be positive, got {value}")

        if value := get("LOG_LEVEL"):
            config.log_level = value.strip().upper()
            if config.log_level not in LOG_LEVELS:
                levels = ", ".join(sorted(LOG_LEVELS))
                raise ValueError(
                    f"{ENV_PREFIX}LOG_LEVEL must be one of {levels}, got {value!r}"
                )

        if value := get("LOG_FILE"):
            config.log_file = value

        return config


def parse_reference_frame(value: str) -> ReferenceFrame:
    """Accepts enum names in any case, e.g. x_magnetic_north_z_vertical."""
    try:
        return ReferenceFrame[value.strip().upper()]
    except KeyError:
        names = ", ".join(frame.name.lower() for frame in ReferenceFrame)
        raise ValueError(f"Unknown reference frame {value!r}, expected one of {names}") from None


def _parse_float(name, value):
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {value!r}") from None


def _parse_bool(name, value):
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {value!r}")
