"""Process-wide system configuration."""

import enum
import logging
import os
import threading
from dataclasses import dataclass, field

from .pose import PoseTransform

__all__ = [
    "FusionMode",
    "FrontEndConfig",
    "LidarConfig",
    "StaticImuInitConfig",
    "SystemConfig",
    "get_config",
    "reset_config",
]

_log = logging.getLogger(__name__)


class FusionMode(enum.Enum):
    """How the front end fuses sensor data."""

    IESKF_MODE = 1
    OPTIMIZE = 2


@dataclass
class FrontEndConfig:
    """Settings of the front-end odometry."""

    axis9_imu: bool = False
    fusion_mode: FusionMode = FusionMode.IESKF_MODE


@dataclass
class LidarConfig:
    """Lidar settings read from the parameters."""

    lidar_type: str = ""
    lidar_scan: int = 0
    lidar_horizon_scan: int = 0
    lidar_point_filter: int = 0
    lidar_vertical_resolution: float = 0.0
    lidar_lower_angle: float = 0.0
    lidar_time_scale: float = 0.0
    lidar_rotation_noise: float = 0.0
    lidar_position_noise: float = 0.0
    lidar_min_dist: float = 0.0
    lidar_max_dist: float = 0.0


@dataclass
class StaticImuInitConfig:
    """Settings of the static IMU initialisation."""

    init_time: float = 2.0
    use_odom: bool = False
    max_init_size: int = 200
    max_static_gyro_var: float = 0.5
    max_static_acc_var: float = 0.05
    gravity_norm: float = 9.81


@dataclass(eq=False)
class SystemConfig:
    """All settings of the running system."""

    config_path: str = ""
    T_I_L: PoseTransform = field(default_factory=PoseTransform.identity)
    T_E_L: PoseTransform = field(default_factory=PoseTransform.identity)
    lidar_topic: str = ""
    imu_topic: str = ""
    encoder_topic: str = ""
    gnss_topic: str = ""
    frontend_config: FrontEndConfig = field(default_factory=FrontEndConfig)
    lidar_config: LidarConfig = field(default_factory=LidarConfig)
    imu_init_config: StaticImuInitConfig = field(default_factory=StaticImuInitConfig)

    def set_config_path(self, path):
        """Record ``path`` as the configuration path; it must exist."""
        path = os.fspath(path)
        if not os.path.exists(path):
            _log.error("Config path no exists!")
            raise FileNotFoundError(f"config path does not exist: {path}")
        _log.info("Load config path:%s", path)
        self.config_path = path


_lock = threading.Lock()
_instance = None


def get_config():
    """Return the shared configuration, creating it on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = SystemConfig()
        return _instance


def reset_config():
    """Forget the shared configuration so the next call creates a fresh one."""
    global _instance
    with _lock:
        _instance = None