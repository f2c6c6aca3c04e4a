"""Lidar sensor models and the process-wide active model."""

import enum
import logging
import threading
from dataclasses import dataclass

import numpy as np

from .units import degree_to_radian

__all__ = [
    "INT_MAX",
    "FLOAT_MAX",
    "LidarType",
    "LidarModel",
    "get_lidar_model",
    "reset_lidar_model",
]

_log = logging.getLogger(__name__)

INT_MAX = 2**31 - 1
FLOAT_MAX = float(np.finfo(np.float32).max)


class LidarType(enum.Enum):
    AVIA = 0
    MID360 = 1
    LEISHEN16 = 2
    ROBOSENSE16 = 3
    Velodyne16 = 4
    Velodyne32 = 5
    Velodyne64 = 6
    OUSTER128 = 7
    NONE = 8


def _f32(value):
    return float(np.float32(value))


def _rad(deg):
    return _f32(degree_to_radian(_f32(deg)))


# name -> (type, vertical scans, horizontal scans, h_res deg, v_res deg, lower angle deg)
_KNOWN_MODELS = {
    "LeiShen_16": (LidarType.LEISHEN16, 16, 2000, 0.18, 2.0, 15.0),
    "RoboSense_16": (LidarType.ROBOSENSE16, 16, 1800, 0.2, 2.0, 15.0),
    "Velodyne_16": (LidarType.Velodyne16, 16, 1800, 0.2, 2.0, 15.0),
    # 32-line Velodyne beams are not evenly spaced
    "Velodyne_32": (LidarType.Velodyne32, 32, 1800, 0.2, 1.290322581, 30.0),
    "Velodyne_64": (LidarType.Velodyne64, 64, 1800, 0.2, 0.4, 24.9),
    # rings numbered 0..127 top to bottom; very near points are unreliable
    "Ouster_128_os1": (LidarType.OUSTER128, 128, 1024, 360.0 / 1024.0, 0.35, 22.5),
}

_SOLID_STATE = {
    "Livox_Mid_360": LidarType.MID360,
    "Livox_Avia": LidarType.AVIA,
}


@dataclass
class LidarModel:
    """Scan geometry of a lidar; angles are in radians."""

    lidar_sensor_type: LidarType = LidarType.NONE
    vertical_scan_num: int = INT_MAX
    horizon_scan_num: int = INT_MAX
    h_res: float = FLOAT_MAX
    v_res: float = FLOAT_MAX
    lower_angle: float = FLOAT_MAX

    @classmethod
    def from_type(cls, lidar_type):
        """Build the model for a named sensor type."""
        if lidar_type in _KNOWN_MODELS:
            kind, vertical, horizon, h_res, v_res, lower = _KNOWN_MODELS[lidar_type]
            return cls(kind, vertical, horizon, _rad(h_res), _rad(v_res), _rad(lower))
        if lidar_type in _SOLID_STATE:
            return cls(_SOLID_STATE[lidar_type], -1, -1, 0.0, 0.0, 0.0)
        if lidar_type == "None":
            _log.info(
                "You set lidar type as None, So don't forget to set lidar parameters by yourself. "
                "If you have set, can ignore this prompt"
            )
            return cls(LidarType.NONE, 0, 0, 0.0, 0.0, 0.0)
        _log.info("Unsupported lidar sensor type")
        return cls()


_lock = threading.Lock()
_instance = None


def get_lidar_model(lidar_type=""):
    """Return the shared model, creating it from ``lidar_type`` on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = LidarModel.from_type(lidar_type)
        return _instance


def reset_lidar_model():
    """Forget the shared model so the next call creates a new one."""
    global _instance
    with _lock:
        _instance = None