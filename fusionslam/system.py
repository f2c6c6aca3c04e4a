"""The SLAM system: reads parameters, sets up the lidar model and subscriptions."""

import collections
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from .config import get_config
from .lidar_model import LidarType, get_lidar_model
from .pose import PoseTransform
from .units import degree_to_radian

__all__ = ["Subscription", "System", "get_param"]

_log = logging.getLogger(__name__)

LIDAR_QUEUE_SIZE = 10
IMU_QUEUE_SIZE = 200


def get_param(params, key, default=None):
    """Look up a slash-separated ``key`` in nested ``params``; ``default`` if absent."""
    node = params
    for part in key.strip("/").split("/"):
        if not isinstance(node, Mapping) or part not in node:
            return default
        node = node[part]
    return node


@dataclass
class Subscription:
    """A topic the system listens on."""

    topic: str
    queue_size: int
    callback: Callable[[Any], None]


class System:
    """Holds the configured sensors and the incoming message queues."""

    def __init__(self, params):
        self.params = params if params is not None else {}
        self.config = get_config()
        self.lidar_model = None
        self.subscriptions = {}
        self.lidar_queue = collections.deque(maxlen=LIDAR_QUEUE_SIZE)
        self.imu_queue = collections.deque(maxlen=IMU_QUEUE_SIZE)
        self.load_config()
        self.init_lidar_model()
        _log.info("init sub pub")
        self.init_subscriptions()

    def load_config(self):
        """Fill the shared configuration from the parameters."""
        config = self.config
        params = self.params

        config.lidar_topic = str(get_param(params, "sensor_topic/lidar_topic", config.lidar_topic))
        config.imu_topic = str(get_param(params, "sensor_topic/imu_topic", config.imu_topic))
        _log.info("lidar_topic:%s", config.lidar_topic)
        _log.info("imu_topic:%s", config.imu_topic)

        lidar = config.lidar_config
        lidar.lidar_type = str(get_param(params, "lidar/lidar_sensor_type", ""))
        lidar.lidar_point_filter = int(get_param(params, "lidar/lidar_point_jump_span", 2))
        lidar.lidar_scan = int(get_param(params, "lidar/lidar_scan", 16))
        lidar.lidar_lower_angle = float(get_param(params, "lidar/lidar_lower_angle", 0.0))
        lidar.lidar_horizon_scan = int(get_param(params, "lidar/lidar_horizon_scan", 6))
        lidar.lidar_vertical_resolution = float(
            get_param(params, "lidar/lidar_vertical_resolution", 1.6)
        )
        lidar.lidar_min_dist = float(get_param(params, "lidar/lidar_use_min_distance", 0.15))
        lidar.lidar_max_dist = float(get_param(params, "lidar/lidar_use_max_distance", 50.0))
        lidar.lidar_time_scale = float(get_param(params, "lidar/lidar_point_time_scale", 1e9))
        lidar.lidar_rotation_noise = float(
            get_param(params, "lidar/lidar_rotation_noise_std", 0.01)
        )
        lidar.lidar_position_noise = float(
            get_param(params, "lidar/lidar_position_noise_std", 0.03)
        )
        _log.info("lidar_sensor_type:%s", lidar.lidar_type)
        _log.info("lidar_point_jump_span:%s", lidar.lidar_point_filter)
        _log.info("lidar_scan:%s", lidar.lidar_scan)
        _log.info("lidar_lower_angle:%s", lidar.lidar_lower_angle)
        _log.info("lidar_horizon_scan:%s", lidar.lidar_horizon_scan)
        _log.info("lidar_vertical_resolution:%s", lidar.lidar_vertical_resolution)
        _log.info("lidar_use_min_distance:%s", lidar.lidar_min_dist)
        _log.info("lidar_use_max_distance:%s", lidar.lidar_max_dist)
        _log.info("lidar_time_scale:%s", lidar.lidar_time_scale)
        _log.info("lidar_rotation_noise:%s", lidar.lidar_rotation_noise)
        _log.info("lidar_position_noise_std:%s", lidar.lidar_position_noise)

        config.imu_init_config.gravity_norm = float(get_param(params, "gravity", 9.81))
        _log.info("gravity:%s", config.imu_init_config.gravity_norm)

        lidar_to_imu = get_param(params, "calibration/lidar_to_imu", [])
        try:
            config.T_I_L = PoseTransform.from_matrix(lidar_to_imu)
        except (TypeError, ValueError) as exc:
            raise ValueError("calibration/lidar_to_imu must hold 16 numbers") from exc
        _log.info("T_I_L:\n%s", config.T_I_L.matrix())

    def init_lidar_model(self):
        """Create the shared lidar model from the configured sensor type."""
        _log.info("Init Lidar Model")
        lidar = self.config.lidar_config
        model = get_lidar_model(lidar.lidar_type)
        if lidar.lidar_type == "None":
            horizon = lidar.lidar_horizon_scan
            model.horizon_scan_num = horizon
            model.vertical_scan_num = lidar.lidar_scan
            with np.errstate(divide="ignore"):
                step = np.float32(360.0) / np.float32(horizon)
            model.h_res = float(np.float32(degree_to_radian(float(step))))
            model.v_res = float(np.float32(degree_to_radian(lidar.lidar_vertical_resolution)))
            model.lower_angle = float(np.float32(degree_to_radian(lidar.lidar_lower_angle)))
        self.lidar_model = model

    def init_subscriptions(self):
        """Register the lidar and IMU subscriptions."""
        config = self.config
        self.subscriptions = {}
        if self.lidar_model.lidar_sensor_type != LidarType.AVIA:
            self.subscriptions["lidar"] = Subscription(
                config.lidar_topic, LIDAR_QUEUE_SIZE, self._on_lidar
            )
        self.subscriptions["imu"] = Subscription(config.imu_topic, IMU_QUEUE_SIZE, self._on_imu)

    def _on_lidar(self, msg):
        self.lidar_queue.append(msg)

    def _on_imu(self, msg):
        self.imu_queue.append(msg)