"""Configuration, lidar models, point layouts and pose utilities for lidar/IMU fusion SLAM."""

__version__ = "0.1.0"