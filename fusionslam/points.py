"""Structured point layouts for the supported lidar drivers."""

import numpy as np

__all__ = ["POINT_TYPES", "point_dtype", "empty_cloud"]

_XYZI = [("x", np.float32), ("y", np.float32), ("z", np.float32), ("intensity", np.float32)]

POINT_TYPES = {
    "RsPointXYZIRT": np.dtype(_XYZI + [("ring", np.uint16), ("timestamp", np.float64)]),
    "LsPointXYZIRT": np.dtype(_XYZI + [("ring", np.uint16), ("timestamp", np.float64)]),
    "VelodynePointXYZIRT": np.dtype(_XYZI + [("ring", np.uint16), ("time", np.float32)]),
    "OusterPointXYZIRT": np.dtype(
        _XYZI
        + [
            ("t", np.uint32),
            ("reflectivity", np.uint16),
            ("ring", np.uint8),
            ("noise", np.uint16),
            ("range", np.uint32),
        ]
    ),
    "LivoxMid360PointXYZITLT": np.dtype(
        _XYZI + [("tag", np.uint8), ("line", np.uint8), ("timestamp", np.float64)]
    ),
    "LivoxPointXYZITLT": np.dtype(
        _XYZI + [("time", np.uint32), ("line", np.uint8), ("tag", np.uint8)]
    ),
    "PointXYZIRT": np.dtype(_XYZI + [("ring", np.uint8), ("time", np.float32)]),
}


def point_dtype(name):
    """Return the structured dtype of a named point type."""
    try:
        return POINT_TYPES[name]
    except KeyError:
        raise ValueError(f"unknown point type: {name!r}") from None


def empty_cloud(name, size=0):
    """Return a zero-filled cloud of ``size`` points of the named type."""
    if size < 0:
        raise ValueError("cloud size must not be negative")
    return np.zeros(size, dtype=point_dtype(name))