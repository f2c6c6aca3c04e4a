"""Rigid-body transforms built from a rotation matrix and a translation."""

import math

import numpy as np

__all__ = ["PoseTransform"]


def _as_array(value, shape, what):
    arr = np.array(value, dtype=float)
    if arr.shape != shape:
        raise ValueError(f"{what} must have shape {shape}, got {arr.shape}")
    return arr


class PoseTransform:
    """A rigid transform: rotation ``rot`` (3x3) and translation ``trans`` (3,)."""

    __slots__ = ("rot", "trans")

    def __init__(self, rot=None, trans=None):
        self.rot = np.eye(3) if rot is None else _as_array(rot, (3, 3), "rotation")
        self.trans = np.zeros(3) if trans is None else _as_array(trans, (3,), "translation")

    @classmethod
    def identity(cls):
        """Return the identity transform."""
        return cls()

    @classmethod
    def from_matrix(cls, matrix):
        """Build a transform from a 4x4 homogeneous matrix or 16 row-major values."""
        arr = np.array(matrix, dtype=float)
        if arr.size != 16:
            raise ValueError(f"expected 16 values for a 4x4 matrix, got {arr.size}")
        arr = arr.reshape(4, 4)
        return cls(arr[:3, :3], arr[:3, 3])

    def __mul__(self, other):
        if isinstance(other, PoseTransform):
            return PoseTransform(self.rot @ other.rot, self.rot @ other.trans + self.trans)
        try:
            point = np.array(other, dtype=float)
        except (TypeError, ValueError):
            return NotImplemented
        if point.shape != (3,):
            return NotImplemented
        return self.rot @ point + self.trans

    def inverse(self):
        """Return the inverse transform."""
        rot_inv = np.linalg.inv(self.rot)
        return PoseTransform(rot_inv, -rot_inv @ self.trans)

    def matrix(self):
        """Return the 4x4 homogeneous matrix."""
        ret = np.eye(4)
        ret[:3, :3] = self.rot
        ret[:3, 3] = self.trans
        return ret

    def quaternion(self):
        """Return the rotation as a quaternion ``(w, x, y, z)``."""
        r = self.rot
        diag_sum = float(r[0, 0] + r[1, 1] + r[2, 2])
        q = [0.0, 0.0, 0.0]
        if diag_sum > 0.0:
            s = math.sqrt(diag_sum + 1.0)
            w = 0.5 * s
            s = 0.5 / s
            q = [(r[2, 1] - r[1, 2]) * s, (r[0, 2] - r[2, 0]) * s, (r[1, 0] - r[0, 1]) * s]
        else:
            i = int(np.argmax(np.diag(r)))
            j = (i + 1) % 3
            k = (j + 1) % 3
            s = math.sqrt(r[i, i] - r[j, j] - r[k, k] + 1.0)
            q[i] = 0.5 * s
            s = 0.5 / s
            w = (r[k, j] - r[j, k]) * s
            q[j] = (r[j, i] + r[i, j]) * s
            q[k] = (r[k, i] + r[i, k]) * s
        return (float(w), float(q[0]), float(q[1]), float(q[2]))

    def rpy(self):
        """Return roll, pitch and yaw angles as an array."""
        r = self.rot
        pitch = math.asin(r[2, 0])
        c_pitch = math.cos(pitch)
        roll = math.atan2(r[2, 1] / c_pitch, r[2, 2] / c_pitch)
        yaw = math.atan2(r[1, 0] / c_pitch, r[0, 0] / c_pitch)
        return np.array([roll, pitch, yaw])

    def norm_dist(self):
        """Length of the translation."""
        return float(np.linalg.norm(self.trans))

    def norm_rot(self):
        """Norm of the roll/pitch/yaw vector."""
        return float(np.linalg.norm(self.rpy()))

    def __str__(self):
        roll, pitch, yaw = self.rpy()
        x, y, z = self.trans
        return (
            f"x: {x:g} y: {y:g} z: {z:g} "
            f"roll: {roll:g} pitch: {pitch:g} yaw: {yaw:g}"
        )

    def __repr__(self):
        return f"PoseTransform(rot={self.rot.tolist()!r}, trans={self.trans.tolist()!r})"