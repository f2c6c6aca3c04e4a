# fusionslam

Building blocks for the front end of a lidar/IMU fusion SLAM system: sensor
configuration, lidar scan geometry, point record layouts and rigid-body
transforms.

## Modules

- `fusionslam.pose.PoseTransform` is a rigid-body transform made of a 3×3
  rotation (`rot`) and a translation (`trans`). `PoseTransform.identity()` and
  `PoseTransform.from_matrix(m)` (a 4×4 matrix or 16 row-major values) build
  one. Multiplying two transforms with `*` composes them; multiplying by a
  3-vector transforms a point. It also offers `inverse()`, the homogeneous
  `matrix()`, `quaternion()` as `(w, x, y, z)`, roll/pitch/yaw through `rpy()`,
  and the norms `norm_dist()` (translation length) and `norm_rot()` (norm of
  the roll/pitch/yaw vector).
- `fusionslam.units` has `degree_to_radian` and `radian_to_degree`.
- `fusionslam.lidar_model` holds the scan geometry of the supported lidars.
  `LidarType` lists them; `LidarModel.from_type(name)` builds a model for one
  of `LeiShen_16`, `RoboSense_16`, `Velodyne_16`, `Velodyne_32`,
  `Velodyne_64`, `Ouster_128_os1`, `Livox_Mid_360`, `Livox_Avia` or `None`.
  An unknown name gives a model with every field at its maximum value.
  `get_lidar_model(name)` returns the one shared model of the process, created
  from `name` on first call; later calls return the same model whatever name
  they pass. `reset_lidar_model()` forgets it.
- `fusionslam.points` describes the per-point record layouts of the lidar
  drivers as numpy structured dtypes. `POINT_TYPES` maps names such as
  `VelodynePointXYZIRT` or `OusterPointXYZIRT` to dtypes, `point_dtype(name)`
  looks one up (raising `ValueError` for an unknown name), and
  `empty_cloud(name, size)` returns a zero-filled array.
- `fusionslam.config` holds the process-wide `SystemConfig` with its
  `FrontEndConfig` (including a `FusionMode`), `LidarConfig` and
  `StaticImuInitConfig` sections. `get_config()` returns the shared instance
  and `reset_config()` clears it. `SystemConfig.set_config_path(path)` raises
  `FileNotFoundError` when the path does not exist.
- `fusionslam.system.System(params)` reads a nested parameter mapping,
  addressed with slash-separated keys through `get_param(params, key,
  default)` (for example `lidar/lidar_scan` or `calibration/lidar_to_imu`),
  fills the shared configuration, sets up the shared lidar model and records
  its `subscriptions` as `Subscription` entries (topic, queue size, callback).
  A callback appends incoming messages to `lidar_queue` or `imu_queue`, which
  keep the last 10 and 200 messages. A missing or malformed
  `calibration/lidar_to_imu` (not 16 numbers) raises `ValueError`.
- `fusionslam.logger` sets up console logging: `setup_logging(LoggerConfig())`
  installs a stdout handler on the root logger and returns the named logger.
  `level_from_env(var, default)` reads a level name from the environment, and
  `LoggerConfig.log_filename()` gives the log file path inside `dir`.
- `fusionslam.node` holds the command entry point `main(argv=None)`, together
  with `load_params(path)`, `capture_stacktrace(max_frames)` and
  `install_crash_handlers()`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
import numpy as np

from fusionslam.pose import PoseTransform
from fusionslam.units import degree_to_radian
from fusionslam.lidar_model import get_lidar_model

yaw = degree_to_radian(90.0)
rot = np.array([
    [np.cos(yaw), -np.sin(yaw), 0.0],
    [np.sin(yaw),  np.cos(yaw), 0.0],
    [0.0,          0.0,         1.0],
])
T_I_L = PoseTransform(rot, np.array([0.1, 0.0, 0.2]))

print(T_I_L)                    # x: 0.1 y: 0 z: 0.2 roll: 0 pitch: 0 yaw: 1.5708
print(T_I_L * T_I_L.inverse())  # the identity transform
print(T_I_L * [1.0, 0.0, 0.0])  # a transformed point

model = get_lidar_model("Velodyne_16")
print(model.vertical_scan_num, model.horizon_scan_num)  # 16 1800
```

## Running the node

The `fusionslam` command loads an optional YAML parameter file, builds the
system from it and keeps looping until interrupted:

```
fusionslam params.yaml
fusionslam params.yaml --rate 100 --duration 5
```

`--rate` sets the loop rate in Hz (default 1000) and `--duration` stops the
loop after that many seconds. The command returns 1 when the file does not
exist, does not hold a mapping, or has a bad calibration.

The parameter file uses the same names as the configuration keys, for example:

```yaml
sensor_topic:
  lidar_topic: /points_raw
  imu_topic: /imu_raw
lidar:
  lidar_sensor_type: Velodyne_16
  lidar_use_min_distance: 0.15
  lidar_use_max_distance: 50.0
gravity: 9.81
calibration:
  lidar_to_imu: [1, 0, 0, 0,
                 0, 1, 0, 0,
                 0, 0, 1, 0,
                 0, 0, 0, 1]
```

The console log level can be chosen with the `LOG_CONSOLE_LEVEL` environment
variable (`TRACE`, `DEBUG`, `INFO`, `WARN`, `ERROR` or `CRITICAL`).

## What it does not do

The package configures a SLAM front end but does not run one. No messages
reach the system from outside: the subscriptions only record topic names and
queue callbacks, and nothing connects them to a message bus or a sensor
driver. There is no odometry, filtering, point cloud registration, loop
closure or map building, and no log file is written; logging goes to the
console only.