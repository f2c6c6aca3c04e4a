import faulthandler
import logging
import sys

import pytest
import yaml

from fusionslam.config import get_config, reset_config
from fusionslam.lidar_model import reset_lidar_model
from fusionslam.node import capture_stacktrace, install_crash_handlers, load_params, main

PARAMS = {
    "sensor_topic": {"lidar_topic": "/points_raw", "imu_topic": "/imu_raw"},
    "lidar": {"lidar_sensor_type": "Velodyne_16"},
    "calibration": {"lidar_to_imu": [1.0, 0.0, 0.0, 0.0,
                                     0.0, 1.0, 0.0, 0.0,
                                     0.0, 0.0, 1.0, 0.0,
                                     0.0, 0.0, 0.0, 1.0]},
}


@pytest.fixture(autouse=True)
def _clean_state():
    hook = sys.excepthook
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    reset_config()
    reset_lidar_model()
    yield
    sys.excepthook = hook
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    reset_config()
    reset_lidar_model()


def test_capture_stacktrace_header_and_caller():
    text = capture_stacktrace()
    lines = text.splitlines()
    assert lines[0] == "Stacktrace:"
    assert "test_capture_stacktrace_header_and_caller" in lines[1]
    assert lines[1].startswith("  0: ")


def test_capture_stacktrace_limits_frames():
    lines = capture_stacktrace(1).splitlines()
    assert len(lines) == 2
    assert "test_capture_stacktrace_limits_frames" in lines[1]


def test_load_params_round_trip(tmp_path):
    path = tmp_path / "params.yaml"
    path.write_text(yaml.safe_dump(PARAMS), encoding="utf-8")
    assert load_params(path) == PARAMS


def test_load_params_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_params(path) == {}


def test_load_params_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_params(path)


def test_install_crash_handlers():
    hook = install_crash_handlers()
    assert sys.excepthook is hook
    assert faulthandler.is_enabled()


def test_main_runs_and_loads_config(tmp_path):
    path = tmp_path / "params.yaml"
    path.write_text(yaml.safe_dump(PARAMS), encoding="utf-8")
    assert main([str(path), "--duration", "0"]) == 0
    cfg = get_config()
    assert cfg.lidar_topic == "/points_raw"
    assert cfg.config_path == str(path)


def test_main_missing_params_file(tmp_path):
    assert main([str(tmp_path / "absent.yaml"), "--duration", "0"]) == 1


def test_main_rejects_bad_calibration(tmp_path):
    params = dict(PARAMS, calibration={"lidar_to_imu": [1.0, 2.0]})
    path = tmp_path / "params.yaml"
    path.write_text(yaml.safe_dump(params), encoding="utf-8")
    assert main([str(path), "--duration", "0"]) == 1


def test_main_rejects_non_positive_rate():
    with pytest.raises(SystemExit):
        main(["--rate", "0"])