import logging

import pytest

from fusionslam.lidar_model import (
    FLOAT_MAX,
    INT_MAX,
    LidarModel,
    LidarType,
    get_lidar_model,
    reset_lidar_model,
)
from fusionslam.units import degree_to_radian


@pytest.fixture(autouse=True)
def fresh_model():
    reset_lidar_model()
    yield
    reset_lidar_model()


def test_velodyne_16():
    model = LidarModel.from_type("Velodyne_16")
    assert model.lidar_sensor_type is LidarType.Velodyne16
    assert model.vertical_scan_num == 16
    assert model.horizon_scan_num == 1800
    assert model.h_res == pytest.approx(degree_to_radian(0.2), rel=1e-6)
    assert model.v_res == pytest.approx(degree_to_radian(2.0), rel=1e-6)
    assert model.lower_angle == pytest.approx(degree_to_radian(15.0), rel=1e-6)


def test_leishen_16():
    model = LidarModel.from_type("LeiShen_16")
    assert model.lidar_sensor_type is LidarType.LEISHEN16
    assert model.horizon_scan_num == 2000
    assert model.h_res == pytest.approx(degree_to_radian(0.18), rel=1e-6)


def test_velodyne_32_uneven_resolution():
    model = LidarModel.from_type("Velodyne_32")
    assert model.vertical_scan_num == 32
    assert model.v_res == pytest.approx(degree_to_radian(1.290322581), rel=1e-6)
    assert model.lower_angle == pytest.approx(degree_to_radian(30.0), rel=1e-6)


def test_ouster_128():
    model = LidarModel.from_type("Ouster_128_os1")
    assert model.lidar_sensor_type is LidarType.OUSTER128
    assert model.vertical_scan_num == 128
    assert model.horizon_scan_num == 1024
    assert model.h_res * model.horizon_scan_num == pytest.approx(
        degree_to_radian(360.0), rel=1e-6
    )


@pytest.mark.parametrize(
    "name, kind", [("Livox_Mid_360", LidarType.MID360), ("Livox_Avia", LidarType.AVIA)]
)
def test_solid_state(name, kind):
    model = LidarModel.from_type(name)
    assert model.lidar_sensor_type is kind
    assert model.vertical_scan_num == -1
    assert model.horizon_scan_num == -1
    assert (model.h_res, model.v_res, model.lower_angle) == (0.0, 0.0, 0.0)


def test_none_type_zeroes_everything(caplog):
    with caplog.at_level(logging.INFO):
        model = LidarModel.from_type("None")
    assert model.lidar_sensor_type is LidarType.NONE
    assert model.vertical_scan_num == 0
    assert model.horizon_scan_num == 0
    assert "lidar type as None" in caplog.text


def test_unsupported_type_keeps_defaults(caplog):
    with caplog.at_level(logging.INFO):
        model = LidarModel.from_type("Quanergy")
    assert model == LidarModel()
    assert model.vertical_scan_num == INT_MAX
    assert model.h_res == FLOAT_MAX
    assert "Unsupported lidar sensor type" in caplog.text


def test_enum_values_follow_source_order():
    assert [t.value for t in LidarType] == list(range(9))
    assert LidarType(0) is LidarType.AVIA


def test_shared_model_created_once():
    first = get_lidar_model("Velodyne_32")
    second = get_lidar_model("Velodyne_64")
    assert first is second
    assert second.vertical_scan_num == 32


def test_shared_model_is_mutable():
    get_lidar_model("None").horizon_scan_num = 6
    assert get_lidar_model().horizon_scan_num == 6


def test_reset_allows_new_type():
    get_lidar_model("Velodyne_16")
    reset_lidar_model()
    assert get_lidar_model("Velodyne_64").lidar_sensor_type is LidarType.Velodyne64