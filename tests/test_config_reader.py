import pytest

from pathtracer import config_reader
from pathtracer.file_reader import ConfigError
from pathtracer.scene_config import FILE_NAME_DEFAULT, SceneConfig


def _valid_lines():
    return {
        "WindowTitle": "Test Scene",
        "Width": "320",
        "AspectRatio": "1.5",
        "NumRays": "8",
        "NumBounces": "3",
        "ContributionPerBounce": "0.75",
        "FieldOfView": "90",
        "HorizontalRotation": "0.25",
        "VerticalRotation": "-0.5",
        "CameraRotation": "0",
        "CameraOffset_X": "1",
        "CameraOffset_Y": "2",
        "CameraOffset_Z": "-3",
        "PrintPercentStatusEvery": "10",
        "StoreResultToFile": "true",
    }


def test_required_settings_are_applied():
    config = SceneConfig()
    config_reader.interpret_lines(config, _valid_lines())
    assert config.window_title == "Test Scene"
    assert config.width == 320
    assert config.aspect_ratio == 1.5
    assert config.num_rays == 8
    assert config.num_bounces == 3
    assert config.contribution_per_bounce == 0.75
    assert config.field_of_view == 90
    assert config.horizontal_rotation == 0.25
    assert config.vertical_rotation == -0.5
    assert config.camera_rotation == 0.0
    assert config.camera_position == (1.0, 2.0, -3.0)
    assert config.print_percent_status_every == 10
    assert config.store_result_to_file is True


def test_optional_settings_default_when_absent():
    config = SceneConfig()
    config_reader.interpret_lines(config, _valid_lines())
    assert config.scene_seed is None
    assert config.num_threads is None
    assert config.file_name == FILE_NAME_DEFAULT


def test_optional_settings_are_applied():
    lines = _valid_lines() | {"RandomSeed": "42", "NumThreads": "4", "FileName": "out"}
    config = SceneConfig()
    config_reader.interpret_lines(config, lines)
    assert config.scene_seed == 42
    assert config.num_threads == 4
    assert config.file_name == "out"


def test_negative_seed_wraps_to_unsigned():
    config = SceneConfig()
    config_reader.interpret_lines(config, _valid_lines() | {"RandomSeed": "-1"})
    assert config.scene_seed == 4294967295


def test_unreadable_optional_values_are_ignored():
    lines = _valid_lines() | {"RandomSeed": "abc", "NumThreads": "many"}
    config = SceneConfig()
    config_reader.interpret_lines(config, lines)
    assert config.scene_seed is None
    assert config.num_threads is None


@pytest.mark.parametrize(
    "key, value",
    [("Width", "wide"), ("AspectRatio", "x"), ("StoreResultToFile", "yes")],
)
def test_invalid_value_raises_and_leaves_config(key, value):
    lines = _valid_lines() | {key: value}
    config = SceneConfig()
    with pytest.raises(ConfigError):
        config_reader.interpret_lines(config, lines)
    assert config.width == SceneConfig().width
    assert config.window_title == ""


def test_clean_up_lines_and_file(tmp_path):
    path = tmp_path / "scene_config.ini"
    body = "[screen]\n" + "\n".join(f"{k} = {v}" for k, v in _valid_lines().items())
    path.write_text(body + "\n")
    lines = config_reader.clean_up_lines(config_reader.read_config(path))
    assert lines == _valid_lines()
    config = SceneConfig()
    config_reader.interpret_lines(config, lines)
    assert config.width == 320


def test_read_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        config_reader.read_config(tmp_path / "absent.ini")