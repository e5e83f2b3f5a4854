import pytest

from pathtracer.file_reader import (
    ConfigError,
    filter_desired_lines,
    generalised_cast,
    read_file_lines,
    split_lines_across_equals,
)


def test_read_file_lines_skips_empty_lines(tmp_path):
    path = tmp_path / "scene_config.ini"
    path.write_text("[Screen]\nWidth = 640\n\nAspectRatio=1.5\n", encoding="utf-8")
    assert read_file_lines(path) == ["[Screen]", "Width = 640", "AspectRatio=1.5"]


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.ini"
    path.write_text("", encoding="utf-8")
    assert read_file_lines(path) == []


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        read_file_lines(tmp_path / "missing.ini")


def test_filter_desired_lines():
    lines = ["[Header]", "a=1", "", "b=2", "[Other]"]
    assert filter_desired_lines(lines, "[") == ["a=1", "b=2"]


def test_split_lines_across_equals():
    lines = ["  Width = 640 \r", "NoEquals", "Trailing=", "Title=a=b", "Width=800"]
    assert split_lines_across_equals(lines) == {"Width": "800", "Title": "a=b"}


def test_split_keeps_blank_values_after_spaces():
    assert split_lines_across_equals(["key=  "]) == {"key": ""}


def test_cast_string_and_bool():
    assert generalised_cast(" raw ", str) == " raw "
    assert generalised_cast("true", bool) is True
    assert generalised_cast("false", bool) is False
    with pytest.raises(ConfigError):
        generalised_cast("True", bool)


@pytest.mark.parametrize("text, expected", [("640", 640), (" -12abc", -12), ("+5", 5)])
def test_cast_int_reads_prefix(text, expected):
    assert generalised_cast(text, int) == expected


@pytest.mark.parametrize("text", ["abc", "", "3000000000"])
def test_cast_int_errors(text):
    with pytest.raises(ConfigError):
        generalised_cast(text, int)


@pytest.mark.parametrize("text, expected", [("1.5", 1.5), (" 2.5x", 2.5), ("-3", -3.0), (".5", 0.5)])
def test_cast_float_reads_prefix(text, expected):
    assert generalised_cast(text, float) == expected


@pytest.mark.parametrize("text", ["abc", "1e400", ""])
def test_cast_float_errors(text):
    with pytest.raises(ConfigError):
        generalised_cast(text, float)


def test_cast_unknown_kind():
    with pytest.raises(TypeError):
        generalised_cast("1", list)