import json
import math

from vecpath import config
from vecpath.settings_schema import ViewerSettings, coerce_box_width, load_last_used, save_last_used


def test_missing_file_loads_defaults(tmp_path):
    settings = load_last_used(tmp_path / "missing.json")

    assert settings == ViewerSettings()
    assert settings.box_width == config.DEFAULT_BOX_WIDTH


def test_malformed_file_loads_defaults(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json")

    assert load_last_used(settings_path) == ViewerSettings()


def test_non_object_payload_loads_defaults(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps([1, 2, 3]))

    assert load_last_used(settings_path) == ViewerSettings()


def test_save_and_load_round_trip(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings = ViewerSettings(box_width=12.5, show_spinner=False, window_width=800, zoom=2.0)

    written = save_last_used(settings, settings_path)

    assert written == settings_path
    assert load_last_used(settings_path) == settings


def test_partial_payload_keeps_defaults_for_missing_keys(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"box_width": "7", "fps": 30}))

    settings = load_last_used(settings_path)

    assert settings.box_width == 7.0
    assert settings.fps == 30
    assert settings.spinner_width == config.DEFAULT_SPINNER_WIDTH


def test_zero_fps_is_clamped(tmp_path):
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"fps": 0}))

    assert load_last_used(settings_path).fps == 1
    assert ViewerSettings.from_json({"fps": -30}).fps == 1


def test_unusable_box_width_keeps_fallback():
    for value in ("-3", "0", "nan", "inf", "wide", None):
        assert coerce_box_width(value, 12.0) == 12.0
    assert coerce_box_width("4.5", 12.0) == 4.5
    assert math.isfinite(ViewerSettings.from_json({"box_width": float("nan")}).box_width)


def test_save_creates_missing_parent_directory(tmp_path):
    settings_path = tmp_path / "nested" / "settings.json"

    save_last_used(ViewerSettings(box_width=3.0), settings_path)

    assert load_last_used(settings_path).box_width == 3.0
