import json
import logging
import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from logger import level_from_settings


def test_missing_settings_defaults_to_info(tmp_path):
    assert level_from_settings(tmp_path / "settings.json") == logging.INFO


def test_level_read_from_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logLevel": "debug"}))
    assert level_from_settings(path) == logging.DEBUG


def test_unknown_level_defaults_to_info(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"logLevel": "chatty"}))
    assert level_from_settings(path) == logging.INFO


def test_bad_json_defaults_to_info(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    assert level_from_settings(path) == logging.INFO
