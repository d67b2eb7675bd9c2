"""Tests for persisted search defaults and their safe fallbacks."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rfind import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing" / "config.json"
            with mock.patch("rfind.config.CONFIG_PATH", config_path), mock.patch.dict(
                "os.environ", {}, clear=True
            ):
                self.assertEqual(config.load_config(), {})
                self.assertFalse(config.load_show_hidden())
                self.assertEqual(config.load_style(), "monokai")
                self.assertFalse(config.load_no_color())

    def test_show_hidden_is_read_from_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("rfind.config.CONFIG_PATH", config_path):
                config_path.write_text('{"show_hidden": true}', encoding="utf-8")
                self.assertTrue(config.load_show_hidden())
                config_path.write_text('{"show_hidden": false}', encoding="utf-8")
                self.assertFalse(config.load_show_hidden())

    def test_malformed_config_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("rfind.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

            config_path.write_text("[1, 2, 3]", encoding="utf-8")
            with mock.patch("rfind.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_boolean_values_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text('{"show_hidden": "yes", "style": "  ", "no_color": 1}', encoding="utf-8")
            with mock.patch("rfind.config.CONFIG_PATH", config_path), mock.patch.dict(
                "os.environ", {}, clear=True
            ):
                self.assertFalse(config.load_show_hidden())
                self.assertEqual(config.load_style(), "monokai")
                self.assertFalse(config.load_no_color())

    def test_no_color_environment_variable_disables_colour(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("rfind.config.CONFIG_PATH", config_path), mock.patch.dict(
                "os.environ", {"NO_COLOR": "1"}, clear=True
            ):
                self.assertTrue(config.load_no_color())

    def test_style_is_read_from_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("rfind.config.CONFIG_PATH", config_path):
                config_path.write_text('{"style": "friendly"}', encoding="utf-8")
                self.assertEqual(config.load_style(), "friendly")


if __name__ == "__main__":
    unittest.main()
