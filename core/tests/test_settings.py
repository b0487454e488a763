"""Tests for analyzer settings loading."""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from core.errors import ConfigValidationError
from core.settings import AnalyzerSettings, load_analyzer_settings


class TestAnalyzerSettings(unittest.TestCase):
    def _write_settings(self, content: str) -> str:
        handle = tempfile.NamedTemporaryFile(mode="w", suffix=".yml", delete=False)
        handle.write(content)
        handle.flush()
        handle.close()
        self.addCleanup(Path(handle.name).unlink, missing_ok=True)
        return handle.name

    def test_defaults(self) -> None:
        settings = load_analyzer_settings(use_env=False)
        self.assertEqual(settings, AnalyzerSettings())
        self.assertIsNone(settings.max_workers)
        self.assertTrue(settings.continue_on_error)

    def test_load_yaml(self) -> None:
        path = self._write_settings(
            "analyzer:\n"
            "  encoding: latin-1\n"
            "  max_workers: 4\n"
            "  continue_on_error: false\n"
            "  log_level: debug\n"
            "  report_dir: out/reports\n"
        )
        settings = load_analyzer_settings(path, strict=True, use_env=False)
        self.assertEqual(settings.encoding, "latin-1")
        self.assertEqual(settings.max_workers, 4)
        self.assertFalse(settings.continue_on_error)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(settings.report_dir, "out/reports")

    def test_top_level_keys_accepted(self) -> None:
        path = self._write_settings("max_workers: 2\n")
        settings = load_analyzer_settings(path, use_env=False)
        self.assertEqual(settings.max_workers, 2)

    def test_missing_file_non_strict_returns_defaults(self) -> None:
        settings = load_analyzer_settings("/definitely/missing.yml", use_env=False)
        self.assertEqual(settings, AnalyzerSettings())

    def test_missing_file_strict_raises(self) -> None:
        with self.assertRaises(ConfigValidationError):
            load_analyzer_settings("/definitely/missing.yml", strict=True, use_env=False)

    def test_invalid_yaml_strict_raises(self) -> None:
        path = self._write_settings("analyzer: [unclosed\n")
        with self.assertRaises(ConfigValidationError):
            load_analyzer_settings(path, strict=True, use_env=False)

    def test_invalid_value_non_strict_keeps_default(self) -> None:
        path = self._write_settings("analyzer:\n  max_workers: many\n  log_level: loud\n")
        settings = load_analyzer_settings(path, use_env=False)
        self.assertIsNone(settings.max_workers)
        self.assertEqual(settings.log_level, "INFO")

    def test_invalid_value_strict_raises(self) -> None:
        path = self._write_settings("analyzer:\n  continue_on_error: sometimes\n")
        with self.assertRaises(ConfigValidationError):
            load_analyzer_settings(path, strict=True, use_env=False)

    def test_environment_overrides_file(self) -> None:
        path = self._write_settings("analyzer:\n  max_workers: 2\n")
        env = {"CXXHIER_MAX_WORKERS": "8", "CXXHIER_CONTINUE_ON_ERROR": "no"}
        with mock.patch.dict(os.environ, env):
            settings = load_analyzer_settings(path)
        self.assertEqual(settings.max_workers, 8)
        self.assertFalse(settings.continue_on_error)

    def test_zero_workers_means_sequential(self) -> None:
        with mock.patch.dict(os.environ, {"CXXHIER_MAX_WORKERS": "0"}):
            settings = load_analyzer_settings()
        self.assertIsNone(settings.max_workers)


if __name__ == "__main__":
    unittest.main()
