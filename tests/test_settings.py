import os
import tempfile
import unittest
from unittest.mock import patch

from src.settings import (
    build_pipeline_config,
    build_sheet_source,
    layout_for,
    load_config,
)
from src.sheet_layouts import HeaderBlockLayout


class LoadConfigTests(unittest.TestCase):
    def _write_config(self, content):
        temp_file = tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False, encoding="utf-8")
        with temp_file:
            temp_file.write(content)
        self.addCleanup(os.remove, temp_file.name)
        return temp_file.name

    def test_missing_file_uses_defaults(self):
        config = load_config("/nonexistent/config.yaml", use_env=False)
        self.assertEqual(config["pipeline"]["layout"], "fixed_stride")
        self.assertEqual(config["google_sheets"]["sheet_name"], "Plan")

    def test_file_values_merge_over_defaults(self):
        path = self._write_config(
            "google_sheets:\n"
            "  sheet_id: xyz\n"
            "pipeline:\n"
            "  source_format: csv\n"
            "  delimiter: ';'\n"
            "  layout: header_blocks\n"
            "  header_blocks:\n"
            "    block_marker: Muscle group\n"
        )
        config = load_config(path, use_env=False)
        self.assertEqual(config["google_sheets"]["sheet_id"], "xyz")
        self.assertEqual(config["google_sheets"]["sheet_name"], "Plan")
        self.assertEqual(config["pipeline"]["delimiter"], ";")
        self.assertEqual(config["ui"]["title"], "1RM Verlauf")

    def test_environment_overrides_sheet_source(self):
        path = self._write_config("google_sheets:\n  sheet_id: from-file\n")
        with patch.dict(os.environ, {"SHEET_ID": "from-env", "CORS_PROXY": "https://proxy.test/?url="}), \
                patch("src.settings.load_dotenv"):
            config = load_config(path)
        self.assertEqual(config["google_sheets"]["sheet_id"], "from-env")
        self.assertEqual(config["google_sheets"]["cors_proxy"], "https://proxy.test/?url=")


class BuildPipelineConfigTests(unittest.TestCase):
    def test_builds_layout_from_options(self):
        config = load_config("/nonexistent/config.yaml", use_env=False)
        config["pipeline"]["layout"] = "header_blocks"
        config["pipeline"]["header_blocks"] = {"block_marker": "Muscle group", "day_marker_prefix": "Day"}

        pipeline_config = build_pipeline_config(config)
        layout = layout_for(pipeline_config)

        self.assertEqual(pipeline_config.layout, "header_blocks")
        self.assertIsInstance(layout, HeaderBlockLayout)
        self.assertEqual(layout.block_marker, "muscle group")
        self.assertEqual(layout.day_marker_prefix, "day")

    def test_invalid_values_raise(self):
        for key, value in (("source_format", "xlsx"), ("delimiter", "|"), ("layout", "diagonal")):
            config = load_config("/nonexistent/config.yaml", use_env=False)
            config["pipeline"][key] = value
            with self.assertRaises(ValueError):
                build_pipeline_config(config)

    def test_sheet_source_defaults(self):
        config = load_config("/nonexistent/config.yaml", use_env=False)
        config["google_sheets"]["sheet_id"] = "  abc  "
        source = build_sheet_source(config)
        self.assertEqual(source.sheet_id, "abc")
        self.assertEqual(source.fetch_timeout, 15.0)
        self.assertEqual(source.cors_proxy, "")


if __name__ == "__main__":
    unittest.main()
