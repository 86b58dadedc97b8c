import unittest
from unittest.mock import MagicMock, patch

from pages.progression import run_load
from src.settings import PipelineConfig, SheetSource
from src.sheet_layouts import FixedStrideLayout
from src.sheet_loader import FAILED, IDLE, SheetLoader

SOURCE = SheetSource(sheet_id="abc123", sheet_name="Plan", csv_url="", cors_proxy="", fetch_timeout=5)
GVIZ_CONFIG = PipelineConfig("gviz", ",", "fixed_stride", {})


class RunLoadTests(unittest.TestCase):
    @patch("pages.progression.st")
    def test_missing_sheet_id_shows_config_error(self, mock_st):
        fetch = MagicMock()
        loader = SheetLoader(SOURCE._replace(sheet_id=""), GVIZ_CONFIG, FixedStrideLayout(), fetch=fetch)

        self.assertFalse(run_load(loader))

        mock_st.error.assert_called_once()
        self.assertIn("Konfigurationsfehler", mock_st.error.call_args[0][0])
        self.assertEqual(loader.state.status, IDLE)
        fetch.assert_not_called()

    @patch("pages.progression.st")
    def test_unexpected_error_is_shown_and_state_fails(self, mock_st):
        def fetch(url, timeout):
            raise RuntimeError("unexpected")

        loader = SheetLoader(SOURCE, GVIZ_CONFIG, FixedStrideLayout(), fetch=fetch)

        self.assertTrue(run_load(loader))

        mock_st.error.assert_called_once()
        self.assertIn("unexpected", mock_st.error.call_args[0][0])
        self.assertEqual(loader.state.status, FAILED)


if __name__ == "__main__":
    unittest.main()
