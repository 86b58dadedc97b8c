"""
Fetch a published Google Sheet and publish the parsed catalog.

The loader owns the network side (URL building, CORS relay, timeout) and
the load lifecycle. Parsing is delegated to src.pipeline.
"""

import threading
from collections import namedtuple
from types import MappingProxyType
from urllib.parse import quote

import requests

from src.errors import SheetLoadError, TransportError
from src.pipeline import run_pipeline

GVIZ_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:json&sheet={sheet_name}"
CSV_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet_name}"

IDLE = "idle"
LOADING = "loading"
LOADED = "loaded"
FAILED = "failed"

EMPTY_CATALOG = MappingProxyType({})

LoadState = namedtuple("LoadState", ["status", "catalog", "error"])

INITIAL_STATE = LoadState(IDLE, EMPTY_CATALOG, None)


def build_sheet_url(source, source_format):
    """
    Build the export URL for a sheet.

    Args:
        source: SheetSource with sheet id/name, optional csv_url and cors_proxy
        source_format: 'gviz' or 'csv'

    Returns:
        URL string, wrapped by the CORS relay when one is configured
    """
    if source_format == "csv" and source.csv_url:
        url = source.csv_url
    else:
        if not source.sheet_id:
            raise ValueError("google_sheets.sheet_id is not configured")
        template = GVIZ_URL if source_format == "gviz" else CSV_EXPORT_URL
        url = template.format(sheet_id=source.sheet_id, sheet_name=quote(source.sheet_name, safe=""))

    return apply_cors_proxy(url, source.cors_proxy)


def apply_cors_proxy(url, cors_proxy):
    """Prefix the URL with the relay, percent-encoding the target."""
    if not cors_proxy:
        return url
    return f"{cors_proxy}{quote(url, safe='')}"


def fetch_document(url, timeout=15, session=None):
    """
    Download the export text.

    Raises:
        TransportError: On network failures and non-2xx responses
    """
    http = session or requests
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        raise TransportError(f"Could not retrieve {url}: {exc}") from exc

    # Sheets exports are UTF-8 even when the content type omits the charset
    response.encoding = "utf-8"
    return response.text


class SheetLoader:
    """
    Runs the fetch-and-parse cycle for one dashboard session.

    Only one load runs at a time; a load requested while another is in
    flight returns the current state untouched. On failure the previous
    catalog is cleared. An unexpected error also ends the attempt as FAILED
    before it propagates. After close(), results of an outstanding fetch are
    dropped without changing state.

    Streamlit has no session teardown hook, so the dashboard keeps one
    loader per session and never closes it; close() is for callers that
    own the loader lifetime.
    """

    def __init__(self, source, pipeline_config, layout, fetch=None):
        """
        Args:
            source: SheetSource describing where to fetch from
            pipeline_config: PipelineConfig for parsing
            layout: Layout strategy instance
            fetch: Optional callable(url, timeout) -> text, defaults to fetch_document
        """
        self.source = source
        self.pipeline_config = pipeline_config
        self.layout = layout
        self.fetch = fetch or fetch_document
        self.state = INITIAL_STATE
        self._lock = threading.Lock()
        self._closed = False

    @property
    def url(self):
        return build_sheet_url(self.source, self.pipeline_config.source_format)

    def load(self):
        """
        Fetch and parse the sheet.

        Returns:
            The LoadState after this attempt
        """
        if self._closed:
            return self.state

        if not self._lock.acquire(blocking=False):
            print("[LOAD] Load already in progress, ignoring request")
            return self.state

        try:
            url = self.url
            self.state = LoadState(LOADING, EMPTY_CATALOG, None)
            print(f"[LOAD] Fetching {url}")

            try:
                text = self.fetch(url, self.source.fetch_timeout)
                catalog = run_pipeline(text, self.pipeline_config, self.layout)
            except SheetLoadError as exc:
                if self._closed:
                    return self.state
                print(f"❌ Error loading sheet: {exc}")
                self.state = LoadState(FAILED, EMPTY_CATALOG, exc)
                return self.state
            except Exception as exc:
                if not self._closed:
                    print(f"❌ Unexpected error loading sheet: {exc}")
                    self.state = LoadState(FAILED, EMPTY_CATALOG, SheetLoadError(str(exc)))
                raise

            if self._closed:
                print("[LOAD] Loader closed during fetch, discarding result")
                return self.state

            self.state = LoadState(LOADED, catalog, None)
            print(f"✓ Loaded {len(catalog)} exercises from Google Sheets")
            return self.state
        finally:
            self._lock.release()

    def load_text(self, text):
        """Run the parse pipeline on already-retrieved text (local exports)."""
        try:
            catalog = run_pipeline(text, self.pipeline_config, self.layout)
        except SheetLoadError as exc:
            self.state = LoadState(FAILED, EMPTY_CATALOG, exc)
            return self.state
        self.state = LoadState(LOADED, catalog, None)
        return self.state

    def close(self):
        """Mark the loader disposed; late results are discarded."""
        self._closed = True
