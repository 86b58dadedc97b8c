"""
Configuration loading: config.yaml plus .env overrides.
"""

import copy
import os
from collections import namedtuple

import yaml
from dotenv import load_dotenv

from src.document_parser import SOURCE_FORMATS
from src.row_tokenizer import SUPPORTED_DELIMITERS
from src.sheet_layouts import LAYOUT_NAMES, build_layout

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'config.yaml')

DEFAULT_CONFIG = {
    'google_sheets': {
        'sheet_id': '',
        'sheet_name': 'Plan',
        'csv_url': '',
        'cors_proxy': '',
        'fetch_timeout': 15,
    },
    'pipeline': {
        'source_format': 'gviz',
        'delimiter': ',',
        'layout': 'fixed_stride',
        'fixed_stride': {},
        'header_blocks': {},
        'plain_csv': {},
    },
    'ui': {
        'title': '1RM Verlauf',
        'dark_mode': False,
    },
}

# Environment variable -> google_sheets key
ENV_OVERRIDES = {
    'SHEET_ID': 'sheet_id',
    'SHEET_NAME': 'sheet_name',
    'CSV_URL': 'csv_url',
    'CORS_PROXY': 'cors_proxy',
}

PipelineConfig = namedtuple('PipelineConfig', ['source_format', 'delimiter', 'layout', 'layout_options'])
SheetSource = namedtuple('SheetSource', ['sheet_id', 'sheet_name', 'csv_url', 'cors_proxy', 'fetch_timeout'])


def _merge(base, override):
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path=None, use_env=True):
    """
    Load configuration from config.yaml.

    A missing file is not an error; the built-in defaults are used.

    Args:
        config_path: Path to the YAML file (defaults to the repo root config.yaml)
        use_env: Apply .env / environment overrides for the sheet source

    Returns:
        Configuration dict
    """
    config_path = config_path or DEFAULT_CONFIG_PATH
    file_config = {}

    if os.path.exists(config_path):
        with open(config_path, 'r', encoding='utf-8') as f:
            file_config = yaml.safe_load(f) or {}
    else:
        print(f"⚠ {config_path} not found, using default configuration")

    config = _merge(DEFAULT_CONFIG, file_config)

    if use_env:
        load_dotenv()
        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                config['google_sheets'][key] = value

    return config


def build_pipeline_config(config):
    """
    Validate the pipeline section and build a PipelineConfig.

    Raises:
        ValueError: For unknown formats, delimiters or layouts
    """
    pipeline = config.get('pipeline', {})

    source_format = pipeline.get('source_format', 'gviz')
    if source_format not in SOURCE_FORMATS:
        raise ValueError(f"pipeline.source_format must be one of {SOURCE_FORMATS}, got '{source_format}'")

    delimiter = pipeline.get('delimiter', ',')
    if delimiter not in SUPPORTED_DELIMITERS:
        raise ValueError(f"pipeline.delimiter must be one of {SUPPORTED_DELIMITERS}, got '{delimiter}'")

    layout = pipeline.get('layout', 'fixed_stride')
    if layout not in LAYOUT_NAMES:
        raise ValueError(f"pipeline.layout must be one of {LAYOUT_NAMES}, got '{layout}'")

    layout_options = dict(pipeline.get(layout) or {})
    return PipelineConfig(source_format, delimiter, layout, layout_options)


def build_sheet_source(config):
    """Build the SheetSource for the loader from the google_sheets section."""
    sheets = config.get('google_sheets', {})
    return SheetSource(
        sheet_id=(sheets.get('sheet_id') or '').strip(),
        sheet_name=sheets.get('sheet_name') or 'Plan',
        csv_url=(sheets.get('csv_url') or '').strip(),
        cors_proxy=(sheets.get('cors_proxy') or '').strip(),
        fetch_timeout=float(sheets.get('fetch_timeout') or 15),
    )


def layout_for(pipeline_config):
    """Instantiate the layout strategy named in the pipeline config."""
    return build_layout(pipeline_config.layout, pipeline_config.layout_options)
