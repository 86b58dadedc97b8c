"""
The parse pipeline: raw export text -> exercise catalog.
"""

from src.document_parser import parse_document
from src.errors import NoExtractableDataError
from src.record_extractor import count_records, extract


def run_pipeline(text, pipeline_config, layout):
    """
    Parse a fetched export into an exercise catalog.

    Args:
        text: Raw document text
        pipeline_config: PipelineConfig with format and delimiter
        layout: Layout strategy matching pipeline_config.layout

    Returns:
        Read-only catalog of exercise name -> Exercise

    Raises:
        EmptyDocumentError: Document is empty
        MalformedDocumentError: gviz payload cannot be decoded
        NoExtractableDataError: No valid set in the document
    """
    rows = parse_document(text, pipeline_config.source_format, pipeline_config.delimiter)
    catalog = extract(rows, layout)

    if count_records(catalog) == 0:
        raise NoExtractableDataError(
            f"No valid sets found in {len(rows)} rows using layout '{layout.name}'"
        )

    return catalog
