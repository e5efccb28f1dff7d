"""Case dataset: column conventions, loading and row filters."""

from coronaviz.cases.loader import DEFAULT_CSV, UPSTREAM_CSV_URL, get_data_dir, load_cases, normalize_columns
from coronaviz.cases.processor import CaseDataProcessor
from coronaviz.cases.schema import CASE_TYPE_ORDER, CaseType, normalize_case_type

__all__ = [
    "CASE_TYPE_ORDER",
    "CaseDataProcessor",
    "CaseType",
    "DEFAULT_CSV",
    "UPSTREAM_CSV_URL",
    "get_data_dir",
    "load_cases",
    "normalize_case_type",
    "normalize_columns",
]
