"""Text helpers for handing results to external renderers and narrators."""

from easyeda.reporting.digest import prepare_data_summary
from easyeda.reporting.formatting import format_number, format_percentage

__all__ = ["format_number", "format_percentage", "prepare_data_summary"]
