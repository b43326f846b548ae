"""
Report rendering for decoded API records.
"""

from pacicli.render.report import (
    format_scalar,
    is_record,
    iter_record_fields,
    render_record,
)

__all__ = ["render_record", "format_scalar", "is_record", "iter_record_fields"]
