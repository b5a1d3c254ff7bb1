from __future__ import annotations

from typing import Any

from routine_finder.core.fields import FIELDS
from routine_finder.validation.errors import ValidationIssue, ValidationError

# Reported individually up to this many; the rest are summarised
MAX_ROW_ISSUES = 10


def validate_rows_payload(obj: Any) -> None:
    """
    Validate the raw JSON body BEFORE it replaces the cached rows.
    This prevents an error page or a renamed sheet from wiping a good cache.
    """
    if not isinstance(obj, list):
        raise ValidationError(
            [ValidationIssue("PAYLOAD_TYPE", "Schedule payload must be a JSON array of rows.")]
        )

    issues: list[ValidationIssue] = []

    bad = [i for i, row in enumerate(obj) if not isinstance(row, dict)]
    for i in bad[:MAX_ROW_ISSUES]:
        issues.append(ValidationIssue("ROW_TYPE", f"rows[{i}] must be an object."))
    if len(bad) > MAX_ROW_ISSUES:
        issues.append(
            ValidationIssue("ROW_TYPE", f"{len(bad) - MAX_ROW_ISSUES} more rows are not objects.")
        )

    dict_rows = [row for row in obj if isinstance(row, dict)]
    if dict_rows and not any(field in row for row in dict_rows for field in FIELDS):
        issues.append(
            ValidationIssue(
                "PAYLOAD_COLUMNS",
                "No known column found; expected some of: " + ", ".join(FIELDS) + ".",
            )
        )

    if issues:
        raise ValidationError(issues)
