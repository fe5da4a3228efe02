"""
Table shape rules.

``rows`` counts the header row when ``hasHeader`` is set, so the number of
data rows in ``data.cells`` is ``rows - 1`` in that case. Dimensions below
zero are clamped to zero.
"""

from typing import Any

NEW_HEADER = "New Header"
NEW_CELL = "New Cell"


def data_row_count(rows: int, has_header: bool) -> int:
    """Number of rows that belong in ``data.cells``."""
    return max(rows - (1 if has_header else 0), 0)


def generate_table_data(rows: int, cols: int, has_header: bool) -> dict[str, list]:
    """Build fresh table data with numbered placeholder labels."""
    cols = max(cols, 0)
    return {
        "headers": [f"Header {c + 1}" for c in range(cols)],
        "cells": [
            [f"Cell {r + 1}-{c + 1}" for c in range(cols)]
            for r in range(data_row_count(rows, has_header))
        ],
    }


def reshape_table_data(data: dict[str, Any] | None, rows: int, cols: int, has_header: bool) -> dict[str, Any]:
    """
    Migrate table data to a new shape.

    Headers and rows grow with placeholders and shrink by truncation. Each
    row is padded or truncated on its own; every cell whose coordinates
    survive keeps its value.

    Args:
        data: Current ``{"headers": [...], "cells": [[...], ...]}`` (may be None)
        rows: Target row count, header row included when ``has_header``
        cols: Target column count
        has_header: Whether the first row is a header

    Returns:
        New data dict; the input is not modified
    """
    data = data or {}
    cols = max(cols, 0)
    target_rows = data_row_count(rows, has_header)

    headers = list(data.get("headers") or [])[:cols]
    headers.extend([NEW_HEADER] * (cols - len(headers)))

    cells = [list(row) for row in (data.get("cells") or [])][:target_rows]
    while len(cells) < target_rows:
        cells.append([NEW_CELL] * cols)

    reshaped = []
    for row in cells:
        row = row[:cols]
        row.extend([NEW_CELL] * (cols - len(row)))
        reshaped.append(row)

    return {**data, "headers": headers, "cells": reshaped}


def resize_table(props: dict[str, Any]) -> dict[str, Any]:
    """Structural-resize hook: clamp dimensions and reshape ``data`` to match."""
    rows = max(int(props.get("rows") or 0), 0)
    cols = max(int(props.get("cols") or 0), 0)
    has_header = bool(props.get("hasHeader"))
    return {
        **props,
        "rows": rows,
        "cols": cols,
        "hasHeader": has_header,
        "data": reshape_table_data(props.get("data"), rows, cols, has_header),
    }
