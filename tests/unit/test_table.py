"""Tests for table shape rules."""

import copy

import pytest
from hypothesis import given, strategies as st

from pageforge.registry import data_row_count, generate_table_data, reshape_table_data, resize_table
from pageforge.registry.table import NEW_CELL, NEW_HEADER


def _assert_shape(props):
    data = props["data"]
    assert len(data["headers"]) == props["cols"]
    assert len(data["cells"]) == data_row_count(props["rows"], props["hasHeader"])
    assert all(len(row) == props["cols"] for row in data["cells"])


def test_data_row_count():
    """Test the header row is not a data row."""
    assert data_row_count(4, True) == 3
    assert data_row_count(4, False) == 4
    assert data_row_count(0, True) == 0
    assert data_row_count(-3, False) == 0


def test_generate_table_data():
    """Test generated placeholder labels."""
    data = generate_table_data(3, 2, True)
    assert data == {
        "headers": ["Header 1", "Header 2"],
        "cells": [["Cell 1-1", "Cell 1-2"], ["Cell 2-1", "Cell 2-2"]],
    }


def test_reshape_grow_rows_preserves_cells():
    """Test growing rows appends placeholder rows after the originals."""
    data = {"headers": ["A", "B"], "cells": [["1", "2"], ["3", "4"]]}

    result = reshape_table_data(data, rows=5, cols=2, has_header=True)

    assert result["cells"][:2] == [["1", "2"], ["3", "4"]]
    assert result["cells"][2:] == [[NEW_CELL, NEW_CELL], [NEW_CELL, NEW_CELL]]
    assert result["headers"] == ["A", "B"]


def test_reshape_shrink_cols_truncates():
    """Test shrinking columns truncates headers and every row."""
    data = {"headers": ["A", "B", "C"], "cells": [["1", "2", "3"], ["4", "5", "6"]]}

    result = reshape_table_data(data, rows=3, cols=2, has_header=True)

    assert result["headers"] == ["A", "B"]
    assert result["cells"] == [["1", "2"], ["4", "5"]]


def test_reshape_grow_cols_pads_each_row():
    """Test ragged rows are padded independently."""
    data = {"headers": ["A"], "cells": [["1"], ["2", "x"]]}

    result = reshape_table_data(data, rows=2, cols=3, has_header=False)

    assert result["headers"] == ["A", NEW_HEADER, NEW_HEADER]
    assert result["cells"] == [["1", NEW_CELL, NEW_CELL], ["2", "x", NEW_CELL]]


def test_reshape_does_not_mutate_input():
    """Test the input data is left alone."""
    data = {"headers": ["A", "B"], "cells": [["1", "2"]], "caption": "kept"}
    before = copy.deepcopy(data)

    result = reshape_table_data(data, rows=1, cols=1, has_header=False)

    assert data == before
    assert result["caption"] == "kept"


def test_reshape_missing_data():
    """Test a missing data dict is rebuilt from placeholders."""
    result = reshape_table_data(None, rows=2, cols=1, has_header=True)
    assert result == {"headers": [NEW_HEADER], "cells": [[NEW_CELL]]}


@pytest.mark.parametrize("rows,cols", [(0, 0), (-2, 3), (3, -1), (1, 2)])
def test_resize_table_clamps(rows, cols):
    """Test zero and negative dimensions clamp to zero."""
    props = {"rows": rows, "cols": cols, "hasHeader": True, "data": generate_table_data(4, 4, True)}

    result = resize_table(props)

    assert result["rows"] == max(rows, 0)
    assert result["cols"] == max(cols, 0)
    _assert_shape(result)


def test_resize_table_toggle_header():
    """Test turning the header off turns the header row into a data row slot."""
    props = {"rows": 3, "cols": 2, "hasHeader": True, "data": generate_table_data(3, 2, True)}
    props["hasHeader"] = False

    result = resize_table(props)

    assert len(result["data"]["cells"]) == 3
    assert result["data"]["cells"][:2] == generate_table_data(3, 2, True)["cells"]


_grid = st.integers(min_value=0, max_value=6)


@given(_grid, _grid, st.booleans(), _grid, _grid, st.booleans())
def test_resize_preserves_retained_cells(rows, cols, header, new_rows, new_cols, new_header):
    """Property test: every cell inside both shapes keeps its value."""
    original = {
        "headers": [f"h{c}" for c in range(cols)],
        "cells": [[f"r{r}c{c}" for c in range(cols)] for r in range(data_row_count(rows, header))],
    }
    props = {"rows": new_rows, "cols": new_cols, "hasHeader": new_header, "data": original}

    result = resize_table(props)
    _assert_shape(result)

    cells = result["data"]["cells"]
    for r, row in enumerate(original["cells"][: len(cells)]):
        for c, value in enumerate(row[:new_cols]):
            assert cells[r][c] == value
    assert result["data"]["headers"][: min(cols, new_cols)] == original["headers"][:new_cols]
