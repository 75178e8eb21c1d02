from typing import Hashable, Iterable

import numpy as np
import pandas as pd


_ColumnSelector = str | Iterable[str]


def parse_names(selector: _ColumnSelector) -> list[str]:
    """Convert a column selector to a list of names.

    The selector can be given as:

    - str: A single column or question name
    - Iterable[str]: A collection of names like ["Q1", "Q4"]

    Duplicated names are kept once, at their first position.

    Examples
    --------
    >>> parse_names("Q1")
    ['Q1']

    >>> parse_names(("Q1", "Q4", "Q1"))
    ['Q1', 'Q4']
    """
    if isinstance(selector, str):
        names = [selector]
    elif isinstance(selector, Iterable):
        names = list(selector)
    else:
        raise TypeError(f"{selector!r} is not a valid column selector")
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Column selector elements must be strings, not {name!r}")
    return list(dict.fromkeys(names))


def is_name_selector(selector: object) -> bool:
    """Check whether a ``[]`` key addresses columns rather than rows."""
    if isinstance(selector, str):
        return True
    if isinstance(selector, (pd.Series, pd.Index, np.ndarray, slice)):
        return False
    if isinstance(selector, (list, tuple)):
        return len(selector) > 0 and all(isinstance(name, str) for name in selector)
    return False


def row_mask(table: pd.DataFrame, rows) -> pd.Series | slice | list[Hashable]:
    """Turn a row selector into something ``DataFrame.loc`` accepts.

    Rows can be selected with:

    - a callable taking the table and returning a boolean mask
    - a query string evaluated with ``DataFrame.query``
    - a boolean mask (Series, array or list of bools)
    - a positional slice
    - an index label or a collection of index labels
    """
    if callable(rows):
        rows = rows(table)
    if isinstance(rows, str):
        return table.eval(rows)
    if isinstance(rows, slice):
        return table.index[rows]
    if isinstance(rows, pd.Series) and rows.dtype == bool:
        return rows.reindex(table.index, fill_value=False)
    if not pd.api.types.is_list_like(rows):
        rows = [rows]
    values = np.asarray(rows)
    if values.dtype == bool:
        if len(values) != len(table.index):
            raise ValueError(
                f"Boolean row mask has {len(values)} values for {len(table.index)} rows"
            )
        return pd.Series(values, index=table.index)
    return list(rows)
