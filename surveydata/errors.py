"""Errors raised by surveydata operations.

Lookup failures are raised at once with the offending name. Label
conflicts found while merging are survivable and are recorded as
``LabelConflict`` values instead of being raised.
"""
from dataclasses import dataclass
from typing import Iterable


class SurveyDataError(Exception):
    """Base class of all surveydata errors"""


class _LookupError(SurveyDataError, KeyError):
    kind = "name"

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        self.message = message or f"{self.kind} {name!r} is not available"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class UnknownColumn(_LookupError):
    kind = "Column"


class UnknownQuestion(_LookupError):
    kind = "Question"


class UnknownSelector(_LookupError):
    """Selector is neither a column name nor a question name"""

    kind = "Selector"


class MissingLabel(SurveyDataError, ValueError):
    def __init__(self, columns: Iterable[str]) -> None:
        self.columns = list(columns)
        super().__init__(
            f"New columns {self.columns} have no label; "
            "pass labels or assign a SurveyData value"
        )


@dataclass(frozen=True)
class LabelConflict:
    """Two merged tables label the same column differently.

    Attributes:
        column: Column name shared by both tables
        kept: Label of the first table, used in the result
        discarded: Label of the second table
        suffixed: True when the column was not a join key, so both sides
            survive as suffixed columns and neither label is dropped
    """

    column: str
    kept: str
    discarded: str
    suffixed: bool = False


__all__ = [
    "SurveyDataError",
    "UnknownColumn",
    "UnknownQuestion",
    "UnknownSelector",
    "MissingLabel",
    "LabelConflict",
]
