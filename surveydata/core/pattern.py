"""
Question pattern module.

Survey exports store the parts of a multi-part question in separate
columns named ``<stem><separator><sub-index>``, e.g. ``Q4_1``, ``Q4_2``.
This module recognises that naming rule and groups columns into
questions.

Functions
---------
classify - Split a column name into stem and sub-index.

group_by_stem - Group column names by stem.

Classes
-------
PatternSettings - Separator configuration.

QuestionIndex - Question name to column list lookup.
"""
import functools
import logging
from typing import Iterable

from pydantic import BaseModel, field_validator

from .metadata_reader import defaults
from ..errors import UnknownQuestion


logger = logging.getLogger(__name__)


class PatternSettings(BaseModel):
    """
    Settings of the column naming rule.

    Attributes
    ----------
    separator : str
        String between stem and sub-index. Default taken from the
        package settings ("_").
    """

    separator: str = defaults.separator

    @field_validator("separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if len(value) == 0:
            raise ValueError("Separator must be a non-empty string")
        return value


def classify(column_name: str, separator: str) -> tuple[str, str | None]:
    """Split a column name into stem and sub-index.

    The split happens at the last occurrence of ``separator``. The name
    is its own stem when the separator is missing or when either side of
    the split would be empty.

    Examples
    --------
    >>> classify("Q4_1", "_")
    ('Q4', '1')
    >>> classify("Q1", "_")
    ('Q1', None)
    >>> classify("Q4_", "_")
    ('Q4_', None)
    """
    stem, found, sub_index = column_name.rpartition(separator)
    if found and stem and sub_index:
        return stem, sub_index
    return column_name, None


def group_by_stem(column_names: Iterable[str], separator: str) -> dict[str, list[str]]:
    """Group column names by stem, keeping the original column order."""
    groups: dict[str, list[str]] = {}
    for column_name in column_names:
        stem, _ = classify(column_name, separator)
        groups.setdefault(stem, []).append(column_name)
    return groups


class QuestionIndex:
    """
    Lookup from question name to the columns that hold its answers.

    The index is derived from a column list and a separator and is never
    updated in place; build a new one whenever the columns change.

    Parameters
    ----------
    column_names : Iterable[str]
        Column names in table order.

    separator : str
        Separator between stem and sub-index.

    Examples
    --------
    >>> index = QuestionIndex.build(["Q1", "Q4_1", "Q4_2"], "_")
    >>> index.all_questions()
    ['Q1', 'Q4']
    >>> index.columns_of("Q4")
    ['Q4_1', 'Q4_2']
    """

    def __init__(self, column_names: Iterable[str], separator: str) -> None:
        self.column_names = tuple(column_names)
        self.separator = PatternSettings(separator=separator).separator
        self._groups = group_by_stem(self.column_names, self.separator)

    @classmethod
    def build(cls, column_names: Iterable[str], separator: str) -> "QuestionIndex":
        return _build_index(tuple(column_names), separator)

    def columns_of(self, question_name: str) -> list[str]:
        if question_name not in self._groups:
            raise UnknownQuestion(question_name)
        return list(self._groups[question_name])

    def all_questions(self) -> list[str]:
        return list(self._groups)

    def is_ambiguous(self, question_name: str) -> bool:
        """Whether the stem is also a literal column next to sub-questions."""
        columns = self.columns_of(question_name)
        return question_name in columns and len(columns) > 1

    def ambiguous_questions(self) -> list[str]:
        return [stem for stem in self._groups if self.is_ambiguous(stem)]

    def __contains__(self, question_name: object) -> bool:
        return question_name in self._groups

    def __repr__(self) -> str:
        return f"QuestionIndex({self._groups!r})"


@functools.lru_cache(maxsize=128)
def _build_index(column_names: tuple[str, ...], separator: str) -> QuestionIndex:
    logger.debug("Building question index for %d columns", len(column_names))
    return QuestionIndex(column_names, separator)
