"""surveydata - label-aware survey tables.

This module provides the functional API of the package.

The key functions provided are:

- as_survey: Bind a table to column labels.

- questions / which_columns: Inspect the question grouping.

- question_text, question_text_common, question_text_unique: Read
  question wording.

- merge: Join two survey tables keeping their labels.

Sample usage:

    import surveydata

    survey = surveydata.as_survey(frame, labels=labels)
    surveydata.which_columns(survey, "Q4")
    surveydata.question_text_common(survey, "Q4")

See the API docstrings for more details.

"""
from typing import Iterable, Literal, Mapping, Sequence

import pandas as pd

from .core.labels import LabelStore
from .core.survey import SurveyData


def _extract_parameters(local_variables: dict) -> dict:
    return {key: value for key, value in local_variables.items() if value is not None}


def as_survey(
    table: pd.DataFrame | SurveyData,
    labels: LabelStore | Mapping[str, str] | Sequence[str] | None = None,
    separator: str | None = None,
) -> SurveyData:
    """Bind a table to column labels.

    Parameters
    ----------
    table : DataFrame or SurveyData
        Survey answers, one row per respondent.

    labels : LabelStore, Mapping[str, str] or Sequence[str], optional
        Question wording per column. Missing labels default to the
        column name.

    separator : str, optional
        String between question stem and sub-index in column names.

    Returns
    -------
    SurveyData
        Survey table owning a copy of ``table``.

    Examples
    --------
    >>> survey = as_survey(pd.DataFrame({"Q1": [1]}), labels=["Age"])
    >>> survey.label("Q1")
    'Age'
    """
    return SurveyData(table, labels=labels, separator=separator)


def is_survey(obj: object) -> bool:
    return isinstance(obj, SurveyData)


def questions(survey: SurveyData) -> list[str]:
    """Question names in order of first appearance."""
    return survey.questions()


def which_columns(survey: SurveyData, question: str) -> list[str]:
    """Columns holding the answers of a question.

    Raises
    ------
    UnknownQuestion
        If no column belongs to ``question``.
    """
    return survey.which_columns(question)


def question_text(survey: SurveyData, question: str) -> list[str]:
    return survey.question_text(question)


def question_text_common(survey: SurveyData, question: str) -> str:
    """Wording shared by all sub-questions of a question.

    Examples
    --------
    >>> question_text_common(survey, "Q4")
    'Question 4:'
    """
    return survey.common_text(question)


def question_text_unique(
    survey: SurveyData, question: str, trim_common_suffix: bool | None = None
) -> list[str]:
    """Wording that differs between sub-questions, in column order.

    Examples
    --------
    >>> question_text_unique(survey, "Q4")
    ['red', 'green', 'blue']
    """
    return survey.unique_text(question, trim_common_suffix)


# pylint: disable=unused-argument
def merge(
    left: SurveyData,
    right: SurveyData,
    on: str | Iterable[str] | None = None,
    how: Literal["inner", "left", "right", "outer"] | None = None,
    suffixes: tuple[str, str] | None = None,
) -> SurveyData:
    """Join two survey tables on key columns.

    Labels of the result come from both tables. When both tables label
    a shared column differently the left label wins and the conflict is
    listed in ``conflicts`` of the result.

    Parameters
    ----------
    left, right : SurveyData
        Tables to join.

    on : str or Iterable[str], optional
        Key columns. All shared columns when omitted.

    how : {"inner", "left", "right", "outer"}, optional
        Join type. Default taken from the package settings ("inner").

    suffixes : tuple of str, optional
        Suffixes for shared non-key columns. Default (".x", ".y").

    Returns
    -------
    SurveyData
        Joined survey table.

    Examples
    --------
    >>> merged = merge(visits, weights, on="id")
    >>> merged.conflicts
    []
    """
    parameters = _extract_parameters(locals())
    parameters.pop("left")
    parameters.pop("right")
    return left.merge(right, **parameters)


def strip_labels(survey: SurveyData) -> pd.DataFrame:
    """Plain DataFrame copy of a survey table, without labels."""
    return survey.to_frame()
