"""Label-aware survey tables.

Survey exports carry two things side by side: the answers, one column
per question or sub-question, and the questionnaire wording of each
column. This package keeps both together while the table is sliced,
filtered, extended and merged.

The key names are:

- SurveyData: Survey table bound to its labels and question grouping
- as_survey: Build a SurveyData from a DataFrame and labels
- which_columns: Columns of a question, e.g. Q4 -> Q4_1, Q4_2, Q4_3
- question_text_common / question_text_unique: Split question wording
- merge: Join two survey tables keeping labels

Sample usage:

    import surveydata

    survey = surveydata.as_survey(frame, labels=labels)
    colours = survey["Q4"]
    surveydata.question_text_unique(survey, "Q4")

See API documentation for more details.
"""
import logging

from . import (
    errors,
    surveyframe,
    utils,
)
from .api import (
    as_survey,
    is_survey,
    merge,
    question_text,
    question_text_common,
    question_text_unique,
    questions,
    strip_labels,
    which_columns,
)
from .core import LabelStore, QuestionIndex, QuestionText, SurveyData
from .core.metadata_reader import defaults
from .errors import (
    LabelConflict,
    MissingLabel,
    SurveyDataError,
    UnknownColumn,
    UnknownQuestion,
    UnknownSelector,
)

__version__ = "0.1.0"

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
_logger.setLevel(defaults.log_level)

__all__ = [
    "LabelConflict",
    "LabelStore",
    "MissingLabel",
    "QuestionIndex",
    "QuestionText",
    "SurveyData",
    "SurveyDataError",
    "UnknownColumn",
    "UnknownQuestion",
    "UnknownSelector",
    "as_survey",
    "errors",
    "is_survey",
    "merge",
    "question_text",
    "question_text_common",
    "question_text_unique",
    "questions",
    "strip_labels",
    "surveyframe",
    "utils",
    "which_columns",
]
