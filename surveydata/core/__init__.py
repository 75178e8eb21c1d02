from .labels import LabelStore
from .pattern import PatternSettings, QuestionIndex, classify, group_by_stem
from .question_text import QuestionText, decompose
from .survey import SurveyData


__all__ = [
    "LabelStore",
    "PatternSettings",
    "QuestionIndex",
    "QuestionText",
    "SurveyData",
    "classify",
    "decompose",
    "group_by_stem",
]
