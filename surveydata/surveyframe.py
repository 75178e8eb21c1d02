"""
DataFrame extention
"""
import pandas as pd

from .core.metadata_reader import defaults
from .core.pattern import PatternSettings, QuestionIndex
from .core.survey import SurveyData


SEPARATOR_ATTRIBUTE = "survey_separator"


@pd.api.extensions.register_dataframe_accessor("survey")
class SurveyAccessor:
    """Question lookup on plain DataFrames.

    The separator is kept in ``DataFrame.attrs`` so it belongs to the
    frame rather than to one accessor instance.
    """

    def __init__(self, pandas_obj: pd.DataFrame):
        self._validate(pandas_obj)
        self._obj = pandas_obj

    @staticmethod
    def _validate(obj):
        for column in obj.columns:
            if not isinstance(column, str):
                raise AttributeError("Survey tables need string column names")

    @property
    def separator(self) -> str:
        return self._obj.attrs.get(SEPARATOR_ATTRIBUTE, defaults.separator)

    @separator.setter
    def separator(self, value: str):
        self._obj.attrs[SEPARATOR_ATTRIBUTE] = PatternSettings(separator=value).separator

    def questions(self) -> list[str]:
        return QuestionIndex.build(self._obj.columns, self.separator).all_questions()

    def which_columns(self, question: str) -> list[str]:
        return QuestionIndex.build(self._obj.columns, self.separator).columns_of(question)

    def attach(self, labels=None) -> SurveyData:
        return SurveyData(self._obj, labels=labels, separator=self.separator)
