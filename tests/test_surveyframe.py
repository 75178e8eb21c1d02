"""Tests for the DataFrame.survey accessor"""

import pandas as pd
import pytest

import surveydata  # noqa: F401  registers the accessor
from surveydata import SurveyData, UnknownQuestion


class TestSurveyAccessor:
    def test_questions(self, survey_frame):
        assert survey_frame.survey.questions() == ["id", "Q1", "Q4", "Q10", "weight"]
        assert survey_frame.survey.which_columns("Q4") == ["Q4_1", "Q4_2", "Q4_3"]
        with pytest.raises(UnknownQuestion):
            survey_frame.survey.which_columns("Q99")

    def test_separator(self):
        frame = pd.DataFrame({"Q4.1": [1], "Q4.2": [2]})
        frame.survey.separator = "."
        assert frame.survey.questions() == ["Q4"]
        assert frame.survey.attach().separator == "."
        with pytest.raises(ValueError):
            frame.survey.separator = ""
        assert frame.survey.separator == "."

    def test_separator_belongs_to_frame(self):
        frame = pd.DataFrame({"Q4.1": [1], "Q4.2": [2]})
        frame.survey.separator = "."
        assert frame.attrs["survey_separator"] == "."
        assert pd.DataFrame({"Q4.1": [1]}).survey.separator == "_"
        assert frame.copy().survey.which_columns("Q4") == ["Q4.1", "Q4.2"]

    def test_attach(self, survey_frame, survey_labels):
        survey = survey_frame.survey.attach(survey_labels)
        assert isinstance(survey, SurveyData)
        assert survey.label("Q4_3") == "Question 4: blue"

    def test_non_string_columns(self):
        with pytest.raises(AttributeError):
            pd.DataFrame([[1, 2]]).survey.questions()
