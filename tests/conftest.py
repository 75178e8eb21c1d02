"""
Configuration file for pytest
"""
import pandas as pd
import pytest

import surveydata


@pytest.fixture()
def survey_frame():
    """Five respondents answering Q1, three parts of Q4 and Q10"""
    return pd.DataFrame(
        {
            "id": [1, 2, 3, 4, 5],
            "Q1": ["Yes", "No", "Yes", "Don't Know", "No"],
            "Q4_1": [1, 2, 3, 4, 5],
            "Q4_2": [5, 4, 3, 2, 1],
            "Q4_3": [2, 2, 2, 2, 2],
            "Q10": [10.0, 20.0, 30.0, 40.0, 50.0],
            "weight": [1.0, 0.5, 1.5, 1.0, 1.0],
        }
    )


@pytest.fixture()
def survey_labels():
    """Questionnaire wording of the survey_frame columns"""
    return {
        "id": "Respondent ID",
        "Q1": "Do you own a car?",
        "Q4_1": "Question 4: red",
        "Q4_2": "Question 4: green",
        "Q4_3": "Question 4: blue",
        "Q10": "Monthly income",
        "weight": "Sampling weight",
    }


@pytest.fixture()
def survey(survey_frame, survey_labels):
    """Labelled survey table"""
    return surveydata.as_survey(survey_frame, labels=survey_labels)
