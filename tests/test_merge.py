import logging

import pandas as pd
import pytest

import surveydata
from surveydata import LabelConflict, SurveyData, UnknownColumn


@pytest.fixture()
def weights():
    frame = pd.DataFrame({"id": [1, 2, 3, 6], "weight": [2.0, 1.0, 1.0, 3.0]})
    return SurveyData(frame, labels=["Respondent ID", "Design weight"])


@pytest.fixture()
def follow_up():
    frame = pd.DataFrame({"id": [1, 2, 4], "Q20_1": ["a", "b", "c"], "Q20_2": ["d", "e", "f"]})
    return SurveyData(
        frame, labels=["Respondent ID", "Follow up: first", "Follow up: second"]
    )


class TestMerge:
    def test_inner_join(self, survey, follow_up):
        merged = surveydata.merge(survey, follow_up, on="id")
        assert len(merged) == 3
        assert merged.columns() == survey.columns() + ["Q20_1", "Q20_2"]
        assert merged.labels.keys() == merged.columns()
        assert merged.label("Q20_2") == "Follow up: second"
        assert merged.common_text("Q20") == "Follow up:"
        assert merged.conflicts == []

    def test_outer_join(self, survey, follow_up):
        merged = survey.merge(follow_up, on="id", how="outer")
        assert len(merged) == 5
        assert merged.labels.keys() == merged.columns()

    def test_natural_join(self, survey, follow_up):
        merged = survey.merge(follow_up)
        assert len(merged) == 3

    def test_conflict_on_key_column(self, survey, weights):
        merged = survey.merge(weights, on=["id", "weight"])
        assert merged.label("weight") == "Sampling weight"
        assert merged.conflicts == [
            LabelConflict("weight", "Sampling weight", "Design weight")
        ]
        assert not merged.conflicts[0].suffixed

    def test_conflict_on_suffixed_column(self, survey, weights):
        merged = survey.merge(weights, on="id")
        assert "weight" not in merged.columns()
        assert merged.label("weight.x") == "Sampling weight"
        assert merged.label("weight.y") == "Design weight"
        assert [conflict.column for conflict in merged.conflicts] == ["weight"]
        assert merged.conflicts[0].suffixed
        assert merged.labels.keys() == merged.columns()

    def test_conflict_is_logged(self, survey, weights, caplog):
        with caplog.at_level(logging.WARNING, logger="surveydata"):
            survey.merge(weights, on="id")
        assert "Label conflict on column weight" in caplog.text

    def test_custom_suffixes(self, survey, weights):
        merged = survey.merge(weights, on="id", suffixes=("_survey", "_design"))
        assert merged.which_columns("weight") == ["weight_survey", "weight_design"]

    def test_same_suffixes(self, survey, weights):
        with pytest.raises(ValueError):
            survey.merge(weights, on="id", suffixes=("_a", "_a"))

    def test_missing_key(self, survey, follow_up):
        with pytest.raises(UnknownColumn):
            survey.merge(follow_up, on="Q10")

    def test_no_shared_columns(self, survey):
        other = SurveyData(pd.DataFrame({"x": [1]}))
        with pytest.raises(ValueError):
            survey.merge(other)

    def test_operands_unchanged(self, survey, weights):
        survey.merge(weights, on="id")
        assert survey.columns()[-1] == "weight"
        assert weights.conflicts == []
