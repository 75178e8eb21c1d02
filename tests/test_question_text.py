import pytest

from surveydata import UnknownQuestion, question_text_common, question_text_unique
from surveydata.core.metadata_reader import TextSettings
from surveydata.core.question_text import decompose
from surveydata.utils import common_prefix, common_suffix


def test_common_prefix():
    for texts, prefix in [
        [["Question 4: red", "Question 4: green"],      "Question 4: "  ],
        [["Rate blue", "Rate blueberry"],               "Rate "         ],
        [["Q4a", "Q4b"],                                ""              ],
        [["Q4:red", "Q4:green"],                        "Q4:"           ],
        [["Is it new? yes", "Is it new? no"],           "Is it new? "   ],
        [["don't", "don'x"],                            ""            ],
        [["same text", "same text"],                    "same text"     ],
        [["only"],                                      "only"          ],
        [[],                                            ""              ],
    ]:
        assert common_prefix(texts) == prefix


def test_common_suffix():
    for texts, suffix in [
        [["red - how often?", "green - how often?"],    " - how often?" ],
        [["unread", "read"],                            ""              ],
    ]:
        assert common_suffix(texts) == suffix


class TestDecompose:
    def test_basics(self):
        result = decompose(["Question 4: red", "Question 4: green", "Question 4: blue"])
        assert result.common == "Question 4:"
        assert result.unique == ["red", "green", "blue"]
        assert result.suffix == ""

    def test_single_label(self):
        result = decompose(["Do you own a car?"])
        assert result.common == "Do you own a car?"
        assert result.unique == [""]

    def test_word_is_not_cut(self):
        result = decompose(["Rate blue", "Rate blueberry"])
        assert result.common == "Rate"
        assert result.unique == ["blue", "blueberry"]

    def test_punctuation_ends_a_token(self):
        result = decompose(["Q4:red", "Q4:green"])
        assert result.common == "Q4:"
        assert result.unique == ["red", "green"]

    def test_trim_common_suffix(self):
        labels = ["Q5: red - how often?", "Q5: dark green - how often?"]
        kept = decompose(labels)
        assert kept.unique == ["red - how often?", "dark green - how often?"]
        trimmed = decompose(labels, TextSettings(trim_common_suffix=True))
        assert trimmed.common == "Q5:"
        assert trimmed.unique == ["red", "dark green"]
        assert trimmed.suffix == "- how often?"


class TestSurveyQuestionText:
    def test_common_and_unique(self, survey):
        assert survey.common_text("Q4") == "Question 4:"
        assert survey.unique_text("Q4") == ["red", "green", "blue"]
        assert question_text_common(survey, "Q4") == "Question 4:"
        assert question_text_unique(survey, "Q4") == ["red", "green", "blue"]

    def test_single_column_question(self, survey):
        assert survey.common_text("Q1") == "Do you own a car?"
        assert survey.unique_text("Q1") == [""]

    def test_unknown_question(self, survey):
        with pytest.raises(UnknownQuestion):
            survey.common_text("Q99")
        with pytest.raises(UnknownQuestion):
            survey.unique_text("Q99")

    def test_question_text(self, survey):
        assert survey.question_text("Q4") == [
            "Question 4: red",
            "Question 4: green",
            "Question 4: blue",
        ]
