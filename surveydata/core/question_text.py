"""
Question text decomposition.

Labels of sub-questions usually repeat the question wording and only
differ in the part naming the item, e.g.

    Q4_1: "Question 4: red"
    Q4_2: "Question 4: green"

``decompose`` separates the shared wording from the varying part.
"""
from typing import Sequence

from pydantic import BaseModel

from .metadata_reader import TextSettings
from ..utils import text_utils


class QuestionText(BaseModel):
    """
    Decomposed labels of one question.

    Attributes
    ----------
    common : str
        Wording shared by all labels, stripped of surrounding whitespace.

    unique : list[str]
        Part of each label that remains after removing the common text,
        in column order.

    suffix : str
        Shared trailing wording, removed from ``unique`` when suffix
        trimming is enabled; empty otherwise.
    """

    common: str
    unique: list[str]
    suffix: str = ""


def decompose(
    labels: Sequence[str], settings: TextSettings | None = None
) -> QuestionText:
    """Split labels of a question into common and unique text.

    Parameters
    ----------
    labels : Sequence[str]
        Labels of the question columns in column order.

    settings : TextSettings, optional
        Whether a shared suffix is trimmed from the unique texts too.

    Returns
    -------
    QuestionText
        Common prefix and per-column residuals. A single label is all
        common text and its unique text is empty.

    Examples
    --------
    >>> decompose(["Question 4: red", "Question 4: green"]).common
    'Question 4:'
    """
    settings = TextSettings() if settings is None else settings
    labels = list(labels)
    if len(labels) <= 1:
        common = labels[0].strip() if labels else ""
        return QuestionText(common=common, unique=[""] * len(labels))

    prefix = text_utils.common_prefix(labels)
    residuals = [label[len(prefix):] for label in labels]
    suffix = ""
    if settings.trim_common_suffix and all(residuals):
        suffix = text_utils.common_suffix(residuals)
        if suffix:
            residuals = [residual[: -len(suffix)] for residual in residuals]

    return QuestionText(
        common=prefix.strip(),
        unique=[residual.strip() for residual in residuals],
        suffix=suffix.strip(),
    )
