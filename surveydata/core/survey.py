"""Label-aware survey table.

This module defines ``SurveyData``, a pandas table bound to the
questionnaire wording of each column and to the naming rule that groups
columns into questions.

Every operation either returns a new ``SurveyData`` or replaces the
table and labels of one container together, so that each column always
has exactly one label and no label outlives its column.

Key operations:

- extract / ``[]``: select rows and columns or whole questions
- assign / ``[] =``: replace or add columns, taking labels along
- merge: join two survey tables and combine their labels
- common_text / unique_text: split question wording into parts

Column selectors are resolved in two steps. A name is first matched
against the column names; only when no column has that name is it
looked up as a question. A column literally named ``Q1`` therefore
shadows the question formed by ``Q1_1`` and ``Q1_2``.
"""
import logging
from typing import Any, Callable, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from .labels import LabelStore
from .metadata_reader import MergeSettings, TextSettings, defaults
from .pattern import PatternSettings, QuestionIndex, classify
from .question_text import QuestionText, decompose
from ..errors import LabelConflict, MissingLabel, UnknownColumn, UnknownSelector
from ..utils.parsing_utils import is_name_selector, parse_names, row_mask


logger = logging.getLogger(__name__)


_Labels = LabelStore | Mapping[str, str] | Sequence[str] | None


def _validate_columns(columns: list) -> None:
    for column in columns:
        if not isinstance(column, str):
            raise TypeError(f"Column names must be strings, not {column!r}")
    duplicated = pd.Index(columns)[pd.Index(columns).duplicated()]
    if len(duplicated) > 0:
        raise ValueError(f"Column names must be unique: {list(duplicated)}")


def _build_label_store(columns: list[str], labels: _Labels) -> LabelStore:
    if labels is None:
        return LabelStore.from_columns(columns)
    if isinstance(labels, LabelStore):
        labels = labels.to_dict()
    if isinstance(labels, Mapping):
        for column in labels:
            if column not in columns:
                raise UnknownColumn(column)
        return LabelStore.from_columns(columns, labels)
    if isinstance(labels, str):
        raise TypeError("Labels must be a sequence or mapping, not a string")
    labels = list(labels)
    if len(labels) != len(columns):
        raise ValueError(f"Got {len(labels)} labels for {len(columns)} columns")
    return LabelStore(dict(zip(columns, labels)))


class SurveyData:
    """
    Survey table with column labels and question grouping.

    Parameters
    ----------
    table : DataFrame
        Survey answers, one row per respondent. Column names must be
        unique strings.

    labels : LabelStore, Mapping[str, str] or Sequence[str], optional
        Question wording per column. Columns without a label are
        labelled with their own name.

    separator : str, optional
        String between question stem and sub-index in column names.
        Default taken from the package settings ("_").

    Attributes
    ----------
    conflicts : list of LabelConflict
        Label conflicts found by the merge that created this table.

    Examples
    --------
    >>> survey = SurveyData(
    ...     pd.DataFrame({"Q1": [1, 2], "Q4_1": [3, 4], "Q4_2": [5, 6]}),
    ...     labels=["Age", "Question 4: red", "Question 4: green"],
    ... )
    >>> survey.questions()
    ['Q1', 'Q4']
    >>> survey["Q4"].columns()
    ['Q4_1', 'Q4_2']
    >>> survey.unique_text("Q4")
    ['red', 'green']
    """

    def __init__(
        self,
        table: "pd.DataFrame | SurveyData",
        labels: _Labels = None,
        separator: str | None = None,
    ) -> None:
        if isinstance(table, SurveyData):
            labels = table.labels if labels is None else labels
            separator = table.separator if separator is None else separator
            table = table._table
        elif not isinstance(table, pd.DataFrame):
            table = pd.DataFrame(table)
        columns = list(table.columns)
        _validate_columns(columns)
        separator = defaults.separator if separator is None else separator
        self._separator = PatternSettings(separator=separator).separator
        self._labels = _build_label_store(columns, labels)
        self._table = table.copy()
        self.conflicts: list[LabelConflict] = []

    def _derive(
        self,
        table: pd.DataFrame,
        labels: LabelStore,
        conflicts: Iterable[LabelConflict] = (),
    ) -> "SurveyData":
        survey = object.__new__(SurveyData)
        survey._separator = self._separator
        survey._labels = labels
        survey._table = table
        survey.conflicts = list(conflicts)
        return survey

    def _commit(self, table: pd.DataFrame, labels: LabelStore) -> None:
        self._table = table
        self._labels = labels

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def labels(self) -> LabelStore:
        return self._labels

    @property
    def table(self) -> pd.DataFrame:
        return self._table.copy()

    @property
    def question_index(self) -> QuestionIndex:
        return QuestionIndex.build(self._table.columns, self._separator)

    @property
    def shape(self) -> tuple[int, int]:
        return self._table.shape

    def columns(self) -> list[str]:
        return list(self._table.columns)

    def questions(self) -> list[str]:
        return self.question_index.all_questions()

    def which_columns(self, question: str) -> list[str]:
        return self.question_index.columns_of(question)

    def ambiguous_questions(self) -> list[str]:
        """Question names that are also the literal name of a column."""
        return self.question_index.ambiguous_questions()

    def resolve(self, selector: str | Iterable[str]) -> list[str]:
        """Resolve column and question names to a list of columns.

        Exact column names take precedence over question names.

        Raises
        ------
        UnknownSelector
            If a name is neither a column nor a question.
        """
        index = self.question_index
        columns: dict[str, None] = {}
        for name in parse_names(selector):
            if name in self._labels:
                resolved = [name]
            elif name in index:
                resolved = index.columns_of(name)
            else:
                raise UnknownSelector(name)
            logger.debug("Selector %r resolved to %s", name, resolved)
            columns.update(dict.fromkeys(resolved))
        return list(columns)

    # Extraction

    def extract(self, rows=None, columns: str | Iterable[str] | None = None) -> "SurveyData":
        """Select rows and columns, keeping the labels of kept columns.

        Parameters
        ----------
        rows : optional
            Boolean mask, callable returning a mask, query string,
            positional slice or collection of index labels.
            All rows when omitted.

        columns : str or Iterable[str], optional
            Column names and question names. All columns when omitted.

        Returns
        -------
        SurveyData
            Always a survey table, also when a single column is selected.
        """
        selected = self.columns() if columns is None else self.resolve(columns)
        if rows is None:
            table = self._table.loc[:, selected]
        else:
            table = self._table.loc[row_mask(self._table, rows), selected]
        return self._derive(table.copy(), self._labels.subset(selected))

    def _split_key(self, key) -> tuple[Any, Any]:
        """Split a ``[]`` key into row and column selectors.

        A tuple pair whose first element is neither a column nor a
        question, such as ``("Q10 > 25", "Q4")``, selects rows with a
        query string. Lists always select columns.
        """
        is_pair = isinstance(key, tuple) and len(key) == 2
        if is_name_selector(key):
            if is_pair and key[0] not in self:
                return key
            return None, key
        if is_pair:
            return key
        return key, None

    def __getitem__(self, key) -> "SurveyData":
        rows, columns = self._split_key(key)
        if isinstance(columns, slice) and columns == slice(None):
            columns = None
        return self.extract(rows=rows, columns=columns)

    def __contains__(self, name: object) -> bool:
        return name in self._labels or name in self.question_index

    # Assignment

    def assign(
        self,
        selector: str | Iterable[str],
        value: Any,
        rows=None,
        labels: str | Sequence[str] | Mapping[str, str] | None = None,
    ) -> None:
        """Replace or add columns in place.

        Names that are neither columns nor questions create new columns.
        Labels of a ``SurveyData`` value, then ``labels``, overwrite the
        labels of the target columns; existing columns keep their label
        otherwise.

        Raises
        ------
        MissingLabel
            If new columns would be left without a label. The table is
            not changed in that case.
        """
        targets, new_columns = self._assignment_targets(selector)
        label_map = self._assignment_labels(targets, value, labels)
        unlabelled = [column for column in new_columns if column not in label_map]
        if unlabelled:
            raise MissingLabel(unlabelled)

        table = self._table.copy()
        mask = None if rows is None else row_mask(table, rows)
        if isinstance(value, SurveyData):
            value = value._table
        elif isinstance(value, np.ndarray) and value.ndim == 2:
            value_index = table.index if mask is None else table.loc[mask].index
            value = pd.DataFrame(value, index=value_index)

        if isinstance(value, pd.DataFrame):
            if value.shape[1] != len(targets):
                raise ValueError(
                    f"Cannot assign {value.shape[1]} columns to {len(targets)} columns"
                )
            sources = [value.iloc[:, position] for position in range(len(targets))]
        else:
            sources = [value] * len(targets)

        for target, source in zip(targets, sources):
            if mask is None:
                table[target] = source
            else:
                table.loc[mask, target] = source

        current = self._labels.to_dict()
        current.update(label_map)
        if new_columns:
            logger.debug("Added columns %s", new_columns)
        self._commit(table, LabelStore.from_columns(table.columns, current))

    def _assignment_targets(self, selector) -> tuple[list[str], list[str]]:
        index = self.question_index
        targets: dict[str, None] = {}
        new_columns = []
        for name in parse_names(selector):
            if name in self._labels:
                targets[name] = None
            elif name in index:
                targets.update(dict.fromkeys(index.columns_of(name)))
            else:
                targets[name] = None
                new_columns.append(name)
        return list(targets), new_columns

    @staticmethod
    def _assignment_labels(targets: list[str], value, labels) -> dict[str, str]:
        label_map = {}
        if isinstance(value, SurveyData):
            if len(value.labels) == len(targets):
                label_map.update(zip(targets, value.labels.values()))
        if labels is None:
            pass
        elif isinstance(labels, str):
            label_map.update(dict.fromkeys(targets, labels))
        elif isinstance(labels, Mapping):
            for column in labels:
                if column not in targets:
                    raise UnknownColumn(column)
            label_map.update(labels)
        else:
            labels = list(labels)
            if len(labels) != len(targets):
                raise ValueError(f"Got {len(labels)} labels for {len(targets)} columns")
            label_map.update(zip(targets, labels))
        return label_map

    def __setitem__(self, key, value) -> None:
        rows, columns = self._split_key(key)
        if columns is None or (isinstance(columns, slice) and columns == slice(None)):
            columns = self.columns()
        self.assign(columns, value, rows=rows)

    def drop(self, selector: str | Iterable[str]) -> "SurveyData":
        """Remove columns or whole questions together with their labels."""
        removed = self.resolve(selector)
        kept = [column for column in self.columns() if column not in removed]
        return self.extract(columns=kept)

    def __delitem__(self, key) -> None:
        survey = self.drop(key)
        self._commit(survey._table, survey._labels)

    def rename(self, mapping: Mapping[str, str]) -> "SurveyData":
        """Rename columns or questions, moving labels along.

        Renaming a question renames the stem of each of its columns and
        keeps the sub-indices, e.g. ``{"Q4": "colour"}`` turns ``Q4_1``
        into ``colour_1``.
        """
        column_mapping = {}
        index = self.question_index
        for old, new in mapping.items():
            if old in self._labels:
                column_mapping[old] = new
            elif old in index:
                for column in index.columns_of(old):
                    _, sub_index = classify(column, self._separator)
                    column_mapping[column] = (
                        new if sub_index is None else f"{new}{self._separator}{sub_index}"
                    )
            else:
                raise UnknownSelector(old)
        table = self._table.rename(columns=column_mapping)
        _validate_columns(list(table.columns))
        return self._derive(table, self._labels.rename(column_mapping))

    # Labels and question text

    def label(self, name: str) -> str | list[str]:
        """Label of a column, or labels of all columns of a question."""
        if name in self._labels:
            return self._labels.get(name)
        if name in self.question_index:
            return self.question_text(name)
        raise UnknownSelector(name)

    def set_label(self, column: str, text: str) -> None:
        self._labels.set(column, text)

    def set_labels(self, labels: Mapping[str, str]) -> None:
        self._labels.bulk_set(labels)

    def question_text(self, question: str) -> list[str]:
        return [self._labels.get(column) for column in self.which_columns(question)]

    def decompose(
        self, question: str, trim_common_suffix: bool | None = None
    ) -> QuestionText:
        settings = TextSettings()
        if trim_common_suffix is not None:
            settings = TextSettings(trim_common_suffix=trim_common_suffix)
        return decompose(self.question_text(question), settings)

    def common_text(self, question: str) -> str:
        return self.decompose(question).common

    def unique_text(self, question: str, trim_common_suffix: bool | None = None) -> list[str]:
        return self.decompose(question, trim_common_suffix).unique

    # Merge

    def merge(
        self,
        other: "SurveyData",
        on: str | Iterable[str] | None = None,
        how: str | None = None,
        suffixes: tuple[str, str] | None = None,
    ) -> "SurveyData":
        """Join with another survey table on key columns.

        Parameters
        ----------
        other : SurveyData
            Right table.

        on : str or Iterable[str], optional
            Key columns or questions, present in both tables.
            All shared columns when omitted.

        how : {"inner", "left", "right", "outer"}, optional
            Join type. Default taken from the package settings.

        suffixes : tuple of str, optional
            Suffixes for shared non-key columns of the left and right
            table. Default taken from the package settings.

        Returns
        -------
        SurveyData
            Joined table. ``conflicts`` lists shared columns whose labels
            differ. The left label is kept for key columns. Non-key
            columns are split into suffixed columns that keep the label
            of their own side; their conflicts have ``suffixed`` set.
        """
        if not isinstance(other, SurveyData):
            raise TypeError(f"Cannot merge SurveyData with {type(other).__name__}")
        settings = MergeSettings(
            **{
                key: value
                for key, value in {"how": how, "suffixes": suffixes}.items()
                if value is not None
            }
        )
        shared = [column for column in self.columns() if column in other.labels]
        if on is None:
            keys = shared
        else:
            keys = self.resolve(on)
            for key in keys:
                if key not in other.labels:
                    raise UnknownColumn(key)
        if len(keys) == 0:
            raise ValueError("No key columns to merge on")

        conflicts = [
            LabelConflict(
                column,
                self._labels.get(column),
                other.labels.get(column),
                suffixed=column not in keys,
            )
            for column in shared
            if self._labels.get(column) != other.labels.get(column)
        ]
        for conflict in conflicts:
            if conflict.suffixed:
                logger.warning(
                    "Label conflict on column %s: kept both %r and %r on suffixed columns",
                    conflict.column,
                    conflict.kept,
                    conflict.discarded,
                )
            else:
                logger.warning(
                    "Label conflict on column %s: kept %r, discarded %r",
                    conflict.column,
                    conflict.kept,
                    conflict.discarded,
                )

        table = pd.merge(
            self._table,
            other._table,
            how=settings.how,
            on=keys,
            suffixes=settings.suffixes,
        )
        left_suffix, right_suffix = settings.suffixes
        label_map = {}
        for column, label in self._labels.items():
            suffixed = column in other.labels and column not in keys
            label_map[f"{column}{left_suffix}" if suffixed else column] = label
        for column, label in other.labels.items():
            if column in keys:
                continue
            suffixed = column in self._labels
            label_map.setdefault(f"{column}{right_suffix}" if suffixed else column, label)
        labels = LabelStore({column: label_map[column] for column in table.columns})
        logger.debug("Merged tables on %s into %d rows", keys, len(table.index))
        return self._derive(table, labels, conflicts)

    # Relational verbs

    def select(self, *selectors: str | Iterable[str]) -> "SurveyData":
        names: list[str] = []
        for selector in selectors:
            names.extend(parse_names(selector))
        return self.extract(columns=names)

    def filter(self, condition: "pd.Series | np.ndarray | Callable | str") -> "SurveyData":
        return self.extract(rows=condition)

    def head(self, n: int = 5) -> "SurveyData":
        return self.extract(rows=slice(0, n))

    def mutate(self, labels: Mapping[str, str] | None = None, **columns) -> "SurveyData":
        """Return a copy with columns added or replaced.

        New columns need an entry in ``labels`` or a ``SurveyData`` value.
        """
        labels = {} if labels is None else labels
        survey = self.copy()
        for name, value in columns.items():
            survey.assign(name, value, labels=labels.get(name))
        return survey

    def order(
        self, by: str | Iterable[str], ascending: bool | list[bool] = True
    ) -> "SurveyData":
        table = self._table.sort_values(self.resolve(by), ascending=ascending, kind="stable")
        return self._derive(table, self._labels.copy())

    def aggregate(
        self,
        by: str | Iterable[str],
        func: str | Callable = "mean",
        columns: str | Iterable[str] | None = None,
    ) -> "SurveyData":
        """Group rows by key columns and aggregate the other columns.

        Each aggregated column keeps its name and label.
        """
        keys = self.resolve(by)
        if columns is None:
            values = [column for column in self.columns() if column not in keys]
        else:
            values = [column for column in self.resolve(columns) if column not in keys]
        table = self._table.groupby(keys, as_index=False, sort=True)[values].agg(func)
        table = table.loc[:, keys + values]
        return self._derive(table, self._labels.subset(keys + values))

    # Cleaning

    def has_dont_know(self, question: str, dont_know: str | None = None) -> bool:
        """Whether any column of a question contains the "don't know" answer."""
        dont_know = defaults.dont_know if dont_know is None else dont_know
        columns = self.resolve(question)
        return bool(self._table.loc[:, columns].eq(dont_know).any().any())

    def remove_dont_know(
        self, question: str | Iterable[str] | None = None, dont_know: str | None = None
    ) -> "SurveyData":
        """Replace the "don't know" answer with missing values.

        Categorical columns lose the category as well.
        """
        dont_know = defaults.dont_know if dont_know is None else dont_know
        columns = self.columns() if question is None else self.resolve(question)
        table = self._table.copy()
        for column in columns:
            series = table[column]
            if isinstance(series.dtype, pd.CategoricalDtype):
                if dont_know in series.cat.categories:
                    table[column] = series.cat.remove_categories([dont_know])
            elif series.eq(dont_know).any():
                table[column] = series.mask(series.eq(dont_know))
        return self._derive(table, self._labels.copy())

    # Conversion

    def to_frame(self) -> pd.DataFrame:
        return self._table.copy()

    def copy(self) -> "SurveyData":
        return self._derive(self._table.copy(), self._labels.copy(), self.conflicts)

    def equals(self, other: object) -> bool:
        return (
            isinstance(other, SurveyData)
            and self._separator == other.separator
            and self._labels == other.labels
            and self._table.equals(other._table)
        )

    def __len__(self) -> int:
        return len(self._table.index)

    def __repr__(self) -> str:
        header = (
            f"SurveyData: {len(self)} rows, {self.shape[1]} columns, "
            f"{len(self.questions())} questions"
        )
        return f"{header}\n{self._table!r}"
