"""Column label storage.

``LabelStore`` maps every column name of a survey table to the original
questionnaire wording. Its key set is fixed at construction; new keys
only enter through a ``SurveyData`` operation that also adds the column.
"""
from typing import Iterable, Iterator, Mapping

from ..errors import UnknownColumn


class LabelStore:
    """Ordered mapping from column name to label.

    Parameters
    ----------
    labels : Mapping[str, str], optional
        Initial labels in column order.

    Examples
    --------
    >>> store = LabelStore({"Q1": "Age", "Q2": "Gender"})
    >>> store.get("Q1")
    'Age'
    >>> store.rename({"Q1": "age"}).keys()
    ['age', 'Q2']
    """

    def __init__(self, labels: Mapping[str, str] | None = None) -> None:
        labels = {} if labels is None else labels
        self._labels: dict[str, str] = {
            str(column): str(label) for column, label in labels.items()
        }

    @classmethod
    def from_columns(
        cls, columns: Iterable[str], labels: Mapping[str, str] | None = None
    ) -> "LabelStore":
        """Build a store for ``columns``, defaulting to the column name."""
        labels = {} if labels is None else labels
        return cls({column: labels.get(column, column) for column in columns})

    def get(self, column: str) -> str:
        if column not in self._labels:
            raise UnknownColumn(column)
        return self._labels[column]

    def set(self, column: str, label: str) -> None:
        if column not in self._labels:
            raise UnknownColumn(column)
        self._labels[column] = str(label)

    def bulk_set(self, labels: Mapping[str, str]) -> None:
        """Replace labels of several columns at once.

        Either every entry is applied or, when any key is not a column
        of the store, none is.
        """
        for column in labels:
            if column not in self._labels:
                raise UnknownColumn(column)
        self._labels.update({column: str(label) for column, label in labels.items()})

    def rename(self, mapping: Mapping[str, str]) -> "LabelStore":
        """Return a store whose keys follow a column rename.

        Labels keep their position and their text; only the keys change.
        """
        for column in mapping:
            if column not in self._labels:
                raise UnknownColumn(column)
        return LabelStore(
            {mapping.get(column, column): label for column, label in self._labels.items()}
        )

    def subset(self, columns: Iterable[str]) -> "LabelStore":
        return LabelStore({column: self.get(column) for column in columns})

    def keys(self) -> list[str]:
        return list(self._labels)

    def values(self) -> list[str]:
        return list(self._labels.values())

    def items(self) -> list[tuple[str, str]]:
        return list(self._labels.items())

    def to_dict(self) -> dict[str, str]:
        return dict(self._labels)

    def copy(self) -> "LabelStore":
        return LabelStore(self._labels)

    def __contains__(self, column: object) -> bool:
        return column in self._labels

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __getitem__(self, column: str) -> str:
        return self.get(column)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelStore):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"LabelStore({self._labels!r})"
