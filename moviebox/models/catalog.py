from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .movie import MovieRecord


class Catalog:
    """
    Незмінна впорядкована послідовність фільмів.
    Порядок додавання – це порядок показу у списку.
    Назви можуть повторюватися: вибір іде за позицією, а не за назвою.
    """

    def __init__(self, records: Iterable[MovieRecord] = ()) -> None:
        self._records: Tuple[MovieRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MovieRecord]:
        return iter(self._records)

    def __getitem__(self, row: int) -> MovieRecord:
        return self._records[row]

    def __repr__(self) -> str:
        return f"Catalog({list(self.titles())!r})"

    @property
    def records(self) -> Tuple[MovieRecord, ...]:
        return self._records

    def titles(self) -> List[str]:
        return [record.title for record in self._records]
