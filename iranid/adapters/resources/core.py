"""
Bundled reference data.
Each dataset is a JSON array in iranid/data, read once per process.
"""

import json
import logging
import threading
from typing import Any, Callable, Iterable, Optional, Tuple

LOGGER = logging.getLogger(__name__)


def read_json_records(path: str) -> list:
    with open(path, encoding='utf-8') as fp:
        data = json.load(fp)
    if not isinstance(data, list):
        raise ValueError(f'expected a JSON array in {path}')
    return data


def require_pattern(values: Iterable[Any], pattern, field_name: str) -> frozenset:
    """Coerce values to strings and check each against `pattern`."""
    result = frozenset(str(v) for v in values)
    for value in result:
        if pattern.fullmatch(value) is None:
            raise ValueError(f'invalid {field_name}: {value!r}')
    return result


def require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f'invalid {field_name}: {value!r}')
    return value


class ReferenceCollection:
    """
    An ordered, immutable tuple of records built from one data file.

    The file is read on first access, under a lock, and never again. A missing
    or malformed file is logged and leaves the collection empty, so lookups
    answer "not found" instead of raising.
    """

    def __init__(
        self,
        path: Optional[str],
        factory: Callable[[dict], Any],
        loader: Callable[[str], list] = read_json_records,
    ):
        self.path = path
        self._factory = factory
        self._loader = loader
        self._records: Optional[Tuple[Any, ...]] = None
        self._lock = threading.Lock()

    @classmethod
    def of(cls, records: Iterable[Any]) -> 'ReferenceCollection':
        """A collection over records already in memory (no file involved)."""
        collection = cls(None, lambda item: item)
        collection._records = tuple(records)
        return collection

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    @property
    def records(self) -> Tuple[Any, ...]:
        records = self._records
        if records is None:
            with self._lock:
                if self._records is None:
                    self._records = self._load()
                records = self._records
        return records

    def _load(self) -> Tuple[Any, ...]:
        try:
            raw = self._loader(self.path)
            records = tuple(self._factory(item) for item in raw)
        except (OSError, ValueError, KeyError, TypeError) as e:
            LOGGER.error('Failed to load reference data from %s: %s', self.path, e)
            return ()
        LOGGER.info('Loaded %d records from %s', len(records), self.path)
        return records

    def find_by(self, predicate: Optional[Callable[[Any], bool]]):
        """First record matching `predicate`, or None."""
        if predicate is None:
            return None
        return next((r for r in self.records if predicate(r)), None)

    def find_all_by(self, predicate: Optional[Callable[[Any], bool]]) -> list:
        """Every record matching `predicate`, in collection order."""
        if predicate is None:
            return []
        return [r for r in self.records if predicate(r)]
