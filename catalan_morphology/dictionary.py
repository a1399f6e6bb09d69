"""
Catalan Verb Dictionary

Read-only lookup of dictionary infinitives and their conjugation type:
- PUR: pure verbs (dormo, dorms, dorm)
- INCOATIU: inchoative verbs (serveixo, serveixes, serveix)
- UNKNOWN: verbs without type information, or not listed at all

Keys are normalized infinitives (no accents, no cedilla) so that candidates
built from normalized word forms can be looked up directly.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .alternation import normalize

logger = logging.getLogger(__name__)


class VerbType(Enum):
    """Conjugation type of a dictionary verb."""
    PUR = 'pur'
    INCOATIU = 'incoatiu'
    UNKNOWN = 'unknown'

    @classmethod
    def parse(cls, value: str) -> 'VerbType':
        """Map a dictionary type label to a VerbType; unrecognized labels are UNKNOWN."""
        value = value.strip().lower()
        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN


@dataclass(frozen=True)
class DictionaryEntry:
    """A dictionary infinitive as printed (with diacritics) and its type."""
    name: str
    type: VerbType = VerbType.UNKNOWN


class DictionaryFormatError(ValueError):
    """A dictionary file line could not be parsed."""


class VerbDictionary:
    """
    Verb dictionary keyed by normalized infinitive.

    Usage:
        verbs = VerbDictionary.from_entries([
            ('cantar', VerbType.PUR),
            ('conèixer', VerbType.PUR),
            ('servir', VerbType.INCOATIU),
        ])
        verbs.lookup('coneixer').name  # conèixer
        verbs.type_of('servir')        # VerbType.INCOATIU
    """

    def __init__(self, entries: Optional[Dict[str, DictionaryEntry]] = None):
        self._entries: Dict[str, DictionaryEntry] = dict(entries or {})

    @classmethod
    def from_entries(cls, entries: Iterable[Union[str, Tuple[str, VerbType]]]) -> 'VerbDictionary':
        """Build a dictionary from names or (name, type) pairs."""
        table = {}
        for item in entries:
            if isinstance(item, str):
                entry = DictionaryEntry(item)
            else:
                name, verb_type = item
                entry = DictionaryEntry(name, verb_type)
            table[normalize(entry.name)] = entry
        return cls(table)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'VerbDictionary':
        """
        Load a dictionary from a UTF-8 tab separated file.

        Each line holds an infinitive and optionally its type:
            cantar\tpur
            servir\tincoatiu
            # comments and blank lines are skipped

        Raises:
            DictionaryFormatError: if a line has more than two columns
                or an empty name
        """
        path = Path(path)
        table = {}
        with path.open(encoding='utf-8') as f:
            for line_no, line in enumerate(f, 1):
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                columns = line.split('\t')
                if len(columns) > 2 or not columns[0].strip():
                    raise DictionaryFormatError(f"{path}:{line_no}: malformed entry {line!r}")
                name = columns[0].strip()
                verb_type = VerbType.parse(columns[1]) if len(columns) == 2 else VerbType.UNKNOWN
                table[normalize(name)] = DictionaryEntry(name, verb_type)

        logger.info(f"Loaded {len(table)} verbs from {path}")
        return cls(table)

    def lookup(self, name: str) -> Optional[DictionaryEntry]:
        """Find the entry for an infinitive, accented or not."""
        return self._entries.get(normalize(name))

    def type_of(self, name: str) -> VerbType:
        """Type of a listed infinitive, UNKNOWN if not listed."""
        entry = self.lookup(name)
        return entry.type if entry else VerbType.UNKNOWN

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self._entries.values())

    def __repr__(self):
        return f"{self.__class__.__name__}(entries={len(self._entries)})"
