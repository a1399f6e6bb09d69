"""
Configuration for Catalan Morphology
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class Config:
    """Main configuration for the morphology engine."""

    # Verb dictionary (tab separated: infinitive, type); None = empty dictionary
    dictionary_path: Optional[Path] = None

    # Separators of enclitic pronouns, stripped from the right: menjar-se, menja'l
    enclitic_separators: Tuple[str, ...] = ('-', "'")

    # Restore accents and cedilla on raw infinitive candidates
    restore_diacritics: bool = True

    def __post_init__(self):
        if self.dictionary_path is not None:
            self.dictionary_path = Path(self.dictionary_path)


# Global config instance
config = Config()
