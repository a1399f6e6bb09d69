"""
Catalan Morphology

Base form reconstruction for Catalan spell checking and lemmatization:
- Verb infinitives from conjugated forms (canto -> cantar)
- Singular masculine nouns and adjectives (cases -> casa)
- Diacritic restoration (coneixer -> conèixer)
"""

import logging
from typing import List, Optional, Set, Tuple

from .analyzer import VerbAnalyzer
from .config import Config, config as default_config
from .diacritics import add_diacritics
from .dictionary import DictionaryEntry, DictionaryFormatError, VerbDictionary, VerbType
from .endings import ConfigurationError, compile_endings
from .nominal import (
    base_of, base_degree_adjectives_of,
    masculine_adjectives_of, masculine_nouns_of,
    singular_adjectives_of, singular_nouns_of,
)

__version__ = "1.0.0"
__all__ = [
    'CatalanMorphology',
    'Config',
    'ConfigurationError',
    'DictionaryEntry',
    'DictionaryFormatError',
    'VerbAnalyzer',
    'VerbDictionary',
    'VerbType',
    'add_diacritics',
    'base_degree_adjectives_of',
    'base_of',
    'compile_endings',
    'masculine_adjectives_of',
    'masculine_nouns_of',
    'singular_adjectives_of',
    'singular_nouns_of',
]

logger = logging.getLogger(__name__)


class CatalanMorphology:
    """
    Main interface for Catalan base form reconstruction.

    Usage:
        morph = CatalanMorphology(dictionary=VerbDictionary.load('verbs.tsv'))

        # Verb infinitives
        infs, variants = morph.infinitives_of("coneixes")
        print(infs)  # ['conèixer']

        # Noun and adjective base forms
        morph.base_of("cases")  # {'casa', 'case', 'cas', ...}

        # Everything a spell checker may look up
        morph.lemmas_of("altíssimes")
    """

    def __init__(self, config: Optional[Config] = None,
                 dictionary: Optional[VerbDictionary] = None):
        self.config = config or default_config
        if dictionary is None:
            if self.config.dictionary_path is not None:
                dictionary = VerbDictionary.load(self.config.dictionary_path)
            else:
                dictionary = VerbDictionary()
        self.dictionary = dictionary
        self.analyzer = VerbAnalyzer(self.dictionary, config=self.config)
        logger.info(f"Morphology initialized with {len(self.dictionary)} verbs")

    def base_of(self, word: str) -> Set[str]:
        """Candidate singular masculine forms of a noun or adjective."""
        return base_of(word)

    def infinitives_of(self, word: str) -> Tuple[List[str], List[str]]:
        """Dictionary infinitives and diacritic-restored candidates of a verb form."""
        return self.analyzer.infinitives_of(word)

    def base_infinitives_of(self, word: str) -> Set[str]:
        """Raw infinitive candidates of a verb form, accented or not."""
        return self.analyzer.base_infinitives_of(word)

    def add_diacritics(self, stem: str) -> List[str]:
        return add_diacritics(stem)

    def lemmas_of(self, word: str) -> Set[str]:
        """Dictionary infinitives plus noun/adjective base candidates."""
        infs, _ = self.infinitives_of(word)
        return set(infs) | self.base_of(word)
