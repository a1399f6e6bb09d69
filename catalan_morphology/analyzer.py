"""
Catalan Verb Analyzer

Reconstructs infinitives from inflected verb forms:
- Longest suffix match in every conjugation group
- Group stem rules (plain, inchoative, irregular rewrites)
- Spelling alternation when re-attaching the infinitive ending
- Dictionary validation and diacritic restoration
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from .alternation import normalize, replace_ending
from .config import Config, config as default_config
from .diacritics import add_diacritics
from .dictionary import VerbDictionary
from .endings import EFFECTIVE_ENDINGS, FlatEnding

logger = logging.getLogger(__name__)


class VerbAnalyzer:
    """
    Finds the infinitives an inflected verb form may belong to.

    Usage:
        verbs = VerbDictionary.from_entries([('cantar', VerbType.PUR)])
        analyzer = VerbAnalyzer(verbs)
        analyzer.infinitives_of('canto')  # (['cantar'], ['cantar', 'canter', ...])
    """

    def __init__(self, dictionary: VerbDictionary,
                 endings: Optional[Dict[str, FlatEnding]] = None,
                 config: Optional[Config] = None):
        self.dictionary = dictionary
        self.endings = EFFECTIVE_ENDINGS if endings is None else endings
        self.config = config or default_config

    def strip_enclitics(self, word: str) -> str:
        """
        Drop pronouns attached after the verb: menjar-se-la -> menjar, menja'l -> menja.

        Cuts at the first separator, so every stacked pronoun goes at once,
        not only the last one.
        """
        positions = [word.index(s) for s in self.config.enclitic_separators if s in word]
        if positions:
            word = word[:min(positions)]
        return word

    def base_infinitives_of(self, word: str) -> Set[str]:
        """
        Candidate infinitives of a word form; accents and cedillas are ignored.

        Every group of every ending is tried on its own: the group's longest
        matching suffix is stripped, the group rule turns the remaining stem
        into a dictionary stem, and the infinitive ending is re-attached.
        Candidates are not checked for existence, only for the verb type
        constraints of their group.
        """
        word = normalize(word)
        infs = set()
        for inf_ending, ending in self.endings.items():
            for group in ending.groups:
                longest = group.longest_match(word)
                if longest is None:
                    continue
                stem = word[:len(word) - len(longest)]
                base = group.rule.resolve(stem, inf_ending, self.dictionary)
                if base is None or not ending.possible_base(base, self.dictionary):
                    continue
                infs.update(
                    inf for inf in replace_ending(base, longest, inf_ending)
                    if inf not in self.endings
                )
        return infs

    def infinitives_of(self, word: str) -> Tuple[List[str], List[str]]:
        """
        Analyze a verb form.

        Returns:
            (dictionary infinitives as printed in the dictionary,
             raw candidates with restored diacritics)
        """
        pronoun_less = normalize(self.strip_enclitics(word))
        base_infs = sorted(self.base_infinitives_of(pronoun_less))

        infs = []
        for base_inf in base_infs:
            entry = self.dictionary.lookup(base_inf)
            if entry is not None:
                infs.append(entry.name)
        infs = list(dict.fromkeys(infs))

        if self.config.restore_diacritics:
            variants = [v for base_inf in base_infs for v in add_diacritics(base_inf)]
        else:
            variants = list(base_infs)
        variants = list(dict.fromkeys(variants))

        logger.debug(f"Infinitives of '{word}': {infs} / {base_infs}")
        return infs, variants
