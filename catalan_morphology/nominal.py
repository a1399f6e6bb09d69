"""
Noun and Adjective Base Forms

Proposes singular and masculine forms of Catalan nouns and adjectives:
- cases -> casa, case
- gossa -> gos, goss
- altíssima -> alt

Every rule of a chain that matches contributes its candidates; nothing is
checked against a dictionary here.
"""

import logging
from typing import Callable, List, Sequence, Set, Tuple, Union

from .alternation import VOWELS, front_to_back, normalize, replace_end
from .data import DEGREE_ADJECTIVES, SUPERLATIVE_SUFFIXES

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[[str], List[str]]]
Rule = Tuple[str, Replacement]


def _vowel_stem(stem: str) -> List[str]:
    # camins -> camí, but not llens -> lle
    return [stem] if stem and stem[-1] in VOWELS else []


def _feminine_plural(stem: str) -> List[str]:
    # cases -> casa, amigues -> amiga, pluges -> pluja
    return [s + 'a' for s in front_to_back(stem)]


def _palatal_masculine(stem: str) -> List[str]:
    # mitja -> mig, roja -> roig
    if stem.endswith('it'):
        return [stem[:-2] + 'ig']
    if stem.endswith('t'):
        return [stem[:-1] + 'ig']
    return [stem + 'ig']


SINGULAR_RULES: Sequence[Rule] = (
    ('s', ''),
    ('sos', 's'),
    ('xos', 'x'),
    ('scos', 'sc'),
    ('stos', 'st'),
    ('xtos', 'xt'),
    ('ns', _vowel_stem),
    ('ssos', 's'),
    ('jos', 'ig'),
    ('itjos', 'ig'),
    ('es', _feminine_plural),
)

MASCULINE_NOUN_RULES: Sequence[Rule] = (
    ('a', ''),
    ('da', 't'),
    ('ba', 'p'),
    ('va', 'f'),
    ('ssa', 's'),
    ('na', ''),
    ('essa', ''),
)

MASCULINE_ADJECTIVE_RULES: Sequence[Rule] = (
    ('a', ''),
    ('a', 'e'),
    ('a', 'o'),
    ('da', 't'),
    ('ga', 'c'),
    ('qua', 'c'),
    ('ja', _palatal_masculine),
    ('ssa', 's'),
    ('na', ''),
    ('ea', 'eu'),
    ('ava', 'au'),
    ('eva', 'eu'),
    ('iva', 'iu'),
    ('ova', 'ou'),
    ('lla', 'l'),
)


def apply_rules(word: str, rules: Sequence[Rule]) -> List[str]:
    """Union of every rule's candidates, in rule order, without duplicates."""
    candidates = []
    for end, replacement in rules:
        if callable(replacement):
            if word.endswith(end):
                candidates.extend(replacement(word[:len(word) - len(end)]))
        else:
            candidates.extend(replace_end(word, end, replacement))
    return list(dict.fromkeys(candidates))


def singular_nouns_of(word: str) -> List[str]:
    res = apply_rules(word, SINGULAR_RULES) if word.endswith('s') else [word]
    logger.debug(f"Singular nouns of '{word}': {res}")
    return res


def masculine_nouns_of(word: str) -> List[str]:
    res = apply_rules(word, MASCULINE_NOUN_RULES) if word.endswith('a') else [word]
    logger.debug(f"Masculine nouns of '{word}': {res}")
    return res


def singular_adjectives_of(word: str) -> List[str]:
    res = apply_rules(word, SINGULAR_RULES) if word.endswith('s') else [word]
    logger.debug(f"Singular adjectives of '{word}': {res}")
    return res


def masculine_adjectives_of(word: str) -> List[str]:
    res = apply_rules(word, MASCULINE_ADJECTIVE_RULES) if word.endswith('a') else [word]
    logger.debug(f"Masculine adjectives of '{word}': {res}")
    return res


def base_degree_adjectives_of(word: str) -> List[str]:
    """Positive degree of an adjective: millor -> bo, bon; altíssim -> alt."""
    key = normalize(word)
    if key in DEGREE_ADJECTIVES:
        return list(DEGREE_ADJECTIVES[key])
    for suffix in SUPERLATIVE_SUFFIXES:
        if word.endswith(suffix):
            return [word[:-len(suffix)]]
    return [word]


def base_of(word: str) -> Set[str]:
    """
    Candidate base forms of a noun or adjective.

    Nouns go through singular -> masculine, adjectives through
    singular -> masculine -> positive degree. The result is the union.
    The word keeps its accents and cedillas: dolça -> dolç, cafès -> cafè.
    """
    nouns = [m for s in singular_nouns_of(word) for m in masculine_nouns_of(s)]
    adjectives = [
        d
        for s in singular_adjectives_of(word)
        for m in masculine_adjectives_of(s)
        for d in base_degree_adjectives_of(m)
    ]
    return set(nouns + adjectives)
