"""
Catalan Spelling Alternations

Character classes and stem rewrites used at morpheme boundaries:
- Front (e, i) / back (a, o, u) vowel classes
- Velar and palatal spelling changes (c/qu, g/gu, g/j)
- Normalization of accented forms for table lookup
"""

import unicodedata
from typing import List

VOWELS = 'aeiou'
FRONT_VOWELS = 'eéèiíï'
BACK_VOWELS = 'aàoòóuúü'

# Infinitive endings that trigger an alternation, and the vowel class they start with
ALTERNATING_ENDINGS = {
    'ar': 'back',
    'er': 'front',
    'ir': 'front',
}


def is_front_vowel(ch: str) -> bool:
    """Check if character is a front vowel (e, i and accented forms)."""
    return len(ch) == 1 and ch in FRONT_VOWELS


def is_back_vowel(ch: str) -> bool:
    """Check if character is a back vowel (a, o, u and accented forms)."""
    return len(ch) == 1 and ch in BACK_VOWELS


def starts_with_front(suffix: str) -> bool:
    return bool(suffix) and is_front_vowel(suffix[0])


def starts_with_back(suffix: str) -> bool:
    return bool(suffix) and is_back_vowel(suffix[0])


def front_to_back(stem: str) -> List[str]:
    """
    Respell a stem that stood before a front vowel so it can take a back vowel.

    Normalized input has lost its diaeresis, so 'qu' and 'gu' are ambiguous:
    toquem -> toc(ar), adequem -> adequ(ar). Every plausible variant is
    returned; the dictionary decides later.

    Examples:
        front_to_back('toqu')  -> ['toc', 'toqu']
        front_to_back('meng')  -> ['menj']
        front_to_back('cas')   -> ['cas']
    """
    if stem.endswith('qu'):
        return [stem[:-2] + 'c', stem]
    if stem.endswith('gu'):
        return [stem[:-2] + 'g', stem]
    if stem.endswith('g'):
        return [stem[:-1] + 'j']
    if stem.endswith('q'):
        # 'q' never stands without 'u'
        return []
    return [stem]


def back_to_front(stem: str) -> List[str]:
    """
    Respell a stem that stood before a back vowel so it can take a front vowel.

    Examples:
        back_to_front('venc')  -> ['venc', 'venqu']
        back_to_front('fuj')   -> ['fug']
        back_to_front('dorm')  -> ['dorm']
    """
    if stem.endswith('c'):
        return [stem, stem[:-1] + 'qu']
    if stem.endswith('g'):
        return [stem[:-1] + 'gu']
    if stem.endswith('j'):
        return [stem[:-1] + 'g']
    return [stem]


def normalize(text: str) -> str:
    """
    Normalize a form for table lookup:
    - Lower case
    - Remove accents, diaeresis and cedilla
    - Remove '-' compile-time markers
    """
    text = text.replace('-', '').lower()
    decomposed = unicodedata.normalize('NFD', text)
    return ''.join(c for c in decomposed if not unicodedata.combining(c))


def replace_ending(stem: str, old_ending: str, new_ending: str) -> List[str]:
    """
    Attach new_ending to a stem that lost old_ending.

    Spelling alternates only when the vowel class changes across the boundary:
    an '-ar' infinitive replacing a front-initial ending, or an '-er'/'-ir'
    infinitive replacing a back-initial one.
    """
    vowel_class = ALTERNATING_ENDINGS.get(new_ending)
    if vowel_class == 'back' and starts_with_front(old_ending):
        stems = front_to_back(stem)
    elif vowel_class == 'front' and starts_with_back(old_ending):
        stems = back_to_front(stem)
    else:
        stems = [stem]
    return [s + new_ending for s in stems]


def replace_end(word: str, end: str, replacement: str) -> List[str]:
    """Replace the final `end` of word, or return [] if word does not end with it."""
    if not word.endswith(end):
        return []
    return [word[:len(word) - len(end)] + replacement]
