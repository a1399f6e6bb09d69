"""
Diacritic Restoration

Normalized infinitive candidates have lost their accents and cedilla
(coneixer, comencar). This puts the most likely ones back.
"""

import logging
from typing import List

from .data import CEDILLA_ENDING, DIACRITICS

logger = logging.getLogger(__name__)


def add_diacritics(stem: str) -> List[str]:
    """
    Restore diacritics on a normalized form.

    The first matching rule wins and gives exactly one candidate. Without a
    rule match, a '-car' form yields itself and its '-çar' variant; anything
    else is returned unchanged. Never returns an empty list.

    Note: 'ï' and 'ç' are not completely handled, and an accent and a
    cedilla are never restored on the same form.
    """
    for plain, accented in DIACRITICS:
        if stem.endswith(plain):
            return [stem[:len(stem) - len(plain)] + accented]

    plain, cedilla = CEDILLA_ENDING
    if stem.endswith(plain):
        return [stem, stem[:len(stem) - len(plain)] + cedilla]
    return [stem]
