"""Shared fixtures: a small verb dictionary covering every ending class."""

import pytest

from catalan_morphology import VerbDictionary, VerbType


@pytest.fixture
def verbs():
    return VerbDictionary.from_entries([
        ('cantar', VerbType.PUR),
        ('menjar', VerbType.PUR),
        ('tocar', VerbType.PUR),
        ('començar', VerbType.PUR),
        ('anar', VerbType.PUR),
        ('témer', VerbType.PUR),
        ('conèixer', VerbType.PUR),
        ('vèncer', VerbType.PUR),
        ('batre', VerbType.PUR),
        ('beure', VerbType.PUR),
        ('moure', VerbType.PUR),
        ('viure', VerbType.PUR),
        ('dormir', VerbType.PUR),
        ('fugir', VerbType.PUR),
        ('servir', VerbType.INCOATIU),
        ('partir', VerbType.UNKNOWN),
        ('fer', VerbType.PUR),
        ('ser', VerbType.PUR),
        ('dir', VerbType.PUR),
        ('dur', VerbType.PUR),
    ])
