"""Tests for vowel classes, spelling alternations and normalization."""

from catalan_morphology.alternation import (
    back_to_front, front_to_back, is_back_vowel, is_front_vowel,
    normalize, replace_end, replace_ending, starts_with_back, starts_with_front,
)


def test_vowel_classes():
    for ch in 'eéèiíï':
        assert is_front_vowel(ch)
        assert not is_back_vowel(ch)
    for ch in 'aàoòóuúü':
        assert is_back_vowel(ch)
        assert not is_front_vowel(ch)
    for ch in ('c', 'ç', '', 'ei'):
        assert not is_front_vowel(ch)
        assert not is_back_vowel(ch)


def test_suffix_classes():
    assert starts_with_front('em')
    assert starts_with_back('o')
    assert not starts_with_front('')
    assert not starts_with_back('')
    assert not starts_with_front('sc')


def test_front_to_back():
    test_cases = [
        # (stem before e/i, stems before a/o/u)
        ('toqu', ['toc', 'toqu']),
        ('pagu', ['pag', 'pagu']),
        ('meng', ['menj']),
        ('cas', ['cas']),
        ('q', []),
    ]
    for stem, expected in test_cases:
        assert front_to_back(stem) == expected, stem


def test_back_to_front():
    test_cases = [
        ('venc', ['venc', 'venqu']),
        ('disting', ['distingu']),
        ('fuj', ['fug']),
        ('dorm', ['dorm']),
    ]
    for stem, expected in test_cases:
        assert back_to_front(stem) == expected, stem


def test_normalize():
    assert normalize('Conèixer') == 'coneixer'
    assert normalize('començar') == 'comencar'
    assert normalize('argüir') == 'arguir'
    assert normalize('-eix') == 'eix'


def test_replace_ending_alternates_across_vowel_class():
    assert replace_ending('toqu', 'em', 'ar') == ['tocar', 'toquar']
    assert replace_ending('meng', 'es', 'ar') == ['menjar']
    assert replace_ending('fuj', 'o', 'ir') == ['fugir']


def test_replace_ending_keeps_stem_otherwise():
    assert replace_ending('menj', 'o', 'ar') == ['menjar']
    assert replace_ending('dorm', 'im', 'ir') == ['dormir']
    # '-re' never alternates
    assert replace_ending('venc', 'o', 're') == ['vencre']
    assert replace_ending('cant', '', 'ar') == ['cantar']


def test_replace_end():
    assert replace_end('gossa', 'ssa', 's') == ['gos']
    assert replace_end('gos', 'ssa', 's') == []
