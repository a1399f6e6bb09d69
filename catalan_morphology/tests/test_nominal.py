"""Tests for noun/adjective base forms and diacritic restoration."""

from catalan_morphology import (
    add_diacritics, base_degree_adjectives_of, base_of,
    masculine_adjectives_of, masculine_nouns_of,
    singular_adjectives_of, singular_nouns_of,
)


# =============================================================================
# DIACRITICS
# =============================================================================

def test_add_diacritics():
    test_cases = [
        ("coneixer", ["conèixer"]),
        ("creixer", ["créixer"]),
        ("vencer", ["vèncer"]),
        ("correr", ["córrer"]),
        ("realitzar", ["realitzar"]),
        ("comencar", ["comencar", "començar"]),
        ("cantar", ["cantar"]),
    ]
    for stem, expected in test_cases:
        assert add_diacritics(stem) == expected, stem


def test_first_diacritic_rule_wins():
    # 'coneixer' is listed before 'neixer'
    assert add_diacritics("reconeixer") == ["reconèixer"]


# =============================================================================
# SINGULAR
# =============================================================================

def test_singular_nouns():
    assert "casa" in singular_nouns_of("cases")
    assert "amiga" in singular_nouns_of("amigues")
    assert "pluja" in singular_nouns_of("pluges")
    assert "gos" in singular_nouns_of("gossos")
    assert "bosc" in singular_nouns_of("boscos")
    assert "cami" in singular_nouns_of("camins")
    assert "mig" in singular_nouns_of("mitjos")


def test_singular_input_is_returned_unchanged():
    assert singular_nouns_of("casa") == ["casa"]
    assert singular_adjectives_of("blanc") == ["blanc"]


def test_vowel_stem_rule_needs_a_vowel():
    assert "per" not in singular_nouns_of("perns")
    assert singular_nouns_of("ns") == ["n"]


# =============================================================================
# MASCULINE
# =============================================================================

def test_masculine_nouns():
    assert "gat" in masculine_nouns_of("gata")
    assert "gos" in masculine_nouns_of("gossa")
    assert "llop" in masculine_nouns_of("lloba")
    assert "nebot" in masculine_nouns_of("neboda")
    assert masculine_nouns_of("gat") == ["gat"]


def test_masculine_adjectives_union():
    # 'a' -> '' and 'ova' -> 'ou' both apply
    res = masculine_adjectives_of("nova")
    assert "nov" in res
    assert "nou" in res
    assert len(res) == len(set(res))

    test_cases = [
        ("blanca", "blanc"),
        ("llarga", "llarg"),
        ("ampla", "ample"),
        ("mitja", "mig"),
        ("roja", "roig"),
        ("antiga", "antic"),
        ("obliqua", "oblic"),
        ("europea", "europeu"),
        ("viva", "viu"),
        ("bella", "bell"),
    ]
    for word, expected in test_cases:
        assert expected in masculine_adjectives_of(word), word


# =============================================================================
# DEGREE
# =============================================================================

def test_degree_adjectives():
    assert base_degree_adjectives_of("millor") == ["bo", "bon"]
    assert base_degree_adjectives_of("maxim") == ["gran"]
    assert base_degree_adjectives_of("altissim") == ["alt"]
    assert base_degree_adjectives_of("alt") == ["alt"]


def test_base_of():
    assert "casa" in base_of("cases")
    assert "alt" in base_of("altíssimes")
    assert "gran" in base_of("màximes")
    assert "gat" in base_of("gates")
    assert base_of("gat") == {"gat"}


def test_base_of_keeps_accents_and_cedillas():
    assert "dolç" in base_of("dolça")
    assert "cafè" in base_of("cafès")
    assert "alt" in base_of("altíssima")
    assert "alt" in base_of("altissima")
    assert base_degree_adjectives_of("màxim") == ["gran"]
