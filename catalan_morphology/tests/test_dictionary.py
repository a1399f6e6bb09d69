"""Tests for the verb dictionary and the CatalanMorphology interface."""

import pytest

from catalan_morphology import (
    CatalanMorphology, Config, DictionaryEntry, DictionaryFormatError,
    VerbDictionary, VerbType,
)


def test_lookup_ignores_diacritics(verbs):
    assert verbs.lookup('coneixer') == DictionaryEntry('conèixer', VerbType.PUR)
    assert verbs.lookup('Conèixer').name == 'conèixer'
    assert verbs.lookup('comencar').name == 'començar'
    assert verbs.lookup('parlar') is None


def test_type_of(verbs):
    assert verbs.type_of('servir') is VerbType.INCOATIU
    assert verbs.type_of('dormir') is VerbType.PUR
    assert verbs.type_of('partir') is VerbType.UNKNOWN
    assert verbs.type_of('parlar') is VerbType.UNKNOWN


def test_container_protocol(verbs):
    assert 'cantar' in verbs
    assert 'parlar' not in verbs
    assert 42 not in verbs
    assert len(verbs) == 20
    assert len(VerbDictionary()) == 0


def test_from_plain_names():
    verbs = VerbDictionary.from_entries(['cantar'])
    assert verbs.lookup('cantar') == DictionaryEntry('cantar', VerbType.UNKNOWN)


def test_verb_type_parse():
    assert VerbType.parse('pur') is VerbType.PUR
    assert VerbType.parse(' INCOATIU ') is VerbType.INCOATIU
    assert VerbType.parse('irregular') is VerbType.UNKNOWN


def test_load(tmp_path):
    path = tmp_path / 'verbs.tsv'
    path.write_text(
        "# infinitive\ttype\n"
        "cantar\tpur\n"
        "\n"
        "servir\tincoatiu\n"
        "conèixer\n",
        encoding='utf-8',
    )
    verbs = VerbDictionary.load(path)
    assert len(verbs) == 3
    assert verbs.type_of('servir') is VerbType.INCOATIU
    assert verbs.lookup('coneixer') == DictionaryEntry('conèixer', VerbType.UNKNOWN)


def test_load_rejects_malformed_lines(tmp_path):
    path = tmp_path / 'verbs.tsv'
    path.write_text("cantar\tpur\textra\n", encoding='utf-8')
    with pytest.raises(DictionaryFormatError, match='verbs.tsv:1'):
        VerbDictionary.load(path)


# =============================================================================
# INTERFACE
# =============================================================================

def test_morphology_with_injected_dictionary(verbs):
    morph = CatalanMorphology(dictionary=verbs)
    infs, variants = morph.infinitives_of("canto")
    assert "cantar" in infs
    assert "cantar" in variants
    assert "casa" in morph.base_of("cases")
    assert morph.add_diacritics("coneixer") == ["conèixer"]
    assert "cantar" in morph.base_infinitives_of("canto")
    assert "cantar" in morph.base_infinitives_of("cantàvem")


def test_morphology_loads_configured_dictionary(tmp_path):
    path = tmp_path / 'verbs.tsv'
    path.write_text("cantar\tpur\n", encoding='utf-8')
    morph = CatalanMorphology(Config(dictionary_path=str(path)))
    assert len(morph.dictionary) == 1
    assert morph.infinitives_of("cantem")[0] == ["cantar"]


def test_morphology_without_dictionary():
    morph = CatalanMorphology(Config())
    infs, variants = morph.infinitives_of("canto")
    assert infs == []
    assert "cantar" in variants


def test_lemmas_of(verbs):
    morph = CatalanMorphology(dictionary=verbs)
    lemmas = morph.lemmas_of("cantes")
    assert "cantar" in lemmas
    assert "cant" in lemmas
