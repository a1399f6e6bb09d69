"""
Catalan Morphological Data

Declarative tables consumed by the engine:
- Verb ending table (conjugation groups per infinitive ending)
- Diacritic restoration rules
- Irregular comparative/superlative adjectives

Ending table layout:
    infinitive ending -> {
        'possible_base': predicate(base, dictionary) -> bool,
        'default': {slot: [suffix, ...]},          # regular paradigm
        'groups': {name: {slot: [suffix, ...]}},   # overrides, index aligned
    }

Group names encode how a stripped stem becomes the dictionary stem:
    ''          plain strip (rejected for inchoative verbs)
    'incoatiu'  inchoative stem (rejected for pure verbs)
    'v/an'      whole stem 'v' becomes 'an' (vaig -> anar)
    '-e/-eu'    stem tail 'e' becomes 'eu' (bec -> beure)
Several names sharing one definition are joined with commas.
A None slot inside a group falls back to the default suffix.
"""

from typing import Callable, Dict, List, Tuple

from .dictionary import VerbDictionary, VerbType


def _not_inchoative(ending: str) -> Callable[[str, VerbDictionary], bool]:
    """Stem predicate for endings without inchoative verbs."""
    def possible_base(base: str, verbs: VerbDictionary) -> bool:
        return verbs.type_of(base + ending) is not VerbType.INCOATIU
    return possible_base


def _any_stem(base: str, verbs: VerbDictionary) -> bool:
    return True


# =============================================================================
# VERB ENDINGS
# =============================================================================

VERB_ENDINGS: Dict[str, Dict] = {
    # cantar
    'ar': {
        'possible_base': _not_inchoative('ar'),
        'default': {
            'inf': ['ar'],
            'ger': ['ant'],
            'pp': ['at', 'ada', 'ats', 'ades'],
            'ind_pres': ['o', 'es', 'a', 'em', 'eu', 'en'],
            'ind_imp': ['ava', 'aves', 'ava', 'àvem', 'àveu', 'aven'],
            'ind_past': ['í', 'ares', 'à', 'àrem', 'àreu', 'aren'],
            'fut': ['aré', 'aràs', 'arà', 'arem', 'areu', 'aran'],
            'cond': ['aria', 'aries', 'aria', 'aríem', 'aríeu', 'arien'],
            'subj_pres': ['i', 'is', 'i', 'em', 'eu', 'in'],
            'subj_imp': ['és', 'essis', 'és', 'éssim', 'éssiu', 'essin'],
            'imp': ['a', 'i', 'em', 'eu', 'in'],
        },
        'groups': {
            '': {},
            # anar: vaig, vas, va, anem, aneu, van
            'v/an': {
                'ind_pres': ['aig', 'as', 'a', None, None, 'an'],
                'subj_pres': ['agi', 'agis', 'agi', None, None, 'agin'],
                'imp': ['es', 'agi', None, None, 'agin'],
            },
        },
    },

    # témer
    'er': {
        'possible_base': _not_inchoative('er'),
        'default': {
            'inf': ['er'],
            'ger': ['ent'],
            'pp': ['ut', 'uda', 'uts', 'udes'],
            'ind_pres': ['o', 's', '', 'em', 'eu', 'en'],
            'ind_imp': ['ia', 'ies', 'ia', 'íem', 'íeu', 'ien'],
            'ind_past': ['í', 'eres', 'é', 'érem', 'éreu', 'eren'],
            'fut': ['eré', 'eràs', 'erà', 'erem', 'ereu', 'eran'],
            'cond': ['eria', 'eries', 'eria', 'eríem', 'eríeu', 'erien'],
            'subj_pres': ['i', 'is', 'i', 'em', 'eu', 'in'],
            'subj_imp': ['és', 'essis', 'és', 'éssim', 'éssiu', 'essin'],
            'imp': ['', 'i', 'em', 'eu', 'in'],
        },
        'groups': {
            '': {},
            # conèixer, créixer, néixer: conec, coneixes, conegut
            '-e/-eix': {
                'pp': ['gut', 'guda', 'guts', 'gudes'],
                'ind_pres': ['c', 'ixes', 'ix', 'ixem', 'ixeu', 'ixen'],
                'ind_past': ['guí', 'gueres', 'gué', 'guérem', 'guéreu', 'gueren'],
                'subj_pres': ['gui', 'guis', 'gui', 'guem', 'gueu', 'guin'],
                'subj_imp': ['gués', 'guessis', 'gués', 'guéssim', 'guéssiu', 'guessin'],
                'imp': ['ix', 'gui', 'guem', 'ixeu', 'guin'],
            },
        },
    },

    # batre, perdre
    're': {
        'possible_base': _any_stem,
        'default': {
            'inf': ['re'],
            'ger': ['ent'],
            'pp': ['ut', 'uda', 'uts', 'udes'],
            'ind_pres': ['o', 's', '', 'em', 'eu', 'en'],
            'ind_imp': ['ia', 'ies', 'ia', 'íem', 'íeu', 'ien'],
            'ind_past': ['í', 'eres', 'é', 'érem', 'éreu', 'eren'],
            'fut': ['ré', 'ràs', 'rà', 'rem', 'reu', 'ran'],
            'cond': ['ria', 'ries', 'ria', 'ríem', 'ríeu', 'rien'],
            'subj_pres': ['i', 'is', 'i', 'em', 'eu', 'in'],
            'subj_imp': ['és', 'essis', 'és', 'éssim', 'éssiu', 'essin'],
            'imp': ['', 'i', 'em', 'eu', 'in'],
        },
        'groups': {
            '': {},
            # beure, deure, moure, ploure: bec, beus, beu, bevem, begut
            '-e/-eu,-o/-ou': {
                'ger': ['vent'],
                'pp': ['gut', 'guda', 'guts', 'gudes'],
                'ind_pres': ['c', 'us', 'u', 'vem', 'veu', 'uen'],
                'ind_imp': ['via', 'vies', 'via', 'víem', 'víeu', 'vien'],
                'ind_past': ['guí', 'gueres', 'gué', 'guérem', 'guéreu', 'gueren'],
                'subj_pres': ['gui', 'guis', 'gui', 'guem', 'gueu', 'guin'],
                'subj_imp': ['gués', 'guessis', 'gués', 'guéssim', 'guéssiu', 'guessin'],
                'imp': ['u', 'gui', 'guem', 'veu', 'guin'],
            },
            # viure, conviure: visc, vius, viu, vivim, viscut
            '-i/-iu': {
                'ger': ['vint'],
                'pp': ['scut', 'scuda', 'scuts', 'scudes'],
                'ind_pres': ['sc', 'us', 'u', 'vim', 'viu', 'uen'],
                'ind_imp': ['via', 'vies', 'via', 'víem', 'víeu', 'vien'],
                'ind_past': ['squí', 'squeres', 'squé', 'squérem', 'squéreu', 'squeren'],
                'subj_pres': ['squi', 'squis', 'squi', 'squem', 'squeu', 'squin'],
                'subj_imp': ['squés', 'squessis', 'squés', 'squéssim', 'squéssiu', 'squessin'],
                'imp': ['u', 'squi', 'squem', 'viu', 'squin'],
            },
        },
    },

    # dormir (pure), servir (inchoative)
    'ir': {
        'possible_base': _any_stem,
        'default': {
            'inf': ['ir'],
            'ger': ['int'],
            'pp': ['it', 'ida', 'its', 'ides'],
            'ind_pres': ['o', 's', '', 'im', 'iu', 'en'],
            'ind_imp': ['ia', 'ies', 'ia', 'íem', 'íeu', 'ien'],
            'ind_past': ['í', 'ires', 'í', 'írem', 'íreu', 'iren'],
            'fut': ['iré', 'iràs', 'irà', 'irem', 'ireu', 'iran'],
            'cond': ['iria', 'iries', 'iria', 'iríem', 'iríeu', 'irien'],
            'subj_pres': ['i', 'is', 'i', 'im', 'iu', 'in'],
            'subj_imp': ['ís', 'issis', 'ís', 'íssim', 'íssiu', 'issin'],
            'imp': ['', 'i', 'im', 'iu', 'in'],
        },
        'groups': {
            '': {},
            'incoatiu': {
                'ind_pres': ['eixo', 'eixes', 'eix', None, None, 'eixen'],
                'subj_pres': ['eixi', 'eixis', 'eixi', None, None, 'eixin'],
                'imp': ['eix', 'eixi', None, None, 'eixin'],
            },
        },
    },

    # dur, endur
    'ur': {
        'possible_base': _any_stem,
        'default': {
            'inf': ['ur'],
            'ger': ['uent'],
            'pp': ['ut', 'uta', 'uts', 'utes'],
            'ind_pres': ['uc', 'uus', 'uu', 'uem', 'ueu', 'uen'],
            'ind_imp': ['uia', 'uies', 'uia', 'úiem', 'úieu', 'uien'],
            'ind_past': ['uguí', 'ugueres', 'ugué', 'uguérem', 'uguéreu', 'ugueren'],
            'fut': ['uré', 'uràs', 'urà', 'urem', 'ureu', 'uran'],
            'cond': ['uria', 'uries', 'uria', 'uríem', 'uríeu', 'urien'],
            'subj_pres': ['ugui', 'uguis', 'ugui', 'uguem', 'ugueu', 'uguin'],
            'subj_imp': ['ugués', 'uguessis', 'ugués', 'uguéssim', 'uguéssiu', 'uguessin'],
            'imp': ['uu', 'ugui', 'uguem', 'ueu', 'uguin'],
        },
        'groups': {
            '': {},
        },
    },
}


# =============================================================================
# DIACRITICS
# =============================================================================

# (plain ending, accented ending), first match wins
DIACRITICS: List[Tuple[str, str]] = [
    ('aixer', 'àixer'), ('anyer', 'ànyer'),
    ('coneixer', 'conèixer'), ('creixer', 'créixer'), ('reixer', 'rèixer'),
    ('neixer', 'néixer'), ('peixer', 'péixer'),
    ('enyer', 'ènyer'), ('encer', 'èncer'), ('emer', 'émer'),
    ('aitzar', 'aïtzar'), ('eitzar', 'eïtzar'),
    ('orrer', 'órrer'), ('orcer', 'òrcer'), ('omer', 'òmer'),
    ('umer', 'úmer'), ('unyer', 'únyer'),
]

# Stems that may have lost a cedilla: comencar -> començar
CEDILLA_ENDING = ('car', 'çar')


# =============================================================================
# ADJECTIVE DEGREES
# =============================================================================

# Irregular comparatives and superlatives (normalized) -> positive degree
DEGREE_ADJECTIVES: Dict[str, List[str]] = {
    'millor': ['bo', 'bon'], 'optim': ['bo', 'bon'],
    'pitjor': ['mal', 'dolent'], 'pessim': ['mal', 'dolent'],
    'major': ['gran'], 'maxim': ['gran'],
    'menor': ['petit'], 'minim': ['petit'],
    'superior': ['alt'], 'suprem': ['alt'],
    'inferior': ['baix'], 'infim': ['baix'],
}

SUPERLATIVE_SUFFIXES: Tuple[str, ...] = ('íssim', 'issim')
