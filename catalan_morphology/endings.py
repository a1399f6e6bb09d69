"""
Ending Table Compiler

Flattens the declarative verb ending table into per-group suffix sets:

    'ar' -> FlatEnding(
        possible_base=...,
        groups=(FlatGroup('', PlainStrip(), ('ar', 'ant', 'at', ...)),
                FlatGroup('v/an', SuffixRewrite('v', 'an'), ('aig', 'as', ...))))

Compilation runs once, at import, for the bundled table. A malformed table
raises ConfigurationError and aborts initialization.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Union

from .alternation import normalize
from .data import VERB_ENDINGS
from .dictionary import VerbDictionary, VerbType

BasePredicate = Callable[[str, VerbDictionary], bool]

INCHOATIVE_GROUP = 'incoatiu'
TAIL_MARKER = '-'


class ConfigurationError(ValueError):
    """The ending table is malformed."""


# =============================================================================
# GROUP RULES
# =============================================================================

@dataclass(frozen=True)
class PlainStrip:
    """The stripped stem is the dictionary stem; inchoative verbs excluded."""

    def resolve(self, base: str, ending: str, verbs: VerbDictionary) -> Optional[str]:
        if verbs.type_of(base + ending) is VerbType.INCOATIU:
            return None
        return base


@dataclass(frozen=True)
class InchoativeGated:
    """Stem of an inchoative form; pure verbs excluded."""

    def resolve(self, base: str, ending: str, verbs: VerbDictionary) -> Optional[str]:
        if verbs.type_of(base + ending) is VerbType.PUR:
            return None
        return base


@dataclass(frozen=True)
class SuffixRewrite:
    """
    Irregular stem: from_base becomes to_base.

    Without tail_only the whole stripped stem must equal from_base
    (vaig -> 'v' -> 'an'); with tail_only only its end must match
    (coneixes -> 'cone' -> 'coneix').
    """
    from_base: str
    to_base: str
    tail_only: bool = False

    def resolve(self, base: str, ending: str, verbs: VerbDictionary) -> Optional[str]:
        if self.tail_only:
            if not base.endswith(self.from_base):
                return None
        elif base != self.from_base:
            return None
        return base[:len(base) - len(self.from_base)] + self.to_base

    @property
    def default_prefix(self) -> str:
        """Part of to_base past the matched stem, prepended to default suffixes."""
        return self.to_base[len(self.from_base):]


GroupRule = Union[PlainStrip, InchoativeGated, SuffixRewrite]


def parse_group_rule(name: str) -> GroupRule:
    """
    Decode a group name into its rule.

    Raises:
        ConfigurationError: for unknown names or malformed rewrites
    """
    if name == '':
        return PlainStrip()
    if name == INCHOATIVE_GROUP:
        return InchoativeGated()
    if name.count('/') != 1:
        raise ConfigurationError(f"Unknown group marker: {name!r}")

    from_base, to_base = name.split('/')
    tail_only = from_base.startswith(TAIL_MARKER)
    if tail_only != to_base.startswith(TAIL_MARKER):
        raise ConfigurationError(f"Tail marker on one side only: {name!r}")
    if tail_only:
        from_base, to_base = from_base[1:], to_base[1:]
    if not from_base or not to_base:
        raise ConfigurationError(f"Empty side in rewrite group: {name!r}")
    return SuffixRewrite(from_base, to_base, tail_only)


def add_for_default(rule: GroupRule) -> str:
    """Prefix given to default suffixes that a group does not override."""
    if isinstance(rule, SuffixRewrite):
        return rule.default_prefix
    return ''


# =============================================================================
# RAW TABLE
# =============================================================================

@dataclass(frozen=True)
class RawEnding:
    """One parsed entry of the declarative table."""
    infinitive: str
    possible_base: BasePredicate
    default_group: Dict[str, List[str]]
    groups: Dict[str, Dict[str, List[Optional[str]]]]


def parse_raw_table(table: Dict[str, Dict]) -> Dict[str, RawEnding]:
    """Check the declarative table shape and wrap each entry in a RawEnding."""
    parsed = {}
    for infinitive, entry in table.items():
        possible_base = entry.get('possible_base')
        if not callable(possible_base):
            raise ConfigurationError(f"'{infinitive}': possible_base must be callable")
        default_group = entry.get('default') or {}
        if not default_group:
            raise ConfigurationError(f"'{infinitive}': empty default group")
        for slot, forms in default_group.items():
            if not forms or any(form is None for form in forms):
                raise ConfigurationError(f"'{infinitive}': incomplete default slot '{slot}'")
        parsed[infinitive] = RawEnding(
            infinitive=infinitive,
            possible_base=possible_base,
            default_group=default_group,
            groups=entry.get('groups') or {'': {}},
        )
    return parsed


# =============================================================================
# COMPILED TABLE
# =============================================================================

@dataclass(frozen=True)
class FlatGroup:
    name: str
    rule: GroupRule
    suffixes: Tuple[str, ...]

    def longest_match(self, word: str) -> Optional[str]:
        """Longest suffix of the group ending word; the first defined wins a tie."""
        best = None
        for suffix in self.suffixes:
            if word.endswith(suffix) and (best is None or len(suffix) > len(best)):
                best = suffix
        return best


@dataclass(frozen=True)
class FlatEnding:
    infinitive: str
    possible_base: BasePredicate
    groups: Tuple[FlatGroup, ...]


def _merge_slot(infinitive: str, name: str, slot: str, defaults: List[str],
                forms: List[Optional[str]], prefix: str) -> List[str]:
    """Index-aligned union of a group's slot with the default slot."""
    merged = []
    for index in range(max(len(defaults), len(forms))):
        form = forms[index] if index < len(forms) else None
        if form is None:
            if index >= len(defaults):
                raise ConfigurationError(
                    f"'{infinitive}' group '{name}': no default for {slot}[{index}]")
            form = prefix + defaults[index]
        merged.append(normalize(form))
    return merged


def _flatten_group(raw: RawEnding, name: str, group: Dict[str, List[Optional[str]]]) -> FlatGroup:
    rule = parse_group_rule(name)
    unknown = set(group) - set(raw.default_group)
    if unknown:
        raise ConfigurationError(
            f"'{raw.infinitive}' group '{name}': slots not in default group: {sorted(unknown)}")

    prefix = add_for_default(rule)
    suffixes: Dict[str, None] = {}
    for slot, defaults in raw.default_group.items():
        for form in _merge_slot(raw.infinitive, name, slot, defaults, group.get(slot, []), prefix):
            suffixes.setdefault(form)

    if not suffixes:
        raise ConfigurationError(f"'{raw.infinitive}' group '{name}': no suffixes")
    return FlatGroup(name, rule, tuple(suffixes))


def compile_endings(table: Dict[str, Dict]) -> Dict[str, FlatEnding]:
    """
    Compile the declarative ending table.

    Comma-joined group names are expanded into one group each; every group
    gets one suffix per default slot position, its own where given, else the
    default suffix prefixed with the rewrite's extra stem letters.

    Raises:
        ConfigurationError: if the table is malformed
    """
    compiled = {}
    for infinitive, raw in parse_raw_table(table).items():
        groups = []
        for names, group in raw.groups.items():
            for name in names.split(','):
                groups.append(_flatten_group(raw, name.strip(), group))
        compiled[infinitive] = FlatEnding(infinitive, raw.possible_base, tuple(groups))
    return compiled


EFFECTIVE_ENDINGS: Dict[str, FlatEnding] = compile_endings(VERB_ENDINGS)
