## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from dataclasses import dataclass, replace

import lark
from .types import Cardinality, SwitchSpec
from .errors import MalformedSpecification, InvalidCardinality, DuplicateSwitch, SwitchNotFound, \
                    UnknownSwitch, InvalidArgument, NotInitialized


DEFAULT_SWITCH_PREFIXES = r"(--|-)"

SPECIFICATION_GRAMMAR = r"""?start: specification
specification: NAME _LPAR CARDINALITY_TEXT? _RPAR

NAME: /[^\s()]+/
CARDINALITY_TEXT: /[^()]+/
_LPAR: "("
_RPAR: ")"
"""

CARDINALITY_GRAMMAR = r"""?start: cardinality
cardinality: INT                -> exact
           | STAR               -> any
           | INT _DASH STAR     -> at_least
           | INT _DASH INT      -> between

INT: /[0-9]+/
STAR: "*"
_DASH: "-"
"""

FORMAT_HINT = "each switch must be followed by its number of values in parentheses, " \
              "e.g. `--version(0) --file(1) --range(1-3) --twomore(2-*) --any(*)`"

_SPECIFICATION_PARSER = lark.Lark(SPECIFICATION_GRAMMAR, parser="lalr", lexer="contextual")
_CARDINALITY_PARSER = lark.Lark(CARDINALITY_GRAMMAR, parser="lalr", lexer="contextual")


def looks_like_switch(token: str, prefixes: str = DEFAULT_SWITCH_PREFIXES) -> bool:
    return re.match(prefixes, token) is not None


def parse_cardinality(text: str, *, switch_name: str = None) -> Cardinality:
    """Parse the text between parentheses: `N`, `N-M`, `N-*` or `*`."""
    try:
        tree = _CARDINALITY_PARSER.parse(text)
    except lark.exceptions.UnexpectedInput:
        raise InvalidCardinality(f"Cardinality `{text}` of {switch_name or 'switch'} must be a number, "
                                 f"an interval or `*`; {FORMAT_HINT}.",
                                 switch_name=switch_name, specification=text) from None

    numbers = [int(tok) for tok in tree.children if tok.type == 'INT']
    match tree.data:
        case 'exact': return Cardinality.exact(numbers[0])
        case 'any': return Cardinality.any()
        case 'at_least': return Cardinality.at_least(numbers[0])
        case 'between':
            lo, hi = numbers
            if lo > hi:
                raise InvalidCardinality(f"Cardinality `{text}` of {switch_name or 'switch'} has its minimum "
                                         f"above its maximum.", switch_name=switch_name, specification=text)
            return Cardinality.between(lo, hi)
    raise NotImplementedError(f"Unexpected cardinality node `{tree.data}` from parser.")


def parse_specification(text: str, prefixes: str = DEFAULT_SWITCH_PREFIXES) -> SwitchSpec:
    if text is None or not text.strip():
        raise InvalidArgument("Non-empty value required for switch specification.")
    text = text.strip()
    try:
        tree = _SPECIFICATION_PARSER.parse(text)
    except lark.exceptions.UnexpectedInput:
        raise MalformedSpecification(f"Incorrect format of switch `{text}`: {FORMAT_HINT}.",
                                     specification=text) from None

    name, *rest = tree.children
    if not looks_like_switch(name, prefixes):
        raise MalformedSpecification(f"Switch `{name}` must start with a switch prefix matching `{prefixes}`.",
                                     switch_name=str(name), specification=text)
    if not rest:
        raise InvalidCardinality(f"A number or an interval must be specified between the parentheses of `{text}`.",
                                 switch_name=str(name), specification=text)
    return SwitchSpec(str(name), parse_cardinality(str(rest[0]), switch_name=str(name)))


def remove_cardinality(text: str) -> str:
    """Strip the `(…)` cardinality from a specification, leaving the bare switch name."""
    if text is None:
        raise InvalidArgument("Non-null value required for switch specification.")
    left, right = text.find('('), text.find(')')
    if left == -1:
        if right != -1:
            raise MalformedSpecification(f"Switch `{text}` must have both parentheses or neither.", specification=text)
        return text
    if right == -1 or right < left:
        raise MalformedSpecification(f"Switch `{text}` must have a right parenthesis after the left one.",
                                     specification=text)
    return text[:left]


@dataclass(frozen=True)
class SwitchRegistry:
    """Immutable set of declared switches; every change returns a new registry."""
    switches: tuple[SwitchSpec, ...] = ()
    implicit: SwitchSpec | None = None
    prefixes: str = DEFAULT_SWITCH_PREFIXES

    def __post_init__(self):
        seen = set()
        for spec in self.switches:
            if spec.name in seen:
                raise DuplicateSwitch(f"The possible switch `{spec.name}` is already defined.", switch_name=spec.name)
            seen.add(spec.name)

    @classmethod
    def from_string(cls, possible_switches: str, implicit: str | None = None,
                    prefixes: str = DEFAULT_SWITCH_PREFIXES) -> "SwitchRegistry":
        registry = cls(prefixes=prefixes).with_switches(possible_switches)
        return registry.with_implicit(implicit) if implicit is not None else registry

    # Configuration ───────────────────────────────────────────────────────────────────────────
    def with_switches(self, possible_switches: str) -> "SwitchRegistry":
        if possible_switches is None or not possible_switches.strip():
            raise InvalidArgument("Non-empty value required for the list of possible switches.")
        registry = replace(self, switches=())
        for text in possible_switches.split():
            registry = registry.added(text)
        return registry

    def added(self, specification: str) -> "SwitchRegistry":
        spec = parse_specification(specification, self.prefixes)
        if self.is_possible_switch(spec.name):
            raise DuplicateSwitch(f"The possible switch `{spec.name}` is already defined.", switch_name=spec.name)
        return replace(self, switches=self.switches + (spec,))

    def removed(self, specification: str) -> "SwitchRegistry":
        if specification is None or not specification.strip():
            raise InvalidArgument("Non-empty value required for switch specification.")
        specification = specification.strip()
        if '(' in specification or ')' in specification:
            target = parse_specification(specification, self.prefixes)
            matches = lambda spec: spec == target
        else:
            matches = lambda spec: spec.name == specification

        for i, spec in enumerate(self.switches):
            if matches(spec):
                return replace(self, switches=self.switches[:i] + self.switches[i+1:])
        raise SwitchNotFound(f"Switch `{specification}` is not found among the possible switches; "
                             "check the spelling or declare it first.", switch_name=remove_cardinality(specification))

    def with_implicit(self, specification: str) -> "SwitchRegistry":
        return replace(self, implicit=parse_specification(specification, self.prefixes))

    # Queries ─────────────────────────────────────────────────────────────────────────────────
    @property
    def possible_switches(self) -> tuple[SwitchSpec, ...]:
        return self.switches

    @property
    def implicit_name(self) -> str:
        if self.implicit is None:
            raise NotInitialized("No implicit switch is configured; set one before asking for its name.")
        return self.implicit.name

    def candidates(self):
        yield from self.switches
        if self.implicit is not None:
            yield self.implicit

    def looks_like_switch(self, token: str) -> bool:
        return looks_like_switch(token, self.prefixes)

    def is_possible_switch(self, name: str) -> bool:
        return any(spec.name == name for spec in self.switches)

    def find(self, name: str) -> SwitchSpec | None:
        # Exact name equality only; `--file` must never resolve to `--filex(2)`.
        return next((spec for spec in self.candidates() if spec.name == name), None)

    def resolve_switch(self, token: str) -> SwitchSpec:
        """Find the declared switch for a bare name or a full `name(cardinality)` specification."""
        requested = parse_specification(token, self.prefixes) if ('(' in token or ')' in token) else None
        name = requested.name if requested is not None else token

        if (spec := self.find(name)) is not None:
            if requested is not None and (requested.min_values, requested.max_values) != (spec.min_values, spec.max_values):
                raise InvalidCardinality(f"Switch `{name}` is declared as `{spec}`, not `{requested}`.",
                                         switch_name=name, specification=token)
            return spec
        raise UnknownSwitch(f"Unknown switch `{name}`; it must be declared among the possible switches "
                            "or as the implicit switch.", switch_name=name)

    def __len__(self):
        return len(self.switches)

    def __iter__(self):
        return iter(self.switches)

    def __str__(self):
        return ' '.join(str(spec) for spec in self.switches)
