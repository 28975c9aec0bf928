## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Literal
from dataclasses import dataclass, field

from .errors import ArityViolation, SwitchOverflow, InvalidArgument, InvalidCardinality


CardinalityKind = Literal["exact", "range", "at_least", "any"]


@dataclass(frozen=True)
class Cardinality:
    kind: CardinalityKind
    min_values: int
    max_values: int | None        # None when unbounded.

    def __post_init__(self):
        if self.min_values < 0 or (self.max_values is not None and self.max_values < 0):
            raise InvalidCardinality("Min and max values must be non-negative.")
        if self.max_values is not None and self.min_values > self.max_values:
            raise InvalidCardinality(f"Min number of values ({self.min_values}) exceeds max number ({self.max_values}).")

    @classmethod
    def exact(cls, n: int) -> "Cardinality":
        return cls("exact", n, n)

    @classmethod
    def between(cls, lo: int, hi: int) -> "Cardinality":
        return cls("range", lo, hi)

    @classmethod
    def at_least(cls, lo: int) -> "Cardinality":
        return cls("at_least", lo, None)

    @classmethod
    def any(cls) -> "Cardinality":
        return cls("any", 0, None)

    def allows(self, count: int) -> bool:
        return self.min_values <= count and (self.max_values is None or count <= self.max_values)

    def accepts_more(self, count: int) -> bool:
        return self.max_values is None or count < self.max_values

    def __str__(self):
        match self.kind:
            case "exact": return str(self.min_values)
            case "range": return f"{self.min_values}-{self.max_values}"
            case "at_least": return f"{self.min_values}-*"
            case "any": return "*"


@dataclass(frozen=True)
class SwitchSpec:
    name: str
    cardinality: Cardinality

    @property
    def min_values(self) -> int:
        return self.cardinality.min_values

    @property
    def max_values(self) -> int | None:
        return self.cardinality.max_values

    def __str__(self):
        return f"{self.name}({self.cardinality})"


def _describe_bound(n: int | None) -> str:
    if n is None: return "any number of values"
    return f"{n} value" if n == 1 else f"{n} values"


@dataclass
class Switch:
    """Accumulates the values of one switch occurrence during a parse pass."""
    name: str
    min_values: int
    max_values: int | None
    values: list[str] = field(default_factory=list)
    is_implicit: bool = False

    def __post_init__(self):
        if not self.name:
            raise InvalidArgument("Switch name is null or empty string.")
        if '(' in self.name or ')' in self.name:
            raise InvalidArgument(f"Switch name `{self.name}` can not contain parentheses.", switch_name=self.name)
        if self.min_values < 0 or (self.max_values is not None and self.max_values < 0):
            raise InvalidArgument("Min and max values must be non-negative.", switch_name=self.name)
        if self.max_values is not None and self.min_values > self.max_values:
            raise InvalidArgument("Min number of values must not exceed max number of values.", switch_name=self.name)

    @classmethod
    def from_spec(cls, spec: SwitchSpec, is_implicit: bool = False) -> "Switch":
        return cls(spec.name, spec.min_values, spec.max_values, is_implicit=is_implicit)

    @property
    def cardinality(self) -> Cardinality:
        if self.max_values is None:
            return Cardinality.any() if self.min_values == 0 else Cardinality.at_least(self.min_values)
        if self.min_values == self.max_values:
            return Cardinality.exact(self.min_values)
        return Cardinality.between(self.min_values, self.max_values)

    @property
    def label(self) -> str:
        return f"implicit switch `{self.name}`" if self.is_implicit else f"switch `{self.name}`"

    def is_full(self) -> bool:
        return not self.cardinality.accepts_more(len(self.values))

    def add_value(self, value: str, strict: bool = True) -> None:
        """Append a value; with `strict` the switch refuses values beyond its maximum."""
        if strict and self.is_full():
            detail = "already has a value" if self.max_values == 1 else f"already has {len(self.values)} values"
            raise SwitchOverflow(f"The {self.label} {detail}.", switch_name=self.name, is_implicit=self.is_implicit,
                                 expected=self.cardinality, actual=len(self.values) + 1)
        self.values.append(value)

    def validate(self) -> None:
        count, expected = len(self.values), self.cardinality
        if expected.allows(count):
            return
        if count < self.min_values:
            raise ArityViolation(
                f"Too few values are specified for {self.label} "
                f"(must be no less than {_describe_bound(self.min_values)}, specified {count}).",
                switch_name=self.name, is_implicit=self.is_implicit, expected=expected, actual=count)
        raise ArityViolation(
            f"Too many values are specified for {self.label} "
            f"(must be up to {_describe_bound(self.max_values)}, specified {count}).",
            switch_name=self.name, is_implicit=self.is_implicit, expected=expected, actual=count)
