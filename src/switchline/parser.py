## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
from types import MappingProxyType
from typing import Mapping
from dataclasses import dataclass

from .types import Switch
from .errors import UnknownSwitch, InvalidArgument, SwitchNotPresent, MultipleValues
from .registry import SwitchRegistry, DEFAULT_SWITCH_PREFIXES, looks_like_switch
from .tokenizer import join_arguments
from .formatting import show_parse_step


@dataclass(frozen=True)
class ParseResult:
    switch_values: Mapping[str, tuple[str, ...]]
    switchless_arguments: tuple[str, ...]
    original_command_line: str
    arguments: tuple[str, ...] = ()
    prefixes: str = DEFAULT_SWITCH_PREFIXES

    def _require_present(self, name: str) -> tuple[str, ...]:
        if not self.is_switch_present(name):
            raise SwitchNotPresent(f"Switch `{name}` is not present on the command line; "
                                   "use is_switch_present() to check for a switch.", switch_name=name)
        return self.switch_values[name]

    def is_switch_present(self, name: str) -> bool:
        if not name:
            raise InvalidArgument("Non-empty value required for switch name.")
        if not looks_like_switch(name, self.prefixes):
            raise InvalidArgument(f"Switch `{name}` must start with a prefix matching `{self.prefixes}`.",
                                  switch_name=name)
        return name in self.switch_values

    def get_switch_value(self, name: str) -> str:
        values = self._require_present(name)
        if len(values) > 1:
            raise MultipleValues(f"Switch `{name}` has {len(values)} values; use get_switch_value_count() "
                                 "and get_switch_values() instead.", switch_name=name)
        return values[0] if values else ""

    def get_switch_values(self, name: str) -> list[str]:
        return list(self._require_present(name))

    def get_switch_value_count(self, name: str) -> int:
        return len(self._require_present(name))

    def get_switchless_arguments(self) -> list[str]:
        return list(self.switchless_arguments)

    @property
    def switch_map(self) -> dict[str, list[str]]:
        return {name: list(values) for name, values in self.switch_values.items()}


def parse(registry: SwitchRegistry, tokens, *, command_line: str | None = None,
          verbosity: int = 0, file=None) -> ParseResult:
    """Assign each token to the active switch, the switchless list, or the implicit switch.

    Values go to the most recently opened switch until it holds its maximum; the rest become
    switchless arguments and are also collected by the implicit switch, if one is configured.
    The implicit switch is not capped while scanning, so surplus values surface as an
    `ArityViolation` during validation rather than being dropped.
    """
    if tokens is None:
        raise InvalidArgument("Args argument must not be null.")
    tokens = tuple(tokens)
    if any(token is None for token in tokens):
        raise InvalidArgument("Null value in argument array.")
    command_line = join_arguments(tokens) if command_line is None else command_line
    file = sys.stderr if file is None else file

    current: Switch | None = None
    collected: dict[str, Switch] = {}
    switchless: list[str] = []
    implicit = Switch.from_spec(registry.implicit, is_implicit=True) if registry.implicit is not None else None

    for step, token in enumerate(tokens):
        if registry.looks_like_switch(token):
            if (spec := registry.find(token)) is None:
                raise UnknownSwitch(f"Unknown switch found: `{token}`; declare it among the possible switches first.",
                                    switch_name=token)
            # A repeated switch starts over, keeping its original position in the map.
            current = collected[spec.name] = Switch.from_spec(spec)
            kind, target = 'switch', current
        elif current is not None and not current.is_full():
            current.add_value(token)
            kind, target = 'value', current
        else:
            switchless.append(token)
            if implicit is not None:
                implicit.add_value(token, strict=False)
            kind, target = 'switchless', implicit

        if verbosity > 0:
            show_parse_step(step, token, kind, target, file=file)

    if implicit is not None and implicit.values:
        collected[implicit.name] = implicit

    for switch in collected.values():
        switch.validate()

    return ParseResult(
        switch_values=MappingProxyType({name: tuple(s.values) for name, s in collected.items()}),
        switchless_arguments=tuple(switchless),
        original_command_line=command_line,
        arguments=tokens,
        prefixes=registry.prefixes,
    )
