## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, replace

from .types import Switch, SwitchSpec
from .errors import InvalidArgument, NotInitialized
from .registry import SwitchRegistry, DEFAULT_SWITCH_PREFIXES, looks_like_switch
from .parser import ParseResult, parse as parse_tokens
from .tokenizer import tokenize, join_arguments


DEFAULT_USAGE_SWITCH = "--usage"
DEFAULT_HELP_SWITCH = "--help"
DEFAULT_VERSION_SWITCH = "--version"


@dataclass(frozen=True)
class ParserConfig:
    usage_switch: str = DEFAULT_USAGE_SWITCH
    help_switch: str = DEFAULT_HELP_SWITCH
    version_switch: str = DEFAULT_VERSION_SWITCH
    prefixes: str = DEFAULT_SWITCH_PREFIXES
    verbosity: int = 0


class CommandLineParser:
    """Stateful facade: holds the declared switches and the result of the last parse.

    Usage:
        clp = CommandLineParser()
        clp.set_possible_switches("--version(0) --usage(0) --help(0) --multi(*)")
        clp.set_implicit_switch("--file(1)")
        clp.set_arguments(sys.argv[1:])
        if clp.is_usage_requested(): ...
        elif clp.is_switch_present("--multi"): values = clp.get_switch_values("--multi")
    """

    def __init__(self, config: ParserConfig | None = None, trace_file=None):
        self.config = config or ParserConfig()
        self.trace_file = trace_file
        self.registry = SwitchRegistry(prefixes=self.config.prefixes)
        self.result: ParseResult | None = None
        self._arguments: tuple[str, ...] | None = None
        self._original_command_line: str | None = None

    def _require_result(self) -> ParseResult:
        if not len(self.registry):
            raise NotInitialized("Call set_possible_switches() and set_arguments() before querying switches.")
        if self.result is None:
            raise NotInitialized("Call set_arguments() or set_command_line() before querying switches.")
        return self.result

    def _require_switch_name(self, name: str) -> str:
        if not name or not looks_like_switch(name, self.config.prefixes):
            raise InvalidArgument(f"Switch `{name}` must start with a prefix matching `{self.config.prefixes}`.",
                                  switch_name=name)
        return name

    # Possible switches ───────────────────────────────────────────────────────────────────────
    def set_possible_switches(self, possible_switches: str) -> None:
        self.registry = self.registry.with_switches(possible_switches)

    def get_possible_switches(self) -> tuple[SwitchSpec, ...]:
        if not len(self.registry):
            raise NotInitialized("Call set_possible_switches() before asking for possible switches.")
        return self.registry.possible_switches

    def add_possible_switch(self, specification: str) -> None:
        self.registry = self.registry.added(specification)

    def remove_possible_switch(self, specification: str) -> None:
        self.registry = self.registry.removed(specification)

    def is_possible_switch(self, name: str) -> bool:
        return self.registry.is_possible_switch(name)

    def set_implicit_switch(self, specification: str) -> None:
        if not len(self.registry):
            raise NotInitialized("Call set_possible_switches() before setting the implicit switch.")
        self.registry = self.registry.with_implicit(specification)

    def get_implicit_switch(self) -> str:
        return self.registry.implicit_name

    def create_switch(self, specification: str) -> Switch:
        spec = self.registry.resolve_switch(specification)
        return Switch.from_spec(spec, is_implicit=spec is self.registry.implicit)

    # Well-known switches ─────────────────────────────────────────────────────────────────────
    def get_usage_switch_name(self) -> str:
        return self.config.usage_switch

    def set_usage_switch_name(self, name: str) -> None:
        self.config = replace(self.config, usage_switch=self._require_switch_name(name))

    def get_help_switch_name(self) -> str:
        return self.config.help_switch

    def set_help_switch_name(self, name: str) -> None:
        self.config = replace(self.config, help_switch=self._require_switch_name(name))

    def get_version_switch_name(self) -> str:
        return self.config.version_switch

    def set_version_switch_name(self, name: str) -> None:
        self.config = replace(self.config, version_switch=self._require_switch_name(name))

    # Input ───────────────────────────────────────────────────────────────────────────────────
    def set_arguments(self, args) -> None:
        if args is None:
            raise InvalidArgument("Args argument must not be null.")
        args = tuple(args)
        command_line = join_arguments(args)
        self._arguments, self._original_command_line = args, command_line
        # Forget the previous result first, so a failing parse leaves nothing to query.
        self.result = None
        if not len(self.registry):
            raise NotInitialized("Call set_possible_switches() before parsing arguments.")
        self.result = parse_tokens(self.registry, args, command_line=command_line,
                                   verbosity=self.config.verbosity, file=self.trace_file)

    parse = set_arguments

    def set_command_line(self, line: str) -> None:
        """Tokenize `line` and parse it; the original command line is rebuilt from the tokens."""
        self.set_arguments(tokenize(line))

    def get_arguments(self) -> tuple[str, ...]:
        if self._arguments is None:
            raise NotInitialized("Call set_arguments() or set_command_line() before asking for arguments.")
        return self._arguments

    def get_original_command_line(self) -> str:
        if self._original_command_line is None:
            raise NotInitialized("Call set_command_line() or set_arguments() before asking for the command line.")
        return self._original_command_line

    def is_initialized(self) -> bool:
        return self.result is not None

    # Queries ─────────────────────────────────────────────────────────────────────────────────
    def get_switch_map(self) -> dict[str, list[str]]:
        return self._require_result().switch_map

    def is_switch_present(self, name: str) -> bool:
        return self._require_result().is_switch_present(name)

    def get_switch_value(self, name: str) -> str:
        return self._require_result().get_switch_value(name)

    def get_switch_values(self, name: str) -> list[str]:
        return self._require_result().get_switch_values(name)

    def get_switch_value_count(self, name: str) -> int:
        return self._require_result().get_switch_value_count(name)

    def get_switchless_arguments(self) -> list[str]:
        return self._require_result().get_switchless_arguments()

    def is_usage_requested(self) -> bool:
        return self.is_switch_present(self.config.usage_switch)

    def is_help_requested(self) -> bool:
        return self.is_switch_present(self.config.help_switch)

    def is_version_requested(self) -> bool:
        return self.is_switch_present(self.config.version_switch)
