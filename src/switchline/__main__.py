## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# switchline — Declarative command-line switch parser.
#

import sys
from dataclasses import dataclass

import click

from .errors import SwitchUsageError, ArityViolation
from .formatting import AnsiStripper, format_result
from .commandline import CommandLineParser, ParserConfig


EXIT_USAGE_ERROR = 2


@dataclass(frozen=True)
class CliConfig:
    switches: str
    implicit: str | None
    command_line: str | None
    verbose: int
    plain: bool


class SwitchRunner:
    def __init__(self, config: CliConfig):
        self.config = config
        trace_file = AnsiStripper(sys.stderr) if config.plain else sys.stderr
        self.parser = CommandLineParser(ParserConfig(verbosity=config.verbose), trace_file=trace_file)

    def _echo(self, text: str, err: bool = False) -> None:
        click.echo(text, err=err, color=False if self.config.plain else None)

    def _fatal_error(self, message: str, exc: Exception) -> int:
        self._echo(f'\033[30;43m {message} \033[0m {exc} (Exception: \033[33m{type(exc).__name__}\033[0m)', err=True)
        return EXIT_USAGE_ERROR

    def run(self, arguments: tuple[str, ...]) -> int:
        try:
            self.parser.set_possible_switches(self.config.switches)
            if self.config.implicit:
                self.parser.set_implicit_switch(self.config.implicit)
        except SwitchUsageError as exc:
            return self._fatal_error("SPECIFICATION ERROR.", exc)

        try:
            if self.config.command_line is not None:
                self.parser.set_command_line(self.config.command_line)
            else:
                self.parser.set_arguments(arguments)
        except ArityViolation as exc:
            return self._fatal_error("ARITY ERROR.", exc)
        except SwitchUsageError as exc:
            return self._fatal_error("USAGE ERROR.", exc)

        cfg = self.parser.config
        self._echo(format_result(self.parser.result, usage_switch=cfg.usage_switch,
                                 help_switch=cfg.help_switch, version_switch=cfg.version_switch))
        return 0


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--switches', '-s', required=True, help='Possible switches, e.g. "--file(1) --multi(*)".')
@click.option('--implicit', '-i', default=None, help='Implicit switch collecting switchless arguments, e.g. "--input(1-*)".')
@click.option('--command-line', '-c', 'command_line', default=None, help='Command line string to tokenize and parse.')
@click.option('--verbose', '-v', default=0, count=True, help='Trace how each token is assigned.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from all output.')
@click.argument('arguments', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, switches: str, implicit: str | None, command_line: str | None,
        verbose: int, plain: bool, arguments: tuple[str, ...]) -> None:
    config = CliConfig(switches=switches, implicit=implicit, command_line=command_line, verbose=verbose, plain=plain)
    runner = SwitchRunner(config)
    ctx.exit(runner.run(arguments))


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='switchline')


if __name__ == "__main__":
    main()
