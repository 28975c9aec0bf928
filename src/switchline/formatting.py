## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re


ANSI_RE = re.compile(r'\033\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub('', text)


class AnsiStripper:
    """File-like wrapper that strips ANSI codes before writing to the original stream."""
    def __init__(self, stream):
        self.stream = stream

    def write(self, text: str) -> int:
        return self.stream.write(strip_ansi(text))

    def flush(self) -> None:
        self.stream.flush()


def format_value(value: str) -> str:
    return '"' + value.replace('"', '\\"') + '"'

def format_values(values, width=None, indent=0) -> str:
    formatted = [format_value(v) for v in values]
    single_line = '[' + ', '.join(formatted) + ']'
    # If it fits on one line, use single line format.
    if width is None or len(single_line) + indent <= width: return single_line
    # Otherwise use multi-line format...
    return '[   ' + ('\n' + ' ' * (indent + 4)).join(formatted) + '\n' + (' ' * indent) + ']'


def show_parse_step(step: int, token: str, kind: str, target=None, file=None):
    """One trace line per token: position, token, and where it ended up."""
    match kind:
        case 'switch':
            where = f"\033[1;97mopen\033[0m {target.name} ({target.cardinality})"
        case 'value':
            where = f"\033[36m→\033[0m {target.name} [{len(target.values)}]"
        case 'switchless':
            where = "\033[33m→\033[0m switchless" + (f" + {target.name} [{len(target.values)}]" if target else "")
        case _:
            raise NotImplementedError(f"Unknown parse step `{kind}`.")
    print(f"\033[90m{step:>3} :\033[0m  {format_value(token):<24} {where}", file=file)


def format_result(result, usage_switch=None, help_switch=None, version_switch=None, width=72) -> str:
    lines = [f"\033[97mcommand line\033[0m\t{result.original_command_line}"]
    for name, values in result.switch_values.items():
        lines.append(f"\033[1;97m{name}\033[0m\t= {format_values(values, width=width, indent=len(name) + 3)}")
    lines.append(f"\033[97mswitchless\033[0m\t{format_values(result.switchless_arguments, width=width, indent=12)}")

    requested = [label for label, name in (('usage', usage_switch), ('help', help_switch), ('version', version_switch))
                 if name is not None and name in result.switch_values]
    if requested:
        lines.append(f"\033[97mrequested\033[0m\t{' '.join(requested)}")
    return '\n'.join(lines)
