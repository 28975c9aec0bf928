## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .errors import InvalidArgument


QUOTE = '"'


def tokenize(line: str) -> list[str]:
    """Split a command line on whitespace, keeping double-quoted runs together without the quotes."""
    if line is None:
        raise InvalidArgument("Non-null value required for the command line.")

    tokens, current = [], []
    quoted = in_word = False
    for ch in line:
        if ch == QUOTE:
            if quoted:
                # A closing quote always ends the token, even `""` or `"a"b`.
                tokens.append(''.join(current))
                current.clear()
                quoted = in_word = False
            else:
                quoted = True
            continue
        if quoted:
            current.append(ch)
        elif ch.isspace():
            if in_word:
                tokens.append(''.join(current))
                current.clear()
                in_word = False
        else:
            in_word = True
            current.append(ch)

    if current:
        tokens.append(''.join(current))
    return tokens


def quote_argument(arg: str) -> str:
    arg = arg.strip()
    return f'{QUOTE}{arg}{QUOTE}' if any(ch.isspace() for ch in arg) else arg


def join_arguments(args) -> str:
    """Rebuild a single command line from pre-split arguments; inverse of `tokenize`."""
    if args is None:
        raise InvalidArgument("Args argument must not be null.")
    parts = []
    for arg in args:
        if arg is None:
            raise InvalidArgument("Null value in argument array.")
        if (quoted := quote_argument(arg)):
            parts.append(quoted)
    return ' '.join(parts)
