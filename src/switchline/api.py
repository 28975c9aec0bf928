## switchline — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Cardinality, SwitchSpec, Switch
from .errors import *
from .registry import SwitchRegistry, DEFAULT_SWITCH_PREFIXES, parse_specification, parse_cardinality, \
                      remove_cardinality, looks_like_switch
from .tokenizer import tokenize, join_arguments
from .parser import ParseResult, parse
from .commandline import CommandLineParser, ParserConfig
