## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class SwitchError(Exception):
    def __init__(self, message: str = "", *, switch_name=None):
        """Base class for all errors raised by switchline."""
        super().__init__(message)
        self.switch_name: str = switch_name


class SwitchUsageError(SwitchError, ValueError):
    """Bad input: unknown switches, malformed specifications, arity problems."""
    pass

class MalformedSpecification(SwitchUsageError):
    def __init__(self, message, *, switch_name=None, specification=None):
        super().__init__(message, switch_name=switch_name)
        self.specification = specification

class InvalidCardinality(SwitchUsageError):
    def __init__(self, message, *, switch_name=None, specification=None):
        super().__init__(message, switch_name=switch_name)
        self.specification = specification

class DuplicateSwitch(SwitchUsageError):
    pass

class SwitchNotFound(SwitchUsageError):
    pass

class UnknownSwitch(SwitchUsageError):
    pass

class MultipleValues(SwitchUsageError):
    pass

class InvalidArgument(SwitchUsageError):
    pass

class SwitchNotPresent(InvalidArgument):
    pass


class ArityViolation(SwitchUsageError):
    """Number of values collected for a switch falls outside its cardinality."""
    def __init__(self, message, *, switch_name=None, is_implicit=False, expected=None, actual=None):
        super().__init__(message, switch_name=switch_name)
        self.is_implicit: bool = is_implicit
        self.expected = expected
        self.actual: int = actual

class SwitchOverflow(ArityViolation):
    pass


class SwitchStateError(SwitchError, RuntimeError):
    """Sequencing problems: the object was queried before being configured."""
    pass

class NotInitialized(SwitchStateError):
    pass
