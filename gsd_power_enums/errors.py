class GsdPowerEnumsError(Exception):
    """Base class for errors raised while building the constant tables."""


class UnknownTypeError(GsdPowerEnumsError, LookupError):
    def __init__(self, type_id: str):
        self.type_id = type_id
        super().__init__(f'Unknown type "{type_id}"')


class TypeKindError(GsdPowerEnumsError, TypeError):
    def __init__(self, type_id: str, expected, actual):
        self.type_id = type_id
        self.expected = expected
        self.actual = actual
        super().__init__(f'Type "{type_id}" is a {actual.value} type, expected {expected.value}')


class EntryValueError(GsdPowerEnumsError, ValueError):
    """An enumerant with an empty name or a value outside 32 bits."""
