"""Result values: a 32-bit word holding success, system, severity and id."""

from __future__ import annotations

from enum import IntEnum

_SUCCESS_MASK = 0x80000000
_SYSTEM_MASK = 0x7F000000
_SYSTEM_SHIFT = 24
_SEVERITY_MASK = 0x00FF0000
_SEVERITY_SHIFT = 16
_ID_MASK = 0x0000FFFF


class System(IntEnum):
    """The engine system that defined a result."""

    GENERAL = 0
    APPLICATION = 1
    GRAPHICS = 2
    LOGGING = 3
    PLATFORM = 4


class Severity(IntEnum):
    """Named severities; any value from 0 to 255 is allowed."""

    SUCCESS = 0
    WARNING = 1
    DEFAULT = 127
    FATAL = 255


class Result:
    """An immutable result that is truthy on success and falsy on failure."""

    __slots__ = ("_value",)

    def __init__(self, is_success, system, id, severity=Severity.DEFAULT):
        system = System(system)
        if not 0 <= int(id) <= _ID_MASK:
            raise ValueError(f"result id {id} does not fit into 16 bits")
        if not 0 <= int(severity) <= 0xFF:
            raise ValueError(f"result severity {severity} does not fit into 8 bits")
        self._value = (
            (_SUCCESS_MASK if is_success else 0)
            | (int(system) << _SYSTEM_SHIFT)
            | (int(severity) << _SEVERITY_SHIFT)
            | int(id)
        )

    def __bool__(self):
        return self.is_success

    @property
    def is_success(self):
        """Whether the result denotes success."""
        return (self._value & _SUCCESS_MASK) != 0

    @property
    def system(self):
        """The system that defined the result."""
        return System((self._value & _SYSTEM_MASK) >> _SYSTEM_SHIFT)

    @property
    def severity(self):
        """The relative severity, from 0 to 255."""
        return (self._value & _SEVERITY_MASK) >> _SEVERITY_SHIFT

    @property
    def value(self):
        """The raw 32-bit representation."""
        return self._value

    @classmethod
    def undefined(cls):
        """The result that stands for "no value assigned"; it counts as failure."""
        # The id and severity slots receive these values in this order,
        # with the 16-bit all-ones severity truncated to 8 bits.
        return cls(False, System.GENERAL, int(Severity.DEFAULT), 0xFFFF & 0xFF)

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return self._value == other._value

    def __ne__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return self._value != other._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return (
            f"Result(is_success={self.is_success}, system={self.system.name}, "
            f"id={self._value & _ID_MASK}, severity={self.severity})"
        )


class ResultError(Exception):
    """An exception that carries the failing result."""

    def __init__(self, result, message=""):
        super().__init__(message or repr(result))
        self.result = result
        self.message = message


SUCCESS = Result(True, System.GENERAL, 1, Severity.SUCCESS)
FAILURE = Result(False, System.GENERAL, 2)
INVALID_FILE = Result(False, System.GENERAL, 3)
FILE_DOESNT_EXIST = Result(False, System.GENERAL, 4)
OUT_OF_MEMORY = Result(False, System.GENERAL, 5)
TIME_OUT = Result(False, System.GENERAL, 6, Severity.WARNING)
UNDEFINED = Result.undefined()