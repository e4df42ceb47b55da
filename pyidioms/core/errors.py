"""Common exceptions for pyidioms library."""
from __future__ import annotations


class PyIdiomsError(Exception):
    pass


class InvalidArgument(PyIdiomsError, ValueError):
    """Raised by validated mutators; the guarded state is left untouched."""


class StateError(PyIdiomsError):
    pass


class ConfigError(PyIdiomsError):
    pass


class RegistryError(PyIdiomsError):
    pass


class UnknownKind(RegistryError, KeyError):
    def __str__(self) -> str:  # KeyError quotes its args
        return str(self.args[0]) if self.args else ""


class SerializationError(PyIdiomsError):
    pass
