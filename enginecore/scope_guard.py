"""Context managers that run a function when a block ends."""

from __future__ import annotations


class ScopeGuard:
    """Always calls its function when the ``with`` block is left."""

    __slots__ = ("_function",)

    def __init__(self, function):
        self._function = function

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self._function()
        return False


class MutableScopeGuard:
    """Calls its function when the block is left unless it has been disabled."""

    __slots__ = ("_function", "_is_enabled")

    def __init__(self, function):
        self._function = function
        self._is_enabled = True

    def disable(self):
        """Prevent the function from being called."""
        self._is_enabled = False

    @property
    def is_enabled(self):
        return self._is_enabled

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._is_enabled:
            self._function()
        return False