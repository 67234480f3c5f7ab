from __future__ import annotations


class GraftError(Exception):
    """Base class for graft query failures."""


class NotFoundError(GraftError):
    def __init__(self, value: str, reason: str = "not found"):
        super().__init__(f"{reason}: {value}")
        self.value = value


class NoTypeError(GraftError):
    def __init__(self, path: str):
        super().__init__(f"no type: {path}")
        self.path = path


class MultipleTypesError(GraftError):
    def __init__(self, path: str, types: list[str]):
        super().__init__(f"found multiple types for {path}: {types}")
        self.path = path
        self.types = types
