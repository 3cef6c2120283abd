"""
Exceptions raised while building or loading a pass.
"""


class PassGeneratorError(Exception):
    """Base class for all pass generator errors."""


class DuplicateFieldKeyError(PassGeneratorError):
    """A field key is already used in one of the five field sections."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"A field with the key '{key}' is already present")


class InvalidFormatError(PassGeneratorError, ValueError):
    """A value cannot be rendered in the format pass.json requires."""

    def __init__(self, value, message: str = "use #rgb or #rrggbb for color values"):
        self.value = value
        super().__init__(f"{message}: {value!r}")


class RequestLoadError(PassGeneratorError):
    """A pass description could not be turned into a request."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{message} (at {path})")
