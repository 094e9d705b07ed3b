"""Errors raised while building a simulation from external input."""


class ConfigurationError(ValueError):
    """A parameter is not a valid number or is out of its allowed range."""

    def __init__(self, option: str, value, reason: str = "not a valid number"):
        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"Option '{option}' can't be equal {value!r} ({reason})")


class SeedFormatError(ConfigurationError):
    """A line of the seed-photon file could not be parsed."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        super().__init__("seed-photons", line.strip(), f"line {line_number}: {reason}")
