class HoardError(Exception):
    """Base exception for the hoard item generator."""


class MissingConfigurationError(HoardError, ValueError):
    """Raised when a required generation knob was not supplied."""

    def __init__(self, knob: str) -> None:
        self.knob = knob
        super().__init__(f"Missing configuration: {knob}")


class InvalidSettingError(HoardError, ValueError):
    """Raised when a knob value is not one of the allowed choices."""

    def __init__(self, knob: str, value: object, choices) -> None:
        self.knob = knob
        self.value = value
        self.choices = list(choices)
        super().__init__(
            f"Invalid value {value!r} for {knob}; expected one of: {', '.join(self.choices)}"
        )


class CatalogError(HoardError):
    """Raised when packaged or user supplied data fails to load or validate."""

    def __init__(self, message: str, errors=None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])

    def to_human(self) -> str:
        parts = [str(self)]
        for e in self.errors:
            path = "/".join(str(p) for p in e.path) or "<root>"
            parts.append(f" - at {path}: {e.message}")
        return "\n".join(parts)
