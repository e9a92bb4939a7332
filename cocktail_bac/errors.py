"""Error raised when BAC inputs break a constraint."""


class ValidationError(ValueError):
    """Input failed validation. The message names the violated constraint(s)."""
