"""Custom exception classes and error messages."""

ERROR_MSG_INVALID_BASE = "rule base must be empty or end with '/'"
ERROR_MSG_EXPLICIT_CONFIG_MISSING = "Explicit config file not found"


class RuleInvariantError(RuntimeError):
    """Raised when a rule reaching the matcher violates its base invariant.

    This signals a bug in whatever populated the rule set; it is never a
    normal "no match" outcome.
    """

    def __init__(self, rule: object, base: str) -> None:
        super().__init__(f"{ERROR_MSG_INVALID_BASE}: {base!r}")
        self.rule = rule
        self.base = base


class ConfigLoadError(Exception):
    """Raised when a configuration file cannot be loaded."""
