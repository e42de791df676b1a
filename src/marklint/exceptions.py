"""Exception hierarchy for marklint."""


class MarklintError(Exception):
    """Base class for marklint errors."""


class ConfigError(MarklintError):
    """Configuration file is missing, unreadable or invalid."""


class RuleConfigError(MarklintError):
    """Rule value or options do not match the rule's schema."""

    def __init__(self, rule: str, detail: str):
        self.rule = rule
        self.detail = detail
        super().__init__(f"Invalid configuration for rule '{rule}': {detail}")
