"""
Errors - Exceptions raised by the lint engine.

Two classes of failure exist:
- Setup errors (RuleSetupError and subclasses) are programmer mistakes
  detected while the rule registry is being built. They abort startup.
- Everything raised by a rule while inspecting a document propagates
  unchanged to the caller of the lint pass.
"""


class BootlintError(Exception):
    """Base exception for all bootlint errors."""
    pass


class RuleSetupError(BootlintError):
    """Raised when the rule registry cannot be built."""

    def __init__(self, message: str, rule_id: str):
        super().__init__(message)
        self.rule_id = rule_id


class DuplicateRuleError(RuleSetupError):
    """Raised when two rules are registered under the same id."""

    def __init__(self, rule_id: str):
        super().__init__(f"Linter already registered with ID: {rule_id}", rule_id)


class InvalidRuleIdError(RuleSetupError):
    """Raised when a rule id is not of the form E### or W###."""

    def __init__(self, rule_id: str):
        super().__init__(f"Invalid linter ID: {rule_id!r}", rule_id)
