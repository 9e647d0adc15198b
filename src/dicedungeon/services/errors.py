"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class InvalidSkillError(ValueError):
    """Raised when a skill cannot be resolved, e.g. it declares fewer than one hit."""
