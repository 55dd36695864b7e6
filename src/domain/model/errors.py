"""Domain-level exceptions.

Services raise these errors to express failed lookups. The definition
service catches them at its boundary and reports them as an error
Outcome, so they never reach the hosting process.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ConfigurationError(DomainError):
    """A required setting (e.g. a provider credential) is missing."""


class DefinitionNotFoundError(DomainError):
    """Provider payload could not be represented as an Entry."""
