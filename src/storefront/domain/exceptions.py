"""Domain-level exceptions.

All storefront errors are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The local store could not be written."""


class CatalogError(DomainException):
    """The remote product catalog could not be fetched or decoded."""


class ConfigurationError(DomainException):
    """A setting read from the environment is invalid."""
