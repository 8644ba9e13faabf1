"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OptionValidationError(DomainException):
    """A selection is not complete enough to be committed to the cart.

    ``field`` names the offending option so the caller can highlight
    and refocus the right input.
    """

    field = ""


class SizeRequiredError(OptionValidationError):
    field = "size"


class NameRequiredError(OptionValidationError):
    field = "dogName"


class UpstreamUnconfiguredError(DomainException):
    """An external integration (payments) has no credentials configured."""


class StorageError(DomainException):
    """Local persistence failed."""


class CatalogUnavailableError(DomainException):
    """Neither the primary nor the fallback catalog source could be read."""
