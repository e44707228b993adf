# core/errors.py
"""
Typed failures raised by the storage and service layers.

Must not import DRF: the authentication class imports this module and
DRF loads authentication classes while rest_framework.views is importing.
"""


class DomainError(Exception):
    default_message = "Request could not be completed."

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors or {}
        super().__init__(self.message)


class ValidationError(DomainError):
    default_message = "Validation error"


class NotFound(DomainError):
    default_message = "Not found."


class Forbidden(DomainError):
    default_message = "You do not have permission to perform this action."


class Conflict(DomainError):
    default_message = "Already registered for this project"


class CapacityExceeded(DomainError):
    default_message = "Project is at full capacity"


class StoreError(DomainError):
    default_message = "Storage failure."


class ConstraintViolation(StoreError):
    default_message = "Constraint violation."
