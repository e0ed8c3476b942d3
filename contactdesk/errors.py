"""Exceptions raised by the contact store and notifier."""


class ContactDeskError(Exception):
    """Base class for application errors."""


class ValidationError(ContactDeskError):
    """A submission is missing one or more required fields."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


class StorageError(ContactDeskError):
    """The database is disabled, unreachable, or the operation failed."""


class DeliveryError(ContactDeskError):
    """An email could not be handed to the SMTP relay."""
