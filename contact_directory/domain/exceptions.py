"""Exceptions raised by the contact directory core."""


class DirectoryError(Exception):
    """Base exception for contact directory errors"""
    pass


class ValidationError(DirectoryError):
    """Raised when a contact write is rejected for field-level reasons"""
    def __init__(self, field_errors: dict[str, list[str]]):
        self.field_errors = field_errors
        fields = ", ".join(sorted(field_errors))
        super().__init__(f"Invalid contact attributes: {fields}")


class NotFound(DirectoryError):
    """Raised when a contact id does not resolve to a persisted contact"""
    def __init__(self, contact_id: int):
        self.contact_id = contact_id
        super().__init__(f"Contact {contact_id} not found")


class Unauthorized(DirectoryError):
    """Raised when the caller's session may not perform an action"""
    def __init__(self, action: str, login_url: str):
        self.action = action
        self.login_url = login_url
        super().__init__(f"Login required for {action}")
