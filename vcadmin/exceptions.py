"""
vcadmin Library Exceptions
"""

class VCAdminError(Exception):
    """Base exception for all vcadmin errors"""
    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConnectionError(VCAdminError):
    """Connection-related errors"""
    pass


class AuthenticationError(VCAdminError):
    """Authentication failure"""
    pass


class ValidationError(VCAdminError):
    """Missing or malformed operation parameter"""
    pass


class NotFoundError(VCAdminError):
    """Named object not found in the vSphere inventory"""
    pass


class PartialFailureError(VCAdminError):
    """A later step failed after earlier steps already changed the inventory.

    ``details`` holds the objects that were created and left in place.
    """
    pass
