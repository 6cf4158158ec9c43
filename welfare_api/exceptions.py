"""
Domain errors raised by the service layer and mapped to HTTP responses in the routes
"""


class WelfareAPIError(Exception):
    """Base class for errors the API knows how to report"""


class DuplicateEmailError(WelfareAPIError):
    """A user with the same email is already registered"""


class InvalidCredentialsError(WelfareAPIError):
    """Unknown email or wrong password; deliberately does not say which"""


class RecordNotFoundError(WelfareAPIError):
    """No document matches the requested id"""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} record not found: {record_id}")


class InvalidStatusError(WelfareAPIError):
    """Requested grievance status is not an accepted transition target"""
