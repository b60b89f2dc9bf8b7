class ContactError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(ContactError):
    status_code = 400


class NotFound(ContactError):
    status_code = 404

    def __init__(self, message="Not found"):
        super().__init__(message)


class DuplicateEmail(ContactError):
    status_code = 409

    def __init__(self, message="Email already exists"):
        super().__init__(message)


class StoreUnavailable(ContactError):
    status_code = 500

    def __init__(self, message="DB down"):
        super().__init__(message)
