class RelayError(Exception):
    """Base error for anything that ends up as a JSON error envelope."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    status_code = 400


class MissingFieldError(ValidationError):
    pass


class OutOfRangeError(ValidationError):
    pass


class InvalidFieldError(ValidationError):
    pass


class ParseError(RelayError):
    status_code = 400

    def __init__(self, message="Invalid JSON or missing parameters"):
        super().__init__(message)


class SendError(RelayError):
    status_code = 500

    def __init__(self, message="Failed to send message"):
        super().__init__(message)
