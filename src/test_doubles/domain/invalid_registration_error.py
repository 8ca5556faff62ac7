from test_doubles.domain.stubbing_error import StubbingError


class InvalidRegistrationError(StubbingError):
    pass
