from test_doubles.domain.stubbing_error import StubbingError


class AnswerArityError(StubbingError):
    pass
