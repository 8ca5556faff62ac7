class StubbingError(Exception):
    pass
