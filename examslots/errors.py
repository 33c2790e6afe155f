class ExamSlotsError(Exception):
    """Base class for errors raised by examslots."""


class MalformedInputError(ExamSlotsError, ValueError):
    """Enrollment input that cannot be turned into records."""


class PreconditionError(ExamSlotsError, AssertionError):
    """A caller broke a contract of the conflict graph; never recovered."""


def require(condition: bool, message: str) -> None:
    if not condition:
        raise PreconditionError(message)
