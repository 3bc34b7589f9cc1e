from typing import List, Tuple


class MunsellError(ValueError):
    """Base class of every error raised for a Munsell colour."""


class FormatError(MunsellError):
    """The string is not a Munsell notation."""

    def __init__(self, text, reason: str = ""):
        self.text = text
        message = f"Invalid Munsell colour {text!r}"
        super().__init__(f"{message}: {reason}" if reason else message)


class OutOfGamutError(MunsellError):
    """The notation has no entry in the reference table."""

    def __init__(self, notation):
        self.notation = notation
        super().__init__(f"{notation} is not a colour in the reference table, use fix=True to correct it")


class NotInTableError(MunsellError):
    """A colour that must be an exact table entry is missing from the table."""

    def __init__(self, notation):
        self.notation = notation
        super().__init__(f"{notation} is not in the reference table")


class MunsellBatchError(MunsellError):
    """Raised by vectorized operations in strict mode, holds every failed element."""

    def __init__(self, errors: List[Tuple[int, MunsellError]]):
        self.errors = errors
        details = "; ".join(f"[{i}] {e}" for i, e in errors)
        super().__init__(f"{len(errors)} colour(s) failed: {details}")
