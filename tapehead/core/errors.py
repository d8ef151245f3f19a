"""Error taxonomy for parsing and store access."""


class TapeheadError(Exception):
    """Base class for all tapehead errors."""

    message = "Unknown error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ParseError(TapeheadError):
    """A command line could not be turned into a Command."""


class MissingSeekArgument(ParseError):
    message = "Missing seek argument."


class InvalidSeekArgument(ParseError):
    message = "Invalid seek argument."


class InvalidDigitInSeekArgument(ParseError):
    message = "Invalid digit in seek argument."


class InvalidDigitInCountArgument(ParseError):
    message = "Invalid digit in count argument."


class InvalidByteArgument(ParseError):
    message = "Invalid byte argument."


class UnrecognizedCommand(ParseError):
    message = "Unrecognized command."


class StoreError(TapeheadError):
    """Seeking, reading or writing the store failed."""

    message = "Store I/O failed."


class NotSeekableError(StoreError):
    message = "File not seekable. Use `.` in seek argument."
