from typing import Optional


class TOTPError(Exception):
    """
    Base class for every error raised by totpkit.
    """


class DecodeError(TOTPError, ValueError):
    """
    Raised when a secret cannot be decoded from Base32.
    """


class InvalidCharacter(DecodeError):
    """
    A character outside the Base32 alphabet was found while decoding.
    """

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__("Invalid base32 character {!r} at position {}".format(char, position))


class MalformedSecret(TOTPError, ValueError):
    """
    Raised when a secret fails validation before any decoding is attempted.
    """

    def __init__(self, message: str = "Invalid secret key format", secret_length: Optional[int] = None) -> None:
        self.secret_length = secret_length
        super().__init__(message)


class GenerationError(TOTPError):
    """
    Raised when a code could not be generated. The underlying cause is chained.
    """
