# errors.py


class KeypairError(ValueError):
    """Base class for every key material failure raised by keypair_tool."""


class DecodeError(KeypairError):
    """The text is not valid base58."""


class KeyLengthError(KeypairError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} bytes of key material, got {actual}")


class KeyMismatchError(KeypairError):
    """The public half of a secret key does not belong to its seed."""


class WalletFileError(KeypairError):
    pass
