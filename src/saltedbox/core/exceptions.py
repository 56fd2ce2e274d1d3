"""
Exceptions for SaltedBox
This is placed such that there is a general error catcher
"""


class SaltedBoxError(Exception):
    # general container for errors
    pass


class InitializationError(SaltedBoxError):
    # raised when a required crypto primitive is missing at startup
    pass


class InvalidKeyMaterialError(SaltedBoxError):
    # raised when a key or iv of the wrong size reaches the cipher
    pass


class PaddingError(SaltedBoxError, ValueError):
    # raised when CBC padding does not check out (usually a wrong password)
    pass


class MalformedContainerError(SaltedBoxError, ValueError):
    # raised when the input cannot be a container at all
    pass
