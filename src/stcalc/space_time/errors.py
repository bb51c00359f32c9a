from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised when a value passed to a time or angle constructor is unusable.

    Attributes:
        argument: Name of the offending parameter, if known
    """

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument
