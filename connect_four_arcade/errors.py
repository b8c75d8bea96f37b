class Error(Exception):
    """A base error class for the connect_four_arcade package."""
    def __init__(self, message="Connect Four: Unknown Exception occurred.") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

class OutOfBoundsError(Error):
    """A column or cell outside the bounds of the game board was used."""
    pass

class InvalidPieceError(Error):
    """This game piece cannot be used in this manner."""
    pass

class InvalidModeError(Error):
    """An unknown game mode was requested."""
    pass

class InvalidStateError(Error):
    """The operation is not allowed in the current game state."""
    pass

class ConfigurationError(Error):
    """A configuration value is missing or out of range."""
    pass
