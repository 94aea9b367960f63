"""globalkv error types."""


class InvalidOption(ValueError):
    """Raised when a default option name is not recognized.

    Attributes:
        name: The rejected option name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown default option: {name!r}")
