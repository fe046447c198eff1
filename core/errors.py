class InvalidPropertyLine(AssertionError):
    """Raised by the strict split when a line does not hold exactly one separator.

    This is a contract violation on the caller's side, not a recoverable
    parse result. Use try_split for lines that may be malformed.
    """

    def __init__(self, separator: str):
        self.separator = separator
        super().__init__(f'Invalid property line. Expected format: "key{separator}value"')
