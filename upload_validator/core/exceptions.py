class UnsupportedType(ValueError):
    """
    Raised when a caller declares a file type this validator has no
    signature profile for.

    This is an integration error, not a verdict on the file: untrusted
    content never triggers it, only the declared type does.
    """

    def __init__(self, declared_type: str) -> None:
        self.declared_type = declared_type
        super().__init__(f"Unsupported file type: {declared_type!r}")
