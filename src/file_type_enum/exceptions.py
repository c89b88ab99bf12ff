class UnrecognizedFileTypeError(ValueError):
    """
    Exception raised when mode bits do not encode any known file type.

    This exception is raised by the raw mode-bit conversion when the given integer is not
    one of the ``stat.S_IF*`` type constants, and by classification when metadata carries
    no recognised type bits at all. Metadata read from the kernel never triggers it; it
    signals a programming error such as passing permission bits or a hand-built value.

    Attributes:
        mode (int): The offending mode value.

    Example:
        >>> error = UnrecognizedFileTypeError(0o644)
        >>> str(error)
        'Unrecognized file type bits: 0o644'
    """

    def __init__(self, mode: int) -> None:
        """
        Initialize the exception with the offending mode value.

        Args:
            mode (int): The mode value that could not be mapped to a file type.
        """
        self.mode = mode
        super().__init__(f"Unrecognized file type bits: {oct(mode)}")
