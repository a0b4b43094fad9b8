"""Revenue service errors."""


class UnknownViewModeError(ValueError):
    """Chart period or view mode is not supported."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Unknown view mode: {mode!r}")
