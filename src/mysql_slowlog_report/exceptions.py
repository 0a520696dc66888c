class SlowLogReportError(Exception):
    exit_code: int = 1


class ConfigurationConflictError(SlowLogReportError):
    """Raised when mutually exclusive options are supplied together."""

    exit_code = 2


class UnknownFieldError(SlowLogReportError):
    exit_code = 2

    def __init__(self, name: str, context: str = "field") -> None:
        super().__init__(f"Unknown {context}: {name!r}")
        self.name = name
