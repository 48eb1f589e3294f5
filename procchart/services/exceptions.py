"""Custom exceptions for process descriptor builds."""


class ProcChartError(Exception):
    """Base exception for all procchart errors."""

    pass


class BuildError(ProcChartError):
    """Exception raised when a process descriptor cannot be built."""

    pass


class MissingPortsError(BuildError):
    """Exception raised when a routable process has no container or service ports."""

    def __init__(self, process_name: str):
        self.process_name = process_name
        super().__init__(
            f"routable process '{process_name}' should have at least one "
            "container port and one service port"
        )


class InvalidMetadataItemError(BuildError):
    """Exception raised when a label or annotation item fails validation."""

    def __init__(self, item, problems):
        self.item = item
        self.problems = list(problems)
        super().__init__(f"invalid metadata item: {'; '.join(self.problems)}")


class PortSourceError(BuildError):
    """Exception raised when ports or probes cannot be produced."""

    pass


class ConfigError(ProcChartError):
    """Exception raised for missing or malformed configuration files."""

    pass


class FileExistsExportError(ProcChartError):
    """Exception raised when an export target already exists."""

    pass
