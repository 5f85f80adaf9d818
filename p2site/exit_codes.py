"""
Standard exit codes and error types for p2site commands.

Following Unix/POSIX conventions for command-line tools.
"""
from typing import Optional

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors

# Application-specific exit codes (sysexits.h)
CONFIG_ERROR = 66        # Repository layout or configuration error
DATA_ERROR = 70          # Metadata or feature archive format error
WRITE_ERROR = 73         # Output file could not be created
INTERRUPTED = 130        # Terminated by Ctrl+C (SIGINT)

# Exit code mappings for common exceptions
EXCEPTION_EXIT_CODES = {
    'FileNotFoundError': GENERAL_ERROR,
    'PermissionError': WRITE_ERROR,
    'ValueError': DATA_ERROR,
    'KeyboardInterrupt': INTERRUPTED,
}


def get_exit_code_for_exception(exc: Exception) -> int:
    """
    Get the appropriate exit code for an exception.

    Args:
        exc: The exception that occurred

    Returns:
        Appropriate exit code
    """
    exit_code = getattr(exc, 'exit_code', None)
    if isinstance(exit_code, int):
        return exit_code
    return EXCEPTION_EXIT_CODES.get(exc.__class__.__name__, GENERAL_ERROR)


class CommandError(Exception):
    """
    Exception that commands can raise to indicate specific exit codes.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class SiteError(CommandError):
    """Base class for failures that abort a site.xml run."""


class ConfigurationError(SiteError):
    """Raised when the repository layout or configuration is invalid."""
    def __init__(self, message: str):
        super().__init__(message, CONFIG_ERROR)


class MetadataError(SiteError):
    """Raised when content.xml or content.jar exists but cannot be read."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, DATA_ERROR)
        self.path = path


class FeatureFormatError(SiteError):
    """Raised when a feature archive carries no usable identity."""
    def __init__(self, message: str, archive: Optional[str] = None):
        super().__init__(message, DATA_ERROR)
        self.archive = archive


class WriteError(SiteError):
    """Raised when site.xml cannot be written."""
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, WRITE_ERROR)
        self.path = path
