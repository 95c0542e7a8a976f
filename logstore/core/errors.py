"""Logger error type"""


class LoggerError(Exception):
    """
    Error raised for logger-related issues.

    Invalid arguments and failed file operations both surface as this
    type; the message tells them apart.
    """
