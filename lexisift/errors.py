# This file holds the error types raised at the I/O edges of a run.


class ConfigError(RuntimeError):
    """An error encountered during reading the config file.

    Args:
        msg: The message displayed to the user on error.
    """

    def __init__(self, msg: str):
        super(ConfigError, self).__init__("%s" % (msg,))


class LexiSiftRuntimeError(RuntimeError):
    def __init__(self, reason):
        super().__init__(reason)


class SourceUnavailableError(LexiSiftRuntimeError):
    pass


class ReadFailureError(LexiSiftRuntimeError):
    pass


class SinkUnavailableError(LexiSiftRuntimeError):
    """An output file could not be created or written.

    Args:
        destination: Path of the output that failed.

        reason: Human readable cause.
    """

    def __init__(self, destination: str, reason):
        super().__init__(f"Error writing {destination}: {reason}")
        self.destination = destination
