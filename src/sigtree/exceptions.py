class ConfigFormatError(ValueError):
    """
    Exception raised when a configuration file decodes but has the wrong shape.

    The configuration must be a JSON object whose recognized fields are lists of
    strings. Anything else (a top-level array, a number where a list is expected,
    a list containing non-strings) is reported with this exception.

    Example:
        >>> error = ConfigFormatError("'excludePaths' must be a list of strings")
        >>> str(error)
        "'excludePaths' must be a list of strings"
    """

    pass


class ConfigWarning(UserWarning):
    """
    Warning emitted when a configuration file exists but cannot be used.

    Loading never aborts on a bad configuration file: the built-in defaults are used
    instead and this warning is issued through the :mod:`warnings` module so that the
    command-line layer can surface it on stderr.

    Attributes:
        config_path (str): Path to the configuration file that was rejected.

    Example:
        >>> warning = ConfigWarning("/project/.code-structure.json", "Expecting value")
        >>> warning.config_path
        '/project/.code-structure.json'
        >>> str(warning)
        'Could not read config file /project/.code-structure.json: Expecting value. Using default configuration.'
    """

    def __init__(self, config_path: str, reason: str) -> None:
        """
        Initialize the warning with the rejected file and the cause.

        Args:
            config_path (str): Path to the configuration file.
            reason (str): Why the file could not be used.
        """
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Could not read config file {config_path}: {reason}. Using default configuration.")
