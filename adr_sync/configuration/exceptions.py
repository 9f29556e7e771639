"""Contains exceptions raised when reconciling application configuration."""


class GitHubAuthenticationConfigurationUndefinedError(Exception):
    """Raised when the GitHub authentication configuration is undefined."""

    pass


class RequiredConfigurationElementError(Exception):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name} (command line option {cli_name}, environment variable {env_name})")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name


class InvalidPatternConfigurationError(Exception):
    """Raised when a configured regular expression cannot be used."""

    def __init__(self, name: str, pattern: str, reason: str) -> None:
        """Initializes the exception with the offending pattern."""
        super().__init__(f"Invalid {name} {pattern!r}: {reason}")
        self.name = name
        self.pattern = pattern
