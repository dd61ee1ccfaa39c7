"""Default configuration values for cl10."""

from .config import Cl10Config


def create_default_config(**overrides) -> Cl10Config:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        Cl10Config with defaults and overrides applied

    Example:
        config = create_default_config(
            capacity=20,
            socket_path_override="/tmp/cl10-test.sock",
        )
    """
    return Cl10Config(**overrides)
