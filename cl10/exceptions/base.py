"""Base exception classes for cl10."""


class Cl10Exception(Exception):
    """Base exception for all cl10 errors.

    All custom exceptions in the cl10 package should inherit
    from this base class for consistent error handling.
    """

    pass
