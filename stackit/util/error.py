"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class JWTError(UtilError):
    """Bearer token could not be verified (malformed, tampered or expired)."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
