"""Custom exceptions for telemenu"""


class MenuError(Exception):
    """Base exception for menu errors"""

    pass


class ConfigurationError(MenuError):
    """Invalid menu identifier or missing settings"""

    pass


class PathTooLong(MenuError):
    """Button path exceeds the callback payload size"""

    pass


class InvalidPath(MenuError):
    """Payload is not a button path"""

    pass


class OverwriteConflict(MenuError):
    """Submenu already has a parent"""

    pass


class UnknownDestination(MenuError):
    """Navigation target is not a submenu"""

    pass


class NoParent(MenuError):
    """Back navigation from a menu without parent"""

    pass


class ReentrancyViolation(MenuError):
    """Menu handlers are already running for this event"""

    pass
