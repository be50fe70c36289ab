"""Provider exceptions."""


class DriverError(Exception):
    """Base exception for cache driver errors."""
    pass


class DriverCheckError(DriverError):
    """Exception raised when a driver is not supported by the environment."""
    pass


class DriverLogicError(DriverError):
    """Exception raised when a driver is used in an invalid sequence."""
    pass


class DriverInvalidArgumentError(DriverError):
    """Exception raised when a driver receives an argument it cannot handle."""
    pass
