import threading


class OutOfRangeError(IndexError):
    """Raised when a coordinate or offset falls outside its valid span."""


class InvalidSliceError(ValueError):
    """Raised when a slice expression cannot be built or parsed."""


class InvalidArgumentError(ValueError):
    """Raised when a dimension or range parameter is not acceptable."""


class UnsupportedBackendError(TypeError):
    """Raised when no backend adapter handles a data source."""


class ReshapeError(ValueError):
    """Raised when a reshape would change the number of elements."""


# Settings --------------------------------------------------------------------

def seterr(reshape=None, readonly=None):
    """Set how questionable operations are handled.

    Args:
        reshape (str): what to do when the new dimensions of a reshape
            do not match the number of elements of the view:

            - `'raise'`: raise :class:`ReshapeError` (default).
            - `'ignore'`: build the view anyway, reading out of the new
              shape may then alias or overrun the underlying buffer.
            - `None` leave unchanged.
        readonly (str): what to do when writing through a view over a
            read-only container:

            - `'ignore'`: silently drop the write (default).
            - `'warn'`: drop the write and log a warning.
            - `None` leave unchanged.

    Returns:
        A dict with the current value of each setting.
    """
    if reshape in ('raise', 'ignore'):
        error_config.reshape = reshape
    elif reshape is not None:
        raise ValueError("reshape must be 'raise' or 'ignore'")

    if readonly in ('ignore', 'warn'):
        error_config.readonly = readonly
    elif readonly is not None:
        raise ValueError("readonly must be 'ignore' or 'warn'")

    return {'reshape': error_config.reshape,
            'readonly': error_config.readonly}


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.reshape = 'raise'
        self.readonly = 'ignore'


error_config = ErrorConfig()
