class ThumbnailError(Exception):
    """ Base class for errors raised while building a thumbnail. """


class InvalidDimensions(ThumbnailError, ValueError):
    """ Raised for zero, negative or non-numeric image or box dimensions. """


class DecodeFailure(ThumbnailError):
    """ Raised when the source object is not a readable image. """


class UpstreamFailure(ThumbnailError):
    """ Raised when the object store could not be read from or written to. """


class ConfigurationError(ThumbnailError):
    pass
