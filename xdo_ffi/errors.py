"""Errors raised by the libxdo wrapper."""
from contextlib import contextmanager

from xdo_ffi._native import XDO_ERROR, XDO_SUCCESS


class XdoError(Exception):
    """Base class for every error the wrapper reports."""

    @property
    def cause(self):
        """The underlying error, or None."""
        return None


class Failed(XdoError):
    """A libxdo call returned its failure status."""

    def __init__(self, op):
        super(Failed, self).__init__(op)
        self.op = op

    def __str__(self):
        return "libxdo::%s returned an error" % (self.op,)


class Utf8Error(XdoError):
    """libxdo handed back bytes that are not valid UTF-8."""

    def __init__(self, cause):
        super(Utf8Error, self).__init__(cause)
        self._cause = cause

    @property
    def cause(self):
        return self._cause

    def __str__(self):
        return str(self._cause)


class NullByteInString(XdoError):
    """A string argument could not become a C string."""

    def __init__(self, cause):
        super(NullByteInString, self).__init__(cause)
        self._cause = cause

    @property
    def cause(self):
        return self._cause

    def __str__(self):
        return "A String argument containing a NULL byte was provided: %s" % (self._cause,)


class NulError(ValueError):
    """Raised by c_string() when the data holds an interior NUL byte."""

    def __init__(self, position, data):
        super(NulError, self).__init__(position, data)
        self.position = position
        self.data = data

    def __str__(self):
        return "nul byte found in provided data at position: %d" % (self.position,)


def c_string(value):
    """Encode str or bytes for a `const char *` parameter.

    cffi appends the terminating NUL itself, so the only thing to reject is a
    NUL inside the value.
    """
    if isinstance(value, str):
        value = value.encode('utf-8')
    else:
        value = bytes(value)
    position = value.find(b'\0')
    if position != -1:
        raise NulError(position, value)
    return value


@contextmanager
def translate_errors():
    """Promote decode and NUL errors raised in the block to XdoError."""
    try:
        yield
    except UnicodeDecodeError as e:
        raise Utf8Error(e) from e
    except NulError as e:
        raise NullByteInString(e) from e


def check(res, op):
    """Turn a libxdo status code into None or an exception."""
    if res == XDO_SUCCESS:
        return
    if res == XDO_ERROR:
        raise Failed(op)
    # libxdo only documents 0 and 1
    raise AssertionError("libxdo::%s returned unexpected status %r" % (op, res))
