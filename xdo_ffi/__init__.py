"""Python API for a few libxdo methods."""
from xdo_ffi._native import CURRENTWINDOW
from xdo_ffi.errors import Failed, NulError, NullByteInString, Utf8Error, XdoError
from xdo_ffi.modifiers import Modifiers
from xdo_ffi.window import Window, to_useconds
from xdo_ffi.xdo import Xdo, XdoRef

__all__ = [
    'CURRENTWINDOW',
    'Failed',
    'Modifiers',
    'NulError',
    'NullByteInString',
    'Utf8Error',
    'Window',
    'Xdo',
    'XdoError',
    'XdoRef',
    'to_useconds',
]
