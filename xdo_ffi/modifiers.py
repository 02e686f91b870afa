"""Snapshot of the keyboard modifiers libxdo reports as held down."""
import logging

from xdo_ffi._native import ffi

logger = logging.getLogger(__name__)


class Modifiers(object):
    """Owns a libxdo-allocated charcodemap_t array.

    Only XdoRef.get_active_modifiers() creates these. Pass them back to
    Window.set_active_modifiers() or Window.clear_active_modifiers(); the
    array is released with free() by close(), on leaving a `with` block, or
    when the object is collected.
    """

    def __init__(self, lib, ptr, length):
        self._lib = lib
        self._ptr = ptr
        self._length = length if ptr != ffi.NULL else 0
        self._closed = False

    def __len__(self):
        return self._length

    def __repr__(self):
        return "Modifiers(%d keys)" % (self._length,)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        self.close()

    @property
    def closed(self):
        return self._closed

    def as_ptr(self):
        if self._closed:
            raise ValueError("operation on a released Modifiers snapshot")
        return self._ptr

    def close(self):
        if getattr(self, '_closed', True):
            return
        self._closed = True
        ptr, self._ptr = self._ptr, ffi.NULL
        if ptr != ffi.NULL:
            logger.debug("freeing %d active modifier entries", self._length)
            self._lib.free(ptr)
