"""The libxdo instance handle."""
import logging

from xdo_ffi import _native
from xdo_ffi._native import ffi
from xdo_ffi.config import read_config
from xdo_ffi.errors import Failed, c_string, check, translate_errors
from xdo_ffi.modifiers import Modifiers
from xdo_ffi.window import Window

logger = logging.getLogger(__name__)


class XdoRef(object):
    """Non-owning view of an Xdo instance.

    Holds all the operations. Windows keep one of these, so they can be
    handed around freely while the owning Xdo decides when the native
    instance goes away.
    """

    def __init__(self, owner):
        self._owner = owner

    @property
    def lib(self):
        return self._owner.lib

    def as_ptr(self):
        return self._owner.as_ptr()

    def owner(self):
        return self._owner

    def same_instance(self, other):
        return self.owner() is other.owner()

    def window(self, id=_native.CURRENTWINDOW):
        """Reference a window by id without asking the X server anything."""
        return Window(id, self)

    def get_active_window(self):
        window_ret = ffi.new("Window *")
        res = self.lib.xdo_get_active_window(self.as_ptr(), window_ret)
        check(res, "get_active_window")
        return Window(window_ret[0], self)

    def get_active_modifiers(self):
        """Snapshot the modifier keys currently held down.

        The returned Modifiers owns the array libxdo allocated, even an empty
        one.
        """
        keys = ffi.new("charcodemap_t **")
        nkeys = ffi.new("int *")
        res = self.lib.xdo_get_active_modifiers(self.as_ptr(), keys, nkeys)
        check(res, "get_active_modifiers")
        return Modifiers(self.lib, keys[0], nkeys[0])


class Xdo(XdoRef):
    """An open libxdo instance.

    Xdo() connects to the default display ($DISPLAY). The native instance is
    freed exactly once, by close(), at the end of a `with` block, or when the
    object is collected.
    """

    def __init__(self, display=None, lib=None):
        self._ptr = ffi.NULL
        self._lib = lib if lib is not None else _native.load()
        if display is None:
            name = ffi.NULL
        else:
            with translate_errors():
                name = c_string(display)
        ptr = self._lib.xdo_new(name)
        if ptr == ffi.NULL:
            logger.debug("xdo_new failed for display %r", display)
            raise Failed("xdo_new")
        self._ptr = ptr
        logger.debug("opened libxdo instance on display %r", display)

    @classmethod
    def from_config(cls, path=None, lib=None):
        """Open the display named in the config file (see xdo_ffi.config)."""
        return cls(display=read_config(path)['display'], lib=lib)

    @property
    def lib(self):
        return self._lib

    @property
    def closed(self):
        return self._ptr == ffi.NULL

    def as_ptr(self):
        if self.closed:
            raise ValueError("operation on a closed Xdo instance")
        return self._ptr

    def owner(self):
        return self

    def borrow(self):
        return XdoRef(self)

    def close(self):
        ptr = getattr(self, '_ptr', ffi.NULL)
        if ptr == ffi.NULL:
            return
        self._ptr = ffi.NULL
        self._lib.xdo_free(ptr)
        logger.debug("freed libxdo instance")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __del__(self):
        self.close()
