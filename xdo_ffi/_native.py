"""cffi bindings for the handful of libxdo symbols this package uses."""
import logging

from cffi import FFI

logger = logging.getLogger(__name__)

XDO_SUCCESS = 0
XDO_ERROR = 1

# libxdo's "whatever window has focus" id
CURRENTWINDOW = 0

ffi = FFI()
ffi.cdef("""
    typedef unsigned long XID;
    typedef XID Window;
    typedef XID KeySym;
    typedef unsigned char KeyCode;
    typedef unsigned int useconds_t;

    typedef struct xdo xdo_t;

    typedef struct charcodemap {
        wchar_t key;
        KeyCode code;
        KeySym symbol;
        int group;
        int modmask;
        int needs_binding;
    } charcodemap_t;

    xdo_t *xdo_new(const char *display);
    void xdo_free(xdo_t *xdo);

    int xdo_get_active_window(const xdo_t *xdo, Window *window_ret);
    int xdo_get_window_name(const xdo_t *xdo, Window window,
                            unsigned char **name_ret, int *name_len_ret,
                            int *name_type);
    int xdo_send_keysequence_window(const xdo_t *xdo, Window window,
                                    const char *keysequence, useconds_t delay);

    int xdo_get_active_modifiers(const xdo_t *xdo, charcodemap_t **keys,
                                 int *nkeys);
    int xdo_set_active_modifiers(const xdo_t *xdo, Window window,
                                 charcodemap_t *active_mods, int active_mods_n);
    int xdo_clear_active_modifiers(const xdo_t *xdo, Window window,
                                   charcodemap_t *active_mods,
                                   int active_mods_n);

    int XFree(void *data);
    void free(void *ptr);
""")

USECONDS_MAX = 2 ** (8 * ffi.sizeof("useconds_t")) - 1


class NativeLib(object):
    """The native entry points, gathered from the three shared libraries.

    Anything with the same attribute names can stand in for it, which is how
    the tests run without an X server.
    """

    def __init__(self, xdo, x11, libc):
        self.xdo_new = xdo.xdo_new
        self.xdo_free = xdo.xdo_free
        self.xdo_get_active_window = xdo.xdo_get_active_window
        self.xdo_get_window_name = xdo.xdo_get_window_name
        self.xdo_send_keysequence_window = xdo.xdo_send_keysequence_window
        self.xdo_get_active_modifiers = xdo.xdo_get_active_modifiers
        self.xdo_set_active_modifiers = xdo.xdo_set_active_modifiers
        self.xdo_clear_active_modifiers = xdo.xdo_clear_active_modifiers
        self.XFree = x11.XFree
        self.free = libc.free


_lib = None


def _dlopen(name):
    try:
        return ffi.dlopen(name)
    except OSError as e:
        raise OSError("could not load lib%s (install the libxdo/libX11 packages): %s"
                      % (name, e)) from e


def load():
    """Open libxdo, libX11 and libc once and return the shared NativeLib."""
    global _lib
    if _lib is None:
        _lib = NativeLib(_dlopen("xdo"), _dlopen("X11"), ffi.dlopen(None))
        logger.debug("loaded libxdo bindings")
    return _lib
