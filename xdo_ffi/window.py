"""Window references and the calls libxdo makes against a single window."""
import logging
from datetime import timedelta

from xdo_ffi._native import USECONDS_MAX, ffi
from xdo_ffi.errors import c_string, check, translate_errors

logger = logging.getLogger(__name__)


def to_useconds(delay):
    """Convert a key delay to libxdo's microsecond count.

    `delay` is None, a timedelta or a number of seconds. Sub-microsecond
    parts are truncated and anything past the range of useconds_t is
    clamped to its maximum.
    """
    if delay is None:
        return 0
    if isinstance(delay, timedelta):
        usec = delay // timedelta(microseconds=1)
    else:
        seconds = int(delay)
        nanos = int(round((delay - seconds) * 1000000000))
        usec = seconds * 1000000 + nanos // 1000
    if usec < 0:
        raise ValueError("delay must not be negative: %r" % (delay,))
    if usec > USECONDS_MAX:
        logger.warning("delay of %d us exceeds useconds_t, clamping to %d", usec, USECONDS_MAX)
        usec = USECONDS_MAX
    return usec


class Window(object):
    """A window id paired with the Xdo instance it came from.

    The reference owns nothing; it stops working once that instance is
    closed.
    """

    def __init__(self, id, xdo):
        self._id = id
        self._xdo = xdo

    @property
    def id(self):
        return self._id

    def __repr__(self):
        return "Window(id=%#x)" % (self._id,)

    def __eq__(self, other):
        if not isinstance(other, Window):
            return NotImplemented
        return self._id == other._id and self._xdo.same_instance(other._xdo)

    def __hash__(self):
        return hash(self._id)

    def get_name(self):
        """Return the window title.

        The buffer libxdo allocates is handed to XFree() before this returns,
        whether or not it decoded.
        """
        lib = self._xdo.lib
        name = ffi.new("unsigned char **")
        length = ffi.new("int *")
        name_type = ffi.new("int *")

        res = lib.xdo_get_window_name(self._xdo.as_ptr(), self._id, name, length, name_type)
        check(res, "get_window_name")

        buf = name[0]
        if buf == ffi.NULL:
            return ""
        try:
            with translate_errors():
                return ffi.string(ffi.cast("char *", buf)).decode('utf-8')
        finally:
            lib.XFree(buf)

    def send_keysequence(self, sequence, delay=None):
        """Send a keysequence such as "ctrl+shift+a" to this window.

        `delay` goes between key events; see to_useconds() for the
        accepted forms.
        """
        udelay = to_useconds(delay)
        with translate_errors():
            sequence = c_string(sequence)

        res = self._xdo.lib.xdo_send_keysequence_window(
            self._xdo.as_ptr(), self._id, sequence, udelay)
        check(res, "send_keysequence")

    def set_active_modifiers(self, modifiers):
        """Press the keys recorded in `modifiers` on this window."""
        res = self._xdo.lib.xdo_set_active_modifiers(
            self._xdo.as_ptr(), self._id, modifiers.as_ptr(), len(modifiers))
        check(res, "set_active_modifiers")

    def clear_active_modifiers(self, modifiers):
        """Release the keys recorded in `modifiers` on this window."""
        res = self._xdo.lib.xdo_clear_active_modifiers(
            self._xdo.as_ptr(), self._id, modifiers.as_ptr(), len(modifiers))
        check(res, "clear_active_modifiers")
