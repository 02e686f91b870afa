"""A stand-in for libxdo/libX11/libc so the wrapper runs without an X server."""
import pytest

from xdo_ffi._native import XDO_ERROR, XDO_SUCCESS, ffi


def address(ptr):
    return int(ffi.cast("uintptr_t", ptr))


class FakeLib(object):
    """Records every native call; tests tweak the attributes to steer results."""

    def __init__(self):
        self.calls = []
        self.new_result = ffi.cast("xdo_t *", 0x1000)
        self.active_window = 0x4200007
        self.name = b"xterm\0"
        self.modifier_count = 2
        self.status = {}
        self.freed = []
        self.xfreed = []
        # keep fake native allocations alive while the wrapper points at them
        self.buffers = []
        self.name_address = None
        self.modifier_address = None

    def _status(self, fn):
        return self.status.get(fn, XDO_SUCCESS)

    def xdo_new(self, display):
        self.calls.append(('xdo_new', display))
        return self.new_result

    def xdo_free(self, xdo):
        self.calls.append(('xdo_free', address(xdo)))

    def xdo_get_active_window(self, xdo, window_ret):
        self.calls.append(('xdo_get_active_window', address(xdo)))
        window_ret[0] = self.active_window
        return self._status('xdo_get_active_window')

    def xdo_get_window_name(self, xdo, window, name_ret, name_len_ret, name_type):
        self.calls.append(('xdo_get_window_name', window))
        if self.name is None:
            name_ret[0] = ffi.NULL
        else:
            buf = ffi.new("unsigned char[]", list(self.name))
            self.buffers.append(buf)
            name_ret[0] = buf
            self.name_address = address(name_ret[0])
            name_len_ret[0] = len(self.name) - 1
        return self._status('xdo_get_window_name')

    def xdo_send_keysequence_window(self, xdo, window, keysequence, delay):
        self.calls.append(('xdo_send_keysequence_window', window, keysequence, delay))
        return self._status('xdo_send_keysequence_window')

    def xdo_get_active_modifiers(self, xdo, keys, nkeys):
        self.calls.append(('xdo_get_active_modifiers', address(xdo)))
        if self.modifier_count:
            array = ffi.new("charcodemap_t[]", self.modifier_count)
            self.buffers.append(array)
            keys[0] = array
            self.modifier_address = address(keys[0])
        else:
            keys[0] = ffi.NULL
        nkeys[0] = self.modifier_count
        return self._status('xdo_get_active_modifiers')

    def xdo_set_active_modifiers(self, xdo, window, active_mods, active_mods_n):
        self.calls.append(('xdo_set_active_modifiers', window, address(active_mods), active_mods_n))
        return self._status('xdo_set_active_modifiers')

    def xdo_clear_active_modifiers(self, xdo, window, active_mods, active_mods_n):
        self.calls.append(('xdo_clear_active_modifiers', window, address(active_mods), active_mods_n))
        return self._status('xdo_clear_active_modifiers')

    def XFree(self, data):
        self.xfreed.append(address(data))
        return 1

    def free(self, ptr):
        self.freed.append(address(ptr))

    def fail(self, fn):
        self.status[fn] = XDO_ERROR

    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def lib():
    return FakeLib()


@pytest.fixture
def xdo(lib):
    from xdo_ffi import Xdo
    handle = Xdo(lib=lib)
    yield handle
    handle.close()
