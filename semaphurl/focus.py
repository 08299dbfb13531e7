"""
Bring a browser window to the foreground after launching it (Windows only).
"""

import logging
import ntpath
import os
import sys

logger = logging.getLogger(__name__)

SW_RESTORE = 9
PROCESS_QUERY_LIMITED_INFORMATION = 0x1000


def _process_image_name(kernel32, pid):
    import ctypes
    from ctypes import wintypes

    handle = kernel32.OpenProcess(PROCESS_QUERY_LIMITED_INFORMATION, False, pid)
    if not handle:
        return None
    try:
        size = wintypes.DWORD(1024)
        buf = ctypes.create_unicode_buffer(size.value)
        if kernel32.QueryFullProcessImageNameW(handle, 0, buf, ctypes.byref(size)):
            return buf.value
        return None
    finally:
        kernel32.CloseHandle(handle)


def focus_browser_window(browser_path):
    """Focus the first visible top-level window owned by browser_path's executable.

    Returns True when a window was focused.
    """
    if sys.platform != "win32":
        logger.debug("Window focus is only supported on Windows")
        return False

    import ctypes
    from ctypes import wintypes

    user32 = ctypes.windll.user32
    kernel32 = ctypes.windll.kernel32
    wanted = os.path.splitext(ntpath.basename(browser_path))[0].lower()
    found = []

    @ctypes.WINFUNCTYPE(wintypes.BOOL, wintypes.HWND, wintypes.LPARAM)
    def on_window(hwnd, _):
        if not user32.IsWindowVisible(hwnd):
            return True
        pid = wintypes.DWORD()
        user32.GetWindowThreadProcessId(hwnd, ctypes.byref(pid))
        image = _process_image_name(kernel32, pid.value)
        if image and os.path.splitext(ntpath.basename(image))[0].lower() == wanted:
            found.append(hwnd)
            return False
        return True

    user32.EnumWindows(on_window, 0)
    if not found:
        logger.debug(f"No window found for {wanted}")
        return False

    hwnd = found[0]
    if user32.IsIconic(hwnd):
        user32.ShowWindow(hwnd, SW_RESTORE)
    user32.SetForegroundWindow(hwnd)
    logger.info(f"Focused browser window: {wanted}")
    return True
