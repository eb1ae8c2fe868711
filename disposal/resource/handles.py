"""
The platform handle-release primitive, and acquisition of handles for
demonstration purposes.

A release primitive is any callable taking a handle token and returning
whether the release succeeded. Tests substitute recording callables here.
"""
import ctypes
import os
import sys
import time
from typing import Callable

from disposal.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)

HandleCloser = Callable[[int], bool]


def close_posix_handle(handle: int) -> bool:
    try:
        os.close(handle)
    except OSError as error:
        logger.error('os.close(%s) failed: %s', handle, error)
        return False
    return True


def close_kernel32_handle(handle: int) -> bool:
    kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
    kernel32.CloseHandle.argtypes = (ctypes.c_void_p,)
    kernel32.CloseHandle.restype = ctypes.c_int
    return bool(kernel32.CloseHandle(handle))


def default_closer() -> HandleCloser:
    if sys.platform == 'win32':
        return close_kernel32_handle
    return close_posix_handle


def acquire_waitable_handle() -> int:
    """
    Acquires a fresh OS-level handle that must be released explicitly.
    On Windows this is a manual-reset waitable timer, on Linux a timer file
    descriptor, and elsewhere a read-only descriptor on the null device.
    """
    if sys.platform == 'win32':
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        kernel32.CreateWaitableTimerW.argtypes = (ctypes.c_void_p, ctypes.c_int, ctypes.c_wchar_p)
        kernel32.CreateWaitableTimerW.restype = ctypes.c_void_p
        handle = kernel32.CreateWaitableTimerW(None, True, 'WaitableTimer')
        if not handle:
            raise ctypes.WinError()
        return int(handle)
    if hasattr(os, 'timerfd_create'):
        return os.timerfd_create(time.CLOCK_MONOTONIC)
    return os.open(os.devnull, os.O_RDONLY)
