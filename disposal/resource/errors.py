"""Errors raised by the release protocol."""


class ResourceReleasedError(RuntimeError):
    """An operation was attempted on a resource that has already been released."""


class HandleReleaseError(OSError):
    """The platform release primitive reported failure for a handle."""
    handle: int

    def __init__(self, handle: int):
        super().__init__(f'Platform release primitive failed for handle {handle}.')
        self.handle = handle
