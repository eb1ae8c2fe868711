"""
A resource-release pattern with an explicit, idempotent release path that
cascades into owned subresources.
"""
from disposal.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class ChainableDestructableResource:
    """
    Implements a nested resource destructor pattern.
    For a number of nested resources (the nesting being explicitly declared),
    an item at any level can be released with `dispose`, or used as a context
    manager in which all subresources are released recursively at the end.

    Release happens at most once per object. Later calls to `dispose` (or
    leaving another `with` block) are no-ops. Subresources are released in the
    order they were registered, before the owner's own `release` hook, and
    before any unmanaged state the owner holds.

    Example usage:
    ```py
    class Connection(ChainableDestructableResource):
        def __init__(self):
            self.socket = open_socket()

        def release(self) -> None:
            self.socket.close()

    class Session(ChainableDestructableResource):
        def __init__(self):
            self.connection = Connection()
            self.add_subresource(self.connection)

    with Session() as s:
        s.connection.socket.send(b'...')
    # s.connection.socket.close() is called, once
    ```

    Subclasses owning state that lives outside the interpreter (OS handles,
    foreign memory) override `_release_unmanaged`, which also runs in the
    non-explicit context where subresources must not be touched.
    """
    _subresources: list['ChainableDestructableResource']
    _released: bool

    def add_subresource(self, resource: 'ChainableDestructableResource') -> None:
        """
        Use this method to indicate which resources should be released when this
        given resource is released explicitly.
        """
        self._ensure_initialized()
        self._subresources.append(resource)

    def release(self) -> None:
        """
        If this given resource has specific managed cleanup to do, in addition to
        delegating cleanup to subresources, override this method to do so.
        Only called in the explicit context.
        """
        pass

    def is_released(self) -> bool:
        return getattr(self, '_released', False)

    def dispose(self) -> None:
        self._release(explicit=True)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.dispose()

    def _release(self, explicit: bool) -> None:
        if self.is_released():
            return
        try:
            if explicit:
                self._release_others()
                self.release()
        finally:
            try:
                self._release_unmanaged(explicit)
            finally:
                self._released = True

    def _release_unmanaged(self, explicit: bool) -> None:
        pass

    def _release_others(self) -> None:
        for resource in self._get_subresources():
            logger.debug('Releasing subresource %s of %s.', type(resource).__name__, type(self).__name__)
            resource.dispose()

    def _ensure_initialized(self) -> None:
        if not hasattr(self, '_subresources'):
            self._subresources = []

    def _get_subresources(self) -> list['ChainableDestructableResource']:
        self._ensure_initialized()
        return self._subresources
