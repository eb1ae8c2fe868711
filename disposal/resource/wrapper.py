"""
Wrapper owning an unmanaged OS handle and a managed inner component.

The handle is released exactly once, either explicitly (`dispose`, or leaving a
`with` block) or by a fallback registered with `weakref.finalize` that runs
when the wrapper is collected, or at interpreter exit, without having been
released. The fallback holds only the handle slot. It can neither keep the
wrapper alive nor reach the inner component, which may already be gone.
"""
from typing import cast
from weakref import finalize

from attrs import define

from disposal.config import DEFAULT_RELEASE_POLICY
from disposal.config import ReleasePolicy
from disposal.resource.errors import HandleReleaseError
from disposal.resource.errors import ResourceReleasedError
from disposal.resource.handles import HandleCloser
from disposal.resource.handles import default_closer
from disposal.resource.inner import InnerComponent
from disposal.standalone_utilities.chainable_destructable_resource import ChainableDestructableResource
from disposal.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


@define
class UnmanagedHandleSlot:
    """The only wrapper state the collector fallback touches."""
    handle: int | None
    closer: HandleCloser
    policy: ReleasePolicy
    closed: bool = False

    def close(self, explicit: bool) -> None:
        if self.closed:
            return
        handle = cast(int, self.handle)
        try:
            succeeded = self.closer(handle)
        except Exception:
            if explicit:
                raise
            logger.exception('Release primitive raised for unmanaged handle %s (fallback context).', handle)
            return
        finally:
            self.handle = None
            self.closed = True
        context = 'explicit' if explicit else 'fallback'
        if succeeded:
            logger.debug('Unmanaged handle %s released (%s context).', handle, context)
            return
        if explicit and self.policy.on_explicit_failure == 'raise':
            raise HandleReleaseError(handle)
        logger.error('Failed to release unmanaged handle %s (%s context).', handle, context)


def finalize_fallback(slot: UnmanagedHandleSlot) -> None:
    logger.debug('ResourceWrapper finalizer running')
    logger.debug('Closing unmanaged handle slot (fallback context).')
    slot.close(explicit=False)


class ResourceWrapper(ChainableDestructableResource):
    """
    Owns `handle` exclusively, plus an `InnerComponent` registered as a
    subresource.

    Explicit release cascades into the inner component first, then releases
    the handle and disarms the fallback. The fallback releases the handle only.

    A failing release primitive is reported according to `policy`; in every
    case the handle is zeroed and the wrapper is marked released, so the
    primitive is never called twice for the same handle.
    """
    inner: InnerComponent
    _slot: UnmanagedHandleSlot
    _fallback: finalize

    def __init__(self, handle: int, closer: HandleCloser | None = None, policy: ReleasePolicy | None = None):
        self._slot = UnmanagedHandleSlot(
            handle,
            closer if closer is not None else default_closer(),
            policy if policy is not None else DEFAULT_RELEASE_POLICY,
        )
        self.inner = InnerComponent()
        self.add_subresource(self.inner)
        self._fallback = finalize(self, finalize_fallback, self._slot)
        logger.debug('ResourceWrapper created')

    @property
    def handle(self) -> int:
        self.ensure_live()
        return cast(int, self._slot.handle)

    @property
    def released(self) -> bool:
        return self.is_released()

    @property
    def fallback_armed(self) -> bool:
        return self._fallback.alive

    def ensure_live(self) -> None:
        if self.is_released():
            raise ResourceReleasedError('ResourceWrapper has already been released.')

    def dispose(self) -> None:
        logger.debug('ResourceWrapper.dispose()')
        self._release(explicit=True)

    def release(self) -> None:
        logger.debug('ResourceWrapper: managed resources released')

    def _release(self, explicit: bool) -> None:
        logger.debug('ResourceWrapper._release(explicit=%s)', explicit)
        super()._release(explicit)

    def _release_unmanaged(self, explicit: bool) -> None:
        try:
            self._slot.close(explicit)
        finally:
            self._fallback.detach()
