from disposal.resource.errors import HandleReleaseError
from disposal.resource.errors import ResourceReleasedError
from disposal.resource.inner import InnerComponent
from disposal.resource.wrapper import ResourceWrapper

__all__ = ['HandleReleaseError', 'InnerComponent', 'ResourceReleasedError', 'ResourceWrapper']
