"""A managed resource owned by a `ResourceWrapper`."""
from disposal.standalone_utilities.chainable_destructable_resource import ChainableDestructableResource
from disposal.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class InnerComponent(ChainableDestructableResource):
    """Holds no external handle. Released only through an explicit cascade."""

    def __init__(self):
        logger.debug('InnerComponent created')

    def release(self) -> None:
        logger.debug('InnerComponent released')
