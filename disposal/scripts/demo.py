"""Demonstrates explicit release and the collector fallback, with traces."""
import argparse
import gc
import logging

from disposal.config import get_release_policy
from disposal.config import ReleasePolicy
from disposal.resource.handles import acquire_waitable_handle
from disposal.resource.wrapper import ResourceWrapper
from disposal.standalone_utilities.log_formats import colorized_logger
from disposal.standalone_utilities.log_formats import set_package_level

logger = colorized_logger(__name__)


def parse_args(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog='disposal-demo',
        description='Create a handle-owning resource and release it explicitly or through the collector.',
    )
    parser.add_argument(
        '--skip-dispose',
        dest='skip_dispose',
        action='store_true',
        help='Do not call dispose(); leave the release to the collector fallback.',
    )
    parser.add_argument(
        '--release-policy',
        dest='release_policy',
        required=False,
        help='JSON file with the release failure policy.',
    )
    parser.add_argument(
        '--verbose',
        dest='verbose',
        action='store_true',
        help='Show the debug traces of the release protocol.',
    )
    return parser.parse_args(argv)


class Bystander:
    """An object with nothing to release, whose destruction is still traced."""

    def __init__(self):
        logger.debug('Bystander instance created')

    def __del__(self):
        logger.debug('Bystander instance destroyed')


def create_bystander() -> None:
    Bystander()


def use_resource(policy: ReleasePolicy, skip_dispose: bool) -> None:
    resource = ResourceWrapper(acquire_waitable_handle(), policy=policy)
    logger.info('Acquired handle %s.', resource.handle)
    if not skip_dispose:
        resource.dispose()


def run_demo(policy: ReleasePolicy, skip_dispose: bool) -> None:
    create_bystander()
    use_resource(policy, skip_dispose)
    gc.collect()


def main(argv: list[str] | None = None):
    args = parse_args(argv)
    if args.verbose:
        set_package_level(logging.DEBUG)
    run_demo(get_release_policy(args.release_policy), args.skip_dispose)


if __name__=='__main__':
    main()
