"""Release policy, optionally read from a JSON configuration file."""
from json import loads as json_loads
from typing import Literal

from pydantic import BaseModel


class ReleasePolicy(BaseModel):
    """
    How a failure of the platform release primitive is reported.

    On the explicit path the handle is zeroed and the resource marked released
    either way; `raise` additionally raises `HandleReleaseError` to the caller,
    `log` only logs the failure. The collector fallback always logs, since no
    caller is present to receive an error.
    """
    on_explicit_failure: Literal['raise', 'log'] = 'raise'


DEFAULT_RELEASE_POLICY = ReleasePolicy()


def get_release_policy(config_file: str | None = None) -> ReleasePolicy:
    if config_file is None:
        return DEFAULT_RELEASE_POLICY
    with open(config_file, 'rt', encoding='utf-8') as file:
        return ReleasePolicy.model_validate(json_loads(file.read()))
