"""Flag storage for the dashboard resolver.

The resolver only ever reads one boolean flag (``onboardingComplete``), so the
store interface is a single ``get_flag(key)`` returning True, False or None
when the flag has never been written. Flags live in SSM Parameter Store as
string parameters under a per-stage prefix.
"""

import logging
from abc import ABC, abstractmethod

from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)

FALSY_VALUES = {"false", "0", "no", "off"}


class StoreUnavailable(Exception):
    """The flag store could not be reached or returned an error."""


class FlagStore(ABC):
    @abstractmethod
    def get_flag(self, key):
        """Return the stored flag, or None when it was never written."""


def parse_flag(raw):
    """Any stored value is set unless it spells false."""
    if raw is None:
        return None
    return str(raw).strip().lower() not in FALSY_VALUES


class SSMFlagStore(FlagStore):
    """Reads flags from SSM Parameter Store.

    A missing parameter is an unset flag. Any other failure is raised as
    StoreUnavailable; there is no retry.
    """

    def __init__(self, ssm_client, prefix):
        self.ssm_client = ssm_client
        self.prefix = prefix

    def parameter_name(self, key):
        return f"{self.prefix}{key}"

    def get_flag(self, key):
        name = self.parameter_name(key)
        try:
            response = self.ssm_client.get_parameter(Name=name)
        except self.ssm_client.exceptions.ParameterNotFound:
            logger.debug("Flag parameter %s not set", name)
            return None
        except (ClientError, BotoCoreError) as exc:
            raise StoreUnavailable(f"Failed to read flag {name} from SSM") from exc

        return parse_flag(response["Parameter"]["Value"])


class InMemoryFlagStore(FlagStore):
    """Dict-backed store for tests and local invocation."""

    def __init__(self, flags=None):
        self.flags = dict(flags or {})
        self.reads = []

    def get_flag(self, key):
        self.reads.append(key)
        return self.flags.get(key)
