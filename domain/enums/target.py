"""Remote services probed by the connectivity checks."""
from enum import Enum


class Target(Enum):
    """Probed service.

    HUB is the job-dispatch status endpoint, RAILS the web-automation endpoint.
    """

    HUB = "hub"
    RAILS = "rails"
