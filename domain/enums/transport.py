"""Transport enumeration for connectivity requests."""
from enum import Enum


class Transport(Enum):
    """Wire transport a check uses.

    Provides:
    - scheme: URL scheme used to open the connection
    - default_port: port used when the target URL carries none
    """

    HTTP = "http"
    HTTPS = "https"

    @property
    def scheme(self) -> str:
        return self.value

    @property
    def default_port(self) -> int:
        return 80 if self == Transport.HTTP else 443
