"""Core enumerations.

Key Types:
    - Protocol: Scheme used to reach the CMCI server
    - RetrievalState: Lifecycle of a cached query (issue, paginate, finish)
"""

from enum import Enum


class Protocol(str, Enum):
    """Scheme used to reach the CMCI server."""

    HTTP = "http"
    HTTPS = "https"


class RetrievalState(str, Enum):
    """Lifecycle of one cached query.

    UNISSUED -> TOKEN_ISSUED -> PAGINATING -> COMPLETE. Any remote failure
    moves a non-terminal retrieval to FAILED. COMPLETE and FAILED are terminal.
    """

    UNISSUED = "unissued"
    TOKEN_ISSUED = "token_issued"
    PAGINATING = "paginating"
    COMPLETE = "complete"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (RetrievalState.COMPLETE, RetrievalState.FAILED)
