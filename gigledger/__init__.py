"""Mini README: Core package initializer for the gigledger companion.

The package keeps a gig worker's monthly earnings ledger: ``finance`` holds
the ledger and its persistence session, ``storage`` the pluggable key-value
backends, and ``interface`` the HTTP host. Only the logger factory is
re-exported here so importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
