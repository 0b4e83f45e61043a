"""Mini README: Host interfaces for the gigledger package.

Exports the FastAPI application factory that screens call into. The CLI
entry point lives in ``main_earnings_companion.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]
