"""Router initialization.

Re-exports router modules so they can be imported both as FastAPI routers
(via the ``router`` attribute) and as modules for testing/monkeypatching.
"""

from . import mcp_router

__all__ = [
    "mcp_router",
]
