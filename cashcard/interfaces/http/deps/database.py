"""Database session dependency.

One session per request, committed when the handler returns and rolled
back when it raises.
"""

from cashcard.infrastructure.database import get_session as get_db_session

__all__ = ["get_db_session"]
