"""
Application services.
"""

from .search_application_service import SearchApplicationService

__all__ = ['SearchApplicationService']
