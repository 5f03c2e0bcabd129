"""
Service layer for Collate.

Provides high-level services that tie authorship, segmentation and
rendering together for the CLI.
"""

from .portfolio_service import PortfolioService

__all__ = ["PortfolioService"]
