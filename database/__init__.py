"""
Database Package - MongoDB connection manager and people facade
"""

from .mongodb import MongoDB
from .people import PeopleRepository, DeleteSummary

__all__ = ["MongoDB", "PeopleRepository", "DeleteSummary"]
