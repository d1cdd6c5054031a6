# data/__init__.py
"""
Data layer for MongoDB operations.
"""

from .connection import (ActionFailed, DuplicateStudent, MongoConnection,
                         StudentNotFound)
from .repositories.student import STUDENTS_COLLECTION, StudentRepository

__all__ = [
	'ActionFailed',
	'DuplicateStudent',
	'MongoConnection',
	'StudentNotFound',
	'STUDENTS_COLLECTION',
	'StudentRepository',
]
