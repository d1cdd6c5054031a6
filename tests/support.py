"""Shared helpers: an in-memory repository and a stub connection for building test apps."""

import os

from resulthub.config.settings import Settings
from resulthub.data.connection import (ActionFailed, DuplicateStudent,
                                       StudentNotFound)
from resulthub.main import create_app

STATIC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "static")

class InMemoryStudentRepository:
	"""Behaves like StudentRepository over a dict keyed by roll number."""

	def __init__(self):
		self.students = {}
		self.writes = 0

	def ensure_indexes(self):
		pass

	def list_students(self):
		return [dict(self.students[roll]) for roll in sorted(self.students)]

	def get_student(self, roll_number):
		if roll_number not in self.students:
			raise StudentNotFound(roll_number)
		return dict(self.students[roll_number])

	def create_student(self, student):
		if student["rollNumber"] in self.students:
			raise DuplicateStudent(student["rollNumber"])
		self.students[student["rollNumber"]] = dict(student)
		self.writes += 1
		return dict(student)

	def update_student(self, roll_number, updates):
		if roll_number not in self.students:
			raise StudentNotFound(roll_number)
		self.students[roll_number].update(updates)
		self.writes += 1
		return dict(self.students[roll_number])

	def delete_student(self, roll_number):
		if roll_number not in self.students:
			raise StudentNotFound(roll_number)
		self.writes += 1
		return self.students.pop(roll_number)

class BrokenStudentRepository:
	"""Every call fails with `error`."""

	def __init__(self, error: Exception | None = None):
		self.error = error or ActionFailed("connection reset by peer")

	def _fail(self, *args, **kwargs):
		raise self.error

	list_students = get_student = create_student = update_student = delete_student = _fail

class StubConnection:
	def __init__(self, connected: bool = True):
		self.connected = connected
		self.closed = False

	def is_connected(self) -> bool:
		return self.connected and not self.closed

	def close(self):
		self.closed = True

def make_app(repository=None, connection=None):
	settings = Settings(MONGODB_URI="mongodb://stub", STATIC_DIR=STATIC_DIR)
	return create_app(
		connection or StubConnection(),
		settings,
		repository if repository is not None else InMemoryStudentRepository()
	)
