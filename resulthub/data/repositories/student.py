# data/repositories/student.py
"""
Student result operations for MongoDB.
A student is keyed by the roll number the school assigns, never by `_id`.

## Fields
	rollNumber: Unique identifier assigned outside the system, stored as a string
	name: The name of the student
	className: The class the student is enrolled in
	section: The section within the class
	marks: Overall marks out of 100
	grade: Letter grade
	subjects: Marks per subject
"""

from typing import Any

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from resulthub.data.connection import (ActionFailed, DuplicateStudent,
                                       StudentNotFound)
from resulthub.utils.logger import logger

STUDENTS_COLLECTION = "students"
STUDENT_VALIDATOR = "schemas/student_validator.json"

# Never leak the surrogate key
_PUBLIC_FIELDS = {"_id": 0}

class StudentRepository:
	def __init__(self, collection: Collection):
		self.collection = collection

	def ensure_indexes(self) -> None:
		self.collection.create_index(
			[("rollNumber", ASCENDING)],
			unique=True,
			name="rollNumber_unique"
		)

	def list_students(self) -> list[dict[str, Any]]:
		try:
			cursor = self.collection.find({}, _PUBLIC_FIELDS).sort("rollNumber", ASCENDING)
			return list(cursor)
		except PyMongoError as e:
			logger(tag="list").error(f"Error listing students: {e}")
			raise ActionFailed(str(e)) from e

	def get_student(self, roll_number: str) -> dict[str, Any]:
		try:
			student = self.collection.find_one({"rollNumber": roll_number}, _PUBLIC_FIELDS)
		except PyMongoError as e:
			logger(tag="get").error(f"Error fetching student {roll_number}: {e}")
			raise ActionFailed(str(e)) from e
		if student is None:
			raise StudentNotFound(roll_number)
		return student

	def create_student(self, student: dict[str, Any]) -> dict[str, Any]:
		# insert_one writes `_id` into the dict it is given
		doc = dict(student)
		try:
			self.collection.insert_one(doc)
		except DuplicateKeyError as e:
			logger(tag="create").warning(f"Duplicate roll number {student['rollNumber']}")
			raise DuplicateStudent(student["rollNumber"]) from e
		except PyMongoError as e:
			logger(tag="create").error(f"Error creating student: {e}")
			raise ActionFailed(str(e)) from e
		doc.pop("_id", None)
		logger(tag="create").info(f"Created student {doc['rollNumber']}")
		return doc

	def update_student(self, roll_number: str, updates: dict[str, Any]) -> dict[str, Any]:
		try:
			student = self.collection.find_one_and_update(
				{"rollNumber": roll_number},
				{"$set": updates},
				projection=_PUBLIC_FIELDS,
				return_document=ReturnDocument.AFTER
			)
		except PyMongoError as e:
			logger(tag="update").error(f"Error updating student {roll_number}: {e}")
			raise ActionFailed(str(e)) from e
		if student is None:
			raise StudentNotFound(roll_number)
		return student

	def delete_student(self, roll_number: str) -> dict[str, Any]:
		try:
			student = self.collection.find_one_and_delete(
				{"rollNumber": roll_number},
				projection=_PUBLIC_FIELDS
			)
		except PyMongoError as e:
			logger(tag="delete").error(f"Error deleting student {roll_number}: {e}")
			raise ActionFailed(str(e)) from e
		if student is None:
			raise StudentNotFound(roll_number)
		return student
