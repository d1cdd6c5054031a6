"""StudentRepository against a mocked pymongo collection."""

import unittest
from unittest.mock import MagicMock

from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import AutoReconnect, DuplicateKeyError

from resulthub.data.connection import (ActionFailed, DuplicateStudent,
                                       StudentNotFound)
from resulthub.data.repositories.student import StudentRepository

class TestStudentRepository(unittest.TestCase):

	def setUp(self):
		self.collection = MagicMock()
		self.repo = StudentRepository(self.collection)

	def test_ensure_indexes_creates_unique_roll_number_index(self):
		self.repo.ensure_indexes()
		self.collection.create_index.assert_called_once_with(
			[("rollNumber", ASCENDING)], unique=True, name="rollNumber_unique"
		)

	def test_list_students_hides_id_and_sorts(self):
		students = [{"rollNumber": "1", "name": "A"}, {"rollNumber": "2", "name": "B"}]
		self.collection.find.return_value.sort.return_value = iter(students)
		self.assertEqual(self.repo.list_students(), students)
		self.collection.find.assert_called_once_with({}, {"_id": 0})
		self.collection.find.return_value.sort.assert_called_once_with("rollNumber", ASCENDING)

	def test_get_student_queries_by_roll_number(self):
		self.collection.find_one.return_value = {"rollNumber": "101", "name": "Asha"}
		self.assertEqual(self.repo.get_student("101")["name"], "Asha")
		self.collection.find_one.assert_called_once_with({"rollNumber": "101"}, {"_id": 0})

	def test_get_missing_student(self):
		self.collection.find_one.return_value = None
		with self.assertRaises(StudentNotFound) as ctx:
			self.repo.get_student("9")
		self.assertEqual(str(ctx.exception), "Student with roll number 9 not found")

	def test_create_student_does_not_leak_id(self):
		def insert(doc):
			doc["_id"] = "65f0c0ffee"
		self.collection.insert_one.side_effect = insert
		student = {"rollNumber": "101", "name": "Asha", "marks": 88}

		created = self.repo.create_student(student)

		self.assertEqual(created, {"rollNumber": "101", "name": "Asha", "marks": 88})
		self.assertNotIn("_id", student)

	def test_create_duplicate_student(self):
		self.collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
		with self.assertRaises(DuplicateStudent) as ctx:
			self.repo.create_student({"rollNumber": "101", "name": "Asha"})
		self.assertEqual(str(ctx.exception), "Student with roll number 101 already exists")

	def test_update_student_sets_fields_and_returns_new_document(self):
		self.collection.find_one_and_update.return_value = {"rollNumber": "101", "marks": 90}
		result = self.repo.update_student("101", {"marks": 90})
		self.assertEqual(result["marks"], 90)
		self.collection.find_one_and_update.assert_called_once_with(
			{"rollNumber": "101"},
			{"$set": {"marks": 90}},
			projection={"_id": 0},
			return_document=ReturnDocument.AFTER
		)

	def test_update_missing_student(self):
		self.collection.find_one_and_update.return_value = None
		with self.assertRaises(StudentNotFound):
			self.repo.update_student("9", {"marks": 1})

	def test_delete_student(self):
		self.collection.find_one_and_delete.return_value = {"rollNumber": "101"}
		self.assertEqual(self.repo.delete_student("101"), {"rollNumber": "101"})
		self.collection.find_one_and_delete.assert_called_once_with(
			{"rollNumber": "101"}, projection={"_id": 0}
		)

	def test_delete_missing_student(self):
		self.collection.find_one_and_delete.return_value = None
		with self.assertRaises(StudentNotFound):
			self.repo.delete_student("9")

	def test_driver_errors_become_action_failed(self):
		error = AutoReconnect("connection closed")
		self.collection.find.side_effect = error
		self.collection.find_one.side_effect = error
		self.collection.insert_one.side_effect = error
		self.collection.find_one_and_update.side_effect = error
		self.collection.find_one_and_delete.side_effect = error

		for call in (
			lambda: self.repo.list_students(),
			lambda: self.repo.get_student("1"),
			lambda: self.repo.create_student({"rollNumber": "1", "name": "A"}),
			lambda: self.repo.update_student("1", {"name": "B"}),
			lambda: self.repo.delete_student("1"),
		):
			with self.assertRaises(ActionFailed):
				call()

if __name__ == "__main__":
	unittest.main(verbosity=2)
