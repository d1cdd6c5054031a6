# api/routes/students.py

from fastapi import APIRouter, Depends

from resulthub.api.dependencies import get_repository
from resulthub.data.connection import (ActionFailed, DuplicateStudent,
                                       StudentNotFound)
from resulthub.data.repositories.student import StudentRepository
from resulthub.models.envelope import fail, ok
from resulthub.models.student import StudentCreateRequest, StudentUpdateRequest
from resulthub.utils.logger import logger

router = APIRouter(prefix="/api/students", tags=["Students"])

# Handlers are plain functions: pymongo blocks, so FastAPI runs them in its threadpool.

@router.get("")
def list_students(repo: StudentRepository = Depends(get_repository)):
	try:
		logger(tag="list").info("GET /api/students")
		students = repo.list_students()
		logger(tag="list").info(f"Retrieved {len(students)} students")
		return ok(students)
	except ActionFailed as e:
		logger(tag="list").error(f"Error listing students: {e}")
		return fail(f"Failed to fetch students: {e}", 500)

@router.get("/{roll}")
def get_student(roll: str, repo: StudentRepository = Depends(get_repository)):
	roll = roll.strip()
	try:
		logger(tag="get").info(f"GET /api/students/{roll}")
		return ok(repo.get_student(roll))
	except StudentNotFound as e:
		return fail(str(e), 404)
	except ActionFailed as e:
		logger(tag="get").error(f"Error getting student {roll}: {e}")
		return fail(f"Failed to fetch student: {e}", 500)

@router.post("", status_code=201)
def create_student(req: StudentCreateRequest, repo: StudentRepository = Depends(get_repository)):
	try:
		logger(tag="create").info(f"POST /api/students rollNumber={req.rollNumber}")
		student = repo.create_student(req.to_document())
		return ok(student, status_code=201)
	except DuplicateStudent as e:
		return fail(str(e), 409)
	except ActionFailed as e:
		logger(tag="create").error(f"Error creating student {req.rollNumber}: {e}")
		return fail(f"Failed to add student: {e}", 500)

@router.put("/{roll}")
def update_student(roll: str, req: StudentUpdateRequest, repo: StudentRepository = Depends(get_repository)):
	roll = roll.strip()
	updates = req.to_document()
	logger(tag="update").info(f"PUT /api/students/{roll} fields={list(updates.keys())}")

	problem = None
	if updates.get("rollNumber", roll) != roll:
		problem = "rollNumber cannot be changed"
	updates.pop("rollNumber", None)
	if problem is None and not updates:
		problem = "No fields to update"

	try:
		if problem:
			# An absent roll number is reported as such before the body is judged
			repo.get_student(roll)
			return fail(problem, 400)
		return ok(repo.update_student(roll, updates))
	except StudentNotFound as e:
		return fail(str(e), 404)
	except ActionFailed as e:
		logger(tag="update").error(f"Error updating student {roll}: {e}")
		return fail(f"Failed to update student: {e}", 500)

@router.delete("/{roll}")
def delete_student(roll: str, repo: StudentRepository = Depends(get_repository)):
	roll = roll.strip()
	try:
		logger(tag="delete").info(f"DELETE /api/students/{roll}")
		student = repo.delete_student(roll)
		logger(tag="delete").info(f"Deleted student {roll}")
		return ok(student)
	except StudentNotFound as e:
		return fail(str(e), 404)
	except ActionFailed as e:
		logger(tag="delete").error(f"Error deleting student {roll}: {e}")
		return fail(f"Failed to delete student: {e}", 500)
