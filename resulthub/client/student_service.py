# client/student_service.py

from typing import Any
from urllib.parse import quote

import httpx

from resulthub.utils.logger import logger

DEFAULT_BASE_URL = "http://localhost:5000/api/students"

class StudentService:
	"""
	Async client for the students API.

	One request per call; no retries and no caching. Every failure, whether
	the server was unreachable or answered with an error status, is returned
	as `{"success": False, "error": "..."}` instead of raised.
	"""
	def __init__(
		self,
		base_url: str = DEFAULT_BASE_URL,
		*,
		timeout: float = 30,
		transport: httpx.AsyncBaseTransport | None = None
	):
		self.base_url = base_url.rstrip("/")
		self.timeout = timeout
		self.transport = transport

	def _student_url(self, roll: str | int) -> str:
		return f"{self.base_url}/{quote(str(roll), safe='')}"

	async def _request(
		self,
		action: str,
		method: str,
		url: str,
		*,
		payload: dict[str, Any] | None = None,
		roll: str | int | None = None
	) -> dict[str, Any]:
		generic_error = {
			"success": False,
			"error": f"Failed to {action}. Please check your connection."
		}
		try:
			async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
				r = await client.request(method, url, json=payload)
		except httpx.HTTPError as e:
			logger(tag="client").error(f"Error trying to {action}: {e}")
			return generic_error

		try:
			body = r.json()
		except ValueError:
			body = None

		if r.is_success and isinstance(body, dict):
			return body

		logger(tag="client").warning(f"{method} {url} returned HTTP {r.status_code}")
		error = body.get("error") if isinstance(body, dict) else None
		if isinstance(error, str) and error:
			return {"success": False, "error": error}
		if r.status_code == 404 and roll is not None:
			return {"success": False, "error": f"Student with roll number {roll} not found"}
		return generic_error

	async def get_all_students(self) -> dict[str, Any]:
		return await self._request("fetch students", "GET", self.base_url)

	async def get_student_by_roll(self, roll: str | int) -> dict[str, Any]:
		return await self._request("fetch student", "GET", self._student_url(roll), roll=roll)

	async def add_student(self, student: dict[str, Any]) -> dict[str, Any]:
		return await self._request("add student", "POST", self.base_url, payload=student)

	async def update_student(self, roll: str | int, student: dict[str, Any]) -> dict[str, Any]:
		return await self._request("update student", "PUT", self._student_url(roll), payload=student, roll=roll)

	async def delete_student(self, roll: str | int) -> dict[str, Any]:
		return await self._request("delete student", "DELETE", self._student_url(roll), roll=roll)
