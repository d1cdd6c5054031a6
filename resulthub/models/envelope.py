# models/envelope.py
"""
Every API response is one of two shapes, told apart by `success`:

	{"success": true, "data": ...}
	{"success": false, "error": "..."}
"""

from typing import Any, Literal

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

class Success(BaseModel):
	success: Literal[True] = True
	data: Any = None

class Failure(BaseModel):
	success: Literal[False] = False
	error: str

class HealthReport(BaseModel):
	success: Literal[True] = True
	status: Literal["OK", "DEGRADED"]
	service: str
	mongodb: Literal["connected", "disconnected"]
	timestamp: str

def ok(data: Any = None, status_code: int = 200) -> JSONResponse:
	return JSONResponse(
		status_code=status_code,
		content=jsonable_encoder(Success(data=data))
	)

def fail(error: str, status_code: int, headers: dict[str, str] | None = None) -> JSONResponse:
	return JSONResponse(
		status_code=status_code,
		content=Failure(error=error).model_dump(),
		headers=headers
	)
