# api/errors.py

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resulthub.api.routes.static import read_page
from resulthub.models.envelope import fail
from resulthub.utils.logger import logger

_FALLBACK_404 = "<!DOCTYPE html><html><body><h1>404 - Page not found</h1></body></html>"

_BODY_SHAPE_ERRORS = {"missing", "model_type", "model_attributes_type", "dict_type"}

def is_api_path(path: str) -> bool:
	return path == "/api" or path.startswith("/api/")

def describe_validation_errors(exc: RequestValidationError) -> str:
	"""Turns pydantic errors into one line, e.g. 'rollNumber: Field required; marks: ...'."""
	parts = []
	for error in exc.errors():
		if tuple(error.get("loc", ())) == ("body",) and error.get("type") in _BODY_SHAPE_ERRORS:
			# Form posts and bare values fail on the body as a whole
			return "request body must be a JSON object"
		loc = [str(p) for p in error.get("loc", ()) if p != "body"]
		message = error.get("msg", "invalid value")
		parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
	return "; ".join(parts) or "Invalid request"

async def validation_exception_handler(request: Request, exc: RequestValidationError):
	message = describe_validation_errors(exc)
	logger(tag="validation").info(f"{request.method} {request.url.path} rejected: {message}")
	return fail(f"Invalid student data: {message}", 400)

async def http_error_handler(request: Request, exc: StarletteHTTPException):
	if is_api_path(request.url.path):
		if exc.status_code == 404:
			return fail("API endpoint not found", 404)
		return fail(str(exc.detail), exc.status_code, headers=getattr(exc, "headers", None))
	if exc.status_code == 404:
		try:
			content = read_page(request.app.state.settings.STATIC_DIR, "404.html")
		except StarletteHTTPException:
			content = _FALLBACK_404
		return HTMLResponse(content=content, status_code=404)
	return await http_exception_handler(request, exc)

async def unhandled_exception_handler(request: Request, exc: Exception):
	logger(tag="error").exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
	return fail(str(exc) or "Internal server error", 500)

def register_error_handlers(app: FastAPI) -> None:
	app.add_exception_handler(RequestValidationError, validation_exception_handler)
	app.add_exception_handler(StarletteHTTPException, http_error_handler)
	app.add_exception_handler(Exception, unhandled_exception_handler)
