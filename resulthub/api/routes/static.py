# api/routes/static.py

import os

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse

router = APIRouter()

PAGES = {
	"/": "index.html",
	"/check-result": "check-result.html",
	"/add-student": "add-student.html",
	"/update-student": "update-student.html",
	"/view-students": "view-students.html",
}

def read_page(static_dir: str, file_name: str) -> str:
	"""Reads an HTML page from the static directory. Raises HTTPException(404) if absent."""
	try:
		with open(os.path.join(static_dir, file_name), "r", encoding="utf-8") as f:
			return f.read()
	except FileNotFoundError:
		raise HTTPException(status_code=404, detail=f"Page '{file_name}' not found")

def _page_endpoint(file_name: str):
	def serve_page(request: Request):
		return HTMLResponse(content=read_page(request.app.state.settings.STATIC_DIR, file_name))
	serve_page.__name__ = f"serve_{os.path.splitext(file_name)[0].replace('-', '_')}"
	return serve_page

for path, file_name in PAGES.items():
	router.add_api_route(
		path,
		_page_endpoint(file_name),
		methods=["GET"],
		response_class=HTMLResponse,
		include_in_schema=False
	)
