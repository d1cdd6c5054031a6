# api/routes/system.py

import time

from fastapi import APIRouter, Depends, Request

from resulthub.api.dependencies import get_connection, get_settings
from resulthub.config.settings import Settings
from resulthub.data.connection import MongoConnection
from resulthub.models.envelope import HealthReport, ok

router = APIRouter(prefix="/api", tags=["System"])

@router.get("/health")
def health_check(
	connection: MongoConnection = Depends(get_connection),
	settings: Settings = Depends(get_settings)
):
	"""Health check endpoint, reports whether MongoDB answers a ping."""
	connected = connection.is_connected()
	return HealthReport(
		status="OK" if connected else "DEGRADED",
		service=settings.SERVICE_NAME,
		mongodb="connected" if connected else "disconnected",
		timestamp=time.strftime("%Y-%m-%d %H:%M:%S")
	)

@router.get("")
def get_api_info(request: Request, settings: Settings = Depends(get_settings)):
	"""Describes the API and lists every path under /api."""
	# The OpenAPI paths stay flat however routers are nested inside app.routes
	endpoints = [
		{"path": path, "methods": sorted(method.upper() for method in operations)}
		for path, operations in request.app.openapi().get("paths", {}).items()
		if path.startswith("/api")
	]
	return ok({
		"name": settings.SERVICE_NAME,
		"version": settings.VERSION,
		"description": "Student results: add, update, remove and look up results by roll number",
		"endpoints": endpoints
	})
