# api/dependencies.py

from fastapi import Request

from resulthub.config.settings import Settings
from resulthub.data.connection import MongoConnection
from resulthub.data.repositories.student import StudentRepository

def get_repository(request: Request) -> StudentRepository:
	return request.app.state.repository

def get_connection(request: Request) -> MongoConnection:
	return request.app.state.connection

def get_settings(request: Request) -> Settings:
	return request.app.state.settings
