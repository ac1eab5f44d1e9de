from fastapi import Request, Response
from typing import Iterator

from ..database.database import Database
from ..database.repository import Repository
from ..schemas import ServiceResponse, ServiceStatus

HTTP_STATUS = {
    ServiceStatus.CREATED: 201,
    ServiceStatus.UPDATED: 200,
    ServiceStatus.DELETED: 200,
    ServiceStatus.NOT_FOUND: 404,
    ServiceStatus.ERROR: 400,
}

def get_database(request: Request) -> Database:
    return request.app.state.database

def get_repository(request: Request) -> Iterator[Repository]:
    """One repository, and so one session, per request"""
    with get_database(request).session_scope() as session:
        yield Repository(session)

def respond(response: Response, result: ServiceResponse) -> ServiceResponse:
    """Set the HTTP status that matches a service result"""
    response.status_code = HTTP_STATUS[result.status]
    return result
