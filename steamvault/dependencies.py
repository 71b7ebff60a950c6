# fastapi dependency injection
# provides the shared analytics api client to routes and websockets

from fastapi.requests import HTTPConnection

from steamvault.services.api_client import AnalyticsClient


async def get_api_client(connection: HTTPConnection) -> AnalyticsClient:
    """the client created in the app lifespan"""
    return connection.app.state.api_client
