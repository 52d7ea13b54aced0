from .construct import ApiGatewayConstruct, normalize_path
from .errors import (
    ApiBuilderError,
    DuplicateIntegrationError,
    EmptyPathError,
    NotFoundError,
    UnregisteredPathError,
)
from .resource_builder import ApiResourceBuilder
from .routes import RouteDefinition, apply_routes

__all__ = [
    "ApiGatewayConstruct",
    "ApiResourceBuilder",
    "ApiBuilderError",
    "DuplicateIntegrationError",
    "EmptyPathError",
    "NotFoundError",
    "UnregisteredPathError",
    "RouteDefinition",
    "apply_routes",
    "normalize_path",
]
