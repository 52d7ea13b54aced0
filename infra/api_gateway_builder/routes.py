'''
Declarative form of the builder: the API is described as a list of route
definitions and applied through the fluent API.

    apply_routes(gateway, [
        RouteDefinition("/health", mock=("GET",)),
        RouteDefinition("/users/{id}", lambdas={"GET": function_props},
                        cors={"allow_origins": ["https://example.com"]}),
    ])
'''

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Tuple

from .construct import ApiGatewayConstruct

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteDefinition:
    path: str
    # verbs answered with an empty 200
    mock: Tuple[str, ...] = ()
    # verb -> aws_lambda.Function keyword arguments
    lambdas: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    # verb -> upstream url
    http: Mapping[str, str] = field(default_factory=dict)
    # ApiResourceBuilder.add_cors keyword arguments
    cors: Optional[Mapping[str, Any]] = None


def apply_routes(gateway: ApiGatewayConstruct, routes: Iterable[RouteDefinition]) -> ApiGatewayConstruct:
    for route in routes:
        builder = gateway.resolve(route.path)
        for http_method in route.mock:
            builder.respond_mock(http_method)
        for http_method, handler_props in route.lambdas.items():
            builder.proxy_lambda(http_method, handler_props)
        for http_method, url in route.http.items():
            builder.proxy_http(http_method, url)
        if route.cors is not None:
            builder.add_cors(**route.cors)
        logger.debug("Applied route %s", route.path)

    return gateway
