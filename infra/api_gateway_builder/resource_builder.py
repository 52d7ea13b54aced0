import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

from aws_cdk import (
    aws_apigateway as apigw,
    aws_lambda as _lambda,
)

from . import options as opts
from .errors import DuplicateIntegrationError

if TYPE_CHECKING:
    from .construct import ApiGatewayConstruct

logger = logging.getLogger(__name__)


class ApiResourceBuilder:
    """
    Wraps one API Gateway resource and configures its methods.

    Every configuration method returns the builder itself so calls can be
    chained. ``build()`` goes back to the gateway to continue with another path:

        gateway.resolve("/health").respond_mock("GET") \\
            .build().resolve("/users").proxy_lambda("POST", props)
    """

    def __init__(self, gateway: "ApiGatewayConstruct", resource: apigw.IResource):
        self._gateway = gateway
        self._resource = resource
        # HTTP verb -> function created by proxy_lambda
        self._handlers = {}
        self._last_handler: Optional[_lambda.Function] = None

    @property
    def resource(self) -> apigw.IResource:
        return self._resource

    @property
    def path(self) -> str:
        return self._resource.path

    @property
    def handlers(self) -> Mapping[str, _lambda.Function]:
        return MappingProxyType(self._handlers)

    @property
    def handler_name(self) -> Optional[str]:
        return self._last_handler.function_name if self._last_handler else None

    @property
    def handler_arn(self) -> Optional[str]:
        return self._last_handler.function_arn if self._last_handler else None

    def handler_for(self, http_method: str) -> Optional[_lambda.Function]:
        return self._handlers.get(http_method.upper())

    def build(self) -> "ApiGatewayConstruct":
        return self._gateway

    def respond_mock(self, http_method: str) -> "ApiResourceBuilder":
        """Answers ``http_method`` with a 200 and an empty body, no backend involved."""
        self._resource.add_method(http_method, opts.mock_integration(), **opts.mock_method_options())
        logger.debug("Mock integration %s %s", http_method, self.path)
        return self

    def respond200(self, http_method: str) -> "ApiResourceBuilder":
        return self.respond_mock(http_method)

    def respond_ok(self, http_method: str) -> "ApiResourceBuilder":
        return self.respond_mock(http_method)

    def proxy_lambda(self,
                     http_method: str,
                     handler_props: Mapping[str, Any],
                     options: Optional[Mapping[str, Any]] = None) -> "ApiResourceBuilder":
        """
        Creates a new Lambda function and adds a PROXY integration to it.

        :param http_method: verb of the method added to the resource
        :param handler_props: keyword arguments of ``aws_lambda.Function``
            (runtime, handler, code, timeout...), forwarded as they are
        :param options: ``LambdaIntegration`` overrides, ``proxy`` is True by default
        :raises DuplicateIntegrationError: the verb already has a function here
        """
        verb = http_method.upper()
        if verb in self._handlers:
            raise DuplicateIntegrationError(
                f"Resource {self.path} already has a function for {verb}"
            )

        handler = _lambda.Function(
            self._gateway, self._gateway.function_id(self.path, verb), **handler_props
        )
        integration = apigw.LambdaIntegration(handler, **opts.lambda_integration_options(options))
        try:
            self._resource.add_method(http_method, integration)
        except Exception:
            # The function is only kept when its method was added
            self._gateway.node.try_remove_child(handler.node.id)
            raise

        self._handlers[verb] = handler
        self._last_handler = handler
        logger.info("Lambda proxy integration %s %s", verb, self.path)
        return self

    def proxy_http(self,
                   http_method: str,
                   url: str,
                   integration_options: Optional[Mapping[str, Any]] = None,
                   method_options: Optional[Mapping[str, Any]] = None) -> "ApiResourceBuilder":
        """
        Adds an HTTP PROXY integration to ``url``.

        Defaults are no authorization on the method, and proxy mode with
        WHEN_NO_MATCH passthrough on the integration. Both option mappings
        override the defaults key by key.
        """
        integration = apigw.HttpIntegration(
            url, **opts.http_integration_options(http_method, integration_options)
        )
        self._resource.add_method(http_method, integration, **opts.http_method_options(method_options))
        logger.info("HTTP proxy integration %s %s -> %s", http_method, self.path, url)
        return self

    def add_cors(self,
                 allow_origins,
                 allow_methods=None,
                 allow_headers=None,
                 **options) -> "ApiResourceBuilder":
        """
        Configures the CORS preflight (OPTIONS) of the resource.

        Any other ``apigw.CorsOptions`` field can be given as keyword argument.
        Values left as None use the API Gateway defaults.
        """
        if allow_methods is not None:
            options["allow_methods"] = allow_methods
        if allow_headers is not None:
            options["allow_headers"] = allow_headers
        self._resource.add_cors_preflight(allow_origins=allow_origins, **options)
        logger.debug("CORS preflight %s", self.path)
        return self
