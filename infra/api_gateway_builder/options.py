'''
Default options used by the resource builder and the merge rule that applies
caller overrides on top of them.

Merge rule (shallow): every default key is kept unless the caller supplies the
same key, in which case the caller's value wins. Keys only the caller supplies
are added. Nested values are never merged, they are replaced as a whole.
'''

from types import MappingProxyType
from typing import Any, Mapping, Optional

from aws_cdk import aws_apigateway as apigw


# Lambda proxy integration. True is already the CDK default, kept explicit
LAMBDA_INTEGRATION_DEFAULTS = MappingProxyType({
    "proxy": True,
})

# HTTP proxy method: public endpoint
HTTP_METHOD_DEFAULTS = MappingProxyType({
    "authorization_type": apigw.AuthorizationType.NONE,
})

# Mock integration answers from the template, the request never leaves API Gateway
MOCK_REQUEST_TEMPLATES = MappingProxyType({
    "application/json": '{"statusCode": 200}',
})

MOCK_STATUS_CODE = "200"


def merge_options(defaults: Mapping[str, Any], overrides: Optional[Mapping[str, Any]] = None) -> dict:
    merged = dict(defaults)
    if overrides:
        merged.update(overrides)
    return merged


def lambda_integration_options(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    """Keyword arguments for ``apigw.LambdaIntegration``."""
    return merge_options(LAMBDA_INTEGRATION_DEFAULTS, overrides)


def http_method_options(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    """Keyword arguments for ``IResource.add_method`` on an HTTP proxy route."""
    return merge_options(HTTP_METHOD_DEFAULTS, overrides)


def http_integration_options(http_method: str, overrides: Optional[Mapping[str, Any]] = None) -> dict:
    """
    Keyword arguments for ``apigw.HttpIntegration``.

    ``http_method`` defaults to the verb of the route, the caller may still
    point the integration to another verb through ``overrides``.
    """
    defaults = {
        "http_method": http_method,
        "proxy": True,
        "options": apigw.IntegrationOptions(
            passthrough_behavior=apigw.PassthroughBehavior.WHEN_NO_MATCH,
        ),
    }
    return merge_options(defaults, overrides)


def mock_integration() -> apigw.MockIntegration:
    return apigw.MockIntegration(
        passthrough_behavior=apigw.PassthroughBehavior.NEVER,
        request_templates=dict(MOCK_REQUEST_TEMPLATES),
        integration_responses=[
            apigw.IntegrationResponse(
                status_code=MOCK_STATUS_CODE,
                response_parameters={},
                response_templates={"application/json": ""},
            )
        ],
    )


def mock_method_options() -> dict:
    return {
        "method_responses": [
            apigw.MethodResponse(
                status_code=MOCK_STATUS_CODE,
                response_models={"application/json": apigw.Model.EMPTY_MODEL},
                response_parameters={},
            )
        ],
    }
