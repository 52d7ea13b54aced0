import aws_cdk as cdk
import pytest
from aws_cdk import aws_lambda as _lambda

from api_gateway_builder import ApiGatewayConstruct


@pytest.fixture
def stack():
    return cdk.Stack(cdk.App(), "TestStack")


@pytest.fixture
def gateway(stack):
    return ApiGatewayConstruct(stack, "TestApi")


@pytest.fixture
def function_props():
    return {
        "runtime": _lambda.Runtime.PYTHON_3_13,
        "handler": "index.lambda_handler",
        "code": _lambda.Code.from_inline(
            "def lambda_handler(event, context):\n"
            "    return {'statusCode': 200, 'body': 'ok'}\n"
        ),
    }
