'''
Stack de ejemplo que arma un API Gateway REST con el builder:
- GET /health: respuesta mock 200
- GET /echo/{id}: lambda proxy (src/echo) + CORS
- ANY /upstream: proxy HTTP a UPSTREAM_URL
'''

from aws_cdk import (
    CfnOutput,
    Duration,
    Stack,
    aws_apigateway as apigw,
    aws_lambda as _lambda,
)
from constructs import Construct
from typing import Optional
import os

from api_gateway_builder import ApiGatewayConstruct

UPSTREAM_URL = os.getenv("UPSTREAM_URL", "https://example.com")
CORS_ALLOW_ORIGINS = os.getenv("CORS_ALLOW_ORIGINS", "")


class GatewayStack(Stack):
    def __init__(self, scope: Construct, id: str, project_name: str, upstream_url: str = UPSTREAM_URL, allow_origins: Optional[list] = None, **kwargs):
        super().__init__(scope, id, **kwargs)

        if allow_origins is None:
            allow_origins = [o for o in CORS_ALLOW_ORIGINS.split(",") if o] or apigw.Cors.ALL_ORIGINS

        echo_code_path = os.path.join(os.path.dirname(__file__), "../../src/echo")

        self.gateway = ApiGatewayConstruct(
            self,
            f"{project_name}Api",
            rest_api_name=f"{project_name}-api",
        )

        # ======================================================
        # Routes
        # ======================================================
        self.echo = self.gateway \
            .resolve("/health").respond_mock("GET") \
            .build() \
            .resolve("/echo/{id}").proxy_lambda(
                "GET",
                {
                    "function_name": f"{project_name}-echo",
                    "runtime": _lambda.Runtime.PYTHON_3_13,
                    "handler": "handler.lambda_handler",
                    "code": _lambda.Code.from_asset(echo_code_path),
                    "environment": {"PROJECT_NAME": project_name},
                    "timeout": Duration.seconds(5),
                },
            ) \
            .add_cors(allow_origins=allow_origins, allow_methods=["GET"])

        self.gateway.resolve("/upstream").proxy_http("ANY", upstream_url)

        # Outputs
        CfnOutput(self, "ApiUrl", value=self.gateway.root_url)
        CfnOutput(self, "EchoUrl", value=self.gateway.url_for("/echo/{id}"))
        CfnOutput(self, "EchoHandlerName", value=self.echo.handler_name)
