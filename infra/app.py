#!/usr/bin/env python3
import logging
import os

import aws_cdk as cdk
from stacks.gateway_stack import GatewayStack

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

app = cdk.App()

# Nombre del proyecto desde PROJECT_NAME; cuenta y región las define el CLI de cdk (CDK_DEFAULT_*)
PROJECT_NAME = os.getenv("PROJECT_NAME", "ApiGatewayBuilder")

ACCOUNT = os.getenv("CDK_DEFAULT_ACCOUNT")
MAIN_REGION = os.getenv("CDK_DEFAULT_REGION", "us-west-2")


# ------------- Stacks --------------------

GatewayStack(
    app,
    f"{PROJECT_NAME}-GatewayStack",
    project_name=PROJECT_NAME,
    env=cdk.Environment(account=ACCOUNT, region=MAIN_REGION),
)


app.synth()
