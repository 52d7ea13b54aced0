import json
import logging
import os

logger = logging.getLogger()
logger.setLevel(logging.INFO)

project_name = os.environ.get("PROJECT_NAME", "")


# Devuelve el id del path y los query params recibidos por el proxy de API Gateway
def lambda_handler(event, context):
    try:
        path_parameters = event.get("pathParameters") or {}
        query_parameters = event.get("queryStringParameters") or {}

        body = {
            "project": project_name,
            "id": path_parameters.get("id"),
            "query": query_parameters,
        }
        logger.info("Echo %s", body)

        return {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(body),
        }
    except Exception as e:
        logger.exception("Error procesando el evento")
        return {
            "statusCode": 500,
            "body": json.dumps({"error": str(e)}),
        }
