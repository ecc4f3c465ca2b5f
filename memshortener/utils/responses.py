"""API Gateway proxy response builders

Every builder returns a dict in Lambda Proxy output format, with a JSON body
and the CORS headers the web frontend relies on. Error bodies follow one shape:

    {"message": "<human readable>", "error_code": "<MACHINE_READABLE>"}
"""

import json
from typing import Any

from memshortener.utils.constants import CORS_HEADERS


def _response(status_code: int, body: dict[str, Any] | None = None, headers: dict[str, str] | None = None) -> dict:
    response = {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json',
            **CORS_HEADERS,
            **(headers or {}),
        },
        'body': json.dumps(body if body is not None else {}),
    }
    return response


def _error_body(base: str, message: str | None, error_code: str | None) -> dict[str, Any]:
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['error_code'] = error_code
    return body


def response_200(body: dict[str, Any]) -> dict:
    return _response(200, body)


def response_201(body: dict[str, Any]) -> dict:
    return _response(201, body)


def response_204() -> dict:
    response = _response(204)
    response['body'] = ''
    return response


def response_301(*, location: str) -> dict:
    return _response(301, headers={'Location': location})


def response_400(message: str | None = None, error_code: str | None = None) -> dict:
    return _response(400, _error_body('Bad Request', message, error_code))


def response_404(message: str | None = None, error_code: str | None = None) -> dict:
    return _response(404, _error_body('Not Found', message, error_code))


def response_500(message: str | None = None, error_code: str | None = None) -> dict:
    return _response(500, _error_body('Internal Server Error', message, error_code))
