"""Unit tests for API Gateway response builders in responses.py"""

import json

import pytest

from memshortener.utils.responses import (
    response_200,
    response_201,
    response_204,
    response_301,
    response_400,
    response_404,
    response_500,
)
from memshortener.utils.constants import CORS_HEADERS


@pytest.mark.parametrize('builder, status_code', [(response_200, 200), (response_201, 201)])
def test_success_responses(builder, status_code):
    response = builder({'key': 'value'})

    assert response['statusCode'] == status_code
    assert response['headers'] == {'Content-Type': 'application/json', **CORS_HEADERS}
    assert json.loads(response['body']) == {'key': 'value'}


def test_response_204_has_empty_body():
    response = response_204()

    assert response['statusCode'] == 204
    assert response['body'] == ''


def test_response_301_sets_location():
    response = response_301(location='https://example.com')

    assert response['statusCode'] == 301
    assert response['headers']['Location'] == 'https://example.com'
    assert response['headers']['Access-Control-Allow-Origin'] == '*'


@pytest.mark.parametrize(
    'builder, status_code, base',
    [
        (response_400, 400, 'Bad Request'),
        (response_404, 404, 'Not Found'),
        (response_500, 500, 'Internal Server Error'),
    ],
)
def test_error_responses(builder, status_code, base):
    response = builder(message='details', error_code='SOME_CODE')

    assert response['statusCode'] == status_code
    assert json.loads(response['body']) == {'message': f'{base} (details)', 'error_code': 'SOME_CODE'}


def test_error_response_without_details():
    assert json.loads(response_404()['body']) == {'message': 'Not Found'}
