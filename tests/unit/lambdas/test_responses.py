"""Unit tests for the API Gateway response builders in responses.py."""

import json

import pytest

from slugshortener.lambdas.responses import (
    CORS_HEADERS,
    guarantee_500_response,
    response_200,
    response_302,
    response_400,
    response_404,
    response_500,
)


def test_response_200():
    response = response_200({'shortcode': 'abcDEF12'})

    assert response['statusCode'] == 200
    assert response['headers'] == {'Content-Type': 'application/json', **CORS_HEADERS}
    assert json.loads(response['body']) == {'shortcode': 'abcDEF12'}


def test_response_302():
    response = response_302(location='https://example.com/long/path')

    assert response['statusCode'] == 302
    assert response['headers']['Location'] == 'https://example.com/long/path'
    assert json.loads(response['body']) == {}


@pytest.mark.parametrize(
    'builder, status_code, base',
    [
        (response_400, 400, 'Bad Request'),
        (response_404, 404, 'Not Found'),
        (response_500, 500, 'Internal Server Error'),
    ],
)
def test_error_responses(builder, status_code, base):
    bare = builder()
    detailed = builder(message='something broke', error_code='SOMETHING_BROKE')

    assert bare['statusCode'] == detailed['statusCode'] == status_code
    assert bare['headers'] == {'Content-Type': 'application/json'}
    assert json.loads(bare['body']) == {'message': base}
    assert json.loads(detailed['body']) == {'message': f'{base} (something broke)', 'errorCode': 'SOMETHING_BROKE'}


def test_guarantee_500_response_passes_through():
    @guarantee_500_response
    def handler(event, context):
        return response_200({'ok': True})

    assert handler({}, None)['statusCode'] == 200


def test_guarantee_500_response_catches_errors(caplog):
    @guarantee_500_response
    def handler(event, context):
        raise KeyError('requestContext')

    response = handler({}, None)

    assert response['statusCode'] == 500
    assert json.loads(response['body']) == {'message': 'Internal Server Error', 'errorCode': 'UNKNOWN_INTERNAL_SERVER_ERROR'}
    assert 'Unhandled error in lambda handler' in caplog.text
