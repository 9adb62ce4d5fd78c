"""Shared fixtures: a fake requests session that records calls."""

from unittest.mock import Mock

import pytest
import requests

from applicators import Applicant, build_payload


def make_response(status_code=200, json_body=None, text=""):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
        response.text = text
    else:
        response.json.return_value = json_body
        response.text = text or str(json_body)
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def applicant():
    return Applicant(
        email='test@example.com',
        first_name='John',
        middle_name='M',
        last_name='Doe',
        mobile_phone='0611223344',
        motivation='I am very interested in this position',
    )


@pytest.fixture
def payload(applicant):
    return build_payload(applicant, "Q1YgY29udGVudHM=", cv_file_name="testcv.pdf")


@pytest.fixture(name="make_response")
def make_response_fixture():
    return make_response
