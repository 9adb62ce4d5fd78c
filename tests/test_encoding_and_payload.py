"""Tests for CV encoding and payload construction."""

import base64

import pytest
from pydantic import ValidationError

from applicators import (
    PLACEHOLDER_CV_BASE64,
    FileEncoder,
    TrackingParameters,
    build_payload,
    encode_file_to_base64,
)


def test_encode_round_trip(tmp_path):
    cv = tmp_path / "testcv.pdf"
    contents = b"%PDF-1.4\n\x00\xff binary cv"
    cv.write_bytes(contents)

    encoded = encode_file_to_base64(cv)

    assert base64.b64decode(encoded) == contents
    assert FileEncoder.decode(encoded) == contents


def test_missing_file_returns_placeholder(tmp_path):
    encoded = encode_file_to_base64(tmp_path / "missing.pdf")

    assert encoded == "VGhpcyBpcyBhIHRlc3QgQ1YgZmlsZQ=="
    assert encoded == PLACEHOLDER_CV_BASE64
    assert base64.b64decode(encoded) == b"This is a test CV file"


def test_missing_file_with_empty_fallback(tmp_path):
    encoder = FileEncoder(fallback="")
    assert encoder.encode(tmp_path / "missing.pdf") == ""


def test_jobbird_payload_body(applicant):
    payload = build_payload(
        applicant,
        "Q1Y=",
        cv_file_name="testcv.pdf",
        set_api_name="jobbird",
        tracking=TrackingParameters(utm_campaign="test-campaign", utm_source="test-source"),
        status="Application",
        is_external_source=False,
    )

    assert payload.to_request_body() == {
        "setApiName": "jobbird",
        "fields": {
            "EMail": {"value": "test@example.com"},
            "FirstName": {"value": "John"},
            "MiddleName": {"value": "M"},
            "LastName": {"value": "Doe"},
            "MobilePhone": {"value": "0611223344"},
            "Motivation": {"value": "I am very interested in this position"},
            "CV": {"fileName": "testcv.pdf", "value": "Q1Y="},
        },
        "utm_campaign": "test-campaign",
        "utm_source": "test-source",
        "status": "Application",
        "isExternalSource": False,
    }


def test_default_set_uses_form_labels(applicant):
    body = build_payload(applicant, "Q1Y=", set_api_name="default").to_request_body()

    assert set(body["fields"]) == {
        "Email", "First Name", "Middle Name", "Last Name", "Mobile", "Motivation", "CV",
    }
    assert "status" not in body
    assert "isExternalSource" not in body


def test_payload_is_immutable(payload):
    with pytest.raises(ValidationError):
        payload.status = "Withdrawn"
