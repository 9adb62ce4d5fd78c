"""Tests for the client-credentials token exchange."""

import pytest
import requests

from applicators import ConfigurationError, TokenAcquirer, TokenAcquisitionError

BASE_URL = "https://example.my.salesforce.com"


def test_acquire_posts_client_credentials(session, make_response):
    session.post.return_value = make_response(200, {"access_token": "abc123"})
    acquirer = TokenAcquirer(BASE_URL + "/", "client", "secret", session=session)

    assert acquirer.acquire() == "abc123"

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == f"{BASE_URL}/services/oauth2/token"
    assert kwargs["params"] == {
        "grant_type": "client_credentials",
        "client_id": "client",
        "client_secret": "secret",
    }


def test_get_token_fetches_once_per_run(session, make_response):
    session.post.return_value = make_response(200, {"access_token": "abc123"})
    acquirer = TokenAcquirer(BASE_URL, "client", "secret", session=session)

    assert acquirer.get_token() == "abc123"
    assert acquirer.get_token() == "abc123"
    assert session.post.call_count == 1


def test_rejected_credentials_are_fatal(session, make_response):
    session.post.return_value = make_response(400, {"error": "invalid_client"})
    acquirer = TokenAcquirer(BASE_URL, "client", "wrong", session=session)

    with pytest.raises(TokenAcquisitionError) as exc_info:
        acquirer.acquire()

    assert exc_info.value.status == 400
    assert exc_info.value.body == {"error": "invalid_client"}
    assert session.post.call_count == 1


def test_network_error_is_fatal(session):
    session.post.side_effect = requests.ConnectionError("connection refused")
    acquirer = TokenAcquirer(BASE_URL, "client", "secret", session=session)

    with pytest.raises(TokenAcquisitionError, match="connection refused"):
        acquirer.get_token()


def test_missing_access_token(session, make_response):
    session.post.return_value = make_response(200, {"token_type": "Bearer"})
    acquirer = TokenAcquirer(BASE_URL, "client", "secret", session=session)

    with pytest.raises(TokenAcquisitionError, match="access_token"):
        acquirer.acquire()


def test_non_json_token_response(session, make_response):
    session.post.return_value = make_response(200, text="<html>maintenance</html>")
    acquirer = TokenAcquirer(BASE_URL, "client", "secret", session=session)

    with pytest.raises(TokenAcquisitionError):
        acquirer.acquire()


def test_missing_credentials_rejected_up_front(session):
    with pytest.raises(ConfigurationError):
        TokenAcquirer(BASE_URL, "", "secret", session=session)
    session.post.assert_not_called()
