"""
OAuth2 client-credentials token acquisition for the Mysolution API.
"""
from typing import Optional
from loguru import logger
import requests

from .exceptions import ConfigurationError, TokenAcquisitionError

TOKEN_PATH = "/services/oauth2/token"


class TokenAcquirer:
    """Exchanges a client id and secret for a bearer token.

    The first token obtained is kept for the lifetime of the instance; there is
    no refresh. Any failure is fatal and raised as TokenAcquisitionError.
    """

    def __init__(self, base_url: str, client_id: str, client_secret: str,
                 session: Optional[requests.Session] = None, timeout: int = 30):
        if not client_id or not client_secret:
            raise ConfigurationError("Mysolution API credentials are not set")
        self.base_url = base_url.rstrip('/')
        self.client_id = client_id
        self.client_secret = client_secret
        self.session = session or requests.Session()
        self.timeout = timeout
        self._token: Optional[str] = None

    @property
    def token_url(self) -> str:
        return f"{self.base_url}{TOKEN_PATH}"

    def get_token(self) -> str:
        """Return the run's token, acquiring it on first use."""
        if self._token is None:
            self._token = self.acquire()
        else:
            logger.debug("Using existing Mysolution API token")
        return self._token

    def acquire(self) -> str:
        """Perform the client-credentials exchange."""
        params = {
            'grant_type': 'client_credentials',
            'client_id': self.client_id,
            'client_secret': self.client_secret,
        }

        logger.info(f"Requesting Mysolution API token from {self.token_url}")
        try:
            response = self.session.post(self.token_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Error getting token: {e}")
            raise TokenAcquisitionError(f"Token request failed: {e}") from e

        if not response.ok:
            body = _response_body(response)
            logger.error(f"Error getting token: HTTP {response.status_code} {body}")
            raise TokenAcquisitionError("Token request was rejected", status=response.status_code, body=body)

        try:
            data = response.json()
        except ValueError as e:
            raise TokenAcquisitionError("Token response is not JSON",
                                        status=response.status_code, body=response.text) from e

        token = data.get('access_token') if isinstance(data, dict) else None
        if not token:
            raise TokenAcquisitionError("Token response has no access_token",
                                        status=response.status_code, body=data)

        logger.info("Token acquired successfully")
        return token


def _response_body(response: requests.Response):
    """Decoded JSON body if there is one, otherwise the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text
