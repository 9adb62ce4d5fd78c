"""
Job application submission to the Mysolution REST API.
"""
import json
from typing import List, Dict, Any, Optional
from datetime import datetime
from pathlib import Path
from loguru import logger
import requests

from .payload import ApplicationPayload

APPLY_PATH = "/services/apexrest/msf/api/job/Apply"
CONFIGURATION_PATH = "/services/apexrest/msf/api/base/GetJobApplicationConfiguration"


def error_record(status: Optional[int], message: Any) -> Dict[str, Any]:
    """Result returned in place of a remote body when a call fails."""
    return {'error': True, 'status': status, 'message': message}


def is_error(result: Any) -> bool:
    return isinstance(result, dict) and result.get('error') is True


class ApplicationSubmitter:
    """Posts application payloads with a bearer token.

    Failures never propagate out of this class: transport errors and non-2xx
    responses come back as error records built by ``error_record``.
    """

    def __init__(self, base_url: str, token: str,
                 session: Optional[requests.Session] = None,
                 timeout: int = 30,
                 log_file: Optional[str] = None):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout
        self.log_file = Path(log_file) if log_file else None
        self.submission_log: List[Dict[str, Any]] = []

    @property
    def headers(self) -> Dict[str, str]:
        return {
            'Authorization': f'Bearer {self.token}',
            'Content-Type': 'application/json',
        }

    def submit(self, job_id: str, payload: ApplicationPayload, domain: Optional[str] = None) -> Any:
        """Submit one application. ``domain`` is only sent when non-empty."""
        params = {'id': job_id}
        if domain:
            params['domain'] = domain

        logger.info(f"Submitting application for job {job_id} (domain: {domain or 'EMPTY'})")
        result = self._request('POST', APPLY_PATH, params=params, json=payload.to_request_body())

        if is_error(result):
            logger.error(f"Error submitting application: {result['message']}")
        else:
            logger.info(f"Application submitted for job {job_id}")

        self._log_submission(job_id, domain, result)
        return result

    def get_application_configuration(self, set_api_name: str = "default") -> Any:
        """Fetch the form configuration for an application set."""
        params = {'setApiName': set_api_name or 'default'}
        result = self._request('GET', CONFIGURATION_PATH, params=params)
        if is_error(result):
            logger.error(f"Error getting job application configuration for {set_api_name}: {result['message']}")
        return result

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, headers=self.headers,
                                            timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            return error_record(None, str(e))

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.ok:
            return error_record(response.status_code, body if body is not None else response.text)

        if body is not None:
            return body
        if response.text:
            return response.text
        return error_record(response.status_code, "Empty response body")

    def _log_submission(self, job_id: str, domain: Optional[str], result: Any):
        """Log submission result."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'job_id': job_id,
            'domain': domain or '',
            'error': is_error(result),
            'status': result.get('status') if is_error(result) else None,
            'result': result,
        }

        self.submission_log.append(log_entry)

        if not self.log_file:
            return

        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(json.dumps(log_entry, default=str) + '\n')
        except OSError as e:
            logger.warning(f"Could not write submission log {self.log_file}: {e}")

    def get_submission_log(self) -> List[Dict[str, Any]]:
        """Get submission log."""
        return self.submission_log
