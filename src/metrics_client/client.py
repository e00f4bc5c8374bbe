"""HTTP client for the traffic metrics endpoint (read-only)."""

import requests
import urllib3
from typing import Optional

from .exceptions import *
from .models import Snapshot, SnapshotFormatError
from ..utils.logger import get_logger, update_logger_endpoint_context
from config.settings import settings

logger = get_logger(__name__)


class MetricsClient:
    """Fetches traffic snapshots from the metrics endpoint with a plain GET."""

    def __init__(self, endpoint: str = None, timeout: Optional[float] = None, verify_ssl: bool = None):
        """
        Initialize the metrics client.

        Args:
            endpoint: URL returning the JSON snapshot (defaults to settings)
            timeout: Request timeout in seconds; None leaves the transport default
            verify_ssl: Verify TLS certificates for https endpoints (defaults to settings)
        """
        self.endpoint = endpoint or settings.endpoint
        self.timeout = timeout if timeout is not None else settings.timeout
        self.verify_ssl = verify_ssl if verify_ssl is not None else settings.verify_ssl

        if not self.endpoint:
            raise ConfigurationError("Metrics endpoint must be specified")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"Request timeout must be positive, got {self.timeout}")

        update_logger_endpoint_context(logger, self.endpoint)

        # Disable SSL warnings if verification is disabled
        if not self.verify_ssl:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
            logger.warning("SSL verification is disabled - this is not recommended for production use")

    def _make_request(self) -> requests.Response:
        """GET the endpoint once. No retries: the next poll cycle is the retry."""
        try:
            logger.debug(f"Requesting {self.endpoint} (verify_ssl={self.verify_ssl}, timeout={self.timeout})")
            response = requests.get(
                self.endpoint,
                verify=self.verify_ssl,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Failed to reach metrics endpoint: {e}") from e

        if response.status_code != 200:
            raise ProtocolError(
                f"Metrics endpoint returned HTTP {response.status_code} {response.reason or ''}".rstrip(),
                status_code=response.status_code,
                response_text=response.text
            )
        return response

    def _parse_json_response(self, response: requests.Response) -> Snapshot:
        """Decode the body and validate the snapshot shape."""
        try:
            payload = response.json()
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        try:
            return Snapshot.from_dict(payload)
        except SnapshotFormatError as e:
            raise DecodeError(f"Response is not a traffic snapshot: {e}") from e

    def fetch_snapshot(self) -> Snapshot:
        """Fetch and decode the current traffic snapshot.

        Raises:
            TransportError: the endpoint could not be reached
            ProtocolError: the endpoint answered with a non-200 status
            DecodeError: the body is not a JSON traffic snapshot
        """
        response = self._make_request()
        snapshot = self._parse_json_response(response)
        logger.debug(f"Fetched snapshot with {len(snapshot)} clients")
        return snapshot
