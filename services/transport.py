"""
HTTP transport for signed SQS query requests.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from urllib.parse import quote, urlencode, urlsplit

import requests
from botocore.credentials import Credentials

from logger_config import get_logger
from utils.exceptions import TransportError
from .regions import Region
from .signer import sign

logger = get_logger(__name__)


@dataclass
class RawResponse:
    """A fully read HTTP response."""

    status_code: int
    status_line: str
    body: bytes


def resolve_target(endpoint: str, queue_url: Optional[str] = None) -> Tuple[str, str, str]:
    """
    Resolve the request URL, host and signing path.

    Service-level calls go to the endpoint with path '/'. Queue-level calls go
    to the queue URL, and the path is the queue URL with the endpoint prefix
    removed.

    Args:
        endpoint: Service endpoint URL (e.g. 'https://sqs.us-east-1.amazonaws.com')
        queue_url: Queue URL, or None/'' for service-level calls

    Returns:
        Tuple of (url, host, path)
    """
    endpoint = endpoint.rstrip("/")
    if not queue_url:
        return endpoint + "/", urlsplit(endpoint).netloc, "/"

    split = urlsplit(queue_url)
    if queue_url.startswith(endpoint + "/"):
        path = queue_url[len(endpoint):]
    else:
        # Queue owned by a different endpoint
        path = split.path or "/"
    return queue_url, split.netloc, path


REDACTED_PARAMS = ("Signature", "SecurityToken")


def redact_url(url: str, params: Dict[str, str]) -> str:
    """Return the request URL with the signature and session token masked, for logging."""
    shown = {key: ("REDACTED" if key in REDACTED_PARAMS else value) for key, value in params.items()}
    return f"{url}?{urlencode(shown, quote_via=quote)}"


class QueryTransport:
    """Signs and issues SQS query requests over HTTP GET."""

    METHOD = "GET"

    def __init__(
        self,
        credentials: Credentials,
        region: Region,
        timeout: Optional[float] = None,
        debug: bool = False
    ) -> None:
        """
        Initialize query transport.

        Args:
            credentials: AWS credentials used for signing
            region: Region holding the service endpoint
            timeout: Optional requests timeout in seconds (None waits forever)
            debug: Log request URLs and dump responses
        """
        self.credentials = credentials
        self.region = region
        self.timeout = timeout
        self.debug = debug

    def execute(self, queue_url: Optional[str], params: Dict[str, str]) -> RawResponse:
        """
        Sign params, send the request and read the whole response.

        The response is closed before returning or raising.

        Args:
            queue_url: Queue URL for queue-level calls, None for service-level calls
            params: Parameter map; signing adds to it

        Returns:
            RawResponse with status code, status line and body

        Raises:
            TransportError: If the HTTP request fails
        """
        url, host, path = resolve_target(self.region.sqs_endpoint, queue_url)
        scheme = urlsplit(url).scheme or "https"

        sign(self.credentials, self.METHOD, path, params, host, scheme)

        query = urlencode({key: [value] for key, value in params.items()}, doseq=True, quote_via=quote)
        full_url = f"{url}?{query}"

        if self.debug:
            logger.info(f'{self.METHOD} {redact_url(url, params)}')

        try:
            response = requests.get(full_url, timeout=self.timeout, stream=True)
        except requests.RequestException as e:
            logger.error(f'SQS {params.get("Action")} request to {url} failed: {str(e)}')
            raise TransportError(f"SQS request failed: {str(e)}", url=url) from e

        try:
            body = response.content
            status_line = f"{response.status_code} {response.reason or ''}".strip()
            if self.debug:
                headers = "\n".join(f"{k}: {v}" for k, v in response.headers.items())
                logger.info(f'DUMP:\n{status_line}\n{headers}\n\n{body.decode("utf-8", "replace")}')
            return RawResponse(response.status_code, status_line, body)
        except requests.RequestException as e:
            logger.error(f'Reading SQS response from {url} failed: {str(e)}')
            raise TransportError(f"SQS response could not be read: {str(e)}", url=url) from e
        finally:
            response.close()
