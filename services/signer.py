"""
Request signing for the SQS query protocol.

Signature Version 2 is delegated to botocore; this module only adapts the
parameter map to botocore's request type and resolves credentials.
"""
from typing import Dict, Optional

import boto3
from botocore.auth import SigV2Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials

from logger_config import get_logger

logger = get_logger(__name__)


def sign(
    credentials: Credentials,
    method: str,
    path: str,
    params: Dict[str, str],
    host: str,
    scheme: str = "https"
) -> Dict[str, str]:
    """
    Sign a query request, injecting the signature into params.

    Must be called once every other parameter is set. The map must not be
    changed afterwards.

    Args:
        credentials: AWS credentials
        method: HTTP verb
        path: Request path (e.g. '/' or '/123456789012/myqueue')
        params: Parameter map, updated in place
        host: Request host (netloc, including any port)
        scheme: URL scheme of the request

    Returns:
        The same parameter map, now carrying Signature

    Raises:
        botocore.exceptions.NoCredentialsError: If credentials is None
    """
    request = AWSRequest(method=method, url=f"{scheme}://{host}{path}", params=params)
    SigV2Auth(credentials).add_auth(request)
    # AWSRequest keeps a reference to params, so the map is already updated
    params.update(request.params)
    return params


def resolve_credentials(
    access_key: Optional[str] = None,
    secret_key: Optional[str] = None,
    token: Optional[str] = None
) -> Credentials:
    """
    Resolve credentials for signing.

    Explicit keys win; otherwise the boto3 credential chain is used
    (environment, shared config files, instance metadata).

    Raises:
        ValueError: If no credentials can be found
    """
    if access_key and secret_key:
        return Credentials(access_key, secret_key, token)
    if access_key or secret_key:
        raise ValueError("Both an access key and a secret key are required")

    session_credentials = boto3.Session().get_credentials()
    if session_credentials is None:
        raise ValueError(
            "No AWS credentials found; set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY"
        )
    logger.info(f'Using AWS credentials from {session_credentials.method}')
    return session_credentials
