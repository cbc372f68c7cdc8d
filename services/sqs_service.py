"""
SQS service for queue and message operations over the query protocol.
"""
from typing import Iterable, List, Optional, Type, TypeVar

from botocore.credentials import Credentials

from config import Config, get_config
from logger_config import get_logger
from utils.decorators import sqs_action
from . import params as request_params
from .decoder import build_error, decode_response
from .models import (
    ChangeMessageVisibilityResponse,
    CreateQueueResponse,
    DeleteMessageBatchResponse,
    DeleteMessageResponse,
    DeleteQueueResponse,
    GetQueueAttributesResponse,
    GetQueueUrlResponse,
    ListQueuesResponse,
    Message,
    ReceiveMessageResponse,
    SendMessageBatchResponse,
    SendMessageResponse,
)
from .regions import Region, get_region
from .signer import resolve_credentials
from .transport import QueryTransport

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_VISIBILITY_TIMEOUT = 30


class SQSService:
    """Service for SQS service-level operations (one per region and credentials)."""

    def __init__(
        self,
        credentials: Credentials,
        region: Region,
        debug: bool = False,
        timeout: Optional[float] = None
    ) -> None:
        """
        Initialize SQS service.

        Args:
            credentials: AWS credentials used to sign every request
            region: Region descriptor with the service endpoint
            debug: Log request URLs and dump raw responses
            timeout: Optional HTTP timeout in seconds
        """
        self.credentials = credentials
        self.region = region
        self.debug = debug
        self.timeout = timeout
        self._transport = QueryTransport(credentials, region, timeout=timeout, debug=debug)

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "SQSService":
        """
        Create an SQS service from configuration (defaults to get_config()).

        Raises:
            ValueError: If the region is unknown or no credentials can be found
        """
        config = config or get_config()
        credentials = resolve_credentials(
            config.aws_access_key_id,
            config.aws_secret_access_key,
            config.aws_session_token,
        )
        region = get_region(config.sqs_region, config.sqs_endpoint)
        return cls(credentials, region, debug=config.debug, timeout=config.http_timeout)

    def query(self, queue_url: Optional[str], params: dict, response_cls: Type[T]) -> T:
        """
        Send one signed request and decode its response.

        Args:
            queue_url: Queue URL, or None for service-level actions
            params: Parameter map built by services.params
            response_cls: Result type to decode a 200 response into

        Returns:
            Decoded result

        Raises:
            TransportError: If the HTTP request fails
            ServiceError: If SQS answers with a non-200 status
            DecodeError: If a 200 response body is not valid XML
        """
        raw = self._transport.execute(queue_url, params)
        if raw.status_code != 200:
            raise build_error(raw)
        return decode_response(raw.body, response_cls)

    @sqs_action("CreateQueue")
    def create_queue(
        self,
        queue_name: str,
        default_visibility_timeout: int = DEFAULT_VISIBILITY_TIMEOUT
    ) -> "Queue":
        """
        Create a queue (or return the existing one with the same attributes).

        Args:
            queue_name: Queue name
            default_visibility_timeout: Default visibility timeout in seconds

        Returns:
            Queue handle for the created queue
        """
        params = request_params.build("CreateQueue", {
            "QueueName": queue_name,
            "DefaultVisibilityTimeout": default_visibility_timeout,
        })
        resp = self.query(None, params, CreateQueueResponse)
        logger.info(f'Created SQS queue {queue_name}: {resp.queue_url}')
        return Queue(self, resp.queue_url)

    @sqs_action("GetQueueUrl")
    def get_queue(self, queue_name: str) -> "Queue":
        """Look up an existing queue by name and return its handle."""
        params = request_params.build("GetQueueUrl", {"QueueName": queue_name})
        resp = self.query(None, params, GetQueueUrlResponse)
        return Queue(self, resp.queue_url)

    def queue_from_url(self, queue_url: str) -> "Queue":
        """Return a handle for a known queue URL without contacting SQS."""
        return Queue(self, queue_url)

    @sqs_action("ListQueues")
    def list_queues(self, queue_name_prefix: str = "") -> ListQueuesResponse:
        """List queue URLs, optionally only those whose name starts with a prefix."""
        fields = {}
        if queue_name_prefix:
            fields["QueueNamePrefix"] = queue_name_prefix
        params = request_params.build("ListQueues", fields)
        return self.query(None, params, ListQueuesResponse)


class Queue:
    """
    Handle for one SQS queue.

    Holds a plain reference to the SQSService that signs its requests; the
    service must outlive the handle.
    """

    def __init__(self, sqs: SQSService, url: str) -> None:
        self.sqs = sqs
        self.url = url

    def __repr__(self) -> str:
        return f"Queue(url={self.url!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self.sqs is other.sqs and self.url == other.url

    def __hash__(self) -> int:
        return hash((id(self.sqs), self.url))

    @sqs_action("DeleteQueue")
    def delete(self) -> DeleteQueueResponse:
        params = request_params.build("DeleteQueue")
        return self.sqs.query(self.url, params, DeleteQueueResponse)

    @sqs_action("SendMessage")
    def send_message(self, message_body: str) -> SendMessageResponse:
        params = request_params.build("SendMessage", {"MessageBody": message_body})
        return self.sqs.query(self.url, params, SendMessageResponse)

    @sqs_action("ReceiveMessage")
    def receive_message(
        self,
        max_number_of_messages: int = 1,
        visibility_timeout: int = DEFAULT_VISIBILITY_TIMEOUT
    ) -> ReceiveMessageResponse:
        """
        Receive up to max_number_of_messages messages with all their attributes.

        Args:
            max_number_of_messages: Maximum number of messages to return
            visibility_timeout: Seconds the messages stay hidden from other receivers

        Returns:
            ReceiveMessageResponse (possibly with no messages)
        """
        params = request_params.build("ReceiveMessage", {
            "AttributeName": "All",
            "MaxNumberOfMessages": max_number_of_messages,
            "VisibilityTimeout": visibility_timeout,
        })
        return self.sqs.query(self.url, params, ReceiveMessageResponse)

    @sqs_action("ChangeMessageVisibility")
    def change_message_visibility(
        self,
        message: Message,
        visibility_timeout: int
    ) -> ChangeMessageVisibilityResponse:
        params = request_params.build("ChangeMessageVisibility", {
            "VisibilityTimeout": visibility_timeout,
            "ReceiptHandle": message.receipt_handle,
        })
        return self.sqs.query(self.url, params, ChangeMessageVisibilityResponse)

    @sqs_action("GetQueueAttributes")
    def get_queue_attributes(self, attribute: str = "All") -> GetQueueAttributesResponse:
        params = request_params.build("GetQueueAttributes", {"AttributeName": attribute})
        return self.sqs.query(self.url, params, GetQueueAttributesResponse)

    @sqs_action("DeleteMessage")
    def delete_message(self, message: Message) -> DeleteMessageResponse:
        params = request_params.build("DeleteMessage", {"ReceiptHandle": message.receipt_handle})
        return self.sqs.query(self.url, params, DeleteMessageResponse)

    @sqs_action("SendMessageBatch")
    def send_message_batch(self, message_bodies: Iterable[str]) -> SendMessageBatchResponse:
        """
        Send several messages in one request.

        Entries get the ids msg-1..msg-N in input order. An empty list is sent
        as is; SQS rejects it.
        """
        params = request_params.build("SendMessageBatch")
        request_params.add_batch_entries(
            params,
            "SendMessageBatchRequestEntry",
            ({"MessageBody": body} for body in message_bodies),
        )
        return self.sqs.query(self.url, params, SendMessageBatchResponse)

    @sqs_action("DeleteMessageBatch")
    def delete_message_batch(self, messages: List[Message]) -> DeleteMessageBatchResponse:
        """Delete several received messages in one request (ids msg-1..msg-N)."""
        params = request_params.build("DeleteMessageBatch")
        request_params.add_batch_entries(
            params,
            "DeleteMessageBatchRequestEntry",
            ({"ReceiptHandle": message.receipt_handle} for message in messages),
        )
        return self.sqs.query(self.url, params, DeleteMessageBatchResponse)
