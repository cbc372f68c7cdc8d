"""
Typed results for SQS query actions.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class ResponseMetadata:
    """Metadata block carried by every SQS response."""

    request_id: str = ""
    box_usage: float = 0.0


@dataclass
class Attribute:
    """A name/value attribute of a message or queue."""

    name: str = ""
    value: str = ""


@dataclass
class Message:
    """A message returned by ReceiveMessage."""

    message_id: str = ""
    body: str = ""
    md5_of_body: str = ""
    receipt_handle: str = ""
    attributes: List[Attribute] = field(default_factory=list)


@dataclass
class BatchResultErrorEntry:
    """A batch entry that SQS rejected."""

    id: str = ""
    sender_fault: bool = False
    code: str = ""
    message: str = ""


@dataclass
class SendMessageBatchResultEntry:
    id: str = ""
    message_id: str = ""
    md5_of_message_body: str = ""


@dataclass
class DeleteMessageBatchResultEntry:
    id: str = ""


@dataclass
class CreateQueueResponse:
    queue_url: str = ""
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class GetQueueUrlResponse:
    queue_url: str = ""
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class ListQueuesResponse:
    queue_urls: List[str] = field(default_factory=list)
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class DeleteQueueResponse:
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class SendMessageResponse:
    md5_of_message_body: str = ""
    message_id: str = ""
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class ReceiveMessageResponse:
    messages: List[Message] = field(default_factory=list)
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class DeleteMessageResponse:
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class ChangeMessageVisibilityResponse:
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class GetQueueAttributesResponse:
    attributes: List[Attribute] = field(default_factory=list)
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class SendMessageBatchResponse:
    """
    Result of SendMessageBatch.

    A batch can partly fail: accepted entries are in `entries`, rejected
    ones in `failed`. Neither case raises.
    """

    entries: List[SendMessageBatchResultEntry] = field(default_factory=list)
    failed: List[BatchResultErrorEntry] = field(default_factory=list)
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)


@dataclass
class DeleteMessageBatchResponse:
    """Result of DeleteMessageBatch, split like SendMessageBatchResponse."""

    entries: List[DeleteMessageBatchResultEntry] = field(default_factory=list)
    failed: List[BatchResultErrorEntry] = field(default_factory=list)
    response_metadata: ResponseMetadata = field(default_factory=ResponseMetadata)
