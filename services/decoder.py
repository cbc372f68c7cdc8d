"""
XML response decoding for SQS query actions.

Success bodies are decoded into the dataclasses in services.models; error
bodies are decoded into ServiceError.
"""
import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, Type, TypeVar

from lxml import etree

from logger_config import get_logger
from utils.exceptions import DecodeError, ServiceError
from .models import (
    Attribute,
    BatchResultErrorEntry,
    ChangeMessageVisibilityResponse,
    CreateQueueResponse,
    DeleteMessageBatchResponse,
    DeleteMessageBatchResultEntry,
    DeleteMessageResponse,
    DeleteQueueResponse,
    GetQueueAttributesResponse,
    GetQueueUrlResponse,
    ListQueuesResponse,
    Message,
    ReceiveMessageResponse,
    ResponseMetadata,
    SendMessageBatchResponse,
    SendMessageBatchResultEntry,
    SendMessageResponse,
)
from .transport import RawResponse

logger = get_logger(__name__)

T = TypeVar("T")

_Element = Any


def _parse(body: bytes) -> _Element:
    """Parse an XML body and strip namespaces from every element."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    root = etree.fromstring(body, parser=parser)
    for element in root.iter():
        if isinstance(element.tag, str):
            element.tag = etree.QName(element).localname
    return root


def _text(node: _Element, path: str) -> str:
    return node.findtext(path, default="") or ""


def _float(node: _Element, path: str) -> float:
    raw = _text(node, path).strip()
    try:
        return float(raw) if raw else 0.0
    except ValueError:
        logger.warning(f'Ignoring non-numeric {path} value: {raw!r}')
        return 0.0


def _bool(node: _Element, path: str) -> bool:
    return _text(node, path).strip().lower() == "true"


def _metadata(root: _Element) -> ResponseMetadata:
    return ResponseMetadata(
        request_id=_text(root, "ResponseMetadata/RequestId"),
        box_usage=_float(root, "ResponseMetadata/BoxUsage"),
    )


def _attributes(node: _Element, path: str = "Attribute") -> list:
    return [
        Attribute(name=_text(a, "Name"), value=_text(a, "Value"))
        for a in node.findall(path)
    ]


def _errors(root: _Element, result_path: str) -> list:
    return [
        BatchResultErrorEntry(
            id=_text(e, "Id"),
            sender_fault=_bool(e, "SenderFault"),
            code=_text(e, "Code"),
            message=_text(e, "Message"),
        )
        for e in root.findall(f"{result_path}/BatchResultErrorEntry")
    ]


def _message(node: _Element) -> Message:
    return Message(
        message_id=_text(node, "MessageId"),
        body=_text(node, "Body"),
        md5_of_body=_text(node, "MD5OfBody"),
        receipt_handle=_text(node, "ReceiptHandle"),
        attributes=_attributes(node),
    )


_DECODERS: Dict[type, Callable[[_Element], Any]] = {
    CreateQueueResponse: lambda root: CreateQueueResponse(
        queue_url=_text(root, "CreateQueueResult/QueueUrl"),
        response_metadata=_metadata(root),
    ),
    GetQueueUrlResponse: lambda root: GetQueueUrlResponse(
        queue_url=_text(root, "GetQueueUrlResult/QueueUrl"),
        response_metadata=_metadata(root),
    ),
    ListQueuesResponse: lambda root: ListQueuesResponse(
        queue_urls=[q.text or "" for q in root.findall("ListQueuesResult/QueueUrl")],
        response_metadata=_metadata(root),
    ),
    DeleteQueueResponse: lambda root: DeleteQueueResponse(response_metadata=_metadata(root)),
    SendMessageResponse: lambda root: SendMessageResponse(
        md5_of_message_body=_text(root, "SendMessageResult/MD5OfMessageBody"),
        message_id=_text(root, "SendMessageResult/MessageId"),
        response_metadata=_metadata(root),
    ),
    ReceiveMessageResponse: lambda root: ReceiveMessageResponse(
        messages=[_message(m) for m in root.findall("ReceiveMessageResult/Message")],
        response_metadata=_metadata(root),
    ),
    DeleteMessageResponse: lambda root: DeleteMessageResponse(response_metadata=_metadata(root)),
    ChangeMessageVisibilityResponse: lambda root: ChangeMessageVisibilityResponse(
        response_metadata=_metadata(root),
    ),
    GetQueueAttributesResponse: lambda root: GetQueueAttributesResponse(
        attributes=_attributes(root, "GetQueueAttributesResult/Attribute"),
        response_metadata=_metadata(root),
    ),
    SendMessageBatchResponse: lambda root: SendMessageBatchResponse(
        entries=[
            SendMessageBatchResultEntry(
                id=_text(e, "Id"),
                message_id=_text(e, "MessageId"),
                md5_of_message_body=_text(e, "MD5OfMessageBody"),
            )
            for e in root.findall("SendMessageBatchResult/SendMessageBatchResultEntry")
        ],
        failed=_errors(root, "SendMessageBatchResult"),
        response_metadata=_metadata(root),
    ),
    DeleteMessageBatchResponse: lambda root: DeleteMessageBatchResponse(
        entries=[
            DeleteMessageBatchResultEntry(id=_text(e, "Id"))
            for e in root.findall("DeleteMessageBatchResult/DeleteMessageBatchResultEntry")
        ],
        failed=_errors(root, "DeleteMessageBatchResult"),
        response_metadata=_metadata(root),
    ),
}


def decode_response(body: bytes, response_cls: Type[T]) -> T:
    """
    Decode a successful response body into its typed result.

    Args:
        body: Raw XML body
        response_cls: Result dataclass from services.models

    Returns:
        Populated instance of response_cls

    Raises:
        DecodeError: If the body is not well-formed XML
    """
    try:
        root = _parse(body)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise DecodeError(
            f"Malformed XML in {response_cls.__name__}: {str(e)}",
            action=response_cls.__name__,
            body=body,
        ) from e
    return _DECODERS[response_cls](root)


class ErrorShape(enum.Enum):
    """Which form of error element an error envelope used."""

    LIST = "list"
    SINGLE = "single"
    ABSENT = "absent"


@dataclass
class ErrorEnvelope:
    shape: ErrorShape
    code: str = ""
    message: str = ""
    request_id: str = ""


def parse_error_envelope(body: bytes) -> ErrorEnvelope:
    """
    Decode an error body, accepting both envelope forms.

    The first element of an 'Errors/Error' list wins; otherwise the singular
    'Error' element is used.

    Raises:
        etree.XMLSyntaxError: If the body is not well-formed XML
    """
    root = _parse(body)
    request_id = _text(root, "RequestId") or _text(root, "RequestID")

    listed = root.findall("Errors/Error")
    if listed:
        shape, error = ErrorShape.LIST, listed[0]
    elif root.find("Error") is not None:
        shape, error = ErrorShape.SINGLE, root.find("Error")
    elif root.tag == "Error":
        shape, error = ErrorShape.SINGLE, root
    else:
        return ErrorEnvelope(ErrorShape.ABSENT, request_id=request_id)

    return ErrorEnvelope(
        shape,
        code=_text(error, "Code"),
        message=_text(error, "Message"),
        request_id=request_id,
    )


def build_error(raw: RawResponse) -> ServiceError:
    """
    Build the ServiceError for a non-200 response.

    Decoding is best effort: a malformed body still produces an error, carrying
    the status line as its message. The message is never empty.
    """
    try:
        envelope = parse_error_envelope(raw.body)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.warning(f'Could not decode SQS error body ({raw.status_line}): {str(e)}')
        envelope = ErrorEnvelope(ErrorShape.ABSENT)

    return ServiceError(
        envelope.message or raw.status_line,
        status_code=raw.status_code,
        code=envelope.code,
        request_id=envelope.request_id,
    )
