"""
Service layer for the SQS query protocol.

This package builds, signs and sends SQS query requests and decodes
their XML responses into typed results.
"""
from .models import Message
from .regions import Region, get_region
from .sqs_service import Queue, SQSService

__all__ = ["Message", "Queue", "Region", "SQSService", "get_region"]
