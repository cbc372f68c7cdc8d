"""
Shared exceptions and decorators for the SQS client.
"""
