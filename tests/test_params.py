"""
Unit tests for request parameter construction.
"""
import datetime
import pytest
from dateutil.parser import parse
from services.params import API_VERSION, add_batch_entries, build


@pytest.mark.params
class TestBuild:
    """Tests for build."""

    @pytest.mark.parametrize("action", [
        "CreateQueue", "GetQueueUrl", "ListQueues", "DeleteQueue", "SendMessage",
        "ReceiveMessage", "DeleteMessage", "ChangeMessageVisibility",
        "GetQueueAttributes", "SendMessageBatch", "DeleteMessageBatch",
    ])
    def test_common_fields_always_present(self, action):
        """Test Action, Version and Timestamp are always seeded."""
        start = datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0)
        params = build(action)
        end = datetime.datetime.now(datetime.timezone.utc)

        assert params["Action"] == action
        assert params["Version"] == API_VERSION == "2011-10-01"

        timestamp = parse(params["Timestamp"])
        assert timestamp.utcoffset() == datetime.timedelta(0)
        assert start <= timestamp <= end

    def test_timestamp_wire_format(self):
        """Test Timestamp uses the RFC 3339 'Z' format with whole seconds."""
        timestamp = build("ListQueues")["Timestamp"]
        datetime.datetime.strptime(timestamp, "%Y-%m-%dT%H:%M:%SZ")

    def test_fields_are_merged_as_strings(self):
        """Test action fields are stringified and merged."""
        params = build("CreateQueue", {"QueueName": "q1", "DefaultVisibilityTimeout": 60})
        assert params["QueueName"] == "q1"
        assert params["DefaultVisibilityTimeout"] == "60"

    def test_no_fields(self):
        """Test build without fields only has the common parameters."""
        assert set(build("DeleteQueue")) == {"Action", "Version", "Timestamp"}


@pytest.mark.params
class TestAddBatchEntries:
    """Tests for add_batch_entries."""

    @pytest.mark.parametrize("count", [1, 2, 10])
    def test_indexed_entries(self, count):
        """Test N entries produce ids msg-1..msg-N and nothing at 0 or N+1."""
        params = build("SendMessageBatch")
        entries = [{"MessageBody": f"body {n}"} for n in range(count)]
        add_batch_entries(params, "SendMessageBatchRequestEntry", entries)

        ids = {k: v for k, v in params.items() if k.endswith(".Id")}
        assert len(ids) == count
        for n in range(1, count + 1):
            assert params[f"SendMessageBatchRequestEntry.{n}.Id"] == f"msg-{n}"
            assert params[f"SendMessageBatchRequestEntry.{n}.MessageBody"] == f"body {n - 1}"
        assert "SendMessageBatchRequestEntry.0.Id" not in params
        assert f"SendMessageBatchRequestEntry.{count + 1}.Id" not in params

    def test_example_parameter_name(self):
        """Test the documented '<EntryKind>.<N>.<Field>' form."""
        params = add_batch_entries({}, "SendMessageBatchRequestEntry", [{"MessageBody": "a"}, {"MessageBody": "b"}])
        assert params["SendMessageBatchRequestEntry.2.MessageBody"] == "b"

    def test_empty_batch(self):
        """Test an empty batch adds no entries and does not raise."""
        params = build("DeleteMessageBatch")
        before = dict(params)
        result = add_batch_entries(params, "DeleteMessageBatchRequestEntry", [])

        assert result is params
        assert params == before
        assert not any(k.startswith("DeleteMessageBatchRequestEntry.") for k in params)

    def test_accepts_generator(self):
        """Test entries may be any iterable."""
        params = add_batch_entries(
            {}, "DeleteMessageBatchRequestEntry",
            ({"ReceiptHandle": handle} for handle in ("h1", "h2"))
        )
        assert params == {
            "DeleteMessageBatchRequestEntry.1.Id": "msg-1",
            "DeleteMessageBatchRequestEntry.1.ReceiptHandle": "h1",
            "DeleteMessageBatchRequestEntry.2.Id": "msg-2",
            "DeleteMessageBatchRequestEntry.2.ReceiptHandle": "h2",
        }
