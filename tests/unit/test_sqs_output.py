import json

from aiobotocore.session import get_session
from aiomoto import mock_aws

from mysql_slowlog_report.domain import FieldStats, Metric, QuerySummary, Report
from mysql_slowlog_report.output import ReportOutput
from mysql_slowlog_report.output.sqs import SqsReportOutput


def make_report() -> Report:
    summary = QuerySummary(
        fingerprint="SELECT * FROM orders WHERE id = N;",
        count=2,
        stats={
            Metric.QUERY_SECONDS: FieldStats(1.0, 1.5, 2.0, 2.0, 3.0),
            Metric.LOCK_TIME: FieldStats(0.0, 0.0, 0, 0.0, 0.0),
        },
        query_example="SELECT * FROM orders WHERE id = 1;",
        is_constant=False,
        local=1,
        databases=("shop",),
        hosts=("web1",),
        queries=("SELECT * FROM orders WHERE id = 1;", "SELECT * FROM orders WHERE id = 2;"),
        score=12.5,
    )
    return Report(
        entries=(summary,),
        fingerprint_count=3,
        event_count=5,
        first_seen="24/01/05 09:15:02",
        last_seen="24/01/05 10:02:44",
    )


def test_sqs_output_implements_protocol():
    output = SqsReportOutput(queue_url="https://sqs.us-east-1.amazonaws.com/123456789/test")
    assert isinstance(output, ReportOutput)


def test_sqs_output_name_property():
    output = SqsReportOutput(queue_url="https://sqs.us-east-1.amazonaws.com/123456789/test")
    assert output.name == "sqs"


@mock_aws
async def test_sqs_output_send_to_queue():
    session = get_session()
    async with session.create_client("sqs", region_name="us-east-1") as client:
        response = await client.create_queue(QueueName="test-queue")
        queue_url = response["QueueUrl"]

        output = SqsReportOutput(queue_url=queue_url, region="us-east-1")
        await output.send(make_report())

        messages = await client.receive_message(QueueUrl=queue_url)
        assert "Messages" in messages
        assert len(messages["Messages"]) == 1

        body = json.loads(messages["Messages"][0]["Body"])
        assert body["fingerprint_count"] == 3
        assert body["event_count"] == 5
        assert body["is_empty"] is False
        assert len(body["entries"]) == 1


@mock_aws
async def test_sqs_output_json_includes_statistics():
    session = get_session()
    async with session.create_client("sqs", region_name="us-east-1") as client:
        response = await client.create_queue(QueueName="test-queue")
        queue_url = response["QueueUrl"]

        output = SqsReportOutput(queue_url=queue_url, region="us-east-1")
        await output.send(make_report())

        messages = await client.receive_message(QueueUrl=queue_url)
        body = json.loads(messages["Messages"][0]["Body"])
        entry = body["entries"][0]

        assert entry["score"] == 12.5
        assert entry["hosts"] == ["web1"]
        assert entry["stats"]["Query_seconds"] == {
            "min": 1.0,
            "median": 1.5,
            "p95": 2.0,
            "max": 2.0,
            "total": 3.0,
        }
        assert entry["stats"]["Lock_time"] == {"value": 0.0}
        assert entry["local"] == 1
        assert entry["databases"] == ["shop"]
        assert body["first_seen"] == "24/01/05 09:15:02"


@mock_aws
async def test_sqs_output_empty_report():
    session = get_session()
    async with session.create_client("sqs", region_name="us-east-1") as client:
        response = await client.create_queue(QueueName="test-queue")
        queue_url = response["QueueUrl"]

        output = SqsReportOutput(queue_url=queue_url, region="us-east-1")
        await output.send(Report())

        messages = await client.receive_message(QueueUrl=queue_url)
        body = json.loads(messages["Messages"][0]["Body"])

        assert body["is_empty"] is True
        assert body["entries"] == []
        assert body["first_seen"] is None


@mock_aws
async def test_sqs_output_lists_distinct_queries():
    session = get_session()
    async with session.create_client("sqs", region_name="us-east-1") as client:
        response = await client.create_queue(QueueName="test-queue")
        queue_url = response["QueueUrl"]

        output = SqsReportOutput(queue_url=queue_url, region="us-east-1")
        await output.send(make_report())

        messages = await client.receive_message(QueueUrl=queue_url)
        body = json.loads(messages["Messages"][0]["Body"])
        entry = body["entries"][0]

        assert body["sort_field"] == "score"
        assert entry["fingerprint"] == "SELECT * FROM orders WHERE id = N;"
        assert entry["is_constant"] is False
        assert entry["queries"] == (
            "SELECT * FROM orders WHERE id = 1;\nSELECT * FROM orders WHERE id = 2;"
        )
        assert "query_example" not in entry
