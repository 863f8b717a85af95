"""Shared fixtures for the custom resource tests."""

import json
from unittest.mock import Mock

import pytest

RESPONSE_URL = (
    "https://cloudformation-custom-resource-response-useast1.s3.amazonaws.com/"
    "arn%3Aaws%3Acloudformation%3Aus-east-1%3A123456789012%3Astack/internal-spa/abc"
    "?X-Amz-Algorithm=AWS4-HMAC-SHA256&X-Amz-Signature=deadbeef"
)
STACK_ID = "arn:aws:cloudformation:us-east-1:123456789012:stack/internal-spa/abc"


class DummyContext:
    function_name = "vpce-ip-lookup"
    memory_limit_in_mb = 128
    invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:vpce-ip-lookup"
    aws_request_id = "req-123"
    log_group_name = "/aws/lambda/vpce-ip-lookup"
    log_stream_name = "2024/01/01/[$LATEST]0123456789abcdef"


@pytest.fixture
def lambda_context():
    """Lambda context with the attributes the handler and logger read."""
    return DummyContext()


@pytest.fixture
def make_event():
    """Factory for CloudFormation custom resource events."""
    def _make(request_type="Create", vpc_endpoint_id="vpce-123", **overrides):
        event = {
            "RequestType": request_type,
            "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:vpce-ip-lookup",
            "ResponseURL": RESPONSE_URL,
            "StackId": STACK_ID,
            "RequestId": "a1b2c3d4-0000-0000-0000-000000000000",
            "LogicalResourceId": "VpcEndpointIps",
            "ResourceType": "Custom::VpcEndpointIps",
            "ResourceProperties": {
                "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:vpce-ip-lookup",
            },
        }
        if vpc_endpoint_id is not None:
            event["ResourceProperties"]["VpcEndpointId"] = vpc_endpoint_id
        if request_type in ("Update", "Delete"):
            event["PhysicalResourceId"] = "vpce-123"
        event.update(overrides)
        return event
    return _make


@pytest.fixture
def ec2_client():
    """EC2 client mock for endpoint vpce-123 with interfaces eni-1 and eni-2."""
    client = Mock()
    client.describe_vpc_endpoints.return_value = {
        "VpcEndpoints": [
            {
                "VpcEndpointId": "vpce-123",
                "VpcEndpointType": "Interface",
                "NetworkInterfaceIds": ["eni-1", "eni-2"],
            }
        ]
    }
    client.describe_network_interfaces.return_value = {
        "NetworkInterfaces": [
            {"NetworkInterfaceId": "eni-1", "PrivateIpAddress": "10.0.1.5"},
            {"NetworkInterfaceId": "eni-2", "PrivateIpAddress": "10.0.2.9"},
        ]
    }
    return client


@pytest.fixture
def http():
    """urllib3 PoolManager mock that accepts every PUT."""
    pool = Mock()
    pool.request.return_value = Mock(status=200)
    return pool


@pytest.fixture
def sent_reports(http):
    """Decode every report PUT through the http mock."""
    def _reports():
        return [json.loads(call.kwargs["body"].decode("utf-8")) for call in http.request.call_args_list]
    return _reports
