"""Shared fixtures for VpceLookupCLI tests."""

import json
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def mock_ec2_client():
    """Patch boto3 so every EC2 client is a mock for endpoint vpce-123."""
    client = Mock()
    client.describe_vpc_endpoints.return_value = {
        'VpcEndpoints': [{'VpcEndpointId': 'vpce-123', 'NetworkInterfaceIds': ['eni-1', 'eni-2']}]
    }
    client.describe_network_interfaces.return_value = {
        'NetworkInterfaces': [
            {'NetworkInterfaceId': 'eni-1', 'PrivateIpAddress': '10.0.1.5'},
            {'NetworkInterfaceId': 'eni-2', 'PrivateIpAddress': '10.0.2.9'},
        ]
    }
    with patch('handlers.network.networkInterfaceService.boto3.client', return_value=client) as mock_client:
        client.factory = mock_client
        yield client


@pytest.fixture
def event_file(tmp_path):
    """Write a custom resource event to a temporary file and return its path."""
    def _write(request_type='Create', vpc_endpoint_id='vpce-123', **overrides):
        event = {
            'RequestType': request_type,
            'ResponseURL': 'https://cloudformation-custom-resource-response-useast1.s3.amazonaws.com/abc?sig=1',
            'StackId': 'arn:aws:cloudformation:us-east-1:123456789012:stack/internal-spa/abc',
            'RequestId': 'request-1',
            'LogicalResourceId': 'VpcEndpointIps',
            'ResourceType': 'Custom::VpcEndpointIps',
            'ResourceProperties': {},
        }
        if vpc_endpoint_id is not None:
            event['ResourceProperties']['VpcEndpointId'] = vpc_endpoint_id
        event.update(overrides)
        path = tmp_path / f'{request_type.lower()}-event.json'
        path.write_text(json.dumps(event))
        return str(path)
    return _write
