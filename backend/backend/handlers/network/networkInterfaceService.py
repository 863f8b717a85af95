# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""EC2 lookups that resolve a VPC interface endpoint to its private IPs."""

from typing import List

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from common.constants import NETWORK_INTERFACE_NOT_FOUND_CODES, VPC_ENDPOINT_NOT_FOUND_CODES
from customLogging.logger import safeLogger
from models.common import EndpointLookupError, ResolutionError
from models.customResource import EndpointDescriptorModel, NetworkInterfaceDescriptorModel

logger = safeLogger(service_name="NetworkInterfaceService")


class NetworkInterfaceService:
    """Reads VPC endpoint and network interface state from EC2

    The service is read-only and keeps no state between calls; every lookup
    goes to EC2.
    """

    def __init__(self, ec2_client):
        self.ec2_client = ec2_client

    @classmethod
    def from_settings(cls, settings):
        """Build the service with an EC2 client configured from settings

        Args:
            settings: SettingsModel

        Returns:
            NetworkInterfaceService
        """
        # SDK level retries only, with bounded waits so the invocation cannot hang
        client_config = Config(
            retries={
                'max_attempts': settings.ec2MaxAttempts,
                'mode': settings.ec2RetryMode
            },
            connect_timeout=settings.ec2ConnectTimeout,
            read_timeout=settings.ec2ReadTimeout
        )
        if settings.region:
            ec2_client = boto3.client('ec2', region_name=settings.region, config=client_config)
        else:
            ec2_client = boto3.client('ec2', config=client_config)
        return cls(ec2_client)

    def get_network_interface_ids(self, vpc_endpoint_id: str) -> List[str]:
        """Get the network interface IDs attached to a VPC endpoint

        Args:
            vpc_endpoint_id: ID of the interface endpoint

        Returns:
            Network interface IDs in the order EC2 returned them (may be empty)

        Raises:
            EndpointLookupError: If the endpoint is not found exactly once or has no interface list
        """
        logger.info(f"Describing VPC endpoint {vpc_endpoint_id}")

        try:
            response = self.ec2_client.describe_vpc_endpoints(VpcEndpointIds=[vpc_endpoint_id])
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.exception(f"EC2 error describing VPC endpoint: {error_code}")
            if error_code in VPC_ENDPOINT_NOT_FOUND_CODES:
                raise EndpointLookupError(
                    f"Expected to find 1 VPC Endpoint with ID {vpc_endpoint_id}, found 0"
                ) from e
            raise

        endpoints = [EndpointDescriptorModel(**endpoint) for endpoint in response.get('VpcEndpoints') or []]

        if len(endpoints) != 1:
            raise EndpointLookupError(
                f"Expected to find 1 VPC Endpoint with ID {vpc_endpoint_id}, found {len(endpoints)}"
            )

        network_interface_ids = endpoints[0].NetworkInterfaceIds

        if network_interface_ids is None:
            raise EndpointLookupError(
                f"Network interface IDs not returned for VPC Endpoint {vpc_endpoint_id}"
            )

        logger.info(f"Got network interface IDs {', '.join(network_interface_ids)}")
        return network_interface_ids

    def get_network_interface_ips(self, network_interface_ids: List[str]) -> List[str]:
        """Get the private IP of each network interface

        The result is matched to the request by position: the Nth IP belongs to the
        Nth descriptor of the batch response.

        Args:
            network_interface_ids: Network interface IDs to resolve

        Returns:
            Private IP addresses, same length as network_interface_ids

        Raises:
            ResolutionError: If EC2 returns a different number of interfaces or one has no private IP
        """
        # An empty filter would describe every interface in the account
        if not network_interface_ids:
            logger.info("No network interfaces to resolve")
            return []

        try:
            response = self.ec2_client.describe_network_interfaces(
                NetworkInterfaceIds=list(network_interface_ids)
            )
        except ClientError as e:
            error_code = e.response['Error']['Code']
            logger.exception(f"EC2 error describing network interfaces: {error_code}")
            if error_code in NETWORK_INTERFACE_NOT_FOUND_CODES:
                raise ResolutionError(
                    f"Network interfaces {', '.join(network_interface_ids)} could not be described: {error_code}"
                ) from e
            raise

        network_interfaces = [
            NetworkInterfaceDescriptorModel(**network_interface)
            for network_interface in response.get('NetworkInterfaces') or []
        ]

        if len(network_interfaces) != len(network_interface_ids):
            raise ResolutionError(
                f"Expected to get {len(network_interface_ids)} network interfaces, got {len(network_interfaces)}"
            )

        ips = []
        for position, network_interface in enumerate(network_interfaces):
            if not network_interface.PrivateIpAddress:
                interface_id = network_interface.NetworkInterfaceId or network_interface_ids[position]
                raise ResolutionError(f"Network interface {interface_id} did not have a private IP")
            ips.append(network_interface.PrivateIpAddress)

        logger.info(f"Got IPs {', '.join(ips)}")
        return ips

    def resolve_endpoint_ips(self, vpc_endpoint_id: str) -> List[str]:
        """Resolve a VPC endpoint to the private IPs of its network interfaces"""
        network_interface_ids = self.get_network_interface_ids(vpc_endpoint_id)
        return self.get_network_interface_ips(network_interface_ids)
