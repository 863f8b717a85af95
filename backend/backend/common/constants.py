# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Constants shared by the VPC endpoint IP lookup custom resource."""

# CloudFormation custom resource request types
REQUEST_TYPE_CREATE = 'Create'
REQUEST_TYPE_UPDATE = 'Update'
REQUEST_TYPE_DELETE = 'Delete'
ALLOWED_REQUEST_TYPES = [REQUEST_TYPE_CREATE, REQUEST_TYPE_UPDATE, REQUEST_TYPE_DELETE]
RESOLVING_REQUEST_TYPES = [REQUEST_TYPE_CREATE, REQUEST_TYPE_UPDATE]

# Callback report status values
STATUS_SUCCESS = 'SUCCESS'
STATUS_FAILED = 'FAILED'

# Keys of the callback report Data object
NETWORK_INTERFACE_IPS_KEY = 'NetworkInterfaceIps'
ERROR_MESSAGE_KEY = 'message'

REASON_TEMPLATE = 'See the details in CloudWatch Log Group: {log_group_name} Log Stream: {log_stream_name}'
UNKNOWN_LOG_LOCATION = 'unknown'

# EC2 error codes that mean the requested object does not exist
VPC_ENDPOINT_NOT_FOUND_CODES = ['InvalidVpcEndpointId.NotFound', 'InvalidVpcEndpointId.Malformed']
NETWORK_INTERFACE_NOT_FOUND_CODES = ['InvalidNetworkInterfaceID.NotFound', 'InvalidNetworkInterfaceID.Malformed']

DEFAULT_TARGET_PORT = 443
