# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Environment configuration for the VPC endpoint IP lookup custom resource."""

import os
from typing import Literal, Optional

from pydantic import Field
from aws_lambda_powertools.utilities.parser import BaseModel, ValidationError

from common.constants import DEFAULT_TARGET_PORT
from models.common import ConfigurationError

# Environment variable name -> settings field
ENVIRONMENT_VARIABLES = {
    'AWS_REGION': 'region',
    'EC2_MAX_ATTEMPTS': 'ec2MaxAttempts',
    'EC2_RETRY_MODE': 'ec2RetryMode',
    'EC2_CONNECT_TIMEOUT': 'ec2ConnectTimeout',
    'EC2_READ_TIMEOUT': 'ec2ReadTimeout',
    'CALLBACK_CONNECT_TIMEOUT': 'callbackConnectTimeout',
    'CALLBACK_READ_TIMEOUT': 'callbackReadTimeout',
    'EXPECTED_TARGET_COUNT': 'expectedTargetCount',
    'TARGET_PORT': 'targetPort',
}


class SettingsModel(BaseModel, extra='ignore', frozen=True):
    """Runtime settings, read once per process"""
    region: Optional[str] = None
    ec2MaxAttempts: int = Field(default=3, ge=1, le=10)
    ec2RetryMode: Literal['legacy', 'standard', 'adaptive'] = 'standard'
    ec2ConnectTimeout: float = Field(default=5, gt=0)
    ec2ReadTimeout: float = Field(default=10, gt=0)
    callbackConnectTimeout: float = Field(default=5, gt=0)
    callbackReadTimeout: float = Field(default=15, gt=0)
    expectedTargetCount: Optional[int] = Field(default=None, ge=0)
    targetPort: int = Field(default=DEFAULT_TARGET_PORT, ge=1, le=65535)


def load_settings(environ=None):
    """Load settings from environment variables

    Args:
        environ: Mapping to read from, defaults to os.environ

    Returns:
        SettingsModel

    Raises:
        ConfigurationError: If any variable holds a value that cannot be used
    """
    if environ is None:
        environ = os.environ

    values = {}
    for variable, field in ENVIRONMENT_VARIABLES.items():
        value = environ.get(variable)
        # Empty variables are treated as unset
        if value is not None and value.strip() != '':
            values[field] = value.strip()

    try:
        return SettingsModel(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid environment configuration: {e}") from e
