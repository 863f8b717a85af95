# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Structured logger that keeps pre-signed callback URLs out of the logs."""

import re

from aws_lambda_powertools import Logger
from aws_lambda_powertools.logging.formatter import LambdaPowertoolsFormatter

MASK = '***'

# The query string of a pre-signed S3 URL carries the signature
_presigned_url_pattern = re.compile(r'(https?://[^\s"\'?]+)\?[^\s"\']*')


def mask_sensitive_data(value):
    """Return a copy of value with URL query strings replaced by a mask

    Strings, dicts, lists and tuples are walked recursively. Other values are returned unchanged.
    """
    if isinstance(value, str):
        return _presigned_url_pattern.sub(r'\1?' + MASK, value)
    if isinstance(value, dict):
        return {key: mask_sensitive_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [mask_sensitive_data(item) for item in value]
    return value


class SafeFormatter(LambdaPowertoolsFormatter):
    """Powertools JSON formatter that masks sensitive values before serializing"""

    def serialize(self, log):
        return super().serialize(log=mask_sensitive_data(log))


def safeLogger(service_name=None, **kwargs):
    """Create a powertools Logger for a service with sensitive data masking

    Args:
        service_name: Service name reported on every log record
        **kwargs: Passed through to aws_lambda_powertools.Logger

    Returns:
        aws_lambda_powertools.Logger
    """
    kwargs.setdefault('logger_formatter', SafeFormatter())
    return Logger(service=service_name, **kwargs)
