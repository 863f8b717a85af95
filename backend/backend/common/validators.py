# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Field validators used by the custom resource models."""

import ipaddress
import re
from urllib.parse import urlparse

vpc_endpoint_id_pattern = r'^vpce-[0-9a-zA-Z]+$'
network_interface_id_pattern = r'^eni-[0-9a-zA-Z]+$'


def _check_pattern(pattern, label):
    def check(name, value):
        if re.match(pattern, value):
            return (True, '')
        return (False, f"{name} is not a valid {label}: {value}")
    return check


def _check_ip_address(name, value):
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return (False, f"{name} is not a valid IP address: {value}")
    return (True, '')


def _check_url(name, value):
    parsed = urlparse(value)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        return (False, f"{name} must be an absolute http(s) URL")
    return (True, '')


VALIDATORS = {
    'VPC_ENDPOINT_ID': _check_pattern(vpc_endpoint_id_pattern, 'VPC endpoint ID'),
    'NETWORK_INTERFACE_ID': _check_pattern(network_interface_id_pattern, 'network interface ID'),
    'IP_ADDRESS': _check_ip_address,
    'URL': _check_url,
}


def validate(values):
    """Validate a set of named values

    Args:
        values: Dictionary of field name to {'value': ..., 'validator': ..., 'optional': bool}

    Returns:
        Tuple of (valid, message). message is empty when valid is True.
    """
    for name, field in values.items():
        value = field.get('value')
        optional = field.get('optional', False)

        if value is None or (isinstance(value, str) and not value.strip()):
            if optional:
                continue
            return (False, f"{name} is required")

        if not isinstance(value, str):
            return (False, f"{name} must be a string")

        validator = field.get('validator')
        if validator not in VALIDATORS:
            raise ValueError(f"Unknown validator {validator} for {name}")

        (valid, message) = VALIDATORS[validator](name, value)
        if not valid:
            return (False, message)

    return (True, '')
