# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Binding of resolved endpoint IPs to load balancer target group slots."""

from typing import List, Optional

from pydantic import Field
from aws_lambda_powertools.utilities.parser import BaseModel

from common.constants import DEFAULT_TARGET_PORT
from common.validators import validate
from customLogging.logger import safeLogger
from models.common import ConfigurationError

logger = safeLogger(service_name="TargetModels")


class IpTargetModel(BaseModel, extra='ignore', frozen=True):
    """One IP target of an ALB/NLB target group"""
    id: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)


def bind_ip_targets(ips: List[str], expected_count: Optional[int] = None,
                    port: int = DEFAULT_TARGET_PORT) -> List[IpTargetModel]:
    """Bind resolved IPs positionally to target group slots

    The order of ips is kept as-is; slot N receives the Nth resolved IP.

    Args:
        ips: Private IPs in the order they were resolved
        expected_count: Number of slots the target group declares, if fixed
        port: Port every target listens on

    Returns:
        List of IpTargetModel, one per IP

    Raises:
        ConfigurationError: If the IP count does not match the slot count, an IP repeats,
            an IP is malformed or the port is out of range
    """
    if expected_count is not None and len(ips) != expected_count:
        message = f"Expected {expected_count} target IPs, resolved {len(ips)}"
        logger.error(message)
        raise ConfigurationError(message)

    if not 1 <= port <= 65535:
        raise ConfigurationError(f"Target port must be between 1 and 65535, got {port}")

    seen = set()
    targets = []
    for ip in ips:
        (valid, message) = validate({
            'target IP': {
                'value': ip,
                'validator': 'IP_ADDRESS'
            }
        })
        if not valid:
            raise ConfigurationError(message)
        if ip in seen:
            # Target groups reject duplicate targets
            raise ConfigurationError(f"Duplicate target IP {ip}")
        seen.add(ip)
        targets.append(IpTargetModel(id=ip, port=port))

    return targets
