# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""CloudFormation custom resource models for the VPC endpoint IP lookup."""

import json
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, field_validator
from aws_lambda_powertools.utilities.parser import BaseModel, ValidationError, parse

from common.constants import REASON_TEMPLATE, UNKNOWN_LOG_LOCATION
from common.validators import validate
from customLogging.logger import safeLogger
from models.common import EventValidationError

logger = safeLogger(service_name="CustomResourceModels")

######################## Lifecycle Event Models ##########################

class CustomResourcePropertiesModel(BaseModel, extra='ignore', frozen=True):
    """ResourceProperties bag of the lookup custom resource"""
    ServiceToken: Optional[str] = None
    VpcEndpointId: Optional[str] = None

    @field_validator('VpcEndpointId', mode='before')
    @classmethod
    def strip_vpc_endpoint_id(cls, v):
        """Strip surrounding whitespace and treat blank IDs as missing"""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class LifecycleEventModel(BaseModel, extra='ignore', frozen=True):
    """Inbound CloudFormation custom resource request

    Only the callback URL and correlation IDs are checked when parsing, since
    without them no report can be sent. RequestType and ResourceProperties are
    kept raw and validated while handling the request, so a malformed value is
    still answered.
    """
    ResponseURL: str = Field(min_length=1)
    StackId: str = Field(min_length=1)
    RequestId: str = Field(min_length=1)
    LogicalResourceId: str = Field(min_length=1)
    RequestType: Any = None
    ServiceToken: Optional[str] = None
    PhysicalResourceId: Optional[str] = None
    ResourceType: Optional[str] = None
    ResourceProperties: Any = None
    OldResourceProperties: Any = None

    @field_validator('ResponseURL')
    @classmethod
    def validate_response_url(cls, v):
        (valid, message) = validate({
            'ResponseURL': {
                'value': v,
                'validator': 'URL'
            }
        })
        if not valid:
            raise ValueError(message)
        return v

    @field_validator('ServiceToken', 'PhysicalResourceId', 'ResourceType', mode='before')
    @classmethod
    def drop_non_string(cls, v):
        """Echo-only fields of the wrong type are treated as absent"""
        if v is not None and not isinstance(v, str):
            logger.warning(f"Ignoring non-string value of type {type(v).__name__}")
            return None
        return v

    def properties(self):
        """Validate and return the ResourceProperties bag

        Raises:
            EventValidationError: If ResourceProperties is not an object or holds mistyped fields
        """
        properties = self.ResourceProperties
        if properties is None:
            properties = {}
        if not isinstance(properties, dict):
            message = f"ResourceProperties must be an object, got {type(properties).__name__}"
            logger.error(message)
            raise EventValidationError(message)

        try:
            return parse(event=properties, model=CustomResourcePropertiesModel)
        except ValidationError as v:
            logger.error(f"Invalid ResourceProperties: {v}")
            raise EventValidationError(f"Invalid ResourceProperties: {v}") from v

    def require_vpc_endpoint_id(self):
        """Return the target VPC endpoint ID

        Raises:
            EventValidationError: If the ID is missing, mistyped or malformed
        """
        vpc_endpoint_id = self.properties().VpcEndpointId
        (valid, message) = validate({
            'ResourceProperties.VpcEndpointId': {
                'value': vpc_endpoint_id,
                'validator': 'VPC_ENDPOINT_ID'
            }
        })
        if not valid:
            logger.error(message)
            raise EventValidationError(message)
        return vpc_endpoint_id


def parse_lifecycle_event(event):
    """Parse a raw custom resource event into a LifecycleEventModel

    Args:
        event: Event dictionary (or JSON string) received by the Lambda

    Returns:
        LifecycleEventModel

    Raises:
        EventValidationError: If the callback URL or a correlation field is missing
    """
    if isinstance(event, str):
        try:
            event = json.loads(event)
        except json.JSONDecodeError as e:
            raise EventValidationError(f"Event is not valid JSON: {e}") from e

    if not isinstance(event, dict):
        raise EventValidationError(f"Event must be a JSON object, got {type(event).__name__}")

    try:
        return parse(event=event, model=LifecycleEventModel)
    except ValidationError as v:
        raise EventValidationError(f"Invalid custom resource event: {v}") from v


######################## EC2 Descriptor Models ##########################

class EndpointDescriptorModel(BaseModel, extra='ignore'):
    """Subset of an EC2 VpcEndpoint description"""
    VpcEndpointId: Optional[str] = None
    NetworkInterfaceIds: Optional[List[str]] = None


class NetworkInterfaceDescriptorModel(BaseModel, extra='ignore'):
    """Subset of an EC2 NetworkInterface description"""
    NetworkInterfaceId: Optional[str] = None
    PrivateIpAddress: Optional[str] = None


######################## Callback Report Models ##########################

class LogLocationModel(BaseModel, extra='ignore', frozen=True):
    """Where the invocation's diagnostic logs can be found"""
    logGroupName: str = UNKNOWN_LOG_LOCATION
    logStreamName: str = UNKNOWN_LOG_LOCATION

    @classmethod
    def from_context(cls, context):
        return cls(
            logGroupName=getattr(context, 'log_group_name', None) or UNKNOWN_LOG_LOCATION,
            logStreamName=getattr(context, 'log_stream_name', None) or UNKNOWN_LOG_LOCATION
        )

    def reason(self):
        return REASON_TEMPLATE.format(
            log_group_name=self.logGroupName,
            log_stream_name=self.logStreamName
        )


class CallbackReportModel(BaseModel, extra='ignore', frozen=True):
    """Outbound report PUT to the event's ResponseURL"""
    Status: Literal['SUCCESS', 'FAILED']
    StackId: str
    RequestId: str
    LogicalResourceId: str
    PhysicalResourceId: str
    Reason: str
    Data: Optional[Dict[str, Any]] = None

    def to_body(self):
        """Serialize the report as the UTF-8 JSON body CloudFormation expects"""
        return json.dumps(self.model_dump(exclude_none=True), ensure_ascii=False).encode('utf-8')
