# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Error types raised while reconciling the VPC endpoint IP custom resource."""


class CustomResourceError(Exception):
    """Base class for errors raised by the custom resource"""
    pass


class EventValidationError(CustomResourceError, ValueError):
    """The lifecycle event is malformed or incomplete"""
    pass


class EndpointLookupError(CustomResourceError, LookupError):
    """The VPC endpoint was not found exactly once or has no network interface list"""
    pass


class ResolutionError(CustomResourceError):
    """The endpoint's network interfaces could not be resolved to private IPs"""
    pass


class TransportError(CustomResourceError):
    """The callback report could not be delivered to CloudFormation"""
    pass


class ConfigurationError(CustomResourceError):
    """Environment configuration or target binding does not match what was resolved"""
    pass
