"""
Custom resource that looks up the private IPs of a VPC interface endpoint.

A load balancer cannot target an interface endpoint directly, so the stack
targets the endpoint's network interface IPs instead. On Create and Update this
Lambda resolves those IPs through EC2 and returns them to CloudFormation as
Data.NetworkInterfaceIps. Delete makes no cloud calls.
"""

from functools import lru_cache
from typing import Dict, Any

from aws_lambda_powertools.utilities.typing import LambdaContext

from common.config import load_settings
from common.constants import (
    RESOLVING_REQUEST_TYPES, REQUEST_TYPE_DELETE, STATUS_SUCCESS, STATUS_FAILED,
    NETWORK_INTERFACE_IPS_KEY, ERROR_MESSAGE_KEY, DEFAULT_TARGET_PORT
)
from customLogging.logger import safeLogger
from handlers.cfn.cfnResponse import CfnResponder
from handlers.network.networkInterfaceService import NetworkInterfaceService
from models.common import ConfigurationError, EventValidationError, TransportError
from models.customResource import parse_lifecycle_event
from models.targets import bind_ip_targets

logger = safeLogger(service_name="GetVpcEndpointIps")

# Load environment variables with error handling
try:
    settings = load_settings()
except ConfigurationError as e:
    logger.exception("Failed loading environment variables")
    raise e


class VpcEndpointIpLookup:
    """Lifecycle dispatcher for the VPC endpoint IP custom resource

    Every call to handle() sends exactly one report to the event's ResponseURL.
    """

    def __init__(self, network_interface_service, responder, expected_target_count=None,
                 target_port=None):
        self.network_interface_service = network_interface_service
        self.responder = responder
        self.expected_target_count = expected_target_count
        self.target_port = target_port or DEFAULT_TARGET_PORT

    @classmethod
    def from_settings(cls, settings, dry_run=False):
        return cls(
            NetworkInterfaceService.from_settings(settings),
            CfnResponder.from_settings(settings, dry_run=dry_run),
            expected_target_count=settings.expectedTargetCount,
            target_port=settings.targetPort
        )

    def resolve(self, event):
        """Resolve the endpoint named by a Create/Update event to its IPs"""
        vpc_endpoint_id = event.require_vpc_endpoint_id()
        logger.info(f"Fetching VPC Endpoint IPs for {vpc_endpoint_id}")

        ips = self.network_interface_service.resolve_endpoint_ips(vpc_endpoint_id)

        if self.expected_target_count is not None:
            bind_ip_targets(ips, self.expected_target_count, self.target_port)

        return vpc_endpoint_id, ips

    def handle(self, raw_event: Dict[str, Any], context: Any) -> Dict[str, Any]:
        """Handle one custom resource lifecycle event

        Args:
            raw_event: CloudFormation custom resource event
            context: Lambda context

        Returns:
            The report that was sent to CloudFormation

        Raises:
            EventValidationError: If the event cannot be answered at all
            TransportError: If the report could not be delivered
            Exception: Any failure of a Create/Update, after it was reported as FAILED
        """
        logger.info("Received event", extra={"event": raw_event})
        self.responder.last_report = None

        # Without a ResponseURL and correlation IDs there is nobody to report to.
        # RequestType and ResourceProperties are validated below so they get a report
        event = parse_lifecycle_event(raw_event)

        try:
            if event.RequestType in RESOLVING_REQUEST_TYPES:
                vpc_endpoint_id, ips = self.resolve(event)
                report = self.responder.send(
                    event, context, STATUS_SUCCESS,
                    physical_resource_id=vpc_endpoint_id,
                    data={NETWORK_INTERFACE_IPS_KEY: ips}
                )
            elif event.RequestType == REQUEST_TYPE_DELETE:
                # The endpoint itself is deleted by its own declaration
                logger.info("Delete requested, nothing to clean up")
                report = self.responder.send(event, context, STATUS_SUCCESS, physical_resource_id=None)
            else:
                raise EventValidationError(f"Unknown request type: {event.RequestType}")

        except TransportError:
            raise
        except Exception as e:
            logger.exception(f"Error processing {event.RequestType} request: {e}")
            try:
                self.responder.send(
                    event, context, STATUS_FAILED,
                    physical_resource_id=event.PhysicalResourceId,
                    data={ERROR_MESSAGE_KEY: str(e)}
                )
            except TransportError as transport_error:
                raise transport_error from e
            raise

        return report.model_dump(exclude_none=True)


@lru_cache(maxsize=None)
def get_vpc_endpoint_ip_lookup():
    """Process-wide lookup instance, built on first use and reused by warm invocations"""
    return VpcEndpointIpLookup.from_settings(settings)


@logger.inject_lambda_context
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Lambda handler for the VPC endpoint IP lookup custom resource"""
    return get_vpc_endpoint_ip_lookup().handle(event, context)
