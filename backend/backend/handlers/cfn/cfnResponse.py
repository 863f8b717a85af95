# Copyright 2024 Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0

"""Delivery of custom resource reports to the CloudFormation response URL."""

import urllib3

from customLogging.logger import safeLogger
from models.common import TransportError
from models.customResource import CallbackReportModel, LogLocationModel

logger = safeLogger(service_name="CfnResponse")


def build_callback_report(event, context, status, physical_resource_id=None, data=None):
    """Build the report for a lifecycle event

    Args:
        event: LifecycleEventModel being answered
        context: Lambda context, used for the log location
        status: 'SUCCESS' or 'FAILED'
        physical_resource_id: Resource ID to report; the log stream name is used when unset
        data: Optional Data object

    Returns:
        CallbackReportModel
    """
    log_location = LogLocationModel.from_context(context)
    return CallbackReportModel(
        Status=status,
        StackId=event.StackId,
        RequestId=event.RequestId,
        LogicalResourceId=event.LogicalResourceId,
        PhysicalResourceId=physical_resource_id or log_location.logStreamName,
        Reason=log_location.reason(),
        Data=data
    )


class CfnResponder:
    """Sends exactly one PUT per report, without retries"""

    def __init__(self, http=None, connect_timeout=5, read_timeout=15, dry_run=False):
        if http is None:
            http = urllib3.PoolManager(
                retries=False,
                timeout=urllib3.Timeout(connect=connect_timeout, read=read_timeout)
            )
        self.http = http
        self.dry_run = dry_run
        self.last_report = None

    @classmethod
    def from_settings(cls, settings, dry_run=False):
        return cls(
            connect_timeout=settings.callbackConnectTimeout,
            read_timeout=settings.callbackReadTimeout,
            dry_run=dry_run
        )

    def send(self, event, context, status, physical_resource_id=None, data=None):
        """Report the outcome of a lifecycle event to its ResponseURL

        Returns:
            CallbackReportModel that was sent

        Raises:
            TransportError: If the PUT fails or is answered with a non-2xx status
        """
        report = build_callback_report(event, context, status, physical_resource_id, data)
        body = report.to_body()
        headers = {
            'Content-Type': '',
            'Content-Length': str(len(body))
        }
        self.last_report = report

        logger.info("Sending custom resource response", extra={
            "responseUrl": event.ResponseURL,
            "report": report.model_dump(exclude_none=True)
        })

        if self.dry_run:
            logger.info("Dry run, response not sent")
            return report

        try:
            response = self.http.request('PUT', event.ResponseURL, body=body, headers=headers)
        except urllib3.exceptions.HTTPError as e:
            logger.exception(f"Failed to send custom resource response: {e}")
            raise TransportError(f"Failed to send custom resource response: {e}") from e

        if not 200 <= response.status < 300:
            logger.error(f"Custom resource response rejected with status {response.status}")
            raise TransportError(f"Custom resource response rejected with status {response.status}")

        logger.info(f"Custom resource response sent, status {response.status}")
        return report
