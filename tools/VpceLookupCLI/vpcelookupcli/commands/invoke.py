"""Local invocation of the custom resource handler."""

import json
from typing import Optional

import click

from common.config import load_settings
from customResources.getVpcEndpointIps import VpcEndpointIpLookup
from models.common import ConfigurationError, EventValidationError, TransportError

from ..utils.context import LocalInvocationContext
from ..utils.json_output import output_status, output_result, output_error


def format_report(report):
    """Format a callback report for CLI display."""
    lines = [
        f"Status: {report.get('Status')}",
        f"Physical Resource ID: {report.get('PhysicalResourceId')}",
        f"Reason: {report.get('Reason')}",
    ]
    data = report.get('Data')
    if data:
        lines.append(f"Data: {json.dumps(data)}")
    return '\n'.join(lines)


@click.command()
@click.argument('event_file', type=click.File('r'))
@click.option('--region', help='AWS region of the endpoint (defaults to the AWS SDK configuration)')
@click.option('--dry-run', is_flag=True, help='Print the callback report instead of sending it')
@click.option('--json-output', is_flag=True, help='Output raw JSON response')
def invoke(event_file, region: Optional[str], dry_run: bool, json_output: bool):
    """
    Run the custom resource handler against a lifecycle event file.

    EVENT_FILE is a CloudFormation custom resource request in JSON. Use '-'
    to read it from stdin.

    Examples:
        vpcelookup invoke create-event.json --dry-run
        cat update-event.json | vpcelookup invoke - --json-output
    """
    try:
        raw_event = json.load(event_file)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON in event file: {e}", param_hint='EVENT_FILE')

    if not isinstance(raw_event, dict):
        raise click.BadParameter("Event file must contain a JSON object", param_hint='EVENT_FILE')

    try:
        settings = load_settings()
    except ConfigurationError as e:
        output_error(e, json_output, error_type="Configuration Error")
        raise click.ClickException(str(e))

    if region:
        settings = settings.model_copy(update={'region': region})

    lookup = VpcEndpointIpLookup.from_settings(settings, dry_run=dry_run)
    output_status(f"Invoking handler for {raw_event.get('RequestType', 'unknown')} request...", json_output)

    try:
        report = lookup.handle(raw_event, LocalInvocationContext())
    except TransportError as e:
        output_error(
            e,
            json_output,
            error_type="Callback Delivery Error",
            helpful_message="Use --dry-run to print the report without sending it."
        )
        raise click.ClickException(str(e))
    except Exception as e:
        failed_report = lookup.responder.last_report
        if failed_report is None:
            # Nothing was reported, the event could not be answered at all
            error_type = "Invalid Event" if isinstance(e, EventValidationError) else "Error"
            output_error(e, json_output, error_type=error_type)
        else:
            output_result(failed_report.model_dump(exclude_none=True), json_output,
                          cli_formatter=format_report)
        raise click.ClickException(str(e))

    output_result(report, json_output, cli_formatter=format_report)
    return report
