"""Direct VPC endpoint IP lookup command."""

from typing import Optional

import click
from botocore.exceptions import BotoCoreError, ClientError

from common.config import load_settings
from common.validators import validate
from handlers.network.networkInterfaceService import NetworkInterfaceService
from models.common import ConfigurationError, EndpointLookupError, ResolutionError
from models.targets import bind_ip_targets

from ..utils.json_output import output_status, output_result, output_error


def format_lookup_result(data):
    """Format lookup result for CLI display."""
    lines = [f"VPC Endpoint: {data['VpcEndpointId']}"]
    ips = data.get('NetworkInterfaceIps', [])
    if not ips:
        lines.append("No network interfaces attached.")
        return '\n'.join(lines)

    lines.append(f"Found {len(ips)} network interface IP(s):")
    if 'Targets' in data:
        for target in data['Targets']:
            lines.append(f"  {target['id']}:{target['port']}")
    else:
        for ip in ips:
            lines.append(f"  {ip}")
    return '\n'.join(lines)


@click.command()
@click.argument('vpc_endpoint_id')
@click.option('--region', help='AWS region of the endpoint (defaults to the AWS SDK configuration)')
@click.option('--port', type=int, help='Bind the IPs to target group targets on this port')
@click.option('--expected-count', type=int, help='Fail unless exactly this many IPs are resolved')
@click.option('--json-output', is_flag=True, help='Output raw JSON response')
def lookup(vpc_endpoint_id: str, region: Optional[str], port: Optional[int],
           expected_count: Optional[int], json_output: bool):
    """
    Resolve a VPC interface endpoint to its private IPs.

    Runs the same EC2 lookups as the custom resource, without reporting
    anything to CloudFormation.

    Examples:
        vpcelookup lookup vpce-0123456789abcdef0
        vpcelookup lookup vpce-0123456789abcdef0 --port 443 --expected-count 2
        vpcelookup lookup vpce-0123456789abcdef0 --region us-west-2 --json-output
    """
    (valid, message) = validate({
        'VPC_ENDPOINT_ID': {
            'value': vpc_endpoint_id,
            'validator': 'VPC_ENDPOINT_ID'
        }
    })
    if not valid:
        raise click.BadParameter(message, param_hint='VPC_ENDPOINT_ID')

    try:
        settings = load_settings()
        if region:
            settings = settings.model_copy(update={'region': region})

        output_status(f"Resolving IPs for {vpc_endpoint_id}...", json_output)

        service = NetworkInterfaceService.from_settings(settings)
        ips = service.resolve_endpoint_ips(vpc_endpoint_id)

        result = {
            'VpcEndpointId': vpc_endpoint_id,
            'NetworkInterfaceIps': ips
        }

        if port is not None or expected_count is not None:
            targets = bind_ip_targets(ips, expected_count, port or settings.targetPort)
            result['Targets'] = [target.model_dump() for target in targets]

        output_result(result, json_output, cli_formatter=format_lookup_result)
        return result

    except EndpointLookupError as e:
        output_error(
            e,
            json_output,
            error_type="Endpoint Lookup Error",
            helpful_message="Check the endpoint ID and region."
        )
        raise click.ClickException(str(e))
    except ResolutionError as e:
        output_error(e, json_output, error_type="Resolution Error")
        raise click.ClickException(str(e))
    except ConfigurationError as e:
        output_error(e, json_output, error_type="Configuration Error")
        raise click.ClickException(str(e))
    except (ClientError, BotoCoreError) as e:
        output_error(
            e,
            json_output,
            error_type="AWS Error",
            helpful_message="Ensure your credentials allow ec2:DescribeVpcEndpoints and ec2:DescribeNetworkInterfaces."
        )
        raise click.ClickException(str(e))
