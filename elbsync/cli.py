"""
Click CLI for inspecting cluster load balancers and attribute drift.
"""

import json
import logging
import sys
from typing import Any

import click
import yaml

from .attributes import Attributes
from .config import LOG_LEVELS, load_settings
from .elbv2 import ELBV2
from .errors import ElbsyncError
from .reconcile import check_attribute_drift, resolve_cluster

EXIT_DRIFT = 3


@click.group()
@click.option('--json', 'output_json', is_flag=True, help='Output machine-readable JSON')
@click.option('--region', help='AWS region (defaults to ELBSYNC_REGION / AWS_REGION)')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Logging level (defaults to ELBSYNC_LOG_LEVEL)')
@click.pass_context
def main(ctx, output_json, region, log_level):
    """elbsync - cluster load balancer resolver and attribute drift checker."""
    try:
        settings = load_settings()
    except ValueError as e:
        raise click.UsageError(str(e))

    if region:
        settings.region = region
    if log_level:
        settings.log_level = log_level.upper()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj['json'] = output_json
    ctx.obj['settings'] = settings


def _json_output(data: Any) -> None:
    """Output data as JSON."""
    click.echo(json.dumps(data, indent=2))


def _fail(ctx, message: str) -> None:
    """Report an error and exit with status 1."""
    if ctx.obj.get('json'):
        _json_output({'error': message})
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _elbv2(ctx) -> ELBV2:
    settings = ctx.obj['settings']
    return ELBV2.from_region(settings.region, page_size=settings.page_size)


def _cluster_name(ctx, cluster: str) -> str:
    name = cluster or ctx.obj['settings'].cluster_name
    if not name:
        raise click.UsageError("A cluster name is required (--cluster or ELBSYNC_CLUSTER_NAME)")
    return name


def _load_desired(path: str) -> Attributes:
    """
    Load desired attributes from a YAML mapping of key: value.

    Raises:
        click.BadParameter: If the file is not valid YAML, not a mapping,
            or has a value that is empty or not a scalar
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise click.BadParameter(f"{path} is not valid YAML: {e}", param_hint="--desired")

    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} must contain a mapping of attribute keys to values", param_hint="--desired")

    for key, value in data.items():
        if value is None or isinstance(value, (dict, list)):
            raise click.BadParameter(f"{path}: attribute {key!r} must have a scalar value", param_hint="--desired")
    return Attributes.from_dict(data)


@main.command('list')
@click.option('--cluster', help='Cluster name (defaults to ELBSYNC_CLUSTER_NAME)')
@click.pass_context
def list_cmd(ctx, cluster):
    """List the load balancers that belong to a cluster."""
    cluster_name = _cluster_name(ctx, cluster)
    try:
        load_balancers = resolve_cluster(_elbv2(ctx), cluster_name)
    except ElbsyncError as e:
        _fail(ctx, str(e))

    if ctx.obj['json']:
        _json_output([lb.summary() for lb in load_balancers])
        return

    if not load_balancers:
        click.echo(f"No load balancers found for cluster {cluster_name}")
        return
    for lb in load_balancers:
        click.echo(f"{lb.name}\t{lb.state or '-'}\t{lb.arn}")


@main.command()
@click.argument('arn')
@click.pass_context
def attributes(ctx, arn):
    """Show the attributes of a load balancer in canonical order."""
    try:
        observed = _elbv2(ctx).describe_attributes(arn).sort()
    except ElbsyncError as e:
        _fail(ctx, str(e))

    if ctx.obj['json']:
        _json_output(observed.to_api())
        return
    for attribute in observed:
        click.echo(f"{attribute.key}={attribute.value}")


@main.command()
@click.option('--cluster', help='Cluster name (defaults to ELBSYNC_CLUSTER_NAME)')
@click.option('--desired', 'desired_path', required=True, type=click.Path(exists=True, dir_okay=False),
              help='YAML file mapping attribute keys to desired values')
@click.pass_context
def drift(ctx, cluster, desired_path):
    """Compare a cluster's load balancer attributes with a desired set."""
    cluster_name = _cluster_name(ctx, cluster)
    desired = _load_desired(desired_path)

    try:
        elbv2 = _elbv2(ctx)
        results = check_attribute_drift(elbv2, resolve_cluster(elbv2, cluster_name), desired)
    except ElbsyncError as e:
        _fail(ctx, str(e))

    drifted = [result for result in results if result.drifted]

    if ctx.obj['json']:
        _json_output([result.to_dict() for result in results])
    elif not results:
        click.echo(f"No load balancers found for cluster {cluster_name}")
    else:
        for result in results:
            if not result.drifted:
                click.echo(f"{result.load_balancer.name}: in sync")
                continue
            click.echo(f"{result.load_balancer.name}: drifted")
            for attribute in result.changes:
                click.echo(f"  {attribute.key} -> {attribute.value}")

    if drifted:
        sys.exit(EXIT_DRIFT)


if __name__ == "__main__":
    main()
