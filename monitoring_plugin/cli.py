"""Command-line interface for rendering plugin output with performance data."""

import re
import sys
import click
import logging
from typing import Optional, Tuple

from .exceptions import PerformanceDataError
from .performance_data import PerformanceData, PerformanceDataPoint
from .response import CheckStatus, Response

# NAME[@SUBLABEL]=VALUE[UNIT][;WARN[;CRIT[;MIN[;MAX]]]]
METRIC_PATTERN = re.compile(
    r"^(?P<name>[^=@]*)(?:@(?P<sub_label>[^=]*))?"
    r"=(?P<value>[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)"
    r"(?P<unit>[^;]*)"
    r"(?P<thresholds>(?:;[^;]*){0,4})$"
)

STATUS_CHOICES = [status.name.lower() for status in CheckStatus]


def parse_metric(definition: str) -> PerformanceDataPoint:
    """Build a data point from a ``NAME[@SUBLABEL]=VALUE[UNIT][;WARN;CRIT;MIN;MAX]`` definition.

    The point is not validated here.

    Raises:
        click.BadParameter: the definition does not follow the grammar
    """
    match = METRIC_PATTERN.match(definition)
    if not match:
        raise click.BadParameter(
            f"'{definition}' is not of the form NAME[@SUBLABEL]=VALUE[UNIT][;WARN;CRIT;MIN;MAX]",
            param_hint="--metric",
        )

    point = PerformanceDataPoint(match.group("name"), float(match.group("value")), match.group("unit"))
    if match.group("sub_label"):
        point.set_sub_label(match.group("sub_label"))

    slots = match.group("thresholds").split(";")[1:]
    setters = (point.set_warn, point.set_crit, point.set_min, point.set_max)
    for slot, setter in zip(slots, setters):
        if not slot:
            continue
        try:
            setter(float(slot))
        except ValueError:
            raise click.BadParameter(f"'{slot}' in '{definition}' is not a number", param_hint="--metric")

    return point


@click.group()
@click.option('--log-level', default=None, help='Logging level (DEBUG, INFO, WARNING, ERROR)')
@click.option('--config', '--config-file', help='Path to configuration file (YAML or JSON)')
@click.pass_context
def cli(ctx, log_level: Optional[str], config: Optional[str]):
    """Render monitoring plugin output with performance data."""
    ctx.ensure_object(dict)

    try:
        from .config import load_config
        app_config = load_config(config_file=config)
        ctx.obj['config'] = app_config

        # CLI flag overrides config
        from .logging_utils import setup_logging
        setup_logging(log_level or app_config.log_level)
    except Exception as e:
        click.echo(f"UNKNOWN: configuration error: {e}")
        sys.exit(CheckStatus.UNKNOWN.value)


@cli.command()
@click.option('-m', '--metric', 'metrics', multiple=True,
              help='Performance data point as NAME[@SUBLABEL]=VALUE[UNIT][;WARN;CRIT;MIN;MAX]')
@click.option('--json-label/--flat-label', default=None,
              help='Render labels as JSON objects (default from configuration)')
@click.option('-s', '--status', type=click.Choice(STATUS_CHOICES, case_sensitive=False), default='ok',
              help='Check status')
@click.option('--message', default=None, help='Human readable check result')
@click.pass_context
def render(ctx, metrics: Tuple[str, ...], json_label: Optional[bool], status: str, message: Optional[str]):
    """Print the plugin output line and exit with the status code."""
    logger = logging.getLogger(__name__)
    app_config = ctx.obj['config']

    if json_label is None:
        json_label = app_config.json_label
    response = Response(app_config.default_message, json_label=json_label)

    try:
        for definition in metrics:
            response.add_performance_data_point(parse_metric(definition))
    except (PerformanceDataError, click.BadParameter) as e:
        logger.error(f"Invalid performance data: {e}")
        click.echo(f"UNKNOWN: {e.format_message() if isinstance(e, click.BadParameter) else e}")
        sys.exit(CheckStatus.UNKNOWN.value)

    response.update_status(CheckStatus[status.upper()], message or "")
    click.echo(response.output())
    sys.exit(response.exit_code)


@cli.command()
@click.option('-m', '--metric', 'metrics', multiple=True, required=True,
              help='Performance data point as NAME[@SUBLABEL]=VALUE[UNIT][;WARN;CRIT;MIN;MAX]')
def validate(metrics: Tuple[str, ...]):
    """Check performance data points without rendering them."""
    performance_data = PerformanceData()
    failed = 0

    for definition in metrics:
        try:
            performance_data.add(parse_metric(definition))
            click.echo(f"✅ {definition}")
        except click.BadParameter as e:
            failed += 1
            click.echo(f"❌ {definition}: {e.format_message()}")
        except PerformanceDataError as e:
            failed += 1
            click.echo(f"❌ {definition}: {e}")

    if failed:
        click.echo(f"{failed} of {len(metrics)} performance data points are invalid", err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
