"""CLI commands for build configuration retrieval and analytics."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import structlog

from buildcfg.features.fetch.decoder import ConfigDecoder
from buildcfg.features.fetch.metrics import FetchConfigMetrics
from buildcfg.features.fetch.models import DecodeFailure
from buildcfg.features.fetch.service import FetchConfigService
from buildcfg.features.gates.constants import TEMPLATE_SELECTION
from buildcfg.features.gates.store import InMemoryFeatureGates
from buildcfg.features.instrumentation.publishers import LogEventPublisher
from buildcfg.features.instrumentation.serialize import json_safe
from buildcfg.features.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)
from buildcfg.features.requests.models import BuildRequest, Repository
from buildcfg.features.stats.client import AnalyticsClient
from buildcfg.features.stats.errors import AnalyticsError
from buildcfg.features.stats.extractor import extract_and_publish
from buildcfg.features.stats.job_queue import InMemoryJobQueue
from buildcfg.features.stats.metrics import StatsMetrics
from buildcfg.features.stats.publisher import StatsPublisher
from buildcfg.features.stats.worker import AnalyticsDeliveryWorker
from buildcfg.settings import get_settings


logger = structlog.get_logger()

COMPONENT_CLI = "cli"


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(json_safe(data), indent=2, sort_keys=True, default=str))


def _setup_logging(json_logs: bool, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    configure_logging(level=level, json_format=json_logs)


def _parse_slug(slug: str) -> tuple[str, str]:
    owner, sep, name = slug.partition("/")
    if not sep or not owner or not name or "/" in name:
        msg = f"Expected OWNER/NAME, got '{slug}'"
        raise click.BadParameter(msg, param_hint="REPOSITORY")
    return owner, name


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--json-logs/--no-json-logs",
    default=True,
    help="Use JSON format for logs (default: true).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def cli(json_logs: bool, verbose: bool) -> None:
    """Build configuration retrieval and usage analytics."""
    _setup_logging(json_logs, verbose)


@cli.command()
@click.argument("slug", metavar="REPOSITORY")
@click.option("--ref", required=True, help="Git ref (commit SHA, branch, or tag).")
@click.option("--path", "config_path", default=None, help="Document path override.")
@click.option(
    "--repository-id",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Internal repository identifier.",
)
@click.option(
    "--template-selection",
    is_flag=True,
    help="Activate the template_selection gate for the repository.",
)
def fetch(
    slug: str,
    ref: str,
    config_path: str | None,
    repository_id: int,
    template_selection: bool,
) -> None:
    """Fetch and normalize the build configuration of REPOSITORY (OWNER/NAME)."""
    owner, name = _parse_slug(slug)
    settings = get_settings()
    repository = Repository(id=repository_id, owner_name=owner, name=name)
    request = BuildRequest(
        id=1, repository=repository, commit=ref, config_path=config_path
    )
    gates = InMemoryFeatureGates()
    if template_selection:
        gates.activate_repository(TEMPLATE_SELECTION, repository)

    service = FetchConfigService.from_settings(settings, gates, LogEventPublisher())
    bind_request_context(request.id, repository.slug)
    try:
        config = service.run(request)
    finally:
        clear_request_context()

    metrics = FetchConfigMetrics.get_instance()
    logger.info(
        "fetch_metrics",
        component=COMPONENT_CLI,
        avg_duration_ms=round(metrics.avg_duration_ms, 2),
        **metrics.to_dict(),
    )
    _echo_json(config)


@cli.command()
@click.argument(
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--repository-id",
    type=click.IntRange(min=1),
    required=True,
    help="Internal repository identifier.",
)
@click.option(
    "--github-language",
    default=None,
    help="Language reported by the hosting platform.",
)
@click.option(
    "--deliver",
    is_flag=True,
    help="Send the payload to the analytics service instead of printing it.",
)
def stats(
    config_file: Path,
    repository_id: int,
    github_language: str | None,
    deliver: bool,
) -> None:
    """Derive the usage-analytics payload for a local CONFIG_FILE."""
    settings = get_settings()
    log = logger.bind(component=COMPONENT_CLI, command="stats")

    parsed = ConfigDecoder().parse(config_file.read_text(encoding="utf-8"))
    if isinstance(parsed, DecodeFailure):
        click.echo(f"Error: {config_file}: {parsed.message}", err=True)
        sys.exit(1)

    payload: dict[str, Any] = {}
    if github_language is not None:
        payload["repository"] = {"language": github_language}

    request = BuildRequest(
        id=1,
        repository=Repository(id=repository_id, owner_name="local", name="local"),
        commit="HEAD",
        config=parsed,
        payload=payload,
    )

    job_queue = InMemoryJobQueue()
    extract_and_publish(request, StatsPublisher(job_queue, settings.analytics_queue))

    if not deliver:
        log.info("stats_metrics", **StatsMetrics.get_instance().to_dict())
        _echo_json(job_queue.pop(settings.analytics_queue))
        return

    try:
        worker = AnalyticsDeliveryWorker(
            job_queue,
            AnalyticsClient.from_settings(settings),
            queue_name=settings.analytics_queue,
            stream=settings.analytics_event_stream,
        )
        delivered = worker.drain()
    except AnalyticsError as e:
        log.warning("stats_delivery_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log.info("stats_metrics", **StatsMetrics.get_instance().to_dict())
    stream = settings.analytics_event_stream
    click.echo(f"Delivered {delivered} payload(s) to '{stream}'.")


if __name__ == "__main__":
    cli()
