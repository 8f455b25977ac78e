"""Command-line interface for az-mgmt.

A thin wrapper over the management clients for quick inspection:

    az-mgmt whoami
    az-mgmt cdn profiles --subscription-id ...
    az-mgmt cdn purge PROFILE ENDPOINT /images/* -g my-rg --wait
    az-mgmt monitor metrics /subscriptions/.../virtualMachines/vm1 --metric "Percentage CPU"

Clients are configured from the ``ARM_*`` environment variables (see
:class:`az_mgmt.core.settings.ClientSettings`).
"""

import functools
import json
import logging
from collections.abc import Callable
from typing import Any

import click
from pydantic import BaseModel, ValidationError

from az_mgmt import __version__
from az_mgmt._logging import setup_logging
from az_mgmt.core._auth import token_claims
from az_mgmt.core._client import ArmClient
from az_mgmt.core.exceptions import DeserializationError, HttpResponseError

logger = logging.getLogger(__name__)

subscription_option = click.option(
    "--subscription-id",
    envvar="ARM_SUBSCRIPTION_ID",
    required=True,
    help="Subscription to query (env: ARM_SUBSCRIPTION_ID).",
)
resource_group_option = click.option(
    "--resource-group",
    "-g",
    required=True,
    help="Resource group name.",
)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


def _echo_json(value: Any) -> None:
    click.echo(json.dumps(_to_jsonable(value), indent=2))


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn ARM, decoding and settings errors into an ``Error:`` message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HttpResponseError as exc:
            logger.debug("Request failed", exc_info=True)
            raise click.ClickException(exc.message) from exc
        except (DeserializationError, ValidationError) as exc:
            logger.debug("Invalid data", exc_info=True)
            raise click.ClickException(str(exc)) from exc

    return wrapper


def _client(client_cls: type[ArmClient]) -> Any:
    return client_cls.from_settings()


@click.group()
@click.version_option(version=__version__, prog_name="az-mgmt")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose logging.",
)
def cli(verbose: bool) -> None:
    """Azure management-plane clients."""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@handle_errors
def whoami() -> None:
    """Show the tenant and principal the current credential resolves to."""
    client = _client(ArmClient)
    claims = token_claims(client.credential, client.scopes)
    _echo_json(
        {
            "tenantId": claims.get("tid"),
            "objectId": claims.get("oid"),
            "name": claims.get("upn") or claims.get("unique_name") or claims.get("appid"),
            "endpoint": client.endpoint,
        }
    )


# ---------------------------------------------------------------------------
# CDN
# ---------------------------------------------------------------------------


@cli.group()
def cdn() -> None:
    """CDN profiles and endpoints."""


@cdn.command("profiles")
@subscription_option
@click.option("--resource-group", "-g", default=None, help="Only list profiles in this resource group.")
@handle_errors
def cdn_profiles(subscription_id: str, resource_group: str | None) -> None:
    """List CDN profiles."""
    from az_mgmt.cdn import CdnClient

    client = _client(CdnClient)
    if resource_group:
        builder = client.profiles.list_by_resource_group(subscription_id, resource_group)
    else:
        builder = client.profiles.list(subscription_id)
    _echo_json(builder.into_pageable().to_list())


@cdn.command("endpoints")
@click.argument("profile")
@subscription_option
@resource_group_option
@handle_errors
def cdn_endpoints(profile: str, subscription_id: str, resource_group: str) -> None:
    """List the endpoints of PROFILE."""
    from az_mgmt.cdn import CdnClient

    client = _client(CdnClient)
    _echo_json(client.endpoints.list_by_profile(subscription_id, resource_group, profile).into_pageable().to_list())


@cdn.command("purge")
@click.argument("profile")
@click.argument("endpoint")
@click.argument("paths", nargs=-1, required=True)
@subscription_option
@resource_group_option
@click.option("--wait", is_flag=True, default=False, help="Wait for the purge to finish.")
@handle_errors
def cdn_purge(
    profile: str, endpoint: str, paths: tuple[str, ...], subscription_id: str, resource_group: str, wait: bool
) -> None:
    """Purge PATHS from the cache of ENDPOINT."""
    from az_mgmt.cdn import CdnClient

    client = _client(CdnClient)
    poller = client.endpoints.purge_content(
        subscription_id, resource_group, profile, endpoint, {"contentPaths": list(paths)}
    ).begin()
    if wait:
        poller.wait()
    click.echo(f"Purge {poller.status().lower()}: {', '.join(paths)}")


# ---------------------------------------------------------------------------
# Front Door
# ---------------------------------------------------------------------------


@cli.group()
def frontdoor() -> None:
    """Front Doors."""


@frontdoor.command("list")
@subscription_option
@click.option("--resource-group", "-g", default=None, help="Only list Front Doors in this resource group.")
@handle_errors
def frontdoor_list(subscription_id: str, resource_group: str | None) -> None:
    """List Front Doors."""
    from az_mgmt.frontdoor import FrontDoorClient

    client = _client(FrontDoorClient)
    if resource_group:
        builder = client.front_doors.list_by_resource_group(subscription_id, resource_group)
    else:
        builder = client.front_doors.list(subscription_id)
    _echo_json(builder.into_pageable().to_list())


@frontdoor.command("purge")
@click.argument("name")
@click.argument("paths", nargs=-1, required=True)
@subscription_option
@resource_group_option
@click.option("--wait", is_flag=True, default=False, help="Wait for the purge to finish.")
@handle_errors
def frontdoor_purge(name: str, paths: tuple[str, ...], subscription_id: str, resource_group: str, wait: bool) -> None:
    """Purge PATHS from the cache of Front Door NAME."""
    from az_mgmt.frontdoor import FrontDoorClient

    client = _client(FrontDoorClient)
    poller = client.endpoints.purge_content(
        subscription_id, resource_group, name, {"contentPaths": list(paths)}
    ).begin()
    if wait:
        poller.wait()
    click.echo(f"Purge {poller.status().lower()}: {', '.join(paths)}")


# ---------------------------------------------------------------------------
# Monitor
# ---------------------------------------------------------------------------


@cli.group()
def monitor() -> None:
    """Azure Monitor metrics."""


@monitor.command("metrics")
@click.argument("resource_uri")
@click.option("--metric", "metrics", multiple=True, required=True, help="Metric name (repeatable).")
@click.option("--timespan", default=None, help="ISO-8601 interval, e.g. 2024-01-01T00:00Z/2024-01-02T00:00Z.")
@click.option("--interval", default=None, help="ISO-8601 grain, e.g. PT1H.")
@click.option("--aggregation", default=None, help="Comma-separated aggregations, e.g. Average,Maximum.")
@handle_errors
def monitor_metrics(
    resource_uri: str,
    metrics: tuple[str, ...],
    timespan: str | None,
    interval: str | None,
    aggregation: str | None,
) -> None:
    """Query metric values of RESOURCE_URI."""
    from az_mgmt.monitor import MonitorClient

    client = _client(MonitorClient)
    response = client.metrics.list(
        resource_uri,
        metricnames=",".join(metrics),
        timespan=timespan,
        interval=interval,
        aggregation=aggregation,
    ).into_body()
    _echo_json(response)


# ---------------------------------------------------------------------------
# Workloads
# ---------------------------------------------------------------------------


@cli.group()
def workloads() -> None:
    """SAP monitors and workloads."""


@workloads.command("monitors")
@subscription_option
@click.option("--resource-group", "-g", default=None, help="Only list monitors in this resource group.")
@handle_errors
def workloads_monitors(subscription_id: str, resource_group: str | None) -> None:
    """List SAP monitors."""
    from az_mgmt.workloads import WorkloadsClient

    client = _client(WorkloadsClient)
    if resource_group:
        builder = client.monitors.list_by_resource_group(subscription_id, resource_group)
    else:
        builder = client.monitors.list(subscription_id)
    _echo_json(builder.into_pageable().to_list())
