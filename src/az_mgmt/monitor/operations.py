"""Resource sub-clients for Microsoft.Insights.

Most operations here are scoped to an arbitrary ARM resource ID
(``resource_uri``); it is inserted into the URL as-is, slashes included.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from az_mgmt.core._client import SubClient
from az_mgmt.core._models import OperationListResult, as_model
from az_mgmt.core._request import RequestBuilder
from az_mgmt.monitor.models import (
    DiagnosticSettingsCategoryResource,
    DiagnosticSettingsCategoryResourceCollection,
    DiagnosticSettingsResource,
    DiagnosticSettingsResourceCollection,
    MetricAlertResource,
    MetricAlertResourceCollection,
    MetricAlertResourcePatch,
    MetricAlertStatusCollection,
    MetricBaselinesResponse,
    MetricDefinitionCollection,
    MetricNamespaceCollection,
    Response,
    ResultType,
    SubscriptionScopeMetricsRequestBodyParameters,
)

logger = logging.getLogger(__name__)

METRICS_API_VERSION = "2021-05-01"
METRIC_NAMESPACES_API_VERSION = "2017-12-01-preview"
BASELINES_API_VERSION = "2019-03-01"
METRIC_ALERTS_API_VERSION = "2018-03-01"
DIAGNOSTIC_SETTINGS_API_VERSION = "2021-05-01-preview"
OPERATIONS_API_VERSION = "2015-04-01"

_SCOPED = "/{resource_uri}/providers/Microsoft.Insights"
_SUBSCRIPTION = "/subscriptions/{subscription_id}/providers/Microsoft.Insights"
_ALERTS = (
    "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.Insights/metricAlerts"
)
_ALERT = _ALERTS + "/{rule_name}"

_DELETED = (200, 204)


class _ScopedSubClient(SubClient):
    """Operations addressed by a full resource ID."""

    def _scoped(self, method: str, path: str, resource_uri: str, **kwargs: Any) -> RequestBuilder:
        path_params = {"resource_uri": resource_uri, **kwargs.pop("path_params", {})}
        return self._request(
            method,
            _SCOPED + path,
            path_params=path_params,
            skip_quote=("resource_uri",),
            **kwargs,
        )


def _metrics_query(
    timespan: str | None,
    interval: str | None,
    metricnames: str | None,
    aggregation: str | None,
    top: int | None,
    orderby: str | None,
    filter: str | None,
    result_type: ResultType | str | None,
    metricnamespace: str | None,
    auto_adjust_timegrain: bool | None,
    validate_dimensions: bool | None,
) -> dict[str, Any]:
    return {
        "timespan": timespan,
        "interval": interval,
        "metricnames": metricnames,
        "aggregation": aggregation,
        "top": top,
        "orderby": orderby,
        "$filter": filter,
        "resultType": result_type,
        "metricnamespace": metricnamespace,
        "AutoAdjustTimegrain": auto_adjust_timegrain,
        "ValidateDimensions": validate_dimensions,
    }


class MetricDefinitionsOperations(_ScopedSubClient):
    """Metrics a resource can emit."""

    API_VERSION = METRICS_API_VERSION

    def list(self, resource_uri: str, *, metricnamespace: str | None = None) -> RequestBuilder:
        """List metric definitions; the service returns them in a single page."""
        return self._scoped(
            "GET",
            "/metricDefinitions",
            resource_uri,
            query={"metricnamespace": metricnamespace},
            response_type=MetricDefinitionCollection,
        )

    def list_at_subscription_scope(
        self, subscription_id: str, region: str, *, metricnamespace: str | None = None
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _SUBSCRIPTION + "/metricdefinitions",
            path_params={"subscription_id": subscription_id},
            query={"region": region, "metricnamespace": metricnamespace},
            response_type=MetricDefinitionCollection,
        )


class MetricsOperations(_ScopedSubClient):
    """Metric values.

    ``timespan`` is an ISO-8601 interval (``start/end``), ``interval`` an
    ISO-8601 duration, and ``filter`` an OData expression over dimensions,
    e.g. ``"City eq 'Seattle' or City eq 'Tacoma'"``.
    """

    API_VERSION = METRICS_API_VERSION

    def list(
        self,
        resource_uri: str,
        *,
        timespan: str | None = None,
        interval: str | None = None,
        metricnames: str | None = None,
        aggregation: str | None = None,
        top: int | None = None,
        orderby: str | None = None,
        filter: str | None = None,
        result_type: ResultType | str | None = None,
        metricnamespace: str | None = None,
        auto_adjust_timegrain: bool | None = None,
        validate_dimensions: bool | None = None,
    ) -> RequestBuilder:
        return self._scoped(
            "GET",
            "/metrics",
            resource_uri,
            query=_metrics_query(
                timespan,
                interval,
                metricnames,
                aggregation,
                top,
                orderby,
                filter,
                result_type,
                metricnamespace,
                auto_adjust_timegrain,
                validate_dimensions,
            ),
            response_type=Response,
        )

    def list_at_subscription_scope(
        self,
        subscription_id: str,
        region: str,
        *,
        timespan: str | None = None,
        interval: str | None = None,
        metricnames: str | None = None,
        aggregation: str | None = None,
        top: int | None = None,
        orderby: str | None = None,
        filter: str | None = None,
        result_type: ResultType | str | None = None,
        metricnamespace: str | None = None,
        auto_adjust_timegrain: bool | None = None,
        validate_dimensions: bool | None = None,
    ) -> RequestBuilder:
        """Query a metric across every resource of a region in the subscription."""
        query = {"region": region}
        query.update(
            _metrics_query(
                timespan,
                interval,
                metricnames,
                aggregation,
                top,
                orderby,
                filter,
                result_type,
                metricnamespace,
                auto_adjust_timegrain,
                validate_dimensions,
            )
        )
        return self._request(
            "GET",
            _SUBSCRIPTION + "/metrics",
            path_params={"subscription_id": subscription_id},
            query=query,
            response_type=Response,
        )

    def list_at_subscription_scope_post(
        self,
        subscription_id: str,
        region: str,
        body: SubscriptionScopeMetricsRequestBodyParameters | dict | None = None,
        *,
        timespan: str | None = None,
        interval: str | None = None,
        metricnames: str | None = None,
        aggregation: str | None = None,
        top: int | None = None,
        orderby: str | None = None,
        filter: str | None = None,
        result_type: ResultType | str | None = None,
        metricnamespace: str | None = None,
        auto_adjust_timegrain: bool | None = None,
        validate_dimensions: bool | None = None,
    ) -> RequestBuilder:
        """Same as :meth:`list_at_subscription_scope`, with a long filter in the body."""
        query = {"region": region}
        query.update(
            _metrics_query(
                timespan,
                interval,
                metricnames,
                aggregation,
                top,
                orderby,
                filter,
                result_type,
                metricnamespace,
                auto_adjust_timegrain,
                validate_dimensions,
            )
        )
        if body is not None:
            body = as_model(SubscriptionScopeMetricsRequestBodyParameters, body)
        return self._request(
            "POST",
            _SUBSCRIPTION + "/metrics",
            path_params={"subscription_id": subscription_id},
            query=query,
            body=body,
            response_type=Response,
        )


class MetricNamespacesOperations(_ScopedSubClient):
    API_VERSION = METRIC_NAMESPACES_API_VERSION

    def list(self, resource_uri: str, *, start_time: datetime | str | None = None) -> RequestBuilder:
        return self._scoped(
            "GET",
            "/metricNamespaces",
            resource_uri,
            query={"startTime": start_time},
            response_type=MetricNamespaceCollection,
        )


class BaselinesOperations(_ScopedSubClient):
    """Dynamic-threshold baselines learned for a resource's metrics."""

    API_VERSION = BASELINES_API_VERSION

    def list(
        self,
        resource_uri: str,
        *,
        metricnames: str | None = None,
        metricnamespace: str | None = None,
        timespan: str | None = None,
        interval: str | None = None,
        aggregation: str | None = None,
        sensitivities: str | None = None,
        filter: str | None = None,
        result_type: ResultType | str | None = None,
    ) -> RequestBuilder:
        return self._scoped(
            "GET",
            "/metricBaselines",
            resource_uri,
            query={
                "metricnames": metricnames,
                "metricnamespace": metricnamespace,
                "timespan": timespan,
                "interval": interval,
                "aggregation": aggregation,
                "sensitivities": sensitivities,
                "$filter": filter,
                "resultType": result_type,
            },
            response_type=MetricBaselinesResponse,
        )


class _AlertRuleSubClient(SubClient):
    API_VERSION = METRIC_ALERTS_API_VERSION

    def _rule(self, method: str, path: str, s: str, rg: str, rule: str, **kwargs: Any) -> RequestBuilder:
        path_params = {"subscription_id": s, "resource_group_name": rg, "rule_name": rule}
        path_params.update(kwargs.pop("path_params", {}))
        return self._request(method, path, path_params=path_params, **kwargs)


class MetricAlertsOperations(_AlertRuleSubClient):
    """Metric alert rules."""

    def list_by_subscription(self, subscription_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _SUBSCRIPTION + "/metricAlerts",
            path_params={"subscription_id": subscription_id},
            response_type=MetricAlertResourceCollection,
        )

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _ALERTS,
            path_params={"subscription_id": subscription_id, "resource_group_name": resource_group_name},
            response_type=MetricAlertResourceCollection,
        )

    def get(self, subscription_id: str, resource_group_name: str, rule_name: str) -> RequestBuilder:
        return self._rule(
            "GET", _ALERT, subscription_id, resource_group_name, rule_name, response_type=MetricAlertResource
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        rule_name: str,
        parameters: MetricAlertResource | dict,
    ) -> RequestBuilder:
        return self._rule(
            "PUT",
            _ALERT,
            subscription_id,
            resource_group_name,
            rule_name,
            body=as_model(MetricAlertResource, parameters),
            response_type=MetricAlertResource,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        rule_name: str,
        parameters: MetricAlertResourcePatch | dict,
    ) -> RequestBuilder:
        """Patch tags or selected properties of an alert rule."""
        return self._rule(
            "PATCH",
            _ALERT,
            subscription_id,
            resource_group_name,
            rule_name,
            body=as_model(MetricAlertResourcePatch, parameters),
            response_type=MetricAlertResource,
        )

    def delete(self, subscription_id: str, resource_group_name: str, rule_name: str) -> RequestBuilder:
        return self._rule("DELETE", _ALERT, subscription_id, resource_group_name, rule_name, expected=_DELETED)


class MetricAlertsStatusOperations(_AlertRuleSubClient):
    """Per-dimension status of a metric alert rule."""

    def list(self, subscription_id: str, resource_group_name: str, rule_name: str) -> RequestBuilder:
        return self._rule(
            "GET",
            _ALERT + "/status",
            subscription_id,
            resource_group_name,
            rule_name,
            response_type=MetricAlertStatusCollection,
        )

    def list_by_name(
        self, subscription_id: str, resource_group_name: str, rule_name: str, status_name: str
    ) -> RequestBuilder:
        return self._rule(
            "GET",
            _ALERT + "/status/{status_name}",
            subscription_id,
            resource_group_name,
            rule_name,
            path_params={"status_name": status_name},
            response_type=MetricAlertStatusCollection,
        )


class DiagnosticSettingsOperations(_ScopedSubClient):
    """Export destinations for a resource's logs and metrics."""

    API_VERSION = DIAGNOSTIC_SETTINGS_API_VERSION

    def list(self, resource_uri: str) -> RequestBuilder:
        return self._scoped(
            "GET", "/diagnosticSettings", resource_uri, response_type=DiagnosticSettingsResourceCollection
        )

    def get(self, resource_uri: str, name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            "/diagnosticSettings/{name}",
            resource_uri,
            path_params={"name": name},
            response_type=DiagnosticSettingsResource,
        )

    def create_or_update(
        self, resource_uri: str, name: str, parameters: DiagnosticSettingsResource | dict
    ) -> RequestBuilder:
        return self._scoped(
            "PUT",
            "/diagnosticSettings/{name}",
            resource_uri,
            path_params={"name": name},
            body=as_model(DiagnosticSettingsResource, parameters),
            response_type=DiagnosticSettingsResource,
        )

    def delete(self, resource_uri: str, name: str) -> RequestBuilder:
        return self._scoped(
            "DELETE", "/diagnosticSettings/{name}", resource_uri, path_params={"name": name}, expected=_DELETED
        )


class DiagnosticSettingsCategoryOperations(_ScopedSubClient):
    API_VERSION = DIAGNOSTIC_SETTINGS_API_VERSION

    def get(self, resource_uri: str, name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            "/diagnosticSettingsCategories/{name}",
            resource_uri,
            path_params={"name": name},
            response_type=DiagnosticSettingsCategoryResource,
        )

    def list(self, resource_uri: str) -> RequestBuilder:
        """List the log and metric categories a resource can export."""
        return self._scoped(
            "GET",
            "/diagnosticSettingsCategories",
            resource_uri,
            response_type=DiagnosticSettingsCategoryResourceCollection,
        )


class Operations(SubClient):
    API_VERSION = OPERATIONS_API_VERSION

    def list(self) -> RequestBuilder:
        return self._request("GET", "/providers/Microsoft.Insights/operations", response_type=OperationListResult)
