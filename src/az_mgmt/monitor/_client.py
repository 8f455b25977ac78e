"""Azure Monitor management client."""

from __future__ import annotations

from az_mgmt.core._client import ArmClient
from az_mgmt.monitor.operations import (
    BaselinesOperations,
    DiagnosticSettingsCategoryOperations,
    DiagnosticSettingsOperations,
    MetricAlertsOperations,
    MetricAlertsStatusOperations,
    MetricDefinitionsOperations,
    MetricNamespacesOperations,
    MetricsOperations,
    Operations,
)


class MonitorClient(ArmClient):
    """Client for metrics, metric alerts and diagnostic settings."""

    @property
    def metric_definitions(self) -> MetricDefinitionsOperations:
        return MetricDefinitionsOperations(self)

    @property
    def metrics(self) -> MetricsOperations:
        return MetricsOperations(self)

    @property
    def metric_namespaces(self) -> MetricNamespacesOperations:
        return MetricNamespacesOperations(self)

    @property
    def baselines(self) -> BaselinesOperations:
        return BaselinesOperations(self)

    @property
    def metric_alerts(self) -> MetricAlertsOperations:
        return MetricAlertsOperations(self)

    @property
    def metric_alerts_status(self) -> MetricAlertsStatusOperations:
        return MetricAlertsStatusOperations(self)

    @property
    def diagnostic_settings(self) -> DiagnosticSettingsOperations:
        return DiagnosticSettingsOperations(self)

    @property
    def diagnostic_settings_category(self) -> DiagnosticSettingsCategoryOperations:
        return DiagnosticSettingsCategoryOperations(self)

    @property
    def operations(self) -> Operations:
        return Operations(self)
