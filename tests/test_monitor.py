"""Tests for the Azure Monitor client."""

from datetime import datetime, timezone

import pytest

from az_mgmt.monitor import MonitorClient
from az_mgmt.monitor.models import (
    AggregationType,
    DynamicMetricCriteria,
    MetricAlertCriteria,
    MetricAlertMultipleResourceMultipleMetricCriteria,
    MetricAlertSingleResourceMultipleMetricCriteria,
    MetricCriteria,
    MultiMetricCriteria,
    ResultType,
    Unit,
    WebtestLocationAvailabilityCriteria,
)
from az_mgmt.monitor.operations import (
    BASELINES_API_VERSION,
    DIAGNOSTIC_SETTINGS_API_VERSION,
    METRIC_ALERTS_API_VERSION,
    METRIC_NAMESPACES_API_VERSION,
    METRICS_API_VERSION,
    OPERATIONS_API_VERSION,
)

SUB = "00000000-0000-0000-0000-000000000003"
RG = "monitor-rg"
VM = f"/subscriptions/{SUB}/resourceGroups/{RG}/providers/Microsoft.Compute/virtualMachines/vm1"
VM_URL = "https://management.azure.com" + VM
ALERTS_URL = (
    f"https://management.azure.com/subscriptions/{SUB}/resourceGroups/{RG}/providers/Microsoft.Insights/metricAlerts"
)

METRICS_RESPONSE = {
    "cost": 59,
    "timespan": "2024-01-01T00:00:00Z/2024-01-01T01:00:00Z",
    "interval": "PT1M",
    "namespace": "Microsoft.Compute/virtualMachines",
    "resourceregion": "westeurope",
    "value": [
        {
            "id": VM + "/providers/Microsoft.Insights/metrics/Percentage CPU",
            "type": "Microsoft.Insights/metrics",
            "name": {"value": "Percentage CPU", "localizedValue": "Percentage CPU"},
            "unit": "Percent",
            "timeseries": [
                {
                    "metadatavalues": [],
                    "data": [
                        {"timeStamp": "2024-01-01T00:00:00Z", "average": 4.2},
                        {"timeStamp": "2024-01-01T00:01:00Z"},
                    ],
                }
            ],
        },
        {
            "id": VM + "/providers/Microsoft.Insights/metrics/Gpu Joules",
            "type": "Microsoft.Insights/metrics",
            "name": {"value": "Gpu Joules"},
            "unit": "Joules",
            "timeseries": [],
        },
    ],
}


@pytest.fixture()
def client() -> MonitorClient:
    return MonitorClient.builder().build()


class TestMetrics:
    """Metric values and metadata are addressed by resource ID."""

    def test_list_uses_unquoted_resource_uri_and_wire_names(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, METRICS_RESPONSE)

        response = client.metrics.list(
            VM,
            timespan="2024-01-01T00:00:00Z/2024-01-01T01:00:00Z",
            interval="PT1M",
            metricnames="Percentage CPU,Gpu Joules",
            aggregation="Average",
            top=10,
            orderby="Average desc",
            filter="LUN eq '*'",
            result_type=ResultType.Data,
            auto_adjust_timegrain=True,
            validate_dimensions=False,
        ).into_body()

        assert mock_request.call_args.args == ("GET", VM_URL + "/providers/Microsoft.Insights/metrics")
        assert mock_request.call_args.kwargs["params"] == {
            "api-version": METRICS_API_VERSION,
            "timespan": "2024-01-01T00:00:00Z/2024-01-01T01:00:00Z",
            "interval": "PT1M",
            "metricnames": "Percentage CPU,Gpu Joules",
            "aggregation": "Average",
            "top": "10",
            "orderby": "Average desc",
            "$filter": "LUN eq '*'",
            "resultType": "Data",
            "AutoAdjustTimegrain": "true",
            "ValidateDimensions": "false",
        }
        cpu, joules = response.value
        assert cpu.unit is Unit.Percent
        assert cpu.timeseries[0].data[0].average == 4.2
        assert cpu.timeseries[0].data[1].timeStamp == datetime(2024, 1, 1, 0, 1, tzinfo=timezone.utc)
        assert joules.unit == "Joules"

    def test_leading_slash_is_optional(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, METRICS_RESPONSE)
        client.metrics.list(VM.lstrip("/")).into_body()
        assert mock_request.call_args.args[1] == VM_URL + "/providers/Microsoft.Insights/metrics"

    def test_unset_options_are_not_sent(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, METRICS_RESPONSE)
        client.metrics.list(VM).into_body()
        assert mock_request.call_args.kwargs["params"] == {"api-version": METRICS_API_VERSION}

    def test_subscription_scope_post(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, METRICS_RESPONSE)

        client.metrics.list_at_subscription_scope_post(
            SUB,
            "westeurope",
            {"metricNames": "Percentage CPU", "filter": "Microsoft.ResourceId eq '*'", "rollUpBy": "LUN"},
            metricnamespace="microsoft.compute/virtualmachines",
        ).into_body()

        method, url = mock_request.call_args.args
        assert method == "POST"
        assert url == f"https://management.azure.com/subscriptions/{SUB}/providers/Microsoft.Insights/metrics"
        assert mock_request.call_args.kwargs["params"] == {
            "api-version": METRICS_API_VERSION,
            "region": "westeurope",
            "metricnamespace": "microsoft.compute/virtualmachines",
        }
        assert mock_request.call_args.kwargs["json"] == {
            "metricNames": "Percentage CPU",
            "filter": "Microsoft.ResourceId eq '*'",
            "rollUpBy": "LUN",
        }

    def test_subscription_scope_get(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, METRICS_RESPONSE)
        client.metrics.list_at_subscription_scope(SUB, "westeurope", interval="PT5M").into_body()
        assert mock_request.call_args.kwargs["params"] == {
            "api-version": METRICS_API_VERSION,
            "region": "westeurope",
            "interval": "PT5M",
        }

    def test_metric_definitions_single_page(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "value": [
                    {
                        "name": {"value": "Percentage CPU"},
                        "unit": "Percent",
                        "primaryAggregationType": "Average",
                        "supportedAggregationTypes": ["None", "Average", "Maximum"],
                        "metricAvailabilities": [{"timeGrain": "PT1M", "retention": "P93D"}],
                    }
                ]
            },
        )

        definitions = client.metric_definitions.list(VM, metricnamespace="Microsoft.Compute/virtualMachines")

        items = definitions.into_pageable().to_list()
        assert items[0].primaryAggregationType is AggregationType.Average
        assert AggregationType.None_ in items[0].supportedAggregationTypes
        assert mock_request.call_count == 1
        assert mock_request.call_args.args[1] == VM_URL + "/providers/Microsoft.Insights/metricDefinitions"

    def test_metric_definitions_at_subscription_scope(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"value": []})
        client.metric_definitions.list_at_subscription_scope(SUB, "eastus").into_pageable().to_list()
        assert mock_request.call_args.args[1] == (
            f"https://management.azure.com/subscriptions/{SUB}/providers/Microsoft.Insights/metricdefinitions"
        )
        assert mock_request.call_args.kwargs["params"]["region"] == "eastus"

    def test_metric_namespaces(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "value": [
                    {
                        "name": "Virtual Machine Host",
                        "classification": "Platform",
                        "properties": {"metricNamespaceName": "Microsoft.Compute/virtualMachines"},
                    }
                ]
            },
        )

        namespaces = client.metric_namespaces.list(
            VM, start_time=datetime(2024, 1, 1, tzinfo=timezone.utc)
        ).into_pageable().to_list()

        assert namespaces[0].properties.metricNamespaceName == "Microsoft.Compute/virtualMachines"
        assert mock_request.call_args.kwargs["params"] == {
            "api-version": METRIC_NAMESPACES_API_VERSION,
            "startTime": "2024-01-01T00:00:00+00:00",
        }

    def test_baselines(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "value": [
                    {
                        "id": VM + "/providers/Microsoft.Insights/metricBaselines/Percentage CPU",
                        "type": "Microsoft.Insights/metricBaselines",
                        "name": "Percentage CPU",
                        "properties": {
                            "timespan": "2024-01-01T00:00:00Z/2024-01-02T00:00:00Z",
                            "interval": "PT1H",
                            "baselines": [
                                {
                                    "aggregation": "Average",
                                    "timestamps": ["2024-01-01T00:00:00Z"],
                                    "data": [
                                        {"sensitivity": "Low", "lowThresholds": [1.0], "highThresholds": [9.0]}
                                    ],
                                }
                            ],
                        },
                    }
                ]
            },
        )

        baselines = client.baselines.list(VM, sensitivities="Low,Medium", filter="host eq 'a'").into_pageable()

        first = baselines.to_list()[0]
        assert first.properties.baselines[0].data[0].highThresholds == [9.0]
        assert mock_request.call_args.args[1] == VM_URL + "/providers/Microsoft.Insights/metricBaselines"
        assert mock_request.call_args.kwargs["params"] == {
            "api-version": BASELINES_API_VERSION,
            "sensitivities": "Low,Medium",
            "$filter": "host eq 'a'",
        }


class TestMetricAlerts:
    """Alert rules and their polymorphic criteria."""

    def test_get_single_resource_criteria(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "name": "high-cpu",
                "location": "global",
                "properties": {
                    "severity": 3,
                    "enabled": True,
                    "scopes": [VM],
                    "evaluationFrequency": "PT1M",
                    "windowSize": "PT15M",
                    "criteria": {
                        "odata.type": "Microsoft.Azure.Monitor.SingleResourceMultipleMetricCriteria",
                        "allOf": [
                            {
                                "criterionType": "StaticThresholdCriterion",
                                "name": "High_CPU_80",
                                "metricName": "Percentage CPU",
                                "timeAggregation": "Average",
                                "operator": "GreaterThan",
                                "threshold": 80.5,
                            }
                        ],
                    },
                },
            },
        )

        alert = client.metric_alerts.get(SUB, RG, "high-cpu").into_body()

        criteria = alert.properties.criteria
        assert isinstance(criteria, MetricAlertSingleResourceMultipleMetricCriteria)
        assert isinstance(criteria.allOf[0], MetricCriteria)
        assert criteria.allOf[0].threshold == 80.5
        assert mock_request.call_args.args == ("GET", f"{ALERTS_URL}/high-cpu")
        assert mock_request.call_args.kwargs["params"] == {"api-version": METRIC_ALERTS_API_VERSION}

    def test_multi_resource_criteria_mix_static_and_dynamic(self) -> None:
        from az_mgmt.core import as_model
        from az_mgmt.monitor.models import AnyMetricAlertCriteria

        criteria = as_model(
            AnyMetricAlertCriteria,
            {
                "odata.type": "Microsoft.Azure.Monitor.MultipleResourceMultipleMetricCriteria",
                "allOf": [
                    {
                        "criterionType": "DynamicThresholdCriterion",
                        "name": "cpu",
                        "metricName": "Percentage CPU",
                        "timeAggregation": "Average",
                        "operator": "GreaterOrLessThan",
                        "alertSensitivity": "Medium",
                        "failingPeriods": {"numberOfEvaluationPeriods": 4, "minFailingPeriodsToAlert": 4},
                    },
                    {
                        "criterionType": "StaticThresholdCriterion",
                        "name": "disk",
                        "metricName": "Disk Read Bytes",
                        "timeAggregation": "Total",
                        "operator": "GreaterThan",
                        "threshold": 1000,
                    },
                    {
                        "criterionType": "ForecastCriterion",
                        "name": "future",
                        "metricName": "Network In",
                        "timeAggregation": "Total",
                        "horizon": "P1D",
                    },
                ],
            },
        )

        assert isinstance(criteria, MetricAlertMultipleResourceMultipleMetricCriteria)
        dynamic, static, unknown = criteria.allOf
        assert isinstance(dynamic, DynamicMetricCriteria)
        assert dynamic.alertSensitivity == "Medium"
        assert isinstance(static, MetricCriteria)
        assert type(unknown) is MultiMetricCriteria
        assert unknown.to_wire()["horizon"] == "P1D"

    def test_webtest_and_unknown_criteria(self) -> None:
        from az_mgmt.core import as_model
        from az_mgmt.monitor.models import AnyMetricAlertCriteria

        webtest = as_model(
            AnyMetricAlertCriteria,
            {
                "odata.type": "Microsoft.Azure.Monitor.WebtestLocationAvailabilityCriteria",
                "webTestId": "/webtests/ping",
                "componentId": "/components/app",
                "failedLocationCount": 2,
            },
        )
        unknown = as_model(AnyMetricAlertCriteria, {"odata.type": "Microsoft.Azure.Monitor.LogCriteria", "q": "x"})

        assert isinstance(webtest, WebtestLocationAvailabilityCriteria)
        assert type(unknown) is MetricAlertCriteria
        assert unknown.to_wire() == {"odata.type": "Microsoft.Azure.Monitor.LogCriteria", "q": "x"}

    def test_create_or_update_sends_odata_type(self, client, mock_request, make_response) -> None:
        rule = {
            "location": "global",
            "properties": {
                "severity": 2,
                "enabled": True,
                "scopes": [VM],
                "evaluationFrequency": "PT5M",
                "windowSize": "PT15M",
                "criteria": MetricAlertSingleResourceMultipleMetricCriteria(
                    allOf=[
                        MetricCriteria(
                            name="cpu",
                            metricName="Percentage CPU",
                            timeAggregation="Average",
                            operator="GreaterThan",
                            threshold=90,
                        )
                    ]
                ),
            },
        }
        mock_request.return_value = make_response(200)

        client.metric_alerts.create_or_update(SUB, RG, "high-cpu", rule).send()

        body = mock_request.call_args.kwargs["json"]
        assert body["properties"]["criteria"]["odata.type"] == (
            "Microsoft.Azure.Monitor.SingleResourceMultipleMetricCriteria"
        )
        assert body["properties"]["criteria"]["allOf"][0]["criterionType"] == "StaticThresholdCriterion"
        assert mock_request.call_args.args == ("PUT", f"{ALERTS_URL}/high-cpu")

    def test_update_is_patch(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "location": "global",
                "properties": {
                    "severity": 1,
                    "enabled": False,
                    "evaluationFrequency": "PT1M",
                    "windowSize": "PT5M",
                    "criteria": {"odata.type": "Microsoft.Azure.Monitor.SingleResourceMultipleMetricCriteria"},
                },
            },
        )

        alert = client.metric_alerts.update(SUB, RG, "high-cpu", {"properties": {"enabled": False}}).into_body()

        assert alert.properties.enabled is False
        assert mock_request.call_args.args[0] == "PATCH"
        assert mock_request.call_args.kwargs["json"] == {"properties": {"enabled": False}}

    @pytest.mark.parametrize("status", [200, 204])
    def test_delete(self, client, mock_request, make_response, status) -> None:
        mock_request.return_value = make_response(status)
        client.metric_alerts.delete(SUB, RG, "high-cpu").send()
        assert mock_request.call_args.args == ("DELETE", f"{ALERTS_URL}/high-cpu")

    def test_status_by_name(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200, {"value": [{"name": "s1", "properties": {"status": "Healthy", "dimensions": {"host": "a"}}}]}
        )

        statuses = client.metric_alerts_status.list_by_name(SUB, RG, "high-cpu", "s1").into_body()

        assert statuses.value[0].properties.status == "Healthy"
        assert mock_request.call_args.args[1] == f"{ALERTS_URL}/high-cpu/status/s1"

    def test_list_by_subscription(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"value": []})
        client.metric_alerts.list_by_subscription(SUB).into_pageable().to_list()
        assert mock_request.call_args.args[1] == (
            f"https://management.azure.com/subscriptions/{SUB}/providers/Microsoft.Insights/metricAlerts"
        )


class TestDiagnosticSettings:
    """Diagnostic settings are scoped by resource ID."""

    def test_create_or_update(self, client, mock_request, make_response) -> None:
        setting = {
            "properties": {
                "workspaceId": "/subscriptions/x/workspaces/ws1",
                "logs": [{"categoryGroup": "allLogs", "enabled": True}],
                "metrics": [
                    {"category": "AllMetrics", "enabled": True, "retentionPolicy": {"enabled": False, "days": 0}}
                ],
            }
        }
        mock_request.return_value = make_response(200, {"name": "to-workspace", **setting})

        result = client.diagnostic_settings.create_or_update(VM, "to-workspace", setting).into_body()

        assert result.properties.metrics[0].retentionPolicy.days == 0
        assert mock_request.call_args.args == (
            "PUT",
            VM_URL + "/providers/Microsoft.Insights/diagnosticSettings/to-workspace",
        )
        assert mock_request.call_args.kwargs["params"] == {"api-version": DIAGNOSTIC_SETTINGS_API_VERSION}
        assert mock_request.call_args.kwargs["json"]["properties"]["logs"] == [
            {"categoryGroup": "allLogs", "enabled": True}
        ]

    def test_setting_name_is_quoted(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(204)
        client.diagnostic_settings.delete(VM, "my setting").send()
        assert mock_request.call_args.args[1].endswith("/diagnosticSettings/my%20setting")

    def test_categories(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "value": [
                    {"name": "AuditEvent", "properties": {"categoryType": "Logs", "categoryGroups": ["audit"]}},
                    {"name": "AllMetrics", "properties": {"categoryType": "Metrics"}},
                ]
            },
        )

        categories = client.diagnostic_settings_category.list(VM).into_pageable().to_list()

        assert [c.properties.categoryType for c in categories] == ["Logs", "Metrics"]
        assert mock_request.call_args.args[1] == VM_URL + "/providers/Microsoft.Insights/diagnosticSettingsCategories"


class TestOperations:
    def test_list(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"value": [{"name": "Microsoft.Insights/Metrics/Read"}]})
        operations = client.operations.list().into_pageable().to_list()
        assert operations[0].name == "Microsoft.Insights/Metrics/Read"
        assert mock_request.call_args.kwargs["params"] == {"api-version": OPERATIONS_API_VERSION}
