"""Pydantic models for Azure Monitor metrics, metric alerts and diagnostic settings."""

from datetime import datetime
from enum import StrEnum
from typing import Any, Literal

from pydantic import Field

from az_mgmt.core._models import (
    ArmModel,
    ListResult,
    ProxyResource,
    SystemData,
    TrackedResource,
    discriminated,
    open_enum,
)

_MONITOR = "Microsoft.Azure.Monitor."

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Unit(StrEnum):
    Count = "Count"
    Bytes = "Bytes"
    Seconds = "Seconds"
    CountPerSecond = "CountPerSecond"
    BytesPerSecond = "BytesPerSecond"
    Percent = "Percent"
    MilliSeconds = "MilliSeconds"
    ByteSeconds = "ByteSeconds"
    Unspecified = "Unspecified"
    Cores = "Cores"
    MilliCores = "MilliCores"
    NanoCores = "NanoCores"
    BitsPerSecond = "BitsPerSecond"


class AggregationType(StrEnum):
    None_ = "None"
    Average = "Average"
    Count = "Count"
    Minimum = "Minimum"
    Maximum = "Maximum"
    Total = "Total"


class MetricClass(StrEnum):
    Availability = "Availability"
    Transactions = "Transactions"
    Errors = "Errors"
    Latency = "Latency"
    Saturation = "Saturation"


class ResultType(StrEnum):
    Data = "Data"
    Metadata = "Metadata"


class NamespaceClassification(StrEnum):
    Platform = "Platform"
    Custom = "Custom"
    Qos = "Qos"


class BaselineSensitivity(StrEnum):
    Low = "Low"
    Medium = "Medium"
    High = "High"


class CategoryType(StrEnum):
    Metrics = "Metrics"
    Logs = "Logs"


class CriterionType(StrEnum):
    StaticThresholdCriterion = "StaticThresholdCriterion"
    DynamicThresholdCriterion = "DynamicThresholdCriterion"


class AggregationTypeEnum(StrEnum):
    Average = "Average"
    Count = "Count"
    Minimum = "Minimum"
    Maximum = "Maximum"
    Total = "Total"


class StaticOperator(StrEnum):
    Equals = "Equals"
    GreaterThan = "GreaterThan"
    GreaterThanOrEqual = "GreaterThanOrEqual"
    LessThan = "LessThan"
    LessThanOrEqual = "LessThanOrEqual"


class DynamicThresholdOperator(StrEnum):
    GreaterThan = "GreaterThan"
    LessThan = "LessThan"
    GreaterOrLessThan = "GreaterOrLessThan"


class DynamicThresholdSensitivity(StrEnum):
    Low = "Low"
    Medium = "Medium"
    High = "High"


# ---------------------------------------------------------------------------
# Metric values
# ---------------------------------------------------------------------------


class LocalizableString(ArmModel):
    value: str
    localizedValue: str | None = None


class MetadataValue(ArmModel):
    """A dimension name and the value a time series is split on."""

    name: LocalizableString | None = None
    value: str | None = None


class MetricValue(ArmModel):
    timeStamp: datetime
    average: float | None = None
    minimum: float | None = None
    maximum: float | None = None
    total: float | None = None
    count: float | None = None


class TimeSeriesElement(ArmModel):
    metadatavalues: list[MetadataValue] = Field(default_factory=list)
    data: list[MetricValue] = Field(default_factory=list)


class Metric(ArmModel):
    id: str
    type: str
    name: LocalizableString
    displayDescription: str | None = None
    errorCode: str | None = None
    errorMessage: str | None = None
    unit: open_enum(Unit)
    timeseries: list[TimeSeriesElement] = Field(default_factory=list)


class Response(ArmModel):
    """Result of a metrics query: one :class:`Metric` per requested name."""

    cost: float | None = None
    timespan: str
    interval: str | None = None
    namespace: str | None = None
    resourceregion: str | None = None
    value: list[Metric] = Field(default_factory=list)


class SubscriptionScopeMetricsRequestBodyParameters(ArmModel):
    timespan: str | None = None
    interval: str | None = None
    metricNames: str | None = None
    aggregation: str | None = None
    filter: str | None = None
    top: int | None = None
    orderBy: str | None = None
    rollUpBy: str | None = None
    resultType: open_enum(ResultType) | None = None
    metricNamespace: str | None = None
    autoAdjustTimegrain: bool | None = None
    validateDimensions: bool | None = None


# ---------------------------------------------------------------------------
# Metric metadata
# ---------------------------------------------------------------------------


class MetricAvailability(ArmModel):
    timeGrain: str | None = None
    retention: str | None = None


class MetricDefinition(ArmModel):
    id: str | None = None
    isDimensionRequired: bool | None = None
    resourceId: str | None = None
    namespace: str | None = None
    name: LocalizableString | None = None
    displayDescription: str | None = None
    category: str | None = None
    metricClass: open_enum(MetricClass) | None = None
    unit: open_enum(Unit) | None = None
    primaryAggregationType: open_enum(AggregationType) | None = None
    supportedAggregationTypes: list[open_enum(AggregationType)] = Field(default_factory=list)
    metricAvailabilities: list[MetricAvailability] = Field(default_factory=list)
    dimensions: list[LocalizableString] = Field(default_factory=list)


class MetricNamespaceName(ArmModel):
    metricNamespaceName: str | None = None


class MetricNamespace(ArmModel):
    id: str | None = None
    type: str | None = None
    name: str | None = None
    classification: open_enum(NamespaceClassification) | None = None
    properties: MetricNamespaceName | None = None


class BaselineMetadata(ArmModel):
    name: str
    value: str


class MetricSingleDimension(ArmModel):
    name: str
    value: str


class SingleBaseline(ArmModel):
    sensitivity: open_enum(BaselineSensitivity)
    lowThresholds: list[float]
    highThresholds: list[float]


class TimeSeriesBaseline(ArmModel):
    aggregation: str
    dimensions: list[MetricSingleDimension] = Field(default_factory=list)
    timestamps: list[datetime]
    data: list[SingleBaseline]
    metadataValues: list[BaselineMetadata] = Field(default_factory=list)


class MetricBaselinesProperties(ArmModel):
    timespan: str
    interval: str
    namespace: str | None = None
    baselines: list[TimeSeriesBaseline]


class SingleMetricBaseline(ArmModel):
    """Upper and lower thresholds learned for one metric."""

    id: str
    type: str
    name: str
    properties: MetricBaselinesProperties


MetricDefinitionCollection = ListResult[MetricDefinition]
MetricNamespaceCollection = ListResult[MetricNamespace]
MetricBaselinesResponse = ListResult[SingleMetricBaseline]

# ---------------------------------------------------------------------------
# Metric alerts
# ---------------------------------------------------------------------------


class MetricDimension(ArmModel):
    name: str
    operator: str
    values: list[str]


class MultiMetricCriteria(ArmModel):
    """One condition of a multi-metric alert; unknown criterion types keep their fields."""

    criterionType: open_enum(CriterionType)
    name: str
    metricName: str
    metricNamespace: str | None = None
    timeAggregation: open_enum(AggregationTypeEnum)
    dimensions: list[MetricDimension] = Field(default_factory=list)
    skipMetricValidation: bool | None = None


class MetricCriteria(MultiMetricCriteria):
    criterionType: Literal["StaticThresholdCriterion"] = "StaticThresholdCriterion"
    operator: open_enum(StaticOperator)
    threshold: float


class DynamicThresholdFailingPeriods(ArmModel):
    numberOfEvaluationPeriods: float
    minFailingPeriodsToAlert: float


class DynamicMetricCriteria(MultiMetricCriteria):
    criterionType: Literal["DynamicThresholdCriterion"] = "DynamicThresholdCriterion"
    operator: open_enum(DynamicThresholdOperator)
    alertSensitivity: open_enum(DynamicThresholdSensitivity)
    failingPeriods: DynamicThresholdFailingPeriods
    ignoreDataBefore: datetime | None = None


AnyMultiMetricCriteria = discriminated(
    "criterionType",
    {"StaticThresholdCriterion": MetricCriteria, "DynamicThresholdCriterion": DynamicMetricCriteria},
    MultiMetricCriteria,
)


class MetricAlertCriteria(ArmModel):
    odataType: str = Field(alias="odata.type")


class MetricAlertSingleResourceMultipleMetricCriteria(MetricAlertCriteria):
    """Up to five static-threshold conditions on a single resource."""

    odataType: Literal["Microsoft.Azure.Monitor.SingleResourceMultipleMetricCriteria"] = Field(
        default=_MONITOR + "SingleResourceMultipleMetricCriteria", alias="odata.type"
    )
    allOf: list[MetricCriteria] = Field(default_factory=list)


class MetricAlertMultipleResourceMultipleMetricCriteria(MetricAlertCriteria):
    odataType: Literal["Microsoft.Azure.Monitor.MultipleResourceMultipleMetricCriteria"] = Field(
        default=_MONITOR + "MultipleResourceMultipleMetricCriteria", alias="odata.type"
    )
    allOf: list[AnyMultiMetricCriteria] = Field(default_factory=list)


class WebtestLocationAvailabilityCriteria(MetricAlertCriteria):
    odataType: Literal["Microsoft.Azure.Monitor.WebtestLocationAvailabilityCriteria"] = Field(
        default=_MONITOR + "WebtestLocationAvailabilityCriteria", alias="odata.type"
    )
    webTestId: str
    componentId: str
    failedLocationCount: float


AnyMetricAlertCriteria = discriminated(
    "odata.type",
    {
        _MONITOR + "SingleResourceMultipleMetricCriteria": MetricAlertSingleResourceMultipleMetricCriteria,
        _MONITOR + "MultipleResourceMultipleMetricCriteria": MetricAlertMultipleResourceMultipleMetricCriteria,
        _MONITOR + "WebtestLocationAvailabilityCriteria": WebtestLocationAvailabilityCriteria,
    },
    MetricAlertCriteria,
    attr="odataType",
)


class MetricAlertAction(ArmModel):
    actionGroupId: str | None = None
    webHookProperties: dict[str, str] | None = None


class MetricAlertProperties(ArmModel):
    description: str | None = None
    severity: int
    enabled: bool
    scopes: list[str] = Field(default_factory=list)
    evaluationFrequency: str
    windowSize: str
    targetResourceType: str | None = None
    targetResourceRegion: str | None = None
    criteria: AnyMetricAlertCriteria
    autoMitigate: bool | None = None
    actions: list[MetricAlertAction] = Field(default_factory=list)
    lastUpdatedTime: datetime | None = None
    isMigrated: bool | None = None


class MetricAlertResource(TrackedResource):
    """A metric alert rule."""

    properties: MetricAlertProperties


class MetricAlertPropertiesPatch(ArmModel):
    description: str | None = None
    severity: int | None = None
    enabled: bool | None = None
    scopes: list[str] | None = None
    evaluationFrequency: str | None = None
    windowSize: str | None = None
    targetResourceType: str | None = None
    targetResourceRegion: str | None = None
    criteria: AnyMetricAlertCriteria | None = None
    autoMitigate: bool | None = None
    actions: list[MetricAlertAction] | None = None


class MetricAlertResourcePatch(ArmModel):
    tags: dict[str, str] | None = None
    properties: MetricAlertPropertiesPatch | None = None


class MetricAlertStatusProperties(ArmModel):
    dimensions: dict[str, Any] | None = None
    status: str | None = None
    timestamp: datetime | None = None


class MetricAlertStatus(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    properties: MetricAlertStatusProperties | None = None


class MetricAlertStatusCollection(ArmModel):
    value: list[MetricAlertStatus] = Field(default_factory=list)


MetricAlertResourceCollection = ListResult[MetricAlertResource]

# ---------------------------------------------------------------------------
# Diagnostic settings
# ---------------------------------------------------------------------------


class RetentionPolicy(ArmModel):
    enabled: bool
    days: int


class MetricSettings(ArmModel):
    timeGrain: str | None = None
    category: str | None = None
    enabled: bool
    retentionPolicy: RetentionPolicy | None = None


class LogSettings(ArmModel):
    category: str | None = None
    categoryGroup: str | None = None
    enabled: bool
    retentionPolicy: RetentionPolicy | None = None


class DiagnosticSettings(ArmModel):
    storageAccountId: str | None = None
    serviceBusRuleId: str | None = None
    eventHubAuthorizationRuleId: str | None = None
    eventHubName: str | None = None
    metrics: list[MetricSettings] = Field(default_factory=list)
    logs: list[LogSettings] = Field(default_factory=list)
    workspaceId: str | None = None
    marketplacePartnerId: str | None = None
    logAnalyticsDestinationType: str | None = None


class DiagnosticSettingsResource(ProxyResource):
    """Where a resource's logs and metrics are exported."""

    properties: DiagnosticSettings | None = None
    systemData: SystemData | None = None


class DiagnosticSettingsCategory(ArmModel):
    categoryType: open_enum(CategoryType) | None = None
    categoryGroups: list[str] = Field(default_factory=list)


class DiagnosticSettingsCategoryResource(ProxyResource):
    properties: DiagnosticSettingsCategory | None = None
    systemData: SystemData | None = None


DiagnosticSettingsResourceCollection = ListResult[DiagnosticSettingsResource]
DiagnosticSettingsCategoryResourceCollection = ListResult[DiagnosticSettingsCategoryResource]
