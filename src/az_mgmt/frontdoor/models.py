"""Pydantic models for Front Door, its WAF policies and network experiments.

Routing rule configurations are polymorphic on ``@odata.type``; HTTPS
settings of a frontend endpoint are polymorphic on ``certificateSource``.
"""

from datetime import datetime
from enum import StrEnum
from typing import Literal

from pydantic import Field

from az_mgmt.core._models import (
    ArmModel,
    ListResult,
    Resource,
    SubResource,
    discriminated,
    open_enum,
)

_ODATA = "#Microsoft.Azure.FrontDoor.Models."

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class EnabledState(StrEnum):
    Enabled = "Enabled"
    Disabled = "Disabled"


class ResourceState(StrEnum):
    Creating = "Creating"
    Enabling = "Enabling"
    Enabled = "Enabled"
    Disabling = "Disabling"
    Disabled = "Disabled"
    Deleting = "Deleting"


class NetworkExperimentResourceState(StrEnum):
    Creating = "Creating"
    Enabling = "Enabling"
    Enabled = "Enabled"
    Disabling = "Disabling"
    Disabled = "Disabled"
    Deleting = "Deleting"


class FrontDoorProtocol(StrEnum):
    Http = "Http"
    Https = "Https"


class ForwardingProtocol(StrEnum):
    HttpOnly = "HttpOnly"
    HttpsOnly = "HttpsOnly"
    MatchRequest = "MatchRequest"


class RedirectType(StrEnum):
    Moved = "Moved"
    Found = "Found"
    TemporaryRedirect = "TemporaryRedirect"
    PermanentRedirect = "PermanentRedirect"


class RedirectProtocol(StrEnum):
    HttpOnly = "HttpOnly"
    HttpsOnly = "HttpsOnly"
    MatchRequest = "MatchRequest"


class QueryParameterStripDirective(StrEnum):
    StripNone = "StripNone"
    StripAll = "StripAll"
    StripOnly = "StripOnly"
    StripAllExcept = "StripAllExcept"


class HealthProbeMethod(StrEnum):
    GET = "GET"
    HEAD = "HEAD"


class FrontDoorCertificateSource(StrEnum):
    AzureKeyVault = "AzureKeyVault"
    FrontDoor = "FrontDoor"


class MinimumTlsVersion(StrEnum):
    TLS1_0 = "1.0"
    TLS1_2 = "1.2"


class CustomHttpsProvisioningState(StrEnum):
    Enabling = "Enabling"
    Enabled = "Enabled"
    Disabling = "Disabling"
    Disabled = "Disabled"
    Failed = "Failed"


class HeaderActionType(StrEnum):
    Append = "Append"
    Delete = "Delete"
    Overwrite = "Overwrite"


class RulesEngineMatchVariable(StrEnum):
    IsMobile = "IsMobile"
    RemoteAddr = "RemoteAddr"
    RequestMethod = "RequestMethod"
    QueryString = "QueryString"
    PostArgs = "PostArgs"
    RequestUri = "RequestUri"
    RequestPath = "RequestPath"
    RequestFilename = "RequestFilename"
    RequestFilenameExtension = "RequestFilenameExtension"
    RequestHeader = "RequestHeader"
    RequestBody = "RequestBody"
    RequestScheme = "RequestScheme"


class RulesEngineOperator(StrEnum):
    Any = "Any"
    IPMatch = "IPMatch"
    GeoMatch = "GeoMatch"
    Equal = "Equal"
    Contains = "Contains"
    LessThan = "LessThan"
    GreaterThan = "GreaterThan"
    LessThanOrEqual = "LessThanOrEqual"
    GreaterThanOrEqual = "GreaterThanOrEqual"
    BeginsWith = "BeginsWith"
    EndsWith = "EndsWith"


class Transform(StrEnum):
    Lowercase = "Lowercase"
    Uppercase = "Uppercase"
    Trim = "Trim"
    UrlDecode = "UrlDecode"
    UrlEncode = "UrlEncode"
    RemoveNulls = "RemoveNulls"


class MatchProcessingBehavior(StrEnum):
    Continue = "Continue"
    Stop = "Stop"


class PolicyMode(StrEnum):
    Prevention = "Prevention"
    Detection = "Detection"


class ActionType(StrEnum):
    Allow = "Allow"
    Block = "Block"
    Log = "Log"
    Redirect = "Redirect"


class RuleType(StrEnum):
    MatchRule = "MatchRule"
    RateLimitRule = "RateLimitRule"


class MatchVariable(StrEnum):
    RemoteAddr = "RemoteAddr"
    RequestMethod = "RequestMethod"
    QueryString = "QueryString"
    PostArgs = "PostArgs"
    RequestUri = "RequestUri"
    RequestHeader = "RequestHeader"
    RequestBody = "RequestBody"
    Cookies = "Cookies"
    SocketAddr = "SocketAddr"


class Operator(StrEnum):
    Any = "Any"
    IPMatch = "IPMatch"
    GeoMatch = "GeoMatch"
    Equal = "Equal"
    Contains = "Contains"
    LessThan = "LessThan"
    GreaterThan = "GreaterThan"
    LessThanOrEqual = "LessThanOrEqual"
    GreaterThanOrEqual = "GreaterThanOrEqual"
    BeginsWith = "BeginsWith"
    EndsWith = "EndsWith"
    RegEx = "RegEx"


class ManagedRuleExclusionMatchVariable(StrEnum):
    RequestHeaderNames = "RequestHeaderNames"
    RequestCookieNames = "RequestCookieNames"
    QueryStringArgNames = "QueryStringArgNames"
    RequestBodyPostArgNames = "RequestBodyPostArgNames"
    RequestBodyJsonArgNames = "RequestBodyJsonArgNames"


class AggregationInterval(StrEnum):
    Hourly = "Hourly"
    Daily = "Daily"


class TimeseriesType(StrEnum):
    MeasurementCounts = "MeasurementCounts"
    LatencyP50 = "LatencyP50"
    LatencyP75 = "LatencyP75"
    LatencyP95 = "LatencyP95"


class LatencyScorecardAggregationInterval(StrEnum):
    Daily = "Daily"
    Weekly = "Weekly"
    Monthly = "Monthly"


class EndpointType(StrEnum):
    AFD = "AFD"
    AzureRegion = "AzureRegion"
    CDN = "CDN"
    ATM = "ATM"


class FrontDoorResourceType(StrEnum):
    FrontDoors = "Microsoft.Network/frontDoors"
    FrontendEndpoints = "Microsoft.Network/frontDoors/frontendEndpoints"


class Availability(StrEnum):
    Available = "Available"
    Unavailable = "Unavailable"


# ---------------------------------------------------------------------------
# Shared shapes
# ---------------------------------------------------------------------------


class NetworkResource(Resource):
    """Microsoft.Network resources carry an optional location and tags."""

    location: str | None = None
    tags: dict[str, str] | None = None


class TagsObject(ArmModel):
    tags: dict[str, str] | None = None


class PurgeParameters(ArmModel):
    contentPaths: list[str]


class ValidateCustomDomainInput(ArmModel):
    hostName: str


class ValidateCustomDomainOutput(ArmModel):
    customDomainValidated: bool | None = None
    reason: str | None = None
    message: str | None = None


class CheckNameAvailabilityInput(ArmModel):
    name: str
    type: open_enum(FrontDoorResourceType)


class CheckNameAvailabilityOutput(ArmModel):
    nameAvailability: open_enum(Availability) | None = None
    reason: str | None = None
    message: str | None = None


# ---------------------------------------------------------------------------
# Route configuration
# ---------------------------------------------------------------------------


class CacheConfiguration(ArmModel):
    queryParameterStripDirective: open_enum(QueryParameterStripDirective) | None = None
    queryParameters: str | None = None
    dynamicCompression: open_enum(EnabledState) | None = None
    cacheDuration: str | None = None


class RouteConfiguration(ArmModel):
    """Base of the routing rule configurations; unknown kinds keep their fields."""

    odataType: str = Field(alias="@odata.type")


class ForwardingConfiguration(RouteConfiguration):
    odataType: Literal["#Microsoft.Azure.FrontDoor.Models.FrontdoorForwardingConfiguration"] = Field(
        default=_ODATA + "FrontdoorForwardingConfiguration", alias="@odata.type"
    )
    customForwardingPath: str | None = None
    forwardingProtocol: open_enum(ForwardingProtocol) | None = None
    cacheConfiguration: CacheConfiguration | None = None
    backendPool: SubResource | None = None


class RedirectConfiguration(RouteConfiguration):
    odataType: Literal["#Microsoft.Azure.FrontDoor.Models.FrontdoorRedirectConfiguration"] = Field(
        default=_ODATA + "FrontdoorRedirectConfiguration", alias="@odata.type"
    )
    redirectType: open_enum(RedirectType) | None = None
    redirectProtocol: open_enum(RedirectProtocol) | None = None
    customHost: str | None = None
    customPath: str | None = None
    customFragment: str | None = None
    customQueryString: str | None = None


AnyRouteConfiguration = discriminated(
    "@odata.type",
    {
        _ODATA + "FrontdoorForwardingConfiguration": ForwardingConfiguration,
        _ODATA + "FrontdoorRedirectConfiguration": RedirectConfiguration,
    },
    RouteConfiguration,
    attr="odataType",
)

# ---------------------------------------------------------------------------
# Rules engines
# ---------------------------------------------------------------------------


class HeaderAction(ArmModel):
    headerActionType: open_enum(HeaderActionType)
    headerName: str
    value: str | None = None


class RulesEngineAction(ArmModel):
    requestHeaderActions: list[HeaderAction] | None = None
    responseHeaderActions: list[HeaderAction] | None = None
    routeConfigurationOverride: AnyRouteConfiguration | None = None


class RulesEngineMatchCondition(ArmModel):
    rulesEngineMatchVariable: open_enum(RulesEngineMatchVariable)
    selector: str | None = None
    rulesEngineOperator: open_enum(RulesEngineOperator)
    negateCondition: bool | None = None
    rulesEngineMatchValue: list[str]
    transforms: list[open_enum(Transform)] | None = None


class RulesEngineRule(ArmModel):
    name: str
    priority: int
    action: RulesEngineAction
    matchConditions: list[RulesEngineMatchCondition] | None = None
    matchProcessingBehavior: open_enum(MatchProcessingBehavior) | None = None


class RulesEngineProperties(ArmModel):
    rules: list[RulesEngineRule] | None = None
    resourceState: open_enum(ResourceState) | None = None


class RulesEngine(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    properties: RulesEngineProperties | None = None


RulesEngineListResult = ListResult[RulesEngine]

# ---------------------------------------------------------------------------
# Front Door
# ---------------------------------------------------------------------------


class RoutingRuleProperties(ArmModel):
    frontendEndpoints: list[SubResource] | None = None
    acceptedProtocols: list[open_enum(FrontDoorProtocol)] | None = None
    patternsToMatch: list[str] | None = None
    enabledState: open_enum(EnabledState) | None = None
    routeConfiguration: AnyRouteConfiguration | None = None
    rulesEngine: SubResource | None = None
    webApplicationFirewallPolicyLink: SubResource | None = None
    resourceState: open_enum(ResourceState) | None = None


class RoutingRule(SubResource):
    name: str | None = None
    type: str | None = None
    properties: RoutingRuleProperties | None = None


class LoadBalancingSettingsProperties(ArmModel):
    sampleSize: int | None = None
    successfulSamplesRequired: int | None = None
    additionalLatencyMilliseconds: int | None = None
    resourceState: open_enum(ResourceState) | None = None


class LoadBalancingSettingsModel(SubResource):
    name: str | None = None
    type: str | None = None
    properties: LoadBalancingSettingsProperties | None = None


class HealthProbeSettingsProperties(ArmModel):
    path: str | None = None
    protocol: open_enum(FrontDoorProtocol) | None = None
    intervalInSeconds: int | None = None
    healthProbeMethod: open_enum(HealthProbeMethod) | None = None
    enabledState: open_enum(EnabledState) | None = None
    resourceState: open_enum(ResourceState) | None = None


class HealthProbeSettingsModel(SubResource):
    name: str | None = None
    type: str | None = None
    properties: HealthProbeSettingsProperties | None = None


class Backend(ArmModel):
    address: str | None = None
    privateLinkAlias: str | None = None
    privateLinkResourceId: str | None = None
    privateLinkLocation: str | None = None
    privateEndpointStatus: str | None = None
    privateLinkApprovalMessage: str | None = None
    httpPort: int | None = None
    httpsPort: int | None = None
    enabledState: open_enum(EnabledState) | None = None
    priority: int | None = None
    weight: int | None = None
    backendHostHeader: str | None = None


class BackendPoolProperties(ArmModel):
    backends: list[Backend] | None = None
    loadBalancingSettings: SubResource | None = None
    healthProbeSettings: SubResource | None = None
    resourceState: open_enum(ResourceState) | None = None


class BackendPool(SubResource):
    name: str | None = None
    type: str | None = None
    properties: BackendPoolProperties | None = None


class BackendPoolsSettings(ArmModel):
    enforceCertificateNameCheck: open_enum(EnabledState) | None = None
    sendRecvTimeoutSeconds: int | None = None


class KeyVaultCertificateSourceParameters(ArmModel):
    vault: SubResource | None = None
    secretName: str | None = None
    secretVersion: str | None = None


class FrontDoorCertificateSourceParameters(ArmModel):
    certificateType: str | None = None


class CustomHttpsConfiguration(ArmModel):
    certificateSource: open_enum(FrontDoorCertificateSource)
    protocolType: str = "ServerNameIndication"
    minimumTlsVersion: open_enum(MinimumTlsVersion) = MinimumTlsVersion.TLS1_2


class FrontDoorManagedHttpsConfiguration(CustomHttpsConfiguration):
    """HTTPS with a certificate issued and renewed by Front Door."""

    certificateSource: Literal["FrontDoor"] = "FrontDoor"
    frontDoorCertificateSourceParameters: FrontDoorCertificateSourceParameters = Field(
        default_factory=lambda: FrontDoorCertificateSourceParameters(certificateType="Dedicated")
    )


class KeyVaultHttpsConfiguration(CustomHttpsConfiguration):
    """HTTPS with a certificate stored in the caller's Key Vault."""

    certificateSource: Literal["AzureKeyVault"] = "AzureKeyVault"
    keyVaultCertificateSourceParameters: KeyVaultCertificateSourceParameters


AnyCustomHttpsConfiguration = discriminated(
    "certificateSource",
    {"FrontDoor": FrontDoorManagedHttpsConfiguration, "AzureKeyVault": KeyVaultHttpsConfiguration},
    CustomHttpsConfiguration,
)


class FrontendEndpointProperties(ArmModel):
    hostName: str | None = None
    sessionAffinityEnabledState: open_enum(EnabledState) | None = None
    sessionAffinityTtlSeconds: int | None = None
    webApplicationFirewallPolicyLink: SubResource | None = None
    resourceState: open_enum(ResourceState) | None = None
    customHttpsProvisioningState: open_enum(CustomHttpsProvisioningState) | None = None
    customHttpsProvisioningSubstate: str | None = None
    customHttpsConfiguration: AnyCustomHttpsConfiguration | None = None


class FrontendEndpoint(SubResource):
    name: str | None = None
    type: str | None = None
    properties: FrontendEndpointProperties | None = None


class FrontDoorProperties(ArmModel):
    friendlyName: str | None = None
    routingRules: list[RoutingRule] | None = None
    loadBalancingSettings: list[LoadBalancingSettingsModel] | None = None
    healthProbeSettings: list[HealthProbeSettingsModel] | None = None
    backendPools: list[BackendPool] | None = None
    frontendEndpoints: list[FrontendEndpoint] | None = None
    backendPoolsSettings: BackendPoolsSettings | None = None
    enabledState: open_enum(EnabledState) | None = None
    resourceState: open_enum(ResourceState) | None = None
    provisioningState: str | None = None
    cname: str | None = None
    frontdoorId: str | None = None
    rulesEngines: list[RulesEngine] | None = None


class FrontDoor(NetworkResource):
    """A Front Door: frontends, routing rules and backend pools."""

    properties: FrontDoorProperties | None = None


FrontDoorListResult = ListResult[FrontDoor]
FrontendEndpointsListResult = ListResult[FrontendEndpoint]

# ---------------------------------------------------------------------------
# Web application firewall policies
# ---------------------------------------------------------------------------


class PolicySettings(ArmModel):
    enabledState: open_enum(EnabledState) | None = None
    mode: open_enum(PolicyMode) | None = None
    redirectUrl: str | None = None
    customBlockResponseStatusCode: int | None = None
    customBlockResponseBody: str | None = None
    requestBodyCheck: open_enum(EnabledState) | None = None


class MatchCondition(ArmModel):
    matchVariable: open_enum(MatchVariable)
    selector: str | None = None
    operator: open_enum(Operator)
    negateCondition: bool | None = None
    matchValue: list[str]
    transforms: list[open_enum(Transform)] | None = None


class CustomRule(ArmModel):
    name: str | None = None
    priority: int
    enabledState: open_enum(EnabledState) | None = None
    ruleType: open_enum(RuleType)
    rateLimitDurationInMinutes: int | None = None
    rateLimitThreshold: int | None = None
    matchConditions: list[MatchCondition]
    action: open_enum(ActionType)


class CustomRuleList(ArmModel):
    rules: list[CustomRule] | None = None


class ManagedRuleExclusion(ArmModel):
    matchVariable: open_enum(ManagedRuleExclusionMatchVariable)
    selectorMatchOperator: str
    selector: str


class ManagedRuleOverride(ArmModel):
    ruleId: str
    enabledState: open_enum(EnabledState) | None = None
    action: open_enum(ActionType) | None = None
    exclusions: list[ManagedRuleExclusion] | None = None


class ManagedRuleGroupOverride(ArmModel):
    ruleGroupName: str
    exclusions: list[ManagedRuleExclusion] | None = None
    rules: list[ManagedRuleOverride] | None = None


class ManagedRuleSet(ArmModel):
    ruleSetType: str
    ruleSetVersion: str
    ruleSetAction: str | None = None
    exclusions: list[ManagedRuleExclusion] | None = None
    ruleGroupOverrides: list[ManagedRuleGroupOverride] | None = None


class ManagedRuleSetList(ArmModel):
    managedRuleSets: list[ManagedRuleSet] | None = None


class WebApplicationFirewallPolicyProperties(ArmModel):
    policySettings: PolicySettings | None = None
    customRules: CustomRuleList | None = None
    managedRules: ManagedRuleSetList | None = None
    frontendEndpointLinks: list[SubResource] | None = None
    routingRuleLinks: list[SubResource] | None = None
    provisioningState: str | None = None
    resourceState: str | None = None


class Sku(ArmModel):
    name: str | None = None


class WebApplicationFirewallPolicy(NetworkResource):
    """A WAF policy that can be linked to frontend endpoints."""

    properties: WebApplicationFirewallPolicyProperties | None = None
    etag: str | None = None
    sku: Sku | None = None


class ManagedRuleDefinition(ArmModel):
    ruleId: str | None = None
    defaultState: open_enum(EnabledState) | None = None
    defaultAction: open_enum(ActionType) | None = None
    description: str | None = None


class ManagedRuleGroupDefinition(ArmModel):
    ruleGroupName: str | None = None
    description: str | None = None
    rules: list[ManagedRuleDefinition] | None = None


class ManagedRuleSetDefinitionProperties(ArmModel):
    provisioningState: str | None = None
    ruleSetId: str | None = None
    ruleSetType: str | None = None
    ruleSetVersion: str | None = None
    ruleGroups: list[ManagedRuleGroupDefinition] | None = None


class ManagedRuleSetDefinition(NetworkResource):
    properties: ManagedRuleSetDefinitionProperties | None = None


WebApplicationFirewallPolicyList = ListResult[WebApplicationFirewallPolicy]
ManagedRuleSetDefinitionList = ListResult[ManagedRuleSetDefinition]

# ---------------------------------------------------------------------------
# Network experiments
# ---------------------------------------------------------------------------


class ProfileProperties(ArmModel):
    resourceState: open_enum(NetworkExperimentResourceState) | None = None
    enabledState: open_enum(EnabledState) | None = None


class Profile(NetworkResource):
    """A network experiment profile."""

    properties: ProfileProperties | None = None
    etag: str | None = None


class ProfileUpdateProperties(ArmModel):
    enabledState: open_enum(EnabledState) | None = None


class ProfileUpdateModel(ArmModel):
    properties: ProfileUpdateProperties | None = None
    tags: dict[str, str] | None = None


class ExperimentEndpoint(ArmModel):
    name: str | None = None
    endpoint: str | None = None


class ExperimentProperties(ArmModel):
    description: str | None = None
    endpointA: ExperimentEndpoint | None = None
    endpointB: ExperimentEndpoint | None = None
    enabledState: open_enum(EnabledState) | None = None
    resourceState: open_enum(NetworkExperimentResourceState) | None = None
    status: str | None = None
    scriptFileUri: str | None = None


class Experiment(NetworkResource):
    properties: ExperimentProperties | None = None


class ExperimentUpdateProperties(ArmModel):
    description: str | None = None
    enabledState: open_enum(EnabledState) | None = None


class ExperimentUpdateModel(ArmModel):
    tags: dict[str, str] | None = None
    properties: ExperimentUpdateProperties | None = None


class PreconfiguredEndpointProperties(ArmModel):
    description: str | None = None
    endpoint: str | None = None
    endpointType: open_enum(EndpointType) | None = None
    backend: str | None = None


class PreconfiguredEndpoint(NetworkResource):
    properties: PreconfiguredEndpointProperties | None = None


class LatencyMetric(ArmModel):
    name: str | None = None
    endDateTimeUTC: str | None = None
    aValue: float | None = None
    bValue: float | None = None
    delta: float | None = None
    deltaPercent: float | None = None
    aCLower95CI: float | None = None
    aHUpper95CI: float | None = None
    bCLower95CI: float | None = None
    bUpper95CI: float | None = None


class LatencyScorecardProperties(ArmModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    endpointA: str | None = None
    endpointB: str | None = None
    startDateTimeUTC: datetime | None = None
    endDateTimeUTC: datetime | None = None
    country: str | None = None
    latencyMetrics: list[LatencyMetric] | None = None


class LatencyScorecard(NetworkResource):
    properties: LatencyScorecardProperties | None = None


class TimeseriesDataPoint(ArmModel):
    dateTimeUTC: str | None = None
    value: float | None = None


class TimeseriesProperties(ArmModel):
    endpoint: str | None = None
    startDateTimeUTC: str | None = None
    endDateTimeUTC: str | None = None
    aggregationInterval: open_enum(AggregationInterval) | None = None
    timeseriesType: open_enum(TimeseriesType) | None = None
    country: str | None = None
    timeseriesData: list[TimeseriesDataPoint] | None = None


class Timeseries(NetworkResource):
    properties: TimeseriesProperties | None = None


ProfileList = ListResult[Profile]
ExperimentList = ListResult[Experiment]
PreconfiguredEndpointList = ListResult[PreconfiguredEndpoint]
