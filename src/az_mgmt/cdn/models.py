"""Pydantic models for Microsoft.Cdn (api-version 2019-12-31).

Delivery rule conditions and actions are polymorphic on ``name``; their
``parameters`` carry a constant ``@odata.type``.  Custom domain HTTPS
settings are polymorphic on ``certificateSource``.
"""

from enum import StrEnum
from typing import Literal

from pydantic import Field

from az_mgmt.core._models import (
    ArmModel,
    ListResult,
    ProxyResource,
    TrackedResource,
    discriminated,
    open_enum,
)

_ODATA = "#Microsoft.Azure.Cdn.Models."

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SkuName(StrEnum):
    Standard_Verizon = "Standard_Verizon"
    Premium_Verizon = "Premium_Verizon"
    Custom_Verizon = "Custom_Verizon"
    Standard_Akamai = "Standard_Akamai"
    Standard_ChinaCdn = "Standard_ChinaCdn"
    Standard_Microsoft = "Standard_Microsoft"
    Premium_ChinaCdn = "Premium_ChinaCdn"


class ProfileResourceState(StrEnum):
    Creating = "Creating"
    Active = "Active"
    Deleting = "Deleting"
    Disabled = "Disabled"


class EndpointResourceState(StrEnum):
    Creating = "Creating"
    Deleting = "Deleting"
    Running = "Running"
    Starting = "Starting"
    Stopped = "Stopped"
    Stopping = "Stopping"


class OriginResourceState(StrEnum):
    Creating = "Creating"
    Active = "Active"
    Deleting = "Deleting"


class OptimizationType(StrEnum):
    GeneralWebDelivery = "GeneralWebDelivery"
    GeneralMediaStreaming = "GeneralMediaStreaming"
    VideoOnDemandMediaStreaming = "VideoOnDemandMediaStreaming"
    LargeFileDownload = "LargeFileDownload"
    DynamicSiteAcceleration = "DynamicSiteAcceleration"


class QueryStringCachingBehavior(StrEnum):
    IgnoreQueryString = "IgnoreQueryString"
    BypassCaching = "BypassCaching"
    UseQueryString = "UseQueryString"
    NotSet = "NotSet"


class GeoFilterAction(StrEnum):
    Block = "Block"
    Allow = "Allow"


class ProbeRequestType(StrEnum):
    NotSet = "NotSet"
    GET = "GET"
    HEAD = "HEAD"


class ProbeProtocol(StrEnum):
    NotSet = "NotSet"
    Http = "Http"
    Https = "Https"


class ResponseBasedDetectedErrorTypes(StrEnum):
    None_ = "None"
    TcpErrorsOnly = "TcpErrorsOnly"
    TcpAndHttpErrors = "TcpAndHttpErrors"


class CustomHttpsProvisioningState(StrEnum):
    Enabling = "Enabling"
    Enabled = "Enabled"
    Disabling = "Disabling"
    Disabled = "Disabled"
    Failed = "Failed"


class CertificateSource(StrEnum):
    AzureKeyVault = "AzureKeyVault"
    Cdn = "Cdn"


class ProtocolType(StrEnum):
    ServerNameIndication = "ServerNameIndication"
    IPBased = "IPBased"


class MinimumTlsVersion(StrEnum):
    None_ = "None"
    TLS10 = "TLS10"
    TLS12 = "TLS12"


class ResourceType(StrEnum):
    Endpoints = "Microsoft.Cdn/Profiles/Endpoints"


class Transform(StrEnum):
    Lowercase = "Lowercase"
    Uppercase = "Uppercase"
    Trim = "Trim"
    UrlDecode = "UrlDecode"
    UrlEncode = "UrlEncode"
    RemoveNulls = "RemoveNulls"


class MatchOperator(StrEnum):
    """Operators shared by the string-valued match conditions."""

    Any = "Any"
    Equal = "Equal"
    Contains = "Contains"
    BeginsWith = "BeginsWith"
    EndsWith = "EndsWith"
    LessThan = "LessThan"
    LessThanOrEqual = "LessThanOrEqual"
    GreaterThan = "GreaterThan"
    GreaterThanOrEqual = "GreaterThanOrEqual"


class RemoteAddressOperator(StrEnum):
    Any = "Any"
    IPMatch = "IPMatch"
    GeoMatch = "GeoMatch"


class ConditionName(StrEnum):
    RemoteAddress = "RemoteAddress"
    RequestMethod = "RequestMethod"
    QueryString = "QueryString"
    PostArgs = "PostArgs"
    RequestUri = "RequestUri"
    RequestHeader = "RequestHeader"
    RequestBody = "RequestBody"
    RequestScheme = "RequestScheme"
    UrlPath = "UrlPath"
    UrlFileExtension = "UrlFileExtension"
    UrlFileName = "UrlFileName"
    HttpVersion = "HttpVersion"
    Cookies = "Cookies"
    IsDevice = "IsDevice"


class ActionName(StrEnum):
    CacheExpiration = "CacheExpiration"
    CacheKeyQueryString = "CacheKeyQueryString"
    ModifyRequestHeader = "ModifyRequestHeader"
    ModifyResponseHeader = "ModifyResponseHeader"
    UrlRedirect = "UrlRedirect"
    UrlRewrite = "UrlRewrite"
    OriginGroupOverride = "OriginGroupOverride"


class CacheBehavior(StrEnum):
    BypassCache = "BypassCache"
    Override = "Override"
    SetIfMissing = "SetIfMissing"


class QueryStringBehavior(StrEnum):
    Include = "Include"
    IncludeAll = "IncludeAll"
    Exclude = "Exclude"
    ExcludeAll = "ExcludeAll"


class HeaderAction(StrEnum):
    Append = "Append"
    Overwrite = "Overwrite"
    Delete = "Delete"


class RedirectType(StrEnum):
    Moved = "Moved"
    Found = "Found"
    TemporaryRedirect = "TemporaryRedirect"
    PermanentRedirect = "PermanentRedirect"


class DestinationProtocol(StrEnum):
    MatchRequest = "MatchRequest"
    Http = "Http"
    Https = "Https"


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


class Sku(ArmModel):
    name: open_enum(SkuName) | None = None


class ProfileProperties(ArmModel):
    resourceState: open_enum(ProfileResourceState) | None = None
    provisioningState: str | None = None


class Profile(TrackedResource):
    """A CDN profile: a collection of endpoints sharing a pricing tier."""

    sku: Sku
    properties: ProfileProperties | None = None


class ProfileUpdateParameters(ArmModel):
    tags: dict[str, str] | None = None


class SsoUri(ArmModel):
    ssoUriValue: str | None = None


class SupportedOptimizationTypesListResult(ArmModel):
    supportedOptimizationTypes: list[open_enum(OptimizationType)] | None = None


class ResourceUsage(ArmModel):
    resourceType: str | None = None
    unit: str | None = None
    currentValue: int | None = None
    limit: int | None = None


ProfileListResult = ListResult[Profile]
ResourceUsageListResult = ListResult[ResourceUsage]

# ---------------------------------------------------------------------------
# Origins and origin groups
# ---------------------------------------------------------------------------


class ResourceReference(ArmModel):
    id: str | None = None


class HealthProbeParameters(ArmModel):
    probePath: str | None = None
    probeRequestType: open_enum(ProbeRequestType) | None = None
    probeProtocol: open_enum(ProbeProtocol) | None = None
    probeIntervalInSeconds: int | None = None


class HttpErrorRangeParameters(ArmModel):
    begin: int | None = None
    end: int | None = None


class ResponseBasedOriginErrorDetectionParameters(ArmModel):
    responseBasedDetectedErrorTypes: open_enum(ResponseBasedDetectedErrorTypes) | None = None
    responseBasedFailoverThresholdPercentage: int | None = None
    httpErrorRanges: list[HttpErrorRangeParameters] | None = None


class OriginUpdatePropertiesParameters(ArmModel):
    hostName: str | None = None
    httpPort: int | None = None
    httpsPort: int | None = None
    originHostHeader: str | None = None
    priority: int | None = None
    weight: int | None = None
    enabled: bool | None = None


class OriginProperties(OriginUpdatePropertiesParameters):
    resourceState: open_enum(OriginResourceState) | None = None
    provisioningState: str | None = None


class Origin(ProxyResource):
    properties: OriginProperties | None = None


class OriginUpdateParameters(ArmModel):
    properties: OriginUpdatePropertiesParameters | None = None


class OriginGroupUpdatePropertiesParameters(ArmModel):
    healthProbeSettings: HealthProbeParameters | None = None
    origins: list[ResourceReference] | None = None
    trafficRestorationTimeToHealedOrNewEndpointsInMinutes: int | None = None
    responseBasedOriginErrorDetectionSettings: ResponseBasedOriginErrorDetectionParameters | None = None


class OriginGroupProperties(OriginGroupUpdatePropertiesParameters):
    resourceState: open_enum(OriginResourceState) | None = None
    provisioningState: str | None = None


class OriginGroup(ProxyResource):
    properties: OriginGroupProperties | None = None


class OriginGroupUpdateParameters(ArmModel):
    properties: OriginGroupUpdatePropertiesParameters | None = None


class DeepCreatedOriginProperties(ArmModel):
    hostName: str
    httpPort: int | None = None
    httpsPort: int | None = None
    originHostHeader: str | None = None
    priority: int | None = None
    weight: int | None = None
    enabled: bool | None = None


class DeepCreatedOrigin(ArmModel):
    """An origin created together with its endpoint."""

    name: str
    properties: DeepCreatedOriginProperties | None = None


class DeepCreatedOriginGroupProperties(ArmModel):
    healthProbeSettings: HealthProbeParameters | None = None
    origins: list[ResourceReference]
    trafficRestorationTimeToHealedOrNewEndpointsInMinutes: int | None = None
    responseBasedOriginErrorDetectionSettings: ResponseBasedOriginErrorDetectionParameters | None = None


class DeepCreatedOriginGroup(ArmModel):
    name: str
    properties: DeepCreatedOriginGroupProperties | None = None


OriginListResult = ListResult[Origin]
OriginGroupListResult = ListResult[OriginGroup]

# ---------------------------------------------------------------------------
# Delivery rule conditions
# ---------------------------------------------------------------------------


class MatchConditionParameters(ArmModel):
    """Fields common to every match condition's parameters."""

    odataType: str | None = Field(default=None, alias="@odata.type")
    operator: open_enum(MatchOperator)
    negateCondition: bool | None = None
    matchValues: list[str] | None = None
    transforms: list[open_enum(Transform)] | None = None


class RemoteAddressMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleRemoteAddressConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleRemoteAddressConditionParameters", alias="@odata.type"
    )
    operator: open_enum(RemoteAddressOperator)


class RequestMethodMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleRequestMethodConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleRequestMethodConditionParameters", alias="@odata.type"
    )


class QueryStringMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleQueryStringConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleQueryStringConditionParameters", alias="@odata.type"
    )


class PostArgsMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRulePostArgsConditionParameters"] = Field(
        default=_ODATA + "DeliveryRulePostArgsConditionParameters", alias="@odata.type"
    )
    selector: str | None = None


class RequestUriMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleRequestUriConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleRequestUriConditionParameters", alias="@odata.type"
    )


class RequestHeaderMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleRequestHeaderConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleRequestHeaderConditionParameters", alias="@odata.type"
    )
    selector: str | None = None


class RequestBodyMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleRequestBodyConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleRequestBodyConditionParameters", alias="@odata.type"
    )


class RequestSchemeMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleRequestSchemeConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleRequestSchemeConditionParameters", alias="@odata.type"
    )


class UrlPathMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleUrlPathMatchConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleUrlPathMatchConditionParameters", alias="@odata.type"
    )


class UrlFileExtensionMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleUrlFileExtensionMatchConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleUrlFileExtensionMatchConditionParameters", alias="@odata.type"
    )


class UrlFileNameMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleUrlFilenameConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleUrlFilenameConditionParameters", alias="@odata.type"
    )


class HttpVersionMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleHttpVersionConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleHttpVersionConditionParameters", alias="@odata.type"
    )


class CookiesMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleCookiesConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleCookiesConditionParameters", alias="@odata.type"
    )
    selector: str | None = None


class IsDeviceMatchConditionParameters(MatchConditionParameters):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleIsDeviceConditionParameters"] = Field(
        default=_ODATA + "DeliveryRuleIsDeviceConditionParameters", alias="@odata.type"
    )


class DeliveryRuleCondition(ArmModel):
    """A condition of a delivery rule; unknown kinds keep their raw parameters."""

    name: open_enum(ConditionName)
    parameters: dict | None = None


class DeliveryRuleRemoteAddressCondition(DeliveryRuleCondition):
    name: Literal["RemoteAddress"] = "RemoteAddress"
    parameters: RemoteAddressMatchConditionParameters


class DeliveryRuleRequestMethodCondition(DeliveryRuleCondition):
    name: Literal["RequestMethod"] = "RequestMethod"
    parameters: RequestMethodMatchConditionParameters


class DeliveryRuleQueryStringCondition(DeliveryRuleCondition):
    name: Literal["QueryString"] = "QueryString"
    parameters: QueryStringMatchConditionParameters


class DeliveryRulePostArgsCondition(DeliveryRuleCondition):
    name: Literal["PostArgs"] = "PostArgs"
    parameters: PostArgsMatchConditionParameters


class DeliveryRuleRequestUriCondition(DeliveryRuleCondition):
    name: Literal["RequestUri"] = "RequestUri"
    parameters: RequestUriMatchConditionParameters


class DeliveryRuleRequestHeaderCondition(DeliveryRuleCondition):
    name: Literal["RequestHeader"] = "RequestHeader"
    parameters: RequestHeaderMatchConditionParameters


class DeliveryRuleRequestBodyCondition(DeliveryRuleCondition):
    name: Literal["RequestBody"] = "RequestBody"
    parameters: RequestBodyMatchConditionParameters


class DeliveryRuleRequestSchemeCondition(DeliveryRuleCondition):
    name: Literal["RequestScheme"] = "RequestScheme"
    parameters: RequestSchemeMatchConditionParameters


class DeliveryRuleUrlPathCondition(DeliveryRuleCondition):
    name: Literal["UrlPath"] = "UrlPath"
    parameters: UrlPathMatchConditionParameters


class DeliveryRuleUrlFileExtensionCondition(DeliveryRuleCondition):
    name: Literal["UrlFileExtension"] = "UrlFileExtension"
    parameters: UrlFileExtensionMatchConditionParameters


class DeliveryRuleUrlFileNameCondition(DeliveryRuleCondition):
    name: Literal["UrlFileName"] = "UrlFileName"
    parameters: UrlFileNameMatchConditionParameters


class DeliveryRuleHttpVersionCondition(DeliveryRuleCondition):
    name: Literal["HttpVersion"] = "HttpVersion"
    parameters: HttpVersionMatchConditionParameters


class DeliveryRuleCookiesCondition(DeliveryRuleCondition):
    name: Literal["Cookies"] = "Cookies"
    parameters: CookiesMatchConditionParameters


class DeliveryRuleIsDeviceCondition(DeliveryRuleCondition):
    name: Literal["IsDevice"] = "IsDevice"
    parameters: IsDeviceMatchConditionParameters


AnyDeliveryRuleCondition = discriminated(
    "name",
    {
        "RemoteAddress": DeliveryRuleRemoteAddressCondition,
        "RequestMethod": DeliveryRuleRequestMethodCondition,
        "QueryString": DeliveryRuleQueryStringCondition,
        "PostArgs": DeliveryRulePostArgsCondition,
        "RequestUri": DeliveryRuleRequestUriCondition,
        "RequestHeader": DeliveryRuleRequestHeaderCondition,
        "RequestBody": DeliveryRuleRequestBodyCondition,
        "RequestScheme": DeliveryRuleRequestSchemeCondition,
        "UrlPath": DeliveryRuleUrlPathCondition,
        "UrlFileExtension": DeliveryRuleUrlFileExtensionCondition,
        "UrlFileName": DeliveryRuleUrlFileNameCondition,
        "HttpVersion": DeliveryRuleHttpVersionCondition,
        "Cookies": DeliveryRuleCookiesCondition,
        "IsDevice": DeliveryRuleIsDeviceCondition,
    },
    DeliveryRuleCondition,
)

# ---------------------------------------------------------------------------
# Delivery rule actions
# ---------------------------------------------------------------------------


class CacheExpirationActionParameters(ArmModel):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleCacheExpirationActionParameters"] = Field(
        default=_ODATA + "DeliveryRuleCacheExpirationActionParameters", alias="@odata.type"
    )
    cacheBehavior: open_enum(CacheBehavior)
    cacheType: str = "All"
    cacheDuration: str | None = None


class CacheKeyQueryStringActionParameters(ArmModel):
    odataType: Literal[
        "#Microsoft.Azure.Cdn.Models.DeliveryRuleCacheKeyQueryStringBehaviorActionParameters"
    ] = Field(
        default=_ODATA + "DeliveryRuleCacheKeyQueryStringBehaviorActionParameters",
        alias="@odata.type",
    )
    queryStringBehavior: open_enum(QueryStringBehavior)
    queryParameters: str | None = None


class HeaderActionParameters(ArmModel):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleHeaderActionParameters"] = Field(
        default=_ODATA + "DeliveryRuleHeaderActionParameters", alias="@odata.type"
    )
    headerAction: open_enum(HeaderAction)
    headerName: str
    value: str | None = None


class UrlRedirectActionParameters(ArmModel):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleUrlRedirectActionParameters"] = Field(
        default=_ODATA + "DeliveryRuleUrlRedirectActionParameters", alias="@odata.type"
    )
    redirectType: open_enum(RedirectType)
    destinationProtocol: open_enum(DestinationProtocol) | None = None
    customPath: str | None = None
    customHostname: str | None = None
    customQueryString: str | None = None
    customFragment: str | None = None


class UrlRewriteActionParameters(ArmModel):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleUrlRewriteActionParameters"] = Field(
        default=_ODATA + "DeliveryRuleUrlRewriteActionParameters", alias="@odata.type"
    )
    sourcePattern: str
    destination: str
    preserveUnmatchedPath: bool | None = None


class OriginGroupOverrideActionParameters(ArmModel):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.DeliveryRuleOriginGroupOverrideActionParameters"] = Field(
        default=_ODATA + "DeliveryRuleOriginGroupOverrideActionParameters", alias="@odata.type"
    )
    originGroup: ResourceReference


class DeliveryRuleAction(ArmModel):
    """An action of a delivery rule; unknown kinds keep their raw parameters."""

    name: open_enum(ActionName)
    parameters: dict | None = None


class DeliveryRuleCacheExpirationAction(DeliveryRuleAction):
    name: Literal["CacheExpiration"] = "CacheExpiration"
    parameters: CacheExpirationActionParameters


class DeliveryRuleCacheKeyQueryStringAction(DeliveryRuleAction):
    name: Literal["CacheKeyQueryString"] = "CacheKeyQueryString"
    parameters: CacheKeyQueryStringActionParameters


class DeliveryRuleRequestHeaderAction(DeliveryRuleAction):
    name: Literal["ModifyRequestHeader"] = "ModifyRequestHeader"
    parameters: HeaderActionParameters


class DeliveryRuleResponseHeaderAction(DeliveryRuleAction):
    name: Literal["ModifyResponseHeader"] = "ModifyResponseHeader"
    parameters: HeaderActionParameters


class UrlRedirectAction(DeliveryRuleAction):
    name: Literal["UrlRedirect"] = "UrlRedirect"
    parameters: UrlRedirectActionParameters


class UrlRewriteAction(DeliveryRuleAction):
    name: Literal["UrlRewrite"] = "UrlRewrite"
    parameters: UrlRewriteActionParameters


class OriginGroupOverrideAction(DeliveryRuleAction):
    name: Literal["OriginGroupOverride"] = "OriginGroupOverride"
    parameters: OriginGroupOverrideActionParameters


AnyDeliveryRuleAction = discriminated(
    "name",
    {
        "CacheExpiration": DeliveryRuleCacheExpirationAction,
        "CacheKeyQueryString": DeliveryRuleCacheKeyQueryStringAction,
        "ModifyRequestHeader": DeliveryRuleRequestHeaderAction,
        "ModifyResponseHeader": DeliveryRuleResponseHeaderAction,
        "UrlRedirect": UrlRedirectAction,
        "UrlRewrite": UrlRewriteAction,
        "OriginGroupOverride": OriginGroupOverrideAction,
    },
    DeliveryRuleAction,
)


class DeliveryRule(ArmModel):
    name: str | None = None
    order: int
    conditions: list[AnyDeliveryRuleCondition] | None = None
    actions: list[AnyDeliveryRuleAction]


class EndpointPropertiesUpdateParametersDeliveryPolicy(ArmModel):
    description: str | None = None
    rules: list[DeliveryRule]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


class GeoFilter(ArmModel):
    relativePath: str
    action: open_enum(GeoFilterAction)
    countryCodes: list[str]


class EndpointPropertiesUpdateParameters(ArmModel):
    originPath: str | None = None
    contentTypesToCompress: list[str] | None = None
    originHostHeader: str | None = None
    isCompressionEnabled: bool | None = None
    isHttpAllowed: bool | None = None
    isHttpsAllowed: bool | None = None
    queryStringCachingBehavior: open_enum(QueryStringCachingBehavior) | None = None
    optimizationType: open_enum(OptimizationType) | None = None
    probePath: str | None = None
    geoFilters: list[GeoFilter] | None = None
    defaultOriginGroup: ResourceReference | None = None
    deliveryPolicy: EndpointPropertiesUpdateParametersDeliveryPolicy | None = None


class EndpointProperties(EndpointPropertiesUpdateParameters):
    hostName: str | None = None
    origins: list[DeepCreatedOrigin] = Field(default_factory=list)
    originGroups: list[DeepCreatedOriginGroup] | None = None
    resourceState: open_enum(EndpointResourceState) | None = None
    provisioningState: str | None = None


class Endpoint(TrackedResource):
    """A CDN endpoint, reachable at ``<name>.azureedge.net``."""

    properties: EndpointProperties | None = None


class EndpointUpdateParameters(ArmModel):
    tags: dict[str, str] | None = None
    properties: EndpointPropertiesUpdateParameters | None = None


class PurgeParameters(ArmModel):
    contentPaths: list[str]


class LoadParameters(ArmModel):
    contentPaths: list[str]


class ValidateCustomDomainInput(ArmModel):
    hostName: str


class ValidateCustomDomainOutput(ArmModel):
    customDomainValidated: bool | None = None
    reason: str | None = None
    message: str | None = None


EndpointListResult = ListResult[Endpoint]

# ---------------------------------------------------------------------------
# Custom domains
# ---------------------------------------------------------------------------


class CdnCertificateSourceParameters(ArmModel):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.CdnCertificateSourceParameters"] = Field(
        default=_ODATA + "CdnCertificateSourceParameters", alias="@odata.type"
    )
    certificateType: str = "Dedicated"


class KeyVaultCertificateSourceParameters(ArmModel):
    odataType: Literal["#Microsoft.Azure.Cdn.Models.KeyVaultCertificateSourceParameters"] = Field(
        default=_ODATA + "KeyVaultCertificateSourceParameters", alias="@odata.type"
    )
    subscriptionId: str
    resourceGroupName: str
    vaultName: str
    secretName: str
    secretVersion: str | None = None
    updateRule: str = "NoAction"
    deleteRule: str = "NoAction"


class CustomDomainHttpsParameters(ArmModel):
    certificateSource: open_enum(CertificateSource)
    protocolType: open_enum(ProtocolType)
    minimumTlsVersion: open_enum(MinimumTlsVersion) | None = None


class CdnManagedHttpsParameters(CustomDomainHttpsParameters):
    """HTTPS with a certificate issued and managed by the CDN."""

    certificateSource: Literal["Cdn"] = "Cdn"
    certificateSourceParameters: CdnCertificateSourceParameters


class UserManagedHttpsParameters(CustomDomainHttpsParameters):
    """HTTPS with a certificate taken from the caller's Key Vault."""

    certificateSource: Literal["AzureKeyVault"] = "AzureKeyVault"
    certificateSourceParameters: KeyVaultCertificateSourceParameters


AnyCustomDomainHttpsParameters = discriminated(
    "certificateSource",
    {"Cdn": CdnManagedHttpsParameters, "AzureKeyVault": UserManagedHttpsParameters},
    CustomDomainHttpsParameters,
)


class CustomDomainProperties(ArmModel):
    hostName: str
    resourceState: open_enum(OriginResourceState) | None = None
    customHttpsProvisioningState: open_enum(CustomHttpsProvisioningState) | None = None
    customHttpsProvisioningSubstate: str | None = None
    customHttpsParameters: AnyCustomDomainHttpsParameters | None = None
    validationData: str | None = None
    provisioningState: str | None = None


class CustomDomain(ProxyResource):
    properties: CustomDomainProperties | None = None


class CustomDomainPropertiesParameters(ArmModel):
    hostName: str


class CustomDomainParameters(ArmModel):
    properties: CustomDomainPropertiesParameters | None = None


CustomDomainListResult = ListResult[CustomDomain]

# ---------------------------------------------------------------------------
# Provider-level requests
# ---------------------------------------------------------------------------


class CheckNameAvailabilityInput(ArmModel):
    name: str
    type: open_enum(ResourceType) = ResourceType.Endpoints


class CheckNameAvailabilityOutput(ArmModel):
    nameAvailable: bool | None = None
    reason: str | None = None
    message: str | None = None


class ValidateProbeInput(ArmModel):
    probeURL: str


class ValidateProbeOutput(ArmModel):
    isValid: bool | None = None
    errorCode: str | None = None
    message: str | None = None


class CidrIpAddress(ArmModel):
    baseIpAddress: str | None = None
    prefixLength: int | None = None


class IpAddressGroup(ArmModel):
    deliveryRegion: str | None = None
    ipv4Addresses: list[CidrIpAddress] | None = None
    ipv6Addresses: list[CidrIpAddress] | None = None


class EdgeNodeProperties(ArmModel):
    ipAddressGroups: list[IpAddressGroup] = Field(default_factory=list)


class EdgeNode(ProxyResource):
    """A CDN point of presence and the address ranges it serves from."""

    properties: EdgeNodeProperties | None = None


EdgenodeResult = ListResult[EdgeNode]
