"""Pydantic models for Microsoft.Workloads: SAP monitors, SAP virtual instances and PHP workloads.

Polymorphic members and their discriminators:

* provider settings of a provider instance: ``providerType``
* SAP virtual instance configuration: ``configurationType``
* infrastructure configuration and sizing results: ``deploymentType``
* software configuration: ``softwareInstallationType``
* OS configuration: ``osType``
"""

from datetime import datetime
from enum import StrEnum
from typing import Any, Literal

from pydantic import Field

from az_mgmt.core._models import (
    ArmModel,
    ErrorDetail,
    ListResult,
    ProxyResource,
    SystemData,
    TrackedResource,
    discriminated,
    open_enum,
)

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ManagedServiceIdentityType(StrEnum):
    None_ = "None"
    UserAssigned = "UserAssigned"


class WorkloadMonitorProvisioningState(StrEnum):
    Accepted = "Accepted"
    Creating = "Creating"
    Updating = "Updating"
    Failed = "Failed"
    Succeeded = "Succeeded"
    Deleting = "Deleting"
    Migrating = "Migrating"


class RoutingPreference(StrEnum):
    Default = "Default"
    RouteAll = "RouteAll"


class ProviderType(StrEnum):
    SapHana = "SapHana"
    SapNetWeaver = "SapNetWeaver"
    PrometheusOS = "PrometheusOS"
    PrometheusHaCluster = "PrometheusHaCluster"
    MsSqlServer = "MsSqlServer"
    Db2 = "Db2"


class EnvironmentType(StrEnum):
    NonProd = "NonProd"
    Prod = "Prod"


class SapProductType(StrEnum):
    ECC = "ECC"
    S4HANA = "S4HANA"
    Other = "Other"


class SapDatabaseType(StrEnum):
    HANA = "HANA"
    DB2 = "DB2"


class DeploymentType(StrEnum):
    SingleServer = "SingleServer"
    ThreeTier = "ThreeTier"


class ConfigurationType(StrEnum):
    Deployment = "Deployment"
    Discovery = "Discovery"
    DeploymentWithOSConfig = "DeploymentWithOSConfig"


class SapSoftwareInstallationType(StrEnum):
    ServiceInitiated = "ServiceInitiated"
    SAPInstallWithoutOSConfig = "SAPInstallWithoutOSConfig"


class OsType(StrEnum):
    Linux = "Linux"
    Windows = "Windows"


class HighAvailabilityType(StrEnum):
    AvailabilitySet = "AvailabilitySet"
    AvailabilityZone = "AvailabilityZone"


class DatabaseScaleMethod(StrEnum):
    ScaleUp = "ScaleUp"


class SapVirtualInstanceStatus(StrEnum):
    Starting = "Starting"
    Running = "Running"
    Stopping = "Stopping"
    Offline = "Offline"
    PartiallyRunning = "PartiallyRunning"
    Unavailable = "Unavailable"


class SapVirtualInstanceState(StrEnum):
    InfrastructureDeploymentPending = "InfrastructureDeploymentPending"
    InfrastructureDeploymentInProgress = "InfrastructureDeploymentInProgress"
    InfrastructureDeploymentFailed = "InfrastructureDeploymentFailed"
    SoftwareInstallationPending = "SoftwareInstallationPending"
    SoftwareInstallationInProgress = "SoftwareInstallationInProgress"
    SoftwareInstallationFailed = "SoftwareInstallationFailed"
    DiscoveryPending = "DiscoveryPending"
    DiscoveryInProgress = "DiscoveryInProgress"
    DiscoveryFailed = "DiscoveryFailed"
    RegistrationComplete = "RegistrationComplete"


class HealthState(StrEnum):
    Unknown = "Unknown"
    Healthy = "Healthy"
    Unhealthy = "Unhealthy"
    Degraded = "Degraded"


class ProvisioningState(StrEnum):
    Succeeded = "Succeeded"
    Updating = "Updating"
    Creating = "Creating"
    Failed = "Failed"
    Deleting = "Deleting"


class CentralServerVirtualMachineType(StrEnum):
    Primary = "Primary"
    Secondary = "Secondary"
    Unknown = "Unknown"
    ASCS = "ASCS"
    ERSInactive = "ERSInactive"
    ERS = "ERS"
    Standby = "Standby"


class EnqueueReplicationServerType(StrEnum):
    EnqueueReplicator1 = "EnqueueReplicator1"
    EnqueueReplicator2 = "EnqueueReplicator2"


class WorkloadKind(StrEnum):
    WordPress = "WordPress"


class PhpVersion(StrEnum):
    V7_2 = "7.2"
    V7_3 = "7.3"
    V7_4 = "7.4"


class WordpressVersion(StrEnum):
    V5_4 = "5.4"
    V5_4_1 = "5.4.1"
    V5_4_2 = "5.4.2"
    V5_4_3 = "5.4.3"


class WordpressProvisioningState(StrEnum):
    NotSpecified = "NotSpecified"
    Accepted = "Accepted"
    Created = "Created"
    Succeeded = "Succeeded"
    Failed = "Failed"
    Canceled = "Canceled"
    Installing = "Installing"


class SkuTier(StrEnum):
    Free = "Free"
    Basic = "Basic"
    Standard = "Standard"
    Premium = "Premium"


# ---------------------------------------------------------------------------
# Identity and shared shapes
# ---------------------------------------------------------------------------


class UserAssignedIdentity(ArmModel):
    principalId: str | None = None
    clientId: str | None = None


class UserAssignedServiceIdentity(ArmModel):
    """User-assigned identities keyed by their ARM resource ID."""

    type: open_enum(ManagedServiceIdentityType)
    userAssignedIdentities: dict[str, UserAssignedIdentity] | None = None


class ManagedRgConfiguration(ArmModel):
    name: str | None = None


class ErrorDefinition(ArmModel):
    code: str | None = None
    message: str | None = None
    details: list["ErrorDefinition"] | None = None


class SapVirtualInstanceError(ArmModel):
    properties: ErrorDefinition | None = None


class OperationStatusResult(ArmModel):
    id: str | None = None
    name: str | None = None
    status: str
    percentComplete: float | None = None
    startTime: datetime | None = None
    endTime: datetime | None = None
    operations: list["OperationStatusResult"] | None = None
    error: ErrorDetail | None = None


class Tags(ArmModel):
    tags: dict[str, str] | None = None


# ---------------------------------------------------------------------------
# Monitors and provider instances
# ---------------------------------------------------------------------------


class MonitorProperties(ArmModel):
    provisioningState: open_enum(WorkloadMonitorProvisioningState) | None = None
    errors: dict[str, Any] | None = None
    appLocation: str | None = None
    routingPreference: open_enum(RoutingPreference) | None = None
    zoneRedundancyPreference: str | None = None
    managedResourceGroupConfiguration: ManagedRgConfiguration | None = None
    logAnalyticsWorkspaceArmId: str | None = None
    monitorSubnet: str | None = None
    msiArmId: str | None = None


class Monitor(TrackedResource):
    """An SAP monitor collecting telemetry into a Log Analytics workspace."""

    identity: UserAssignedServiceIdentity | None = None
    properties: MonitorProperties | None = None
    systemData: SystemData | None = None


class UpdateMonitorRequest(ArmModel):
    tags: dict[str, str] | None = None
    identity: UserAssignedServiceIdentity | None = None


class ProviderSpecificProperties(ArmModel):
    providerType: str


class HanaDbProviderInstanceProperties(ProviderSpecificProperties):
    providerType: Literal["SapHana"] = "SapHana"
    hostname: str | None = None
    dbName: str | None = None
    sqlPort: str | None = None
    instanceNumber: str | None = None
    dbUsername: str | None = None
    dbPassword: str | None = None
    dbPasswordUri: str | None = None
    dbSslCertificateUri: str | None = None
    sslHostNameInCertificate: str | None = None


class SapNetWeaverProviderInstanceProperties(ProviderSpecificProperties):
    providerType: Literal["SapNetWeaver"] = "SapNetWeaver"
    sapSid: str | None = None
    sapHostname: str | None = None
    sapInstanceNr: str | None = None
    sapHostFileEntries: list[str] | None = None
    sapUsername: str | None = None
    sapPassword: str | None = None
    sapPasswordUri: str | None = None
    sapClientId: str | None = None
    sapPortNumber: str | None = None
    sapSslCertificateUri: str | None = None


class PrometheusOsProviderInstanceProperties(ProviderSpecificProperties):
    providerType: Literal["PrometheusOS"] = "PrometheusOS"
    prometheusUrl: str | None = None


class PrometheusHaClusterProviderInstanceProperties(ProviderSpecificProperties):
    providerType: Literal["PrometheusHaCluster"] = "PrometheusHaCluster"
    prometheusUrl: str | None = None
    hostname: str | None = None
    sid: str | None = None
    clusterName: str | None = None


class MsSqlServerProviderInstanceProperties(ProviderSpecificProperties):
    providerType: Literal["MsSqlServer"] = "MsSqlServer"
    hostname: str | None = None
    dbPort: str | None = None
    dbUsername: str | None = None
    dbPassword: str | None = None
    dbPasswordUri: str | None = None
    sapSid: str | None = None


class Db2ProviderInstanceProperties(ProviderSpecificProperties):
    providerType: Literal["Db2"] = "Db2"
    hostname: str | None = None
    dbName: str | None = None
    dbPort: str | None = None
    dbUsername: str | None = None
    dbPassword: str | None = None
    dbPasswordUri: str | None = None
    sapSid: str | None = None


AnyProviderSpecificProperties = discriminated(
    "providerType",
    {
        "SapHana": HanaDbProviderInstanceProperties,
        "SapNetWeaver": SapNetWeaverProviderInstanceProperties,
        "PrometheusOS": PrometheusOsProviderInstanceProperties,
        "PrometheusHaCluster": PrometheusHaClusterProviderInstanceProperties,
        "MsSqlServer": MsSqlServerProviderInstanceProperties,
        "Db2": Db2ProviderInstanceProperties,
    },
    ProviderSpecificProperties,
)


class ProviderInstanceProperties(ArmModel):
    provisioningState: open_enum(WorkloadMonitorProvisioningState) | None = None
    errors: dict[str, Any] | None = None
    providerSettings: AnyProviderSpecificProperties | None = None


class ProviderInstance(ProxyResource):
    """A data source attached to an SAP monitor."""

    identity: UserAssignedServiceIdentity | None = None
    properties: ProviderInstanceProperties | None = None
    systemData: SystemData | None = None


MonitorListResult = ListResult[Monitor]
ProviderInstanceListResult = ListResult[ProviderInstance]

# ---------------------------------------------------------------------------
# SAP virtual instance configuration
# ---------------------------------------------------------------------------


class SshPublicKey(ArmModel):
    keyData: str | None = None


class SshConfiguration(ArmModel):
    publicKeys: list[SshPublicKey] | None = None


class SshKeyPair(ArmModel):
    publicKey: str | None = None
    privateKey: str | None = None


class OsConfiguration(ArmModel):
    osType: str


class LinuxConfiguration(OsConfiguration):
    osType: Literal["Linux"] = "Linux"
    disablePasswordAuthentication: bool | None = None
    ssh: SshConfiguration | None = None
    sshKeyPair: SshKeyPair | None = None


class WindowsConfiguration(OsConfiguration):
    osType: Literal["Windows"] = "Windows"


AnyOsConfiguration = discriminated(
    "osType", {"Linux": LinuxConfiguration, "Windows": WindowsConfiguration}, OsConfiguration
)


class OsProfile(ArmModel):
    adminUsername: str | None = None
    adminPassword: str | None = None
    osConfiguration: AnyOsConfiguration | None = None


class ImageReference(ArmModel):
    publisher: str | None = None
    offer: str | None = None
    sku: str | None = None
    version: str | None = None
    exactVersion: str | None = None
    sharedGalleryImageId: str | None = None


class VirtualMachineConfiguration(ArmModel):
    vmSize: str
    imageReference: ImageReference
    osProfile: OsProfile


class NetworkConfiguration(ArmModel):
    isSecondaryIpEnabled: bool | None = None


class CentralServerConfiguration(ArmModel):
    subnetId: str
    virtualMachineConfiguration: VirtualMachineConfiguration
    instanceCount: int


class ApplicationServerConfiguration(ArmModel):
    subnetId: str
    virtualMachineConfiguration: VirtualMachineConfiguration
    instanceCount: int


class DatabaseConfiguration(ArmModel):
    databaseType: open_enum(SapDatabaseType) | None = None
    subnetId: str
    virtualMachineConfiguration: VirtualMachineConfiguration
    instanceCount: int


class HighAvailabilityConfiguration(ArmModel):
    highAvailabilityType: open_enum(HighAvailabilityType)


class InfrastructureConfiguration(ArmModel):
    deploymentType: str
    appResourceGroup: str


class SingleServerConfiguration(InfrastructureConfiguration):
    """All SAP layers on one virtual machine."""

    deploymentType: Literal["SingleServer"] = "SingleServer"
    networkConfiguration: NetworkConfiguration | None = None
    databaseType: open_enum(SapDatabaseType) | None = None
    subnetId: str
    virtualMachineConfiguration: VirtualMachineConfiguration


class ThreeTierConfiguration(InfrastructureConfiguration):
    """Separate central, application and database servers."""

    deploymentType: Literal["ThreeTier"] = "ThreeTier"
    networkConfiguration: NetworkConfiguration | None = None
    centralServer: CentralServerConfiguration
    applicationServer: ApplicationServerConfiguration
    databaseServer: DatabaseConfiguration
    highAvailabilityConfig: HighAvailabilityConfiguration | None = None


AnyInfrastructureConfiguration = discriminated(
    "deploymentType",
    {"SingleServer": SingleServerConfiguration, "ThreeTier": ThreeTierConfiguration},
    InfrastructureConfiguration,
)


class HighAvailabilitySoftwareConfiguration(ArmModel):
    fencingClientId: str
    fencingClientPassword: str


class SoftwareConfiguration(ArmModel):
    softwareInstallationType: str


class ServiceInitiatedSoftwareConfiguration(SoftwareConfiguration):
    softwareInstallationType: Literal["ServiceInitiated"] = "ServiceInitiated"
    bomUrl: str
    softwareVersion: str
    sapBitsStorageAccountId: str
    sapFqdn: str
    sshPrivateKey: str
    highAvailabilitySoftwareConfiguration: HighAvailabilitySoftwareConfiguration | None = None


class SapInstallWithoutOsConfigSoftwareConfiguration(SoftwareConfiguration):
    softwareInstallationType: Literal["SAPInstallWithoutOSConfig"] = "SAPInstallWithoutOSConfig"
    bomUrl: str
    sapBitsStorageAccountId: str
    softwareVersion: str
    highAvailabilitySoftwareConfiguration: HighAvailabilitySoftwareConfiguration | None = None


AnySoftwareConfiguration = discriminated(
    "softwareInstallationType",
    {
        "ServiceInitiated": ServiceInitiatedSoftwareConfiguration,
        "SAPInstallWithoutOSConfig": SapInstallWithoutOsConfigSoftwareConfiguration,
    },
    SoftwareConfiguration,
)


class DeployerVmPackages(ArmModel):
    url: str | None = None
    storageAccountId: str | None = None


class OsSapConfiguration(ArmModel):
    deployerVmPackages: DeployerVmPackages | None = None
    sapFqdn: str | None = None


class SapConfiguration(ArmModel):
    configurationType: str


class DeploymentConfiguration(SapConfiguration):
    """Deploy infrastructure and, optionally, install SAP software."""

    configurationType: Literal["Deployment"] = "Deployment"
    appLocation: str | None = None
    infrastructureConfiguration: AnyInfrastructureConfiguration | None = None
    softwareConfiguration: AnySoftwareConfiguration | None = None


class DeploymentWithOsConfiguration(SapConfiguration):
    configurationType: Literal["DeploymentWithOSConfig"] = "DeploymentWithOSConfig"
    appLocation: str | None = None
    infrastructureConfiguration: AnyInfrastructureConfiguration | None = None
    softwareConfiguration: AnySoftwareConfiguration | None = None
    osSapConfiguration: OsSapConfiguration | None = None


class DiscoveryConfiguration(SapConfiguration):
    """Register an existing SAP system from its central server VM."""

    configurationType: Literal["Discovery"] = "Discovery"
    centralServerVmId: str | None = None
    appLocation: str | None = None


AnySapConfiguration = discriminated(
    "configurationType",
    {
        "Deployment": DeploymentConfiguration,
        "Discovery": DiscoveryConfiguration,
        "DeploymentWithOSConfig": DeploymentWithOsConfiguration,
    },
    SapConfiguration,
)

# ---------------------------------------------------------------------------
# SAP virtual instances
# ---------------------------------------------------------------------------


class SapVirtualInstanceProperties(ArmModel):
    environment: open_enum(EnvironmentType)
    sapProduct: open_enum(SapProductType)
    configuration: AnySapConfiguration
    managedResourceGroupConfiguration: ManagedRgConfiguration | None = None
    status: open_enum(SapVirtualInstanceStatus) | None = None
    health: open_enum(HealthState) | None = None
    state: open_enum(SapVirtualInstanceState) | None = None
    provisioningState: open_enum(ProvisioningState) | None = None
    errors: SapVirtualInstanceError | None = None


class SapVirtualInstance(TrackedResource):
    """A Virtual Instance for SAP: the SAP system as one manageable resource."""

    identity: UserAssignedServiceIdentity | None = None
    properties: SapVirtualInstanceProperties
    systemData: SystemData | None = None


class UpdateSapVirtualInstanceRequest(ArmModel):
    tags: dict[str, str] | None = None
    identity: UserAssignedServiceIdentity | None = None


class StopRequest(ArmModel):
    hardStop: bool | None = None


class MessageServerProperties(ArmModel):
    msPort: int | None = None
    internalMsPort: int | None = None
    httpPort: int | None = None
    httpsPort: int | None = None
    hostname: str | None = None
    ipAddress: str | None = None
    health: open_enum(HealthState) | None = None


class EnqueueServerProperties(ArmModel):
    hostname: str | None = None
    ipAddress: str | None = None
    port: int | None = None
    health: open_enum(HealthState) | None = None


class GatewayServerProperties(ArmModel):
    port: int | None = None
    health: open_enum(HealthState) | None = None


class EnqueueReplicationServerProperties(ArmModel):
    ersVersion: open_enum(EnqueueReplicationServerType) | None = None
    instanceNo: str | None = None
    hostname: str | None = None
    kernelVersion: str | None = None
    kernelPatch: str | None = None
    ipAddress: str | None = None
    health: open_enum(HealthState) | None = None


class CentralServerVmDetails(ArmModel):
    type: open_enum(CentralServerVirtualMachineType) | None = None
    virtualMachineId: str | None = None


class SapCentralServerProperties(ArmModel):
    instanceNo: str | None = None
    subnet: str | None = None
    messageServerProperties: MessageServerProperties | None = None
    enqueueServerProperties: EnqueueServerProperties | None = None
    gatewayServerProperties: GatewayServerProperties | None = None
    enqueueReplicationServerProperties: EnqueueReplicationServerProperties | None = None
    kernelVersion: str | None = None
    kernelPatch: str | None = None
    vmDetails: list[CentralServerVmDetails] | None = None
    status: open_enum(SapVirtualInstanceStatus) | None = None
    health: open_enum(HealthState) | None = None
    provisioningState: open_enum(ProvisioningState) | None = None
    errors: SapVirtualInstanceError | None = None


class SapCentralServerInstance(TrackedResource):
    properties: SapCentralServerProperties | None = None
    systemData: SystemData | None = None


class DatabaseVmDetails(ArmModel):
    virtualMachineId: str | None = None
    status: open_enum(SapVirtualInstanceStatus) | None = None


class SapDatabaseProperties(ArmModel):
    subnet: str | None = None
    databaseSid: str | None = None
    databaseType: str | None = None
    ipAddress: str | None = None
    vmDetails: list[DatabaseVmDetails] | None = None
    status: open_enum(SapVirtualInstanceStatus) | None = None
    provisioningState: open_enum(ProvisioningState) | None = None
    errors: SapVirtualInstanceError | None = None


class SapDatabaseInstance(TrackedResource):
    properties: SapDatabaseProperties | None = None
    systemData: SystemData | None = None


class SapApplicationServerProperties(ArmModel):
    instanceNo: str | None = None
    subnet: str | None = None
    hostname: str | None = None
    kernelVersion: str | None = None
    kernelPatch: str | None = None
    ipAddress: str | None = None
    gatewayPort: int | None = None
    icmHttpPort: int | None = None
    icmHttpsPort: int | None = None
    virtualMachineId: str | None = None
    status: open_enum(SapVirtualInstanceStatus) | None = None
    health: open_enum(HealthState) | None = None
    provisioningState: open_enum(ProvisioningState) | None = None
    errors: SapVirtualInstanceError | None = None


class SapApplicationServerInstance(TrackedResource):
    properties: SapApplicationServerProperties | None = None
    systemData: SystemData | None = None


SapVirtualInstanceList = ListResult[SapVirtualInstance]
SapCentralInstanceList = ListResult[SapCentralServerInstance]
SapDatabaseInstanceList = ListResult[SapDatabaseInstance]
SapApplicationServerInstanceList = ListResult[SapApplicationServerInstance]

# ---------------------------------------------------------------------------
# Sizing, SKU and disk recommendations
# ---------------------------------------------------------------------------


class SapSizingRecommendationRequest(ArmModel):
    appLocation: str
    environment: open_enum(EnvironmentType)
    sapProduct: open_enum(SapProductType)
    deploymentType: open_enum(DeploymentType)
    saps: int
    dbMemory: int
    databaseType: open_enum(SapDatabaseType)
    dbScaleMethod: open_enum(DatabaseScaleMethod) | None = None
    highAvailabilityType: open_enum(HighAvailabilityType) | None = None


class SapSizingRecommendationResult(ArmModel):
    deploymentType: str


class SingleServerRecommendationResult(SapSizingRecommendationResult):
    deploymentType: Literal["SingleServer"] = "SingleServer"
    vmSku: str | None = None


class ThreeTierRecommendationResult(SapSizingRecommendationResult):
    deploymentType: Literal["ThreeTier"] = "ThreeTier"
    dbVmSku: str | None = None
    databaseInstanceCount: int | None = None
    centralServerVmSku: str | None = None
    centralServerInstanceCount: int | None = None
    applicationServerVmSku: str | None = None
    applicationServerInstanceCount: int | None = None


AnySapSizingRecommendationResult = discriminated(
    "deploymentType",
    {"SingleServer": SingleServerRecommendationResult, "ThreeTier": ThreeTierRecommendationResult},
    SapSizingRecommendationResult,
)


class SapSupportedSkusRequest(ArmModel):
    appLocation: str
    environment: open_enum(EnvironmentType)
    sapProduct: open_enum(SapProductType)
    deploymentType: open_enum(DeploymentType)
    databaseType: open_enum(SapDatabaseType)
    highAvailabilityType: open_enum(HighAvailabilityType) | None = None


class SapSupportedSku(ArmModel):
    vmSku: str | None = None
    isAppServerCertified: bool | None = None
    isDatabaseCertified: bool | None = None


class SapSupportedResourceSkusResult(ArmModel):
    supportedSkus: list[SapSupportedSku] = Field(default_factory=list)


class SapDiskConfigurationsRequest(ArmModel):
    appLocation: str
    environment: open_enum(EnvironmentType)
    sapProduct: open_enum(SapProductType)
    databaseType: open_enum(SapDatabaseType)
    deploymentType: open_enum(DeploymentType)
    dbVmSku: str


class SapDiskConfiguration(ArmModel):
    volume: str | None = None
    diskType: str | None = None
    diskCount: int | None = None
    diskSizeGB: int | None = None
    diskIopsReadWrite: int | None = None
    diskMBpsReadWrite: int | None = None
    diskStorageType: str | None = None


class SapDiskConfigurationsResult(ArmModel):
    diskConfigurations: list[SapDiskConfiguration] = Field(default_factory=list)


class SapAvailabilityZoneDetailsRequest(ArmModel):
    appLocation: str
    sapProduct: open_enum(SapProductType)
    databaseType: open_enum(SapDatabaseType)


class SapAvailabilityZonePair(ArmModel):
    zoneA: int | None = None
    zoneB: int | None = None


class SapAvailabilityZoneDetailsResult(ArmModel):
    availabilityZonePairs: list[SapAvailabilityZonePair] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# PHP workloads
# ---------------------------------------------------------------------------


class Sku(ArmModel):
    name: str
    tier: open_enum(SkuTier) | None = None
    size: str | None = None
    family: str | None = None
    capacity: int | None = None


class UserProfile(ArmModel):
    userName: str
    sshPublicKey: str


class OsImageProfile(ArmModel):
    publisher: str | None = None
    offer: str | None = None
    sku: str | None = None
    version: str | None = None


class DiskInfo(ArmModel):
    storageType: str
    sizeInGB: int | None = None


class NodeProfile(ArmModel):
    name: str | None = None
    nodeSku: str
    osImage: OsImageProfile
    osDisk: DiskInfo
    dataDisks: list[DiskInfo] | None = None
    nodeResourceIds: list[str] | None = None


class VmssNodesProfile(NodeProfile):
    autoScaleMinCount: int | None = None
    autoScaleMaxCount: int | None = None


class SearchProfile(NodeProfile):
    searchType: str


class NetworkProfile(ArmModel):
    loadBalancerType: str
    loadBalancerSku: str | None = None
    loadBalancerTier: str | None = None
    capacity: int | None = None
    azureFrontDoorEnabled: str | None = None
    vNetResourceId: str | None = None
    loadBalancerResourceId: str | None = None
    azureFrontDoorResourceId: str | None = None
    frontEndPublicIpResourceId: str | None = None
    outboundPublicIpResourceIds: list[str] | None = None


class DatabaseProfile(ArmModel):
    type: str
    serverName: str | None = None
    version: str | None = None
    sku: str
    tier: str
    haEnabled: str | None = None
    storageSku: str | None = None
    storageInGB: int | None = None
    storageIops: int | None = None
    backupRetentionDays: int | None = None
    sslEnforcementEnabled: str | None = None
    serverResourceId: str | None = None


class SiteProfile(ArmModel):
    domainName: str | None = None


class FileshareProfile(ArmModel):
    shareType: str
    storageType: str
    shareSizeInGB: int | None = None
    storageResourceId: str | None = None
    shareName: str | None = None


class PhpProfile(ArmModel):
    version: open_enum(PhpVersion)


class CacheProfile(ArmModel):
    name: str | None = None
    skuName: str
    family: str
    capacity: int
    cacheResourceId: str | None = None


class BackupProfile(ArmModel):
    backupEnabled: str
    vaultResourceId: str | None = None


class PhpWorkloadResourceProperties(ArmModel):
    appLocation: str
    managedResourceGroupConfiguration: ManagedRgConfiguration | None = None
    adminUserProfile: UserProfile
    webNodesProfile: VmssNodesProfile
    controllerProfile: NodeProfile
    networkProfile: NetworkProfile | None = None
    databaseProfile: DatabaseProfile
    siteProfile: SiteProfile | None = None
    fileshareProfile: FileshareProfile | None = None
    phpProfile: PhpProfile | None = None
    searchProfile: SearchProfile | None = None
    cacheProfile: CacheProfile | None = None
    backupProfile: BackupProfile | None = None
    provisioningState: str | None = None


class PhpWorkloadResource(TrackedResource):
    """A PHP workload (WordPress) with its VMSS, database and file share."""

    kind: open_enum(WorkloadKind)
    properties: PhpWorkloadResourceProperties | None = None
    sku: Sku | None = None
    identity: dict[str, Any] | None = None
    systemData: SystemData | None = None


class PatchResourceRequestBody(ArmModel):
    tags: dict[str, str] | None = None
    identity: dict[str, Any] | None = None


class WordpressInstanceResourceProperties(ArmModel):
    version: open_enum(WordpressVersion)
    databaseName: str | None = None
    databaseUser: str | None = None
    siteUrl: str | None = None
    provisioningState: open_enum(WordpressProvisioningState) | None = None


class WordpressInstanceResource(ProxyResource):
    properties: WordpressInstanceResourceProperties | None = None
    systemData: SystemData | None = None


class SkuCapability(ArmModel):
    name: str | None = None
    value: str | None = None


class SkuCost(ArmModel):
    meterId: str | None = None
    quantity: int | None = None
    extendedUnit: str | None = None


class SkuZoneDetail(ArmModel):
    zones: list[str] | None = None
    capabilities: list[SkuCapability] | None = None


class SkuLocationAndZones(ArmModel):
    location: str | None = None
    zones: list[str] | None = None
    zoneDetails: list[SkuZoneDetail] | None = None
    extendedLocations: list[str] | None = None
    type: str | None = None


class SkuRestriction(ArmModel):
    type: str | None = None
    values: list[str] | None = None
    restrictionInfo: dict[str, Any] | None = None
    reasonCode: str | None = None


class SkuDefinition(ArmModel):
    name: str
    resourceType: str | None = None
    tier: str | None = None
    size: str | None = None
    family: str | None = None
    kind: str | None = None
    locations: list[str] | None = None
    locationInfo: list[SkuLocationAndZones] | None = None
    capacity: dict[str, Any] | None = None
    costs: list[SkuCost] | None = None
    capabilities: list[SkuCapability] | None = None
    restrictions: list[SkuRestriction] | None = None


PhpWorkloadResourceList = ListResult[PhpWorkloadResource]
WordpressInstanceResourceList = ListResult[WordpressInstanceResource]
SkusListResult = ListResult[SkuDefinition]
