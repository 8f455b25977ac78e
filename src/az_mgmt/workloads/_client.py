"""Microsoft.Workloads management client."""

from __future__ import annotations

from az_mgmt.core._client import ArmClient
from az_mgmt.core._request import RequestBuilder
from az_mgmt.workloads.models import (
    SapAvailabilityZoneDetailsRequest,
    SapDiskConfigurationsRequest,
    SapSizingRecommendationRequest,
    SapSupportedSkusRequest,
)
from az_mgmt.workloads.operations import (
    LocationOperations,
    MonitorsOperations,
    Operations,
    PhpWorkloadsOperations,
    ProviderInstancesOperations,
    SapApplicationServerInstancesOperations,
    SapCentralInstancesOperations,
    SapDatabaseInstancesOperations,
    SapVirtualInstancesOperations,
    SkusOperations,
    WordpressInstancesOperations,
)


class WorkloadsClient(ArmClient):
    """Client for SAP monitors, Virtual Instances for SAP and PHP workloads."""

    @property
    def monitors(self) -> MonitorsOperations:
        return MonitorsOperations(self)

    @property
    def provider_instances(self) -> ProviderInstancesOperations:
        return ProviderInstancesOperations(self)

    @property
    def sap_virtual_instances(self) -> SapVirtualInstancesOperations:
        return SapVirtualInstancesOperations(self)

    @property
    def sap_central_instances(self) -> SapCentralInstancesOperations:
        return SapCentralInstancesOperations(self)

    @property
    def sap_database_instances(self) -> SapDatabaseInstancesOperations:
        return SapDatabaseInstancesOperations(self)

    @property
    def sap_application_server_instances(self) -> SapApplicationServerInstancesOperations:
        return SapApplicationServerInstancesOperations(self)

    @property
    def php_workloads(self) -> PhpWorkloadsOperations:
        return PhpWorkloadsOperations(self)

    @property
    def wordpress_instances(self) -> WordpressInstancesOperations:
        return WordpressInstancesOperations(self)

    @property
    def skus(self) -> SkusOperations:
        return SkusOperations(self)

    @property
    def operations(self) -> Operations:
        return Operations(self)

    def sap_sizing_recommendations(
        self, subscription_id: str, location: str, body: SapSizingRecommendationRequest | dict | None = None
    ) -> RequestBuilder:
        """Recommend SAP VM SKUs for a region."""
        return LocationOperations(self).sap_sizing_recommendations(subscription_id, location, body)

    def sap_supported_sku(
        self, subscription_id: str, location: str, body: SapSupportedSkusRequest | dict | None = None
    ) -> RequestBuilder:
        return LocationOperations(self).sap_supported_sku(subscription_id, location, body)

    def sap_disk_configurations(
        self, subscription_id: str, location: str, body: SapDiskConfigurationsRequest | dict | None = None
    ) -> RequestBuilder:
        return LocationOperations(self).sap_disk_configurations(subscription_id, location, body)

    def sap_availability_zone_details(
        self, subscription_id: str, location: str, body: SapAvailabilityZoneDetailsRequest | dict | None = None
    ) -> RequestBuilder:
        return LocationOperations(self).sap_availability_zone_details(subscription_id, location, body)
