"""Microsoft.Cdn management client."""

from __future__ import annotations

from az_mgmt.cdn.models import CheckNameAvailabilityInput, ValidateProbeInput
from az_mgmt.cdn.operations import (
    CustomDomainsOperations,
    EdgeNodesOperations,
    EndpointsOperations,
    NameAvailabilityOperations,
    Operations,
    OriginGroupsOperations,
    OriginsOperations,
    ProfilesOperations,
    ResourceUsageOperations,
)
from az_mgmt.core._client import ArmClient
from az_mgmt.core._request import RequestBuilder


class CdnClient(ArmClient):
    """Client for CDN profiles, endpoints, origins and custom domains.

    Build one with ``CdnClient.builder(credential).build()`` or
    ``CdnClient.from_settings()``; each property returns a lightweight
    sub-client bound to this client's pipeline.
    """

    @property
    def profiles(self) -> ProfilesOperations:
        return ProfilesOperations(self)

    @property
    def endpoints(self) -> EndpointsOperations:
        return EndpointsOperations(self)

    @property
    def origins(self) -> OriginsOperations:
        return OriginsOperations(self)

    @property
    def origin_groups(self) -> OriginGroupsOperations:
        return OriginGroupsOperations(self)

    @property
    def custom_domains(self) -> CustomDomainsOperations:
        return CustomDomainsOperations(self)

    @property
    def resource_usage(self) -> ResourceUsageOperations:
        return ResourceUsageOperations(self)

    @property
    def operations(self) -> Operations:
        return Operations(self)

    @property
    def edge_nodes(self) -> EdgeNodesOperations:
        return EdgeNodesOperations(self)

    def check_name_availability(
        self, check_name_availability_input: CheckNameAvailabilityInput | dict
    ) -> RequestBuilder:
        """Check whether an endpoint name is globally available."""
        return NameAvailabilityOperations(self).check_name_availability(check_name_availability_input)

    def check_name_availability_with_subscription(
        self,
        subscription_id: str,
        check_name_availability_input: CheckNameAvailabilityInput | dict,
    ) -> RequestBuilder:
        return NameAvailabilityOperations(self).check_name_availability_with_subscription(
            subscription_id, check_name_availability_input
        )

    def validate_probe(self, subscription_id: str, validate_probe_input: ValidateProbeInput | dict) -> RequestBuilder:
        return NameAvailabilityOperations(self).validate_probe(subscription_id, validate_probe_input)
