"""Front Door management client."""

from __future__ import annotations

from az_mgmt.core._client import ArmClient
from az_mgmt.frontdoor.operations import (
    EndpointsOperations,
    ExperimentsOperations,
    FrontDoorsOperations,
    FrontendEndpointsOperations,
    ManagedRuleSetsOperations,
    NameAvailabilityOperations,
    NameAvailabilityWithSubscriptionOperations,
    NetworkExperimentProfilesOperations,
    PoliciesOperations,
    PreconfiguredEndpointsOperations,
    ReportsOperations,
    RulesEnginesOperations,
)


class FrontDoorClient(ArmClient):
    """Client for Front Doors, their WAF policies and network experiments."""

    @property
    def front_doors(self) -> FrontDoorsOperations:
        return FrontDoorsOperations(self)

    @property
    def frontend_endpoints(self) -> FrontendEndpointsOperations:
        return FrontendEndpointsOperations(self)

    @property
    def endpoints(self) -> EndpointsOperations:
        return EndpointsOperations(self)

    @property
    def rules_engines(self) -> RulesEnginesOperations:
        return RulesEnginesOperations(self)

    @property
    def policies(self) -> PoliciesOperations:
        return PoliciesOperations(self)

    @property
    def managed_rule_sets(self) -> ManagedRuleSetsOperations:
        return ManagedRuleSetsOperations(self)

    @property
    def name_availability(self) -> NameAvailabilityOperations:
        return NameAvailabilityOperations(self)

    @property
    def name_availability_with_subscription(self) -> NameAvailabilityWithSubscriptionOperations:
        return NameAvailabilityWithSubscriptionOperations(self)

    @property
    def network_experiment_profiles(self) -> NetworkExperimentProfilesOperations:
        return NetworkExperimentProfilesOperations(self)

    @property
    def preconfigured_endpoints(self) -> PreconfiguredEndpointsOperations:
        return PreconfiguredEndpointsOperations(self)

    @property
    def experiments(self) -> ExperimentsOperations:
        return ExperimentsOperations(self)

    @property
    def reports(self) -> ReportsOperations:
        return ReportsOperations(self)
