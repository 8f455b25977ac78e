"""Resource sub-clients for Front Door, WAF policies and network experiments.

Front Door resources use api-version 2020-05-01, WAF policies 2020-11-01
and network experiments 2019-11-01; each sub-client pins its own.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from az_mgmt.core._client import SubClient
from az_mgmt.core._models import as_model
from az_mgmt.core._request import RequestBuilder
from az_mgmt.frontdoor.models import (
    AggregationInterval,
    AnyCustomHttpsConfiguration,
    CheckNameAvailabilityInput,
    CheckNameAvailabilityOutput,
    CustomHttpsConfiguration,
    Experiment,
    ExperimentList,
    ExperimentUpdateModel,
    FrontDoor,
    FrontDoorListResult,
    FrontendEndpoint,
    FrontendEndpointsListResult,
    LatencyScorecard,
    LatencyScorecardAggregationInterval,
    ManagedRuleSetDefinitionList,
    PreconfiguredEndpointList,
    Profile,
    ProfileList,
    ProfileUpdateModel,
    PurgeParameters,
    RulesEngine,
    RulesEngineListResult,
    Timeseries,
    TimeseriesType,
    ValidateCustomDomainInput,
    ValidateCustomDomainOutput,
    WebApplicationFirewallPolicy,
    WebApplicationFirewallPolicyList,
)

logger = logging.getLogger(__name__)

FRONT_DOOR_API_VERSION = "2020-05-01"
WAF_API_VERSION = "2020-11-01"
EXPERIMENTS_API_VERSION = "2019-11-01"

_NETWORK = "/subscriptions/{subscription_id}/providers/Microsoft.Network"
_RG_NETWORK = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.Network"
_FRONT_DOOR = _RG_NETWORK + "/frontDoors/{front_door_name}"
_POLICIES = _RG_NETWORK + "/FrontDoorWebApplicationFirewallPolicies"
_PROFILE = _RG_NETWORK + "/NetworkExperimentProfiles/{profile_name}"
_EXPERIMENT = _PROFILE + "/Experiments/{experiment_name}"

_CREATED = (200, 201, 202)
_ACCEPTED = (200, 202)
_DELETED = (200, 202, 204)


class _FrontDoorSubClient(SubClient):
    API_VERSION = FRONT_DOOR_API_VERSION

    def _front_door(
        self, method: str, path: str, s: str, rg: str, front_door: str, **kwargs: Any
    ) -> RequestBuilder:
        return self._request(
            method,
            path,
            path_params={"subscription_id": s, "resource_group_name": rg, "front_door_name": front_door},
            **kwargs,
        )


class FrontDoorsOperations(_FrontDoorSubClient):
    """Front Doors."""

    def list(self, subscription_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _NETWORK + "/frontDoors",
            path_params={"subscription_id": subscription_id},
            response_type=FrontDoorListResult,
        )

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _RG_NETWORK + "/frontDoors",
            path_params={"subscription_id": subscription_id, "resource_group_name": resource_group_name},
            response_type=FrontDoorListResult,
        )

    def get(self, subscription_id: str, resource_group_name: str, front_door_name: str) -> RequestBuilder:
        return self._front_door(
            "GET", _FRONT_DOOR, subscription_id, resource_group_name, front_door_name, response_type=FrontDoor
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        front_door_name: str,
        front_door_parameters: FrontDoor | dict,
    ) -> RequestBuilder:
        """Create a Front Door or replace its whole configuration."""
        return self._front_door(
            "PUT",
            _FRONT_DOOR,
            subscription_id,
            resource_group_name,
            front_door_name,
            body=as_model(FrontDoor, front_door_parameters),
            expected=_CREATED,
            response_type=FrontDoor,
            long_running=True,
        )

    def delete(self, subscription_id: str, resource_group_name: str, front_door_name: str) -> RequestBuilder:
        return self._front_door(
            "DELETE",
            _FRONT_DOOR,
            subscription_id,
            resource_group_name,
            front_door_name,
            expected=_DELETED,
            long_running=True,
        )

    def validate_custom_domain(
        self,
        subscription_id: str,
        resource_group_name: str,
        front_door_name: str,
        custom_domain_properties: ValidateCustomDomainInput | dict,
    ) -> RequestBuilder:
        """Check that a host name is CNAMEd to the Front Door's default frontend."""
        return self._front_door(
            "POST",
            _FRONT_DOOR + "/validateCustomDomain",
            subscription_id,
            resource_group_name,
            front_door_name,
            body=as_model(ValidateCustomDomainInput, custom_domain_properties),
            response_type=ValidateCustomDomainOutput,
        )


class FrontendEndpointsOperations(_FrontDoorSubClient):
    """Frontend endpoints (host names) of a Front Door."""

    def list_by_front_door(
        self, subscription_id: str, resource_group_name: str, front_door_name: str
    ) -> RequestBuilder:
        return self._front_door(
            "GET",
            _FRONT_DOOR + "/frontendEndpoints",
            subscription_id,
            resource_group_name,
            front_door_name,
            response_type=FrontendEndpointsListResult,
        )

    def _endpoint(
        self, method: str, suffix: str, s: str, rg: str, front_door: str, endpoint: str, **kwargs: Any
    ) -> RequestBuilder:
        return self._request(
            method,
            _FRONT_DOOR + "/frontendEndpoints/{frontend_endpoint_name}" + suffix,
            path_params={
                "subscription_id": s,
                "resource_group_name": rg,
                "front_door_name": front_door,
                "frontend_endpoint_name": endpoint,
            },
            **kwargs,
        )

    def get(
        self, subscription_id: str, resource_group_name: str, front_door_name: str, frontend_endpoint_name: str
    ) -> RequestBuilder:
        return self._endpoint(
            "GET",
            "",
            subscription_id,
            resource_group_name,
            front_door_name,
            frontend_endpoint_name,
            response_type=FrontendEndpoint,
        )

    def enable_https(
        self,
        subscription_id: str,
        resource_group_name: str,
        front_door_name: str,
        frontend_endpoint_name: str,
        custom_https_configuration: CustomHttpsConfiguration | dict,
    ) -> RequestBuilder:
        """Turn on HTTPS for a custom domain.

        Pass a :class:`FrontDoorManagedHttpsConfiguration` for a
        Front Door issued certificate or a :class:`KeyVaultHttpsConfiguration`
        to bring your own.  A plain dict is dispatched on ``certificateSource``.
        """
        return self._endpoint(
            "POST",
            "/enableHttps",
            subscription_id,
            resource_group_name,
            front_door_name,
            frontend_endpoint_name,
            body=as_model(AnyCustomHttpsConfiguration, custom_https_configuration),
            expected=_ACCEPTED,
            long_running=True,
        )

    def disable_https(
        self, subscription_id: str, resource_group_name: str, front_door_name: str, frontend_endpoint_name: str
    ) -> RequestBuilder:
        return self._endpoint(
            "POST",
            "/disableHttps",
            subscription_id,
            resource_group_name,
            front_door_name,
            frontend_endpoint_name,
            expected=_ACCEPTED,
            long_running=True,
        )


class EndpointsOperations(_FrontDoorSubClient):
    """Cache operations on a Front Door."""

    def purge_content(
        self,
        subscription_id: str,
        resource_group_name: str,
        front_door_name: str,
        content_file_paths: PurgeParameters | dict,
    ) -> RequestBuilder:
        """Remove cached content from every edge; paths may end in ``/*``."""
        return self._front_door(
            "POST",
            _FRONT_DOOR + "/purge",
            subscription_id,
            resource_group_name,
            front_door_name,
            body=as_model(PurgeParameters, content_file_paths),
            expected=_ACCEPTED,
            long_running=True,
        )


class RulesEnginesOperations(_FrontDoorSubClient):
    """Rules engine configurations of a Front Door."""

    def list_by_front_door(
        self, subscription_id: str, resource_group_name: str, front_door_name: str
    ) -> RequestBuilder:
        return self._front_door(
            "GET",
            _FRONT_DOOR + "/rulesEngines",
            subscription_id,
            resource_group_name,
            front_door_name,
            response_type=RulesEngineListResult,
        )

    def _engine(self, method: str, s: str, rg: str, front_door: str, name: str, **kwargs: Any) -> RequestBuilder:
        return self._request(
            method,
            _FRONT_DOOR + "/rulesEngines/{rules_engine_name}",
            path_params={
                "subscription_id": s,
                "resource_group_name": rg,
                "front_door_name": front_door,
                "rules_engine_name": name,
            },
            **kwargs,
        )

    def get(
        self, subscription_id: str, resource_group_name: str, front_door_name: str, rules_engine_name: str
    ) -> RequestBuilder:
        return self._engine(
            "GET", subscription_id, resource_group_name, front_door_name, rules_engine_name, response_type=RulesEngine
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        front_door_name: str,
        rules_engine_name: str,
        rules_engine_parameters: RulesEngine | dict,
    ) -> RequestBuilder:
        return self._engine(
            "PUT",
            subscription_id,
            resource_group_name,
            front_door_name,
            rules_engine_name,
            body=as_model(RulesEngine, rules_engine_parameters),
            expected=_CREATED,
            response_type=RulesEngine,
            long_running=True,
        )

    def delete(
        self, subscription_id: str, resource_group_name: str, front_door_name: str, rules_engine_name: str
    ) -> RequestBuilder:
        return self._engine(
            "DELETE",
            subscription_id,
            resource_group_name,
            front_door_name,
            rules_engine_name,
            expected=_DELETED,
            long_running=True,
        )


class NameAvailabilityOperations(_FrontDoorSubClient):
    """Global check for Front Door and frontend endpoint names."""

    def check(self, check_front_door_name_availability_input: CheckNameAvailabilityInput | dict) -> RequestBuilder:
        return self._request(
            "POST",
            "/providers/Microsoft.Network/checkFrontDoorNameAvailability",
            body=as_model(CheckNameAvailabilityInput, check_front_door_name_availability_input),
            response_type=CheckNameAvailabilityOutput,
        )


class NameAvailabilityWithSubscriptionOperations(_FrontDoorSubClient):
    """Name availability scoped to a subscription."""

    def check(
        self,
        subscription_id: str,
        check_front_door_name_availability_input: CheckNameAvailabilityInput | dict,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _NETWORK + "/checkFrontDoorNameAvailability",
            path_params={"subscription_id": subscription_id},
            body=as_model(CheckNameAvailabilityInput, check_front_door_name_availability_input),
            response_type=CheckNameAvailabilityOutput,
        )


# ---------------------------------------------------------------------------
# Web application firewall
# ---------------------------------------------------------------------------


class PoliciesOperations(SubClient):
    """Front Door web application firewall policies."""

    API_VERSION = WAF_API_VERSION

    def list(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _POLICIES,
            path_params={"subscription_id": subscription_id, "resource_group_name": resource_group_name},
            response_type=WebApplicationFirewallPolicyList,
        )

    def _policy(self, method: str, s: str, rg: str, name: str, **kwargs: Any) -> RequestBuilder:
        return self._request(
            method,
            _POLICIES + "/{policy_name}",
            path_params={"subscription_id": s, "resource_group_name": rg, "policy_name": name},
            **kwargs,
        )

    def get(self, subscription_id: str, resource_group_name: str, policy_name: str) -> RequestBuilder:
        return self._policy(
            "GET", subscription_id, resource_group_name, policy_name, response_type=WebApplicationFirewallPolicy
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        policy_name: str,
        parameters: WebApplicationFirewallPolicy | dict,
    ) -> RequestBuilder:
        """Create or replace a policy; policy names must be alphanumeric."""
        return self._policy(
            "PUT",
            subscription_id,
            resource_group_name,
            policy_name,
            body=as_model(WebApplicationFirewallPolicy, parameters),
            expected=_CREATED,
            response_type=WebApplicationFirewallPolicy,
            long_running=True,
        )

    def delete(self, subscription_id: str, resource_group_name: str, policy_name: str) -> RequestBuilder:
        return self._policy(
            "DELETE",
            subscription_id,
            resource_group_name,
            policy_name,
            expected=_DELETED,
            long_running=True,
        )


class ManagedRuleSetsOperations(SubClient):
    API_VERSION = WAF_API_VERSION

    def list(self, subscription_id: str) -> RequestBuilder:
        """List the managed rule sets a policy can reference."""
        return self._request(
            "GET",
            _NETWORK + "/FrontDoorWebApplicationFirewallManagedRuleSets",
            path_params={"subscription_id": subscription_id},
            response_type=ManagedRuleSetDefinitionList,
        )


# ---------------------------------------------------------------------------
# Network experiments
# ---------------------------------------------------------------------------


class _ExperimentsSubClient(SubClient):
    API_VERSION = EXPERIMENTS_API_VERSION

    def _profile(self, method: str, path: str, s: str, rg: str, profile: str, **kwargs: Any) -> RequestBuilder:
        return self._request(
            method,
            path,
            path_params={"subscription_id": s, "resource_group_name": rg, "profile_name": profile},
            **kwargs,
        )

    def _experiment(
        self, method: str, path: str, s: str, rg: str, profile: str, experiment: str, **kwargs: Any
    ) -> RequestBuilder:
        return self._request(
            method,
            path,
            path_params={
                "subscription_id": s,
                "resource_group_name": rg,
                "profile_name": profile,
                "experiment_name": experiment,
            },
            **kwargs,
        )


class NetworkExperimentProfilesOperations(_ExperimentsSubClient):
    """Network experiment profiles."""

    def list(self, subscription_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _NETWORK + "/NetworkExperimentProfiles",
            path_params={"subscription_id": subscription_id},
            response_type=ProfileList,
        )

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _RG_NETWORK + "/NetworkExperimentProfiles",
            path_params={"subscription_id": subscription_id, "resource_group_name": resource_group_name},
            response_type=ProfileList,
        )

    def get(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        return self._profile("GET", _PROFILE, subscription_id, resource_group_name, profile_name, response_type=Profile)

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        parameters: Profile | dict,
    ) -> RequestBuilder:
        return self._profile(
            "PUT",
            _PROFILE,
            subscription_id,
            resource_group_name,
            profile_name,
            body=as_model(Profile, parameters),
            expected=_CREATED,
            response_type=Profile,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        parameters: ProfileUpdateModel | dict,
    ) -> RequestBuilder:
        return self._profile(
            "PATCH",
            _PROFILE,
            subscription_id,
            resource_group_name,
            profile_name,
            body=as_model(ProfileUpdateModel, parameters),
            expected=_ACCEPTED,
            response_type=Profile,
            long_running=True,
        )

    def delete(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        return self._profile(
            "DELETE",
            _PROFILE,
            subscription_id,
            resource_group_name,
            profile_name,
            expected=_DELETED,
            long_running=True,
        )


class PreconfiguredEndpointsOperations(_ExperimentsSubClient):
    def list(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        """List the Microsoft-provided endpoints an experiment can compare against."""
        return self._profile(
            "GET",
            _PROFILE + "/PreconfiguredEndpoints",
            subscription_id,
            resource_group_name,
            profile_name,
            response_type=PreconfiguredEndpointList,
        )


class ExperimentsOperations(_ExperimentsSubClient):
    """Experiments of a network experiment profile."""

    def list_by_profile(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        return self._profile(
            "GET",
            _PROFILE + "/Experiments",
            subscription_id,
            resource_group_name,
            profile_name,
            response_type=ExperimentList,
        )

    def get(
        self, subscription_id: str, resource_group_name: str, profile_name: str, experiment_name: str
    ) -> RequestBuilder:
        return self._experiment(
            "GET",
            _EXPERIMENT,
            subscription_id,
            resource_group_name,
            profile_name,
            experiment_name,
            response_type=Experiment,
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        experiment_name: str,
        parameters: Experiment | dict,
    ) -> RequestBuilder:
        return self._experiment(
            "PUT",
            _EXPERIMENT,
            subscription_id,
            resource_group_name,
            profile_name,
            experiment_name,
            body=as_model(Experiment, parameters),
            expected=_CREATED,
            response_type=Experiment,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        experiment_name: str,
        parameters: ExperimentUpdateModel | dict,
    ) -> RequestBuilder:
        return self._experiment(
            "PATCH",
            _EXPERIMENT,
            subscription_id,
            resource_group_name,
            profile_name,
            experiment_name,
            body=as_model(ExperimentUpdateModel, parameters),
            expected=_ACCEPTED,
            response_type=Experiment,
            long_running=True,
        )

    def delete(
        self, subscription_id: str, resource_group_name: str, profile_name: str, experiment_name: str
    ) -> RequestBuilder:
        return self._experiment(
            "DELETE",
            _EXPERIMENT,
            subscription_id,
            resource_group_name,
            profile_name,
            experiment_name,
            expected=_DELETED,
            long_running=True,
        )


class ReportsOperations(_ExperimentsSubClient):
    """Latency reports collected by an experiment."""

    def get_latency_scorecards(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        experiment_name: str,
        aggregation_interval: LatencyScorecardAggregationInterval | str,
        *,
        end_date_time_utc: datetime | str | None = None,
        country: str | None = None,
    ) -> RequestBuilder:
        return self._experiment(
            "GET",
            _EXPERIMENT + "/LatencyScorecard",
            subscription_id,
            resource_group_name,
            profile_name,
            experiment_name,
            query={
                "endDateTimeUTC": end_date_time_utc,
                "country": country,
                "aggregationInterval": aggregation_interval,
            },
            response_type=LatencyScorecard,
        )

    def get_timeseries(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        experiment_name: str,
        start_date_time_utc: datetime,
        end_date_time_utc: datetime,
        aggregation_interval: AggregationInterval | str,
        timeseries_type: TimeseriesType | str,
        *,
        endpoint: str | None = None,
        country: str | None = None,
    ) -> RequestBuilder:
        """Return one latency or measurement-count series for the window."""
        return self._experiment(
            "GET",
            _EXPERIMENT + "/Timeseries",
            subscription_id,
            resource_group_name,
            profile_name,
            experiment_name,
            query={
                "startDateTimeUTC": start_date_time_utc,
                "endDateTimeUTC": end_date_time_utc,
                "aggregationInterval": aggregation_interval,
                "timeseriesType": timeseries_type,
                "endpoint": endpoint,
                "country": country,
            },
            response_type=Timeseries,
        )
