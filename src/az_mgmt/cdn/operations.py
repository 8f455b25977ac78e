"""Resource sub-clients for Microsoft.Cdn."""

from __future__ import annotations

import logging
from typing import Any

from az_mgmt.cdn.models import (
    AnyCustomDomainHttpsParameters,
    CheckNameAvailabilityInput,
    CheckNameAvailabilityOutput,
    CustomDomain,
    CustomDomainHttpsParameters,
    CustomDomainListResult,
    CustomDomainParameters,
    EdgenodeResult,
    Endpoint,
    EndpointListResult,
    EndpointUpdateParameters,
    LoadParameters,
    Origin,
    OriginGroup,
    OriginGroupListResult,
    OriginGroupUpdateParameters,
    OriginListResult,
    OriginUpdateParameters,
    Profile,
    ProfileListResult,
    ProfileUpdateParameters,
    PurgeParameters,
    ResourceUsageListResult,
    SsoUri,
    SupportedOptimizationTypesListResult,
    ValidateCustomDomainInput,
    ValidateCustomDomainOutput,
    ValidateProbeInput,
    ValidateProbeOutput,
)
from az_mgmt.core._client import SubClient
from az_mgmt.core._models import OperationListResult, as_model
from az_mgmt.core._request import RequestBuilder

logger = logging.getLogger(__name__)

API_VERSION = "2019-12-31"

_PROVIDER = "/subscriptions/{subscription_id}/providers/Microsoft.Cdn"
_PROFILES = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.Cdn/profiles"
_PROFILE = _PROFILES + "/{profile_name}"
_ENDPOINT = _PROFILE + "/endpoints/{endpoint_name}"

# Accepted statuses for writes that may complete asynchronously.
_CREATED = (200, 201, 202)
_ACCEPTED = (200, 202)
_DELETED = (200, 202, 204)


class _CdnSubClient(SubClient):
    API_VERSION = API_VERSION


class ProfilesOperations(_CdnSubClient):
    """CDN profiles."""

    def list(self, subscription_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _PROVIDER + "/profiles",
            path_params={"subscription_id": subscription_id},
            response_type=ProfileListResult,
        )

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _PROFILES,
            path_params={"subscription_id": subscription_id, "resource_group_name": resource_group_name},
            response_type=ProfileListResult,
        )

    def _profile(self, method: str, path: str, s: str, rg: str, profile: str, **kwargs: Any) -> RequestBuilder:
        return self._request(
            method,
            path,
            path_params={"subscription_id": s, "resource_group_name": rg, "profile_name": profile},
            **kwargs,
        )

    def get(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        return self._profile(
            "GET", _PROFILE, subscription_id, resource_group_name, profile_name, response_type=Profile
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        profile: Profile | dict,
    ) -> RequestBuilder:
        """Create a profile; the SKU cannot be changed afterwards."""
        return self._profile(
            "PUT",
            _PROFILE,
            subscription_id,
            resource_group_name,
            profile_name,
            body=as_model(Profile, profile),
            expected=_CREATED,
            response_type=Profile,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        profile_update_parameters: ProfileUpdateParameters | dict,
    ) -> RequestBuilder:
        """Update the tags of a profile."""
        return self._profile(
            "PATCH",
            _PROFILE,
            subscription_id,
            resource_group_name,
            profile_name,
            body=as_model(ProfileUpdateParameters, profile_update_parameters),
            expected=_ACCEPTED,
            response_type=Profile,
            long_running=True,
        )

    def delete(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        """Delete a profile together with its endpoints and origins."""
        return self._profile(
            "DELETE",
            _PROFILE,
            subscription_id,
            resource_group_name,
            profile_name,
            expected=_DELETED,
            long_running=True,
        )

    def generate_sso_uri(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        """Generate a single sign-on URI for the supplemental portal (Verizon SKUs)."""
        return self._profile(
            "POST",
            _PROFILE + "/generateSsoUri",
            subscription_id,
            resource_group_name,
            profile_name,
            response_type=SsoUri,
        )

    def list_supported_optimization_types(
        self, subscription_id: str, resource_group_name: str, profile_name: str
    ) -> RequestBuilder:
        return self._profile(
            "POST",
            _PROFILE + "/getSupportedOptimizationTypes",
            subscription_id,
            resource_group_name,
            profile_name,
            response_type=SupportedOptimizationTypesListResult,
        )

    def list_resource_usage(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        return self._profile(
            "POST",
            _PROFILE + "/checkResourceUsage",
            subscription_id,
            resource_group_name,
            profile_name,
            response_type=ResourceUsageListResult,
        )


class EndpointsOperations(_CdnSubClient):
    """Endpoints of a CDN profile."""

    def list_by_profile(self, subscription_id: str, resource_group_name: str, profile_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _PROFILE + "/endpoints",
            path_params={
                "subscription_id": subscription_id,
                "resource_group_name": resource_group_name,
                "profile_name": profile_name,
            },
            response_type=EndpointListResult,
        )

    def _endpoint(
        self, method: str, path: str, s: str, rg: str, profile: str, endpoint: str, **kwargs: Any
    ) -> RequestBuilder:
        return self._request(
            method,
            path,
            path_params={
                "subscription_id": s,
                "resource_group_name": rg,
                "profile_name": profile,
                "endpoint_name": endpoint,
            },
            **kwargs,
        )

    def get(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._endpoint(
            "GET",
            _ENDPOINT,
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            response_type=Endpoint,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        endpoint: Endpoint | dict,
    ) -> RequestBuilder:
        return self._endpoint(
            "PUT",
            _ENDPOINT,
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            body=as_model(Endpoint, endpoint),
            expected=_CREATED,
            response_type=Endpoint,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        endpoint_update_properties: EndpointUpdateParameters | dict,
    ) -> RequestBuilder:
        """Update an endpoint; custom domains and origins have their own sub-clients."""
        return self._endpoint(
            "PATCH",
            _ENDPOINT,
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            body=as_model(EndpointUpdateParameters, endpoint_update_properties),
            expected=_ACCEPTED,
            response_type=Endpoint,
            long_running=True,
        )

    def delete(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._endpoint(
            "DELETE",
            _ENDPOINT,
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            expected=_DELETED,
            long_running=True,
        )

    def start(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._endpoint(
            "POST",
            _ENDPOINT + "/start",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            expected=_ACCEPTED,
            response_type=Endpoint,
            long_running=True,
        )

    def stop(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._endpoint(
            "POST",
            _ENDPOINT + "/stop",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            expected=_ACCEPTED,
            response_type=Endpoint,
            long_running=True,
        )

    def purge_content(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        content_file_paths: PurgeParameters | dict,
    ) -> RequestBuilder:
        """Remove cached content; paths may end in ``/*`` to purge a directory."""
        return self._endpoint(
            "POST",
            _ENDPOINT + "/purge",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            body=as_model(PurgeParameters, content_file_paths),
            expected=_ACCEPTED,
            long_running=True,
        )

    def load_content(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        content_file_paths: LoadParameters | dict,
    ) -> RequestBuilder:
        """Pre-load content onto the edge nodes."""
        return self._endpoint(
            "POST",
            _ENDPOINT + "/load",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            body=as_model(LoadParameters, content_file_paths),
            expected=_ACCEPTED,
            long_running=True,
        )

    def validate_custom_domain(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        custom_domain_properties: ValidateCustomDomainInput | dict,
    ) -> RequestBuilder:
        """Check that a host name has a CNAME record pointing at the endpoint."""
        return self._endpoint(
            "POST",
            _ENDPOINT + "/validateCustomDomain",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            body=as_model(ValidateCustomDomainInput, custom_domain_properties),
            response_type=ValidateCustomDomainOutput,
        )

    def list_resource_usage(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._endpoint(
            "POST",
            _ENDPOINT + "/checkResourceUsage",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            response_type=ResourceUsageListResult,
        )


class _EndpointChildOperations(_CdnSubClient):
    """Shared plumbing for resources nested under an endpoint."""

    _collection = ""

    def _child(
        self,
        method: str,
        s: str,
        rg: str,
        profile: str,
        endpoint: str,
        name: str | None = None,
        suffix: str = "",
        **kwargs: Any,
    ) -> RequestBuilder:
        path_params = {
            "subscription_id": s,
            "resource_group_name": rg,
            "profile_name": profile,
            "endpoint_name": endpoint,
        }
        path = f"{_ENDPOINT}/{self._collection}"
        if name is not None:
            path += "/{child_name}"
            path_params["child_name"] = name
        return self._request(method, path + suffix, path_params=path_params, **kwargs)


class OriginsOperations(_EndpointChildOperations):
    """Origins of a CDN endpoint."""

    _collection = "origins"

    def list_by_endpoint(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._child(
            "GET", subscription_id, resource_group_name, profile_name, endpoint_name, response_type=OriginListResult
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_name: str,
    ) -> RequestBuilder:
        return self._child(
            "GET",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_name,
            response_type=Origin,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_name: str,
        origin: Origin | dict,
    ) -> RequestBuilder:
        return self._child(
            "PUT",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_name,
            body=as_model(Origin, origin),
            expected=_CREATED,
            response_type=Origin,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_name: str,
        origin_update_properties: OriginUpdateParameters | dict,
    ) -> RequestBuilder:
        return self._child(
            "PATCH",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_name,
            body=as_model(OriginUpdateParameters, origin_update_properties),
            expected=_ACCEPTED,
            response_type=Origin,
            long_running=True,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_name: str,
    ) -> RequestBuilder:
        return self._child(
            "DELETE",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_name,
            expected=_DELETED,
            long_running=True,
        )


class OriginGroupsOperations(_EndpointChildOperations):
    """Origin groups of a CDN endpoint."""

    _collection = "originGroups"

    def list_by_endpoint(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._child(
            "GET",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            response_type=OriginGroupListResult,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_group_name: str,
    ) -> RequestBuilder:
        return self._child(
            "GET",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_group_name,
            response_type=OriginGroup,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_group_name: str,
        origin_group: OriginGroup | dict,
    ) -> RequestBuilder:
        return self._child(
            "PUT",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_group_name,
            body=as_model(OriginGroup, origin_group),
            expected=_CREATED,
            response_type=OriginGroup,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_group_name: str,
        origin_group_update_properties: OriginGroupUpdateParameters | dict,
    ) -> RequestBuilder:
        return self._child(
            "PATCH",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_group_name,
            body=as_model(OriginGroupUpdateParameters, origin_group_update_properties),
            expected=_ACCEPTED,
            response_type=OriginGroup,
            long_running=True,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        origin_group_name: str,
    ) -> RequestBuilder:
        return self._child(
            "DELETE",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            origin_group_name,
            expected=_DELETED,
            long_running=True,
        )


class CustomDomainsOperations(_EndpointChildOperations):
    """Custom host names mapped onto a CDN endpoint."""

    _collection = "customDomains"

    def list_by_endpoint(
        self, subscription_id: str, resource_group_name: str, profile_name: str, endpoint_name: str
    ) -> RequestBuilder:
        return self._child(
            "GET",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            response_type=CustomDomainListResult,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        custom_domain_name: str,
    ) -> RequestBuilder:
        return self._child(
            "GET",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            custom_domain_name,
            response_type=CustomDomain,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        custom_domain_name: str,
        custom_domain_properties: CustomDomainParameters | dict,
    ) -> RequestBuilder:
        return self._child(
            "PUT",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            custom_domain_name,
            body=as_model(CustomDomainParameters, custom_domain_properties),
            expected=_CREATED,
            response_type=CustomDomain,
            long_running=True,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        custom_domain_name: str,
    ) -> RequestBuilder:
        return self._child(
            "DELETE",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            custom_domain_name,
            expected=_DELETED,
            response_type=CustomDomain,
            long_running=True,
        )

    def disable_custom_https(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        custom_domain_name: str,
    ) -> RequestBuilder:
        return self._child(
            "POST",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            custom_domain_name,
            suffix="/disableCustomHttps",
            expected=_ACCEPTED,
            response_type=CustomDomain,
        )

    def enable_custom_https(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
        custom_domain_name: str,
        *,
        custom_domain_https_parameters: CustomDomainHttpsParameters | dict | None = None,
    ) -> RequestBuilder:
        """Enable HTTPS; without parameters a CDN-managed certificate is used."""
        body = None
        if custom_domain_https_parameters is not None:
            body = as_model(AnyCustomDomainHttpsParameters, custom_domain_https_parameters)
        return self._child(
            "POST",
            subscription_id,
            resource_group_name,
            profile_name,
            endpoint_name,
            custom_domain_name,
            suffix="/enableCustomHttps",
            body=body,
            expected=_ACCEPTED,
            response_type=CustomDomain,
        )


class ResourceUsageOperations(_CdnSubClient):
    def list(self, subscription_id: str) -> RequestBuilder:
        """Quota usage of CDN resources across a subscription."""
        return self._request(
            "POST",
            _PROVIDER + "/checkResourceUsage",
            path_params={"subscription_id": subscription_id},
            response_type=ResourceUsageListResult,
        )


class Operations(_CdnSubClient):
    def list(self) -> RequestBuilder:
        return self._request("GET", "/providers/Microsoft.Cdn/operations", response_type=OperationListResult)


class EdgeNodesOperations(_CdnSubClient):
    def list(self) -> RequestBuilder:
        """Edge nodes and the IP ranges CDN traffic originates from."""
        return self._request("GET", "/providers/Microsoft.Cdn/edgenodes", response_type=EdgenodeResult)


class NameAvailabilityOperations(_CdnSubClient):
    """Provider-level checks; exposed directly on :class:`CdnClient`."""

    def check_name_availability(
        self, check_name_availability_input: CheckNameAvailabilityInput | dict
    ) -> RequestBuilder:
        return self._request(
            "POST",
            "/providers/Microsoft.Cdn/checkNameAvailability",
            body=as_model(CheckNameAvailabilityInput, check_name_availability_input),
            response_type=CheckNameAvailabilityOutput,
        )

    def check_name_availability_with_subscription(
        self,
        subscription_id: str,
        check_name_availability_input: CheckNameAvailabilityInput | dict,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _PROVIDER + "/checkNameAvailability",
            path_params={"subscription_id": subscription_id},
            body=as_model(CheckNameAvailabilityInput, check_name_availability_input),
            response_type=CheckNameAvailabilityOutput,
        )

    def validate_probe(self, subscription_id: str, validate_probe_input: ValidateProbeInput | dict) -> RequestBuilder:
        """Check that a probe path is reachable for dynamic site acceleration."""
        return self._request(
            "POST",
            _PROVIDER + "/validateProbe",
            path_params={"subscription_id": subscription_id},
            body=as_model(ValidateProbeInput, validate_probe_input),
            response_type=ValidateProbeOutput,
        )
