"""Resource sub-clients for Microsoft.Workloads."""

from __future__ import annotations

import logging
from typing import Any

from az_mgmt.core._client import SubClient
from az_mgmt.core._models import OperationListResult, as_model
from az_mgmt.core._request import RequestBuilder
from az_mgmt.workloads.models import (
    AnySapSizingRecommendationResult,
    Monitor,
    MonitorListResult,
    PatchResourceRequestBody,
    PhpWorkloadResource,
    PhpWorkloadResourceList,
    ProviderInstance,
    ProviderInstanceListResult,
    SapApplicationServerInstance,
    SapApplicationServerInstanceList,
    SapAvailabilityZoneDetailsRequest,
    SapAvailabilityZoneDetailsResult,
    SapCentralInstanceList,
    SapCentralServerInstance,
    SapDatabaseInstance,
    SapDatabaseInstanceList,
    SapDiskConfigurationsRequest,
    SapDiskConfigurationsResult,
    SapSizingRecommendationRequest,
    SapSupportedResourceSkusResult,
    SapSupportedSkusRequest,
    SapVirtualInstance,
    SapVirtualInstanceList,
    SkusListResult,
    StopRequest,
    Tags,
    UpdateMonitorRequest,
    UpdateSapVirtualInstanceRequest,
    WordpressInstanceResource,
    WordpressInstanceResourceList,
)

logger = logging.getLogger(__name__)

API_VERSION = "2021-12-01-preview"

_PROVIDER = "/subscriptions/{subscription_id}/providers/Microsoft.Workloads"
_RG_PROVIDER = "/subscriptions/{subscription_id}/resourceGroups/{resource_group_name}/providers/Microsoft.Workloads"
_MONITOR = _RG_PROVIDER + "/monitors/{monitor_name}"
_SVI = _RG_PROVIDER + "/sapVirtualInstances/{sap_virtual_instance_name}"
_PHP = _RG_PROVIDER + "/phpWorkloads/{php_workload_name}"
_LOCATION_METADATA = _PROVIDER + "/locations/{location}/sapVirtualInstanceMetadata/default"

_CREATED = (200, 201, 202)
_ACCEPTED = (200, 202)
_DELETED = (200, 202, 204)


class _WorkloadsSubClient(SubClient):
    API_VERSION = API_VERSION

    def _scoped(self, method: str, path: str, s: str, rg: str | None = None, **kwargs: Any) -> RequestBuilder:
        path_params: dict[str, Any] = {"subscription_id": s}
        if rg is not None:
            path_params["resource_group_name"] = rg
        path_params.update(kwargs.pop("path_params", {}))
        return self._request(method, path, path_params=path_params, **kwargs)


class MonitorsOperations(_WorkloadsSubClient):
    """SAP monitors."""

    def list(self, subscription_id: str) -> RequestBuilder:
        return self._scoped("GET", _PROVIDER + "/monitors", subscription_id, response_type=MonitorListResult)

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            _RG_PROVIDER + "/monitors",
            subscription_id,
            resource_group_name,
            response_type=MonitorListResult,
        )

    def get(self, subscription_id: str, resource_group_name: str, monitor_name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            _MONITOR,
            subscription_id,
            resource_group_name,
            path_params={"monitor_name": monitor_name},
            response_type=Monitor,
        )

    def create(
        self, subscription_id: str, resource_group_name: str, monitor_name: str, monitor_parameter: Monitor | dict
    ) -> RequestBuilder:
        return self._scoped(
            "PUT",
            _MONITOR,
            subscription_id,
            resource_group_name,
            path_params={"monitor_name": monitor_name},
            body=as_model(Monitor, monitor_parameter),
            expected=_CREATED,
            response_type=Monitor,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        monitor_name: str,
        body: UpdateMonitorRequest | dict,
    ) -> RequestBuilder:
        """Patch the tags and identity of a monitor."""
        return self._scoped(
            "PATCH",
            _MONITOR,
            subscription_id,
            resource_group_name,
            path_params={"monitor_name": monitor_name},
            body=as_model(UpdateMonitorRequest, body),
            response_type=Monitor,
        )

    def delete(self, subscription_id: str, resource_group_name: str, monitor_name: str) -> RequestBuilder:
        return self._scoped(
            "DELETE",
            _MONITOR,
            subscription_id,
            resource_group_name,
            path_params={"monitor_name": monitor_name},
            expected=_DELETED,
            long_running=True,
        )


class ProviderInstancesOperations(_WorkloadsSubClient):
    """Provider instances (data sources) of an SAP monitor."""

    def list(self, subscription_id: str, resource_group_name: str, monitor_name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            _MONITOR + "/providerInstances",
            subscription_id,
            resource_group_name,
            path_params={"monitor_name": monitor_name},
            response_type=ProviderInstanceListResult,
        )

    def _instance(
        self, method: str, s: str, rg: str, monitor: str, name: str, **kwargs: Any
    ) -> RequestBuilder:
        return self._scoped(
            method,
            _MONITOR + "/providerInstances/{provider_instance_name}",
            s,
            rg,
            path_params={"monitor_name": monitor, "provider_instance_name": name},
            **kwargs,
        )

    def get(
        self, subscription_id: str, resource_group_name: str, monitor_name: str, provider_instance_name: str
    ) -> RequestBuilder:
        return self._instance(
            "GET",
            subscription_id,
            resource_group_name,
            monitor_name,
            provider_instance_name,
            response_type=ProviderInstance,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        monitor_name: str,
        provider_instance_name: str,
        provider_instance_parameter: ProviderInstance | dict,
    ) -> RequestBuilder:
        """Create a provider instance; ``providerSettings`` selects the provider type."""
        return self._instance(
            "PUT",
            subscription_id,
            resource_group_name,
            monitor_name,
            provider_instance_name,
            body=as_model(ProviderInstance, provider_instance_parameter),
            expected=_CREATED,
            response_type=ProviderInstance,
            long_running=True,
        )

    def delete(
        self, subscription_id: str, resource_group_name: str, monitor_name: str, provider_instance_name: str
    ) -> RequestBuilder:
        return self._instance(
            "DELETE",
            subscription_id,
            resource_group_name,
            monitor_name,
            provider_instance_name,
            expected=_DELETED,
            long_running=True,
        )


class SapVirtualInstancesOperations(_WorkloadsSubClient):
    """Virtual Instances for SAP."""

    def list(self, subscription_id: str) -> RequestBuilder:
        return self._scoped(
            "GET", _PROVIDER + "/sapVirtualInstances", subscription_id, response_type=SapVirtualInstanceList
        )

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            _RG_PROVIDER + "/sapVirtualInstances",
            subscription_id,
            resource_group_name,
            response_type=SapVirtualInstanceList,
        )

    def _svi(self, method: str, suffix: str, s: str, rg: str, name: str, **kwargs: Any) -> RequestBuilder:
        return self._scoped(
            method, _SVI + suffix, s, rg, path_params={"sap_virtual_instance_name": name}, **kwargs
        )

    def get(self, subscription_id: str, resource_group_name: str, sap_virtual_instance_name: str) -> RequestBuilder:
        return self._svi(
            "GET", "", subscription_id, resource_group_name, sap_virtual_instance_name, response_type=SapVirtualInstance
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        sap_virtual_instance_name: str,
        body: SapVirtualInstance | dict,
    ) -> RequestBuilder:
        """Deploy or register an SAP system.

        The shape of ``properties.configuration`` decides which: a
        :class:`DeploymentConfiguration` provisions new infrastructure, a
        :class:`DiscoveryConfiguration` registers an existing system.
        """
        return self._svi(
            "PUT",
            "",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            body=as_model(SapVirtualInstance, body),
            expected=_CREATED,
            response_type=SapVirtualInstance,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        sap_virtual_instance_name: str,
        body: UpdateSapVirtualInstanceRequest | dict,
    ) -> RequestBuilder:
        return self._svi(
            "PATCH",
            "",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            body=as_model(UpdateSapVirtualInstanceRequest, body),
            response_type=SapVirtualInstance,
        )

    def delete(self, subscription_id: str, resource_group_name: str, sap_virtual_instance_name: str) -> RequestBuilder:
        return self._svi(
            "DELETE",
            "",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            expected=_DELETED,
            long_running=True,
        )

    def start(self, subscription_id: str, resource_group_name: str, sap_virtual_instance_name: str) -> RequestBuilder:
        """Start the SAP application layer."""
        return self._svi(
            "POST",
            "/start",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            expected=_ACCEPTED,
            long_running=True,
        )

    def stop(
        self,
        subscription_id: str,
        resource_group_name: str,
        sap_virtual_instance_name: str,
        body: StopRequest | dict | None = None,
    ) -> RequestBuilder:
        """Stop the SAP application layer; ``hardStop`` skips the soft shutdown."""
        return self._svi(
            "POST",
            "/stop",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            body=as_model(StopRequest, body) if body is not None else None,
            expected=_ACCEPTED,
            long_running=True,
        )


class _SapInstanceChildOperations(_WorkloadsSubClient):
    """Shared plumbing for the instances nested under a Virtual Instance for SAP."""

    _collection = ""
    _model: Any = None
    _list_model: Any = None

    def _child(
        self, method: str, s: str, rg: str, svi: str, name: str | None = None, **kwargs: Any
    ) -> RequestBuilder:
        path = f"{_SVI}/{self._collection}"
        path_params = {"sap_virtual_instance_name": svi}
        if name is not None:
            path += "/{instance_name}"
            path_params["instance_name"] = name
        return self._scoped(method, path, s, rg, path_params=path_params, **kwargs)

    def list(self, subscription_id: str, resource_group_name: str, sap_virtual_instance_name: str) -> RequestBuilder:
        return self._child(
            "GET", subscription_id, resource_group_name, sap_virtual_instance_name, response_type=self._list_model
        )

    def get(
        self, subscription_id: str, resource_group_name: str, sap_virtual_instance_name: str, instance_name: str
    ) -> RequestBuilder:
        return self._child(
            "GET",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            instance_name,
            response_type=self._model,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        sap_virtual_instance_name: str,
        instance_name: str,
        body: Tags | dict,
    ) -> RequestBuilder:
        """Update the tags of an instance."""
        return self._child(
            "PATCH",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            instance_name,
            body=as_model(Tags, body),
            response_type=self._model,
        )

    def delete(
        self, subscription_id: str, resource_group_name: str, sap_virtual_instance_name: str, instance_name: str
    ) -> RequestBuilder:
        return self._child(
            "DELETE",
            subscription_id,
            resource_group_name,
            sap_virtual_instance_name,
            instance_name,
            expected=_DELETED,
            long_running=True,
        )


class SapCentralInstancesOperations(_SapInstanceChildOperations):
    """ASCS/SCS central services instances."""

    _collection = "centralInstances"
    _model = SapCentralServerInstance
    _list_model = SapCentralInstanceList


class SapDatabaseInstancesOperations(_SapInstanceChildOperations):
    _collection = "databaseInstances"
    _model = SapDatabaseInstance
    _list_model = SapDatabaseInstanceList


class SapApplicationServerInstancesOperations(_SapInstanceChildOperations):
    _collection = "applicationInstances"
    _model = SapApplicationServerInstance
    _list_model = SapApplicationServerInstanceList


class LocationOperations(_WorkloadsSubClient):
    """Recommendations for planning an SAP deployment in a region."""

    def _action(self, action: str, s: str, location: str, **kwargs: Any) -> RequestBuilder:
        return self._scoped(
            "POST", _LOCATION_METADATA + "/" + action, s, path_params={"location": location}, **kwargs
        )

    def sap_sizing_recommendations(
        self, subscription_id: str, location: str, body: SapSizingRecommendationRequest | dict | None = None
    ) -> RequestBuilder:
        """Recommend VM SKUs; the result type follows the requested ``deploymentType``."""
        return self._action(
            "getSizingRecommendations",
            subscription_id,
            location,
            body=as_model(SapSizingRecommendationRequest, body) if body is not None else None,
            response_type=AnySapSizingRecommendationResult,
        )

    def sap_supported_sku(
        self, subscription_id: str, location: str, body: SapSupportedSkusRequest | dict | None = None
    ) -> RequestBuilder:
        return self._action(
            "getSapSupportedSku",
            subscription_id,
            location,
            body=as_model(SapSupportedSkusRequest, body) if body is not None else None,
            response_type=SapSupportedResourceSkusResult,
        )

    def sap_disk_configurations(
        self, subscription_id: str, location: str, body: SapDiskConfigurationsRequest | dict | None = None
    ) -> RequestBuilder:
        return self._action(
            "getDiskConfigurations",
            subscription_id,
            location,
            body=as_model(SapDiskConfigurationsRequest, body) if body is not None else None,
            response_type=SapDiskConfigurationsResult,
        )

    def sap_availability_zone_details(
        self, subscription_id: str, location: str, body: SapAvailabilityZoneDetailsRequest | dict | None = None
    ) -> RequestBuilder:
        return self._action(
            "getAvailabilityZoneDetails",
            subscription_id,
            location,
            body=as_model(SapAvailabilityZoneDetailsRequest, body) if body is not None else None,
            response_type=SapAvailabilityZoneDetailsResult,
        )


class PhpWorkloadsOperations(_WorkloadsSubClient):
    """PHP workloads."""

    def list(self, subscription_id: str) -> RequestBuilder:
        return self._scoped("GET", _PROVIDER + "/phpWorkloads", subscription_id, response_type=PhpWorkloadResourceList)

    def list_by_resource_group(self, subscription_id: str, resource_group_name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            _RG_PROVIDER + "/phpWorkloads",
            subscription_id,
            resource_group_name,
            response_type=PhpWorkloadResourceList,
        )

    def _php(self, method: str, s: str, rg: str, name: str, **kwargs: Any) -> RequestBuilder:
        return self._scoped(method, _PHP, s, rg, path_params={"php_workload_name": name}, **kwargs)

    def get(self, subscription_id: str, resource_group_name: str, php_workload_name: str) -> RequestBuilder:
        return self._php(
            "GET", subscription_id, resource_group_name, php_workload_name, response_type=PhpWorkloadResource
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        php_workload_name: str,
        php_workload_resource: PhpWorkloadResource | dict,
    ) -> RequestBuilder:
        return self._php(
            "PUT",
            subscription_id,
            resource_group_name,
            php_workload_name,
            body=as_model(PhpWorkloadResource, php_workload_resource),
            expected=_CREATED,
            response_type=PhpWorkloadResource,
            long_running=True,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        php_workload_name: str,
        resource_patch_request_body: PatchResourceRequestBody | dict,
    ) -> RequestBuilder:
        return self._php(
            "PATCH",
            subscription_id,
            resource_group_name,
            php_workload_name,
            body=as_model(PatchResourceRequestBody, resource_patch_request_body),
            response_type=PhpWorkloadResource,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        php_workload_name: str,
        *,
        delete_infra: str | None = None,
    ) -> RequestBuilder:
        """Delete a workload; ``delete_infra="true"`` also removes its infrastructure."""
        return self._php(
            "DELETE",
            subscription_id,
            resource_group_name,
            php_workload_name,
            query={"delete-infra": delete_infra},
            expected=_DELETED,
            long_running=True,
        )


class WordpressInstancesOperations(_WorkloadsSubClient):
    """The WordPress instance of a PHP workload; there is only ever ``default``."""

    def list(self, subscription_id: str, resource_group_name: str, php_workload_name: str) -> RequestBuilder:
        return self._scoped(
            "GET",
            _PHP + "/wordpressInstances",
            subscription_id,
            resource_group_name,
            path_params={"php_workload_name": php_workload_name},
            response_type=WordpressInstanceResourceList,
        )

    def _default(self, method: str, s: str, rg: str, php: str, **kwargs: Any) -> RequestBuilder:
        return self._scoped(
            method, _PHP + "/wordpressInstances/default", s, rg, path_params={"php_workload_name": php}, **kwargs
        )

    def get(self, subscription_id: str, resource_group_name: str, php_workload_name: str) -> RequestBuilder:
        return self._default(
            "GET", subscription_id, resource_group_name, php_workload_name, response_type=WordpressInstanceResource
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        php_workload_name: str,
        wordpress_instance_resource: WordpressInstanceResource | dict,
    ) -> RequestBuilder:
        return self._default(
            "PUT",
            subscription_id,
            resource_group_name,
            php_workload_name,
            body=as_model(WordpressInstanceResource, wordpress_instance_resource),
            expected=_CREATED,
            response_type=WordpressInstanceResource,
            long_running=True,
        )

    def delete(self, subscription_id: str, resource_group_name: str, php_workload_name: str) -> RequestBuilder:
        return self._default(
            "DELETE", subscription_id, resource_group_name, php_workload_name, expected=(200, 204)
        )


class SkusOperations(_WorkloadsSubClient):
    def list(self, subscription_id: str) -> RequestBuilder:
        return self._scoped("GET", _PROVIDER + "/skus", subscription_id, response_type=SkusListResult)


class Operations(_WorkloadsSubClient):
    def list(self) -> RequestBuilder:
        return self._request("GET", "/providers/Microsoft.Workloads/operations", response_type=OperationListResult)
