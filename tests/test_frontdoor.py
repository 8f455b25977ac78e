"""Tests for the Front Door, WAF and network experiment client."""

from datetime import datetime, timezone

import pytest

from az_mgmt.frontdoor import (
    EXPERIMENTS_API_VERSION,
    FRONT_DOOR_API_VERSION,
    WAF_API_VERSION,
    FrontDoorClient,
)
from az_mgmt.frontdoor.models import (
    AggregationInterval,
    CustomHttpsConfiguration,
    ForwardingConfiguration,
    FrontDoor,
    FrontDoorManagedHttpsConfiguration,
    KeyVaultHttpsConfiguration,
    RedirectConfiguration,
    RouteConfiguration,
    TimeseriesType,
)

SUB = "00000000-0000-0000-0000-000000000002"
RG = "fd-rg"
NETWORK = f"https://management.azure.com/subscriptions/{SUB}/resourceGroups/{RG}/providers/Microsoft.Network"
FRONT_DOOR_URL = f"{NETWORK}/frontDoors/contoso"
ODATA = "#Microsoft.Azure.FrontDoor.Models."

FRONT_DOOR = {
    "id": f"/subscriptions/{SUB}/resourceGroups/{RG}/providers/Microsoft.Network/frontDoors/contoso",
    "name": "contoso",
    "type": "Microsoft.Network/frontDoors",
    "location": "global",
    "properties": {
        "cname": "contoso.azurefd.net",
        "enabledState": "Enabled",
        "routingRules": [
            {
                "name": "forward",
                "properties": {
                    "acceptedProtocols": ["Https"],
                    "patternsToMatch": ["/*"],
                    "routeConfiguration": {
                        "@odata.type": ODATA + "FrontdoorForwardingConfiguration",
                        "forwardingProtocol": "MatchRequest",
                        "backendPool": {"id": "/subscriptions/x/backendPools/pool1"},
                    },
                },
            },
            {
                "name": "redirect",
                "properties": {
                    "routeConfiguration": {
                        "@odata.type": ODATA + "FrontdoorRedirectConfiguration",
                        "redirectType": "Moved",
                        "redirectProtocol": "HttpsOnly",
                    }
                },
            },
            {
                "name": "future",
                "properties": {
                    "routeConfiguration": {"@odata.type": ODATA + "FrontdoorEdgeFunction", "script": "f.js"}
                },
            },
        ],
        "backendPools": [
            {
                "name": "pool1",
                "properties": {"backends": [{"address": "origin.contoso.com", "httpPort": 80, "weight": 50}]},
            }
        ],
        "rulesEngines": [{"name": "engine1", "properties": {"rules": []}}],
    },
}


@pytest.fixture()
def client() -> FrontDoorClient:
    return FrontDoorClient.builder().build()


class TestFrontDoors:
    """Front Door CRUD and validation."""

    def test_list_by_resource_group(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"value": [FRONT_DOOR]})

        front_doors = client.front_doors.list_by_resource_group(SUB, RG).into_pageable().to_list()

        assert front_doors[0].properties.cname == "contoso.azurefd.net"
        assert mock_request.call_args.args == ("GET", f"{NETWORK}/frontDoors")
        assert mock_request.call_args.kwargs["params"] == {"api-version": FRONT_DOOR_API_VERSION}

    def test_list_across_subscription(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"value": []})
        client.front_doors.list(SUB).into_pageable().to_list()
        assert mock_request.call_args.args[1] == (
            f"https://management.azure.com/subscriptions/{SUB}/providers/Microsoft.Network/frontDoors"
        )

    def test_route_configuration_is_polymorphic(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, FRONT_DOOR)

        front_door = client.front_doors.get(SUB, RG, "contoso").into_body()

        configs = [rule.properties.routeConfiguration for rule in front_door.properties.routingRules]
        assert isinstance(configs[0], ForwardingConfiguration)
        assert configs[0].backendPool.id.endswith("/pool1")
        assert isinstance(configs[1], RedirectConfiguration)
        assert configs[1].redirectType == "Moved"
        assert type(configs[2]) is RouteConfiguration
        assert configs[2].to_wire() == {"@odata.type": ODATA + "FrontdoorEdgeFunction", "script": "f.js"}
        assert front_door.properties.backendPools[0].properties.backends[0].weight == 50
        assert front_door.properties.rulesEngines[0].name == "engine1"

    def test_create_or_update_serializes_odata_type(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, FRONT_DOOR)
        front_door = FrontDoor.model_validate(
            {
                "location": "global",
                "properties": {
                    "routingRules": [
                        {
                            "name": "r1",
                            "properties": {
                                "routeConfiguration": ForwardingConfiguration(forwardingProtocol="HttpsOnly")
                            },
                        }
                    ]
                },
            }
        )

        result = client.front_doors.create_or_update(SUB, RG, "contoso", front_door).begin().result()

        assert result.name == "contoso"
        body = mock_request.call_args.kwargs["json"]
        assert body["properties"]["routingRules"][0]["properties"]["routeConfiguration"] == {
            "@odata.type": ODATA + "FrontdoorForwardingConfiguration",
            "forwardingProtocol": "HttpsOnly",
        }
        assert mock_request.call_args.args == ("PUT", FRONT_DOOR_URL)

    def test_delete(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(202, headers={"Location": f"{FRONT_DOOR_URL}/op"})
        poller = client.front_doors.delete(SUB, RG, "contoso").begin()
        assert not poller.done()
        assert mock_request.call_args.args == ("DELETE", FRONT_DOOR_URL)

    def test_validate_custom_domain(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"customDomainValidated": False, "reason": "NoCnameRecord"})
        result = client.front_doors.validate_custom_domain(SUB, RG, "contoso", {"hostName": "www.contoso.com"})
        assert result.into_body().reason == "NoCnameRecord"
        assert mock_request.call_args.args == ("POST", f"{FRONT_DOOR_URL}/validateCustomDomain")


class TestFrontendEndpoints:
    """Custom HTTPS on frontend endpoints."""

    def test_enable_https_with_managed_certificate(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(202)

        builder = client.frontend_endpoints.enable_https(
            SUB, RG, "contoso", "www", {"certificateSource": "FrontDoor"}
        )
        builder.begin()

        assert isinstance(builder.body, FrontDoorManagedHttpsConfiguration)
        assert mock_request.call_args.args == ("POST", f"{FRONT_DOOR_URL}/frontendEndpoints/www/enableHttps")
        assert mock_request.call_args.kwargs["json"] == {
            "certificateSource": "FrontDoor",
            "protocolType": "ServerNameIndication",
            "minimumTlsVersion": "1.2",
            "frontDoorCertificateSourceParameters": {"certificateType": "Dedicated"},
        }

    def test_enable_https_with_key_vault(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(202)
        config = KeyVaultHttpsConfiguration(
            keyVaultCertificateSourceParameters={
                "vault": {"id": "/subscriptions/x/providers/Microsoft.KeyVault/vaults/kv1"},
                "secretName": "www-cert",
            }
        )

        client.frontend_endpoints.enable_https(SUB, RG, "contoso", "www", config).send()

        sent = mock_request.call_args.kwargs["json"]
        assert sent["certificateSource"] == "AzureKeyVault"
        assert sent["keyVaultCertificateSourceParameters"]["secretName"] == "www-cert"

    def test_endpoint_https_configuration_deserializes(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "name": "www",
                "properties": {
                    "hostName": "www.contoso.com",
                    "customHttpsProvisioningState": "Enabled",
                    "customHttpsConfiguration": {
                        "certificateSource": "AzureKeyVault",
                        "protocolType": "ServerNameIndication",
                        "minimumTlsVersion": "1.0",
                        "keyVaultCertificateSourceParameters": {"secretName": "s"},
                    },
                },
            },
        )

        endpoint = client.frontend_endpoints.get(SUB, RG, "contoso", "www").into_body()

        config = endpoint.properties.customHttpsConfiguration
        assert isinstance(config, KeyVaultHttpsConfiguration)
        assert config.minimumTlsVersion == "1.0"

    def test_unknown_certificate_source_falls_back(self) -> None:
        from az_mgmt.core import as_model
        from az_mgmt.frontdoor.models import AnyCustomHttpsConfiguration

        config = as_model(AnyCustomHttpsConfiguration, {"certificateSource": "Managed", "thumbprint": "abc"})
        assert type(config) is CustomHttpsConfiguration
        assert config.to_wire()["thumbprint"] == "abc"

    def test_disable_https(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(202)
        client.frontend_endpoints.disable_https(SUB, RG, "contoso", "www").begin()
        assert mock_request.call_args.args == ("POST", f"{FRONT_DOOR_URL}/frontendEndpoints/www/disableHttps")


class TestCacheAndRulesEngines:
    """Purging and rules engine configuration."""

    def test_purge_content(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(202)
        client.endpoints.purge_content(SUB, RG, "contoso", {"contentPaths": ["/*"]}).begin()
        assert mock_request.call_args.args == ("POST", f"{FRONT_DOOR_URL}/purge")
        assert mock_request.call_args.kwargs["json"] == {"contentPaths": ["/*"]}

    def test_rules_engine_create(self, client, mock_request, make_response) -> None:
        engine = {
            "properties": {
                "rules": [
                    {
                        "name": "hsts",
                        "priority": 1,
                        "action": {
                            "responseHeaderActions": [
                                {
                                    "headerActionType": "Overwrite",
                                    "headerName": "Strict-Transport-Security",
                                    "value": "max-age=31536000",
                                }
                            ],
                            "routeConfigurationOverride": {
                                "@odata.type": ODATA + "FrontdoorRedirectConfiguration",
                                "redirectProtocol": "HttpsOnly",
                            },
                        },
                        "matchConditions": [
                            {
                                "rulesEngineMatchVariable": "RequestScheme",
                                "rulesEngineOperator": "Equal",
                                "rulesEngineMatchValue": ["HTTP"],
                            }
                        ],
                    }
                ]
            }
        }
        mock_request.return_value = make_response(200, {"name": "engine1", **engine})

        result = client.rules_engines.create_or_update(SUB, RG, "contoso", "engine1", engine).begin().result()

        rule = result.properties.rules[0]
        assert isinstance(rule.action.routeConfigurationOverride, RedirectConfiguration)
        assert rule.action.responseHeaderActions[0].headerActionType == "Overwrite"
        assert mock_request.call_args.args == ("PUT", f"{FRONT_DOOR_URL}/rulesEngines/engine1")


class TestNameAvailability:
    """Name checks at tenant and subscription scope."""

    def test_check(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"nameAvailability": "Unavailable", "reason": "Taken"})

        result = client.name_availability.check({"name": "contoso", "type": "Microsoft.Network/frontDoors"})

        assert result.into_body().nameAvailability == "Unavailable"
        assert mock_request.call_args.args[1] == (
            "https://management.azure.com/providers/Microsoft.Network/checkFrontDoorNameAvailability"
        )

    def test_check_with_subscription(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"nameAvailability": "Available"})
        client.name_availability_with_subscription.check(
            SUB, {"name": "www", "type": "Microsoft.Network/frontDoors/frontendEndpoints"}
        ).into_body()
        assert mock_request.call_args.args[1] == (
            f"https://management.azure.com/subscriptions/{SUB}/providers/Microsoft.Network"
            "/checkFrontDoorNameAvailability"
        )


class TestWafPolicies:
    """WAF policies use their own api-version."""

    def test_get_policy(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200,
            {
                "name": "policy1",
                "location": "Global",
                "sku": {"name": "Classic_AzureFrontDoor"},
                "properties": {
                    "policySettings": {"enabledState": "Enabled", "mode": "Prevention"},
                    "customRules": {
                        "rules": [
                            {
                                "name": "blockEvil",
                                "priority": 1,
                                "ruleType": "MatchRule",
                                "action": "Block",
                                "matchConditions": [
                                    {"matchVariable": "RemoteAddr", "operator": "IPMatch", "matchValue": ["10.0.0.0/8"]}
                                ],
                            }
                        ]
                    },
                    "managedRules": {
                        "managedRuleSets": [{"ruleSetType": "DefaultRuleSet", "ruleSetVersion": "1.0"}]
                    },
                },
            },
        )

        policy = client.policies.get(SUB, RG, "policy1").into_body()

        assert policy.properties.policySettings.mode == "Prevention"
        assert policy.properties.customRules.rules[0].matchConditions[0].matchValue == ["10.0.0.0/8"]
        assert policy.properties.managedRules.managedRuleSets[0].ruleSetType == "DefaultRuleSet"
        assert mock_request.call_args.args[1] == f"{NETWORK}/FrontDoorWebApplicationFirewallPolicies/policy1"
        assert mock_request.call_args.kwargs["params"] == {"api-version": WAF_API_VERSION}

    def test_managed_rule_sets(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200, {"value": [{"name": "DefaultRuleSet_1.0", "properties": {"ruleSetVersion": "1.0"}}]}
        )
        sets = client.managed_rule_sets.list(SUB).into_pageable().to_list()
        assert sets[0].properties.ruleSetVersion == "1.0"
        assert mock_request.call_args.args[1].endswith("/FrontDoorWebApplicationFirewallManagedRuleSets")


class TestNetworkExperiments:
    """Network experiment profiles, experiments and reports."""

    def test_profile_update_is_patch(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(200, {"name": "prof1", "properties": {"enabledState": "Disabled"}})

        result = client.network_experiment_profiles.update(
            SUB, RG, "prof1", {"properties": {"enabledState": "Disabled"}}
        ).begin().result()

        assert result.properties.enabledState == "Disabled"
        assert mock_request.call_args.args == ("PATCH", f"{NETWORK}/NetworkExperimentProfiles/prof1")
        assert mock_request.call_args.kwargs["params"] == {"api-version": EXPERIMENTS_API_VERSION}

    def test_preconfigured_endpoints(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200, {"value": [{"name": "ep", "properties": {"endpointType": "AFD", "endpoint": "a.azurefd.net"}}]}
        )
        endpoints = client.preconfigured_endpoints.list(SUB, RG, "prof1").into_pageable().to_list()
        assert endpoints[0].properties.endpointType == "AFD"
        assert mock_request.call_args.args[1] == f"{NETWORK}/NetworkExperimentProfiles/prof1/PreconfiguredEndpoints"

    def test_experiment_get(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200, {"name": "exp1", "properties": {"endpointA": {"endpoint": "a.contoso.com"}}}
        )
        experiment = client.experiments.get(SUB, RG, "prof1", "exp1").into_body()
        assert experiment.properties.endpointA.endpoint == "a.contoso.com"
        assert mock_request.call_args.args[1] == f"{NETWORK}/NetworkExperimentProfiles/prof1/Experiments/exp1"

    def test_latency_scorecards_query(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200, {"properties": {"latencyMetrics": [{"name": "p50", "aValue": 10.5, "bValue": 12.0}]}}
        )

        scorecard = client.reports.get_latency_scorecards(
            SUB,
            RG,
            "prof1",
            "exp1",
            "Weekly",
            end_date_time_utc="2024-03-01T00:00:00Z",
            country="US",
        ).into_body()

        assert scorecard.properties.latencyMetrics[0].aValue == 10.5
        assert mock_request.call_args.args[1].endswith("/Experiments/exp1/LatencyScorecard")
        assert mock_request.call_args.kwargs["params"] == {
            "api-version": EXPERIMENTS_API_VERSION,
            "endDateTimeUTC": "2024-03-01T00:00:00Z",
            "country": "US",
            "aggregationInterval": "Weekly",
        }

    def test_timeseries_query_serializes_datetimes(self, client, mock_request, make_response) -> None:
        mock_request.return_value = make_response(
            200, {"properties": {"timeseriesData": [{"dateTimeUTC": "2024-01-01T00:00:00Z", "value": 3}]}}
        )

        series = client.reports.get_timeseries(
            SUB,
            RG,
            "prof1",
            "exp1",
            datetime(2024, 1, 1, tzinfo=timezone.utc),
            datetime(2024, 1, 2, tzinfo=timezone.utc),
            AggregationInterval.Hourly,
            TimeseriesType.LatencyP95,
        ).into_body()

        assert series.properties.timeseriesData[0].value == 3
        assert mock_request.call_args.args[1].endswith("/Experiments/exp1/Timeseries")
        assert mock_request.call_args.kwargs["params"] == {
            "api-version": EXPERIMENTS_API_VERSION,
            "startDateTimeUTC": "2024-01-01T00:00:00+00:00",
            "endDateTimeUTC": "2024-01-02T00:00:00+00:00",
            "aggregationInterval": "Hourly",
            "timeseriesType": "LatencyP95",
        }
