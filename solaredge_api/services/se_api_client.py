from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Type, TypeVar

from solaredge_api.config import SolarEdgeAPIConfig
from solaredge_api.errors import ApiError, TransportError
from solaredge_api.models import accounts, equipment, request, site, version
from solaredge_api.models.wire import WireModel
from solaredge_api.services.encoding import build_url, encode_path_segment, join_ids, redact_url
from solaredge_api.services.http_transport import HttpRequest, HttpResponse, HttpTransport, RequestsTransport

E = TypeVar("E", bound=WireModel)


class SolarEdgeAPIClient:
    """Typed SolarEdge Monitoring API client.

    One method per API operation. Every call issues exactly one GET through
    the injected transport and either returns the unwrapped payload or raises
    a :class:`~solaredge_api.errors.SolarEdgeError` subclass:

    * ``ParameterEncodingError`` before anything is sent,
    * ``TransportError`` when the transport raises,
    * ``ApiError`` for 4xx/5xx answers (body kept, never parsed),
    * ``DecodeError`` when the JSON does not match the expected envelope.

    Nothing is retried or cached. Usage limits (e.g. one month of
    quarter-hour data) are enforced by the API with a 403.
    """

    def __init__(
        self,
        cfg: SolarEdgeAPIConfig,
        log: Optional[logging.Logger] = None,
        transport: Optional[HttpTransport] = None,
    ):
        if not cfg.api_key:
            raise ValueError("SolarEdge API key is required")
        self.cfg = cfg
        self.log = log or logging.getLogger("solaredge.api")
        self.transport = transport or RequestsTransport(timeout=cfg.timeout)
        self.base_url = cfg.base_url.rstrip("/")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, api_key='<hidden>', transport={self.transport!r})"

    # ------------------------------------------------------------------
    def _debug_response(self, resp: HttpResponse) -> str:
        content_type = resp.header("Content-Type") or ""
        if "application/json" in content_type:
            return f"{resp.status} {resp.body.decode('utf-8', errors='replace')}"
        return f"{resp.status} Length: {len(resp.body)} bytes"

    def _perform_request(self, path: str, params: Any = None) -> HttpResponse:
        url, headers = build_url(
            self.base_url,
            path,
            params,
            api_key=self.cfg.api_key,
            api_key_location=self.cfg.api_key_location,
        )
        self.log.debug("%s: url: %s", path, redact_url(url, self.cfg.api_key))

        try:
            resp = self.transport.execute(HttpRequest(method="GET", url=url, headers=headers, body=b""))
        except Exception as exc:
            raise TransportError(f"HTTP request for {path} failed: {exc}") from exc

        if self.log.isEnabledFor(logging.DEBUG):
            self.log.debug("%s: response: %s", path, self._debug_response(resp))
        if resp.status >= 400:
            raise ApiError(resp.status, resp.body)
        return resp

    def _fetch_json(self, path: str, envelope: Type[E], params: Any = None) -> E:
        resp = self._perform_request(path, params)
        # invalid JSON and shape mismatches both surface as DecodeError
        return envelope.decode(resp.body, context=path)

    def _fetch_image(self, path: str, params: Any = None) -> bytes:
        return self._perform_request(path, params).body

    # ------------------------------------------------------------------
    # Version

    def version_current(self) -> str:
        """Most recent API version, as ``<major.minor.revision>``."""
        return self._fetch_json("/version/current.json", version.CurrentVersionEnvelope).version.release

    def version_supported(self) -> List[version.VersionSpec]:
        return self._fetch_json("/version/supported.json", version.SupportedVersionsEnvelope).supported

    # ------------------------------------------------------------------
    # Sites

    def sites_list(self, params: Optional[request.SitesList] = None) -> List[site.SiteDetails]:
        """Sites visible to the API key (at most 100 per page)."""
        return self._fetch_json("/sites/list.json", site.SitesListEnvelope, params).sites.list

    def site_details(self, site_id: int) -> site.SiteDetails:
        return self._fetch_json(f"/site/{site_id}/details.json", site.SiteDetailsEnvelope).details

    def site_data_period(self, site_id: int) -> site.DataPeriod:
        """Energy production start and end dates of the site."""
        return self._fetch_json(f"/site/{site_id}/dataPeriod.json", site.DataPeriodEnvelope).data_period

    def site_data_period_bulk(self, site_ids: Sequence[int]) -> List[site.SiteDataPeriod]:
        path = f"/sites/{join_ids(site_ids)}/dataPeriod.json"
        return self._fetch_json(path, site.DataPeriodBulkEnvelope).date_period_list.list

    def site_energy(self, site_id: int, params: request.SiteEnergy) -> site.Energy:
        """Site energy as shown on the dashboard.

        Limited to one year at DAY resolution and one month at HOUR or
        QUARTER_OF_AN_HOUR.
        """
        return self._fetch_json(f"/site/{site_id}/energy.json", site.EnergyEnvelope, params).energy

    def site_energy_bulk(self, site_ids: Sequence[int], params: request.SiteEnergy) -> site.EnergyBulkList:
        path = f"/sites/{join_ids(site_ids)}/energy.json"
        return self._fetch_json(path, site.EnergyBulkEnvelope, params).sites_energy

    def site_time_frame_energy(self, site_id: int, params: request.SiteTotalEnergy) -> site.TimeframeEnergy:
        """Total on-grid energy for a period.

        Sites with storage may differ from the dashboard; use
        :meth:`site_energy` for dashboard figures.
        """
        path = f"/site/{site_id}/timeFrameEnergy.json"
        return self._fetch_json(path, site.TimeframeEnergyEnvelope, params).timeframe_energy

    def site_time_frame_energy_bulk(
        self,
        site_ids: Sequence[int],
        params: request.SiteTotalEnergy,
    ) -> List[site.SiteTimeframeEnergy]:
        path = f"/sites/{join_ids(site_ids)}/timeFrameEnergy.json"
        return self._fetch_json(path, site.TimeframeEnergyBulkEnvelope, params).timeframe_energy_list.list

    def site_power(self, site_id: int, params: request.DateTimeRange) -> site.Power:
        """Site power in 15 minute resolution, at most one month."""
        return self._fetch_json(f"/site/{site_id}/power.json", site.PowerEnvelope, params).power

    def site_power_bulk(self, site_ids: Sequence[int], params: request.DateTimeRange) -> site.PowerBulkList:
        path = f"/sites/{join_ids(site_ids)}/power.json"
        return self._fetch_json(path, site.PowerBulkEnvelope, params).power_date_values_list

    def site_overview(self, site_id: int) -> site.Overview:
        return self._fetch_json(f"/site/{site_id}/overview.json", site.OverviewEnvelope).overview

    def site_overview_bulk(self, site_ids: Sequence[int]) -> List[site.SiteOverview]:
        path = f"/sites/{join_ids(site_ids)}/overview.json"
        return self._fetch_json(path, site.OverviewBulkEnvelope).sites_overviews.list

    def site_power_details(self, site_id: int, params: request.SitePowerDetails) -> site.PowerDetails:
        """Per-meter power (consumption, feed-in, purchased, ...), at most one month."""
        path = f"/site/{site_id}/powerDetails.json"
        return self._fetch_json(path, site.PowerDetailsEnvelope, params).power_details

    def site_energy_details(self, site_id: int, params: request.MetersDateTimeRange) -> site.EnergyDetails:
        path = f"/site/{site_id}/energyDetails.json"
        return self._fetch_json(path, site.EnergyDetailsEnvelope, params).energy_details

    def site_current_power_flow(self, site_id: int) -> site.CurrentPowerFlow:
        path = f"/site/{site_id}/currentPowerFlow.json"
        return self._fetch_json(path, site.CurrentPowerFlowEnvelope).site_current_power_flow

    def site_storage_data(self, site_id: int, params: request.SiteStorageData) -> List[site.StorageBattery]:
        """Battery telemetry, at most one week."""
        path = f"/site/{site_id}/storageData.json"
        return self._fetch_json(path, site.StorageDataEnvelope, params).storage_data.list

    def site_image(self, site_id: int, params: Optional[request.SiteImage] = None) -> bytes:
        """Site image as uploaded by the user (raw JPEG bytes).

        An empty body comes back with 304 when ``params.hash`` matches.
        """
        return self._fetch_image(f"/site/{site_id}/siteImage/image.jpg", params)

    def site_env_benefits(
        self,
        site_id: int,
        params: Optional[request.SiteEnvBenefits] = None,
    ) -> site.EnvBenefits:
        path = f"/site/{site_id}/envBenefits.json"
        return self._fetch_json(path, site.EnvBenefitsEnvelope, params).env_benefits

    def site_installer_image(self, site_id: int) -> bytes:
        return self._fetch_image(f"/site/{site_id}/installerImage/image.jpg")

    def site_inventory(self, site_id: int) -> site.Inventory:
        return self._fetch_json(f"/site/{site_id}/inventory.json", site.InventoryEnvelope).inventory

    def site_meters(self, site_id: int, params: request.MetersDateTimeRange) -> site.Meters:
        """Lifetime energy reading per meter."""
        return self._fetch_json(f"/site/{site_id}/meters.json", site.MetersEnvelope, params).meter_energy_details

    def site_sensor_data(self, site_id: int, params: request.SensorsDateTimeRange) -> List[site.SensorData]:
        return self._fetch_json(f"/site/{site_id}/sensors.json", site.SensorDataEnvelope, params).site_sensors.list

    # ------------------------------------------------------------------
    # Equipment

    def equipment_list(self, site_id: int) -> List[equipment.Reporter]:
        return self._fetch_json(f"/equipment/{site_id}/list.json", equipment.ReportersEnvelope).reporters.list

    def equipment_sensors(self, site_id: int) -> List[equipment.SensorSummary]:
        path = f"/equipment/{site_id}/sensors.json"
        return self._fetch_json(path, equipment.EquipmentSensorsEnvelope).site_sensors.list

    def equipment_data(
        self,
        site_id: int,
        serial_number: str,
        params: request.DateTimeRange,
    ) -> List[equipment.Telemetry]:
        """Inverter telemetry for a time frame of at most one week."""
        path = f"/equipment/{site_id}/{encode_path_segment(serial_number)}/data.json"
        return self._fetch_json(path, equipment.TelemetryEnvelope, params).data.list

    def equipment_changelog(self, site_id: int, serial_number: str) -> List[equipment.ChangelogEntry]:
        path = f"/equipment/{site_id}/{encode_path_segment(serial_number)}/changeLog.json"
        return self._fetch_json(path, equipment.ChangelogEnvelope).changelog.list

    # ------------------------------------------------------------------
    # Accounts

    def accounts_list(self, params: Optional[request.AccountsList] = None) -> List[accounts.Account]:
        return self._fetch_json("/accounts/list.json", accounts.AccountsEnvelope, params).accounts.list
