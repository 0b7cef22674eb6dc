# solaredge_api/models/site.py
"""Site-level response records and their envelopes."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from solaredge_api.models.enums import (
    BatteryState,
    EnergyUnit,
    EquipmentCommunicationMethod,
    GasEmissionUnit,
    Measurer,
    MeterForm,
    MeterType,
    PowerFlowElement,
    PowerFlowElementStatus,
    PowerUnit,
    SensorType,
    SiteStatus,
    TimeUnit,
)
from solaredge_api.models.wire import ListResult, WireDate, WireDateTime, WireModel


# ---------------------------------------------------------------------------
# Details / sites list

class Location(WireModel):
    country: str
    state: Optional[str] = None
    city: str
    address: str
    address2: Optional[str] = None
    zip: str
    time_zone: str
    country_code: str


class Module(WireModel):
    manufacturer_name: str
    model_name: str
    maximum_power: float
    temperature_coef: Optional[float] = None


class Uris(WireModel):
    details: str = Field(alias="DETAILS")
    data_period: str = Field(alias="DATA_PERIOD")
    overview: str = Field(alias="OVERVIEW")
    site_image: Optional[str] = Field(default=None, alias="SITE_IMAGE")
    installer_image: Optional[str] = Field(default=None, alias="INSTALLER_IMAGE")


class PublicSettings(WireModel):
    name: Optional[str] = None
    is_public: Optional[bool] = None


class SiteDetails(WireModel):
    """A site as returned by the details and sites-list endpoints."""

    id: int
    name: str
    account_id: int
    status: SiteStatus
    peak_power: float
    last_update_time: Optional[WireDateTime] = None
    currency: Optional[str] = None
    installation_date: WireDateTime
    # permission to operate
    pto_date: Optional[WireDateTime] = None
    notes: Optional[str] = None
    site_type: str = Field(alias="type")
    location: Location
    primary_module: Module
    # number of open alerts
    alert_quantity: Optional[int] = None
    alert_severity: Optional[str] = None
    uris: Uris
    public_settings: PublicSettings


class SitesListEnvelope(WireModel):
    sites: ListResult[SiteDetails]


class SiteDetailsEnvelope(WireModel):
    details: SiteDetails


# ---------------------------------------------------------------------------
# Data period

class DataPeriod(WireModel):
    # Both None when the site is not transmitting.
    start_date: Optional[WireDateTime] = None
    end_date: Optional[WireDateTime] = None


class DataPeriodEnvelope(WireModel):
    data_period: DataPeriod


class SiteDataPeriod(WireModel):
    site_id: int
    data_period: DataPeriod


class DataPeriodBulkEnvelope(WireModel):
    # "datePeriodList" is the vendor's spelling.
    date_period_list: ListResult[SiteDataPeriod]


# ---------------------------------------------------------------------------
# Energy

class DateValue(WireModel):
    # Site local time.
    date: WireDateTime
    # None when there is no data for that time.
    value: Optional[float] = None


class Energy(WireModel):
    time_unit: TimeUnit
    unit: EnergyUnit
    values: List[DateValue]


class EnergyEnvelope(WireModel):
    energy: Energy


class EnergyValues(WireModel):
    values: List[DateValue]


class SiteEnergyValues(WireModel):
    site_id: int
    energy_values: EnergyValues


class EnergyBulkList(WireModel):
    time_unit: TimeUnit
    unit: EnergyUnit
    count: int
    site_energy_list: List[SiteEnergyValues]


class EnergyBulkEnvelope(WireModel):
    sites_energy: EnergyBulkList


class LifetimeEnergy(WireModel):
    date: WireDate
    energy: Optional[float] = None
    unit: EnergyUnit


class TimeframeEnergy(WireModel):
    """On-grid energy for a period, with lifetime readings at both ends."""

    energy: Optional[float] = None
    unit: EnergyUnit
    measured_by: Optional[Measurer] = None
    start_lifetime_energy: LifetimeEnergy
    end_lifetime_energy: LifetimeEnergy


class TimeframeEnergyEnvelope(WireModel):
    timeframe_energy: TimeframeEnergy = Field(alias="timeFrameEnergy")


class SiteTimeframeEnergy(WireModel):
    site_id: int
    timeframe_energy: TimeframeEnergy = Field(alias="timeFrameEnergy")


class TimeframeEnergyBulkEnvelope(WireModel):
    timeframe_energy_list: ListResult[SiteTimeframeEnergy] = Field(alias="timeFrameEnergyList")


# ---------------------------------------------------------------------------
# Power

class Power(WireModel):
    time_unit: TimeUnit
    unit: PowerUnit
    values: List[DateValue]


class PowerEnvelope(WireModel):
    power: Power


class SitePowerValues(WireModel):
    site_id: int
    power_data_value_series: EnergyValues


class PowerBulkList(WireModel):
    time_unit: TimeUnit
    unit: PowerUnit
    count: int
    site_energy_list: List[SitePowerValues]


class PowerBulkEnvelope(WireModel):
    power_date_values_list: PowerBulkList


# ---------------------------------------------------------------------------
# Overview

class LifetimeData(WireModel):
    energy: float
    revenue: float


class EnergyData(WireModel):
    energy: float


class PowerData(WireModel):
    power: float


class Overview(WireModel):
    last_update_time: WireDateTime
    lifetime_data: LifetimeData = Field(alias="lifeTimeData")
    last_year_data: EnergyData
    last_month_data: EnergyData
    last_day_data: EnergyData
    current_power: PowerData
    measured_by: Optional[Measurer] = None


class OverviewEnvelope(WireModel):
    overview: Overview


class SiteOverview(WireModel):
    site_id: int
    site_overview: Overview


class OverviewBulkEnvelope(WireModel):
    sites_overviews: ListResult[SiteOverview]


# ---------------------------------------------------------------------------
# Meter details

class MeterValues(WireModel):
    meter_type: MeterType = Field(alias="type")
    values: List[DateValue]


class PowerDetails(WireModel):
    time_unit: TimeUnit
    unit: PowerUnit
    meters: List[MeterValues]


class PowerDetailsEnvelope(WireModel):
    power_details: PowerDetails


class EnergyDetails(WireModel):
    time_unit: TimeUnit
    unit: EnergyUnit
    meters: List[MeterValues]


class EnergyDetailsEnvelope(WireModel):
    energy_details: EnergyDetails


class MeterDetail(WireModel):
    meter_serial_number: str
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    model: str
    meter_type: MeterType
    values: List[DateValue]


class Meters(WireModel):
    time_unit: TimeUnit
    unit: EnergyUnit
    meters: List[MeterDetail]


class MetersEnvelope(WireModel):
    meter_energy_details: Meters


# ---------------------------------------------------------------------------
# Current power flow

class PowerConnection(WireModel):
    from_: PowerFlowElement = Field(alias="from")
    to: PowerFlowElement


class PowerFlowEntry(WireModel):
    status: PowerFlowElementStatus
    # Always positive; direction comes from the connections.
    current_power: Optional[float] = None


class StoragePowerFlowEntry(WireModel):
    status: PowerFlowElementStatus
    current_power: Optional[float] = None
    # state of energy, percent
    charge_level: float
    critical: bool
    # Only in backup mode (grid disabled).
    time_left: Optional[str] = None


class CurrentPowerFlow(WireModel):
    """Power flowing between grid, load, PV and storage right now.

    ``grid`` and ``load`` are always present; ``pv`` and ``storage`` only when
    the site has them.
    """

    unit: PowerUnit
    update_refresh_rate: Optional[int] = None
    connections: List[PowerConnection]
    grid: PowerFlowEntry = Field(alias="GRID")
    load: PowerFlowEntry = Field(alias="LOAD")
    pv: Optional[PowerFlowEntry] = Field(default=None, alias="PV")
    storage: Optional[StoragePowerFlowEntry] = Field(default=None, alias="STORAGE")


class CurrentPowerFlowEnvelope(WireModel):
    site_current_power_flow: CurrentPowerFlow


# ---------------------------------------------------------------------------
# Storage

class BatteryTelemetry(WireModel):
    timestamp: WireDateTime = Field(alias="timeStamp")
    # Positive while charging, negative while discharging.
    power: float
    battery_state: BatteryState
    lifetime_energy_charged: float = Field(alias="lifeTimeEnergyCharged")
    lifetime_energy_discharged: float = Field(alias="lifeTimeEnergyDischarged")
    # Wh currently storable; basis for state of health.
    full_pack_energy_available: float
    internal_temp: float
    ac_grid_charging: float = Field(alias="ACGridCharging")
    state_of_charge: float


class StorageBattery(WireModel):
    serial_number: str
    nameplate: float
    model_number: str
    telemetry_count: int
    telemetries: List[BatteryTelemetry]


class StorageDataEnvelope(WireModel):
    storage_data: ListResult[StorageBattery]


# ---------------------------------------------------------------------------
# Environmental benefits

class GasEmissionsSaved(WireModel):
    units: GasEmissionUnit
    co2: float
    so2: float
    nox: float


class EnvBenefits(WireModel):
    gas_emission_saved: GasEmissionsSaved
    trees_planted: float
    # bulbs powered for a day
    light_bulbs: float


class EnvBenefitsEnvelope(WireModel):
    env_benefits: EnvBenefits


# ---------------------------------------------------------------------------
# Inventory

class Inverter(WireModel):
    name: str
    manufacturer: str
    model: str
    cpu_version: str
    dsp1_version: Optional[str] = None
    dsp2_version: Optional[str] = None
    communication_method: EquipmentCommunicationMethod
    serial_number: str = Field(alias="SN")
    connected_optimizers: int


class Meter(WireModel):
    name: str
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    serial_number: Optional[str] = Field(default=None, alias="SN")
    meter_type: MeterType = Field(alias="type")
    firmware_version: Optional[str] = None
    connected_to: Optional[str] = None
    connected_solaredge_device_sn: Optional[str] = Field(default=None, alias="connectedSolaredgeDeviceSN")
    form: MeterForm


class InventorySensor(WireModel):
    connected_solaredge_device_sn: str = Field(alias="connectedSolaredgeDeviceSN")
    id: str
    connected_to: str
    category: SensorType
    # e.g. "Plane of array irradiance"
    sensor_type: str = Field(alias="type")


class Gateway(WireModel):
    name: str
    serial_number: str = Field(alias="SN")
    firmware_version: str


class Battery(WireModel):
    name: str
    serial_number: str = Field(alias="SN")
    manufacturer: str
    model: str
    nameplate_capacity: float
    firmware_version: str
    connected_to: str
    connected_inverter_sn: str


class Inventory(WireModel):
    inverters: List[Inverter]
    meters: List[Meter]
    sensors: List[InventorySensor]
    gateways: List[Gateway]
    batteries: List[Battery]


class InventoryEnvelope(WireModel):
    inventory: Inventory = Field(alias="Inventory")


# ---------------------------------------------------------------------------
# Sensors

class SensorTelemetry(WireModel):
    """One sensor reading; values are metric."""

    date: WireDateTime
    ambient_temperature: Optional[float] = None
    module_temperature: Optional[float] = None
    wind_speed: Optional[float] = None


class SensorData(WireModel):
    # gateway name
    connected_to: str
    count: int
    telemetries: List[SensorTelemetry]


class SensorDataEnvelope(WireModel):
    site_sensors: ListResult[SensorData]
