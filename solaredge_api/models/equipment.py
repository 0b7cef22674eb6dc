# solaredge_api/models/equipment.py
"""Equipment (inverter/SMI) response records."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from solaredge_api.models.enums import InverterMode, OperationMode, SensorMeasurement, SensorType
from solaredge_api.models.wire import ListResult, WireDate, WireDateTime, WireModel


class Reporter(WireModel):
    name: str
    manufacturer: str
    # e.g. SE16K
    model: str
    serial_number: str
    kw_p_dc: Optional[float] = Field(default=None, alias="kWpDC")


class ReportersEnvelope(WireModel):
    reporters: ListResult[Reporter]


class EquipmentSensor(WireModel):
    name: str
    measurement: SensorMeasurement
    sensor_type: SensorType = Field(alias="type")


class SensorSummary(WireModel):
    # gateway the sensors are connected to
    connected_to: str
    count: int
    sensors: List[EquipmentSensor]


class EquipmentSensorsEnvelope(WireModel):
    site_sensors: ListResult[SensorSummary] = Field(alias="SiteSensors")


class PhaseData(WireModel):
    ac_current: float
    ac_voltage: float
    ac_frequency: float
    apparent_power: float  # VA
    active_power: float  # W, communication board 2.474+
    reactive_power: float  # VAR, communication board 2.474+
    cos_phi: float


class Telemetry(WireModel):
    """One inverter telemetry sample.

    Three-phase inverters report line-to-line voltages and L2/L3 phase data;
    single-phase inverters report ``v_l1_to_n``/``v_l2_to_n`` and L1 only.
    """

    date: WireDateTime
    total_active_power: float
    dc_voltage: Optional[float] = None
    ground_fault_resistance: Optional[float] = None
    power_limit: float
    lifetime_energy: Optional[float] = None
    total_energy: float
    temperature: float  # Celsius
    inverter_mode: InverterMode
    operation_mode: OperationMode
    v_l1_to_n: Optional[float] = Field(default=None, alias="vL1ToN")
    v_l2_to_n: Optional[float] = Field(default=None, alias="vL2ToN")
    v_l1_to_2: Optional[float] = Field(default=None, alias="vL1To2")
    v_l2_to_3: Optional[float] = Field(default=None, alias="vL2To3")
    v_l3_to_1: Optional[float] = Field(default=None, alias="vL3To1")
    l1_data: PhaseData = Field(alias="L1Data")
    l2_data: Optional[PhaseData] = Field(default=None, alias="L2Data")
    l3_data: Optional[PhaseData] = Field(default=None, alias="L3Data")


class TelemetryEnvelope(WireModel):
    data: ListResult[Telemetry]


class ChangelogEntry(WireModel):
    serial_number: str
    # inverter/battery/optimizer/gateway model
    part_number: str
    # replacement date
    date: WireDate


class ChangelogEnvelope(WireModel):
    changelog: ListResult[ChangelogEntry] = Field(alias="ChangeLog")
