# solaredge_api/models/enums.py
"""Enumerations with their exact wire tokens."""

from __future__ import annotations

from enum import Enum, IntEnum


class OpenEnum(str, Enum):
    """String enum that keeps tokens it does not know.

    The vendor adds values to some fields without notice. Instead of failing,
    an unknown token becomes an ``OTHER`` member whose ``value`` is the raw
    string.
    """

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = "OTHER"
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        return self._name_ != "OTHER"


# --- request side -----------------------------------------------------------

class SortOrder(str, Enum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"


class SiteSortBy(str, Enum):
    NAME = "Name"
    COUNTRY = "Country"
    STATE = "State"
    CITY = "City"
    ADDRESS = "Address"
    ZIP = "Zip"
    STATUS = "Status"
    PEAK_POWER = "PeakPower"
    INSTALLATION_DATE = "InstallationDate"
    AMOUNT = "Amount"  # amount of alerts
    MAX_SEVERITY = "MaxSeverity"
    CREATION_TIME = "CreationTime"


class AccountSortBy(str, Enum):
    NAME = "Name"
    COUNTRY = "Country"
    CITY = "City"
    ADDRESS = "Address"
    ZIP = "Zip"
    FAX = "Fax"
    PHONE = "Phone"
    NOTES = "Notes"


class SystemUnits(str, Enum):
    METRICS = "Metrics"
    IMPERIAL = "Imperial"


# --- both directions --------------------------------------------------------

class SiteStatus(OpenEnum):
    ACTIVE = "Active"
    PENDING = "Pending"
    PENDING_COMMUNICATION = "PendingCommunication"
    DISABLED = "Disabled"
    ALL = "All"


class TimeUnit(str, Enum):
    QUARTER_OF_AN_HOUR = "QUARTER_OF_AN_HOUR"
    HOUR = "HOUR"
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class MeterType(str, Enum):
    PRODUCTION = "Production"
    CONSUMPTION = "Consumption"
    SELF_CONSUMPTION = "SelfConsumption"  # virtual, calculated
    FEED_IN = "FeedIn"
    PURCHASED = "Purchased"


# --- response side ----------------------------------------------------------

class MeterForm(str, Enum):
    PHYSICAL = "physical"
    VIRTUAL = "virtual"


class InverterMode(str, Enum):
    OFF = "OFF"
    SLEEPING = "SLEEPING"
    STARTING = "STARTING"
    MPPT = "MPPT"
    THROTTLED = "THROTTLED"
    SHUTTING_DOWN = "SHUTTING_DOWN"
    FAULT = "FAULT"
    STANDBY = "STANDBY"
    LOCKED_STDBY = "LOCKED_STDBY"
    LOCKED_FIRE_FIGHTERS = "LOCKED_FIRE_FIGHTERS"
    LOCKED_FORCE_SHUTDOWN = "LOCKED_FORCE_SHUTDOWN"
    LOCKED_COMM_TIMEOUT = "LOCKED_COMM_TIMEOUT"
    LOCKED_INV_TRIP = "LOCKED_INV_TRIP"
    LOCKED_INV_ARC_DETECTED = "LOCKED_INV_ARC_DETECTED"
    LOCKED_DG = "LOCKED_DG"
    LOCKED_PHASE_BALANCER = "LOCKED_PHASE_BALANCER"  # 1ph, Australia only
    LOCKED_PRE_COMMISSIONING = "LOCKED_PRE_COMMISSIONING"
    LOCKED_INTERNAL = "LOCKED_INTERNAL"


class OperationMode(IntEnum):
    ON_GRID = 0
    OFF_GRID_WITH_PV_OR_BATTERY = 1
    OFF_GRID_WITH_GENERATOR = 2


class BatteryState(IntEnum):
    INVALID = 0
    STANDBY = 1
    THERMAL_MANAGEMENT = 2
    ENABLED = 3
    FAULT = 4


class PowerFlowElement(str, Enum):
    GRID = "GRID"
    LOAD = "Load"
    PV = "PV"
    STORAGE = "Storage"


class PowerFlowElementStatus(str, Enum):
    ACTIVE = "Active"
    IDLE = "Idle"
    INACTIVE = "Inactive"
    DISABLED = "Disabled"


class GasEmissionUnit(str, Enum):
    KG = "kg"
    LB = "lb"


class EnergyUnit(OpenEnum):
    WH = "Wh"


class PowerUnit(OpenEnum):
    W = "W"
    KW = "kW"


class Measurer(OpenEnum):
    INVERTER = "INVERTER"


class EquipmentCommunicationMethod(OpenEnum):
    ETHERNET = "ETHERNET"


class SensorType(OpenEnum):
    IRRADIANCE = "IRRADIANCE"
    TEMPERATURE = "TEMPERATURE"


class SensorMeasurement(OpenEnum):
    GLOBAL_HORIZONTAL_IRRADIANCE = "SensorGlobalHorizontalIrradiance"
    DIFFUSED_IRRADIANCE = "SensorDiffusedIrradiance"
    AMBIENT_TEMPERATURE = "SensorAmbientTemperature"
