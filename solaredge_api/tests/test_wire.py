# solaredge_api/tests/test_wire.py

import json
from datetime import date, datetime
from typing import List, Optional

import pytest
from pydantic import AliasChoices, Field

from solaredge_api.errors import DecodeError
from solaredge_api.models.enums import (
    BatteryState,
    EnergyUnit,
    MeterType,
    PowerFlowElement,
    SensorMeasurement,
    SiteStatus,
    TimeUnit,
)
from solaredge_api.models.equipment import EquipmentSensorsEnvelope, TelemetryEnvelope
from solaredge_api.models.request import SiteEnergy, SitePowerDetails, SitesList
from solaredge_api.models.site import (
    DataPeriodEnvelope,
    Energy,
    EnergyEnvelope,
    LifetimeEnergy,
    MeterValues,
    StorageBattery,
    StorageDataEnvelope,
)
from solaredge_api.models.timefmt import parse_datetime
from solaredge_api.models.wire import ListResult, WireModel
from solaredge_api.services.encoding import encode_params


def _json(payload) -> str:
    return json.dumps(payload)


class Sample(WireModel):
    site_id: int
    peak_power: float
    label: Optional[str] = None
    kind: str = Field(validation_alias=AliasChoices("type", "kind"))
    items: List[int]


class StatusHolder(WireModel):
    status: SiteStatus


def _battery(serial):
    return {
        "serialNumber": serial,
        "nameplate": 6400,
        "modelNumber": "RESU",
        "telemetryCount": 1,
        "telemetries": [
            {
                "timeStamp": "2015-10-13 08:00:00",
                "power": -12.5,
                "batteryState": 3,
                "lifeTimeEnergyCharged": 6100,
                "lifeTimeEnergyDischarged": 6000,
                "fullPackEnergyAvailable": 6400,
                "internalTemp": 27,
                "ACGridCharging": 0,
                "stateOfCharge": 55.5,
            }
        ],
    }


def test_decode_uses_camel_case_keys_and_ignores_unknown():
    sample = Sample.decode(_json({
        "siteId": 7,
        "peakPower": 10,
        "type": "Optimizers & Inverters",
        "items": [1, 2],
        "somethingNew": {"ignored": True},
    }))
    assert sample.site_id == 7
    # ints are accepted where floats are expected
    assert sample.peak_power == 10.0
    assert isinstance(sample.peak_power, float)
    assert sample.label is None
    assert sample.kind == "Optimizers & Inverters"


def test_decode_alias():
    sample = Sample.decode(_json({"siteId": 1, "peakPower": 1.5, "kind": "x", "items": []}))
    assert sample.kind == "x"


def test_missing_required_field_names_the_path():
    with pytest.raises(DecodeError, match="peakPower"):
        Sample.decode(_json({"siteId": 1, "type": "x", "items": []}))


def test_null_required_field_rejected():
    with pytest.raises(DecodeError, match="siteId"):
        Sample.decode(_json({"siteId": None, "peakPower": 1, "type": "x", "items": []}))


def test_wrong_json_type_rejected():
    # no string-to-number coercion
    with pytest.raises(DecodeError, match="siteId"):
        Sample.decode(_json({"siteId": "1", "peakPower": 1, "type": "x", "items": []}))
    with pytest.raises(DecodeError, match=r"items\.1"):
        Sample.decode(_json({"siteId": 1, "peakPower": 1, "type": "x", "items": [1, True]}))
    with pytest.raises(DecodeError):
        Sample.decode(_json(["not", "an", "object"]))


def test_invalid_json_rejected():
    with pytest.raises(DecodeError, match="/x.json"):
        Sample.decode(b"<html>maintenance</html>", context="/x.json")


def test_datetime_accepts_bare_date():
    assert parse_datetime("2013-05-05 12:00:00") == datetime(2013, 5, 5, 12, 0, 0)
    assert parse_datetime("2013-05-05") == datetime(2013, 5, 5, 0, 0, 0)

    period = DataPeriodEnvelope.decode(_json({"dataPeriod": {"startDate": "2013-05-05", "endDate": None}}))
    assert period.data_period.start_date == datetime(2013, 5, 5)
    assert period.data_period.end_date is None


def test_bad_date_is_decode_error():
    with pytest.raises(DecodeError, match="dataPeriod.startDate"):
        DataPeriodEnvelope.decode(_json({"dataPeriod": {"startDate": "05/05/2013"}}))


def test_date_field():
    entry = LifetimeEnergy.decode(_json({"date": "2013-05-05", "energy": 1.0, "unit": "Wh"}))
    assert entry.date == date(2013, 5, 5)


def test_energy_values_with_nulls():
    env = EnergyEnvelope.decode(_json({
        "energy": {
            "timeUnit": "DAY",
            "unit": "Wh",
            "measuredBy": "INVERTER",
            "values": [
                {"date": "2013-06-01 00:00:00", "value": None},
                {"date": "2013-06-02 00:00:00", "value": 23150},
            ],
        }
    }))
    assert env.energy.time_unit is TimeUnit.DAY
    assert env.energy.unit is EnergyUnit.WH
    assert env.energy.values[0].value is None
    assert env.energy.values[1].value == 23150.0


def test_open_enum_keeps_unknown_token():
    unit = EnergyUnit("MWh")
    assert unit.name == "OTHER"
    assert unit.value == "MWh"
    assert not unit.is_known
    assert EnergyUnit("Wh").is_known

    status = SiteStatus("Archived")
    assert status.value == "Archived"
    assert SiteStatus("Active") is SiteStatus.ACTIVE

    sensor = SensorMeasurement("SensorWindSpeed")
    assert sensor.value == "SensorWindSpeed"


def test_open_enum_unknown_token_in_payload():
    energy = Energy.decode(_json({"timeUnit": "DAY", "unit": "MWh", "values": []}))
    assert energy.unit.value == "MWh"
    assert not energy.unit.is_known


def test_closed_enum_rejects_unknown_token():
    with pytest.raises(DecodeError, match="energy.timeUnit"):
        EnergyEnvelope.decode(_json({"energy": {"timeUnit": "FORTNIGHT", "unit": "Wh", "values": []}}))


def test_power_flow_element_tokens():
    assert PowerFlowElement("GRID") is PowerFlowElement.GRID
    assert PowerFlowElement("Load") is PowerFlowElement.LOAD
    assert PowerFlowElement("Storage") is PowerFlowElement.STORAGE


@pytest.mark.parametrize("unit", list(TimeUnit))
def test_time_unit_round_trip(unit):
    [(key, token)] = encode_params(SiteEnergy(time_unit=unit))
    assert key == "timeUnit"
    decoded = Energy.decode(_json({"timeUnit": token, "unit": "Wh", "values": []}))
    assert decoded.time_unit is unit


@pytest.mark.parametrize("meter", list(MeterType))
def test_meter_type_round_trip(meter):
    [(key, token)] = encode_params(SitePowerDetails(meters=[meter]))
    assert key == "meters"
    decoded = MeterValues.decode(_json({"type": token, "values": []}))
    assert decoded.meter_type is meter


@pytest.mark.parametrize("status", list(SiteStatus))
def test_site_status_round_trip(status):
    [(key, token)] = encode_params(SitesList(status=[status]))
    assert key == "status"
    assert StatusHolder.decode(_json({"status": token})).status is status


def test_list_result_total_alias():
    plain = EquipmentSensorsEnvelope.decode(_json({
        "SiteSensors": {
            "total": 1,
            "list": [
                {
                    "connectedTo": "Gateway 1",
                    "count": 1,
                    "sensors": [
                        {
                            "name": "Irradiance",
                            "measurement": "SensorGlobalHorizontalIrradiance",
                            "type": "IRRADIANCE",
                        }
                    ],
                }
            ],
        }
    }))
    assert plain.site_sensors.count == 1
    assert plain.site_sensors.list[0].sensors[0].measurement is SensorMeasurement.GLOBAL_HORIZONTAL_IRRADIANCE


def test_list_result_item_aliases_decode_alike():
    batteries = [_battery("BFA-1"), _battery("BFA-2")]
    a = ListResult[StorageBattery].decode(_json({"count": 2, "batteries": batteries}))
    b = ListResult[StorageBattery].decode(_json({"count": 2, "data": batteries}))

    assert a == b
    assert a.count == 2
    assert len(a.list) == 2
    assert [battery.serial_number for battery in a.list] == ["BFA-1", "BFA-2"]


def test_storage_and_telemetry_lists_have_same_shape():
    storage = StorageDataEnvelope.decode(_json({"storageData": {"batteryCount": 1, "batteries": [_battery("BFA")]}}))
    assert storage.storage_data.count == 1
    telemetry = storage.storage_data.list[0].telemetries[0]
    assert telemetry.battery_state is BatteryState.ENABLED
    assert telemetry.timestamp == datetime(2015, 10, 13, 8, 0, 0)
    assert telemetry.power == -12.5
    assert telemetry.ac_grid_charging == 0.0

    data = TelemetryEnvelope.decode(_json({"data": {"count": 0, "telemetries": []}}))
    assert data.data.count == 0
    assert data.data.list == []


def test_missing_envelope_root_is_decode_error():
    with pytest.raises(DecodeError, match="storageData"):
        StorageDataEnvelope.decode(_json({"somethingElse": {}}))
