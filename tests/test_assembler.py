"""
Tests for the data assembly service.
"""

import unittest
from unittest.mock import Mock

from src.geomag_service.api import Trace, WaveServerResponse
from src.geomag_service.core import ClientError, ServerError
from src.geomag_service.models import ChannelAddress, GeomagQuery
from src.geomag_service.processing import UnitConverter
from src.geomag_service.services import DataAssembler

# 2024-01-01T00:00:00Z
DAY_START = 1704067200


def make_query(**overrides):
    fields = {
        "id": "BOU",
        "starttime": DAY_START,
        "endtime": DAY_START + 120,
        "elements": ("H", "F"),
        "sampling_period": 60,
        "type": "variation",
    }
    fields.update(overrides)
    return GeomagQuery(**fields)


def fake_fetch(samples_by_channel):
    """Build a fetch callable serving minute samples starting at DAY_START."""
    def fetch(starttime, endtime, station, network, channel, location):
        address = ChannelAddress(station=station, network=network, channel=channel, location=location)
        samples = samples_by_channel.get(channel)
        if samples is None:
            return WaveServerResponse(address)
        return WaveServerResponse(address, [Trace(DAY_START, 1 / 60, samples)])
    return Mock(side_effect=fetch)


class TestDataAssembler(unittest.TestCase):
    """Test time axis, fetching and conversion."""

    def test_assemble_converts_values(self):
        fetch = fake_fetch({"MVH": [5000, 5001, None], "MSF": [48000, 48000.5, 48001]})
        assembler = DataAssembler(fetch, logger=Mock())

        data = assembler.assemble(make_query())

        self.assertEqual(data.times, [DAY_START, DAY_START + 60, DAY_START + 120])
        self.assertEqual(data.results["H"].values, [5.0, 5.001, None])
        self.assertEqual(data.results["F"].values, [48.0, 48.0005, 48.001])
        self.assertEqual(data.results["H"].element, "H")
        self.assertEqual(data.results["H"].channel_address.channel, "MVH")
        self.assertEqual(data.results["F"].channel_address.channel, "MSF")

    def test_fetch_arguments(self):
        fetch = fake_fetch({})
        DataAssembler(fetch, logger=Mock()).assemble(make_query(elements=("Z",), type="definitive"))

        fetch.assert_called_once_with(DAY_START, DAY_START + 120, "BOU", "NT", "MVZ", "D0")

    def test_elements_fetched_in_request_order(self):
        fetch = fake_fetch({})
        DataAssembler(fetch, logger=Mock()).assemble(make_query(elements=("Z", "X", "F")))

        channels = [call.args[4] for call in fetch.call_args_list]
        self.assertEqual(channels, ["MVZ", "MVX", "MSF"])

    def test_missing_channel_is_all_missing(self):
        data = DataAssembler(fake_fetch({}), logger=Mock()).assemble(make_query())

        self.assertEqual(data.results["H"].values, [None, None, None])
        self.assertEqual(len(data.results["F"].values), len(data.times))

    def test_single_point_window(self):
        fetch = fake_fetch({"MVH": [1000]})
        query = make_query(endtime=DAY_START, elements=("H",))

        data = DataAssembler(fetch, logger=Mock()).assemble(query)

        self.assertEqual(data.times, [DAY_START])
        self.assertEqual(data.results["H"].values, [1.0])

    def test_every_series_matches_axis_length(self):
        fetch = fake_fetch({"MVX": [1, 2], "MVY": list(range(1000))})
        query = make_query(endtime=DAY_START + 86399, elements=("X", "Y", "Z"))

        data = DataAssembler(fetch, logger=Mock()).assemble(query)

        self.assertEqual(len(data.times), 1440)
        for result in data.results.values():
            self.assertEqual(len(result.values), 1440)

    def test_duplicate_elements_fetch_each_occurrence(self):
        fetch = fake_fetch({"MVH": [1000, 2000, 3000]})

        data = DataAssembler(fetch, logger=Mock()).assemble(make_query(elements=("H", "H")))

        self.assertEqual(fetch.call_count, 2)
        self.assertEqual(list(data.results.keys()), ["H"])

    def test_unset_period_and_type_use_defaults(self):
        fetch = fake_fetch({})
        query = make_query(sampling_period=None, type=None, elements=("H",))

        data = DataAssembler(fetch, logger=Mock()).assemble(query)

        fetch.assert_called_once_with(DAY_START, DAY_START + 120, "BOU", "NT", "MVH", "R0")
        self.assertEqual(len(data.times), 3)

    def test_unknown_element_fails_before_fetching(self):
        fetch = fake_fetch({})
        assembler = DataAssembler(fetch, logger=Mock())

        with self.assertRaises(ClientError) as context:
            assembler.assemble(make_query(elements=("H", "zzzz")))

        self.assertIn('"ZZZZ"', context.exception.message)
        fetch.assert_not_called()

    def test_hourly_period_fails_before_fetching(self):
        fetch = fake_fetch({})
        planned = DataAssembler(fetch, logger=Mock()).plan(make_query(sampling_period=3600))

        self.assertFalse(planned.ok)
        fetch.assert_not_called()

    def test_plan_preserves_order(self):
        planned = DataAssembler(fake_fetch({}), logger=Mock()).plan(make_query(elements=("F", "H", "F")))

        self.assertEqual([plan.element for plan in planned.value], ["F", "H", "F"])
        self.assertEqual(planned.value[1].address.channel, "MVH")

    def test_fetch_errors_propagate(self):
        fetch = Mock(side_effect=IOError("wave server down"))

        with self.assertRaises(IOError):
            DataAssembler(fetch, logger=Mock()).assemble(make_query())

    def test_misaligned_response_is_server_error(self):
        response = Mock()
        response.get_values.return_value = [1000]
        fetch = Mock(return_value=response)

        with self.assertRaises(ServerError):
            DataAssembler(fetch, logger=Mock()).assemble(make_query())


class TestUnitConverter(unittest.TestCase):
    """Test milli-unit conversion."""

    def test_divides_by_thousand(self):
        self.assertEqual(UnitConverter().convert_values([5000, -250]), [5.0, -0.25])

    def test_missing_passes_through(self):
        self.assertEqual(UnitConverter().convert_values([None, 1000, None]), [None, 1.0, None])

    def test_custom_factor(self):
        self.assertEqual(UnitConverter(factor=10).convert_values([50]), [5.0])
