"""
Tests for decoding GeoServer properties into typed records.
"""

import dataclasses
import json

import pytest

from geo_pma.models import (
    FeatureKind, Airport, Vor, VorType, Ndb, Waypoint, Runway, Threshold,
    CompleteThreshold, decode_feature, FeatureDecodeError, PreconditionError,
    FeatureCollection, ModelValidationError,
)


class TestFeatureKind:
    """Test cases for the layer enumeration."""

    def test_tokens_and_file_names(self):
        assert FeatureKind.AIRPORT.typename == 'ICA:airport'
        assert FeatureKind.THRESHOLD.token == 'rwydirection'
        assert FeatureKind.RUNWAY.typename == 'ICA:runway_v2'
        assert FeatureKind.COMPLETE_THRESHOLD.filename == 'aisweb_cabeceiras.txt'
        assert FeatureKind.WAYPOINT.filename == 'aisweb_waypoint.txt'

    def test_from_token(self):
        assert FeatureKind.from_token('ndb') is FeatureKind.NDB
        with pytest.raises(ValueError, match='Unknown feature kind'):
            FeatureKind.from_token('heliport')

    def test_only_complete_threshold_is_derived(self):
        derived = [kind for kind in FeatureKind if kind.is_derived]
        assert derived == [FeatureKind.COMPLETE_THRESHOLD]


class TestDecodeFeature:
    """Test cases for the tagged decoder."""

    def test_airport(self):
        airport = decode_feature(FeatureKind.AIRPORT, {
            'localidade_id': 'SBSP', 'nome': ' Congonhas ', 'opr': 'PUBLICO',
            'latitude_dec': -23.627, 'longitude_dec': -46.656, 'elevacao': 803,
            'airport_pk': 1, 'extra': 'ignored',
        })
        assert isinstance(airport, Airport)
        assert airport.locality == 'SBSP'
        assert airport.name == ' Congonhas '
        assert airport.elevation_m == 803.0
        assert isinstance(airport.elevation_m, float)
        assert airport.airport_key == 1

    def test_airport_without_key(self):
        properties = {
            'localidade_id': 'SDZZ', 'nome': 'X', 'opr': 'PRIVADO',
            'latitude_dec': -10.5, 'longitude_dec': -50.25, 'elevacao': 300.0,
        }
        airport = decode_feature(FeatureKind.AIRPORT, properties)
        assert airport.airport_key is None
        assert airport.effective_airport_key == 0

        properties['airport_pk'] = None
        assert decode_feature(FeatureKind.AIRPORT, properties).airport_key is None

    def test_vor(self):
        vor = decode_feature(FeatureKind.VOR, {
            'ident': 'CGO', 'txtname': 'CONGONHAS', 'latitude': -23.62,
            'longitude': -46.65, 'frequency': 116.9, 'vortype': 'DVOR',
        })
        assert isinstance(vor, Vor)
        assert vor.vor_type is VorType.DVOR

    def test_vor_rejects_unknown_type(self):
        with pytest.raises(FeatureDecodeError, match='vortype'):
            decode_feature(FeatureKind.VOR, {
                'ident': 'CGO', 'txtname': 'CONGONHAS', 'latitude': -23.62,
                'longitude': -46.65, 'frequency': 116.9, 'vortype': 'TACAN',
            })

    def test_ndb_subtype_is_free_text(self):
        ndb = decode_feature(FeatureKind.NDB, {
            'codeid': 'SCB', 'geolat': -23.5, 'geolong': -46.6, 'txtname': 'SÃO CARLOS',
            'valfreq': 340.0, 'tipo': 'Locator Outer',
        })
        assert isinstance(ndb, Ndb)
        assert ndb.subtype == 'Locator Outer'

    def test_waypoint(self):
        waypoint = decode_feature(FeatureKind.WAYPOINT, {
            'ident': 'ATOBA', 'latitude': -23.1, 'longitude': -45.9, 'codetype': 'RNAV_GPS',
        })
        assert isinstance(waypoint, Waypoint)
        # replacement happens when formatting, not when decoding
        assert waypoint.code_type == 'RNAV_GPS'

    def test_threshold_optional_elevation(self):
        threshold = decode_feature(FeatureKind.THRESHOLD, {
            'rwyendid': '09', 'threshlat': -23.42, 'threshlon': -46.48, 'runway_pk': 11,
        })
        assert isinstance(threshold, Threshold)
        assert threshold.elevation_m is None
        assert threshold.group_id is None

        threshold = decode_feature(FeatureKind.THRESHOLD, {
            'rwyendid': '09', 'threshlat': -23.42, 'threshlon': -46.48, 'runway_pk': 11,
            'threshelev': 0, 'group_id': 3,
        })
        assert threshold.elevation_m == 0.0
        assert threshold.group_id == 3

    def test_runway(self):
        runway = decode_feature(FeatureKind.RUNWAY, {
            'runway_pk': 11, 'airport_pk': 2, 'surface': 'CONC', 'runwayleng': 3700, 'width': 45,
        })
        assert isinstance(runway, Runway)
        assert runway.length == 3700.0

    def test_missing_property(self):
        with pytest.raises(FeatureDecodeError) as exc_info:
            decode_feature(FeatureKind.WAYPOINT, {'ident': 'ATOBA', 'latitude': -23.1, 'longitude': -45.9})
        assert exc_info.value.field == 'codetype'

    @pytest.mark.parametrize('value', ['11', 11.0, -1, 70000, True])
    def test_invalid_keys(self, value):
        with pytest.raises(FeatureDecodeError, match='runway_pk'):
            decode_feature(FeatureKind.RUNWAY, {
                'runway_pk': value, 'airport_pk': 2, 'surface': 'CONC', 'runwayleng': 3700, 'width': 45,
            })

    def test_string_is_not_a_number(self):
        with pytest.raises(FeatureDecodeError, match='expected a number'):
            decode_feature(FeatureKind.WAYPOINT, {
                'ident': 'ATOBA', 'latitude': '-23.1', 'longitude': -45.9, 'codetype': 'ICAO',
            })

    def test_shape_of_another_kind_is_rejected(self):
        vor_properties = {
            'ident': 'CGO', 'txtname': 'CONGONHAS', 'latitude': -23.62,
            'longitude': -46.65, 'frequency': 116.9, 'vortype': 'DVOR',
        }
        with pytest.raises(FeatureDecodeError):
            decode_feature(FeatureKind.NDB, vor_properties)

    def test_properties_must_be_an_object(self):
        with pytest.raises(FeatureDecodeError):
            decode_feature(FeatureKind.AIRPORT, ['SBSP'])

    def test_derived_kind_cannot_be_decoded(self):
        with pytest.raises(ValueError):
            decode_feature(FeatureKind.COMPLETE_THRESHOLD, {})


class TestImmutability:
    """Records are read-only after decoding."""

    def test_records_are_frozen(self, congonhas, threshold_09):
        with pytest.raises(dataclasses.FrozenInstanceError):
            congonhas.name = 'Other'
        with pytest.raises(dataclasses.FrozenInstanceError):
            threshold_09.latitude = 0.0


class TestCompleteThreshold:
    """Test cases for building composite thresholds."""

    def test_composite_runway_end_id(self, guarulhos, runway_sbgr, threshold_09):
        complete = CompleteThreshold.from_parts(guarulhos, runway_sbgr, threshold_09)
        assert complete.runway_end_id == 'GR09'
        assert complete.locality == 'SBGR'
        assert complete.surface == 'CONC'
        assert complete.length == 3700.0
        assert complete.width == 45.0
        assert complete.latitude == threshold_09.latitude
        assert complete.elevation_m == 749.0

    def test_two_character_locality(self, guarulhos, runway_sbgr, threshold_09):
        airport = dataclasses.replace(guarulhos, locality='GR')
        complete = CompleteThreshold.from_parts(airport, runway_sbgr, threshold_09)
        assert complete.runway_end_id == 'GR09'

    @pytest.mark.parametrize('locality', ['', 'X'])
    def test_short_locality_fails(self, guarulhos, runway_sbgr, threshold_09, locality):
        airport = dataclasses.replace(guarulhos, locality=locality)
        with pytest.raises(PreconditionError):
            CompleteThreshold.from_parts(airport, runway_sbgr, threshold_09)

    def test_has_position(self, guarulhos, runway_sbgr, threshold_09):
        unset = dataclasses.replace(threshold_09, latitude=0.0, longitude=0.0)
        assert not unset.has_position
        assert not CompleteThreshold.from_parts(guarulhos, runway_sbgr, unset).has_position

        half = dataclasses.replace(threshold_09, latitude=0.0)
        assert half.has_position


class TestInformationalProperties:
    """Properties that are never written must not fail a feature."""

    THRESHOLD = {'rwyendid': '09', 'threshlat': -23.42, 'threshlon': -46.48, 'runway_pk': 11}

    @pytest.mark.parametrize('group_id, expected', [
        (70000, 70000),
        (2 ** 40, 2 ** 40),
        (-1, None),
        ('7', None),
        (7.5, None),
        (True, None),
    ])
    def test_group_id_is_lenient(self, group_id, expected):
        threshold = decode_feature(FeatureKind.THRESHOLD, dict(self.THRESHOLD, group_id=group_id))
        assert threshold.group_id == expected
        assert threshold.runway_key == 11

    def test_layer_with_large_group_id_decodes(self):
        document = {'type': 'FeatureCollection', 'features': [
            {'type': 'Feature', 'properties': dict(self.THRESHOLD, group_id=70000)},
        ]}
        collection = FeatureCollection.from_geojson(FeatureKind.THRESHOLD, document)
        assert [t.runway_end_id for t in collection] == ['09']


class TestNonFiniteNumbers:
    """NaN and Infinity literals are not valid JSON numbers."""

    @pytest.mark.parametrize('value', [float('nan'), float('inf'), float('-inf'), 10 ** 400])
    def test_required_number(self, value):
        with pytest.raises(FeatureDecodeError, match='finite') as exc_info:
            decode_feature(FeatureKind.VOR, {
                'ident': 'CGO', 'txtname': 'CONGONHAS', 'latitude': -23.62,
                'longitude': -46.65, 'frequency': value, 'vortype': 'DVOR',
            })
        assert exc_info.value.field == 'frequency'

    def test_optional_number(self):
        with pytest.raises(FeatureDecodeError, match='threshelev'):
            decode_feature(FeatureKind.THRESHOLD, {
                'rwyendid': '09', 'threshlat': -23.42, 'threshlon': -46.48, 'runway_pk': 11,
                'threshelev': float('nan'),
            })

    def test_parsed_nan_literal_fails_the_layer(self):
        document = json.loads(
            '{"type": "FeatureCollection", "features": [{"type": "Feature", "properties": '
            '{"ident": "CGO", "txtname": "CONGONHAS", "latitude": -23.62, "longitude": -46.65, '
            '"frequency": NaN, "vortype": "DVOR"}}]}'
        )
        with pytest.raises(ModelValidationError, match='frequency'):
            FeatureCollection.from_geojson(FeatureKind.VOR, document)
