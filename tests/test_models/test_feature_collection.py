"""
Tests for feature collections and the PmaModel.
"""

import pytest

from geo_pma.models import (
    FeatureKind, FeatureCollection, PmaModel, ModelValidationError, Airport, CompleteThreshold,
)


class TestFeatureCollectionDecoding:
    """Test cases for decoding whole GeoJSON documents."""

    def test_from_geojson_keeps_order(self, load_geojson):
        collection = FeatureCollection.from_geojson(FeatureKind.AIRPORT, load_geojson('airport'))
        assert collection.kind is FeatureKind.AIRPORT
        assert len(collection) == 3
        assert [a.locality for a in collection] == ['SBSP', 'SBGR', 'SDZZ']
        assert all(isinstance(a, Airport) for a in collection)

    def test_empty_collection(self):
        collection = FeatureCollection.from_geojson(FeatureKind.VOR, {'type': 'FeatureCollection', 'features': []})
        assert collection.count() == 0
        assert not collection.exists()

    @pytest.mark.parametrize('document', [None, [], {}, {'features': 'none'}])
    def test_not_a_feature_collection(self, document):
        with pytest.raises(ModelValidationError):
            FeatureCollection.from_geojson(FeatureKind.AIRPORT, document)

    def test_errors_from_all_features_are_reported(self, load_geojson):
        document = load_geojson('waypoint')
        del document['features'][0]['properties']['codetype']
        document['features'][1]['properties']['latitude'] = 'north'
        document['features'].append({'type': 'Feature'})

        with pytest.raises(ModelValidationError) as exc_info:
            FeatureCollection.from_geojson(FeatureKind.WAYPOINT, document)

        result = exc_info.value.validation_result
        assert not result.is_valid
        assert len(result.errors) == 3
        fields = [error.field for error in result.errors]
        assert fields == ['features[0].codetype', 'features[1].latitude', 'features[2]']
        assert 'ICA:waypoint' in str(exc_info.value)


class TestQueryable:
    """Test cases for the query helpers."""

    @pytest.fixture
    def runways(self, load_geojson):
        return FeatureCollection.from_geojson(FeatureKind.RUNWAY, load_geojson('runway_v2'))

    def test_where_and_filter_keep_kind(self, runways):
        concrete = runways.where(surface='CONC')
        assert isinstance(concrete, FeatureCollection)
        assert concrete.kind is FeatureKind.RUNWAY
        assert [r.runway_key for r in concrete] == [11]

        long_runways = runways.filter(lambda r: r.length > 1000)
        assert [r.runway_key for r in long_runways.all()] == [10, 11]

    def test_first_and_group_by(self, runways):
        assert runways.first().runway_key == 10
        assert runways.where(surface='DIRT').first() is None
        groups = runways.group_by(lambda r: r.width)
        assert [r.runway_key for r in groups[45.0]] == [10, 11]
        assert [r.runway_key for r in groups[30.0]] == [12]


class TestPmaModel:
    """Test cases for the run model."""

    @pytest.fixture
    def model(self, load_geojson):
        model = PmaModel()
        for token in ('airport', 'runway_v2', 'rwydirection'):
            kind = FeatureKind.from_token(token)
            model.add_collection(FeatureCollection.from_geojson(kind, load_geojson(token)), 'test')
        return model

    def test_collections(self, model):
        assert model.has_collection(FeatureKind.AIRPORT)
        assert not model.has_collection(FeatureKind.VOR)
        assert len(model.get_collection(FeatureKind.VOR)) == 0
        assert model.get_statistics() == {'airport': 3, 'runway_v2': 3, 'rwydirection': 6}
        assert model.sources_used == {'test'}

    def test_complete_thresholds(self, model):
        completed = model.complete_thresholds()
        assert all(isinstance(c, CompleteThreshold) for c in completed)
        assert [c.runway_end_id for c in completed] == ['SP17R', 'SP35L', 'GR09L', 'GR27R', 'ZZ01']

        collection = model.get_collection(FeatureKind.COMPLETE_THRESHOLD)
        assert collection.kind is FeatureKind.COMPLETE_THRESHOLD
        assert len(collection) == 5

    def test_derived_collection_cannot_be_added(self):
        with pytest.raises(ValueError):
            PmaModel().add_collection(FeatureCollection(FeatureKind.COMPLETE_THRESHOLD), 'test')
