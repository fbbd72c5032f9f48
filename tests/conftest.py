import pytest
from pathlib import Path
import json

from geo_pma.models import Airport, Runway, Threshold


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def geojson_dir(test_assets_dir) -> Path:
    """Directory holding one GeoJSON document per layer."""
    return test_assets_dir / 'geojson'


@pytest.fixture
def load_geojson(geojson_dir):
    """Return a loader for the GeoJSON document of a layer token."""
    def _load(token: str) -> dict:
        with open(geojson_dir / f"{token}.json", encoding='utf-8') as f:
            return json.load(f)
    return _load


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'


@pytest.fixture
def congonhas() -> Airport:
    return Airport(
        locality='SBSP',
        name=' Congonhas ',
        operator='PUBLICO',
        latitude=-23.627,
        longitude=-46.656,
        elevation_m=803.0,
        airport_key=1,
    )


@pytest.fixture
def guarulhos() -> Airport:
    return Airport(
        locality='SBGR',
        name='Guarulhos',
        operator='PUBLICO',
        latitude=-23.435556,
        longitude=-46.473056,
        elevation_m=750.0,
        airport_key=2,
    )


@pytest.fixture
def runway_sbgr() -> Runway:
    return Runway(runway_key=11, airport_key=2, surface='CONC', length=3700.0, width=45.0)


@pytest.fixture
def threshold_09() -> Threshold:
    return Threshold(runway_end_id='09', latitude=-23.42, longitude=-46.48, runway_key=11, elevation_m=749.0)
