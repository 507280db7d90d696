from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import tomli as tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:  # Python < 3.11
        import tomli as tomllib

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "targetplan" / "config.toml"


class Config:
    def __init__(self, data: dict):
        self._data = data

    def _site_data(self) -> dict:
        return self._data.get("site", {})

    @property
    def site_latitude_deg(self):
        return self._site_data().get("latitude_deg", None)

    @property
    def site_longitude_deg(self):
        return self._site_data().get("longitude_deg", None)

    @property
    def site_elevation_m(self):
        return self._site_data().get("elevation_m", None)

    @property
    def ephemeris_backend(self):
        return self._data.get("ephemeris", {}).get("backend", "astropy")

    @property
    def minimum_altitude_deg(self):
        return float(self._data.get("visibility", {}).get("minimum_altitude_deg", 20.0))


def load_config(path: Path | None = None) -> Config:
    explicit_path = path
    path = path or DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Return default config if default file missing
        return Config({})

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return Config(data)
