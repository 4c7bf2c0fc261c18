from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # National Flood Data (address / parcel lookups)
    nfd_api_key: str = ""
    nfd_data_url: str = "https://api.nationalflooddata.com/v3/data"
    nfd_search_type: str = "addressparcel"  # or "addresscoord"
    nfd_tile_url: str = "https://api.nationalflooddata.com/v3/tiles/flood-vector/{z}/{x}/{y}.mvt"

    # FEMA NFHL REST MapServer: layer 28 is the flood hazard zones
    fema_nfhl_url: str = "https://hazards.fema.gov/gis/nfhl/rest/services/public/NFHL/MapServer/28/query"

    # Upstream is uncontrolled, keep requests bounded
    request_timeout: float = 15.0

    # App
    cors_origins: list[str] = ["*"]
    debug: bool = False
    log_level: str = "INFO"
    app_version: str = "1.0.0"


settings = Settings()
