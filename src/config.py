from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # Census ACS 5-year
    # No key needed for anonymous (rate-limited) queries
    census_api_key: str = ""
    census_base_url: str = "https://api.census.gov/data"
    census_year: int = 2022
    census_revalidate_seconds: int = 86400

    # Listings search
    listings_api_key: str = ""
    listings_base_url: str = "https://api.repliers.io"
    listings_page_size: int = 200

    # Community copy
    metro_area: str = "Austin, Texas"
    brokerage_name: str = "Spyglass Realty"

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
