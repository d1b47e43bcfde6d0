from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenRouteService directions
    openroute_api_key: str = ""
    openroute_base_url: str = "https://api.openrouteservice.org"

    # Nominatim (OpenStreetMap) geocoding
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    nominatim_user_agent: str = "EcoVisionAI/1.0"

    # Outbound HTTP
    http_timeout_seconds: float = 8.0

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def routing_configured(self) -> bool:
        return bool(self.openroute_api_key.strip())

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
