from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Development
    DEV_MODE: bool = Field(default=True, description="Enable debug logging")

    # Facility layout
    PARKING_FLOORS: int = Field(default=3, ge=1, description="Number of parking floors")
    CAR_SLOTS_PER_FLOOR: int = Field(default=10, ge=0, description="Car slots per floor")
    BIKE_SLOTS_PER_FLOOR: int = Field(default=5, ge=0, description="Bike slots per floor")
    ELECTRIC_CAR_SLOTS_PER_FLOOR: int = Field(default=0, ge=0, description="Electric car slots per floor")
    HANDICAPPED_CAR_SLOTS_PER_FLOOR: int = Field(default=0, ge=0, description="Handicapped car slots per floor")
    HANDICAPPED_BIKE_SLOTS_PER_FLOOR: int = Field(default=0, ge=0, description="Handicapped bike slots per floor")

    # Tariff
    CAR_HOURLY_RATE: float = Field(default=20.0, ge=0, description="Hourly rate for cars")
    BIKE_HOURLY_RATE: float = Field(default=10.0, ge=0, description="Hourly rate for bikes")
    DAILY_MAX: float = Field(default=200.0, ge=0, description="Maximum charge for one session")

    # Tickets
    TICKET_COUNTER_START: int = Field(default=1000, ge=0, description="Ticket ids start right after this value")


# Create settings instance
settings = Settings()
