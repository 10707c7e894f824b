from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Handler settings loaded from environment."""

    # Service
    service_name: str = "bucket-lister"
    log_level: str = "INFO"
    log_events: bool = True  # Log each received event verbatim

    # AWS
    aws_region: str | None = None  # Falls back to the ambient region
    aws_endpoint_url: str | None = None  # For LocalStack

    # S3 client
    s3_connect_timeout_seconds: int = 5
    s3_read_timeout_seconds: int = 10
    s3_max_attempts: int = 1  # Total requests per call, first one included

    # Set by the runtime when an instrumentation wrapper is installed
    exec_wrapper: str | None = Field(default=None, validation_alias="AWS_LAMBDA_EXEC_WRAPPER")

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
