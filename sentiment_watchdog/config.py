"""Application configuration via Pydantic Settings.

NOTE: We explicitly map common .env variable names (OPENAI_API_KEY,
SLACK_WEBHOOK_URL, TWILIO_ACCOUNT_SID, etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI
    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", validation_alias="OPENAI_MODEL")
    llm_max_retries: int = Field(default=3, validation_alias="LLM_MAX_RETRIES")

    # Slack
    slack_webhook_url: str = Field(default="", validation_alias="SLACK_WEBHOOK_URL")

    # SendGrid
    sendgrid_api_key: str = Field(default="", validation_alias="SENDGRID_API_KEY")
    sendgrid_from_email: str = Field(
        default="alerts@sentimentwatchdog.com",
        validation_alias="SENDGRID_FROM_EMAIL",
    )
    alert_email_recipients: str = Field(
        default="support-lead@company.com",
        validation_alias="ALERT_EMAIL_RECIPIENTS",
    )

    # Twilio
    twilio_account_sid: str = Field(default="", validation_alias="TWILIO_ACCOUNT_SID")
    twilio_auth_token: str = Field(default="", validation_alias="TWILIO_AUTH_TOKEN")
    twilio_phone_number: str = Field(default="", validation_alias="TWILIO_PHONE_NUMBER")
    alert_phone_number: str = Field(default="", validation_alias="ALERT_PHONE_NUMBER")

    # Generic webhook
    webhook_url: str = Field(default="", validation_alias="WEBHOOK_URL")

    # App
    dashboard_url: str = Field(
        default="http://localhost:3000/platform",
        validation_alias="DASHBOARD_URL",
    )
    http_timeout: float = Field(default=10.0, validation_alias="HTTP_TIMEOUT")
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    allowed_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        validation_alias="ALLOWED_ORIGINS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def alert_recipients(self) -> list[str]:
        return [e.strip() for e in self.alert_email_recipients.split(",") if e.strip()]

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


settings = Settings()
