from pydantic_settings import BaseSettings, SettingsConfigDict


class PushNotifierConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    apns_certificate_path: str = ""
    apns_team_id: str = ""
    apns_key_id: str = ""
    fcm_certificate_path: str = ""


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PUSH_NOTIFIER_")

    log_level: str = "INFO"
