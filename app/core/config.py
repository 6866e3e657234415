"""i18n toolkit configuration settings."""

from typing import Any, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Locale context defaults.

    Used by the factory to build the LocaleDetails of an I18n context when
    the caller does not provide them explicitly.
    """

    LOCALE: str = Field(default="en-US", alias="I18N_LOCALE")
    DEFAULT_COUNTRY: str | None = Field(default=None, alias="I18N_DEFAULT_COUNTRY")
    DEFAULT_CURRENCY: str | None = Field(
        default=None, alias="I18N_DEFAULT_CURRENCY"
    )
    DEFAULT_TIMEZONE: str | None = Field(
        default=None, alias="I18N_DEFAULT_TIMEZONE"
    )
    PSEUDOLOCALIZE: Union[bool, str] = Field(
        default=False, alias="I18N_PSEUDOLOCALIZE"
    )

    @field_validator("PSEUDOLOCALIZE", mode="before")
    @classmethod
    def validate_pseudolocalize(cls, v: Any) -> Union[bool, str]:
        """Coerce the PSEUDOLOCALIZE field.

        Environment values arrive as strings, so "true"/"false" style values
        are turned into booleans and anything else is kept as a variant name.

        Args:
            cls: The class itself.
            v: The raw value of the PSEUDOLOCALIZE field.

        Returns:
            A boolean, or the name of a pseudolocalization variant.
        """
        if v is None:
            return False
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            s = v.strip()
            if s.lower() in ("", "0", "false", "no", "off"):
                return False
            if s.lower() in ("1", "true", "yes", "on"):
                return True
            return s
        raise ValueError("I18N_PSEUDOLOCALIZE must be a boolean or a variant name")

    @field_validator("DEFAULT_CURRENCY", mode="before")
    @classmethod
    def validate_currency(cls, v: Any) -> Any:
        """Normalize currency codes to upper case; blank means unset."""
        if isinstance(v, str):
            v = v.strip().upper()
            return v or None
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class Settings(BaseSettings):
    """i18n toolkit configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
