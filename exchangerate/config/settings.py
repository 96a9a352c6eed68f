from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	BASE_URL: str = 'https://api.exchangerate.host'
	ACCESS_KEY: str = ''

	# Seconds, applied to connect/read/write/pool
	TIMEOUT: float = 10.0

	DEFAULT_BASE: str = 'USD'

	model_config = SettingsConfigDict(
		env_prefix='EXCHANGERATE_', env_file='.env', case_sensitive=False, extra='ignore'
	)


@lru_cache
def get_settings() -> Settings:
	return Settings()
