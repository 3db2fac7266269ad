"""Configuration package for the secret-blob settings loader."""

from .settings import (
	SECRET_BLOB_ENV_VAR,
	ReportSettings,
	SecretBlobEnvironment,
	config_load_settings,
	config_parse_settings,
	config_read_secret_blob,
)

__all__ = [
	"ReportSettings",
	"SECRET_BLOB_ENV_VAR",
	"SecretBlobEnvironment",
	"config_load_settings",
	"config_parse_settings",
	"config_read_secret_blob",
]
