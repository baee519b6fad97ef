"""Shared constants for syncalerts state and artefact locations."""

SYNCALERTS_HOME_EXT = ".syncalerts"  # user-level state/config directory suffix

SYNCALERTS_HOME_ENV = "SYNCALERTS_HOME"

CONFIG_FILE_NAME = "config.json"

LOG_FILE_NAME = "syncalerts.log"
