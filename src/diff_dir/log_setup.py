# Globals accessed by loguru-config through 'ext://' references in log-config.yaml.
# Set these before calling 'LoguruConfig.load'.

APP_LOGGING_NAME = "ddir"

log_level = "WARNING"
