APP_NAME = "keel"
ENV_PREFIX = "KEEL_"
