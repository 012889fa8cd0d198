DEFAULT_BASE_URL = "https://compute.googleapis.com/compute/v1"
DEFAULT_TOKEN_URL = "https://oauth2.googleapis.com/token"
DEFAULT_CONFIG_DIR = "~/.config/computeengine"
DEFAULT_CONFIG_FILE = f"{DEFAULT_CONFIG_DIR}/config.yml"
DEFAULT_PROFILE = "default"
