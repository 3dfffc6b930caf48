import os
import yaml

DEFAULT_AUTH_BASE_URL = "http://auth:3000"
CONFIG_FILE_PATH = os.environ.get(
    "AUTH_CLIENT_CONFIG", os.path.join(os.getcwd(), "env.yaml")
)


def load_config_data(path: str = CONFIG_FILE_PATH) -> dict:
    if os.path.exists(path):
        with open(path, "r") as r_file:
            return yaml.safe_load(r_file) or dict()
    return dict()


data = load_config_data()


class ApplicationConfig:
    AUTH_BASE_URL = data.get("AUTH_BASE_URL", DEFAULT_AUTH_BASE_URL)
