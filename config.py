import os
import json
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

API_KEY_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "API_key.json")
API_KEY_ENV_VAR = "AIQUIZ_API_KEY"
PLACEHOLDER_KEY = "YOUR_API_KEY_HERE"

DEFAULT_MODEL = "llama3-70b-8192"
DEFAULT_API_URL = "https://api.groq.com/openai/v1/chat/completions"
API_KEY_URL = "https://console.groq.com/keys"


class Config:
    """
    Holds the settings needed to talk to the AI service.

    Values come from the API key JSON file. If the AIQUIZ_API_KEY environment
    variable (or a .env entry) is set, it takes precedence over the stored key.

    Attributes:
        path (str): Location of the API key JSON file.
        api_key (str): The API key, or an empty string if none was found.
        model (str): Model name sent with each chat completion request.
        api_url (str): Chat completions endpoint.
        key_from_env (bool): True if the key comes from the environment, not the file.
    """

    def __init__(self, path: str = API_KEY_FILE):
        """
        Load the configuration. Never raises: a missing or broken file
        simply leaves the configuration empty.

        Args:
            path (str): Path to the API key JSON file.
        """
        self.path = path
        self.api_key = ""
        self.model = DEFAULT_MODEL
        self.api_url = DEFAULT_API_URL

        data = self._read_file()
        self.api_key = str(data.get("api_key", "") or "").strip()
        self.model = data.get("model") or DEFAULT_MODEL
        self.api_url = data.get("api_url") or DEFAULT_API_URL

        load_dotenv()
        env_key = (os.getenv(API_KEY_ENV_VAR) or "").strip()
        self.key_from_env = bool(env_key)
        if env_key:
            self.api_key = env_key

    def _read_file(self) -> dict:
        if not os.path.isfile(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", self.path)
            return {}
        return data

    def is_api_key_configured(self) -> bool:
        """
        Returns:
            bool: True if a real (non-empty, non-placeholder) key is set.
        """
        key = self.api_key.strip()
        return bool(key) and key != PLACEHOLDER_KEY

    def save_api_key(self, key: str):
        """
        Store a new API key in the JSON file, keeping any other fields.

        Args:
            key (str): The key to save.

        Raises:
            OSError: If the file cannot be written.
        """
        data = self._read_file()
        data["api_key"] = key
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        self.api_key = key
