import logging
from typing import Optional

import requests

from config import Config

logger = logging.getLogger(__name__)

CONNECTION_TIMEOUT = 5


class QuestionBank:
    """
    Gateway to the AI service that generates quiz questions.

    Args:
        config (Config, optional): Settings to use. A fresh Config is loaded if omitted.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json"
        }

    def test_connection(self) -> bool:
        """
        Test if the AI service is reachable with the configured key by making
        a minimal chat completion request.

        Returns:
            bool: True if the service answered with at least one choice, False otherwise.
        """
        data = {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": "You are a test. Reply 'ok'."},
                {"role": "user", "content": "Say 'ok'."}
            ],
            "temperature": 0
        }

        try:
            response = requests.post(self.config.api_url, headers=self._headers(), json=data,
                                     timeout=CONNECTION_TIMEOUT)
        except requests.RequestException as e:
            logger.warning("Connection test failed: %s", e)
            return False

        if response.status_code != 200:
            logger.warning("Connection test returned HTTP %s", response.status_code)
            return False

        try:
            resp_json = response.json()
        except ValueError:
            logger.warning("Connection test returned a non-JSON body")
            return False

        choices = resp_json.get("choices") if isinstance(resp_json, dict) else None
        return bool(choices)
