import json
import os
import secrets
from typing import Dict, Any

CONFIG_FILE = "config.json"

class ConfigManager:
    def __init__(self, config_file: str = CONFIG_FILE):
        self.config_file = config_file
        self.config: Dict[str, Any] = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not os.path.exists(self.config_file):
            return self._default_config()

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError):
            return self._default_config()

        if not isinstance(loaded, dict):
            return self._default_config()

        # Fill in keys added after the file was written
        config = self._default_config()
        config.update(loaded)
        return config

    def _default_config(self) -> Dict[str, Any]:
        return {
            "api_base_url": "https://pokeapi.co/api/v2",
            "request_timeout": 10,
            "page_size": 8,
            "pagination_block_size": 8,
            "batch_concurrency": 8,
            "theme": "light",
            "log_level": "INFO"
        }

    def save_config(self):
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)

    def get_api_base_url(self) -> str:
        return self.config.get("api_base_url", "https://pokeapi.co/api/v2").rstrip('/')

    def get_request_timeout(self) -> float:
        return self.config.get("request_timeout", 10)

    def get_page_size(self) -> int:
        return self.config.get("page_size", 8)

    def get_pagination_block_size(self) -> int:
        return self.config.get("pagination_block_size", 8)

    def get_batch_concurrency(self) -> int:
        return self.config.get("batch_concurrency", 8)

    def get_theme(self) -> str:
        return self.config.get("theme", "light")

    def set_theme(self, theme: str):
        self.config["theme"] = theme
        self.save_config()

    def get_log_level(self) -> str:
        return self.config.get("log_level", "INFO")

    def get_storage_secret(self) -> str:
        """Signs the browser session cookie. Generated and saved on first use."""
        secret = self.config.get("storage_secret")
        if not secret:
            secret = secrets.token_urlsafe(32)
            self.config["storage_secret"] = secret
            self.save_config()
        return secret

config_manager = ConfigManager()
