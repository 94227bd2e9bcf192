# core/config.py
import os
from typing import List, Optional
import logging

log = logging.getLogger("amedos.config")

class AmedosConfig:
    """Centralized configuration management for the slash command"""

    REQUIRED_VARS = ["SLACK_BOT_TOKEN", "SLACK_SIGNING_SECRET", "YAHOO_JAPAN_API_CLIENT_ID"]

    # Slack Configuration
    @property
    def slack_bot_token(self) -> str:
        return os.getenv("SLACK_BOT_TOKEN", "")

    @property
    def slack_signing_secret(self) -> str:
        return os.getenv("SLACK_SIGNING_SECRET", "")

    @property
    def slash_command_name(self) -> str:
        return os.getenv("SLASH_COMMAND_NAME", "amedos").replace("/", "", 1)

    # Yahoo! JAPAN Static Map Configuration
    @property
    def yahoo_app_id(self) -> str:
        return os.getenv("YAHOO_JAPAN_API_CLIENT_ID", "")

    @property
    def yahoo_map_mode(self) -> str:
        return os.getenv("YAHOO_JAPAN_API_MAP_MODE") or "map"

    # Deployment Configuration
    @property
    def is_offline(self) -> bool:
        return os.getenv("IS_OFFLINE") == "true"

    @property
    def serverless_service(self) -> str:
        return os.getenv("SERVERLESS_SERVICE", "")

    @property
    def serverless_stage(self) -> str:
        return os.getenv("SERVERLESS_STAGE") or "dev"

    @property
    def backend_function_name(self) -> str:
        # `backend` is the function name in the deployment descriptor
        return f"{self.serverless_service}-{self.serverless_stage}-backend"

    @property
    def port(self) -> int:
        return int(os.getenv("PORT", "3000"))

    # HTTP Configuration
    @property
    def http_timeout(self) -> int:
        return int(os.getenv("HTTP_TIMEOUT", "30"))

    # Logging Configuration
    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def log_webhook_url(self) -> Optional[str]:
        return os.getenv("LOG_WEBHOOK_URL") or None

    @property
    def log_dir(self) -> str:
        return os.getenv("LOG_DIR", "logs")

    def missing_env_vars(self) -> List[str]:
        return [var for var in self.REQUIRED_VARS if not os.getenv(var)]

    def validate(self):
        """Validate that required environment variables are set"""
        missing_vars = self.missing_env_vars()
        if missing_vars:
            error_msg = f"Missing required environment variables: {', '.join(missing_vars)}"
            log.error(error_msg)
            raise ValueError(error_msg)

    def log_configuration(self):
        """Log current configuration (excluding sensitive data)"""
        log.info("Amedos Configuration:")
        log.info(f"  Slash Command: /{self.slash_command_name}")
        log.info(f"  Map Mode: {self.yahoo_map_mode}")
        log.info(f"  Dispatch: {'inline' if self.is_offline else 'lambda ' + self.backend_function_name}")
        log.info(f"  HTTP Timeout: {self.http_timeout} seconds")
        log.info(f"  Log Level: {self.log_level}")
        log.info(f"  Webhook Logging: {'Enabled' if self.log_webhook_url else 'Disabled'}")

# Global configuration instance
config = AmedosConfig()
