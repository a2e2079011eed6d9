"""Module for the Config class."""
import logging
import logging.config
from datetime import tzinfo
from pathlib import Path
from typing import Any

import yaml
from dateutil import tz

from bank_kata.core.clock import Clock
from bank_kata.core.formatting import DEFAULT_ZONE_NAME
from bank_kata.core.money import Money
from bank_kata.domain.account import Account
from bank_kata.exceptions import UnknownTimeZoneError
from bank_kata.i18n import setup_i18n

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Config:
    """A class to store the configuration."""

    def __init__(self) -> None:
        self.time_zone: str | None = DEFAULT_ZONE_NAME
        self.language = "en"
        self.opening_balance = Money(0)
        self.logging_config: dict[str, Any] | None = None

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
            self.time_zone = config.get("time_zone", self.time_zone)
            self.language = config.get("language", self.language)
            if "opening_balance" in config:
                self.opening_balance = Money(config["opening_balance"])
            self.logging_config = config.get("logging", self.logging_config)

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix == ".yaml":
            self.__parse_yaml(config_path)
        else:
            raise ValueError(f"Unsupported file format: '{config_path.suffix}'")

    @property
    def zone(self) -> tzinfo:
        """Resolve the configured time zone."""
        # gettz(None) and gettz("") silently return the host zone
        if not isinstance(self.time_zone, str) or not self.time_zone:
            raise UnknownTimeZoneError(self.time_zone)
        zone = tz.gettz(self.time_zone)
        if zone is None:
            raise UnknownTimeZoneError(self.time_zone)
        return zone

    def setup_logging(self) -> None:
        """Configure logging from the config, or log to a per-user file."""
        if self.logging_config is None:
            log_dir = Path.home() / ".local" / "share" / "bank-kata"
            log_dir.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=log_dir / "bank-kata.log",
                level=logging.INFO,
                format=_LOG_FORMAT,
            )
            return

        try:
            logging.config.dictConfig(self.logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as error:
            logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
            logger.warning("Invalid logging configuration, using defaults: %s", error)

    def setup_i18n(self) -> bool:
        """Install the translations of the configured language.

        Returns:
            False when the language has no catalogue and English is used.
        """
        return setup_i18n(self.language)

    def open_account(self, clock: Clock | None = None) -> Account:
        """Open an account with the configured opening balance and zone."""
        return Account(self.opening_balance, clock, zone=self.zone)
