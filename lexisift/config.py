import logging
import os
import sys
import tomllib
from typing import Any, Dict, List, Optional

from lexisift.errors import ConfigError

logger = logging.getLogger("lexisift")

DEFAULT_CONFIG_PATH = "lexisift.toml"

# Output key -> default file name. The first four are the reference outputs.
OUTPUT_NAMES = {
    "deduplicated_chinese": "deduplicated_chinese.txt",
    "duplicated_chinese": "duplicated_chinese.txt",
    "deduplicated_english": "deduplicated_english.txt",
    "duplicated_english": "duplicated_english.txt",
    "deduplicated_chinese_words": "deduplicated_chinese_words.txt",
    "duplicated_chinese_words": "duplicated_chinese_words.txt",
    "deduplicated_english_phrases": "deduplicated_english_phrases.txt",
    "duplicated_english_phrases": "duplicated_english_phrases.txt",
}
REFERENCE_OUTPUTS = list(OUTPUT_NAMES)[:4]


class Config:
    """Creates a Config object from a TOML-encoded config file.

    When no path is given the default file is used if it exists, and
    built-in defaults otherwise.
    """

    def __init__(self, filepath: Optional[str] = None):
        required_file = filepath is not None
        if filepath is None:
            filepath = DEFAULT_CONFIG_PATH

        self.config_dict = {}
        if os.path.isfile(filepath):
            try:
                with open(filepath, "rb") as file_stream:
                    self.config_dict = tomllib.load(file_stream)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Unable to read config file {filepath}: {e}")
        elif required_file:
            raise ConfigError(f"Config file '{filepath}' does not exist")

        self._parse_config_values()

    def _parse_config_values(self):
        """Read and validate each config option"""
        # Logging setup
        formatter = logging.Formatter(
            "%(asctime)s | %(name)s [%(levelname)s] %(message)s"
        )

        # Drop handlers left by an earlier Config in the same process
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        log_level = self._get_cfg(["logging", "level"], default="INFO")
        try:
            logger.setLevel(log_level)
        except (TypeError, ValueError):
            raise ConfigError(f"logging.level has an invalid value: {log_level}")

        file_logging_enabled = self._get_cfg(
            ["logging", "file_logging", "enabled"], default=False
        )
        file_logging_filepath = self._get_cfg(
            ["logging", "file_logging", "filepath"], default="lexisift.log"
        )
        if file_logging_enabled:
            try:
                handler = logging.FileHandler(file_logging_filepath, encoding="utf-8")
            except (OSError, TypeError) as e:
                raise ConfigError(
                    f"Unable to open log file {file_logging_filepath}: {e}"
                )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        console_logging_enabled = self._get_cfg(
            ["logging", "console_logging", "enabled"], default=True
        )
        if console_logging_enabled:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        self.encoding = self._get_cfg(["input", "encoding"], default="utf-8")

        self.output_directory = self._get_cfg(["output", "directory"], default=".")
        for key, value in [
            ("input.encoding", self.encoding),
            ("output.directory", self.output_directory),
        ]:
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{key} must be a non-empty string")

        self.with_counts = self._get_cfg(["output", "with_counts"], default=False)
        self.all_categories = self._get_cfg(
            ["output", "all_categories"], default=False
        )
        for key, value in [
            ("with_counts", self.with_counts),
            ("all_categories", self.all_categories),
        ]:
            if not isinstance(value, bool):
                raise ConfigError(f"output.{key} must be true or false")

        self.outputs: Dict[str, str] = {}
        for key, default in OUTPUT_NAMES.items():
            name = self._get_cfg(["output", key], default=default)
            if not isinstance(name, str) or not name:
                raise ConfigError(f"output.{key} must be a non-empty file name")
            self.outputs[key] = os.path.join(self.output_directory, name)

    def enabled_outputs(self) -> List[str]:
        if self.all_categories:
            return list(OUTPUT_NAMES)
        return list(REFERENCE_OUTPUTS)

    def _get_cfg(
        self,
        path: List[str],
        default: Optional[Any] = None,
        required: Optional[bool] = True,
    ) -> Any:
        """Get a config option from a path and option name, specifying whether it is
        required.

        Raises:
            ConfigError: If required is True and the object is not found (and there is
                no default value provided), a ConfigError will be raised.
        """
        # Sift through the the config until we reach our option
        config = self.config_dict
        for name in path:
            config = config.get(name) if isinstance(config, dict) else None

            # If at any point we don't get our expected option...
            if config is None:
                # Raise an error if it was required
                if required and default is None:
                    raise ConfigError(f"Config option {'.'.join(path)} is required")

                # or return the default value
                return default

        # We found the option. Return it.
        return config
