import copy
import enum
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path("hama") / "hama_clock"
CONFIG_FILE = "config.json"

DEFAULT_CONFIG = {
    "clockSize": 280,
    "fontSize": 16,
    "slots": [
        {"code": "TYO", "tz": "Asia/Tokyo"},
        {"code": "NYC", "tz": "America/New_York"},
        {"code": "LON", "tz": "Europe/London"},
    ],
    "activeSlot": 0,
}


class ConfigError(Exception):
    pass


class ConfigReadError(ConfigError):
    """Config file missing, unreadable or not a JSON object."""


class ConfigWriteError(ConfigError):
    """First attempt to write the config file failed."""


class ConfigWriteRetryError(ConfigWriteError):
    """Write failed again after recreating the config directory."""


class ConfigState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    DEFAULTED = "defaulted"
    LOADED = "loaded"
    DIRTY = "dirty"


def default_config():
    return copy.deepcopy(DEFAULT_CONFIG)


def _is_slot(slot):
    return (isinstance(slot, dict)
            and isinstance(slot.get("code"), str)
            and isinstance(slot.get("tz"), str))


def _pixel_size(value):
    """Return ``value`` as a positive int, or None when it is not a usable size."""
    # bool is an int subclass, but true/false is never a pixel size
    if isinstance(value, bool):
        return None
    # JSON numbers may come back as floats, e.g. 300.0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return None


def normalize_config(config):
    """Return a fully populated, index-safe copy of ``config``.

    Unknown keys are kept as they are.
    """
    result = copy.deepcopy(config)

    for key in ("clockSize", "fontSize"):
        size = _pixel_size(result.get(key))
        result[key] = size if size is not None else DEFAULT_CONFIG[key]

    slots = result.get("slots")
    if not isinstance(slots, list) or not slots or not all(_is_slot(s) for s in slots):
        result["slots"] = copy.deepcopy(DEFAULT_CONFIG["slots"])

    active = result.get("activeSlot")
    if (not isinstance(active, int) or isinstance(active, bool)
            or not 0 <= active < len(result["slots"])):
        result["activeSlot"] = 0

    return result


class ConfigManager:
    """Owns the clock configuration and the JSON file it is persisted to.

    Failures never leave this class: reads fall back to the defaults and
    writes are retried once after recreating the directory, then abandoned.
    """

    def __init__(self, home=None):
        self.home = Path(home) if home is not None else Path.home()
        self.config_dir = self.home / CONFIG_DIR
        self.config_path = self.config_dir / CONFIG_FILE

        self.state = ConfigState.UNINITIALIZED
        self.last_error = None
        self._apply_hooks = []

        self._config = default_config()
        self.state = ConfigState.DEFAULTED

    def current(self):
        return copy.deepcopy(self._config)

    def add_apply_hook(self, callback):
        self._apply_hooks.append(callback)

    def apply(self):
        for callback in list(self._apply_hooks):
            try:
                callback()
            except Exception:
                logger.exception("Apply hook %r failed", callback)

    def load(self):
        try:
            if not self.config_path.exists():
                logger.info("Creating new config at %s", self.config_path)
                self._make_dir()
                self.save(DEFAULT_CONFIG)
                self._config = default_config()
                self.state = ConfigState.DEFAULTED
            else:
                logger.info("Loading config from %s", self.config_path)
                data = self._read()
                self._config = normalize_config({**DEFAULT_CONFIG, **data})
                self.state = ConfigState.LOADED
        except (ConfigReadError, OSError) as e:
            logger.error("Failed to load config: %s", e)
            self.last_error = e
            self._config = default_config()
            self.state = ConfigState.DEFAULTED

        # The face must render even with a broken config file
        self.apply()
        return self.current()

    def save(self, new_config):
        previous_state = self.state
        self.state = ConfigState.DIRTY
        text = json.dumps(new_config, indent=2)

        try:
            try:
                self._write(text)
            except ConfigWriteError as e:
                logger.warning("Failed to save config, trying to recreate dir... (%s)", e)
                self.last_error = e
                self._retry_write(text)
                logger.info("Config saved successfully after mkdir")
        except ConfigWriteRetryError as e:
            logger.error("Retry save failed: %s", e)
            self.last_error = e
            self.state = previous_state
            return

        self._config = normalize_config(new_config)
        self.state = ConfigState.LOADED

    def select_slot(self, index):
        return self.update(activeSlot=index)

    def assign_city(self, index, city):
        slots = self.current()["slots"]
        slots[index] = {"code": city.code, "tz": city.tz}
        return self.update(slots=slots)

    def update(self, **fields):
        # Show the change right away, persist it afterwards
        staged = normalize_config({**self._config, **fields})
        self._config = staged
        self.apply()
        self.save(staged)
        return self.current()

    def _read(self):
        try:
            content = self.config_path.read_text(encoding="utf-8")
            data = json.loads(content)
        except (OSError, ValueError, RecursionError) as e:
            raise ConfigReadError(f"{self.config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigReadError(f"{self.config_path}: expected a JSON object, got {type(data).__name__}")
        return data

    def _make_dir(self):
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigReadError(f"cannot create {self.config_dir}: {e}") from e

    def _write(self, text):
        try:
            self.config_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(f"{self.config_path}: {e}") from e

    def _retry_write(self, text):
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ConfigWriteRetryError(f"{self.config_path}: {e}") from e
