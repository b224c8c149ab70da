"""ShipEngine-klient — kommandorad.

Kan köras som:
    python -m shipengine.main carriers
    python -m shipengine.main track <label_id>
    python -m shipengine.main track <carrier_code> <tracking_number>
    python -m shipengine.main shipment <shipment_id>
    python -m shipengine.main void <label_id>

Konfiguration läses från SHIPENGINE_CONFIG (YAML), config/config.yaml
eller, om ingen fil finns, från miljövariabeln SHIPENGINE_API_KEY.
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path

import requests
import yaml

from .config import ShipEngineConfig, config_from_file, load_config
from .errors import ShipEngineAPIError, ShipEngineConfigError, ShipEngineError
from .shipengine import ShipEngine

logger = logging.getLogger(__name__)

USAGE = __doc__

DEFAULT_CONFIG_PATH = Path("config") / "config.yaml"


class UsageError(Exception):
    """Felaktiga argument på kommandoraden."""


def _config_path() -> Path:
    return Path(os.environ.get("SHIPENGINE_CONFIG", DEFAULT_CONFIG_PATH))


def _load_config() -> ShipEngineConfig:
    """Laddar YAML-konfiguration, annars API-nyckel från miljön."""
    config_path = _config_path()
    if config_path.exists():
        return config_from_file(config_path)

    api_key = os.environ.get("SHIPENGINE_API_KEY", "")
    if not api_key:
        raise ShipEngineConfigError(
            f"Hittar varken {config_path} eller SHIPENGINE_API_KEY"
        )
    return ShipEngineConfig.from_api_key(api_key)


def _setup_logging(log_config: dict):
    """Konfigurerar loggning; loggfil endast om log_dir är angiven."""
    level = getattr(logging, log_config.get("level", "WARNING").upper())

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(level)

    log_dir = log_config.get("log_dir")
    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "shipengine.log",
            maxBytes=log_config.get("max_file_size_mb", 10) * 1024 * 1024,
            backupCount=log_config.get("backup_count", 5),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if log_config.get("console_output", True):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        root.addHandler(console)


def _logging_section() -> dict:
    config_path = _config_path()
    if not config_path.exists():
        return {}
    data = load_config(config_path)
    if not isinstance(data, dict):
        raise ShipEngineConfigError(f"{config_path} måste innehålla en YAML-mappning")
    section = data.get("logging") or {}
    if not isinstance(section, dict):
        raise ShipEngineConfigError(f"Sektionen 'logging' i {config_path} måste vara en mappning")
    return section


def run(args: list, client: ShipEngine) -> object:
    """Kör ett kommando och returnerar API-svaret."""
    command, rest = args[0], args[1:]

    if command == "carriers" and not rest:
        return client.list_carriers()
    if command == "track" and len(rest) == 1:
        return client.track_using_label_id(rest[0])
    if command == "track" and len(rest) == 2:
        return client.track_using_carrier_code_and_tracking_number(rest[0], rest[1])
    if command == "shipment" and len(rest) == 1:
        return client.get_shipment_by_id(rest[0], {"as_object": False})
    if command == "void" and len(rest) == 1:
        return client.void_label_with_label_id(rest[0])

    raise UsageError(f"Okänt kommando: {' '.join(args)}")


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if not args or args[0] in ("-h", "--help", "help"):
        print(USAGE)
        return 0 if args else 2

    try:
        _setup_logging(_logging_section())
        client = ShipEngine(_load_config())
        result = run(args, client)
    except (ShipEngineConfigError, UsageError, yaml.YAMLError) as e:
        print(f"Fel: {e}", file=sys.stderr)
        return 2
    except ShipEngineAPIError as e:
        logger.error(f"API-fel: {e}")
        print(json.dumps(e.body, indent=2, ensure_ascii=False), file=sys.stderr)
        return 1
    except (ShipEngineError, requests.RequestException) as e:
        logger.error(f"Anropet misslyckades: {e}", exc_info=True)
        print(f"Fel: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
