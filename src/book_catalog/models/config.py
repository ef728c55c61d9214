"""Configuration model for book catalog."""

import json
import logging
from dataclasses import dataclass, field
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, InvalidOperation
from pathlib import Path
from typing import Optional, Tuple, Union, get_args, get_origin

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


@dataclass
class SampleConfig:
    """Configuration for generated sample books."""
    count: int = 5
    seed: Optional[int] = None
    min_price: Decimal = Decimal("1.00")
    max_price: Decimal = Decimal("99.99")
    locale: str = "en_US"  # Faker locale used for titles and authors

    def cent_range(self) -> Tuple[int, int]:
        """Get the whole-cent bounds of the price range, as integer cents."""
        low = int((self.min_price / CENT).to_integral_value(rounding=ROUND_CEILING))
        high = int((self.max_price / CENT).to_integral_value(rounding=ROUND_FLOOR))
        return low, high


@dataclass
class DisplayConfig:
    """Configuration for console output."""
    show_table: bool = True
    max_rows: int = 50


@dataclass
class Config:
    """Main configuration model."""
    sample: SampleConfig = field(default_factory=SampleConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def default(cls) -> "Config":
        """Create a default configuration."""
        return cls()

    def validate(self) -> None:
        """Check value ranges, raising ConfigurationError on the first problem."""
        for name in ("min_price", "max_price"):
            value = getattr(self.sample, name)
            if not value.is_finite():
                raise ConfigurationError(f"sample.{name} must be a finite decimal, got {value}")
        if self.sample.count < 0:
            raise ConfigurationError(f"sample.count must be >= 0, got {self.sample.count}")
        if self.sample.min_price < 0:
            raise ConfigurationError(f"sample.min_price must be >= 0, got {self.sample.min_price}")
        if self.sample.min_price > self.sample.max_price:
            raise ConfigurationError(
                f"sample.min_price ({self.sample.min_price}) is greater than "
                f"sample.max_price ({self.sample.max_price})"
            )
        low, high = self.sample.cent_range()
        if low > high:
            raise ConfigurationError(
                f"sample price range {self.sample.min_price}..{self.sample.max_price} "
                f"contains no whole cent"
            )
        if self.display.max_rows < 1:
            raise ConfigurationError(f"display.max_rows must be >= 1, got {self.display.max_rows}")


def _dataclass_to_dict(obj):
    """Convert dataclass to dict recursively."""
    from dataclasses import is_dataclass, asdict
    if is_dataclass(obj):
        result = {}
        for key, value in asdict(obj).items():
            result[key] = _dataclass_to_dict(value)
        return result
    elif isinstance(obj, Decimal):
        return str(obj)
    elif isinstance(obj, dict):
        return {key: _dataclass_to_dict(value) for key, value in obj.items()}
    else:
        return obj


def _check_scalar(field_name, value, field_type):
    """Raise ConfigurationError unless value matches a plain or Optional field type."""
    if get_origin(field_type) is Union:
        args = get_args(field_type)
        if value is None and type(None) in args:
            return
        field_type = next(arg for arg in args if arg is not type(None))

    if field_type is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, field_type)

    if not valid:
        raise ConfigurationError(
            f"{field_name} must be {field_type.__name__}, got {type(value).__name__}: {value!r}"
        )


def _dict_to_dataclass(data, dataclass_type):
    """Convert dict to dataclass recursively."""
    from dataclasses import is_dataclass, fields
    if not is_dataclass(dataclass_type):
        return data
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected an object for {dataclass_type.__name__}, got {type(data).__name__}"
        )

    field_types = {f.name: f.type for f in fields(dataclass_type)}

    kwargs = {}
    for field_name, field_type in field_types.items():
        if field_name in data:
            if hasattr(field_type, '__dataclass_fields__'):
                kwargs[field_name] = _dict_to_dataclass(data[field_name], field_type)
            elif field_type is Decimal:
                try:
                    kwargs[field_name] = Decimal(str(data[field_name]))
                except InvalidOperation:
                    raise ConfigurationError(
                        f"{field_name} is not a valid decimal: {data[field_name]!r}"
                    )
            else:
                _check_scalar(field_name, data[field_name], field_type)
                kwargs[field_name] = data[field_name]

    unknown = set(data) - set(field_types)
    if unknown:
        logger.debug("Ignoring unknown %s keys: %s", dataclass_type.__name__, sorted(unknown))

    return dataclass_type(**kwargs)


def load_config(config_path: Path) -> Config:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r') as f:
            config_data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Config file {config_path} is not valid JSON: {e}") from e

    config = _dict_to_dataclass(config_data, Config)
    config.validate()
    logger.info("Loaded configuration from %s", config_path)
    return config


def save_config(config: Config, config_path: Path) -> None:
    """Save configuration to JSON file."""
    config_dict = _dataclass_to_dict(config)

    with open(config_path, 'w') as f:
        json.dump(config_dict, f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(Config.default(), config_path)
