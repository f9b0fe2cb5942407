"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.abbreviations import DEFAULT_ABBREVIATIONS, AbbreviationResolver, DstPolicy
from .domain.civil_time import load_zone
from .domain.exceptions import UnknownZone
from .domain.models import AbbreviationEntry, Participant
from .domain.validation import is_valid_date_shape, is_valid_time_shape


def _check_zone(value: str) -> str:
    try:
        load_zone(value)
    except UnknownZone as exc:
        raise ValueError(str(exc)) from exc
    return value


class City(BaseModel):
    """A named city and the IANA zone it lives in."""
    label: str
    zone: str
    aliases: List[str] = Field(default_factory=list)

    @field_validator("zone")
    @classmethod
    def validate_zone(cls, value: str) -> str:
        """Ensure the zone is known to the tz database."""
        return _check_zone(value)

    def names(self) -> List[str]:
        """Label and aliases, lowercased for matching."""
        return [name.lower() for name in [self.label, *self.aliases]]

    def to_participant(self) -> Participant:
        return Participant(label=self.label, zone=self.zone)


DEFAULT_CITIES: List[Dict[str, object]] = [
    {"label": "Tokyo", "zone": "Asia/Tokyo"},
    {"label": "New York", "zone": "America/New_York", "aliases": ["NYC"]},
    {"label": "London", "zone": "Europe/London"},
    {"label": "Paris", "zone": "Europe/Paris"},
    {"label": "Berlin", "zone": "Europe/Berlin"},
    {"label": "Singapore", "zone": "Asia/Singapore"},
    {"label": "Sydney", "zone": "Australia/Sydney"},
    {"label": "Seoul", "zone": "Asia/Seoul"},
    {"label": "Los Angeles", "zone": "America/Los_Angeles", "aliases": ["LA"]},
    {"label": "San Francisco", "zone": "America/Los_Angeles", "aliases": ["SF"]},
    {"label": "Chicago", "zone": "America/Chicago"},
    {"label": "Toronto", "zone": "America/Toronto"},
    {"label": "Vancouver", "zone": "America/Vancouver"},
    {"label": "Bangalore", "zone": "Asia/Kolkata", "aliases": ["Bengaluru"]},
    {"label": "Delhi", "zone": "Asia/Kolkata"},
    {"label": "Dubai", "zone": "Asia/Dubai"},
    {"label": "Hong Kong", "zone": "Asia/Hong_Kong"},
    {"label": "Taipei", "zone": "Asia/Taipei"},
    {"label": "Shanghai", "zone": "Asia/Shanghai"},
]


class CandidateConfig(BaseModel):
    """One proposed slot as written in the config file."""
    date: str
    start: str
    end: str

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        """Validate the yyyy-MM-dd shape."""
        if not is_valid_date_shape(value):
            raise ValueError(f"date must be in yyyy-MM-dd format, got '{value}'")
        return value

    @field_validator("start", "end")
    @classmethod
    def validate_time(cls, value: str) -> str:
        """Validate the HH:mm shape."""
        if not is_valid_time_shape(value):
            raise ValueError(f"time must be in HH:mm format, got '{value}'")
        return value

    def as_tuple(self) -> tuple:
        return (self.date, self.start, self.end)


class AbbreviationConfig(BaseModel):
    """Curated label override for a zone."""
    standard: str
    daylight: Optional[str] = None


class AppConfig(BaseModel):
    """Application configuration."""
    base_city: str = "New York"
    use_24h: bool = False
    participants: List[str] = Field(default_factory=lambda: ["Tokyo"])
    candidates: List[CandidateConfig] = Field(default_factory=list)
    cities: List[City] = Field(default_factory=lambda: [City(**city) for city in DEFAULT_CITIES])
    abbreviations: Dict[str, AbbreviationConfig] = Field(default_factory=dict)
    dst_policy: DstPolicy = DstPolicy.DATABASE

    @field_validator("cities")
    @classmethod
    def validate_cities(cls, value: List[City]) -> List[City]:
        """Ensure city labels and aliases are unique."""
        seen: set[str] = set()
        for city in value:
            for name in city.names():
                if name in seen:
                    raise ValueError(f"Duplicate city name detected: {name}")
                seen.add(name)
        return value

    @field_validator("abbreviations")
    @classmethod
    def validate_abbreviations(cls, value: Dict[str, AbbreviationConfig]) -> Dict[str, AbbreviationConfig]:
        """Ensure overridden zones exist."""
        for zone in value:
            _check_zone(zone)
        return value

    @model_validator(mode="after")
    def validate_base_city(self) -> "AppConfig":
        """Ensure the base city can be found."""
        if self.find_city(self.base_city) is None:
            raise ValueError(f"base_city '{self.base_city}' is not a configured city")
        return self

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def find_city(self, name: str) -> City | None:
        """Find a city by its label or an alias (case-insensitive)."""
        key = name.strip().lower()
        for city in self.cities:
            if key in city.names():
                return city
        return None

    def get_base_city(self) -> City:
        """Get the configured base city."""
        city = self.find_city(self.base_city)
        if city is None:
            raise ValueError(f"Unknown city: '{self.base_city}'")
        return city

    def resolve_participant(self, identifier: str) -> Participant:
        """
        Resolve a participant identifier (city label/alias or IANA zone).

        Args:
            identifier: City name, or an identifier containing "/"

        Returns:
            Participant

        Raises:
            ValueError: If identifier cannot be resolved
        """
        # Looks like an IANA id, use it as its own label
        if "/" in identifier:
            return Participant(label=identifier, zone=identifier)

        city = self.find_city(identifier)
        if city:
            return city.to_participant()

        raise ValueError(
            f"Unknown city: '{identifier}'. "
            f"Use a configured city name or an IANA timezone such as Asia/Singapore."
        )

    def resolve_participants(self, identifiers: List[str]) -> List[Participant]:
        """
        Resolve multiple participant identifiers, reporting all unknown ones.
        """
        resolved: List[Participant] = []
        unknown_identifiers: List[str] = []

        for identifier in identifiers:
            try:
                resolved.append(self.resolve_participant(identifier))
            except ValueError:
                unknown_identifiers.append(identifier)

        if unknown_identifiers:
            missing = ", ".join(unknown_identifiers)
            raise ValueError(
                f"Unknown city name(s): {missing}. "
                "Ensure they exist in the configuration or provide IANA timezones."
            )

        return resolved

    def build_abbreviation_resolver(self) -> AbbreviationResolver:
        """Merge configured overrides over the default table."""
        table = dict(DEFAULT_ABBREVIATIONS)
        for zone, entry in self.abbreviations.items():
            table[zone] = AbbreviationEntry(standard=entry.standard, daylight=entry.daylight)
        return AbbreviationResolver(table=table, dst_policy=self.dst_policy)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the config file, or fall back to defaults when none exists.

    An explicitly given path must exist.
    """
    if config_path is not None:
        return AppConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return AppConfig.load_from_yaml(default_path)
    return AppConfig()
