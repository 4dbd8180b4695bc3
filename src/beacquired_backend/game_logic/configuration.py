"""Board configuration objects and the fixed game constants."""

from __future__ import annotations

from functools import cache

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from beacquired_backend.shared.value_objects import CompanyColor

BOARD_ROWS = 9
BOARD_COLUMNS = 12
MAX_ACTIVE_COMPANIES = 7
HAND_SIZE = 6
MIN_PLAYERS = 2
MAX_PLAYERS = 6


class CompanySpec(BaseModel):
    """Name and display color of one company identity in the pool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    color: CompanyColor


DEFAULT_COMPANY_POOL: tuple[CompanySpec, ...] = (
    CompanySpec(name="Red", color=CompanyColor.RED),
    CompanySpec(name="Yellow", color=CompanyColor.YELLOW),
    CompanySpec(name="Green", color=CompanyColor.GREEN),
    CompanySpec(name="Blue", color=CompanyColor.BLUE),
    CompanySpec(name="Orange", color=CompanyColor.ORANGE),
    CompanySpec(name="Purple", color=CompanyColor.PURPLE),
    CompanySpec(name="Cyan", color=CompanyColor.CYAN),
)


class BoardDefaults(BaseSettings):
    """Load default board parameters from the environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BEACQUIRED_BOARD_",
        extra="ignore",
    )

    rows: int = Field(default=BOARD_ROWS, ge=1, le=26)
    columns: int = Field(default=BOARD_COLUMNS, ge=1)
    max_active_companies: int = Field(default=MAX_ACTIVE_COMPANIES, ge=1)
    hand_size: int = Field(default=HAND_SIZE, ge=1)

    def to_config(self) -> BoardConfiguration:
        """Convert defaults into an immutable configuration object."""
        return BoardConfiguration(
            rows=self.rows,
            columns=self.columns,
            max_active_companies=self.max_active_companies,
            hand_size=self.hand_size,
        )


class SessionOverrides(BaseModel):
    """Optional session-specific overrides for board settings."""

    model_config = ConfigDict(frozen=True)

    max_active_companies: int | None = Field(default=None, ge=1)
    hand_size: int | None = Field(default=None, ge=1)

    def apply(self, config: BoardConfiguration) -> BoardConfiguration:
        """Return a copy of *config* with overrides applied."""
        update: dict[str, int] = {}
        if self.max_active_companies is not None:
            update["max_active_companies"] = self.max_active_companies
        if self.hand_size is not None:
            update["hand_size"] = self.hand_size
        if not update:
            return config
        # model_copy would skip the pool validator.
        return BoardConfiguration(**(config.model_dump() | update))


class BoardConfiguration(BaseModel):
    """Immutable representation of the board parameters for a session."""

    model_config = ConfigDict(frozen=True)

    rows: int = Field(default=BOARD_ROWS, ge=1, le=26)
    columns: int = Field(default=BOARD_COLUMNS, ge=1)
    max_active_companies: int = Field(default=MAX_ACTIVE_COMPANIES, ge=1)
    hand_size: int = Field(default=HAND_SIZE, ge=1)
    company_pool: tuple[CompanySpec, ...] = DEFAULT_COMPANY_POOL

    @model_validator(mode="after")
    def _validate_pool(self) -> BoardConfiguration:
        """Ensure the pool can supply every company the cap allows."""
        names = [spec.name for spec in self.company_pool]
        if len(names) != len(set(names)):
            msg = "Company pool must not contain duplicate names."
            raise ValueError(msg)
        if self.max_active_companies > len(self.company_pool):
            msg = (
                "max_active_companies exceeds the company pool size: "
                f"{self.max_active_companies} > {len(self.company_pool)}."
            )
            raise ValueError(msg)
        return self

    @property
    def cell_count(self) -> int:
        """Return the number of cells on the board."""
        return self.rows * self.columns

    def for_session(
        self, overrides: SessionOverrides | None = None
    ) -> BoardConfiguration:
        """Create a session-specific configuration by applying overrides if provided."""
        if overrides is None:
            return self
        return overrides.apply(self)


@cache
def get_default_board_configuration() -> BoardConfiguration:
    """Return the cached default board configuration."""
    return BoardDefaults().to_config()


def build_session_configuration(
    overrides: SessionOverrides | None = None,
) -> BoardConfiguration:
    """Construct a configuration for a session, applying optional overrides."""
    return get_default_board_configuration().for_session(overrides)


__all__ = [
    "BOARD_COLUMNS",
    "BOARD_ROWS",
    "DEFAULT_COMPANY_POOL",
    "HAND_SIZE",
    "MAX_ACTIVE_COMPANIES",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "BoardConfiguration",
    "BoardDefaults",
    "CompanySpec",
    "SessionOverrides",
    "build_session_configuration",
    "get_default_board_configuration",
]
