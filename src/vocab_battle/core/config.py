"""Configuration management for the vocab battle engine.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file. The engine itself never reads settings implicitly.
Callers build a ``BattleEngine`` from them, or pass explicit values in tests.

Example:
    >>> from vocab_battle.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.battle.player_max_hp
    50

Environment Variables:
    VOCAB_BATTLE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    VOCAB_BATTLE_LOG_JSON: Emit JSON logs
    VOCAB_BATTLE_DEBUG: Log at DEBUG level
    VOCAB_BATTLE_BATTLE_DEFAULT_DIFFICULTY: Difficulty used when none is given
    VOCAB_BATTLE_BATTLE_PLAYER_MAX_HP: Player maximum HP
    VOCAB_BATTLE_BATTLE_INTRO_DELAY_SEC: Intro phase duration
    VOCAB_BATTLE_DAMAGE_BASE_DAMAGE: Damage dealt by any correct answer
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vocab_battle.core import constants
from vocab_battle.core.exceptions import ConfigurationError


if TYPE_CHECKING:
    from vocab_battle.models.battle import DamageRules


class BattleSettings(BaseSettings):
    """Configuration for battle pacing and health.

    Attributes:
        default_difficulty: Difficulty used when a battle starts without one.
        player_max_hp: Player maximum HP.
        intro_delay_sec: Duration of the intro phase.
        judge_delay_sec: Duration of the judge phase.
        hp_delay_sec: Duration of the hp phase.
    """

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_BATTLE_BATTLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_difficulty: int = Field(
        default=constants.DEFAULT_DIFFICULTY,
        ge=constants.MIN_DIFFICULTY,
        le=constants.MAX_DIFFICULTY,
        description="Difficulty used when none is given",
    )
    player_max_hp: int = Field(
        default=constants.PLAYER_MAX_HP,
        ge=1,
        le=999,
        description="Player maximum HP",
    )
    intro_delay_sec: float = Field(
        default=constants.INTRO_DELAY_SEC,
        ge=0,
        le=10,
        description="Intro phase duration",
    )
    judge_delay_sec: float = Field(
        default=constants.JUDGE_DELAY_SEC,
        ge=0,
        le=10,
        description="Judge phase duration",
    )
    hp_delay_sec: float = Field(
        default=constants.HP_DELAY_SEC,
        ge=0,
        le=10,
        description="HP phase duration",
    )


class DamageSettings(BaseSettings):
    """Configuration for damage weights.

    Attributes:
        base_damage: Damage dealt by any correct answer.
        speed_bonus_per_sec: Bonus per whole second left on the clock.
        speed_bonus_max: Ceiling on the speed bonus.
        combo_bonus_per_streak: Bonus per consecutive correct answer after the first.
        combo_bonus_max: Ceiling on the combo bonus.
    """

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_BATTLE_DAMAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_damage: int = Field(default=10, ge=1, le=100, description="Base damage")
    speed_bonus_per_sec: float = Field(
        default=1.0,
        ge=0,
        le=10,
        description="Speed bonus per remaining second",
    )
    speed_bonus_max: int = Field(default=10, ge=0, le=100, description="Speed bonus cap")
    combo_bonus_per_streak: int = Field(
        default=2,
        ge=0,
        le=20,
        description="Combo bonus per streak step",
    )
    combo_bonus_max: int = Field(default=10, ge=0, le=100, description="Combo bonus cap")

    @model_validator(mode="after")
    def validate_bonus_caps(self) -> "DamageSettings":
        """Ensure a bonus with a positive rate also has a positive cap.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If a rate is set but its cap is zero.
        """
        if self.speed_bonus_per_sec > 0 and self.speed_bonus_max == 0:
            raise ConfigurationError(
                "speed_bonus_per_sec is set but speed_bonus_max is 0",
                config_key="speed_bonus_max",
            )
        if self.combo_bonus_per_streak > 0 and self.combo_bonus_max == 0:
            raise ConfigurationError(
                "combo_bonus_per_streak is set but combo_bonus_max is 0",
                config_key="combo_bonus_max",
            )
        return self

    def to_rules(self) -> DamageRules:
        """Build the immutable rules object consumed by ``calc_damage``.

        Returns:
            DamageRules carrying these settings.
        """
        from vocab_battle.models.battle import DamageRules

        return DamageRules(
            base_damage=self.base_damage,
            speed_bonus_per_sec=self.speed_bonus_per_sec,
            speed_bonus_max=self.speed_bonus_max,
            combo_bonus_per_streak=self.combo_bonus_per_streak,
            combo_bonus_max=self.combo_bonus_max,
        )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        debug: Enable debug mode, which logs at DEBUG whatever ``log_level`` says.
        log_level: Application logging level.
        log_json: Emit JSON logs instead of console output.
        battle: Battle pacing settings.
        damage: Damage weight settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="VOCAB_BATTLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(default=False, description="Emit JSON logs")

    battle: BattleSettings = Field(default_factory=BattleSettings)
    damage: DamageSettings = Field(default_factory=DamageSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "BattleSettings",
    "DamageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
