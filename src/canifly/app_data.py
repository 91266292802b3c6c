"""Normalization of the backend's application snapshot.

The backend answers ``/api/app-data`` with::

    {
      "LoggedIn": bool,
      "AccountData": {"Accounts": [], "Associations": [], "UserAccount": {}},
      "ConfigData": {"Roles": [], "SettingsDir": str, "LastBackupDir": str, "DropDownSelections": {}},
      "EveData": {"SkillPlans": {}, "EveProfiles": [], "EveConversions": {}}
    }

Every nested field is coerced to a known type; missing or mistyped values fall
back to an empty value and are reported at WARNING.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountData:
    accounts: list = field(default_factory=list)
    associations: list = field(default_factory=list)
    user_account: dict = field(default_factory=dict)


@dataclass(frozen=True)
class ConfigData:
    roles: list = field(default_factory=list)
    drop_down_selections: dict = field(default_factory=dict)
    settings_dir: str = ""
    last_backup_dir: str = ""


@dataclass(frozen=True)
class EveData:
    skill_plans: dict = field(default_factory=dict)
    eve_profiles: list = field(default_factory=list)
    eve_conversions: dict = field(default_factory=dict)


@dataclass(frozen=True)
class AppData:
    logged_in: bool = False
    account_data: AccountData = field(default_factory=AccountData)
    config_data: ConfigData = field(default_factory=ConfigData)
    eve_data: EveData = field(default_factory=EveData)


def _section(payload: dict, key: str) -> dict:
    value = payload.get(key)
    if not isinstance(value, dict):
        logger.warning("normalize_app_data: %s is not an object. Defaulting to empty object.", key)
        return {}
    return value


def _typed(section: dict, path: str, key: str, expected: type, default_factory):
    value = section.get(key)
    if isinstance(value, expected):
        return value
    logger.warning(
        "normalize_app_data: %s.%s is not a %s. Defaulting to %r.",
        path,
        key,
        expected.__name__,
        default_factory(),
    )
    return default_factory()


def normalize_app_data(payload: Any) -> Optional[AppData]:
    """Coerce a raw snapshot into :class:`AppData`; ``None`` when there is no payload."""
    if not payload:
        logger.warning("normalize_app_data: received empty app data from the backend")
        return None
    if not isinstance(payload, dict):
        logger.warning("normalize_app_data: app data is not an object (%s)", type(payload).__name__)
        return None

    logged_in = payload.get("LoggedIn")
    if not isinstance(logged_in, bool):
        logger.warning("normalize_app_data: LoggedIn is not a boolean. Defaulting to False.")
        logged_in = False

    account = _section(payload, "AccountData")
    # UserAccount is optional; only complain when present with the wrong type
    user_account = account.get("UserAccount")
    if not isinstance(user_account, dict):
        if user_account is not None:
            logger.warning("normalize_app_data: AccountData.UserAccount is not an object. Defaulting to {}.")
        user_account = {}

    config = _section(payload, "ConfigData")
    eve = _section(payload, "EveData")

    return AppData(
        logged_in=logged_in,
        account_data=AccountData(
            accounts=_typed(account, "AccountData", "Accounts", list, list),
            associations=_typed(account, "AccountData", "Associations", list, list),
            user_account=user_account,
        ),
        config_data=ConfigData(
            roles=_typed(config, "ConfigData", "Roles", list, list),
            drop_down_selections=_typed(config, "ConfigData", "DropDownSelections", dict, dict),
            settings_dir=_typed(config, "ConfigData", "SettingsDir", str, str),
            last_backup_dir=_typed(config, "ConfigData", "LastBackupDir", str, str),
        ),
        eve_data=EveData(
            skill_plans=_typed(eve, "EveData", "SkillPlans", dict, dict),
            eve_profiles=_typed(eve, "EveData", "EveProfiles", list, list),
            eve_conversions=_typed(eve, "EveData", "EveConversions", dict, dict),
        ),
    )


__all__ = ["AccountData", "AppData", "ConfigData", "EveData", "normalize_app_data"]
