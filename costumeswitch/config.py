"""
Profile files for CostumeSwitch.

A profile file is JSON:

    {
      "schema_version": 1,
      "profile": { "patternSlots": [...], "attributionVerbs": [...], ... },
      "scan": { "priority_weights": {...}, "scan_dialogue_actions": false }
    }

A file without a "profile" key is read as a bare profile record, so
camelCase configuration records load directly.
"""

import json
import logging
from pathlib import Path

from costumeswitch.models import Profile, ScanConfig

logger = logging.getLogger("costumeswitch.config")

# Profile file schema version for forward compatibility
SCHEMA_VERSION = 1


def load_profile_file(path: str | Path) -> tuple[Profile, ScanConfig]:
    """
    Load a profile and scan configuration from JSON.

    Args:
        path: Path to the profile file

    Returns:
        (Profile, ScanConfig)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file uses a newer schema version
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Profile file must contain a JSON object: {path}")

    schema_version = data.get("schema_version", 1)
    if schema_version > SCHEMA_VERSION:
        raise ValueError(
            f"Profile file uses schema v{schema_version}, "
            f"but this version only supports up to v{SCHEMA_VERSION}"
        )

    config = ScanConfig.from_dict(data.get("scan") or {})
    profile_data = data["profile"] if "profile" in data else data
    profile = Profile.from_dict(profile_data, verb_edition=config.verb_edition)

    logger.info(
        f"Loaded profile from {path.name}: {len(profile.pattern_slots)} slots, "
        f"{len(profile.patterns)} patterns"
    )
    return profile, config


def save_profile_file(
    path: str | Path,
    profile: Profile,
    config: ScanConfig | None = None,
) -> Path:
    """
    Save a profile and scan configuration to JSON.

    Returns:
        Path to saved file
    """
    path = Path(path)
    if config is None:
        config = ScanConfig()

    data = {
        "schema_version": SCHEMA_VERSION,
        "profile": profile.to_dict(),
        "scan": config.to_dict(),
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved profile to {path}")
    return path
