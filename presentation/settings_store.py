import configparser
from pathlib import Path
from typing import Optional

from loguru import logger

from engine.actions import NewGame
from engine.constants import DIFFICULTY_ORDER

SETTINGS_PATH = Path(__file__).with_name("settings.ini")
SECTION = "game"

DEFAULT_SETTINGS = {
    "difficulty": "4",
    "seed": "",
}


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})

    try:
        difficulty = int(str(data["difficulty"]).strip())
    except ValueError:
        difficulty = int(DEFAULT_SETTINGS["difficulty"])
    if difficulty not in DIFFICULTY_ORDER:
        difficulty = int(DEFAULT_SETTINGS["difficulty"])
    data["difficulty"] = str(difficulty)

    raw_seed = "" if data["seed"] is None else str(data["seed"]).strip()
    if raw_seed:
        try:
            raw_seed = str(int(raw_seed))
        except ValueError:
            raw_seed = DEFAULT_SETTINGS["seed"]
    data["seed"] = raw_seed
    return data


def load_settings(path: Optional[Path] = None):
    path = path if path is not None else SETTINGS_PATH
    if not path.exists():
        return dict(DEFAULT_SETTINGS)
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as e:
        logger.warning("Unreadable settings file {}: {}", path, e)
        return dict(DEFAULT_SETTINGS)
    if SECTION not in parser:
        return dict(DEFAULT_SETTINGS)
    raw = {key: parser[SECTION].get(key, default) for key, default in DEFAULT_SETTINGS.items()}
    return _sanitize(raw)


def save_settings(settings, path: Optional[Path] = None):
    path = path if path is not None else SETTINGS_PATH
    parser = configparser.ConfigParser()
    parser[SECTION] = _sanitize(settings)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        parser.write(f)


def new_game_action(settings) -> NewGame:
    data = _sanitize(settings)
    seed = int(data["seed"]) if data["seed"] else None
    return NewGame(difficulty=int(data["difficulty"]), seed=seed)
