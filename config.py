import os
import configparser
from dataclasses import dataclass
from typing import Optional

from constants import *


class GlobalConfig:
    def __init__(self):
        self.DefaultPageSize = default_page_size
        self.DefaultOrientation = default_orientation
        self.DefaultBorder = default_border
        self.OutputDir = ""
        self.DeckRoot = ""


def load_config(cfg_path=None) -> GlobalConfig:
    if cfg_path is None:
        cfg_path = os.path.join(cwd, "config.ini")

    config_parser = configparser.ConfigParser()
    config_parser.read(cfg_path)

    def_cfg = config_parser["DEFAULT"]
    parsed_config = GlobalConfig()
    parsed_config.DefaultPageSize = def_cfg.get("Page.Size", default_page_size)
    parsed_config.DefaultOrientation = def_cfg.get(
        "Page.Orientation", default_orientation
    )
    parsed_config.DefaultBorder = def_cfg.get("Border.Default", default_border)
    parsed_config.OutputDir = def_cfg.get("Output.Dir", "")
    parsed_config.DeckRoot = def_cfg.get("Deck.Root", "")

    return parsed_config


@dataclass(frozen=True)
class PrintConfig:
    """Everything one run needs, built once from the command line."""

    deck: Optional[str]
    dir: str = ""
    file: Optional[str] = None
    deck_root: str = ""
    page_size: str = default_page_size
    orientation: str = default_orientation
    dups: int = 1
    rows: Optional[int] = None
    cols: Optional[int] = None
    width: Optional[str] = None
    height: Optional[str] = None
    left_border: Optional[str] = None
    bottom_border: Optional[str] = None
    h_gap: Optional[str] = None
    v_gap: Optional[str] = None
    default_border: str = default_border
    verbose: bool = False
