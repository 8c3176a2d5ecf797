from typing import List

import rosu_pp_py as rosu

from ppify.helpers.errors import BadModeError


class GameMode:
    """
    One of the four osu! rulesets, with the names used by the api and by rosu-pp.
    """

    def __init__(self, api_name: str, label: str, description: str, rosu_mode: rosu.GameMode, aliases: tuple):
        self.api_name = api_name
        self.label = label
        self.description = description
        self.rosu_mode = rosu_mode
        self.aliases = aliases

    def __str__(self):
        return self.label

    def __repr__(self):
        return f"GameMode({self.api_name!r})"

    @classmethod
    def all(cls) -> List['GameMode']:
        return [OSU, TAIKO, CATCH, MANIA]

    @classmethod
    def parse(cls, text: str) -> 'GameMode':
        """
        Finds a game mode by api name, label or alias. Case-insensitive.
        :param text: e.g. `osu`, `std`, `ctb`, `osu!mania`, `3`
        :return: The matching game mode.
        """
        key = str(text).strip().lower()
        for mode in cls.all():
            if key in (mode.api_name, mode.label.lower()) or key in mode.aliases:
                return mode
        raise BadModeError(f"Unknown game mode `{text}`. "
                           f"Use one of: {', '.join(m.api_name for m in cls.all())}")


OSU = GameMode('osu', 'osu!standard', 'Circles / sliders / spinners', rosu.GameMode.Osu,
               ('std', 'standard', 'o', '0'))
TAIKO = GameMode('taiko', 'osu!taiko', 'Drum rolls', rosu.GameMode.Taiko,
                 ('t', '1'))
CATCH = GameMode('fruits', 'osu!catch', 'Catching fruits', rosu.GameMode.Catch,
                 ('catch', 'ctb', 'c', 'f', '2'))
MANIA = GameMode('mania', 'osu!mania', 'Key-based', rosu.GameMode.Mania,
                 ('m', '3'))
