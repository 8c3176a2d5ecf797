import logging
import re
from typing import List, Iterable

from ossapi import Mod

from ppify.game_mode import GameMode, OSU, TAIKO, CATCH, MANIA
from ppify.helpers.errors import BadModsError

logger = logging.getLogger('ppify')

ALL_MODES = (OSU, TAIKO, CATCH, MANIA)


class ModOption:
    """
    A selectable mod. Mods without legacy bits are accepted but do not change the pp.
    """

    def __init__(self, acronym: str, bits: int, description: str, modes: Iterable[GameMode]):
        self.acronym = acronym
        self.bits = bits
        self.description = description
        self.modes = tuple(modes)

    @property
    def affects_pp(self) -> bool:
        return self.bits != 0

    def __str__(self):
        return f"{self.acronym:<4} {self.description} ({', '.join(m.api_name for m in self.modes)})"

    def __repr__(self):
        return f"ModOption({self.acronym!r}, bits={self.bits})"


def _bits(*mods: Mod) -> int:
    value = 0
    for mod in mods:
        value |= mod.value
    return value


# Mirrors the osu!lazer mod list per mode
MODS_LAZER = [
    ModOption("EZ", _bits(Mod.EZ), "Easy", ALL_MODES),
    ModOption("NF", _bits(Mod.NF), "No Fail", ALL_MODES),
    ModOption("HT", _bits(Mod.HT), "Half Time", ALL_MODES),
    ModOption("DC", 0, "Daycore (lazer only, no PP effect here)", ALL_MODES),
    ModOption("NR", 0, "No Release (mania only, no PP effect here)", (MANIA,)),
    ModOption("HR", _bits(Mod.HR), "Hard Rock", ALL_MODES),
    ModOption("SD", _bits(Mod.SD), "Sudden Death", ALL_MODES),
    ModOption("PF", _bits(Mod.SD, Mod.PF), "Perfect (full combo SD)", ALL_MODES),
    ModOption("DT", _bits(Mod.DT), "Double Time", ALL_MODES),
    ModOption("NC", _bits(Mod.DT, Mod.NC), "Nightcore (DT variant)", ALL_MODES),
    ModOption("HD", _bits(Mod.HD), "Hidden", ALL_MODES),
    ModOption("FI", 0, "Fade In (mania only in stable)", (MANIA,)),
    ModOption("CO", 0, "Cover (lazer only, no PP effect here)", ALL_MODES),
    ModOption("FL", _bits(Mod.FL), "Flashlight", (OSU, CATCH, MANIA)),
    ModOption("BL", 0, "Blinds (lazer fun mod, no PP effect here)", (OSU, CATCH, MANIA)),
    ModOption("ST", 0, "Strict Tracking (taiko only, no PP effect here)", (TAIKO,)),
    ModOption("AC", 0, "Accuracy Challenge (lazer only, no PP effect here)", ALL_MODES),
    ModOption("AT", _bits(Mod.AT), "Autoplay (no PP)", ALL_MODES),
    ModOption("AP", _bits(Mod.AP), "AutoPilot (osu!, no PP)", (OSU,)),
    ModOption("CN", 0, "Cinema (no PP)", (OSU, CATCH)),
    ModOption("RL", 0, "Relax (no PP)", (OSU, CATCH)),
    ModOption("RX", 0, "Classic Relax acronym (no PP)", (OSU, CATCH)),
    ModOption("TD", 0, "Target Practice / Touch Device (no PP)", (OSU,)),
    ModOption("SO", _bits(Mod.SO), "Spun Out (osu! only)", (OSU,)),
    ModOption("DA", 0, "Difficulty Adjust (lazer only, no PP here)", ALL_MODES),
    ModOption("TC", 0, "Traceable (lazer only)", (OSU,)),
    ModOption("WI", 0, "Wiggle (lazer only)", (OSU,)),
    ModOption("CL", 0, "Classic (lazer: emulate stable quirks)", (OSU, TAIKO)),
    ModOption("RD", 0, "Random (mania only, no PP)", (MANIA,)),
    ModOption("MR", 0, "Mirror (mania only, no PP)", (MANIA,)),
    ModOption("ATC", 0, "Adaptive Speed / Challenge (lazer system, no PP)", ALL_MODES),
    ModOption("1K", 0, "1 key (mania only, no legacy bit)", (MANIA,)),
    ModOption("2K", 0, "2 keys", (MANIA,)),
    ModOption("3K", 0, "3 keys", (MANIA,)),
    ModOption("4K", _bits(Mod.K4), "4 keys", (MANIA,)),
    ModOption("5K", _bits(Mod.K5), "5 keys", (MANIA,)),
    ModOption("6K", _bits(Mod.K6), "6 keys", (MANIA,)),
    ModOption("7K", _bits(Mod.K7), "7 keys", (MANIA,)),
    ModOption("8K", _bits(Mod.K8), "8 keys", (MANIA,)),
    ModOption("9K", _bits(Mod.K9), "9 keys", (MANIA,)),
]

NO_MOD_WORDS = ('', 'NM', 'NOMOD')


def mods_for_mode(mode: GameMode) -> List[ModOption]:
    """
    Mods that can be selected in the given game mode, in table order.
    """
    return [m for m in MODS_LAZER if mode in m.modes]


def parse_mods(text: str, mode: GameMode) -> List[ModOption]:
    """
    Parses a mod string like `+HDDT`, `hd,dt` or `HD DT 7K`.
    :param text: Mod acronyms, separated or concatenated.
    :param mode: Game mode the mods are used in.
    :return: Selected mods, without duplicates, in the order they were given.
    """
    if text is None:
        return []

    cleaned = text.strip().upper().lstrip('+')
    if cleaned in NO_MOD_WORDS:
        return []

    available = {m.acronym: m for m in mods_for_mode(mode)}
    known = {m.acronym for m in MODS_LAZER}
    acronyms = sorted(known, key=len, reverse=True)

    selected = []
    for token in re.split(r'[\s,+]+', cleaned):
        while token:
            acronym = next((a for a in acronyms if token.startswith(a)), None)
            if acronym is None:
                raise BadModsError(f"Unknown mod `{token}`")
            if acronym not in available:
                raise BadModsError(f"`{acronym}` is not available in {mode}")

            mod = available[acronym]
            if mod not in selected:
                selected.append(mod)
            token = token[len(acronym):]

    for mod in selected:
        if not mod.affects_pp:
            logger.info(f"{mod.acronym} is selected but does not affect PP")
    return selected


def mod_bits(selection: Iterable[ModOption]) -> int:
    bits = 0
    for mod in selection:
        bits |= mod.bits
    return bits


def mods_to_string(selection: Iterable[ModOption]) -> str:
    acronyms = ''.join(m.acronym for m in selection)
    return f"+{acronyms}" if acronyms else "NoMod"
