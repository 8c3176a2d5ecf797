import logging

import rosu_pp_py as rosu

from ppify.game_mode import GameMode
from ppify.helpers.errors import BeatmapParseError, SuspiciousBeatmapError
from ppify.judgements import ScoreDescription

logger = logging.getLogger('ppify')


class PlayResult:

    def __init__(self, pp: float, stars: float, max_combo: int, mode: GameMode):
        self.pp = pp
        self.stars = stars
        self.max_combo = max_combo
        self.mode = mode

    def __repr__(self):
        return f"PlayResult(pp={self.pp:.2f}, stars={self.stars:.2f}, max_combo={self.max_combo})"


def load_beatmap(data: bytes) -> rosu.Beatmap:
    """
    Parses the contents of a .osu file and refuses maps that would make the calculation explode.
    :param data: Raw .osu file.
    :return: rosu-pp beatmap
    """
    try:
        beatmap = rosu.Beatmap(bytes=data)
    except Exception as e:
        raise BeatmapParseError(f"failed to parse .osu file: {e}") from e

    if beatmap.is_suspicious():
        raise SuspiciousBeatmapError("beatmap is suspicious, refusing to calculate it")

    return beatmap


def convert_or_ignore(beatmap: rosu.Beatmap, mode: GameMode, mods: int) -> GameMode:
    """
    Converts osu!standard maps to the requested mode. Maps of any other mode keep their own mode.
    :return: The mode the beatmap will be calculated in.
    """
    if beatmap.mode == mode.rosu_mode:
        return mode

    if beatmap.mode == rosu.GameMode.Osu:
        logger.debug(f"Converting beatmap to {mode}")
        beatmap.convert(mode.rosu_mode, mods)
        return mode

    native_mode = next(m for m in GameMode.all() if m.rosu_mode == beatmap.mode)
    logger.warning(f"Beatmap is a {native_mode} map and cannot be converted to {mode}, "
                   f"calculating it as {native_mode}")
    return native_mode


def calculate_play(beatmap: rosu.Beatmap, mode: GameMode, mods: int, score: ScoreDescription,
                   lazer: bool = True) -> PlayResult:
    """
    Calculates the pp of a hypothetical play.
    :param beatmap: Parsed beatmap, see load_beatmap.
    :param mode: Requested game mode.
    :param mods: Legacy mod bits.
    :param score: Accuracy or judgement counts of the play.
    :param lazer: Whether the play is a lazer play (True) or a stable play (False).
    """
    played_mode = convert_or_ignore(beatmap, mode, mods)

    kwargs = score.performance_kwargs()
    logger.debug(f"Calculating {played_mode} play with mods {mods} and {kwargs}")
    performance = rosu.Performance(mods=mods, lazer=lazer, **kwargs)
    attributes = performance.calculate(beatmap)

    return PlayResult(pp=attributes.pp,
                      stars=attributes.difficulty.stars,
                      max_combo=attributes.difficulty.max_combo,
                      mode=played_mode)
