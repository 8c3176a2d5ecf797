from types import SimpleNamespace
from typing import List, Optional

from ppify.calculator import PlayResult
from ppify.ranking import PpGain

NOTES = ["Notes:",
         "- Supported modes: osu, taiko, catch, mania.",
         "- Mods list mirrors osu!lazer's modifiers per mode.",
         "- Lazer-only / fun mods are shown but do not affect PP here.",
         "- Uses classic 0.95^i weighting on your top 100 plays.",
         "- Ignores bonus-PP components."]


def beatmap_title(beatmap: SimpleNamespace) -> str:
    beatmapset = getattr(beatmap, 'beatmapset', None)
    if beatmapset is None:
        return f"[{beatmap.version}]"
    return f"{beatmapset.artist} - {beatmapset.title} [{beatmap.version}]"


def format_play(play: PlayResult, mods: str = "NoMod") -> List[str]:
    """
    Lines describing the play itself. They do not need the osu! api.
    """
    return [f"{play.mode} | {mods} | {play.stars:.2f}* | max combo {play.max_combo}",
            '',
            f"Hypothetical play PP: {play.pp:.2f}pp"]


def format_gain(gain: PpGain, beatmap: Optional[SimpleNamespace] = None) -> List[str]:
    lines = ['']
    if beatmap is not None:
        lines.append(f"Beatmap: {beatmap_title(beatmap)}")
    lines.append(f"Approx. old total PP (recomputed): {gain.old_total:.2f}pp")
    lines.append(f"Approx. new total PP:             {gain.new_total:.2f}pp")
    lines.append(f"Approx. PP gain from this play:   {gain.gain:+.2f}pp")
    if gain.position is None:
        lines.append("This play would not make it into your top 100.")
    else:
        lines.append(f"This play would be your #{gain.position} top play.")
    lines.append('')
    lines.extend(NOTES)
    return lines
