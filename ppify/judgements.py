from typing import Optional, Dict

from ppify.game_mode import GameMode, OSU, TAIKO, CATCH, MANIA
from ppify.helpers.errors import BadNumberError
from ppify.helpers.parser import MAX_UINT

# Judgement fields asked for in each mode, with the prompt label and placeholder
DETAILED_FIELDS = {
    OSU.api_name: [("n300", "Number of 300s", "e.g. 1000"),
                   ("n100", "Number of 100s", "e.g. 10"),
                   ("n50", "Number of 50s", "e.g. 0"),
                   ("misses", "Number of misses", "e.g. 1")],
    TAIKO.api_name: [("n300", "Number of GREATs (300)", "e.g. 1000"),
                     ("n100", "Number of GOODs (100)", "e.g. 10"),
                     ("misses", "Number of misses", "e.g. 1")],
    CATCH.api_name: [("fruits", "Fruits caught", "e.g. 500"),
                     ("droplets", "Droplets caught", "e.g. 100"),
                     ("tiny_droplets", "Tiny droplets caught", "e.g. 50"),
                     ("tiny_droplet_misses", "Tiny droplet misses", "e.g. 0 (usually small)"),
                     ("misses", "Fruit+droplet misses", "e.g. 0")],
    MANIA.api_name: [("n320", "Number of 320s (MAX)", "e.g. 1000"),
                     ("n300", "Number of 300s", "e.g. 100"),
                     ("n200", "Number of 200s", "e.g. 10"),
                     ("n100", "Number of 100s", "e.g. 0"),
                     ("n50", "Number of 50s", "e.g. 0"),
                     ("misses", "Number of misses", "e.g. 1")],
}

DETAILED_LEGENDS = {
    CATCH.api_name: ["osu!catch detailed input:",
                     "- Fruits = large objects (300s)",
                     "- Droplets = big slider droplets",
                     "- Tiny droplets = small droplets actually caught",
                     "- Tiny droplet misses = missed tiny droplets"],
    MANIA.api_name: ["osu!mania detailed input:",
                     "- 320 = MAX / rainbow 300 (geki)",
                     "- 300 = normal 300",
                     "- 200 = katu",
                     "- 100 / 50 / miss as usual"],
}

# Judgement names of each mode mapped to rosu-pp Performance arguments
ROSU_ARGUMENTS = {
    OSU.api_name: {"n300": "n300", "n100": "n100", "n50": "n50", "misses": "misses"},
    TAIKO.api_name: {"n300": "n300", "n100": "n100", "misses": "misses"},
    CATCH.api_name: {"fruits": "n300", "droplets": "large_tick_hits", "tiny_droplets": "small_tick_hits",
                     "tiny_droplet_misses": "n_katu", "misses": "misses"},
    MANIA.api_name: {"n320": "n_geki", "n300": "n300", "n200": "n_katu", "n100": "n100", "n50": "n50",
                     "misses": "misses"},
}


def _check_count(name: str, value) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= MAX_UINT:
        raise BadNumberError(f"{name} must be an unsigned integer up to {MAX_UINT}, got `{value}`")
    return value


class ScoreDescription:
    """
    Describes the hypothetical play. Implemented by SimpleScore and DetailedScore.
    """

    def __init__(self, combo: Optional[int] = None):
        self.combo = None if combo is None else _check_count("combo", combo)

    def performance_kwargs(self) -> Dict:
        raise NotImplementedError()

    def _combo_kwargs(self) -> Dict:
        return {} if self.combo is None else {"combo": self.combo}


class SimpleScore(ScoreDescription):

    def __init__(self, accuracy: float, misses: int = 0, combo: Optional[int] = None):
        super().__init__(combo)
        if not 0 <= accuracy <= 100:
            raise BadNumberError(f"accuracy must be between 0 and 100, got `{accuracy}`")
        self.accuracy = float(accuracy)
        self.misses = _check_count("misses", misses)

    def performance_kwargs(self) -> Dict:
        return {"accuracy": self.accuracy, "misses": self.misses, **self._combo_kwargs()}

    def __repr__(self):
        return f"SimpleScore(accuracy={self.accuracy}, misses={self.misses}, combo={self.combo})"


class DetailedScore(ScoreDescription):

    def __init__(self, mode: GameMode, counts: Dict[str, int], combo: Optional[int] = None):
        """
        :param mode: Game mode the judgements belong to.
        :param counts: Judgement counts keyed by the names in DETAILED_FIELDS. Missing ones count as 0.
        :param combo: Maximum combo, None for full combo.
        """
        super().__init__(combo)
        self.mode = mode
        fields = [name for name, _, _ in DETAILED_FIELDS[mode.api_name]]

        unknown = set(counts) - set(fields)
        if unknown:
            raise BadNumberError(f"{', '.join(sorted(unknown))} cannot be used in {mode}")

        self.counts = {name: _check_count(name, counts.get(name, 0)) for name in fields}

    def performance_kwargs(self) -> Dict:
        arguments = ROSU_ARGUMENTS[self.mode.api_name]
        kwargs = {arguments[name]: value for name, value in self.counts.items()}
        kwargs.update(self._combo_kwargs())
        return kwargs

    def __repr__(self):
        return f"DetailedScore({self.mode.api_name!r}, {self.counts}, combo={self.combo})"
