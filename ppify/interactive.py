import getpass
from typing import List, Optional, Sequence

from ppify.game_mode import GameMode
from ppify.helpers.errors import InputError
from ppify.helpers.parser import parse_uint, parse_optional_uint, parse_accuracy
from ppify.judgements import DETAILED_FIELDS, DETAILED_LEGENDS, SimpleScore, DetailedScore, ScoreDescription
from ppify.mods import ModOption, mods_for_mode, parse_mods

COMBO_PLACEHOLDER = "leave empty for full combo"

SIMPLE = 'simple'
DETAILED = 'detailed'


class Prompt:
    """
    Asks the user for the values that were not given on the command line.
    """

    def __init__(self, input_func=input, password_func=getpass.getpass, output=print):
        self._input = input_func
        self._password = password_func
        self._output = output

    def text(self, label: str, placeholder: str = '') -> str:
        hint = f" ({placeholder})" if placeholder else ''
        return self._input(f"{label}{hint}: ").strip()

    def secret(self, label: str) -> str:
        return self._password(f"{label} (will not be echoed): ")

    def uint(self, label: str, placeholder: str = '') -> int:
        return parse_uint(self.text(label, placeholder), label)

    def optional_uint(self, label: str, placeholder: str = '') -> Optional[int]:
        return parse_optional_uint(self.text(label, placeholder), label)

    def accuracy(self) -> float:
        return parse_accuracy(self.text("Accuracy in %", "e.g. 98.75"))

    def choice(self, label: str, options: Sequence[str], default: Optional[str] = None) -> str:
        """
        Lets the user pick one of the options by number or by name.
        """
        self._output(f"{label}:")
        for i, option in enumerate(options, start=1):
            self._output(f"  {i}. {option}")

        answer = self.text("Choice", f"default: {default}" if default else '')
        if not answer and default is not None:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        for option in options:
            if option.lower() == answer.lower():
                return option
        raise InputError(f"`{answer}` is not one of: {', '.join(options)}")

    def user(self) -> str:
        user = self.text("osu! username or user id", "e.g. peppy or 2")
        if not user:
            raise InputError("a username or user id is required")
        return user

    def game_mode(self) -> GameMode:
        labels = [f"{m.label} - {m.description}" for m in GameMode.all()]
        picked = self.choice("Game mode", labels)
        return GameMode.all()[labels.index(picked)]

    def beatmap_id(self) -> int:
        return self.uint("Beatmap ID", "numeric id, e.g. 3897329")

    def mods(self, mode: GameMode) -> List[ModOption]:
        self._output("Mods (some lazer-only mods are shown but will not affect PP):")
        for mod in mods_for_mode(mode):
            self._output(f"  {mod.acronym:<4} {mod.description}")
        return parse_mods(self.text("Mods", "e.g. HDDT, empty for NoMod"), mode)

    def score_input_mode(self) -> str:
        return self.choice("Score input mode", [SIMPLE, DETAILED], default=SIMPLE)

    def simple_score(self, misses: Optional[int] = None, combo: Optional[int] = None) -> SimpleScore:
        accuracy = self.accuracy()
        if misses is None:
            misses = self.uint("Number of misses", "usually 0 for FC")
        if combo is None:
            combo = self.optional_uint("Combo (optional)", COMBO_PLACEHOLDER)
        return SimpleScore(accuracy, misses, combo)

    def detailed_score(self, mode: GameMode, misses: Optional[int] = None,
                       combo: Optional[int] = None) -> DetailedScore:
        """
        Asks for the judgement counts of the mode. Misses and combo given on the command line are not asked again.
        """
        legend = DETAILED_LEGENDS.get(mode.api_name)
        if legend:
            self._output('')
            for line in legend:
                self._output(line)

        counts = {}
        for name, label, placeholder in DETAILED_FIELDS[mode.api_name]:
            if name == "misses" and misses is not None:
                counts[name] = misses
            else:
                counts[name] = self.uint(label, placeholder)
        if combo is None:
            combo = self.optional_uint("Combo (optional)", COMBO_PLACEHOLDER)
        return DetailedScore(mode, counts, combo)

    def score(self, mode: GameMode, misses: Optional[int] = None, combo: Optional[int] = None) -> ScoreDescription:
        if self.score_input_mode() == DETAILED:
            return self.detailed_score(mode, misses, combo)
        return self.simple_score(misses, combo)
