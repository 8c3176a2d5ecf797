from typing import Iterable, Optional, List

TOP_PLAYS = 100
WEIGHT = 0.95


class PpGain:

    def __init__(self, old_total: float, new_total: float, position: Optional[int]):
        self.old_total = old_total
        self.new_total = new_total
        self.gain = new_total - old_total
        self.position = position

    def __repr__(self):
        return f"PpGain(old_total={self.old_total:.2f}, new_total={self.new_total:.2f}, gain={self.gain:+.2f})"


def weighted_total_pp(pps: Iterable[float]) -> float:
    """
    Sum of the top plays, the i-th best (0-based) weighted by 0.95^i. Bonus pp is not included.
    """
    top = sorted(pps, reverse=True)[:TOP_PLAYS]
    return sum(pp * WEIGHT ** i for i, pp in enumerate(top))


def pp_gain(current_pps: Iterable[Optional[float]], new_pp: float) -> PpGain:
    """
    Computes how the weighted total changes when a new play is added to the top plays.
    :param current_pps: pp of the current top plays. Plays without pp are ignored.
    :param new_pp: pp of the new play.
    """
    pps: List[float] = sorted((float(pp) for pp in current_pps if pp is not None), reverse=True)
    old_total = weighted_total_pp(pps)
    new_total = weighted_total_pp(pps + [new_pp])

    position = sum(1 for pp in pps if pp >= new_pp) + 1
    if position > TOP_PLAYS:
        position = None

    return PpGain(old_total, new_total, position)
