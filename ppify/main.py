import argparse
import asyncio
import logging
import sys

from ppify.calculator import load_beatmap, calculate_play
from ppify.game_mode import GameMode
from ppify.helpers.config import load_env_file, load_credentials, cache_dir
from ppify.helpers.errors import PpifyError, InputError, OsuApiError
from ppify.helpers.http_downloader import download_beatmap
from ppify.helpers.osu_api import OsuApiV2
from ppify.helpers.parser import parse_accuracy
from ppify.interactive import Prompt
from ppify.judgements import DETAILED_FIELDS, SimpleScore, DetailedScore
from ppify.mods import mods_for_mode, parse_mods, mod_bits, mods_to_string
from ppify.ranking import pp_gain
from ppify.report import format_play, format_gain

logger = logging.getLogger("ppify")

JUDGEMENT_FLAGS = ['n320', 'n300', 'n200', 'n100', 'n50', 'fruits', 'droplets', 'tiny_droplets',
                   'tiny_droplet_misses']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ppify',
                                     description='Calculates how much pp a hypothetical osu! play would give. '
                                                 'Values that are not given are asked interactively.')
    parser.add_argument('--user', type=str, help='osu! username or user id.')
    parser.add_argument('--mode', type=str, help='Game mode. One of [osu, taiko, fruits, mania].')
    parser.add_argument('--beatmap', type=int, help='Beatmap (difficulty) id.')
    parser.add_argument('--mods', type=str, help='Mods, e.g. HDDT or "HD,DT". Use NM for no mods.')
    parser.add_argument('--acc', type=str, help='Accuracy in percent. Selects simple score input.')
    parser.add_argument('--misses', type=int, help='Number of misses.')
    parser.add_argument('--combo', type=int, help='Maximum combo. Full combo if not given.')
    for flag in JUDGEMENT_FLAGS:
        parser.add_argument(f'--{flag}', type=int,
                            help=f'Judgement count ({flag}). Selects detailed score input.')
    parser.add_argument('--stable', action='store_true', help='Calculate the play as a stable play.')
    parser.add_argument('--list_mods', action='store_true', help='Lists the mods of the game mode and exits.')
    parser.add_argument('--client_id', type=str, default='', help='Client ID for the osu!api v2.')
    parser.add_argument('--client_secret', type=str, default='', help='Client secret for the osu!api v2.')
    parser.add_argument('--cache_dir', type=str, default=None, help='Folder beatmap files are cached in.')
    parser.add_argument('--log_level', type=str, default='WARNING', help='Log level. Default is WARNING.')
    return parser


def setup_logging(log_level: str):
    logger.setLevel(log_level.upper())
    loggers_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)s | %(process)d | %(name)s | %(funcName)s | %(message)s',
        datefmt='%d/%m/%Y %I:%M:%S')

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(loggers_formatter)
        logger.addHandler(ch)


def score_from_args(args: argparse.Namespace, mode: GameMode, prompt: Prompt):
    """
    Builds the score description from the flags, asking for whatever is missing.
    """
    given_counts = {flag: getattr(args, flag) for flag in JUDGEMENT_FLAGS if getattr(args, flag) is not None}

    if given_counts:
        fields = [name for name, _, _ in DETAILED_FIELDS[mode.api_name]]
        counts = {name: value for name, value in given_counts.items() if name in fields}
        unused = set(given_counts) - set(counts)
        if unused:
            raise InputError(f"--{', --'.join(sorted(unused))} cannot be used in {mode}")
        if 'misses' in fields:
            counts['misses'] = args.misses or 0
        return DetailedScore(mode, counts, args.combo)

    if args.acc is not None:
        return SimpleScore(parse_accuracy(args.acc), args.misses or 0, args.combo)

    return prompt.score(mode, args.misses, args.combo)


async def run(args: argparse.Namespace, prompt: Prompt, output=print):
    credentials = load_credentials(args.client_id, args.client_secret, prompt)

    user = args.user or prompt.user()
    mode = GameMode.parse(args.mode) if args.mode else prompt.game_mode()
    beatmap_id = args.beatmap if args.beatmap is not None else prompt.beatmap_id()
    selected_mods = parse_mods(args.mods, mode) if args.mods is not None else prompt.mods(mode)
    score = score_from_args(args, mode, prompt)
    bits = mod_bits(selected_mods)

    beatmap_bytes = await download_beatmap(beatmap_id, cache_dir(args.cache_dir))
    beatmap = load_beatmap(beatmap_bytes)
    play = calculate_play(beatmap, mode, bits, score, lazer=not args.stable)
    for line in format_play(play, mods_to_string(selected_mods)):
        output(line)

    async with OsuApiV2(credentials.client_id, credentials.client_secret) as api:
        try:
            beatmap_info = await api.get_beatmap(beatmap_id)
        except OsuApiError as e:
            logger.warning(f"Could not get beatmap details: {e}")
            beatmap_info = None
        scores = await api.get_user_best_scores(user, play.mode.api_name, limit=100)

    gain = pp_gain([getattr(s, 'pp', None) for s in scores], play.pp)
    for line in format_gain(gain, beatmap_info):
        output(line)
    return gain


def list_mods(mode_text: str, output=print):
    mode = GameMode.parse(mode_text or 'osu')
    output(f"Mods available in {mode}:")
    for mod in mods_for_mode(mode):
        output(f"  {mod}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    load_env_file()

    try:
        if args.list_mods:
            list_mods(args.mode)
        else:
            asyncio.run(run(args, Prompt()))
    except PpifyError as e:
        logger.debug("ppify failed", exc_info=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("Cancelled.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
