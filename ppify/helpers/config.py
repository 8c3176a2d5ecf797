import logging
import os
from typing import Optional, Union

from dotenv import load_dotenv

from ppify.helpers.errors import ConfigError

logger = logging.getLogger('ppify')

CLIENT_ID_VARIABLE = 'OSU_CLIENT_ID'
CLIENT_SECRET_VARIABLE = 'OSU_CLIENT_SECRET'
CACHE_DIR_VARIABLE = 'PPIFY_CACHE_DIR'
DEFAULT_CACHE_DIR = 'assets'


class Credentials:
    """
    OAuth client of the osu! api. Register one at https://osu.ppy.sh/home/account/edit#oauth
    """

    def __init__(self, client_id: int, client_secret: str):
        self.client_id = client_id
        self.client_secret = client_secret

    def __repr__(self):
        return f"Credentials(client_id={self.client_id}, client_secret='***')"


def load_env_file(path: Optional[str] = None):
    """
    Loads the .env file. Variables already present in the environment are kept.
    """
    loaded = load_dotenv(dotenv_path=path, override=False)
    logger.debug(f'.env file {"loaded" if loaded else "not found"}')


def parse_client_id(raw: Union[str, int]) -> int:
    try:
        client_id = int(str(raw).strip())
    except ValueError:
        raise ConfigError(f"{CLIENT_ID_VARIABLE} must be an integer client id")

    if client_id <= 0:
        raise ConfigError(f"{CLIENT_ID_VARIABLE} must be an integer client id")
    return client_id


def load_credentials(client_id: Optional[str] = None, client_secret: Optional[str] = None,
                     prompt=None) -> Credentials:
    """
    Finds the osu! api credentials.

    Command line values are used first, then OSU_CLIENT_ID and OSU_CLIENT_SECRET from the environment
    (or the .env file), then the user is asked if a prompt is given.
    :param client_id: Client id from the command line.
    :param client_secret: Client secret from the command line.
    :param prompt: ppify.interactive.Prompt used when a value is missing.
    :return: Credentials
    """
    raw_id = client_id or os.getenv(CLIENT_ID_VARIABLE)
    if not raw_id and prompt is not None:
        raw_id = prompt.text("osu! OAuth client id", "numeric client id")
    if not raw_id:
        raise ConfigError(f"{CLIENT_ID_VARIABLE} is not set. Add it to your .env file or pass --client_id")

    secret = client_secret or os.getenv(CLIENT_SECRET_VARIABLE)
    if not secret and prompt is not None:
        secret = prompt.secret("osu! OAuth client secret")
    if not secret or not secret.strip():
        raise ConfigError(f"{CLIENT_SECRET_VARIABLE} is not set. Add it to your .env file or pass --client_secret")

    return Credentials(parse_client_id(raw_id), secret.strip())


def cache_dir(cli_value: Optional[str] = None) -> str:
    return cli_value or os.getenv(CACHE_DIR_VARIABLE) or DEFAULT_CACHE_DIR
