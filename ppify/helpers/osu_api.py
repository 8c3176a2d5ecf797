import asyncio
import logging
from datetime import datetime, timedelta
from types import SimpleNamespace
from typing import List, Dict, Optional, Union, Any

import aiohttp
from multidict import CIMultiDict

from ppify.helpers.errors import OsuApiError, UserNotFoundError
from ppify.helpers.parser import parse_user_id

logger = logging.getLogger('ppify')


class OsuApiV2(aiohttp.ClientSession):
    """
    Async wrapper for osu! api v2
    """

    def __init__(self, client_id: Union[int, str], client_secret: str, cooldown: float = 1):
        super(OsuApiV2, self).__init__()
        self._osu_client_id = client_id
        self._osu_client_secret = client_secret
        self._osu_api_base_url = 'https://osu.ppy.sh/api/v2/'
        self._osu_token_url = 'https://osu.ppy.sh/oauth/token'

        self._osu_access_token = None
        self._access_token_obtain_date = None
        self._access_token_expire_date = None
        self._auth_headers = CIMultiDict()

        self._osu_api_cooldown = cooldown
        self._last_request_time = datetime.now() - timedelta(seconds=self._osu_api_cooldown)

    async def get_user(self, user: Union[str, int], game_mode: Optional[str] = None,
                       key: Optional[str] = None) -> SimpleNamespace:
        """
        This endpoint returns the detail of specified user.
        :param user: Id or username of the user.
        :param game_mode: GameMode. User default mode will be used if not specified.
        :param key: Type of user passed in url parameter.
                    Can be either id or username to limit lookup by their respective type.
        :return: User object.
        """
        logger.debug(f'Requesting user information for user: {user}')
        params = {'key': key}
        endpoint = f'users/{user}/{game_mode}' if game_mode else f'users/{user}'
        try:
            return await self._get_endpoint(endpoint, params)
        except OsuApiError as e:
            if e.status == 404:
                raise UserNotFoundError(f'User `{user}` was not found.', status=404) from e
            raise

    async def resolve_user_id(self, user_input: str) -> int:
        """
        Numeric input is used as the user id, anything else is looked up as a username.
        """
        user_id = parse_user_id(user_input)
        if user_id is not None:
            return user_id

        user = await self.get_user(user_input.strip(), key='username')
        return user.id

    async def get_user_scores(self,
                              user_id: int,
                              score_type: str,
                              limit: int = 50,
                              include_fails: Optional[int] = None,
                              mode: Optional[str] = None,
                              offset: Optional[int] = None) -> List[SimpleNamespace]:
        """
        This endpoint returns the scores of specified user.
        :param user_id: User id.
        :param score_type: Score type. Must be one of these: best, firsts, recent.
        :param limit: Maximum number of results.
        :param include_fails: Only for recent scores, include scores of failed plays. Set to 1 to include them.
        :param mode: GameMode of the scores to be returned. Defaults to the specified user's mode.
        :param offset: Result offset for pagination.
        :return: Array of Scores.
        """
        params = {"include_fails": include_fails, "mode": mode, "limit": limit,
                  "offset": offset}
        logger.debug(f'Requesting user {score_type} scores with {params}')
        return await self._get_endpoint(f'users/{user_id}/scores/{score_type}', params)

    async def get_user_best_scores(self, user_input: str, mode: str, limit: int = 100) -> List[SimpleNamespace]:
        """
        Top plays of a user in the given mode.
        :param user_input: Username or user id.
        :param mode: One of [fruits, mania, osu, taiko]
        :param limit: Number of plays, the api returns at most 100.
        """
        user_id = await self.resolve_user_id(user_input)
        return await self.get_user_scores(user_id, 'best', limit=limit, mode=mode)

    async def get_beatmap(self, beatmap_id: int) -> SimpleNamespace:
        """
        Gets beatmap data for the specified beatmap ID.
        :param beatmap_id: The ID of the beatmap.
        :return: Returns Beatmap object.
        """
        logger.debug(f'Requesting beatmap information for id: {beatmap_id}')
        return await self._get_endpoint(f'beatmaps/{beatmap_id}')

    async def _get_endpoint(self, endpoint: str, params: dict = None) -> Union[List, SimpleNamespace]:
        params = self._format_params(params)
        if self._osu_access_token is None or self._check_token_expired():
            await self._get_access_token()

        seconds_since_last_request = (datetime.now() - self._last_request_time).total_seconds()
        if seconds_since_last_request < self._osu_api_cooldown:
            await asyncio.sleep(self._osu_api_cooldown - seconds_since_last_request)

        try:
            async with self.get(f'{self._osu_api_base_url}{endpoint}', params=params,
                                headers=self._auth_headers) as resp:
                status = resp.status
                contents = await resp.json(content_type=None)
        except (aiohttp.ClientError, ValueError) as e:
            raise OsuApiError(f'osu! api request to `{endpoint}` failed: {e}') from e

        self._last_request_time = datetime.now()

        return self._format_response(contents, status, endpoint)

    def _format_response(self, response: Union[List, Dict], status: int = 200,
                         endpoint: str = '') -> Union[List, SimpleNamespace, Any]:
        if status >= 400 or (isinstance(response, dict) and 'error' in response):
            message = response.get('error', 'unknown error') if isinstance(response, dict) else 'unknown error'
            raise OsuApiError(f'osu! api request to `{endpoint}` failed with status {status}: {message}',
                              status=status)
        if isinstance(response, list):
            return [self._format_value(r) for r in response]
        return self._format_value(response)

    def _format_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return SimpleNamespace(**{key: self._format_value(v) for key, v in value.items()})
        if isinstance(value, list):
            return [self._format_value(v) for v in value]
        return value

    @staticmethod
    def _format_params(params: Optional[dict]) -> dict:
        if params is None:
            return {}
        return {key: value for key, value in params.items() if value is not None}

    async def _get_access_token(self):
        params = {'client_id': self._osu_client_id,
                  'client_secret': self._osu_client_secret,
                  'grant_type': 'client_credentials',
                  'scope': 'public'}

        logger.debug('Requesting a new access token')
        try:
            async with self.post(self._osu_token_url, json=params) as r:
                status = r.status
                token_response = await r.json(content_type=None)
        except (aiohttp.ClientError, ValueError) as e:
            raise OsuApiError(f'failed to authenticate with the osu! api: {e}') from e

        if status >= 400 or 'access_token' not in token_response:
            message = token_response.get('message') or token_response.get('error') or 'no access token'
            raise OsuApiError(f'failed to authenticate with the osu! api: {message}. '
                              f'Check OSU_CLIENT_ID and OSU_CLIENT_SECRET.', status=status)

        self._osu_access_token = token_response['access_token']
        self._access_token_obtain_date = datetime.now()
        self._access_token_expire_date = self._access_token_obtain_date + timedelta(
            seconds=token_response['expires_in'])

        self._auth_headers = CIMultiDict({'Authorization': f'Bearer {self._osu_access_token}'})

    def _check_token_expired(self) -> bool:
        return datetime.now() + timedelta(seconds=100) > self._access_token_expire_date
