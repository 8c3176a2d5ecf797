import logging
import os
from urllib.parse import urlparse

import aiohttp

from ppify.helpers.errors import BeatmapDownloadError

logger = logging.getLogger('ppify')


async def download_and_save_asset(url: str, cache_dir: str = 'assets') -> str:
    """
    Downloads the file at url into the cache folder, mirroring the url path, and returns its path.
    """
    url_path = urlparse(url).path
    folder_name, filename = os.path.split(url_path)
    local_folder_path = os.path.join(cache_dir, f'.{folder_name}')
    asset_file_path = os.path.join(local_folder_path, filename)
    os.makedirs(local_folder_path, exist_ok=True)

    if os.path.exists(asset_file_path) and os.path.getsize(asset_file_path) > 0:
        logger.debug(f'Using cached {asset_file_path}')
        return asset_file_path

    logger.debug(f'Downloading {url}')
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url) as resp:
                if resp.status >= 400:
                    raise BeatmapDownloadError(f'GET {url} returned non-success status {resp.status}')
                response_bytes = await resp.read()
    except aiohttp.ClientError as e:
        raise BeatmapDownloadError(f'GET {url} failed: {e}') from e

    if not response_bytes:
        raise BeatmapDownloadError(f'GET {url} returned an empty file, does the beatmap exist?')

    partial_file_path = f'{asset_file_path}.part'
    with open(partial_file_path, "wb") as f:
        f.write(response_bytes)
    os.replace(partial_file_path, asset_file_path)

    return asset_file_path


async def download_and_save_beatmap(beatmap_id: int, cache_dir: str = 'assets') -> str:
    beatmap_download_url = f"https://osu.ppy.sh/osu/{beatmap_id}"
    return await download_and_save_asset(beatmap_download_url, cache_dir)


async def download_beatmap(beatmap_id: int, cache_dir: str = 'assets') -> bytes:
    """
    Returns the contents of the .osu file of the beatmap, downloading it if it is not cached.
    """
    beatmap_path = await download_and_save_beatmap(beatmap_id, cache_dir)
    with open(beatmap_path, "rb") as f:
        return f.read()
