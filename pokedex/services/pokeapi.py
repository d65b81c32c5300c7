import requests
import aiohttp
import asyncio
import logging
from typing import List, Optional, Union, Dict, Any
from pydantic import ValidationError
from nicegui import run

from pokedex.core.models import Pokemon, NamedResource, Category
from pokedex.core.categories import SourceSpec
from pokedex.core.errors import PokedexError, FetchFailed, NotFound, ResolutionFailed
from pokedex.core.config import config_manager

API_URL = "https://pokeapi.co/api/v2"

# The list endpoint is paginated server side; a large limit returns the whole catalog
FULL_CATALOG_LIMIT = 100000

logger = logging.getLogger(__name__)

def parse_resources(data: List[dict]) -> List[NamedResource]:
    return [NamedResource(**r) for r in data]

class PokeApiService:
    """
    Thin client for PokeAPI. Nothing is cached: every call hits the network.
    """
    def __init__(self, base_url: str = API_URL, timeout: float = 10, concurrency: int = 8):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.concurrency = concurrency

    def _url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def pokemon_url(self, id_or_name: Union[int, str]) -> str:
        return self._url(f"pokemon/{str(id_or_name).strip().lower()}/")

    async def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Runs the blocking request off the event loop."""
        try:
            try:
                return await run.io_bound(requests.get, url, params=params, timeout=self.timeout)
            except RuntimeError:
                # Fallback for environments without the NiceGUI event loop (tests, scripts)
                return await asyncio.to_thread(requests.get, url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchFailed(f"Request to {url} failed: {e}") from e

    async def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = await self._get(url, params=params)
        if response is None:
            raise FetchFailed(f"No response from {url}")
        if response.status_code == 404:
            raise NotFound(f"Nothing found at {url}")
        if response.status_code != 200:
            logger.error(f"API Error: {response.status_code} for {url}")
            raise FetchFailed(f"API Error: {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise FetchFailed(f"Invalid JSON from {url}") from e

    async def _get_listing(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        # Listing endpoints always exist; a 404 here means a wrong base URL
        try:
            return await self._get_json(url, params=params)
        except NotFound as e:
            logger.error(f"Listing endpoint missing: {url}")
            raise FetchFailed(f"Listing endpoint missing: {url}") from e

    async def fetch_all_pokemon(self) -> List[NamedResource]:
        """Returns name/url pairs for the whole catalog."""
        logger.info("Fetching full Pokémon list")
        data = await self._get_listing(self._url("pokemon"), params={"limit": FULL_CATALOG_LIMIT, "offset": 0})
        try:
            results = parse_resources(data.get("results", []))
        except ValidationError as e:
            raise FetchFailed(f"Unexpected Pokémon list payload: {e}") from e
        logger.info(f"Fetched {len(results)} Pokémon references.")
        return results

    async def fetch_categories(self) -> List[Category]:
        data = await self._get_listing(self._url("type/"))
        try:
            return [Category(**t) for t in data.get("results", [])]
        except ValidationError as e:
            raise FetchFailed(f"Unexpected type list payload: {e}") from e

    async def fetch_category_members(self, ref: str) -> List[NamedResource]:
        """
        Returns the Pokémon belonging to a type. `ref` is a type name or its URL.
        Any failure is reported as ResolutionFailed.
        """
        url = self._url(ref if ref.startswith(("http://", "https://")) else f"type/{ref}")
        logger.info(f"Fetching members of type {ref}")
        try:
            data = await self._get_json(url)
            members = [entry["pokemon"] for entry in data.get("pokemon", [])]
            return parse_resources(members)
        except (PokedexError, KeyError, TypeError, ValidationError) as e:
            logger.error(f"Could not resolve type {ref}: {e}")
            raise ResolutionFailed(f"Could not resolve type {ref}") from e

    async def fetch_collection(self, source: SourceSpec) -> List[NamedResource]:
        if source.is_full:
            return await self.fetch_all_pokemon()
        return await self.fetch_category_members(source.ref)

    async def fetch_pokemon(self, id_or_name: Union[int, str]) -> Pokemon:
        url = id_or_name if str(id_or_name).startswith(("http://", "https://")) else self.pokemon_url(id_or_name)
        data = await self._get_json(url)
        try:
            return Pokemon(**data)
        except (ValidationError, TypeError) as e:
            raise FetchFailed(f"Unexpected Pokémon payload from {url}: {e}") from e

    async def _fetch_pokemon_with_session(self, session: aiohttp.ClientSession, ref: str) -> Pokemon:
        url = self._url(ref) if ref.startswith(("http://", "https://")) else self.pokemon_url(ref)
        try:
            async with session.get(url) as response:
                if response.status == 404:
                    raise NotFound(f"Nothing found at {url}")
                if response.status != 200:
                    raise FetchFailed(f"API Error: {response.status}")
                data = await response.json()
        except ValueError as e:
            raise FetchFailed(f"Invalid JSON from {url}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchFailed(f"Request to {url} failed: {e}") from e

        try:
            return Pokemon(**data)
        except (ValidationError, TypeError) as e:
            raise FetchFailed(f"Unexpected Pokémon payload from {url}: {e}") from e

    async def fetch_pokemon_batch(self, refs: List[str], concurrency: Optional[int] = None) -> List[Pokemon]:
        """
        Fetches the records for one page of cards concurrently.
        Entries that fail are logged and left out; order follows `refs`.
        """
        if not refs:
            return []

        semaphore = asyncio.Semaphore(concurrency or self.concurrency)

        async def _task(session, ref):
            async with semaphore:
                try:
                    return await self._fetch_pokemon_with_session(session, ref)
                except PokedexError as e:
                    logger.warning(f"Skipping {ref}: {e}")
                    return None

        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            results = await asyncio.gather(*[_task(session, ref) for ref in refs])

        return [p for p in results if p is not None]

pokeapi_service = PokeApiService(
    base_url=config_manager.get_api_base_url(),
    timeout=config_manager.get_request_timeout(),
    concurrency=config_manager.get_batch_concurrency()
)
