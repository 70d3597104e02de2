import asyncio

import httpx  # The async-capable requests library

from .errors import ConfigurationError, NewsFetchError

GNEWS_BASE_URL = "https://gnews.io/api/v4/search"
NEWSAPI_BASE_URL = "https://newsapi.org/v2/everything"

REQUEST_TIMEOUT = 10.0
DEFAULT_PROVIDER = "gnews"

DEFAULT_QUERY_LIMIT = 5
DEFAULT_MAX_RESULTS = 3


def _normalize_article(item: dict, image_field: str) -> dict:
    source = item.get("source")
    if isinstance(source, dict):
        source = source.get("name")
    elif not isinstance(source, str):
        source = None
    return {
        "title": item.get("title") or "",
        "url": item.get("url") or "",
        "description": item.get("description") or "",
        "image": item.get(image_field) or "",
        "publishedAt": item.get("publishedAt") or "",
        "source": source or "Unknown",
    }


async def _get_articles(client, url, params, image_field, query) -> list[dict]:
    """
    Issues one GET against a news search endpoint and normalizes the result.
    Any transport or provider failure becomes a NewsFetchError.
    """
    try:
        response = await client.get(url, params=params, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        print(f"[ERROR] News API HTTP Error for '{query}': {e.response.status_code}")
        raise NewsFetchError(f"Failed to fetch news: {e}") from e
    except (httpx.HTTPError, ValueError) as e:
        print(f"[ERROR] Failed to fetch news for '{query}': {e}")
        raise NewsFetchError(f"Failed to fetch news: {e}") from e

    items = data.get("articles") if isinstance(data, dict) else None
    if not isinstance(items, list):
        return []

    return [_normalize_article(item, image_field) for item in items if isinstance(item, dict)]


async def fetch_from_gnews(
    query: str, api_key: str, max_results: int = 5, client: httpx.AsyncClient = None
) -> list[dict]:
    params = {
        "q": query,
        "token": api_key,
        "lang": "en",
        "max": max_results,
    }
    if client is not None:
        return await _get_articles(client, GNEWS_BASE_URL, params, "image", query)

    async with httpx.AsyncClient() as client:
        return await _get_articles(client, GNEWS_BASE_URL, params, "image", query)


async def fetch_from_newsapi(
    query: str, api_key: str, page_size: int = 5, client: httpx.AsyncClient = None
) -> list[dict]:
    params = {
        "q": query,
        "apiKey": api_key,
        "language": "en",
        "pageSize": page_size,
        "sortBy": "publishedAt",
    }
    if client is not None:
        return await _get_articles(client, NEWSAPI_BASE_URL, params, "urlToImage", query)

    async with httpx.AsyncClient() as client:
        return await _get_articles(client, NEWSAPI_BASE_URL, params, "urlToImage", query)


PROVIDERS = {
    "gnews": fetch_from_gnews,
    "newsapi": fetch_from_newsapi,
}


async def fetch_from_provider(
    query: str,
    api_key: str,
    max_results: int = 5,
    provider: str = DEFAULT_PROVIDER,
    client: httpx.AsyncClient = None,
) -> list[dict]:
    """
    Fetches one query from the named provider. Does not retry.
    """
    fetch = PROVIDERS.get(provider)
    if fetch is None:
        raise ConfigurationError(f"Unknown news provider: {provider}")
    return await fetch(query, api_key, max_results, client=client)


async def _fetch_isolated(query, api_key, max_results, provider, client) -> list[dict]:
    # A failing query contributes nothing; its siblings keep running.
    try:
        return await fetch_from_provider(query, api_key, max_results, provider, client=client)
    except NewsFetchError as e:
        print(f"[WARN] Skipping query '{query}': {e}")
        return []


def _merge_unique(results) -> list[dict]:
    """
    Merges per-query results in query order, keeping the first article
    seen for each URL. Articles without a URL are always kept.
    """
    merged = []
    seen_urls = set()

    for result in results:
        if isinstance(result, BaseException):
            print(f"[ERROR] Query fetch failed unexpectedly: {result}")
            continue
        for article in result:
            url = article.get("url")
            if url:
                if url in seen_urls:
                    continue
                seen_urls.add(url)
            merged.append(article)

    return merged


async def fetch_news_for_queries(
    queries: list[str],
    api_key: str,
    provider: str = DEFAULT_PROVIDER,
    max_results_per_query: int = DEFAULT_MAX_RESULTS,
    query_limit: int = DEFAULT_QUERY_LIMIT,
    client: httpx.AsyncClient = None,
) -> list[dict]:
    """
    Fetches the first `query_limit` queries concurrently and returns the
    merged, URL-deduplicated article list.
    """
    if not api_key:
        raise ConfigurationError("NEWS_API_KEY is not configured")

    if not queries:
        return []

    if provider not in PROVIDERS:
        raise ConfigurationError(f"Unknown news provider: {provider}")

    # Extra queries are dropped to stay under the provider's rate limit
    limited_queries = list(queries)[:query_limit]

    async def run_all(http_client):
        tasks = [
            _fetch_isolated(query, api_key, max_results_per_query, provider, http_client)
            for query in limited_queries
        ]
        print(f"[INFO] Fetching {len(tasks)} queries from {provider} in parallel...")
        return await asyncio.gather(*tasks, return_exceptions=True)

    if client is not None:
        results = await run_all(client)
    else:
        async with httpx.AsyncClient() as http_client:
            results = await run_all(http_client)

    articles = _merge_unique(results)
    print(f"[INFO] Collected {len(articles)} unique articles.")
    return articles
