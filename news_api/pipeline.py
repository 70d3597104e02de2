from news_pipeline.errors import ConfigurationError
from news_pipeline.news_fetcher import fetch_news_for_queries
from news_pipeline.query_builder import build_all_queries
from news_pipeline.summarizer import summarize_articles

from . import config
from .response_formatter import format_empty, format_success
from .validation import validate_request

NO_QUERIES_MESSAGE = "No search queries could be generated from the provided data."
NO_ARTICLES_MESSAGE = "No news articles found for your criteria."


async def get_personalized_news(
    data,
    api_keys,
    provider=None,
    query_limit=None,
    max_results_per_query=None,
    model=None,
    news_client=None,
    openai_client=None,
):
    """
    Runs the whole pipeline for one request:
    1. Validates the payload.
    2. Builds the search queries.
    3. Fetches and deduplicates articles.
    4. Summarizes them when an OpenAI key is configured.

    Raises ValidationError or ConfigurationError; every per-query and
    per-article failure is absorbed further down.
    """
    validate_request(data)

    news_api_key = api_keys.get("newsApiKey")
    openai_api_key = api_keys.get("openaiApiKey")

    if not news_api_key:
        print("[ERROR] NEWS_API_KEY is not configured")
        raise ConfigurationError("NEWS_API_KEY is not configured")

    queries = build_all_queries(data)
    if not queries:
        return format_empty(NO_QUERIES_MESSAGE)

    print(f"[INFO] Built {len(queries)} queries: {queries}")
    articles = await fetch_news_for_queries(
        queries,
        news_api_key,
        provider=provider if provider is not None else config.NEWS_PROVIDER,
        max_results_per_query=(
            max_results_per_query if max_results_per_query is not None else config.NEWS_MAX_RESULTS_PER_QUERY
        ),
        query_limit=query_limit if query_limit is not None else config.NEWS_QUERY_LIMIT,
        client=news_client,
    )

    if not articles:
        return format_empty(NO_ARTICLES_MESSAGE)

    results = await summarize_articles(
        articles,
        openai_api_key,
        enable_summarization=bool(openai_api_key),
        client=openai_client,
        model=model if model is not None else config.OPENAI_MODEL,
    )

    return format_success(results, len(queries))
