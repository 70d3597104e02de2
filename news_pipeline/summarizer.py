from openai import AsyncOpenAI

from .errors import ConfigurationError, SummarizationError

DEFAULT_MODEL = "gpt-4o-mini"
MAX_TOKENS = 150
TEMPERATURE = 0.3

SYSTEM_PROMPT = (
    "You are a news summarizer. Create concise, informative summaries of news "
    "articles in exactly 60-80 words. Focus on the key facts and maintain a neutral tone."
)


def create_openai_client(api_key: str) -> AsyncOpenAI:
    if not api_key:
        raise ConfigurationError("OPENAI_API_KEY is not configured")
    return AsyncOpenAI(api_key=api_key)


def _to_final_article(article: dict, summary: str) -> dict:
    return {
        "title": article.get("title"),
        "url": article.get("url"),
        "summary": summary,
        "image": article.get("image"),
        "publishedAt": article.get("publishedAt"),
    }


def _description(article) -> str:
    return (article or {}).get("description") or ""


def _extract_content(response) -> str:
    choices = getattr(response, "choices", None)
    if not choices:
        raise SummarizationError("Completion response has no choices")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str) or not content.strip():
        raise SummarizationError("Completion response has no content")
    return content.strip()


async def summarize_article(article: dict, client, model: str = DEFAULT_MODEL) -> str:
    """
    Compresses one article's title and description into a 60-80 word summary.
    Falls back to the original description on any failure; never raises.
    """
    if not article or (not article.get("title") and not article.get("description")):
        return _description(article)

    content = f"Title: {article.get('title') or ''}\nDescription: {article.get('description') or ''}"

    try:
        response = await client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Please summarize this news article in 60-80 words:\n\n{content}"},
            ],
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
        )
        return _extract_content(response)
    except Exception as e:
        print(f"[ERROR] Failed to summarize '{article.get('title')}': {e}")
        return _description(article)


async def summarize_articles(
    articles: list[dict],
    api_key: str,
    enable_summarization: bool = True,
    client=None,
    model: str = DEFAULT_MODEL,
) -> list[dict]:
    """
    Replaces each article's description with an AI summary, one article
    at a time. Without a key (or with summarization off) the description
    is used as the summary and no external call is made.
    """
    if not articles:
        return []

    if not enable_summarization or not api_key:
        return [_to_final_article(article, _description(article)) for article in articles]

    if client is None:
        try:
            client = create_openai_client(api_key)
        except Exception as e:
            print(f"[ERROR] Could not create OpenAI client, using descriptions: {e}")
            return [_to_final_article(article, _description(article)) for article in articles]

    print(f"[INFO] Summarizing {len(articles)} articles...")
    summarized = []
    for article in articles:
        try:
            summary = await summarize_article(article, client, model=model)
        except Exception as e:
            print(f"[ERROR] Unexpected error while summarizing, using description: {e}")
            summary = _description(article)
        summarized.append(_to_final_article(article, summary))

    return summarized
