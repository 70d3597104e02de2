from .query_builder import build_all_queries
from .news_fetcher import fetch_news_for_queries
from .summarizer import summarize_articles
