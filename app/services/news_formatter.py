"""WhatsApp-formatted rendering of top headlines."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from app.schemas.news import Article

NEWS_FOOTER = "Powered by NewsAPI"


def format_published_at(value: str) -> str:
    """``2025-04-04T14:19:00Z`` -> ``04 Apr 2025, 14:19``; unparseable values pass through."""
    try:
        published = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return published.strftime("%d %b %Y, %H:%M")


def format_article(position: int, article: Article) -> str:
    lines = [
        f"*{position}. {article.title}*",
        f"📄 *Source:* {article.source.name}",
    ]
    if article.author:
        lines.append(f"✍️ *Author:* {article.author}")
    if article.published_at:
        lines.append(f"📅 *Published:* {format_published_at(article.published_at)}")
    if article.description:
        lines.append(f"📝 *Summary:* {article.description}")
    lines.append(f"🔗 *Read more:* {article.url}")
    return "\n".join(lines) + "\n\n"


def format_news_body(category: str, articles: Sequence[Article]) -> str:
    """Header plus one block per article; this is also what the summarizer reads."""
    body = f"📰 *TOP {category.upper()} NEWS TODAY* 📰\n\n"
    for position, article in enumerate(articles, start=1):
        body += format_article(position, article)
    return body


def format_ai_summary(summary: str) -> str:
    return f"🤖 *AI Summaries:*\n{summary}\n\n"


def format_news_message(category: str, articles: Sequence[Article], summary: str | None = None) -> str:
    message = format_news_body(category, articles)
    if summary is not None:
        message += format_ai_summary(summary)
    return message + NEWS_FOOTER
