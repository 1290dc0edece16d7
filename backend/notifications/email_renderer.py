"""
Rendering of new-article alerts.

The same HTML body is used for the in-app notification and the email, so
everything about presentation lives here.
"""

from html import escape

from html2text import html2text

from models.article import Article
from models.notification import EmailPayload, Notification

NOTIFICATION_TITLE = "New Article Alert for You!"
CLOSING_LINE = "Stay informed with the latest updates!"


def build_article_url(article_base_url: str, article: Article) -> str:
    """Canonical link to an article: <base>/Articles/<id>."""
    return f"{article_base_url.rstrip('/')}/Articles/{article.id}"


def build_notification_message(articles: list[Article], article_base_url: str) -> str:
    """
    Build the HTML body listing matched articles.

    Args:
        articles: Distinct matched articles, in display order
        article_base_url: Base URL of the article pages

    Returns:
        HTML string
    """
    lines = [f"<b>{NOTIFICATION_TITLE}:</b><br><br>"]
    for article in articles:
        url = escape(build_article_url(article_base_url, article), quote=True)
        title = escape(article.title or "Untitled article")
        lines.append(f'<a href="{url}">{title}</a><br>')
    lines.append(f"<br>{CLOSING_LINE}")
    return "\n".join(lines) + "\n"


def build_email_payload(email: str, notification: Notification) -> EmailPayload:
    return EmailPayload(email=email, subject=notification.title, body=notification.message)


def build_plain_text(html_body: str) -> str:
    """Plain-text alternative of an HTML email body."""
    return html2text(html_body).strip()
