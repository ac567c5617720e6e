"""talkbridge -- Nextcloud Talk webhook bridge."""

__version__ = "0.3.0"
