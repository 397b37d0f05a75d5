"""Decide whether an item has been inactive for too long.

The clock for an item is its last activity: the later of its own
``updated_at`` and the newest comment on its last page of comments.
Only that last page is fetched, which assumes the API returns comments in
chronological order and that the comment count is current.
"""
from datetime import datetime, timezone
from typing import NamedTuple

COMMENTS_PER_PAGE = 30
SECONDS_PER_DAY = 24 * 60 * 60


class Staleness(NamedTuple):
    stale: bool
    days: float
    active_at: datetime


def last_comment_page(count, per_page=COMMENTS_PER_PAGE):
    return (count - 1) // per_page + 1


async def effective_activity_time(item, fetch_comments):
    """Return when the item was last active.

    *fetch_comments* is awaited with a page number and returns the comments
    on that page.
    """
    if item.comments <= 0:
        return item.updated_at
    comments = await fetch_comments(last_comment_page(item.comments))
    return max([item.updated_at, *(comment.created_at for comment in comments)])


def days_since(when, now=None):
    if now is None:
        now = datetime.now(timezone.utc)
    return (now - when).total_seconds() / SECONDS_PER_DAY


def is_stale(days, threshold):
    return days >= threshold


async def evaluate(item, fetch_comments, threshold, *, now=None):
    active_at = await effective_activity_time(item, fetch_comments)
    days = days_since(active_at, now)
    return Staleness(is_stale(days, threshold), days, active_at)
