import http
import sys
from datetime import datetime, timezone

import gidgethub
from gidgethub import actions

TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

ISSUES_URL = "/repos/{owner}/{repo}/issues{?state,labels,per_page,page}"
ISSUE_URL = "/repos/{owner}/{repo}/issues/{number}"
COMMENTS_URL = "/repos/{owner}/{repo}/issues/{number}/comments{?per_page,page}"
LABEL_URL = "/repos/{owner}/{repo}/issues/{number}/labels/{name}"


def info(message):
    print(message)


def warning(message):
    actions.command("warning", message)


def error(message):
    actions.command("error", message)


def labels(issue):
    """Normalize the labels of an issue into a set of names.

    The API returns label objects, but plain strings are accepted too.
    """
    return {label if isinstance(label, str) else label["name"]
            for label in issue.get("labels", [])}


def user_login(item):
    user = item.get("user")
    return user["login"] if user else None


def parse_timestamp(value):
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def issue_vars(repository, number, **extra):
    owner, repo = repository
    return {"owner": owner, "repo": repo, "number": number, **extra}


async def remove_label(gh, repository, number, name):
    """Remove a label from an issue.

    Returns False if the issue didn't carry the label.
    """
    try:
        await gh.delete(LABEL_URL, issue_vars(repository, number, name=name))
    except gidgethub.BadRequest as exc:
        if exc.status_code == http.HTTPStatus.NOT_FOUND:
            info(f"#{number} has no {name!r} label to remove")
            return False
        raise
    return True
