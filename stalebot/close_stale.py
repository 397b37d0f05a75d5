"""Close items that kept the stale label without any activity."""
import asyncio

import aiohttp
import gidgethub

from . import staleness, util
from .items import Comment, Item

ISSUES_PER_PAGE = 100

FETCH_ERRORS = (gidgethub.GitHubException, aiohttp.ClientError, asyncio.TimeoutError)


class RunBudget:
    """Count the API operations spent in a sweep."""

    def __init__(self, ceiling):
        self.ceiling = ceiling
        self.used = 0

    def charge(self, operations=1):
        self.used += operations

    @property
    def exhausted(self):
        return self.used >= self.ceiling


class SweepReport:
    def __init__(self):
        self.pages = []
        self.closed = []
        self.operations = 0

    def __repr__(self):
        return (f"<SweepReport pages={self.pages} closed={self.closed} "
                f"operations={self.operations}>")


class Sweep:
    """Walk the open items carrying the stale label one page at a time.

    The budget is checked once a page is done, so a page is always processed
    in full even if it overruns the ceiling.
    """

    def __init__(self, gh, repository, options):
        self.gh = gh
        self.repository = repository
        self.label = options.issue_label
        self.close_message = options.close_message
        self.days_before_close = options.days_before_close
        self.budget = RunBudget(options.operations_per_run)

    async def get_issues(self, page):
        owner, repo = self.repository
        url_vars = {
            "owner": owner,
            "repo": repo,
            "state": "open",
            "labels": self.label,
            "per_page": ISSUES_PER_PAGE,
            "page": page,
        }
        try:
            issues = await self.gh.getitem(util.ISSUES_URL, url_vars)
        except FETCH_ERRORS as exc:
            util.error(f"Get issues for repo error: {exc!r}")
            return []
        self.budget.charge()
        return [Item.from_data(issue) for issue in issues]

    async def get_comments(self, number, page):
        url_vars = util.issue_vars(
            self.repository, number,
            per_page=staleness.COMMENTS_PER_PAGE, page=page)
        try:
            comments = await self.gh.getitem(util.COMMENTS_URL, url_vars)
        except FETCH_ERRORS as exc:
            util.error(f"Get comments for #{number} error: {exc!r}")
            return []
        self.budget.charge()
        return [Comment.from_data(number, comment) for comment in comments]

    async def close(self, item):
        url_vars = util.issue_vars(self.repository, item.number)
        if self.close_message:
            await self.gh.post(util.COMMENTS_URL, url_vars,
                               data={"body": self.close_message})
            self.budget.charge()
            util.info(f"Added comment to {item.describe()}")
        await self.gh.patch(util.ISSUE_URL, url_vars, data={"state": "closed"})
        await util.remove_label(self.gh, self.repository, item.number, self.label)
        self.budget.charge(2)

    async def process_issue(self, item):
        """Close the item if it is stale; return True if it was closed."""
        what = item.describe()
        util.info(f"Found issue: {what}")
        if not item.is_open:
            util.info(f"Skipping {what} because it is closed")
            return False
        if item.locked:
            util.info(f"Skipping {what} because it is locked")
            return False
        if self.label not in item.labels:
            util.info(f"Skipping {what} because it does not have "
                      f"the {self.label} label")
            return False

        async def fetch_comments(page):
            return await self.get_comments(item.number, page)

        result = await staleness.evaluate(
            item, fetch_comments, self.days_before_close)
        if not result.stale:
            util.info(f"Skipping {what} because it has been updated "
                      f"in the last {result.days} days")
            return False

        await self.close(item)
        util.info(f"Closed {what} and removed {self.label} label because it "
                  f"has not been updated in the last {result.days} days")
        return True

    async def run(self):
        report = SweepReport()
        page = 1
        while True:
            issues = await self.get_issues(page)
            if not issues:
                util.info("No more issues found to process. Exiting.")
                break
            report.pages.append(page)
            for item in issues:
                if await self.process_issue(item):
                    report.closed.append(item.number)
            if self.budget.exhausted:
                util.warning(
                    "Reached max number of operations to process. Exiting.")
                break
            page += 1
        report.operations = self.budget.used
        return report
