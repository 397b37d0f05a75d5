import asyncio
import os
import sys
import traceback

import aiohttp
import cachetools
import sentry_sdk
from gidgethub import actions, sansio
from gidgethub import aiohttp as gh_aiohttp

from . import activity, close_stale, config, util

REQUESTER = "stalebot"

cache = cachetools.LRUCache(maxsize=500)


def fail(exc):
    traceback.print_exc(file=sys.stderr)
    sentry_sdk.capture_exception(exc)
    util.error(f"Run error: {exc}")
    sys.exit(1)


async def run(options, repository, event_payload):
    async with aiohttp.ClientSession() as session:
        gh = gh_aiohttp.GitHubAPI(
            session, REQUESTER, oauth_token=options.repo_token, cache=cache)
        if options.mode is config.Mode.close:
            report = await close_stale.Sweep(gh, repository, options).run()
            util.info(f"Closed {len(report.closed)} item(s) using "
                      f"{report.operations} operation(s)")
        else:
            event = sansio.Event(
                event_payload,
                event=os.environ.get("GITHUB_EVENT_NAME", ""),
                delivery_id=os.environ.get("GITHUB_RUN_ID", ""),
            )
            await activity.router.dispatch(
                event, gh, options=options, repository=repository)
        try:
            util.info(f"GH requests remaining: {gh.rate_limit.remaining}")
        except AttributeError:
            pass


async def main(event_payload):
    sentry_sdk.init(os.environ.get("SENTRY_DSN"))
    try:
        options = config.get_options()
        repository = config.repository()
        await run(options, repository, event_payload)
    except Exception as exc:
        fail(exc)


if __name__ == "__main__":  # pragma: no cover
    asyncio.run(main(actions.event()))
