import http

import gidgethub
from gidgethub import sansio


class FakeGH:
    """Record calls and serve canned responses keyed by expanded URL."""

    def __init__(self, *, getitem=None, delete=None, patch=None, post=None):
        self._getitem_return = getitem or {}
        self._delete_return = delete or {}
        self._patch_return = patch or {}
        self._post_return = post or {}
        self.getitem_urls = []
        self.post_ = []
        self.patch_ = []
        self.delete_ = []
        self.rate_limit = None

    @property
    def writes(self):
        return self.post_ + self.patch_ + self.delete_

    async def getitem(self, url, url_vars={}):
        getitem_url = sansio.format_url(url, url_vars)
        self.getitem_urls.append(getitem_url)
        to_return = self._getitem_return.get(getitem_url, [])
        if isinstance(to_return, Exception):
            raise to_return
        return to_return

    async def post(self, url, url_vars={}, *, data):
        post_url = sansio.format_url(url, url_vars)
        self.post_.append((post_url, data))
        if isinstance(self._post_return.get(post_url), Exception):
            raise self._post_return[post_url]

    async def patch(self, url, url_vars={}, *, data):
        patch_url = sansio.format_url(url, url_vars)
        self.patch_.append((patch_url, data))
        if isinstance(self._patch_return.get(patch_url), Exception):
            raise self._patch_return[patch_url]

    async def delete(self, url, url_vars={}):
        delete_url = sansio.format_url(url, url_vars)
        self.delete_.append(delete_url)
        if isinstance(self._delete_return.get(delete_url), Exception):
            raise self._delete_return[delete_url]


def not_found():
    return gidgethub.BadRequest(status_code=http.HTTPStatus(404))
