import pytest

URLOPEN = "repo_exporter.core.pagination.urllib.request.urlopen"


class FakeResponse:
    def __init__(self, body, link=None):
        self.headers = {} if link is None else {"Link": link}
        self._body = body.encode("utf-8") if isinstance(body, str) else body

    def read(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeGitHub:
    """Stands in for urlopen: url -> (body, link header) or an exception."""

    def __init__(self, pages):
        self.pages = pages
        self.requests = []

    def __call__(self, req, timeout=None):
        self.requests.append(req)
        page = self.pages.get(req.full_url)
        if page is None:
            raise AssertionError(f"unexpected request to {req.full_url}")
        if isinstance(page, Exception):
            raise page
        body, link = page
        return FakeResponse(body, link)

    @property
    def urls(self):
        return [r.full_url for r in self.requests]


class StubCloner:
    def __init__(self, statuses=None):
        self.statuses = statuses or {}
        self.calls = []

    def clone(self, url, destination):
        self.calls.append((url, destination))
        status = self.statuses.get(url, 0)
        if isinstance(status, Exception):
            raise status
        return status


@pytest.fixture
def make_reader():
    def _make(*answers):
        it = iter(answers)
        prompts = []

        def read_line(prompt):
            prompts.append(prompt)
            try:
                return next(it)
            except StopIteration:
                raise EOFError(prompt)

        read_line.prompts = prompts
        return read_line

    return _make
