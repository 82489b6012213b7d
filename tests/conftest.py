"""
Pytest configuration for filedemo tests.

Every app under test is built with create_app() against a temp data
directory, so tests never depend on ./data in the working directory.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from filedemo.infra.config import Settings
from filedemo.main import create_app


@pytest.fixture
def data_dir(tmp_path):
    """A data directory with one file, a nested file and a sub-site with an index"""
    root = tmp_path / "data"
    root.mkdir()
    (root / "hello.txt").write_text("hi")
    (root / "nested").mkdir()
    (root / "nested" / "deep.txt").write_text("deep")
    (root / "site").mkdir()
    (root / "site" / "index.html").write_text("<h1>index</h1>")
    return root


@pytest.fixture
def settings(data_dir):
    return Settings(FILES_DIR=str(data_dir))


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def async_client(app):
    """httpx client bound to the ASGI app"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
