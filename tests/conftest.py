import pytest

from newsie.cache import ReadStateCache, bootstrap_cache
from newsie.models import FeedItem


@pytest.fixture
def cache_path(tmp_path):
    """An empty, bootstrapped cache file under a temp directory."""
    return bootstrap_cache(tmp_path / "newsie")


@pytest.fixture
def cache(cache_path):
    return ReadStateCache.open(cache_path)


@pytest.fixture
def items():
    return [
        FeedItem(
            title="Kernel 6.9 needs manual intervention",
            description="<p>Run <code>pacman -Syu</code> twice.</p>",
            published="Mon, 01 Jul 2024 10:00:00 +0000",
            link="https://archlinux.org/news/kernel/",
        ),
        FeedItem(
            title="Mirror changes",
            description="<p>Nothing to do.</p>",
            published="Tue, 02 Jul 2024 10:00:00 +0000",
            link="https://archlinux.org/news/mirrors/",
        ),
        FeedItem(
            title="grub update",
            description="<p>Reinstall <code>grub</code>.</p>",
            published="Wed, 03 Jul 2024 10:00:00 +0000",
            link="https://archlinux.org/news/grub/",
        ),
    ]
