import logging
import re
from pathlib import Path

import pytest

from html_filter import parse

DATA_DIR = Path(__file__).resolve().parent / "data"
INDEX_PATH = DATA_DIR / "index.html"


def _normalize(html: str) -> str:
    # whitespace and quote-independent view of serialized markup
    return re.sub(r"\s+", "", html)


@pytest.fixture
def normalize():
    return _normalize


@pytest.fixture
def index_path() -> Path:
    return INDEX_PATH


@pytest.fixture
def index_html() -> str:
    return INDEX_PATH.read_text(encoding="utf-8")


@pytest.fixture
def index_document(index_html):
    return parse(index_html)


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("html_filter")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
