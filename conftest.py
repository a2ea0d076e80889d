import pytest
from _pytest.config import Config
from _pytest.config.argparsing import Parser
from _pytest.fixtures import FixtureRequest

from data_either import Either, Left, Right


def pytest_addoption(parser: Parser) -> None:
    parser.addoption(
        "--skip_law_tests",
        action="store_true",
        default=False,
        help="skips the functor/monad law tests",
    )


def pytest_configure(config: Config) -> None:
    config.addinivalue_line(
        "markers", "laws: algebraic law tests, run for both Left and Right"
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--skip_law_tests"):
        return
    skip_law_tests = pytest.mark.skip(reason="law tests disabled (--skip_law_tests)")
    for item in items:
        if "laws" in item.keywords:
            item.add_marker(skip_law_tests)


@pytest.fixture(params=[Left("boom"), Right(3)], ids=["left", "right"])
def either(request: FixtureRequest) -> Either[str, int]:
    return request.param
