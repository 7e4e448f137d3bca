import pytest

from cssbuild.selector import SelectorBuilder


@pytest.fixture
def builder():
    return SelectorBuilder()


@pytest.fixture
def nested_blueprint():
    return """
    {
        "left": {"fragments": [
            {"kind": "element", "value": "div"},
            {"kind": "id", "value": "main"},
            {"kind": "class", "value": "container"},
            {"kind": "class", "value": "draggable"}
        ]},
        "combinator": "+",
        "right": {
            "left": {"fragments": [
                {"kind": "element", "value": "table"},
                {"kind": "id", "value": "data"}
            ]},
            "combinator": "~",
            "right": {
                "left": {"fragments": [
                    {"kind": "element", "value": "tr"},
                    {"kind": "pseudo_class", "value": "nth-of-type(even)"}
                ]},
                "combinator": " ",
                "right": {"fragments": [
                    {"kind": "element", "value": "td"},
                    {"kind": "pseudo_class", "value": "nth-of-type(even)"}
                ]}
            }
        }
    }
    """


@pytest.fixture
def nested_selector():
    return 'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line('markers', 'integration: marks tests as integration tests')
    config.addinivalue_line('markers', 'unit: marks tests as unit tests')


def pytest_collection_modifyitems(config, items):
    """Apply directory-based marks to collected test items."""

    for item in items:
        if hasattr(item, 'fspath'):
            file_path = str(item.fspath)

            if '/tests/integration/' in file_path:
                item.add_marker(pytest.mark.integration)
            elif '/tests/unit/' in file_path:
                item.add_marker(pytest.mark.unit)
