import pytest

from customprops import CustomPropertyAccessor


class FakeControl:
    """Plain object carrying its records under `CustomProperties`."""

    def __init__(self, records=None):
        self.CustomProperties = records


class FakeRecord:
    def __init__(self, Name, Value=None):
        self.Name = Name
        self.Value = Value


@pytest.fixture
def accessor():
    return CustomPropertyAccessor()


@pytest.fixture
def control():
    return {
        "CustomProperties": [
            {"Name": "A", "Value": 1},
            {"Name": "B", "Value": "two"},
        ]
    }
