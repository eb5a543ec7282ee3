import pytest

from fluent_validator import Validator


@pytest.fixture
def user_schema():
    """Object schema used by the object and check-tool tests."""
    return Validator.object().schema({
        "name": Validator.string().min(1).max(50),
        "email": Validator.email(),
        "age": Validator.number().min(0).max(150).optional(),
        "joined": Validator.timestamp().optional(),
        "tags": Validator.array().items(Validator.string()).optional(),
    })


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Keep FLUENT_VALIDATOR_* settings from the developer's shell out of the tests."""
    for name in (
        "FLUENT_VALIDATOR_LOG_LEVEL",
        "FLUENT_VALIDATOR_PRINT_LEVEL",
        "FLUENT_VALIDATOR_OUTPUT_FORMAT",
        "FLUENT_VALIDATOR_SOURCE_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
