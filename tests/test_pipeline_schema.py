import pytest

from docsite_ext import PipelineConfigurationError, load_pipeline_schema, validate_pipeline_configuration


def test_schema_shape():
    schema = load_pipeline_schema()
    assert set(schema["properties"]) == {"transformBlocks", "analyzers", "filters", "transforms", "reporters"}
    assert "idList" in schema["definitions"]


@pytest.mark.parametrize(
    "config",
    [
        {},
        {"analyzers": {"include": "revapi.java"}},
        {"filters": {"include": ["a", "b"], "exclude": "c"}},
        {"transformBlocks": [["t1", "t2"], ["t3"]]},
        {"reporters": {}, "transforms": {"exclude": []}},
    ],
)
def test_valid_configurations(config):
    validate_pipeline_configuration(config)


@pytest.mark.parametrize(
    "config, location",
    [
        ({"analyzers": {"include": 1}}, "analyzers/include"),
        ({"transformBlocks": [["ok", 2]]}, "transformBlocks/0/1"),
        ({"reporters": "all"}, "reporters"),
        ([], "<root>"),
    ],
)
def test_invalid_configurations(config, location):
    with pytest.raises(PipelineConfigurationError) as excinfo:
        validate_pipeline_configuration(config)
    assert any(e.startswith(location + ":") for e in excinfo.value.errors)


def test_all_errors_reported():
    with pytest.raises(PipelineConfigurationError) as excinfo:
        validate_pipeline_configuration({"analyzers": {"include": 1}, "filters": {"exclude": 2}})
    assert len(excinfo.value.errors) == 2
