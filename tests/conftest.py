from pathlib import Path

import pytest

from genbuilder.codegen.core.config import GeneratorConfig
from genbuilder.codegen.core.schema import FieldDescriptor, TypeSpec

HERE = Path(__file__).parent


@pytest.fixture
def golden_dir():
    return HERE / "golden"


@pytest.fixture
def schema_path():
    return HERE / "schemas" / "jason.json"


@pytest.fixture
def jason_spec():
    return TypeSpec(
        type_name="Jason",
        fields=(
            FieldDescriptor("count", "int"),
            FieldDescriptor("label", "string"),
        ),
    )


@pytest.fixture
def sample_spec():
    return TypeSpec(
        type_name="Jason",
        fields=(
            FieldDescriptor("t", "time.Time"),
            FieldDescriptor("boolean", "bool"),
            FieldDescriptor("floater", "float64"),
            FieldDescriptor("reader", "io.Reader"),
            FieldDescriptor("integer", "int"),
            FieldDescriptor("integer32", "int32"),
            FieldDescriptor("integer64", "int64"),
        ),
    )


@pytest.fixture
def plain_config(tmp_path):
    """Config without comments or formatting, writing under tmp_path/models."""
    return GeneratorConfig(
        output_dir=str(tmp_path / "models"),
        run_formatter=False,
        add_comments=False,
    )
