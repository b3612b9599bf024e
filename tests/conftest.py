import re
import sys
import textwrap

import pytest

SCHEMAS = textwrap.dedent('''
    from pipecheck import ValidationError, create_schema, object_schema

    string = create_schema("string", "")
    number = create_schema("number", 0)


    def _email(value):
        if "@" not in value:
            raise ValidationError("Invalid email")


    def _min(value, low):
        if value < low:
            raise ValidationError(f"Must be at least {low}")


    user = object_schema({
        "email": string([string.create(_email)()]),
        "age": number([number.create(_min)(18)]),
        "numbers": {"one": number()},
    })
    name = string()
    not_a_validator = 42
''')


@pytest.fixture
def schema_module(tmp_path, monkeypatch):
    """Write an importable module of validators and return its name."""
    name = "sample_schemas_" + re.sub(r"\W", "_", tmp_path.name)
    (tmp_path / f"{name}.py").write_text(SCHEMAS, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.chdir(tmp_path)
    yield name
    sys.modules.pop(name, None)
