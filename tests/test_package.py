import pytest

import secureconfig
from secureconfig.presenter import SecretField, summary_lines


PUBLIC_OBJECTS = [getattr(secureconfig, name) for name in secureconfig.__all__]


@pytest.mark.parametrize(
    "obj",
    PUBLIC_OBJECTS + [SecretField, summary_lines],
    ids=lambda obj: obj.__name__,
)
def test_public_api_is_documented(obj) -> None:
    doc = obj.__doc__ or ""

    # dataclasses synthesize "Name(field: type, ...)" when no docstring is written
    assert doc.strip()
    assert not doc.startswith(f"{obj.__name__}(")
