import pytest

from cooklang_indexer.normalize import normalize


@pytest.mark.parametrize(
    "raw, exp",
    [
        # Already normalised
        ("onion", "onion"),
        # Case
        ("Onion", "onion"),
        ("ONION", "onion"),
        # Surrounding whitespace
        ("  onion\t", "onion"),
        # Internal whitespace runs
        ("red   onion", "red onion"),
        ("red\t\nonion", "red onion"),
        # Case folding beyond lower()
        ("Straße", "strasse"),
        # Plurals are left alone
        ("Onions", "onions"),
        # Empty
        ("", ""),
        ("   ", ""),
    ],
)
def test_normalize(raw: str, exp: str) -> None:
    assert normalize(raw) == exp


def test_case_variants_collapse() -> None:
    assert normalize("Onion") == normalize("onion") == normalize(" ONION ")
