import pytest

from catchy.falsestring import FalseString


def test_true_is_truthy():
    result = FalseString.true()
    assert result.is_true()
    assert bool(result) is True
    assert result.reason == ""


def test_false_keeps_reason():
    result = FalseString.false("broken")
    assert not result.is_true()
    assert bool(result) is False
    assert result.reason == "broken"


def test_false_requires_reason():
    with pytest.raises(ValueError):
        FalseString.false("")


def test_str_of_true():
    assert str(FalseString.true()) == "<true>"


def test_str_of_false_is_reason():
    assert str(FalseString.false("bad value")) == "bad value"


def test_combine_both_true():
    combined = FalseString.combine(FalseString.true(), FalseString.true())
    assert combined.is_true()


def test_combine_both_false_joins_reasons():
    combined = FalseString.combine(FalseString.false("a"), FalseString.false("b"))
    assert not combined
    assert combined.reason == "a\nb"


@pytest.mark.parametrize("first_false", [True, False])
def test_combine_one_false_keeps_that_one(first_false):
    failure = FalseString.false("only")
    pair = (failure, FalseString.true()) if first_false else (FalseString.true(), failure)
    combined = FalseString.combine(*pair)
    assert combined == failure


def test_equality_by_reason():
    assert FalseString.false("x") == FalseString.false("x")
    assert FalseString.true() == FalseString.true()
    assert not (FalseString.false("x") == FalseString.true())