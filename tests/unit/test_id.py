"""Tests for id generation."""

from pageforge.core import InstanceIdMinter, new_resource_url, is_resource_url
from pageforge.core.id import split_instance_id


def test_mint_uses_type_and_clock():
    """Test ids are type plus millisecond suffix."""
    minter = InstanceIdMinter(clock=lambda: 1678886400000)
    assert minter.mint("Input") == "Input-1678886400000"


def test_mint_same_millisecond_is_unique():
    """Test rapid mints within one millisecond stay distinct and increasing."""
    minter = InstanceIdMinter(clock=lambda: 1000)
    ids = [minter.mint("Button") for _ in range(50)]

    assert len(set(ids)) == 50
    suffixes = [split_instance_id(i)[1] for i in ids]
    assert suffixes == sorted(suffixes)


def test_mint_clock_going_backwards():
    """Test a clock step backwards never reuses a suffix."""
    ticks = iter([5000, 4000, 4000, 6000])
    minter = InstanceIdMinter(clock=lambda: next(ticks))

    ids = [minter.mint("Text") for _ in range(4)]

    assert ids == ["Text-5000", "Text-5001", "Text-5002", "Text-6000"]


def test_mint_real_clock_many():
    """Test the default clock yields distinct ids."""
    minter = InstanceIdMinter()
    ids = {minter.mint("Image") for _ in range(500)}
    assert len(ids) == 500


def test_split_instance_id():
    """Test splitting minted ids."""
    assert split_instance_id("Input-1678886400000") == ("Input", 1678886400000)
    assert split_instance_id("Card@1.2.0-42") == ("Card@1.2.0", 42)
    assert split_instance_id("custom") is None
    assert split_instance_id("A-b") is None


def test_resource_urls():
    """Test resource url format and uniqueness."""
    urls = {new_resource_url() for _ in range(100)}

    assert len(urls) == 100
    assert all(is_resource_url(u) for u in urls)
    assert not is_resource_url("https://example.com/a.png")
    assert not is_resource_url(None)
