import re
from datetime import datetime, timedelta, timezone

from creature_sighting.kaiju import KaijuGenerator
from creature_sighting.sighting import Registry


def test_category_is_kaiju():
    assert KaijuGenerator().category() == "kaiju"


def test_generator_registers_under_its_category():
    gen = KaijuGenerator()
    registry = Registry()
    registry.register(gen.category(), gen)
    assert registry.get("kaiju") is gen
    assert registry.categories() == ["kaiju"]


def test_generated_fields_come_from_the_fixed_sets():
    gen = KaijuGenerator()
    for _ in range(50):
        s = gen.generate()
        assert s.name in KaijuGenerator.NAMES
        assert s.type in KaijuGenerator.TYPES
        assert s.location in KaijuGenerator.LOCATIONS
        assert s.attributes["size"] in KaijuGenerator.SIZES
        assert s.attributes["behavior"] in KaijuGenerator.BEHAVIORS
        assert s.category == "kaiju"


def test_description_matches_attributes():
    s = KaijuGenerator().generate()
    expected = (
        f"A {s.attributes['size']} {s.type} kaiju displaying "
        f"{s.attributes['behavior']} behavior"
    )
    assert s.description == expected


def test_height_is_within_range():
    gen = KaijuGenerator()
    for _ in range(100):
        match = re.fullmatch(r"(\d+) meters", gen.generate().attributes["height"])
        assert match is not None
        assert 50 <= int(match.group(1)) <= 300


def test_id_has_kaiju_prefix_and_numeric_suffix():
    s = KaijuGenerator().generate()
    prefix, separator, suffix = s.id.partition("-")
    assert prefix == "kaiju"
    assert separator == "-"
    assert suffix.isdigit()


def test_ids_are_unique():
    gen = KaijuGenerator()
    ids = {gen.generate().id for _ in range(200)}
    assert len(ids) == 200


def test_timestamp_is_timezone_aware_and_recent():
    s = KaijuGenerator().generate()
    delta = abs(datetime.now(timezone.utc) - s.timestamp)
    assert delta < timedelta(seconds=5)


def test_choices_vary():
    gen = KaijuGenerator()
    names = {gen.generate().name for _ in range(200)}
    assert len(names) > 1