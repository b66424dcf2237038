import pytest

from appicongen.manifest import loader, planner
from appicongen.manifest.models import Manifest
from appicongen.manifest.planner import PlannedRendition, leading_number, pixel_edge


def make_manifest(*images) -> Manifest:
    return Manifest.model_validate({"images": list(images), "info": {"author": "xcode", "version": 1}})


def entry(filename, size="20x20", scale="2x", idiom="iphone"):
    image = {"idiom": idiom, "size": size, "scale": scale}
    if filename is not None:
        image["filename"] = filename
    return image


def test_bundled_plan_has_one_entry_per_distinct_filename():
    manifest = loader.load()
    rendition_plan = planner.plan(manifest)
    distinct = {spec.filename for spec in manifest.images if spec.filename}

    assert len(rendition_plan) == len(distinct) == 35
    assert len(set(rendition_plan.filenames)) == len(rendition_plan)
    assert set(rendition_plan.filenames) <= distinct
    assert rendition_plan.manifest is manifest


def test_bundled_plan_pixel_sizes():
    sizes = {item.filename: item.pixels for item in planner.plan(loader.load())}

    assert sizes["Icon-20@2x.png"] == 40
    assert sizes["Icon-83.5@2x.png"] == 167
    assert sizes["Icon-Watch-27.5@2x.png"] == 55
    assert sizes["Icon-1024.png"] == 1024
    assert sizes["Icon-Mac-512@2x.png"] == 1024


def test_entries_without_filename_are_skipped(small_manifest):
    rendition_plan = planner.plan(small_manifest)

    assert rendition_plan.filenames == ["a.png", "b.png", "c.png"]


def test_first_filename_wins(small_manifest):
    rendition_plan = planner.plan(small_manifest)

    assert rendition_plan[0] == PlannedRendition("a.png", 40.0)


def test_order_follows_first_occurrence():
    manifest = make_manifest(entry("z.png"), entry("a.png"), entry("z.png", size="99x99"), entry("m.png"))

    assert planner.plan(manifest).filenames == ["z.png", "a.png", "m.png"]


@pytest.mark.parametrize(
    "size, scale",
    [
        ("abcx20", "2x"),
        ("20x20", "twox"),
        ("", "2x"),
        ("20x20", ""),
        ("x20", "2x"),
        ("0x0", "1x"),
        ("-20x-20", "2x"),
        ("nanxnan", "1x"),
        ("20x20", "infx"),
        ("1e200x1e200", "1e200x"),
    ],
)
def test_unparsable_entries_are_dropped(size, scale):
    manifest = make_manifest(entry("bad.png", size=size, scale=scale), entry("good.png"))

    assert planner.plan(manifest).filenames == ["good.png"]


def test_malformed_first_entry_does_not_block_a_later_good_one():
    manifest = make_manifest(entry("a.png", size="??"), entry("a.png", size="30x30", scale="1x"))

    assert list(planner.plan(manifest)) == [PlannedRendition("a.png", 30.0)]


def test_empty_manifest():
    assert len(planner.plan(make_manifest())) == 0


@pytest.mark.parametrize(
    "value, expected",
    [("83.5x83.5", 83.5), ("2x", 2.0), ("1024x1024", 1024.0), ("3", 3.0), ("x", None), (None, None)],
)
def test_leading_number(value, expected):
    assert leading_number(value) == expected


@pytest.mark.parametrize(
    "target, expected",
    [(40.0, 40), (167.0, 167), (27.5, 28), (83.4, 83), (0.2, 1)],
)
def test_pixel_edge_rounds_half_up(target, expected):
    assert pixel_edge(target) == expected
