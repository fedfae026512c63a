from creature_sighting.pages import categories_list, home, layout, locations_list
from creature_sighting.sighting import Location

TOKYO = Location(35.6762, 139.6503, "Tokyo", "Japan", "Asia")
LONDON = Location(51.5074, -0.1278, "London", "UK", "Europe")


def test_layout_wraps_content_in_main():
    page = layout("Home", "<p>body</p>")
    assert page.startswith("<!doctype html>")
    assert page.endswith("<main><p>body</p></main></body></html>")
    assert "<title>Home - Creature Sighting</title>" in page


def test_layout_contains_navigation_links():
    page = layout("Home", "")
    for href in ("/sightings", "/locations", "/categories", "/sighting/random"):
        assert f'href="{href}"' in page
    assert '<link rel="stylesheet" href="/static/style.css">' in page


def test_layout_escapes_title():
    page = layout("<b> & \"q\" 's'", "")
    assert (
        "<title>&lt;b&gt; &amp; &#34;q&#34; &#39;s&#39; - Creature Sighting</title>"
        in page
    )


def test_home_page():
    page = home()
    assert "<title>Home - Creature Sighting</title>" in page
    assert "<h2>Creature Sighting Database v2.1</h2>" in page
    assert "<li>Threat level: YELLOW (Elevated)</li>" in page
    assert page.endswith("</main></body></html>")


def test_categories_list_links_each_category():
    page = categories_list(["kaiju"])
    assert "<title>Entity Classifications - Creature Sighting</title>" in page
    assert (
        '<li><a href="/sightings?category=kaiju">kaiju</a>'
        " - Large-scale entities, urban threat level</li>"
    ) in page


def test_categories_list_keeps_order():
    page = categories_list(["kaiju", "cryptid"])
    assert page.index(">kaiju<") < page.index(">cryptid<")
    assert page.count("<li><a href=\"/sightings?category=") == 2


def test_categories_list_empty():
    page = categories_list([])
    assert "<h3>Active Categories</h3><ul></ul>" in page
    assert "<strong>KAIJU:</strong>" in page


def test_locations_list_renders_location():
    page = locations_list([TOKYO])
    assert "<title>Geographic Data - Creature Sighting</title>" in page
    assert (
        '<li><a href="/sightings?location=Tokyo">Tokyo, Japan</a>'
        " - Asia (35.6762, 139.6503)</li>"
    ) in page


def test_locations_list_negative_coordinates_and_order():
    page = locations_list([LONDON, TOKYO])
    assert "Europe (51.5074, -0.1278)" in page
    assert page.index(">London, UK<") < page.index(">Tokyo, Japan<")


def test_locations_list_whole_number_coordinates():
    page = locations_list([Location(35.0, -0.0, "Tokyo", "Japan", "Asia")])
    assert "Asia (35, -0)</li>" in page


def test_locations_list_escapes_city():
    page = locations_list([Location(1.0, 2.0, "A&B", "Japan", "Asia")])
    assert 'href="/sightings?location=A&amp;B"' in page
    assert ">A&amp;B, Japan</a>" in page


def test_locations_list_empty():
    page = locations_list([])
    assert "<h3>Operational Sites</h3><ul></ul></div>" in page