from __future__ import annotations

import pytest

from wp_package_parser.core.headers import (
    PLUGIN_HEADER_FIELDS,
    THEME_HEADER_FIELDS,
    get_file_headers,
    get_plugin_headers,
    get_theme_headers,
    strip_tags,
)


@pytest.mark.parametrize(
    "line",
    [
        "Version: 1.2.3",
        " * Version: 1.2.3",
        "// Version: 1.2.3",
        "# Version: 1.2.3",
        "\t@Version:   1.2.3   ",
        "/* Version: 1.2.3 */",
        "Version: 1.2.3 ?>",
    ],
)
def test_version_with_comment_decoration(line: str) -> None:
    text = f"<?php\n{line}\nother stuff\n"
    assert get_file_headers(text, {"Version": "Version"}) == {"Version": "1.2.3"}


def test_missing_field_is_empty_string() -> None:
    headers = get_file_headers("Version: 1.0\n", {"Version": "Version", "Author": "Author"})
    assert headers == {"Version": "1.0", "Author": ""}


def test_label_is_case_insensitive() -> None:
    assert get_file_headers("plugin name: Foo", {"Name": "Plugin Name"}) == {"Name": "Foo"}


def test_first_occurrence_wins() -> None:
    text = "Version: 1.0\nVersion: 2.0\n"
    assert get_file_headers(text, {"Version": "Version"})["Version"] == "1.0"


def test_label_is_matched_literally() -> None:
    text = "Plugin.URI: nope\nPlugin URI: https://example.com\n"
    headers = get_file_headers(text, {"PluginURI": "Plugin URI", "Weird": "Plugin.URI"})
    assert headers["PluginURI"] == "https://example.com"
    assert headers["Weird"] == "nope"

    assert get_file_headers("PluginXURI: x", {"Weird": "Plugin.URI"}) == {"Weird": ""}


def test_label_must_start_the_line() -> None:
    text = "$x = 'Version: 9.9';\n"
    assert get_file_headers(text, {"Version": "Version"}) == {"Version": ""}


def test_carriage_return_line_endings() -> None:
    text = "/*\rPlugin Name: Old Mac\rVersion: 0.1\r*/"
    headers = get_file_headers(text, {"Name": "Plugin Name", "Version": "Version"})
    assert headers == {"Name": "Old Mac", "Version": "0.1"}


def test_bytes_input_is_decoded() -> None:
    headers = get_file_headers("Author: Zoë\n".encode("utf-8"), {"Author": "Author"})
    assert headers == {"Author": "Zoë"}


def test_value_truncated_at_closing_markers() -> None:
    text = "Description: Does things */ trailing\n"
    assert get_file_headers(text, {"Description": "Description"}) == {"Description": "Does things"}


def test_get_file_headers_is_idempotent(plugin_php: str) -> None:
    first = get_file_headers(plugin_php, PLUGIN_HEADER_FIELDS)
    second = get_file_headers(plugin_php, PLUGIN_HEADER_FIELDS)
    assert first == second


def test_plugin_headers(plugin_php: str) -> None:
    headers = get_plugin_headers(plugin_php)

    assert headers is not None
    assert headers["Name"] == "Hello Archive"
    assert headers["Title"] == "Hello Archive"
    assert headers["Version"] == "1.2.3"
    assert headers["PluginURI"] == "https://example.com/hello-archive"
    assert headers["AuthorURI"] == "https://example.com"
    assert headers["TextDomain"] == "hello-archive"
    assert headers["DomainPath"] == ""
    assert headers["Network"] is False
    assert "_sitewide" not in headers


def test_plugin_without_name_is_not_a_plugin() -> None:
    assert get_plugin_headers("<?php\n/*\nVersion: 1.0\nAuthor: Nobody\n*/") is None
    assert get_plugin_headers("") is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Network: true", True),
        ("Network: TRUE", True),
        ("Network: yes", False),
        ("Network: false", False),
        ("Site Wide Only: true", True),
        ("Network: false\nSite Wide Only: true", False),
        ("", False),
    ],
)
def test_plugin_network_flag(text: str, expected: bool) -> None:
    headers = get_plugin_headers(f"Plugin Name: Net\n{text}\n")
    assert headers is not None
    assert headers["Network"] is expected


def test_theme_headers(style_css: str) -> None:
    headers = get_theme_headers(style_css)

    assert headers is not None
    assert headers["Name"] == "Twenty Archive"
    assert headers["Template"] == "twentytwenty"
    assert headers["Tags"] == ["Dark", "Light", "Responsive"]
    assert headers["DetailsURI"] == ""
    assert set(headers) == set(THEME_HEADER_FIELDS)


def test_theme_tags_markup_is_stripped() -> None:
    headers = get_theme_headers("Theme Name: T\nTags: <b>dark</b>, <i>light</i>,\n")
    assert headers is not None
    assert headers["Tags"] == ["dark", "light"]


def test_theme_without_tags_has_empty_list() -> None:
    headers = get_theme_headers("Theme Name: T\n")
    assert headers is not None
    assert headers["Tags"] == []


def test_theme_without_name_is_not_a_theme() -> None:
    assert get_theme_headers("/* Tags: a, b */") is None


def test_strip_tags() -> None:
    assert strip_tags("plain text") == "plain text"
    assert strip_tags("<p>Hello <em>world</em></p>") == "Hello world"


def test_theme_tags_entities_decoded_with_or_without_markup() -> None:
    plain = get_theme_headers("Theme Name: T\nTags: Dark &amp; Light, X\n")
    marked = get_theme_headers("Theme Name: T\nTags: <b>Dark</b> &amp; Light, X\n")

    assert plain is not None and marked is not None
    assert plain["Tags"] == marked["Tags"] == ["Dark & Light", "X"]


def test_strip_tags_decodes_entities_in_plain_text() -> None:
    assert strip_tags("Fish &amp; Chips") == "Fish & Chips"
