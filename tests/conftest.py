from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable

import pytest

PLUGIN_PHP = """<?php
/*
Plugin Name: Hello Archive
Plugin URI: https://example.com/hello-archive
Description: Says hello from inside a ZIP file.
Version: 1.2.3
Author: Jane Doe
Author URI: https://example.com
Text Domain: hello-archive
*/

function hello_archive() {
    return 'hello';
}
"""

STYLE_CSS = """/*
Theme Name: Twenty Archive
Theme URI: https://example.com/twenty-archive
Author: The Theme Team
Description: A theme shipped as a ZIP file.
Version: 2.0
Template: twentytwenty
Tags: Dark, Light, , Responsive
Text Domain: twenty-archive
*/

body { color: #333; }
"""

README_TXT = """=== Hello Archive ===
Contributors: alice, bob
Donate link: https://example.com/donate
Tags: zip, metadata
Requires at least: 5.0
Tested up to: 6.4
Stable tag: 1.2.3

Says hello from inside a ZIP file.

== Description ==

A longer description.

== Installation ==

1. Upload the plugin.
2. Activate it.

== Changelog ==

= 1.2.3 =
* Fixed things.

== Upgrade Notice ==

= 1.2.3 =
Please upgrade, it fixes things.

= 1.0 =
First release.
"""


@pytest.fixture()
def make_zip(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Build a ZIP archive from a {name: content} mapping (entries keep their order)."""

    def _make(files: dict[str, str | bytes], name: str = "package.zip") -> Path:
        archive = tmp_path / name
        with zipfile.ZipFile(archive, "w", zipfile.ZIP_DEFLATED) as zf:
            for entry_name, content in files.items():
                zf.writestr(entry_name, content)
        return archive

    return _make


@pytest.fixture()
def plugin_zip(make_zip) -> Path:
    return make_zip({
        "hello-archive/": "",
        "hello-archive/hello-archive.php": PLUGIN_PHP,
        "hello-archive/readme.txt": README_TXT,
    })


@pytest.fixture()
def theme_zip(make_zip) -> Path:
    return make_zip({
        "twenty-archive/": "",
        "twenty-archive/functions.php": "<?php\n// no headers here\n",
        "twenty-archive/style.css": STYLE_CSS,
        "twenty-archive/index.php": "<?php\n",
    })


@pytest.fixture()
def plugin_php() -> str:
    return PLUGIN_PHP


@pytest.fixture()
def style_css() -> str:
    return STYLE_CSS


@pytest.fixture()
def readme_txt() -> str:
    return README_TXT
