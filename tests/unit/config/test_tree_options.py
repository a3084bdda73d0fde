"""Tests for run options and color resolution."""

from __future__ import annotations

import unittest
from pathlib import Path

from annotree.config import TreeOptions, color_enabled
from annotree.render import COLOR_PALETTE, PLAIN_PALETTE, RootStyle


class ColorEnabledTests(unittest.TestCase):
    def test_color_is_on_by_default(self) -> None:
        self.assertTrue(color_enabled(False, {}))

    def test_no_color_flag_always_wins(self) -> None:
        self.assertFalse(color_enabled(True, {}))
        self.assertFalse(color_enabled(True, {"CLICOLOR_FORCE": "1"}))

    def test_no_color_env_disables_when_non_empty(self) -> None:
        self.assertFalse(color_enabled(False, {"NO_COLOR": "1"}))
        self.assertTrue(color_enabled(False, {"NO_COLOR": ""}))

    def test_clicolor_force_overrides_no_color_env(self) -> None:
        self.assertTrue(color_enabled(False, {"NO_COLOR": "1", "CLICOLOR_FORCE": "1"}))
        self.assertFalse(color_enabled(False, {"NO_COLOR": "1", "CLICOLOR_FORCE": "0"}))


class TreeOptionsTests(unittest.TestCase):
    def test_defaults_describe_an_unfiltered_bare_tree(self) -> None:
        options = TreeOptions()

        self.assertEqual(options.root, Path("."))
        self.assertIsNone(options.max_depth)
        self.assertFalse(options.show_hidden)
        self.assertIsNone(options.output)
        self.assertIs(options.root_style, RootStyle.BARE)
        self.assertIs(options.palette, COLOR_PALETTE)

    def test_palette_follows_color_flag(self) -> None:
        self.assertIs(TreeOptions(color=False).palette, PLAIN_PALETTE)


if __name__ == "__main__":
    unittest.main()
