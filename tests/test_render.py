"""Shell renderer tests."""

from __future__ import annotations

import unittest

from path_sanitizer.render import ShellSelectionError, render


class RenderTests(unittest.TestCase):
    def test_bash(self) -> None:
        self.assertEqual(render("bash", ["a", "b", "c"]), 'export PATH="a:b:c"')

    def test_zsh(self) -> None:
        self.assertEqual(render("zsh", ["a", "b", "c"]), 'export PATH="a:b:c"')

    def test_fish(self) -> None:
        self.assertEqual(render("fish", ["a", "b", "c"]), 'set -gx PATH "a:b:c"')

    def test_empty_parts(self) -> None:
        self.assertEqual(render("bash", []), 'export PATH=""')

    def test_unknown_shell_raises(self) -> None:
        with self.assertRaises(ShellSelectionError):
            render("csh", ["a"])


if __name__ == "__main__":
    unittest.main()
