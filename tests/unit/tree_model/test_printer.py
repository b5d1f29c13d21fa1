"""End-to-end tests for depth-first tree output."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirtree.tree_model import (
    BRANCH_CORNER,
    BRANCH_TEE,
    RootAccessError,
    WalkRecord,
    build_entries,
    dir_tree,
    iter_fragments,
    print_tree,
    render_tree,
)

DEEP_NESTING = 1500


def _make_scenario_tree(root: Path) -> None:
    (root / "b").mkdir()
    (root / "a").mkdir()
    (root / "a" / "x.txt").write_bytes(b"hello")


def _make_deep_tree(root: Path) -> None:
    for relative in ("src/pkg/sub", "src/tests", "docs", "zeta/inner/leaf"):
        (root / relative).mkdir(parents=True)
    (root / "src" / "pkg" / "mod.py").write_bytes(b"x = 1\n")
    (root / "src" / "pkg" / "sub" / "blank.txt").write_bytes(b"")
    (root / "README").write_bytes(b"readme")


class DirTreeScenarioTests(unittest.TestCase):
    def test_directories_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_scenario_tree(root)

            out = io.StringIO()
            dir_tree(out, root, include_files=False)

            self.assertEqual(out.getvalue(), "├───a\n└───b\n")

    def test_with_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_scenario_tree(root)

            self.assertEqual(render_tree(root, include_files=True), "├───a\n│\t└───x.txt (5b)\n└───b\n")

    def test_empty_root_renders_empty_string(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(render_tree(Path(tmp), include_files=True), "")

    def test_size_labels(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "empty.dat").write_bytes(b"")
            (root / "kilo.dat").write_bytes(b"\0" * 1024)

            self.assertEqual(
                render_tree(root, include_files=True),
                "├───empty.dat (empty)\n└───kilo.dat (1024b)\n",
            )

    def test_missing_root_propagates_root_access_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = io.StringIO()
            with self.assertRaises(RootAccessError):
                dir_tree(out, Path(tmp) / "missing")
            self.assertEqual(out.getvalue(), "")

    def test_deep_tree_matches_expected_layout(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_deep_tree(root)

            expected = (
                "├───README (6b)\n"
                "├───docs\n"
                "├───src\n"
                "│\t├───pkg\n"
                "│\t│\t├───mod.py (6b)\n"
                "│\t│\t└───sub\n"
                "│\t│\t\t└───blank.txt (empty)\n"
                "│\t└───tests\n"
                "└───zeta\n"
                "\t└───inner\n"
                "\t\t└───leaf\n"
            )
            self.assertEqual(render_tree(root, include_files=True), expected)


class TreePropertyTests(unittest.TestCase):
    def test_one_line_per_entry(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_deep_tree(root)

            for include_files in (False, True):
                entries = build_entries(root, include_files)
                output = render_tree(root, include_files)
                self.assertEqual(output.count("\n"), len(entries))

    def test_line_prefix_has_one_unit_per_ancestor_then_one_glyph(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_deep_tree(root)

            entries = build_entries(root, include_files=True)
            for entry in entries:
                line = entry.rendered
                rest = line
                for _level in range(entry.depth - 1):
                    if rest.startswith("│\t"):
                        rest = rest[2:]
                    else:
                        self.assertTrue(rest.startswith("\t"), line)
                        rest = rest[1:]
                self.assertTrue(rest.startswith((BRANCH_TEE, BRANCH_CORNER)), line)
                self.assertEqual(rest[4:], f"{entry.name}{entry.size}\n")

    def test_output_is_idempotent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_deep_tree(root)

            self.assertEqual(render_tree(root, include_files=True), render_tree(root, include_files=True))

    def test_descendants_follow_their_ancestor_contiguously(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_deep_tree(root)

            entries = build_entries(root, include_files=True)
            order = list(iter_fragments(entries))
            position = {id(entry): order.index(entry.rendered) for entry in entries}

            def subtree_size(entry) -> int:
                return 1 + sum(subtree_size(child) for child in entry.children)

            for entry in entries:
                start = position[id(entry)]
                for child in entry.children:
                    self.assertGreater(position[id(child)], start)
                    self.assertLess(position[id(child)], start + subtree_size(entry))

    def test_output_for_nesting_beyond_recursion_limit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)

            def fake_list(directory: Path):
                directory = Path(directory)
                if len(directory.relative_to(root).parts) >= DEEP_NESTING:
                    return [], None
                return [WalkRecord(path=directory / "d", name="d", size=0, is_dir=True)], None

            with mock.patch("dirtree.tree_model.fs.list_directory_records", side_effect=fake_list):
                output = render_tree(root)

            lines = output.splitlines(keepends=True)
            self.assertEqual(len(lines), DEEP_NESTING)
            self.assertEqual(lines[0], "└───d\n")
            self.assertEqual(lines[-1], "\t" * (DEEP_NESTING - 1) + "└───d\n")

    def test_print_tree_writes_fragments_verbatim(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_scenario_tree(root)

            entries = build_entries(root, include_files=True)
            out = io.StringIO()
            print_tree(entries, out)

            self.assertEqual(out.getvalue(), "".join(iter_fragments(entries)))


if __name__ == "__main__":
    unittest.main()
