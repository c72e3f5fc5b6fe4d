#!/usr/bin/env python3
"""
Unit tests for the transfer executor.
"""

import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from sweep_core import (
    RenameOptions, RenamePlan, TransferError, TransferStrategy,
    execute_transfer, walk,
)


class TestExecuteTransfer(unittest.TestCase):
    """Tests for execute_transfer()."""

    def setUp(self):
        """Create a temporary directory with a few files"""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.contents = {
            "one_target.txt": b"first file\x00\x01",
            "two_target.txt": b"second file",
            "sub/three_target.bin": bytes(range(256)),
        }
        for name, data in self.contents.items():
            path = self.temp_dir / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def build_plan(self) -> RenamePlan:
        return walk(RenameOptions(root=self.temp_dir, search="_target", replace="_done"))

    def test_rename(self):
        plan = self.build_plan()
        self.assertEqual(len(plan), 3)

        count = execute_transfer(plan, TransferStrategy.RENAME)

        self.assertEqual(count, 3)
        for src, dst in plan.items():
            self.assertFalse(src.exists())
            self.assertTrue(dst.exists())
        for name, data in self.contents.items():
            renamed = self.temp_dir / name.replace("_target", "_done")
            self.assertEqual(renamed.read_bytes(), data)

    def test_rename_is_default(self):
        plan = self.build_plan()
        execute_transfer(plan)
        self.assertFalse((self.temp_dir / "one_target.txt").exists())

    def test_copy_keeps_originals(self):
        plan = self.build_plan()

        count = execute_transfer(plan, TransferStrategy.COPY)

        self.assertEqual(count, 3)
        for src, dst in plan.items():
            self.assertTrue(src.exists())
            self.assertEqual(src.read_bytes(), dst.read_bytes())

    def test_move_removes_sources(self):
        plan = self.build_plan()

        count = execute_transfer(plan, TransferStrategy.MOVE)

        self.assertEqual(count, 3)
        for name, data in self.contents.items():
            self.assertFalse((self.temp_dir / name).exists())
            self.assertEqual((self.temp_dir / name.replace("_target", "_done")).read_bytes(), data)

    def test_single_rename_pair(self):
        original = self.temp_dir / "example_target.txt"
        original.write_text("dummy")
        new_path = self.temp_dir / "example_.txt"
        plan = RenamePlan()
        plan.add_op(original, new_path)

        self.assertEqual(execute_transfer(plan), 1)
        self.assertFalse(original.exists())
        self.assertTrue(new_path.exists())

    def test_empty_plan(self):
        self.assertEqual(execute_transfer(RenamePlan(), TransferStrategy.COPY), 0)

    def test_progress_callback(self):
        plan = self.build_plan()
        calls = []

        execute_transfer(plan, progress_callback=lambda cur, total, msg: calls.append((cur, total)))

        self.assertEqual(calls, [(1, 3), (2, 3), (3, 3)])

    def test_failure_stops_and_reports_processed(self):
        plan = RenamePlan()
        good = self.temp_dir / "one_target.txt"
        plan.add_op(good, self.temp_dir / "one_done.txt")
        missing = self.temp_dir / "missing.txt"
        plan.add_op(missing, self.temp_dir / "missing_done.txt")
        plan.add_op(self.temp_dir / "two_target.txt", self.temp_dir / "two_done.txt")

        with self.assertRaises(TransferError) as ctx:
            execute_transfer(plan, TransferStrategy.RENAME)

        error = ctx.exception
        self.assertEqual(error.processed, 1)
        self.assertEqual(error.src, missing)
        self.assertIsInstance(error.cause, FileNotFoundError)
        self.assertIn("missing.txt", str(error))
        # Completed work is kept, later entries are untouched
        self.assertTrue((self.temp_dir / "one_done.txt").exists())
        self.assertTrue((self.temp_dir / "two_target.txt").exists())

    def test_move_failure_keeps_source(self):
        plan = RenamePlan()
        src = self.temp_dir / "one_target.txt"
        plan.add_op(src, self.temp_dir / "one_done.txt")

        with patch("sweep_core.exec_rename.shutil.move", side_effect=OSError("disk full")):
            with self.assertRaises(TransferError) as ctx:
                execute_transfer(plan, TransferStrategy.MOVE)

        self.assertEqual(ctx.exception.processed, 0)
        self.assertTrue(src.exists())

    def test_move_keeps_content_and_removes_source(self):
        plan = RenamePlan()
        src = self.temp_dir / "sub" / "three_target.bin"
        dst = self.temp_dir / "sub" / "three_done.bin"
        plan.add_op(src, dst)

        self.assertEqual(execute_transfer(plan, TransferStrategy.MOVE), 1)

        self.assertFalse(src.exists())
        self.assertEqual(dst.read_bytes(), self.contents["sub/three_target.bin"])

    def test_existing_destination_is_never_replaced(self):
        for strategy in TransferStrategy:
            with self.subTest(strategy=strategy):
                src = self.temp_dir / "one_target.txt"
                existing = self.temp_dir / "two_target.txt"
                plan = RenamePlan()
                plan.add_op(src, existing)

                with self.assertRaises(TransferError) as ctx:
                    execute_transfer(plan, strategy)

                self.assertIsInstance(ctx.exception.cause, FileExistsError)
                self.assertEqual(ctx.exception.processed, 0)
                self.assertEqual(existing.read_bytes(), self.contents["two_target.txt"])
                self.assertEqual(src.read_bytes(), self.contents["one_target.txt"])

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_dangling_symlink_destination_is_never_replaced(self):
        link = self.temp_dir / "one_done.txt"
        try:
            os.symlink(self.temp_dir / "nowhere.txt", link)
        except OSError:
            self.skipTest("cannot create symlinks here")
        plan = RenamePlan()
        plan.add_op(self.temp_dir / "one_target.txt", link)

        with self.assertRaises(TransferError) as ctx:
            execute_transfer(plan, TransferStrategy.RENAME)

        self.assertIsInstance(ctx.exception.cause, FileExistsError)
        self.assertTrue(os.path.islink(link))


if __name__ == '__main__':
    unittest.main()
