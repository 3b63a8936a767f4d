"""Tests for the clone orchestration with git and prompts replaced by fakes."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from rich.console import Console

from git_smart_clone.clone import CloneService
from git_smart_clone.exceptions import InvalidSegmentError, MissingOwnerOrRepoError, UserAbort
from git_smart_clone.models import ResolvedTarget


class FakeGit:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def clone(self, remote: str, target: Path) -> None:
        self.calls.append(("clone", remote, str(target)))
        (target / ".git").mkdir()

    def checkout(self, path: Path, branch: str) -> None:
        self.calls.append(("checkout", str(path), branch))


class FakeConfirm:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.asked: list[ResolvedTarget] = []

    def __call__(self, target: ResolvedTarget) -> bool:
        self.asked.append(target)
        return self.answer


class CloneServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = self._tmp.name
        self.dest = Path(self.root) / "github.com" / "acme" / "widget"
        self.git = FakeGit()
        self.output = io.StringIO()

    def _service(self, answer: bool = True) -> tuple[CloneService, FakeConfirm]:
        confirm = FakeConfirm(answer)
        service = CloneService(
            root=self.root,
            confirm=confirm,
            git_runner=self.git,
            console=Console(file=self.output),
        )
        return service, confirm

    def test_clones_into_new_directory(self) -> None:
        service, confirm = self._service()

        path = service.clone("https://github.com/acme/widget/tree/dev")

        self.assertEqual(path, self.dest)
        self.assertEqual(self.git.calls, [("clone", "git@github.com:acme/widget.git", str(self.dest))])
        self.assertEqual(confirm.asked, [])
        self.assertIn("Cloning acme/widget", self.output.getvalue())

    def test_branch_override_checks_out_after_clone(self) -> None:
        service, _ = self._service()

        service.clone("acme/widget", branch="release")

        self.assertEqual(self.git.calls[-1], ("checkout", str(self.dest), "release"))

    def test_https_protocol(self) -> None:
        service, _ = self._service()

        service.clone("acme/widget", protocol="https")

        self.assertEqual(self.git.calls[0][1], "https://github.com/acme/widget.git")

    def test_empty_directory_skips_confirmation(self) -> None:
        self.dest.mkdir(parents=True)
        service, confirm = self._service(answer=False)

        service.clone("acme/widget")

        self.assertEqual(confirm.asked, [])
        self.assertEqual(len(self.git.calls), 1)

    def test_declined_overwrite_leaves_destination_untouched(self) -> None:
        self.dest.mkdir(parents=True)
        keep = self.dest / "notes.txt"
        keep.write_text("keep me")
        service, confirm = self._service(answer=False)

        with self.assertRaises(UserAbort):
            service.clone("acme/widget")

        self.assertEqual(len(confirm.asked), 1)
        self.assertTrue(keep.exists())
        self.assertEqual(self.git.calls, [])

    def test_accepted_overwrite_replaces_destination(self) -> None:
        self.dest.mkdir(parents=True)
        (self.dest / "notes.txt").write_text("stale")
        service, confirm = self._service(answer=True)

        service.clone("acme/widget")

        self.assertTrue(confirm.asked[0].requires_confirmation)
        self.assertFalse((self.dest / "notes.txt").exists())
        self.assertTrue((self.dest / ".git").is_dir())

    def test_dot_repository_cannot_wipe_owner_directory(self) -> None:
        sibling = Path(self.root) / "github.com" / "acme" / "widget" / "work.txt"
        sibling.parent.mkdir(parents=True)
        sibling.write_text("keep me")
        service, confirm = self._service(answer=True)

        for raw in ["acme/.", "acme/..", "../.."]:
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidSegmentError):
                    service.clone(raw)

        self.assertEqual(confirm.asked, [])
        self.assertTrue(sibling.exists())
        self.assertEqual(self.git.calls, [])

    def test_parse_errors_stop_before_touching_disk(self) -> None:
        service, _ = self._service()

        with self.assertRaises(MissingOwnerOrRepoError):
            service.clone("onlyowner")

        self.assertFalse((Path(self.root) / "github.com").exists())
        self.assertEqual(self.git.calls, [])


if __name__ == "__main__":
    unittest.main()
