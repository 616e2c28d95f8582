# tests/contracts/test_errors.py
"""Tests for the object store error taxonomy."""

from pathlib import Path

import pytest


class TestErrorHierarchy:
    """Every store failure is catchable as ObjectStoreError."""

    @pytest.mark.parametrize(
        "name",
        [
            "NotARepositoryError",
            "ObjectStoreIOError",
            "ParentDirectoryMissingError",
            "PrefixTooShortError",
            "ObjectNotFoundError",
            "AmbiguousPrefixError",
            "InvalidObjectKindError",
            "CorruptObjectError",
        ],
    )
    def test_subclasses_base(self, name: str) -> None:
        import zgit.contracts.errors as errors

        assert issubclass(getattr(errors, name), errors.ObjectStoreError)


class TestErrorContext:
    """Errors carry the context needed to report them precisely."""

    def test_not_a_repository(self) -> None:
        from zgit.contracts.errors import NotARepositoryError

        err = NotARepositoryError(Path("/work/project"), ".zgit")
        assert err.path == Path("/work/project")
        assert err.marker == ".zgit"
        assert "Not a zgit repository" in str(err)
        assert "/work/project" in str(err)

    def test_io_error_keeps_strerror(self) -> None:
        import errno

        from zgit.contracts.errors import ObjectStoreIOError

        cause = OSError(errno.ENOSPC, "No space left on device")
        err = ObjectStoreIOError(Path("/r/.zgit/objects/ab/cd"), "writing", cause)
        assert err.operation == "writing"
        assert "No space left on device" in str(err)
        assert "/r/.zgit/objects/ab/cd" in str(err)

    def test_prefix_too_short(self) -> None:
        from zgit.contracts.errors import PrefixTooShortError

        err = PrefixTooShortError("a", 2)
        assert err.prefix == "a"
        assert err.minimum == 2
        assert "too short" in str(err)

    def test_ambiguous_candidates_are_sorted(self) -> None:
        from zgit.contracts.errors import AmbiguousPrefixError

        err = AmbiguousPrefixError("03", ["0399", "0335"])
        assert err.candidates == ["0335", "0399"]
        assert "ambiguous" in str(err)
        assert "2 objects" in str(err)

    def test_corrupt_object_with_and_without_path(self) -> None:
        from zgit.contracts.errors import CorruptObjectError

        assert str(CorruptObjectError("bad header")) == "Corrupt object: bad header"
        err = CorruptObjectError("bad header", Path("/r/x"))
        assert err.reason == "bad header"
        assert "at /r/x" in str(err)

    def test_messages_are_distinct(self) -> None:
        from zgit.contracts import errors

        messages = {
            str(errors.NotARepositoryError(Path("/p"), ".zgit")),
            str(errors.ObjectStoreIOError(Path("/p"), "reading", OSError(5, "I/O error"))),
            str(errors.ParentDirectoryMissingError(Path("/p"))),
            str(errors.PrefixTooShortError("p", 2)),
            str(errors.ObjectNotFoundError("pp")),
            str(errors.AmbiguousPrefixError("pp", ["pp1", "pp2"])),
            str(errors.InvalidObjectKindError("p")),
            str(errors.CorruptObjectError("p")),
        }
        assert len(messages) == 8
