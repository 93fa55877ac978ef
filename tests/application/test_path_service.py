"""Tests for the path edit application service."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from conftest import PathTree
from pathedit.application.services import PathEditRequest, PathEditResult, PathEditService
from pathedit.features.pathlist import MetadataError, PathOperation


def test_print_forces_one_per_line() -> None:
    service = PathEditService()
    result = service.run(PathEditRequest(operation=PathOperation.PRINT, source="/b:/a:/b"))
    assert result == PathEditResult(directories=("/b", "/a"), one_per_line=True)


def test_new_ignores_current_path() -> None:
    service = PathEditService()
    result = service.run(
        PathEditRequest(operation=PathOperation.NEW, source="/cur", directories=("/x", "/y", "/x"))
    )
    assert result.directories == ("/y", "/x")
    assert result.one_per_line is False
    assert result.report is None


def test_add_and_append_merge_with_current() -> None:
    service = PathEditService()
    add = service.run(
        PathEditRequest(operation=PathOperation.ADD, source="b:a:c", directories=("d", "a"))
    )
    append = service.run(
        PathEditRequest(operation=PathOperation.APPEND, source="b:a:c", directories=("d", "b"))
    )
    assert add.directories == ("d", "a", "b", "c")
    assert append.directories == ("a", "c", "d", "b")


def test_pretty_flag_sets_one_per_line() -> None:
    service = PathEditService()
    result = service.run(
        PathEditRequest(operation=PathOperation.APPEND, source="a", directories=("b",), pretty=True)
    )
    assert result.one_per_line is True


def test_post_processing_applies_after_edit(path_tree: PathTree) -> None:
    service = PathEditService()
    source = path_tree.join("b", "a", "c", "z")
    result = service.run(
        PathEditRequest(
            operation=PathOperation.ADD,
            source=source,
            directories=(path_tree.dir("la"), path_tree.dir("x")),
            normalize=True,
        )
    )
    c = path_tree.canonical
    assert result.directories == (c("a"), c("b"), c("c"))


def test_analyze_returns_report_and_ignores_cleanup_flags(path_tree: PathTree) -> None:
    service = PathEditService()
    source = path_tree.join("a", "z", "a")
    result = service.run(
        PathEditRequest(operation=PathOperation.ANALYZE, source=source, filter=True, normalize=True)
    )
    assert result.directories == ()
    assert result.report is not None
    assert result.report.invalid_directories == (path_tree.dir("z"),)
    assert result.report.duplicate_directories == (path_tree.dir("a"),)
    assert result.report.shadowed_entries is None


def test_analyze_with_shadows_propagates_listing_errors(mocker: MockerFixture) -> None:
    probe = mocker.Mock()
    probe.is_valid_directory.return_value = True
    probe.list_file_names.side_effect = MetadataError("/a", "permission denied")
    service = PathEditService(probe=probe)

    with pytest.raises(MetadataError):
        _ = service.run(
            PathEditRequest(operation=PathOperation.ANALYZE, source="/a", shadows=True)
        )


def test_operation_from_user_input() -> None:
    assert PathOperation.from_user_input(" Append ") is PathOperation.APPEND
    with pytest.raises(ValueError, match="Valid options"):
        _ = PathOperation.from_user_input("remove")
